"""HTML export of report results."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import DictLoader, Environment, select_autoescape

from hospitalreports.templates.report_template import REPORT_TEMPLATE


if TYPE_CHECKING:
    from hospitalreports.core.models import ReportResult

logger = logging.getLogger(__name__)


class HTMLExporter:
    """Renders report results into standalone HTML pages."""

    def __init__(self, max_rows: int | None = None) -> None:
        self._max_rows = max_rows
        self._env: Environment | None = None

    def _get_env(self) -> Environment:
        if self._env is None:
            self._env = Environment(
                loader=DictLoader({"report.html": REPORT_TEMPLATE}),
                autoescape=select_autoescape(["html", "xml"]),
            )
        return self._env

    def render(self, result: ReportResult) -> str:
        template = self._get_env().get_template("report.html")
        return template.render(**result.to_template_data(self._max_rows))

    def export(self, result: ReportResult, output_path: str | Path) -> Path:
        """Write the rendered report and return its absolute path."""
        html_content = self.render(result)
        output = Path(output_path)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html_content, encoding="utf-8")
        logger.info("Wrote %s report to %s", result.report, output)
        return output.absolute()
