"""Export module - File renderings of report results."""

from __future__ import annotations

from hospitalreports.export.html import HTMLExporter


__all__ = ["HTMLExporter"]
