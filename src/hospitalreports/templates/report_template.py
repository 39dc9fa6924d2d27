"""Default HTML report template."""

REPORT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Hospital Report - {{ title }}</title>
    <style>
        :root {
            --primary: #2563eb; --gray-100: #f3f4f6; --gray-200: #e5e7eb; --gray-700: #374151; --gray-900: #111827;
        }
        body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            line-height: 1.6; color: var(--gray-900); max-width: 1200px; margin: 0 auto; padding: 2rem; background: var(--gray-100); }
        .header { background: white; padding: 2rem; border-radius: 8px; margin-bottom: 2rem; box-shadow: 0 1px 3px rgba(0,0,0,0.1); }
        h1 { color: var(--primary); margin: 0 0 0.5rem 0; }
        .meta { color: var(--gray-700); font-size: 0.9rem; }
        .stats { display: flex; gap: 2rem; margin-top: 1rem; }
        .stat { background: var(--gray-100); padding: 0.5rem 1rem; border-radius: 4px; }
        .stat-value { font-size: 1.5rem; font-weight: bold; color: var(--primary); }
        .stat-label { font-size: 0.75rem; color: var(--gray-700); }
        .result { background: white; padding: 1.5rem; border-radius: 8px; margin-bottom: 1.5rem; box-shadow: 0 1px 3px rgba(0,0,0,0.1); }
        .result-table { width: 100%; border-collapse: collapse; font-size: 0.85rem; }
        .result-table th { background: var(--gray-200); padding: 0.5rem; text-align: left; border-bottom: 1px solid var(--gray-700); }
        .result-table td { padding: 0.5rem; border-bottom: 1px solid var(--gray-200); }
        .sql-block { background: var(--gray-900); color: #e5e7eb; padding: 1rem; border-radius: 4px; overflow-x: auto;
            font-family: 'Monaco', 'Menlo', monospace; font-size: 0.875rem; white-space: pre; }
        .empty { color: var(--gray-700); padding: 0.5rem; background: var(--gray-100); border-radius: 4px; }
    </style>
</head>
<body>
    <div class="header">
        <h1>{{ title }}</h1>
        <p class="meta">Report: {{ report }} &middot; Generated: {{ generated_at }} &middot; {{ elapsed }}</p>
        {% if parameters %}
        <p class="meta">Parameters: {% for key, value in parameters.items() %}{{ key }}={{ value }}{% if not loop.last %}, {% endif %}{% endfor %}</p>
        {% endif %}
        <div class="stats">
            <div class="stat"><div class="stat-value">{{ row_count }}</div><div class="stat-label">Rows</div></div>
            <div class="stat"><div class="stat-value">{{ columns | length }}</div><div class="stat-label">Columns</div></div>
        </div>
    </div>
    <div class="result">
        {% if rows %}
        <table class="result-table">
            <thead><tr>{% for col in columns %}<th>{{ col }}</th>{% endfor %}</tr></thead>
            <tbody>
            {% for row in rows %}
                <tr>{% for col in columns %}<td>{{ row[col] if row[col] is not none else '' }}</td>{% endfor %}</tr>
            {% endfor %}
            </tbody>
        </table>
        {% if row_count > shown %}<p class="meta">Showing first {{ shown }} of {{ row_count }} rows</p>{% endif %}
        {% else %}
        <div class="empty">No rows returned</div>
        {% endif %}
    </div>
    <div class="result">
        <h3>SQL</h3>
        <div class="sql-block">{{ sql }}</div>
    </div>
</body>
</html>"""
