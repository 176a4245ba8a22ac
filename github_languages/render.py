"""Terminal and HTML presentations of an aggregation result."""

from __future__ import annotations

import typer
from jinja2 import Environment

from .models import AggregationResult
from .summary import format_size, sorted_view


SEPARATOR = "--------------"
COUNT_COLOR = typer.colors.CYAN
PERCENT_COLOR = typer.colors.MAGENTA


def render_terminal(result: AggregationResult, *, color: bool = True) -> list[str]:
    """Return the summary as printable lines."""

    def paint(text: str, fg: str) -> str:
        return typer.style(text, fg=fg) if color else text

    rule = paint(SEPARATOR, COUNT_COLOR)
    lines = [rule]
    for row in sorted_view(result):
        count = paint(str(row.count), COUNT_COLOR)
        if row.is_total:
            lines.append(f"{row.label}: {count}")
            lines.append(rule)
        else:
            lines.append(f"{row.label}: {count} {paint(f'({row.percentage}%)', PERCENT_COLOR)}")
    lines.append(rule)
    lines.append(f"Total size: {paint(format_size(result.total_size_kib), PERCENT_COLOR)}")
    return lines


HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <title>Github Data</title>
</head>
<body>
  <h2>GitHub Repository Data</h2>
  <table border="1"><tr><th>Language</th><th>Count</th><th>Percentage</th></tr>
  {%- for row in rows %}
  <tr><td>{{ row.label }}</td><td>{{ row.count }}</td><td>{% if not row.is_total %}({{ row.percentage }}%){% endif %}</td></tr>
  {%- endfor %}
  </table>
  <p>Total size: {{ total_size }}</p>
</body>
</html>
"""

_environment = Environment(autoescape=True, keep_trailing_newline=True)
_html_template = _environment.from_string(HTML_TEMPLATE)


def render_html(result: AggregationResult) -> str:
    """Render the summary table as a standalone HTML document."""

    return _html_template.render(
        rows=sorted_view(result),
        total_size=format_size(result.total_size_kib),
    )


__all__ = ["HTML_TEMPLATE", "SEPARATOR", "render_html", "render_terminal"]
