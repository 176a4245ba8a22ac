from __future__ import annotations

import typer

from github_languages.models import AggregationResult
from github_languages.render import SEPARATOR, render_html, render_terminal


RESULT = AggregationResult(languages={"Go": 2, "Rust": 1}, total_repositories=3, total_size_kib=3072)


def test_render_terminal_plain_layout():
    lines = render_terminal(RESULT, color=False)

    assert lines == [
        SEPARATOR,
        "Number of repositories: 3",
        SEPARATOR,
        "Go: 2 (66.67%)",
        "Rust: 1 (33.33%)",
        SEPARATOR,
        "Total size: 3.00 MB",
    ]


def test_render_terminal_colors_counts_and_percentages():
    lines = render_terminal(RESULT)

    cyan_rule = typer.style(SEPARATOR, fg=typer.colors.CYAN)
    assert lines[0] == cyan_rule
    assert lines[2] == cyan_rule
    assert lines[-2] == cyan_rule
    assert typer.style("2", fg=typer.colors.CYAN) in lines[3]
    assert typer.style("(66.67%)", fg=typer.colors.MAGENTA) in lines[3]
    assert lines[-1] == "Total size: " + typer.style("3.00 MB", fg=typer.colors.MAGENTA)


def test_render_html_table():
    document = render_html(RESULT)

    assert document.startswith("<!DOCTYPE html>")
    assert "<title>Github Data</title>" in document
    assert "<h2>GitHub Repository Data</h2>" in document
    assert "<tr><th>Language</th><th>Count</th><th>Percentage</th></tr>" in document
    assert "<tr><td>Number of repositories</td><td>3</td><td></td></tr>" in document
    assert "<tr><td>Go</td><td>2</td><td>(66.67%)</td></tr>" in document
    assert "<p>Total size: 3.00 MB</p>" in document
    assert document.index(">Go<") < document.index(">Rust<")


def test_render_html_escapes_language_names():
    result = AggregationResult(languages={"<script>": 1}, total_repositories=1)

    assert "&lt;script&gt;" in render_html(result)
    assert "<script>" not in render_html(result)


def test_render_empty_result_has_zero_totals():
    lines = render_terminal(AggregationResult(), color=False)

    assert lines == [SEPARATOR, "Number of repositories: 0", SEPARATOR, SEPARATOR, "Total size: 0.00 MB"]
