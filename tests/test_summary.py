from __future__ import annotations

from github_languages.models import AggregationResult
from github_languages.summary import format_percentage, format_size, sorted_view


def test_sorted_view_breaks_ties_by_insertion_order():
    result = AggregationResult(languages={"A": 5, "B": 5, "C": 3}, total_repositories=13)

    rows = sorted_view(result)

    assert [row.label for row in rows] == ["Number of repositories", "A", "B", "C"]
    assert [row.percentage for row in rows] == [None, "38.46", "38.46", "23.08"]


def test_sorted_view_keeps_language_ahead_of_equal_total():
    result = AggregationResult(languages={"Go": 4}, total_repositories=4)

    rows = sorted_view(result)

    assert [(row.label, row.count, row.percentage) for row in rows] == [
        ("Go", 4, "100.00"),
        ("Number of repositories", 4, None),
    ]
    assert rows[1].is_total


def test_format_percentage_guards_zero_total():
    assert format_percentage(0, 0) == "0.00"
    assert format_percentage(1, 3) == "33.33"


def test_format_size_converts_to_megabytes():
    assert format_size(0) == "0.00 MB"
    assert format_size(1536) == "1.50 MB"
