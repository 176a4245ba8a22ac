"""Display ordering shared by the terminal and HTML presenters."""

from __future__ import annotations

from dataclasses import dataclass

from .models import TOTAL_KEY, AggregationResult


SIZE_UNIT = "MB"


@dataclass(slots=True, frozen=True)
class SummaryRow:
    label: str
    count: int
    percentage: str | None

    @property
    def is_total(self) -> bool:
        return self.percentage is None


def format_percentage(count: int, total: int) -> str:
    if total == 0:
        return f"{0:.2f}"
    return f"{count / total * 100:.2f}"


def format_size(size_kib: int) -> str:
    """Convert the API's KiB figure into the displayed unit."""

    return f"{size_kib / 1024:.2f} {SIZE_UNIT}"


def sorted_view(result: AggregationResult) -> list[SummaryRow]:
    """Rows ordered by count descending.

    ``sorted`` is stable, so equal counts keep the insertion order of
    :attr:`AggregationResult.counts`. The ``"Number of repositories"`` row
    carries no percentage.
    """

    entries = sorted(result.counts.items(), key=lambda item: item[1], reverse=True)
    rows = []
    for label, count in entries:
        if label == TOTAL_KEY:
            rows.append(SummaryRow(label=label, count=count, percentage=None))
        else:
            rows.append(
                SummaryRow(
                    label=label,
                    count=count,
                    percentage=format_percentage(count, result.total_repositories),
                )
            )
    return rows


__all__ = ["SIZE_UNIT", "SummaryRow", "format_percentage", "format_size", "sorted_view"]
