"""Single-pass language and size aggregation."""

from __future__ import annotations

from typing import Iterable

from .errors import AggregationError
from .models import AggregationResult, RepositoryRecord


class LanguageCounter:
    """Running totals, fed one record at a time."""

    def __init__(self) -> None:
        self._languages: dict[str, int] = {}
        self._total = 0
        self._size = 0

    def add(self, record: RepositoryRecord) -> None:
        if record.size_kib < 0:
            raise AggregationError(f"negative size for repository {record.name!r}: {record.size_kib}")
        self._languages[record.language] = self._languages.get(record.language, 0) + 1
        self._size += record.size_kib
        self._total += 1

    def update(self, records: Iterable[RepositoryRecord]) -> None:
        for record in records:
            self.add(record)

    def result(self) -> AggregationResult:
        return AggregationResult(
            languages=dict(self._languages),
            total_repositories=self._total,
            total_size_kib=self._size,
        )


def aggregate(records: Iterable[RepositoryRecord]) -> AggregationResult:
    """Count repositories per language and sum their sizes."""

    counter = LanguageCounter()
    counter.update(records)
    return counter.result()


__all__ = ["LanguageCounter", "aggregate"]
