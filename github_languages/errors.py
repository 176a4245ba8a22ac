"""Exceptions raised by the collection pipeline."""

from __future__ import annotations


class DataSourceError(RuntimeError):
    """Raised when a page of repositories cannot be retrieved."""

    def __init__(self, message: str, *, page: int | None = None) -> None:
        self.page = page
        if page is not None:
            message = f"page {page}: {message}"
        super().__init__(message)


class AggregationError(RuntimeError):
    """Raised when repository records cannot be aggregated."""


__all__ = ["AggregationError", "DataSourceError"]
