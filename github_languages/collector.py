"""Sequential retrieval of every page of a count-bounded search."""

from __future__ import annotations

import logging
from math import ceil
from typing import AsyncIterator, Awaitable, Callable

from .errors import DataSourceError
from .models import PageResult, RepositoryRecord

LOGGER = logging.getLogger(__name__)

FetchPage = Callable[[int, int], Awaitable[PageResult]]


def last_page_number(total_count: int, page_size: int) -> int:
    return max(1, ceil(total_count / page_size))


async def iter_pages(page_size: int, fetch_page: FetchPage) -> AsyncIterator[PageResult]:
    """Yield pages ``1..ceil(total_count / page_size)`` in order.

    ``total_count`` is read from the first page only and trusted for the rest
    of the run, even if the account gains or loses repositories meanwhile.
    Each fetch completes before the next one is issued.
    """

    if page_size <= 0:
        raise ValueError(f"page_size must be a positive integer, got {page_size}")

    first = await _fetch(fetch_page, page_size, 1)
    yield first

    last_page = last_page_number(first.total_count, page_size)
    LOGGER.debug("Search reports %s repositories over %s pages", first.total_count, last_page)
    for page_number in range(2, last_page + 1):
        yield await _fetch(fetch_page, page_size, page_number)


async def collect_all(page_size: int, fetch_page: FetchPage) -> list[RepositoryRecord]:
    """Fetch every page and concatenate the records in page order."""

    records: list[RepositoryRecord] = []
    async for page in iter_pages(page_size, fetch_page):
        records.extend(page.records)
    return records


async def _fetch(fetch_page: FetchPage, page_size: int, page_number: int) -> PageResult:
    """Call ``fetch_page``; ``asyncio.CancelledError`` is re-raised as cancellation, not wrapped."""

    try:
        return await fetch_page(page_size, page_number)
    except DataSourceError:
        raise
    except Exception as exc:
        raise DataSourceError(str(exc) or type(exc).__name__, page=page_number) from exc


__all__ = ["FetchPage", "collect_all", "iter_pages", "last_page_number"]
