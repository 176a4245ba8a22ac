"""Wires a data source through the collector and the aggregator."""

from __future__ import annotations

import logging
from typing import Protocol

from .aggregator import aggregate
from .collector import collect_all
from .models import AggregationResult, PageResult

LOGGER = logging.getLogger(__name__)


class DataSource(Protocol):
    async def fetch_page(self, page_size: int, page_number: int) -> PageResult:
        ...


async def summarize_account(data_source: DataSource, page_size: int) -> AggregationResult:
    """Fetch every repository page and aggregate the records."""

    records = await collect_all(page_size, data_source.fetch_page)
    LOGGER.info("Fetched %s repositories", len(records))
    result = aggregate(records)
    LOGGER.debug(
        "Aggregated %s languages, %s KiB in total",
        len(result.languages),
        result.total_size_kib,
    )
    return result


__all__ = ["DataSource", "summarize_account"]
