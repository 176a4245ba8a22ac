"""Domain models shared by the collector, aggregator and presenters."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


UNKNOWN_LANGUAGE = "Unknown"
TOTAL_KEY = "Number of repositories"


@dataclass(slots=True, frozen=True)
class RepositoryRecord:
    """Normalized representation of a GitHub repository."""

    name: str
    url: str
    is_fork: bool
    is_archived: bool
    description: str
    language: str
    visibility: str
    created_at: str
    updated_at: str
    pushed_at: str
    size_kib: int

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "RepositoryRecord":
        """Convert a search API item into a :class:`RepositoryRecord`.

        ``language`` falls back to ``"Unknown"``; the other nullable strings
        (``description``, ``visibility``, ``pushed_at``) fall back to ``""``.
        """

        return cls(
            name=payload["name"],
            url=payload["html_url"],
            is_fork=bool(payload.get("fork", False)),
            is_archived=bool(payload.get("archived", False)),
            description=payload.get("description") or "",
            language=payload.get("language") or UNKNOWN_LANGUAGE,
            visibility=payload.get("visibility") or "",
            created_at=payload.get("created_at") or "",
            updated_at=payload.get("updated_at") or "",
            pushed_at=payload.get("pushed_at") or "",
            size_kib=int(payload.get("size") or 0),
        )


def normalize(raw: Mapping[str, Any]) -> RepositoryRecord:
    return RepositoryRecord.from_api(raw)


@dataclass(slots=True, frozen=True)
class PageResult:
    """One page of search results."""

    total_count: int
    records: tuple[RepositoryRecord, ...]
    page_number: int = 1


@dataclass(slots=True, frozen=True)
class AggregationResult:
    """Language frequencies and totals for one run.

    ``languages`` is stored as a read-only copy of the mapping passed in.
    """

    languages: Mapping[str, int] = field(default_factory=dict)
    total_repositories: int = 0
    total_size_kib: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "languages", MappingProxyType(dict(self.languages)))

    def __hash__(self) -> int:
        return hash((tuple(self.languages.items()), self.total_repositories, self.total_size_kib))

    @property
    def counts(self) -> dict[str, int]:
        """Language counts followed by the ``"Number of repositories"`` total.

        A language literally called ``"Number of repositories"`` is replaced
        by the total here; :attr:`languages` keeps its real count.
        """

        counts = dict(self.languages)
        counts[TOTAL_KEY] = self.total_repositories
        return counts


__all__ = [
    "AggregationResult",
    "PageResult",
    "RepositoryRecord",
    "TOTAL_KEY",
    "UNKNOWN_LANGUAGE",
    "normalize",
]
