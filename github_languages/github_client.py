"""HTTP client for GitHub's repository search API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import GitHubSettings
from .errors import DataSourceError
from .models import PageResult, RepositoryRecord

LOGGER = logging.getLogger(__name__)

SEARCH_PATH = "/search/repositories"


def build_search_query(username: str) -> str:
    return f"user:{username}"


def build_headers(token: str | None) -> dict[str, str]:
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": "github-languages",
    }
    if token:
        headers["Authorization"] = f"token {token}"
    return headers


class GitHubSearchClient:
    """Fetches single pages of an account's repositories. No retries."""

    def __init__(self, settings: GitHubSettings, client: httpx.AsyncClient | None = None) -> None:
        if not settings.username:
            raise ValueError("A GitHub username is required")
        self._settings = settings
        self._endpoint = settings.api_url.rstrip("/") + SEARCH_PATH
        self._headers = build_headers(settings.token)
        self._client = client or httpx.AsyncClient(
            headers=self._headers,
            timeout=settings.request_timeout,
        )
        self._owns_client = client is None

    async def __aenter__(self) -> "GitHubSearchClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch_page(self, page_size: int, page_number: int) -> PageResult:
        """Request one page of search results and normalize its items."""

        params = {
            "q": build_search_query(self._settings.username or ""),
            "per_page": page_size,
            "page": page_number,
        }
        LOGGER.debug("Requesting page %s (per_page=%s)", page_number, page_size)
        try:
            response = await self._client.get(self._endpoint, params=params, headers=self._headers)
        except httpx.RequestError as exc:
            raise DataSourceError(f"request failed: {exc}", page=page_number) from exc

        if response.is_error:
            raise DataSourceError(
                f"GitHub responded with HTTP {response.status_code}: {_error_message(response)}",
                page=page_number,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise DataSourceError("response body is not valid JSON", page=page_number) from exc

        return parse_page(payload, page_number)


def parse_page(payload: Any, page_number: int) -> PageResult:
    """Turn a search response body into a :class:`PageResult`."""

    if not isinstance(payload, dict):
        raise DataSourceError("response body is not a JSON object", page=page_number)
    if "total_count" not in payload or "items" not in payload:
        raise DataSourceError("response payload missing 'total_count' or 'items'", page=page_number)

    items = payload["items"]
    if not isinstance(items, list):
        raise DataSourceError("'items' is not a list", page=page_number)
    try:
        total_count = int(payload["total_count"])
        records = tuple(RepositoryRecord.from_api(item) for item in items)
    except (KeyError, TypeError, ValueError) as exc:
        raise DataSourceError(f"malformed repository item: {exc!r}", page=page_number) from exc

    for record in records:
        if record.size_kib < 0:
            raise DataSourceError(f"repository {record.name!r} reports negative size {record.size_kib}", page=page_number)

    return PageResult(total_count=total_count, records=records, page_number=page_number)


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.reason_phrase or "no details"
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return response.reason_phrase or "no details"


__all__ = ["GitHubSearchClient", "build_headers", "build_search_query", "parse_page"]
