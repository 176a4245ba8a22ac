"""HTTP endpoint serving the summary as an HTML document."""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from .config import AppConfig, GitHubSettings
from .github_client import GitHubSearchClient
from .render import render_html
from .service import summarize_account

LOGGER = logging.getLogger(__name__)

DataSourceFactory = Callable[[GitHubSettings], GitHubSearchClient]


def create_app(config: AppConfig, data_source_factory: DataSourceFactory | None = None) -> FastAPI:
    """Build the application; each request fetches a fresh summary."""

    factory = data_source_factory or GitHubSearchClient
    app = FastAPI(title="GitHub language summary")

    @app.get("/", response_class=HTMLResponse)
    async def index() -> Response:
        try:
            async with factory(config.github) as data_source:
                result = await summarize_account(data_source, config.github.page_size)
        except Exception:
            LOGGER.exception("Failed to build repository summary")
            return PlainTextResponse("Internal Server Error", status_code=500)
        return HTMLResponse(render_html(result))

    return app


__all__ = ["create_app"]
