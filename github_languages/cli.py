"""Command line interface for the GitHub language summary."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer
from dotenv import load_dotenv

from .config import AppConfig
from .errors import AggregationError, DataSourceError
from .github_client import GitHubSearchClient
from .models import AggregationResult
from .render import render_html, render_terminal
from .service import summarize_account
from .spinner import Spinner

LOGGER = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _load_config(overrides: dict) -> AppConfig:
    load_dotenv()
    config = AppConfig.from_env(overrides=overrides)
    if not config.github.username:
        raise typer.BadParameter("A GitHub username is required (--username or GH_USERNAME)")
    return config


@app.command("summary")
def summary(
    username: Optional[str] = typer.Option(None, help="Account whose repositories are summarized"),
    github_token: Optional[str] = typer.Option(None, envvar="GH_TOKEN", help="GitHub token"),
    page_size: Optional[int] = typer.Option(None, min=1, max=100, help="Repositories per page"),
    format: str = typer.Option("text", help="Output format: text or html"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colors"),
    no_spinner: bool = typer.Option(False, "--no-spinner", help="Hide the download spinner"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
) -> None:
    """Print per-language repository counts and the total size."""

    configure_logging(log_level)
    if format.lower() not in {"text", "html"}:
        raise typer.BadParameter("Format must be 'text' or 'html'")

    overrides = {}
    if username:
        overrides["github_username"] = username
    if github_token:
        overrides["github_token"] = github_token
    if page_size:
        overrides["github_page_size"] = page_size
    config = _load_config(overrides)

    async def runner() -> AggregationResult:
        async with GitHubSearchClient(config.github) as client:
            async with Spinner(enabled=False if no_spinner else None):
                return await summarize_account(client, config.github.page_size)

    try:
        result = asyncio.run(runner())
    except (DataSourceError, AggregationError) as exc:
        typer.secho(f"Error: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    if format.lower() == "html":
        typer.echo(render_html(result), nl=False)
        return
    for line in render_terminal(result, color=not no_color):
        typer.echo(line)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Interface to bind"),
    port: Optional[int] = typer.Option(None, help="Port to listen on"),
    username: Optional[str] = typer.Option(None, help="Account whose repositories are summarized"),
    github_token: Optional[str] = typer.Option(None, envvar="GH_TOKEN", help="GitHub token"),
    log_level: str = typer.Option("INFO", help="Logging level"),
) -> None:
    """Serve the summary as an HTML page."""

    import uvicorn

    from .server import create_app

    configure_logging(log_level)
    overrides: dict = {}
    if host:
        overrides["server_host"] = host
    if port:
        overrides["server_port"] = port
    if username:
        overrides["github_username"] = username
    if github_token:
        overrides["github_token"] = github_token
    config = _load_config(overrides)

    LOGGER.info("Server is listening on port %s", config.server.port)
    uvicorn.run(
        create_app(config),
        host=config.server.host,
        port=config.server.port,
        log_level=log_level.lower(),
    )


__all__ = ["app", "configure_logging"]
