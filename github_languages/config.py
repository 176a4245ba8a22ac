"""Application configuration helpers."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field, PositiveInt


DEFAULT_API_URL = "https://api.github.com"


class GitHubSettings(BaseModel):
    """Configuration options for the GitHub search API."""

    username: str | None = Field(default=None, description="Account whose repositories are summarized.")
    token: str | None = Field(default=None, description="Personal access token or GitHub Actions token.")
    api_url: str = Field(default=DEFAULT_API_URL)
    page_size: PositiveInt = Field(default=20, le=100, description="Number of repositories fetched per search request.")
    request_timeout: float = Field(default=30.0, ge=1.0, description="Timeout for a single HTTP request in seconds.")


class ServerSettings(BaseModel):
    """Where the HTML summary is served."""

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000, ge=1, le=65535)


class AppConfig(BaseModel):
    """Root configuration container."""

    github: GitHubSettings = Field(default_factory=GitHubSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    @classmethod
    def from_env(cls, env: dict[str, str] | None = None, overrides: dict[str, Any] | None = None) -> "AppConfig":
        """Construct a configuration object from environment variables."""

        env = env if env is not None else os.environ
        overrides = overrides or {}

        github = GitHubSettings(
            username=overrides.get("github_username") or env.get("GH_USERNAME") or env.get("GITHUB_USER"),
            token=overrides.get("github_token") or env.get("GH_TOKEN") or env.get("GITHUB_TOKEN"),
            api_url=overrides.get("github_api_url") or env.get("GITHUB_API_URL") or DEFAULT_API_URL,
            page_size=int(overrides.get("github_page_size") or env.get("GITHUB_PAGE_SIZE", 20)),
            request_timeout=float(overrides.get("github_request_timeout") or env.get("GITHUB_REQUEST_TIMEOUT", 30.0)),
        )

        server = ServerSettings(
            host=overrides.get("server_host") or env.get("HOST") or "127.0.0.1",
            port=int(overrides.get("server_port") or env.get("PORT", 3000)),
        )

        return cls(github=github, server=server)


__all__ = [
    "AppConfig",
    "DEFAULT_API_URL",
    "GitHubSettings",
    "ServerSettings",
]
