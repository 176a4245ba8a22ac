from __future__ import annotations

from fastapi.testclient import TestClient

from github_languages.config import AppConfig, GitHubSettings
from github_languages.errors import DataSourceError
from github_languages.models import PageResult, RepositoryRecord
from github_languages.server import create_app


def _record(language: str) -> RepositoryRecord:
    return RepositoryRecord(
        name="demo",
        url="https://github.com/octocat/demo",
        is_fork=False,
        is_archived=False,
        description="",
        language=language,
        visibility="public",
        created_at="",
        updated_at="",
        pushed_at="",
        size_kib=1024,
    )


class FakeSource:
    def __init__(self, settings: GitHubSettings, fail: bool = False) -> None:
        self.settings = settings
        self.fail = fail

    async def __aenter__(self) -> "FakeSource":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def fetch_page(self, page_size: int, page_number: int) -> PageResult:
        if self.fail:
            raise DataSourceError("Bad credentials", page=page_number)
        return PageResult(total_count=2, records=(_record("Go"), _record("Go")), page_number=page_number)


def _config() -> AppConfig:
    return AppConfig(github=GitHubSettings(username="octocat"))


def test_index_returns_html_summary():
    client = TestClient(create_app(_config(), FakeSource))

    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<tr><td>Go</td><td>2</td><td>(100.00%)</td></tr>" in response.text
    assert "<p>Total size: 2.00 MB</p>" in response.text


def test_index_returns_500_on_failure(caplog):
    client = TestClient(create_app(_config(), lambda settings: FakeSource(settings, fail=True)))

    with caplog.at_level("ERROR"):
        response = client.get("/")

    assert response.status_code == 500
    assert response.text == "Internal Server Error"
    assert "Failed to build repository summary" in caplog.text
