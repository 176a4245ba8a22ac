from __future__ import annotations

import asyncio
import io

from github_languages.spinner import Spinner


def test_spinner_cycles_frames():
    spinner = Spinner(io.StringIO(), enabled=True)

    frames = [spinner.frame() for _ in range(5)]

    assert frames == [
        "Downloading: -",
        "Downloading: \\",
        "Downloading: |",
        "Downloading: /",
        "Downloading: -",
    ]


def test_spinner_draws_and_clears_line():
    stream = io.StringIO()

    async def scenario() -> None:
        async with Spinner(stream, interval=0.01, enabled=True):
            await asyncio.sleep(0.05)

    asyncio.run(scenario())

    output = stream.getvalue()
    assert "Downloading: -" in output
    assert output.endswith("\r\x1b[2K")


def test_spinner_disabled_for_non_tty_streams():
    stream = io.StringIO()

    async def scenario() -> None:
        async with Spinner(stream, interval=0.01):
            await asyncio.sleep(0.02)

    asyncio.run(scenario())

    assert stream.getvalue() == ""
