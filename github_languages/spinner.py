"""Terminal progress indicator shown while pages download."""

from __future__ import annotations

import asyncio
import contextlib
import sys
from typing import TextIO


class Spinner:
    """Async context manager that redraws ``Downloading: <frame>`` in place."""

    FRAMES = ("-", "\\", "|", "/")

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        label: str = "Downloading",
        interval: float = 0.1,
        enabled: bool | None = None,
    ) -> None:
        self._stream = stream or sys.stdout
        self._label = label
        self._interval = interval
        if enabled is None:
            enabled = bool(getattr(self._stream, "isatty", lambda: False)())
        self._enabled = enabled
        self._index = 0
        self._task: asyncio.Task[None] | None = None

    async def __aenter__(self) -> "Spinner":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        await self.stop()

    def start(self) -> None:
        if self._enabled and self._task is None:
            self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        self._clear()

    def frame(self) -> str:
        """Advance to and return the next line to draw."""

        text = f"{self._label}: {self.FRAMES[self._index]}"
        self._index = (self._index + 1) % len(self.FRAMES)
        return text

    async def _run(self) -> None:
        while True:
            self._stream.write("\r\x1b[2K" + self.frame())
            self._stream.flush()
            await asyncio.sleep(self._interval)

    def _clear(self) -> None:
        self._stream.write("\r\x1b[2K")
        self._stream.flush()


__all__ = ["Spinner"]
