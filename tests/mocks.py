"""
In-memory stand-ins for the network and the local model manager.

The core only talks to `PageFetcher` and `ModelManager`, so these fakes let
tests drive full search/pull flows without HTTP or subprocesses.
"""

from __future__ import annotations

import asyncio

from core.domain.errors import FetchError
from core.domain.models import CatalogPage


class FakeFetcher:
    """Serves canned pages by URL; unknown URLs behave like a 404."""

    def __init__(
        self,
        pages: dict[str, str] | None = None,
        *,
        unreachable: set[str] | None = None,
        delays: dict[str, float] | None = None,
    ) -> None:
        self.pages = dict(pages or {})
        self.unreachable = set(unreachable or ())
        self.delays = dict(delays or {})
        self.fetched: list[str] = []
        self.status_checked: list[str] = []
        self.entered = 0

    async def __aenter__(self) -> "FakeFetcher":
        self.entered += 1
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None

    async def fetch(self, url: str) -> CatalogPage:
        self.fetched.append(url)
        delay = self.delays.get(url)
        if delay:
            await asyncio.sleep(delay)
        if url in self.unreachable:
            raise FetchError(url, reason="ConnectError: connection refused")
        if url not in self.pages:
            raise FetchError(url, status_code=404)
        return CatalogPage(url=url, status_code=200, content=self.pages[url])

    async def status(self, url: str) -> int:
        self.status_checked.append(url)
        if url in self.unreachable:
            raise FetchError(url, reason="ConnectError: connection refused")
        return 200 if url in self.pages else 404


class FakeManager:
    """Records pulls instead of running `ollama`."""

    def __init__(
        self,
        installed: set[str] | None = None,
        *,
        available: bool = True,
        pull_exit_code: int = 0,
    ) -> None:
        self.installed = set(installed or ())
        self.available = available
        self.pull_exit_code = pull_exit_code
        self.pulled: list[str] = []
        self.show_calls = 0

    def is_available(self) -> bool:
        return self.available

    def list_installed(self) -> set[str]:
        return set(self.installed) if self.available else set()

    def pull(self, model: str) -> int:
        self.pulled.append(model)
        return self.pull_exit_code

    def show_installed(self) -> int:
        self.show_calls += 1
        return 0
