"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers para todas las peticiones al catálogo.
- Facilita testeo: se puede inyectar un transport mock (`httpx.MockTransport`).
"""

from __future__ import annotations

from types import TracebackType

import httpx

from core.config import AppSettings
from core.domain.errors import FetchError
from core.domain.models import CatalogPage


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las peticiones se comporten igual.
    - Sin reintentos: un fallo es definitivo para esa URL en esta invocación.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpFetcher:
    """`PageFetcher` sobre un único `httpx.AsyncClient` compartido.

    Se usa como context manager async para que las tareas concurrentes de
    `search` reutilicen el mismo pool de conexiones.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "HttpFetcher":
        self._client = build_async_client(self._settings, transport=self._transport)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _require_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("HttpFetcher must be used as an async context manager")
        return self._client

    async def _get(self, url: str) -> httpx.Response:
        client = self._require_client()
        try:
            return await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(url, reason=f"{exc.__class__.__name__}: {exc}") from exc

    async def fetch(self, url: str) -> CatalogPage:
        response = await self._get(url)
        if not response.is_success:
            raise FetchError(url, status_code=response.status_code)
        return CatalogPage(url=url, status_code=response.status_code, content=response.text)

    async def status(self, url: str) -> int:
        response = await self._get(url)
        return response.status_code
