"""Contrato del fetcher de páginas del catálogo.

Por qué Protocol:
- El servicio de búsqueda solo necesita "dame el contenido de esta URL".
- Los tests sustituyen la red por un fake en memoria sin herencia.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CatalogPage


@runtime_checkable
class PageFetcher(Protocol):
    """Recupera páginas del catálogo.

    Reglas de diseño:
    - Una petición por llamada; sin reintentos ni caché.
    - `fetch` es "must succeed": red/timeout/no-2xx lanzan `FetchError`.
    - `status` es "status-only": devuelve el código y descarta el cuerpo;
      solo lanza `FetchError` si no hubo respuesta.
    """

    async def fetch(self, url: str) -> CatalogPage:
        ...

    async def status(self, url: str) -> int:
        ...
