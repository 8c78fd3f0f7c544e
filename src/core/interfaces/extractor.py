"""Contrato del extractor de detalle.

El HTML del catálogo no tiene estructura estable; el algoritmo heurístico
queda detrás de este contrato para poder cambiarlo por un parser real sin
tocar a los llamadores.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import TagRecord


@runtime_checkable
class DetailExtractor(Protocol):
    def extract_details(self, model: str, content: str) -> list[TagRecord]:
        """Devuelve al menos un `TagRecord` para una página de detalle válida."""

        ...

    def extract_tags(self, model: str, content: str) -> list[str]:
        """Tags explícitas encontradas en la página (puede ser vacío)."""

        ...
