"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los registros extraídos del HTML son best-effort: el modelo fija qué campos
  existen y cuál es el centinela cuando no se encuentran.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

NOT_AVAILABLE = "N/A"
DEFAULT_TAG = "latest"


class TagRecord(BaseModel):
    """Una variante (tag) de un modelo del catálogo.

    `params` y `size` son texto libre tal como aparece en la página
    (p.ej. "7B", "3.8 GB"), o `N/A` cuando no se encontró.
    """

    model_config = ConfigDict(frozen=True)

    model: str = Field(
        ...,
        min_length=1,
        description="Identificador del modelo en el catálogo.",
    )
    tag: str = Field(
        ...,
        min_length=1,
        description="Nombre de la variante (p.ej. '8b', 'latest').",
    )
    params: str = Field(
        default=NOT_AVAILABLE,
        min_length=1,
        description="Número de parámetros aproximado (p.ej. '7B').",
    )
    size: str = Field(
        default=NOT_AVAILABLE,
        min_length=1,
        description="Tamaño de descarga aproximado (p.ej. '3.8GB').",
    )

    @property
    def has_metadata(self) -> bool:
        return self.params != NOT_AVAILABLE or self.size != NOT_AVAILABLE

    def sort_key(self) -> tuple[str, str, str, str]:
        return (self.model, self.tag, self.params, self.size)

    def as_row(self) -> tuple[str, str, str, str]:
        return (self.model, self.tag, self.params, self.size)


class CatalogPage(BaseModel):
    """Contenido crudo de una página del catálogo (listado o detalle).

    Es efímero: lo produce el fetcher y se descarta tras la extracción.
    """

    url: str
    status_code: int = Field(..., ge=100, le=599)
    content: str = ""


class SearchResult(BaseModel):
    """Resultado de una invocación de `search`.

    `records` ya viene deduplicado y ordenado por (model, tag).
    """

    query: str
    identifiers: list[str] = Field(
        default_factory=list,
        description="Identificadores procesados (tras filtro y límite).",
    )
    records: list[TagRecord] = Field(default_factory=list)
    skipped: list[str] = Field(
        default_factory=list,
        description="Identificadores cuya página de detalle no se pudo obtener.",
    )
    warnings: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.records
