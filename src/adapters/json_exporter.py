"""Exportación JSON de resultados de búsqueda.

Por qué JSON:
- Interoperabilidad con `jq` y scripts que no quieren parsear la tabla.
"""

from __future__ import annotations

import json

from core.domain.models import SearchResult


def search_result_to_json(result: SearchResult) -> str:
    """Serializa los `TagRecord` como array JSON estable (vacío si no hay resultados)."""

    payload = [record.model_dump(mode="json") for record in result.records]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
