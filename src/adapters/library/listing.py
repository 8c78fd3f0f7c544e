"""Extracción de identificadores del listado y filtrado por query.

El listado no tiene API: buscamos en el HTML crudo cualquier referencia
`<library_path>/<token>`. El filtro es local, sobre el listado completo; el
endpoint `/search` del sitio también busca en descripciones y devuelve
modelos que no tienen nada que ver con la query.
"""

from __future__ import annotations

import re
from typing import Iterable

IDENTIFIER_CHARS = r"[A-Za-z0-9._:-]+"


def _identifier_pattern(library_path: str) -> re.Pattern[str]:
    prefix = "/" + library_path.strip("/") + "/"
    return re.compile(re.escape(prefix) + f"({IDENTIFIER_CHARS})")


def extract_identifiers(content: str, *, library_path: str = "/library") -> list[str]:
    """Identificadores únicos del listado, en orden ascendente."""

    found: set[str] = set()
    for match in _identifier_pattern(library_path).finditer(content):
        identifier = match.group(1).removesuffix(":")
        if identifier:
            found.add(identifier)
    return sorted(found)


def filter_identifiers(identifiers: Iterable[str], query: str) -> list[str]:
    """Substring case-insensitive; conserva el orden de entrada."""

    needle = query.strip().lower()
    return [identifier for identifier in identifiers if needle in identifier.lower()]
