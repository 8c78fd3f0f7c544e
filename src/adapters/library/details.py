"""Extractor heurístico de la página de detalle de un modelo.

Estrategia (best-effort, no es un parser HTML):
1. Las tags son las apariciones de "<modelo>:<tag>" en el HTML crudo.
2. Se insertan saltos de línea tras `</a>`, `</span>` y `</div>` para que el
   HTML denso se pueda recorrer por líneas.
3. Para cada tag, el bloque de contexto es la primera línea con
   `href="<library_path>/<modelo>:<tag>"` más las `context_lines` siguientes.
4. En ese bloque se busca el primer "<número>B" (params) y el primer
   "<número> MB|GB" (tamaño). Si no aparecen: `N/A`.
"""

from __future__ import annotations

import re

from core.domain.models import DEFAULT_TAG, NOT_AVAILABLE, TagRecord

TAG_CHARS = r"[A-Za-z0-9._-]+"
DEFAULT_CONTEXT_LINES = 20

_BLOCK_END_RE = re.compile(r"(</a>|</span>|</div>)", re.IGNORECASE)
_PARAMS_RE = re.compile(r"[0-9.]+B", re.IGNORECASE)
_SIZE_RE = re.compile(r"[0-9.]+\s*[MG]B", re.IGNORECASE)


def extract_tags(model: str, content: str) -> list[str]:
    """Tags únicas de `model` en el contenido, en orden ascendente."""

    pattern = re.compile(re.escape(model) + f":({TAG_CHARS})")
    return sorted({match.group(1) for match in pattern.finditer(content)})


def split_into_lines(content: str) -> list[str]:
    """Convierte el HTML en un pseudo-documento orientado a líneas."""

    return _BLOCK_END_RE.sub(r"\1\n", content).splitlines()


def context_block(lines: list[str], anchor: str, *, context_lines: int) -> list[str]:
    for index, line in enumerate(lines):
        if anchor in line:
            return lines[index : index + 1 + context_lines]
    return []


def _first_match(pattern: re.Pattern[str], block: list[str]) -> str:
    for line in block:
        match = pattern.search(line)
        if match:
            return match.group(0)
    return NOT_AVAILABLE


class RegexDetailExtractor:
    """Implementación por regex del contrato `DetailExtractor`."""

    def __init__(
        self,
        *,
        library_path: str = "/library",
        context_lines: int = DEFAULT_CONTEXT_LINES,
    ) -> None:
        self._library_path = "/" + library_path.strip("/")
        self._context_lines = context_lines

    def extract_tags(self, model: str, content: str) -> list[str]:
        return extract_tags(model, content)

    def extract_details(self, model: str, content: str) -> list[TagRecord]:
        tags = extract_tags(model, content)
        if not tags:
            # Página válida sin tags explícitas (modelos de una sola variante).
            return [TagRecord(model=model, tag=DEFAULT_TAG)]

        lines = split_into_lines(content)
        records: list[TagRecord] = []
        for tag in tags:
            anchor = f'href="{self._library_path}/{model}:{tag}"'
            block = context_block(lines, anchor, context_lines=self._context_lines)
            records.append(
                TagRecord(
                    model=model,
                    tag=tag,
                    params=_first_match(_PARAMS_RE, block),
                    size=_first_match(_SIZE_RE, block),
                )
            )
        return records
