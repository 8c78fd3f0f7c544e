"""Contrato del gestor de modelos local (p.ej. el ejecutable `ollama`).

El Core no descarga ni lista modelos por sí mismo: delega en esta capacidad
inyectada, que en tests se reemplaza por un fake.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ModelManager(Protocol):
    def is_available(self) -> bool:
        ...

    def list_installed(self) -> set[str]:
        """Nombres instalados tal como los reporta el gestor (p.ej. 'llama3:latest')."""

        ...

    def pull(self, model: str) -> int:
        """Descarga `model` y devuelve el exit code del gestor."""

        ...

    def show_installed(self) -> int:
        """Imprime el listado nativo del gestor y devuelve su exit code."""

        ...
