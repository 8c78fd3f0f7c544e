"""Errores del dominio.

Solo se modelan como excepción los fallos reales de I/O. Que un campo no
aparezca en el HTML no es un error: se representa con `N/A`.
"""

from __future__ import annotations


class FetchError(Exception):
    """Fallo de red, timeout o status no-2xx al pedir una página."""

    def __init__(self, url: str, *, status_code: int | None = None, reason: str = "") -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        detail = f"HTTP {status_code}" if status_code is not None else (reason or "request failed")
        super().__init__(f"{url}: {detail}")


class ModelManagerError(Exception):
    """El gestor de modelos local no está disponible o falló al ejecutarse."""
