"""Gestor de modelos local: el ejecutable `ollama`.

Por qué subprocess y no la API HTTP local:
- `ollama list` / `ollama pull` funcionan aunque el servicio no esté
  expuesto en un puerto conocido, y `pull` ya muestra su propio progreso.
"""

from __future__ import annotations

import shutil
import subprocess

from core.config import AppSettings
from core.domain.errors import ModelManagerError

LIST_TIMEOUT_SECONDS = 30


def parse_list_output(output: str) -> set[str]:
    """Primera columna de `ollama list`, sin la cabecera `NAME`."""

    names: set[str] = set()
    for line in output.splitlines():
        parts = line.split()
        if not parts or parts[0].upper() == "NAME":
            continue
        names.add(parts[0])
    return names


class OllamaManager:
    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()
        self._binary = self._settings.ollama_binary

    def _resolve(self) -> str | None:
        return shutil.which(self._binary)

    def is_available(self) -> bool:
        return self._resolve() is not None

    def _require(self) -> str:
        path = self._resolve()
        if path is None:
            raise ModelManagerError(f"'{self._binary}' not found in PATH")
        return path

    def list_installed(self) -> set[str]:
        # Sin gestor instalado no hay nada instalado.
        path = self._resolve()
        if path is None:
            return set()
        try:
            result = subprocess.run(
                [path, "list"],
                capture_output=True,
                text=True,
                timeout=LIST_TIMEOUT_SECONDS,
                check=False,
            )
        except (subprocess.TimeoutExpired, OSError):
            return set()
        if result.returncode != 0:
            return set()
        return parse_list_output(result.stdout)

    def pull(self, model: str) -> int:
        path = self._require()
        try:
            return subprocess.run([path, "pull", model], check=False).returncode
        except OSError as exc:
            raise ModelManagerError(str(exc)) from exc

    def show_installed(self) -> int:
        path = self._require()
        try:
            return subprocess.run([path, "list"], check=False).returncode
        except OSError as exc:
            raise ModelManagerError(str(exc)) from exc
