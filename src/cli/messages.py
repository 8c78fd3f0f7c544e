"""Mensajes localizados de la CLI (en/es).

El idioma llega explícito (flag/config) a `Messages`; no hay estado global.
"""

from __future__ import annotations

from enum import Enum

from core.domain.language import Language


class MessageKey(str, Enum):
    NOT_FOUND = "not_found"
    DOWNLOADING = "downloading"
    INSTALLED = "installed"
    NEED_ARG = "need_arg"
    CATALOG_UNAVAILABLE = "catalog_unavailable"
    MANAGER_MISSING = "manager_missing"


_USAGE_EN = """\
Usage:
  ollama-cli search <text|model> [--limit N] [--lang en|es] [--json]
     - Searches the web library and prints one row per "model:tag".

  ollama-cli exists <model>
     - Prints "yes"/"no" if the model exists in the remote library.

  ollama-cli tags <model>
     - Prints tags of the model (one per line).

  ollama-cli pull <model[:tag]>
     - Runs "ollama pull" if it exists and isn't installed.

  ollama-cli installed
     - Shows local models (same as "ollama list").

  ollama-cli doctor
     - Checks library connectivity and the local ollama executable.

Options:
  --limit N      Limit how many models are processed by "search" (default 50)
  --lang en|es   Message language (default: en; also OLLAMA_CLI_LANG)
  -h, --help     Show this help
Notes:
  - There is no official endpoint to list the remote catalog; this scrapes /library and /library/<model>.
"""

_USAGE_ES = """\
Uso:
  ollama-cli search <texto|modelo> [--limit N] [--lang en|es] [--json]
     - Busca modelos en la librería web y muestra una fila por "modelo:tag".

  ollama-cli exists <modelo>
     - Devuelve "yes"/"no" si existe en la librería remota.

  ollama-cli tags <modelo>
     - Lista sólo las tags de ese modelo (una por línea).

  ollama-cli pull <modelo[:tag]>
     - Hace "ollama pull" si existe y no está instalado.

  ollama-cli installed
     - Muestra modelos locales (equivale a "ollama list").

  ollama-cli doctor
     - Comprueba la conexión con la librería y el ejecutable ollama local.

Opciones:
  --limit N      Limita cuántos modelos procesa en "search" (por defecto 50)
  --lang en|es   Idioma de mensajes (por defecto: en; también OLLAMA_CLI_LANG)
  -h, --help     Muestra esta ayuda
Notas:
  - No hay endpoint oficial para listar el catálogo remoto; se usa HTML de /library y /library/<modelo>.
"""

_CATALOG: dict[Language, dict[MessageKey, str]] = {
    Language.ENGLISH: {
        MessageKey.NOT_FOUND: "Not found in library:",
        MessageKey.DOWNLOADING: "Downloading",
        MessageKey.INSTALLED: "Already installed:",
        MessageKey.NEED_ARG: "Missing argument.",
        MessageKey.CATALOG_UNAVAILABLE: "Could not fetch the library listing:",
        MessageKey.MANAGER_MISSING: "The model manager is not available:",
    },
    Language.SPANISH: {
        MessageKey.NOT_FOUND: "No encontrado en la librería:",
        MessageKey.DOWNLOADING: "Descargando",
        MessageKey.INSTALLED: "Ya instalado:",
        MessageKey.NEED_ARG: "Falta argumento.",
        MessageKey.CATALOG_UNAVAILABLE: "No se pudo obtener el listado de la librería:",
        MessageKey.MANAGER_MISSING: "El gestor de modelos no está disponible:",
    },
}


class Messages:
    def __init__(self, language: Language = Language.ENGLISH) -> None:
        self.language = language

    def get(self, key: MessageKey) -> str:
        return _CATALOG[self.language][key]

    def usage(self) -> str:
        return _USAGE_ES if self.language is Language.SPANISH else _USAGE_EN
