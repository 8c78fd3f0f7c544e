"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/ollama) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "ollama-cli"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "ollama-cli"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "ollama-cli"
    return Path.home() / ".config" / "ollama-cli"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="OLLAMA_CLI_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    library_host: str = Field(
        default="https://ollama.com",
        min_length=8,
        validation_alias=AliasChoices("OLLAMA_LIBRARY_HOST", "OLLAMA_CLI_LIBRARY_HOST"),
        description="Host de la librería web de modelos.",
    )
    library_path: str = Field(
        default="/library",
        min_length=2,
        description="Path del listado; cada modelo vive en <path>/<modelo>.",
    )
    language: Language = Field(
        default=Language.ENGLISH,
        validation_alias=AliasChoices("OLLAMA_CLI_LANG"),
        description="Idioma de los mensajes (en/es).",
    )
    search_limit: int = Field(
        default=50,
        ge=1,
        description="Máximo de modelos procesados por `search`.",
    )
    context_lines: int = Field(
        default=20,
        ge=1,
        le=500,
        description="Líneas tras el anchor de una tag donde se buscan params/tamaño.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="ollama-cli/0.1",
        min_length=1,
        description="User-Agent para peticiones a la librería.",
    )
    ollama_binary: str = Field(
        default="ollama",
        min_length=1,
        description="Ejecutable del gestor de modelos local.",
    )

    @field_validator("library_host")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @field_validator("library_path")
    @classmethod
    def _normalize_path(cls, value: str) -> str:
        path = "/" + value.strip().strip("/")
        return path

    @field_validator("language", mode="before")
    @classmethod
    def _coerce_language(cls, value: object) -> object:
        # Cualquier valor distinto de "es" (sin distinguir mayúsculas) es inglés.
        if isinstance(value, Language):
            return value
        if isinstance(value, str) and value.strip().lower() == Language.SPANISH.value:
            return Language.SPANISH
        return Language.ENGLISH

    @property
    def library_url(self) -> str:
        return f"{self.library_host}{self.library_path}"

    def model_url(self, model: str) -> str:
        return f"{self.library_url}/{model}"
