"""Language utilities for ollama-cli.

This module centralizes the language options supported by the CLI
messages. Keeping it in the domain layer allows both configuration and
the CLI layer to share a single source of truth without creating
circular imports.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    SPANISH = "es"

    def label(self) -> str:
        """Human readable label for diagnostics."""

        return "Spanish" if self is Language.SPANISH else "English"
