"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import HttpFetcher
from adapters.ollama_manager import OllamaManager
from core.config import AppSettings, get_user_env_file
from core.domain.errors import FetchError

_console = Console()


async def _check_catalog(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with HttpFetcher(settings) as fetcher:
            status = await fetcher.status(settings.library_url)
    except FetchError as exc:
        return False, str(exc)
    return status == 200, f"HTTP {status}"


def _check_manager(settings: AppSettings) -> tuple[bool, str]:
    manager = OllamaManager(settings)
    if not manager.is_available():
        return False, f"'{settings.ollama_binary}' not found in PATH"
    return True, f"{len(manager.list_installed())} models installed"


def run() -> None:
    """Run baseline diagnostics: library reachability, local ollama, config."""

    settings = AppSettings()

    table = Table(title="ollama-cli doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_http, detail_http = asyncio.run(_check_catalog(settings))
    table.add_row("Library listing", "OK" if ok_http else "FAIL", f"{settings.library_url} ({detail_http})")

    ok_manager, detail_manager = _check_manager(settings)
    table.add_row("Model manager", "OK" if ok_manager else "OPTIONAL", detail_manager)

    # Config
    table.add_row("Language", "OK", f"{settings.language.value} ({settings.language.label()})")
    table.add_row("Search limit", "OK", str(settings.search_limit))
    table.add_row("Context lines", "OK", str(settings.context_lines))
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "NONE", str(get_user_env_file()))

    _console.print(table)

    if not ok_manager:
        _console.print(
            "\n[yellow]Note:[/yellow] `search`, `tags` and `exists` work without ollama; "
            "`pull` and `installed` need it."
        )
    if not ok_http:
        raise typer.Exit(1)
