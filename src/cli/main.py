"""CLI de ollama-cli (Typer).

Por qué Typer:
- Comandos y opciones tipados sin boilerplate de argparse.
- `typer.testing.CliRunner` permite testear exit codes y salida.

La CLI solo traduce argumentos, imprime y decide exit codes; todo el trabajo
de red/extracción vive en `core.services.catalog_service`.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional

import typer
from rich.console import Console

from adapters.http_client import HttpFetcher
from adapters.json_exporter import search_result_to_json
from adapters.ollama_manager import OllamaManager
from cli import doctor
from cli.messages import MessageKey, Messages
from cli.ui_components import print_error, print_warning, render_results
from core.config import AppSettings
from core.domain.errors import FetchError, ModelManagerError
from core.domain.language import Language
from core.domain.models import SearchResult
from core.interfaces.model_manager import ModelManager
from core.services import catalog_service
from core.services.catalog_service import PullResult, PullStatus, SearchHooks, SearchRequest

app = typer.Typer(
    add_completion=False,
    add_help_option=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Search and inspect the Ollama model library from the terminal.",
)

_err_console = Console(stderr=True)

EXIT_USAGE = 1
EXIT_NOT_FOUND = 2


@dataclass
class CliState:
    language: Language | None = None
    limit: int | None = None


def load_settings() -> AppSettings:
    return AppSettings()


def build_fetcher(settings: AppSettings) -> HttpFetcher:
    return HttpFetcher(settings)


def build_manager(settings: AppSettings) -> ModelManager:
    return OllamaManager(settings)


def _state(ctx: typer.Context) -> CliState:
    if isinstance(ctx.obj, CliState):
        return ctx.obj
    return CliState()


def _messages(ctx: typer.Context, settings: AppSettings, lang: Language | None) -> Messages:
    return Messages(lang or _state(ctx).language or settings.language)


def _missing_argument(messages: Messages, *, with_usage: bool = False) -> typer.Exit:
    typer.echo(messages.get(MessageKey.NEED_ARG), err=True)
    if with_usage:
        typer.echo("", err=True)
        typer.echo(messages.usage(), err=True, nl=False)
    return typer.Exit(EXIT_USAGE)


def _not_found(messages: Messages, url: str) -> typer.Exit:
    print_error(_err_console, messages.get(MessageKey.NOT_FOUND), url)
    return typer.Exit(EXIT_NOT_FOUND)


LangOption = typer.Option(None, "--lang", help="Message language (en|es).", case_sensitive=False)


@app.callback()
def main_callback(
    ctx: typer.Context,
    lang: Optional[Language] = LangOption,
    limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Models processed by search."),
    show_help: bool = typer.Option(False, "--help", "-h", is_eager=True, help="Show this help."),
) -> None:
    ctx.obj = CliState(language=lang, limit=limit)
    if show_help or ctx.invoked_subcommand is None:
        settings = load_settings()
        typer.echo(_messages(ctx, settings, lang).usage(), nl=False)
        raise typer.Exit(0)


@app.command(name="help")
def help_command(ctx: typer.Context, lang: Optional[Language] = LangOption) -> None:
    """Show usage."""

    typer.echo(_messages(ctx, load_settings(), lang).usage(), nl=False)


@app.command()
def search(
    ctx: typer.Context,
    query: Optional[str] = typer.Argument(None, help="Text matched against model names."),
    limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Max models to process."),
    lang: Optional[Language] = LangOption,
    as_json: bool = typer.Option(False, "--json", help="Print records as a JSON array."),
) -> None:
    """Search the library by model name and list every tag found."""

    settings = load_settings()
    messages = _messages(ctx, settings, lang)
    if not query or not query.strip():
        raise _missing_argument(messages, with_usage=True)

    request = SearchRequest(
        query=query,
        limit=limit or _state(ctx).limit or settings.search_limit,
    )
    hooks = SearchHooks(warning=lambda message: print_warning(_err_console, message))

    async def _run() -> SearchResult:
        async with build_fetcher(settings) as fetcher:
            return await catalog_service.search(
                settings=settings,
                request=request,
                fetcher=fetcher,
                hooks=hooks,
            )

    try:
        result = asyncio.run(_run())
    except FetchError as exc:
        print_error(_err_console, messages.get(MessageKey.CATALOG_UNAVAILABLE), str(exc))
        raise typer.Exit(EXIT_USAGE) from exc

    if as_json:
        typer.echo(search_result_to_json(result))
        return
    if not result.is_empty:
        typer.echo(render_results(result.records))


@app.command()
def tags(
    ctx: typer.Context,
    model: Optional[str] = typer.Argument(None, help="Exact model name."),
    lang: Optional[Language] = LangOption,
) -> None:
    """Print the tags of a model, one per line."""

    settings = load_settings()
    messages = _messages(ctx, settings, lang)
    if not model:
        raise _missing_argument(messages)

    async def _run() -> list[str] | None:
        async with build_fetcher(settings) as fetcher:
            return await catalog_service.list_tags(settings=settings, fetcher=fetcher, model=model)

    try:
        found = asyncio.run(_run())
    except FetchError as exc:
        raise _not_found(messages, settings.model_url(model)) from exc

    if found is None:
        raise _not_found(messages, settings.model_url(model))
    for tag in found:
        typer.echo(tag)


@app.command()
def exists(
    ctx: typer.Context,
    model: Optional[str] = typer.Argument(None, help="Exact model name."),
    lang: Optional[Language] = LangOption,
) -> None:
    """Print "yes" or "no"."""

    settings = load_settings()
    messages = _messages(ctx, settings, lang)
    if not model:
        raise _missing_argument(messages)

    async def _run() -> bool:
        async with build_fetcher(settings) as fetcher:
            return await catalog_service.model_exists(settings=settings, fetcher=fetcher, model=model)

    typer.echo("yes" if asyncio.run(_run()) else "no")


@app.command()
def pull(
    ctx: typer.Context,
    model: Optional[str] = typer.Argument(None, help="model or model:tag"),
    lang: Optional[Language] = LangOption,
) -> None:
    """Pull a model with the local manager if it exists and isn't installed."""

    settings = load_settings()
    messages = _messages(ctx, settings, lang)
    if not model:
        raise _missing_argument(messages)

    manager = build_manager(settings)

    def _announce(name: str) -> None:
        typer.echo(f"{messages.get(MessageKey.DOWNLOADING)} {name}...")

    async def _run() -> PullResult:
        async with build_fetcher(settings) as fetcher:
            return await catalog_service.pull_model(
                settings=settings,
                fetcher=fetcher,
                manager=manager,
                model=model,
                on_download=_announce,
            )

    try:
        result = asyncio.run(_run())
    except ModelManagerError as exc:
        print_error(_err_console, messages.get(MessageKey.MANAGER_MISSING), str(exc))
        raise typer.Exit(EXIT_USAGE) from exc

    if result.status is PullStatus.ALREADY_INSTALLED:
        typer.echo(f"{messages.get(MessageKey.INSTALLED)} {result.model}")
        return
    if result.status is PullStatus.NOT_FOUND:
        raise _not_found(messages, settings.model_url(result.base_model))
    raise typer.Exit(result.exit_code)


@app.command()
def installed(ctx: typer.Context, lang: Optional[Language] = LangOption) -> None:
    """Show locally installed models (the manager's own listing)."""

    settings = load_settings()
    messages = _messages(ctx, settings, lang)
    try:
        code = build_manager(settings).show_installed()
    except ModelManagerError as exc:
        print_error(_err_console, messages.get(MessageKey.MANAGER_MISSING), str(exc))
        raise typer.Exit(EXIT_USAGE) from exc
    raise typer.Exit(code)


app.command(name="doctor")(doctor.run)


def run() -> None:
    app()
