"""Catalog discovery orchestration.

The CLI delegates every network-and-extraction concern to these helpers,
which keeps side-effects (printing, exit codes) out of the core logic and
lets tests drive the whole flow with fake fetchers and model managers.

Search flow: fetch the listing once, extract identifiers, filter them
locally, then fetch and parse up to ``limit`` detail pages concurrently.
Results are merged only after every task has finished.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from adapters.library import RegexDetailExtractor, extract_identifiers, filter_identifiers
from core.config import AppSettings
from core.domain.errors import FetchError
from core.domain.models import SearchResult, TagRecord
from core.interfaces.extractor import DetailExtractor
from core.interfaces.fetcher import PageFetcher
from core.interfaces.model_manager import ModelManager


@dataclass
class SearchRequest:
    """Parameters that control one search invocation."""

    query: str
    limit: int = 50


@dataclass
class SearchHooks:
    """Optional callbacks for UI layers."""

    warning: Callable[[str], None] | None = None


@dataclass
class _ModelOutcome:
    model: str
    records: list[TagRecord] = field(default_factory=list)
    fetched: bool = True
    warning: str | None = None


class PullStatus(str, Enum):
    ALREADY_INSTALLED = "already_installed"
    NOT_FOUND = "not_found"
    PULLED = "pulled"


@dataclass
class PullResult:
    status: PullStatus
    model: str
    base_model: str
    exit_code: int = 0


def build_extractor(settings: AppSettings) -> DetailExtractor:
    return RegexDetailExtractor(
        library_path=settings.library_path,
        context_lines=settings.context_lines,
    )


def base_model_name(model: str) -> str:
    """`llama3:8b` -> `llama3`."""

    return model.split(":", 1)[0]


def merge_records(batches: list[list[TagRecord]]) -> list[TagRecord]:
    """Deduplicate and sort by (model, tag)."""

    unique = {record for batch in batches for record in batch}
    return sorted(unique, key=TagRecord.sort_key)


async def search(
    *,
    settings: AppSettings,
    request: SearchRequest,
    fetcher: PageFetcher,
    extractor: DetailExtractor | None = None,
    hooks: SearchHooks | None = None,
) -> SearchResult:
    """Run one catalog search.

    A `FetchError` on the listing page propagates: without the listing
    there is nothing to filter. Detail-page failures only drop that model.
    """

    hooks = hooks or SearchHooks()
    extractor = extractor or build_extractor(settings)

    listing = await fetcher.fetch(settings.library_url)
    identifiers = extract_identifiers(listing.content, library_path=settings.library_path)
    matched = filter_identifiers(identifiers, request.query)
    selected = matched[: max(0, request.limit)]

    async def process(model: str) -> _ModelOutcome:
        try:
            page = await fetcher.fetch(settings.model_url(model))
        except FetchError:
            return _ModelOutcome(model=model, fetched=False)

        records = extractor.extract_details(model, page.content)
        outcome = _ModelOutcome(model=model, records=records)

        # Synthetic "latest" records carry no metadata by definition.
        has_explicit_tags = bool(extractor.extract_tags(model, page.content))
        if has_explicit_tags and not any(r.has_metadata for r in records):
            outcome.warning = (
                f"{model}: no params/size found for any of {len(records)} tags; "
                "the page layout may have changed"
            )
        return outcome

    outcomes = await asyncio.gather(*(process(model) for model in selected))

    warnings: list[str] = []
    for outcome in outcomes:
        if outcome.warning:
            warnings.append(outcome.warning)
            if hooks.warning:
                hooks.warning(outcome.warning)

    return SearchResult(
        query=request.query,
        identifiers=selected,
        records=merge_records([o.records for o in outcomes]),
        skipped=[o.model for o in outcomes if not o.fetched],
        warnings=warnings,
    )


async def model_exists(*, settings: AppSettings, fetcher: PageFetcher, model: str) -> bool:
    try:
        return await fetcher.status(settings.model_url(model)) == 200
    except FetchError:
        return False


async def list_tags(
    *,
    settings: AppSettings,
    fetcher: PageFetcher,
    model: str,
    extractor: DetailExtractor | None = None,
) -> list[str] | None:
    """Tags of an existing model, or ``None`` when the model is not in the catalog."""

    if not await model_exists(settings=settings, fetcher=fetcher, model=model):
        return None
    extractor = extractor or build_extractor(settings)
    page = await fetcher.fetch(settings.model_url(model))
    return extractor.extract_tags(model, page.content)


def is_installed(model: str, installed: set[str]) -> bool:
    if model in installed:
        return True
    return ":" not in model and f"{model}:latest" in installed


async def pull_model(
    *,
    settings: AppSettings,
    fetcher: PageFetcher,
    manager: ModelManager,
    model: str,
    on_download: Callable[[str], None] | None = None,
) -> PullResult:
    """Pull `model` through the manager unless installed or unknown remotely."""

    base = base_model_name(model)
    if manager.is_available() and is_installed(model, manager.list_installed()):
        return PullResult(status=PullStatus.ALREADY_INSTALLED, model=model, base_model=base)

    if not await model_exists(settings=settings, fetcher=fetcher, model=base):
        return PullResult(status=PullStatus.NOT_FOUND, model=model, base_model=base)

    if on_download:
        on_download(model)
    exit_code = manager.pull(model)
    return PullResult(status=PullStatus.PULLED, model=model, base_model=base, exit_code=exit_code)
