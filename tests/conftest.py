"""
Pytest configuration and shared fixtures for ollama-cli tests.

Provides a small fake library (listing + detail pages) that mimics the
shape of the real HTML closely enough for the extraction heuristics.
"""

from __future__ import annotations

import pytest

from core.config import AppSettings
from mocks import FakeFetcher, FakeManager

LIBRARY = "https://ollama.com/library"

LISTING_HTML = """<html><body>
<nav><a href="/library">Models</a></nav>
<ul>
<li><a href="/library/llama3">llama3</a><p>Meta Llama 3</p></li>
<li><a href="/library/llama3.1">llama3.1</a></li>
<li><a href="/library/llama3.2">llama3.2</a></li>
<li><a href="/library/llama2">llama2</a></li>
<li><a href="/library/tinyllama">tinyllama</a></li>
<li><a href="/library/tinydolphin">tinydolphin</a></li>
<li><a href="/library/tulu3">tulu3</a><p>A tiny instruction following model</p></li>
<li><a href="/library/mistral:">mistral</a></li>
<li><a href="/library/mistral">mistral</a></li>
<li><a href="/library/phi3/tags">phi3 tags</a></li>
</ul>
</body></html>
"""

LLAMA3_HTML = """<html><body>
<div class="tags">
<a href="/library/llama3:latest" class="tag"><span>llama3:latest</span></a>
<div class="meta"><span>8.0B</span><span>4.7GB</span></div>
<a href="/library/llama3:instruct" class="tag"><span>llama3:instruct</span></a>
<div class="meta"><span>8.0B</span><span>4.7 GB</span></div>
</div>
<pre>ollama run llama3:latest</pre>
</body></html>
"""

LLAMA31_HTML = """<html><body>
<a href="/library/llama3.1:8b"><span>llama3.1:8b</span></a><div><span>4.9GB</span></div>
<a href="/library/llama3.1:70b"><span>llama3.1:70b</span></a><div><span>43GB</span></div>
</body></html>
"""

LLAMA2_HTML = """<html><body>
<a href="/library/llama2:latest">llama2:latest</a><div><span>7B</span><span>3.8GB</span></div>
</body></html>
"""

TINYLLAMA_HTML = """<html><body>
<h1>tinyllama</h1><p>The TinyLlama project is an open endeavor.</p>
</body></html>
"""

TINYDOLPHIN_HTML = """<html><body>
<a href="/library/tinydolphin:v2.8">tinydolphin:v2.8</a><p>No details published.</p>
</body></html>
"""

TULU3_HTML = """<html><body>
<a href="/library/tulu3:latest">tulu3:latest</a><div><span>8B</span><span>4.9GB</span></div>
</body></html>
"""


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep user env vars and config files out of the tests."""

    for name in (
        "OLLAMA_LIBRARY_HOST",
        "OLLAMA_CLI_LIBRARY_HOST",
        "OLLAMA_CLI_LIBRARY_PATH",
        "OLLAMA_CLI_LANG",
        "OLLAMA_CLI_SEARCH_LIMIT",
        "OLLAMA_CLI_CONTEXT_LINES",
        "OLLAMA_CLI_HTTP_TIMEOUT_SECONDS",
        "OLLAMA_CLI_OLLAMA_BINARY",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def library_pages() -> dict[str, str]:
    return {
        LIBRARY: LISTING_HTML,
        f"{LIBRARY}/llama3": LLAMA3_HTML,
        f"{LIBRARY}/llama3.1": LLAMA31_HTML,
        f"{LIBRARY}/llama2": LLAMA2_HTML,
        f"{LIBRARY}/tinyllama": TINYLLAMA_HTML,
        f"{LIBRARY}/tinydolphin": TINYDOLPHIN_HTML,
        f"{LIBRARY}/tulu3": TULU3_HTML,
        f"{LIBRARY}/mistral": "<html><body><h1>mistral</h1></body></html>",
    }


@pytest.fixture
def fetcher(library_pages) -> FakeFetcher:
    return FakeFetcher(library_pages)


@pytest.fixture
def manager() -> FakeManager:
    return FakeManager({"llama3:latest", "phi3:mini"})
