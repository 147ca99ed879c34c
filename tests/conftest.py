"""Shared fixtures: profile/page fixtures, fast layouts and in-memory Sources."""

import asyncio
import dataclasses
import json
from pathlib import Path

import pytest

from folio.contexts.loading import ProfileDocument
from folio.contexts.rendering import Surface, build_site_context, load_surface_layout

FIXTURES_PATH = Path(__file__).parent / "fixtures"


class StaticSource:
    """In-memory Source returning fixed text or raising a fixed error."""

    location = "memory://profile.json"
    document_format = "json"

    def __init__(self, text: str = None, error: Exception = None):
        self.text = text
        self.error = error
        self.fetch_count = 0

    async def fetch(self) -> str:
        self.fetch_count += 1
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def profile_data():
    return json.loads((FIXTURES_PATH / "profile.json").read_text(encoding="utf-8"))


@pytest.fixture
def page_markup():
    return (FIXTURES_PATH / "page.html").read_text(encoding="utf-8")


@pytest.fixture
def fast_layout():
    """Packaged layout with sweep delays short enough for tests."""
    return dataclasses.replace(
        load_surface_layout(), skill_sweep_delay_s=0.01, stat_sweep_delay_s=0.02
    )


@pytest.fixture
def make_context(page_markup, fast_layout):
    """Build a SiteContext over the fixture page, optionally with a loaded document."""

    def _make(markup: str = None, data: dict = None):
        surface = Surface.from_markup(page_markup if markup is None else markup)
        context = build_site_context(surface, layout=fast_layout)
        if data is not None:
            context.document = ProfileDocument.from_dict(data)
            context.ready = True
        return context

    return _make


@pytest.fixture
def static_source():
    return StaticSource


@pytest.fixture
def in_loop():
    """Call a synchronous function from inside a running event loop."""

    def _call(func, *args):
        async def _run():
            return func(*args)

        return asyncio.run(_run())

    return _call
