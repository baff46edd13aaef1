"""Shared fixtures for ToolSuite tests."""

import asyncio
from types import SimpleNamespace

import pytest

from toolsuite.categories import Category
from toolsuite.tools.base import Template, ToolDescriptor


class CountingLoader:
    """Loader stub that records how many times it was awaited."""

    def __init__(self, module, delay: float = 0.0):
        self.module = module
        self.delay = delay
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.module


def make_descriptor(slug: str, loader=None, **overrides) -> ToolDescriptor:
    fields = {
        "id": f"tool-{slug}",
        "slug": slug,
        "category": Category.TEXT,
        "title": slug.replace("-", " ").title(),
        "short_description": f"{slug} tool",
        "icon": "FaFont",
        "template": Template.TEXT,
        "tags": ["test"],
        "loader": loader or CountingLoader(SimpleNamespace(run=lambda *a, **kw: (a, kw))),
    }
    fields.update(overrides)
    return ToolDescriptor(**fields)


@pytest.fixture
def descriptor_factory():
    return make_descriptor


@pytest.fixture
def counting_loader():
    return CountingLoader
