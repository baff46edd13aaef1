"""Tests for lazy tool resolution and dispatch."""

import asyncio
import importlib
from types import SimpleNamespace

import pytest

from toolsuite.tools.dispatcher import LogicCache, ToolDispatcher
from toolsuite.tools.errors import ToolLogicMissing, ToolNotFound
from toolsuite.tools.registry import ToolRegistry, build_default_registry


@pytest.fixture
def case_converter_loader(counting_loader):
    return counting_loader(importlib.import_module("toolsuite.logic.text"))


@pytest.fixture
def dispatcher(descriptor_factory, case_converter_loader):
    registry = ToolRegistry(
        [
            descriptor_factory(
                "case-converter",
                loader=case_converter_loader,
                entry_point="case_converter",
            )
        ]
    )
    return ToolDispatcher(registry)


class TestRunTool:
    @pytest.mark.asyncio
    async def test_loads_at_most_once(self, dispatcher, case_converter_loader):
        first = await dispatcher.run_tool("case-converter", "Hello World", {"caseType": "upper"})
        second = await dispatcher.run_tool("case-converter", "Hello World", {"caseType": "upper"})

        assert first == second == "HELLO WORLD"
        assert case_converter_loader.calls == 1
        assert "tool-case-converter" in dispatcher.cache

    @pytest.mark.asyncio
    async def test_unknown_slug(self, dispatcher):
        with pytest.raises(ToolNotFound) as exc_info:
            await dispatcher.run_tool("does-not-exist")
        assert exc_info.value.slug == "does-not-exist"
        assert len(dispatcher.cache) == 0

    @pytest.mark.asyncio
    async def test_kwargs_forwarded(self, descriptor_factory, counting_loader):
        module = SimpleNamespace(run=lambda *args, **kwargs: {"args": args, "kwargs": kwargs})
        dispatcher = ToolDispatcher(
            ToolRegistry([descriptor_factory("echo", loader=counting_loader(module))])
        )
        result = await dispatcher.run_tool("echo", 1, 2, flag=True)
        assert result == {"args": (1, 2), "kwargs": {"flag": True}}

    @pytest.mark.asyncio
    async def test_async_logic_is_awaited(self, descriptor_factory, counting_loader):
        async def run(value):
            await asyncio.sleep(0)
            return value * 2

        dispatcher = ToolDispatcher(
            ToolRegistry([descriptor_factory("double", loader=counting_loader(SimpleNamespace(run=run)))])
        )
        assert await dispatcher.run_tool("double", 21) == 42

    @pytest.mark.asyncio
    async def test_tool_errors_propagate_unchanged(self, descriptor_factory, counting_loader):
        class Boom(Exception):
            pass

        def run():
            raise Boom("tool specific")

        dispatcher = ToolDispatcher(
            ToolRegistry([descriptor_factory("boom", loader=counting_loader(SimpleNamespace(run=run)))])
        )
        with pytest.raises(Boom, match="tool specific"):
            await dispatcher.run_tool("boom")
        # Logic resolved fine, so it stays cached even though the call failed
        assert "tool-boom" in dispatcher.cache


class TestLogicMissing:
    @pytest.mark.asyncio
    async def test_no_entry_point(self, descriptor_factory, counting_loader):
        loader = counting_loader(SimpleNamespace(something_else=lambda: None))
        dispatcher = ToolDispatcher(ToolRegistry([descriptor_factory("empty", loader=loader)]))

        with pytest.raises(ToolLogicMissing) as exc_info:
            await dispatcher.run_tool("empty")
        assert exc_info.value.tool_id == "tool-empty"
        assert len(dispatcher.cache) == 0

    @pytest.mark.asyncio
    async def test_failures_are_not_cached(self, descriptor_factory, counting_loader):
        loader = counting_loader(SimpleNamespace(run="not callable"))
        dispatcher = ToolDispatcher(ToolRegistry([descriptor_factory("broken", loader=loader)]))

        for _ in range(2):
            with pytest.raises(ToolLogicMissing):
                await dispatcher.run_tool("broken")
        assert loader.calls == 2

    @pytest.mark.asyncio
    async def test_recovers_once_module_is_fixed(self, descriptor_factory, counting_loader):
        module = SimpleNamespace()
        loader = counting_loader(module)
        dispatcher = ToolDispatcher(ToolRegistry([descriptor_factory("late", loader=loader)]))

        with pytest.raises(ToolLogicMissing):
            await dispatcher.run_tool("late")
        module.run = lambda: "ok"
        assert await dispatcher.run_tool("late") == "ok"
        assert loader.calls == 2


class TestConcurrency:
    @pytest.mark.asyncio
    async def test_concurrent_first_calls(self, descriptor_factory, counting_loader):
        loader = counting_loader(SimpleNamespace(run=lambda x: x.upper()), delay=0.01)
        dispatcher = ToolDispatcher(ToolRegistry([descriptor_factory("shout", loader=loader)]))

        results = await asyncio.gather(
            dispatcher.run_tool("shout", "a"),
            dispatcher.run_tool("shout", "b"),
        )

        assert results == ["A", "B"]
        assert len(dispatcher.cache) == 1
        assert list(dispatcher.cache) == ["tool-shout"]
        # Racing loads are tolerated, not serialized
        assert 1 <= loader.calls <= 2

    def test_cache_first_entry_wins(self):
        cache = LogicCache()

        def first():
            pass

        def second():
            pass

        assert cache.add("tool-x", first) is first
        assert cache.add("tool-x", second) is first
        assert cache.get("tool-x") is first
        assert len(cache) == 1


class TestIsolation:
    @pytest.mark.asyncio
    async def test_dispatchers_have_independent_caches(self, dispatcher):
        other = ToolDispatcher(dispatcher.registry)
        await dispatcher.run_tool("case-converter", "x", {"caseType": "upper"})
        assert len(dispatcher.cache) == 1
        assert len(other.cache) == 0

    @pytest.mark.asyncio
    async def test_shared_cache_can_be_injected(self, dispatcher, case_converter_loader):
        shared = ToolDispatcher(dispatcher.registry, cache=dispatcher.cache)
        await dispatcher.run_tool("case-converter", "x", {"caseType": "upper"})
        await shared.run_tool("case-converter", "y", {"caseType": "upper"})
        assert case_converter_loader.calls == 1


class TestPreload:
    @pytest.mark.asyncio
    async def test_default_catalog_resolves(self):
        dispatcher = ToolDispatcher(build_default_registry())
        resolved = await dispatcher.preload()
        assert len(resolved) == len(dispatcher.registry)
        assert len(dispatcher.cache) == len(dispatcher.registry)

    @pytest.mark.asyncio
    async def test_preload_unknown_slug(self, dispatcher):
        with pytest.raises(ToolNotFound):
            await dispatcher.preload(["nope"])
