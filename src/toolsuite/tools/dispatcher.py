"""
Lazy tool dispatch.

A tool's implementation module is imported the first time the tool runs and
the resolved callable is kept for the life of the dispatcher. Concurrent
first calls for the same tool may each run the loader; the first one to
finish populates the cache and later ones reuse that entry.
"""

import inspect
import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from .base import ToolDescriptor
from .errors import ToolLogicMissing, ToolNotFound
from .registry import ToolRegistry, tool_registry

logger = logging.getLogger(__name__)

ToolLogic = Callable[..., Any]


class LogicCache:
    """Append-only map from tool id to resolved implementation"""

    def __init__(self):
        self._entries: Dict[str, ToolLogic] = {}

    def get(self, tool_id: str) -> Optional[ToolLogic]:
        return self._entries.get(tool_id)

    def add(self, tool_id: str, logic: ToolLogic) -> ToolLogic:
        """Store ``logic`` unless an entry exists; return whichever is cached."""
        return self._entries.setdefault(tool_id, logic)

    def __contains__(self, tool_id: object) -> bool:
        return tool_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))


class ToolDispatcher:
    """Resolves tools by slug and invokes their logic"""

    def __init__(self, registry: ToolRegistry, cache: Optional[LogicCache] = None):
        """
        Initialize dispatcher.

        Args:
            registry: Registry to look tools up in
            cache: Resolved-logic cache; a fresh one is created when omitted
        """
        self.registry = registry
        self.cache = cache if cache is not None else LogicCache()

    async def resolve(self, descriptor: ToolDescriptor) -> ToolLogic:
        """
        Return the callable implementing ``descriptor``, loading it if needed.

        Raises:
            ToolLogicMissing: the loader yielded nothing callable under the
                descriptor's entry point. Failures are not cached, so a later
                call loads again.
        """
        cached = self.cache.get(descriptor.id)
        if cached is not None:
            logger.debug(f"Using cached logic for {descriptor.id}")
            return cached

        module = await descriptor.loader()
        logic = getattr(module, descriptor.entry_point, None)
        if not callable(logic):
            logger.error(
                f"Tool {descriptor.id} loaded but has no callable '{descriptor.entry_point}'"
            )
            raise ToolLogicMissing(descriptor.id, descriptor.entry_point)

        logger.info(f"Resolved logic for {descriptor.id}")
        return self.cache.add(descriptor.id, logic)

    async def run_tool(self, slug: str, *args: Any, **kwargs: Any) -> Any:
        """
        Run the tool registered under ``slug``.

        The tool's return value (awaited if it is awaitable) is returned as is,
        and any exception the tool raises propagates unchanged.

        Raises:
            ToolNotFound: no tool has this slug
            ToolLogicMissing: the tool's implementation could not be resolved
        """
        descriptor = self.registry.get(slug)
        if descriptor is None:
            raise ToolNotFound(slug)

        logic = await self.resolve(descriptor)
        result = logic(*args, **kwargs)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def preload(self, slugs: Optional[Iterable[str]] = None) -> List[str]:
        """
        Resolve tools ahead of their first run.

        Args:
            slugs: Tools to resolve (default: every registered tool)

        Returns:
            Ids of the resolved tools
        """
        if slugs is None:
            descriptors = list(self.registry)
        else:
            descriptors = []
            for slug in slugs:
                descriptor = self.registry.get(slug)
                if descriptor is None:
                    raise ToolNotFound(slug)
                descriptors.append(descriptor)

        resolved = []
        for descriptor in descriptors:
            await self.resolve(descriptor)
            resolved.append(descriptor.id)
        logger.info(f"Preloaded {len(resolved)} tools")
        return resolved


# Dispatcher over the global registry
tool_dispatcher = ToolDispatcher(tool_registry)
