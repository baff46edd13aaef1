import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

from ..categories import CATEGORY_META, Category
from .base import (
    CategoryWithTools,
    PublicIndexEntry,
    PublicToolView,
    ToolDescriptor,
    ToolSummary,
)
from .errors import DuplicateToolError

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Registry of tool descriptors, keyed by slug, in insertion order"""

    def __init__(self, descriptors: Optional[Iterable[ToolDescriptor]] = None):
        self._tools: Dict[str, ToolDescriptor] = {}
        self._ids: set = set()
        if descriptors is not None:
            self.register_many(descriptors)

    def register(self, descriptor: ToolDescriptor):
        """Register a tool; duplicate slugs or ids are rejected"""
        if descriptor.slug in self._tools:
            raise DuplicateToolError("slug", descriptor.slug)
        if descriptor.id in self._ids:
            raise DuplicateToolError("id", descriptor.id)
        self._tools[descriptor.slug] = descriptor
        self._ids.add(descriptor.id)

    def register_many(self, descriptors: Iterable[ToolDescriptor]):
        """Register several tools in order"""
        count = 0
        for descriptor in descriptors:
            self.register(descriptor)
            count += 1
        logger.debug(f"Registered {count} tools ({len(self)} total)")

    def get(self, slug: str) -> Optional[ToolDescriptor]:
        """Get a tool by slug"""
        return self._tools.get(slug)

    def __contains__(self, slug: object) -> bool:
        return slug in self._tools

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def list_tools(
        self, category: Optional[Union[Category, str]] = None, include_hidden: bool = False
    ) -> List[ToolDescriptor]:
        """List registered tools, optionally restricted to one category"""
        tools = []
        for descriptor in self:
            if not include_hidden and descriptor.is_hidden:
                continue
            if category and descriptor.category != category:
                continue
            tools.append(descriptor)
        return tools

    def list_public_tools(self) -> List[PublicToolView]:
        """
        Project every tool to its public view, in registration order.

        No visibility filtering happens here; hidden tools are included.
        """
        return [descriptor.to_public() for descriptor in self]

    def build_category_index(self) -> List[CategoryWithTools]:
        """
        Group visible tools under every known category.

        Categories follow the static metadata order and are always present,
        even when no tool belongs to them.
        """
        public_tools = self.list_public_tools()
        index = []
        for meta in CATEGORY_META:
            summaries = [
                ToolSummary(
                    id=tool.id,
                    slug=tool.slug,
                    title=tool.title,
                    short_description=tool.short_description,
                    icon=tool.icon,
                    path=f"/{tool.slug}",
                )
                for tool in public_tools
                if tool.category == meta.key and not tool.is_hidden
            ]
            index.append(CategoryWithTools(**meta.model_dump(), tools=summaries))
        return index

    def build_public_index(self) -> List[PublicIndexEntry]:
        """Search index records for every visible tool"""
        return [
            PublicIndexEntry(
                id=tool.id,
                title=tool.title,
                slug=tool.slug,
                category=tool.category,
                short_description=tool.short_description,
                tags=list(tool.tags),
            )
            for tool in self.list_public_tools()
            if not tool.is_hidden
        ]

    def export_public_index(self, path: Union[str, Path]) -> int:
        """
        Write the public search index to ``path`` as JSON.

        The field names on disk (id, title, slug, category, shortDescription,
        tags) are read by external tooling and must stay stable.

        Returns:
            Number of entries written
        """
        entries = self.build_public_index()
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        payload = [entry.model_dump(mode="json", by_alias=True) for entry in entries]
        out.write_text(json.dumps(payload), encoding="utf-8")
        logger.info(f"Wrote {len(entries)} tools to {out}")
        return len(entries)


def build_default_registry() -> ToolRegistry:
    """Build a registry from the bundled catalog tables"""
    from ..catalog.seo import SEO_TOOLS
    from ..catalog.text import TEXT_TOOLS

    return ToolRegistry([*TEXT_TOOLS, *SEO_TOOLS])


# Global tool registry
tool_registry = build_default_registry()
