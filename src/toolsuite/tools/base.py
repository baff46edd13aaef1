import importlib
import re
from enum import Enum
from typing import Any, Awaitable, Callable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..categories import Category, CategoryMeta

# A loader is a zero-argument async factory yielding a module-like object
Loader = Callable[[], Awaitable[Any]]

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

# Fields that never leave the process
INTERNAL_FIELDS = {"loader", "entry_point", "synonyms", "handler_path", "analytics_key"}


class Template(str, Enum):
    """UI templates a tool can be rendered with"""

    TEXT = "TextToolTemplate"
    FILE = "FileToolTemplate"
    IMAGE = "ImageToolTemplate"
    CONVERTER = "ConverterToolTemplate"
    GENERATOR = "GeneratorToolTemplate"
    ANALYZER = "AnalyzerToolTemplate"
    INTERACTIVE = "InteractiveToolTemplate"


class PlanTier(str, Enum):
    FREE = "free"
    PRO = "pro"
    ENTERPRISE = "enterprise"


class _PublicModel(BaseModel):
    """Shared config for models that are serialized to clients (camelCase)."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class ToolProps(_PublicModel):
    """UI hints for the presentation layer"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, extra="allow"
    )

    input_type: Optional[Literal["text", "file", "image", "json"]] = None
    result_type: Optional[Literal["text", "table", "image", "json"]] = None


class PublicToolView(_PublicModel):
    """A tool's metadata with everything internal stripped"""

    id: str
    slug: str
    category: Category
    title: str
    short_description: str
    long_description: str = ""
    icon: str
    template: Template
    keywords: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    is_hidden: bool = False
    is_experimental: bool = False
    min_plan: Optional[PlanTier] = None
    weight: Optional[int] = None
    props: Optional[ToolProps] = None


class ToolDescriptor(PublicToolView):
    """
    Full definition of one tool: public metadata plus its implementation
    binding.

    The implementation is reached by awaiting ``loader()`` and reading the
    attribute named by ``entry_point`` from whatever it yields.
    """

    loader: Loader = Field(exclude=True)
    entry_point: str = Field(default="run", exclude=True)
    synonyms: List[str] = Field(default_factory=list, exclude=True)
    handler_path: Optional[str] = Field(default=None, exclude=True)
    analytics_key: Optional[str] = Field(default=None, exclude=True)

    @field_validator("slug")
    @classmethod
    def _check_slug(cls, value: str) -> str:
        if not SLUG_PATTERN.match(value):
            raise ValueError(f"slug must be lowercase, digits and hyphens: {value!r}")
        return value

    @field_validator("id", "entry_point")
    @classmethod
    def _check_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def to_public(self) -> PublicToolView:
        """Project to the public view (regenerated on every call)."""
        return PublicToolView.model_validate(
            {name: getattr(self, name) for name in PublicToolView.model_fields}
        )


class ToolSummary(_PublicModel):
    """Minimal display shape used in the category index"""

    id: str
    slug: str
    title: str
    short_description: str
    icon: str
    path: str


class CategoryWithTools(CategoryMeta):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, use_enum_values=True
    )

    tools: List[ToolSummary] = Field(default_factory=list)


class PublicIndexEntry(_PublicModel):
    """One record of the exported ``tools-public.json`` search index."""

    id: str
    title: str
    slug: str
    category: Category
    short_description: str
    tags: List[str] = Field(default_factory=list)


def lazy_module(module_path: str) -> Loader:
    """
    Build a loader that imports ``module_path`` on first await.

    Imports are idempotent, so repeated or concurrent loads are harmless.
    """

    async def load() -> Any:
        return importlib.import_module(module_path)

    load.__qualname__ = f"lazy_module({module_path!r})"
    return load
