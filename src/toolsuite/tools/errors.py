class ToolSuiteError(Exception):
    """Base class for registry and dispatch errors."""

    pass


class DuplicateToolError(ToolSuiteError):
    """Raised when two descriptors share a slug or an id (a configuration error)."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Duplicate tool {field}: {value}")


class ToolNotFound(ToolSuiteError):
    """Raised when no descriptor matches the requested slug."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Tool not found: {slug}")


class ToolLogicMissing(ToolSuiteError):
    """Raised when a tool's loader resolved but yielded no callable entry point."""

    def __init__(self, tool_id: str, entry_point: str = "run"):
        self.tool_id = tool_id
        self.entry_point = entry_point
        super().__init__(f"Tool logic not found for {tool_id} (entry point '{entry_point}')")
