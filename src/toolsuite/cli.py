import argparse
import asyncio
import json
import sys

from toolsuite.categories import CATEGORY_META_MAP
from toolsuite.config import configure_logging, get_config
from toolsuite.tools.dispatcher import tool_dispatcher
from toolsuite.tools.errors import ToolLogicMissing, ToolNotFound
from toolsuite.tools.registry import tool_registry


def _parse_arg(value: str):
    """Treat arguments as JSON when they parse, plain strings otherwise."""
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


def _parse_kwargs(value):
    """Keyword arguments must be given as a JSON object."""
    if not value:
        return {}
    kwargs = json.loads(value)
    if not isinstance(kwargs, dict):
        raise ValueError("expected a JSON object")
    return kwargs


def _cmd_list(args) -> int:
    if args.category and args.category not in CATEGORY_META_MAP:
        print(f"❌ Unknown category: {args.category}", file=sys.stderr)
        print(f"   Choose from: {', '.join(CATEGORY_META_MAP)}", file=sys.stderr)
        return 1

    tools = tool_registry.list_tools(category=args.category, include_hidden=args.all)
    for tool in tools:
        flags = []
        if tool.is_hidden:
            flags.append("hidden")
        if tool.is_experimental:
            flags.append("experimental")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        print(f"{tool.slug:24} {tool.title}{suffix}")
    return 0


def _cmd_categories(args) -> int:
    for category in tool_registry.build_category_index():
        if not category.tools and not args.all:
            continue
        print(f"{category.title} ({category.path})")
        for tool in category.tools:
            print(f"  {tool.slug:22} {tool.short_description}")
    return 0


def _cmd_run(args) -> int:
    positional = [_parse_arg(value) for value in args.args]
    try:
        kwargs = _parse_kwargs(args.kwargs)
    except ValueError as e:
        print(f"❌ Invalid --kwargs: {e}", file=sys.stderr)
        return 1

    try:
        result = asyncio.run(tool_dispatcher.run_tool(args.slug, *positional, **kwargs))
    except ToolNotFound as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except ToolLogicMissing as e:
        print(f"❌ Tool is misconfigured: {e}", file=sys.stderr)
        return 1
    except (ValueError, TypeError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2
    except Exception as e:
        print(f"❌ Tool failed: {e}", file=sys.stderr)
        return 1

    if isinstance(result, str):
        print(result)
    else:
        print(json.dumps(result, indent=2, default=str))
    return 0


def _cmd_export(args) -> int:
    output = args.output or get_config().public_index_path
    count = tool_registry.export_public_index(output)
    print(f"✅ Wrote {count} tools → {output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ToolSuite CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List registered tools")
    list_parser.add_argument("--category", type=str, help="Only tools in this category")
    list_parser.add_argument("--all", action="store_true", help="Include hidden tools")
    list_parser.set_defaults(func=_cmd_list)

    cat_parser = subparsers.add_parser("categories", help="Show the category index")
    cat_parser.add_argument("--all", action="store_true", help="Include empty categories")
    cat_parser.set_defaults(func=_cmd_categories)

    run_parser = subparsers.add_parser("run", help="Run a tool")
    run_parser.add_argument("slug", type=str, help="Tool slug, e.g. case-converter")
    run_parser.add_argument("args", nargs="*", help="Positional arguments (JSON or text)")
    run_parser.add_argument("--kwargs", type=str, help="Keyword arguments as a JSON object")
    run_parser.set_defaults(func=_cmd_run)

    export_parser = subparsers.add_parser("export", help="Write the public tool index")
    export_parser.add_argument("--output", type=str, help="Output path")
    export_parser.set_defaults(func=_cmd_export)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(get_config())
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
