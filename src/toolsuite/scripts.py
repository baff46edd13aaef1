"""Script entry points for ToolSuite CLI commands."""

import os
import subprocess
import sys

from .config import get_config
from .tools.registry import tool_registry


def start_backend():
    """Start the FastAPI backend server with reload."""
    # Set PYTHONPATH to include src directory
    env = os.environ.copy()
    src_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    env["PYTHONPATH"] = src_path

    config = get_config()
    subprocess.run(
        [
            "uvicorn",
            "toolsuite.app:api",
            "--reload",
            "--host",
            config.server.host,
            "--port",
            str(config.server.port),
        ],
        env=env,
    )


def build_public_index():
    """Write the public tool index (build-time step for search and sitemaps)."""
    output = sys.argv[1] if len(sys.argv) > 1 else get_config().public_index_path
    count = tool_registry.export_public_index(output)
    print(f"Wrote {count} tools → {output}")


def lint():
    """Run ruff linting."""
    subprocess.run(["ruff", "check", "."])


def format_code():
    """Run ruff formatting."""
    subprocess.run(["ruff", "format", "."])
