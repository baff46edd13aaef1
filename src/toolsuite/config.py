"""
Centralized configuration management for ToolSuite, using pydantic-settings.

Sources, highest priority first: init arguments, config.yaml, environment
variables (``TOOLSUITE_`` prefix, ``__`` for nested keys), .env file.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict, YamlConfigSettingsSource


# --- Pydantic Models for Configuration Sections ---
class ServerConfig(BaseModel):
    """Configuration for the HTTP server."""

    host: str = Field(default="127.0.0.1", description="Backend server host")
    port: int = Field(default=8001, description="Backend server port")
    tool_timeout: float = Field(
        default=30.0,
        description="Seconds a request waits for a tool before giving up",
        gt=0,
    )


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO", description="Root log level")
    file: Optional[str] = Field(
        default=None, description="Also write logs to this file when set"
    )


class ExportConfig(BaseModel):
    """Configuration for the public tool index export."""

    public_index_path: str = Field(
        default="public/tools-public.json",
        description="Where the public search index JSON is written",
    )


class SeoConfig(BaseModel):
    """Configuration for network-backed SEO tools."""

    request_timeout: float = Field(
        default=10.0, description="HTTP timeout in seconds", gt=0, le=120
    )
    user_agent: str = Field(
        default="ToolSuite-SEO-Audit/0.1",
        description="User-Agent header sent when fetching pages",
    )
    max_links_checked: int = Field(
        default=20,
        description="Most same-host links the page audit checks (0 disables the check)",
        ge=0,
        le=200,
    )


class ToolSuiteConfig(BaseSettings):
    """Main configuration for ToolSuite, loaded from config.yaml."""

    model_config = SettingsConfigDict(
        yaml_file="config.yaml",
        env_prefix="TOOLSUITE_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    seo: SeoConfig = Field(default_factory=SeoConfig)
    preload_tools: bool = Field(
        default=False,
        description="Resolve every tool's implementation when the server starts",
    )

    # --- Computed Path Properties ---

    @computed_field
    @property
    def public_index_path(self) -> Path:
        """Get the resolved public index path."""
        return Path(self.export.public_index_path)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """Define the source loading priority, using YAML as the primary source."""
        return (
            init_settings,
            YamlConfigSettingsSource(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )


_config: Optional[ToolSuiteConfig] = None


def get_config() -> ToolSuiteConfig:
    """Get the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = ToolSuiteConfig()
    return _config


def reload_config() -> ToolSuiteConfig:
    """Re-read configuration from its sources."""
    global _config
    _config = ToolSuiteConfig()
    return _config


def configure_logging(config: Optional[ToolSuiteConfig] = None) -> None:
    """Set up root logging from the ``logging`` section."""
    config = config or get_config()
    handlers = [logging.StreamHandler()]
    if config.logging.file:
        log_file = Path(config.logging.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )
