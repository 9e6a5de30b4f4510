"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (TABLESIFT_ prefix)
  2. YAML config file (if specified)
  3. Default values
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class ElasticsearchSettings(BaseModel):
    """Connection settings for the Elasticsearch adapter."""

    client: dict[str, Any] = Field(
        default_factory=lambda: {"hosts": ["http://localhost:9200"]},
        description="Keyword arguments for the Elasticsearch client",
    )
    index: str | list[str] = Field(default="*", description="Index name or list of index names")

    @field_validator("index", mode="before")
    @classmethod
    def _parse_index(cls, v: Any) -> Any:
        """Parse a JSON list from an env var, e.g. ``'["logs", "events"]'``."""
        if isinstance(v, str) and v.startswith("["):
            try:
                parsed = json.loads(v)
            except json.JSONDecodeError:
                return v
            if isinstance(parsed, list):
                return [str(name) for name in parsed]
        return v


class TableSettings(BaseModel):
    """Defaults applied to every table."""

    page_length: int = Field(default=10, description="Rows per page when the request has no length")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the TABLESIFT_ prefix.
    Nested settings use double underscores: TABLESIFT_TABLE__PAGE_LENGTH=25

    Example:
        TABLESIFT_ELASTICSEARCH__INDEX=products
        TABLESIFT_ELASTICSEARCH__CLIENT='{"hosts": ["http://es:9200"]}'
        TABLESIFT_OBSERVABILITY__LOG_FORMAT=console
    """

    model_config = {
        "env_prefix": "TABLESIFT_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    elasticsearch: ElasticsearchSettings = Field(default_factory=ElasticsearchSettings)
    table: TableSettings = Field(default_factory=TableSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    def adapter_options(self) -> dict[str, Any]:
        """Options for ``ElasticsearchAdapter.configure()``."""
        return {"client": dict(self.elasticsearch.client), "index": self.elasticsearch.index}

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are used as defaults; environment variables
        still take precedence.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
