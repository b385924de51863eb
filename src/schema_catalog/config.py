"""Configuration for the schema catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError


DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class SourceConfig:
    """Where the schema comes from.

    Either `ddl_file` (static DDL) or `driver` (a DB-API module name for
    live INFORMATION_SCHEMA introspection) must be set, not both.
    """
    ddl_file: str | None = None
    driver: str | None = None
    connect_args: dict[str, Any] = field(default_factory=dict)
    table_schema: str = ""
    dialect: str = "spanner"

    @property
    def kind(self) -> str | None:
        """'ddl', 'live' or None when nothing is configured."""
        if self.ddl_file:
            return "ddl"
        if self.driver:
            return "live"
        return None

    def validate(self) -> None:
        if self.ddl_file and self.driver:
            raise ConfigError("source: set either ddl_file or driver, not both")
        if self.kind is None:
            raise ConfigError("source: no schema source configured (set ddl_file or driver)")


@dataclass
class ServerConfig:
    """HTTP server configuration."""
    host: str = "127.0.0.1"
    port: int = 8060


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class Config:
    """Main configuration container."""
    source: SourceConfig = field(default_factory=SourceConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> Config:
        """Create config from dictionary."""
        try:
            return cls(
                source=SourceConfig(**data.get("source", {})),
                server=ServerConfig(**data.get("server", {})),
                logging=LoggingConfig(**data.get("logging", {})),
            )
        except TypeError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_yaml(cls, path: str) -> Config:
        """Load config from YAML file."""
        import yaml
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_json(cls, path: str) -> Config:
        """Load config from JSON file."""
        import json
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load config from a YAML or JSON file, chosen by suffix."""
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        if path.suffix == ".json":
            return cls.from_json(str(path))
        return cls.from_yaml(str(path))
