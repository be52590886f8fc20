"""Application configuration loaded from a YAML file."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

LOCAL_PROFILE = "local"
LOCAL_CONFIG_PATH = "configs/local.yaml"


class ConfigError(Exception):
    """Raised when the configuration cannot be located or read."""


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"cannot read config: section {key!r} is not a mapping")
    return section


@dataclass(frozen=True)
class ServerConfig:
    """HTTP server settings."""

    port: str = ""
    name: str = ""


@dataclass(frozen=True)
class DatabaseConfig:
    """Database connection settings."""

    host: str = ""
    username: str = ""
    password: str = ""
    database_name: str = ""
    dialect: str = ""
    port: str = ""


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> AppConfig:
        """Build a configuration from a parsed YAML document."""
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigError("cannot read config: top level is not a mapping")
        server = _section(data, "server")
        database = _section(data, "database")
        return cls(
            server=ServerConfig(
                port=_text(server.get("port")),
                name=_text(server.get("name")),
            ),
            database=DatabaseConfig(
                host=_text(database.get("host")),
                username=_text(database.get("userName")),
                password=_text(database.get("password")),
                database_name=_text(database.get("dataBaseName")),
                dialect=_text(database.get("dialect")),
                port=_text(database.get("port")),
            ),
        )


def load_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """Load the configuration named by CONFIG_PATH and APP_PROFILE."""
    env = os.environ if environ is None else environ
    config_path = env.get("CONFIG_PATH", "")
    profile = env.get("APP_PROFILE", "")

    if not config_path and profile == LOCAL_PROFILE:
        config_path = LOCAL_CONFIG_PATH
    if not config_path:
        raise ConfigError("CONFIG_PATH environment variable not set")
    if not profile:
        raise ConfigError("APP_PROFILE environment variable not set")

    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"CONFIG_PATH does not exist: {config_path}")

    try:
        with path.open(encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError) as err:
        raise ConfigError(f"cannot read config: {err}") from err
    return AppConfig.from_mapping(data)