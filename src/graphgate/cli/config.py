"""
Configuration loading for graphgate projects.

graphgate.yaml:

    schema: myapp.schema:schema
    context: myapp.context:build_context   # optional
    debug: true
    tracing: false
    log_level: INFO
    server:
      host: 127.0.0.1
      port: 8000
      path: /graphql
      cors_origins: []

Environment variables override file values: GRAPHGATE_SCHEMA, GRAPHGATE_HOST,
GRAPHGATE_PORT, GRAPHGATE_DEBUG, GRAPHGATE_LOG_LEVEL.
"""

from __future__ import annotations

import importlib
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from ..core.errors import GraphgateError

DEFAULT_CONFIG_PATH = "graphgate.yaml"


@dataclass
class ServerConfig:
    """HTTP server configuration."""
    host: str = "127.0.0.1"
    port: int = 8000
    path: str = "/graphql"
    cors_origins: list[str] = field(default_factory=list)


@dataclass
class GraphgateConfig:
    """Main graphgate configuration."""
    schema: str
    context: Optional[str] = None
    server: ServerConfig = field(default_factory=ServerConfig)
    debug: bool = True
    tracing: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GraphgateConfig":
        """Create config from dictionary."""
        server_data = data.get("server") or {}
        server = ServerConfig(
            host=server_data.get("host", "127.0.0.1"),
            port=int(server_data.get("port", 8000)),
            path=server_data.get("path", "/graphql"),
            cors_origins=list(server_data.get("cors_origins") or []),
        )

        return cls(
            schema=data.get("schema", ""),
            context=data.get("context"),
            server=server,
            debug=bool(data.get("debug", True)),
            tracing=bool(data.get("tracing", False)),
            log_level=str(data.get("log_level", "INFO")).upper(),
        )

    def apply_env(self, environ: Mapping[str, str]) -> "GraphgateConfig":
        """Override values from GRAPHGATE_* environment variables."""
        if environ.get("GRAPHGATE_SCHEMA"):
            self.schema = environ["GRAPHGATE_SCHEMA"]
        if environ.get("GRAPHGATE_HOST"):
            self.server.host = environ["GRAPHGATE_HOST"]
        if environ.get("GRAPHGATE_PORT"):
            self.server.port = int(environ["GRAPHGATE_PORT"])
        if environ.get("GRAPHGATE_DEBUG"):
            self.debug = environ["GRAPHGATE_DEBUG"].lower() in ("1", "true", "yes", "on")
        if environ.get("GRAPHGATE_LOG_LEVEL"):
            self.log_level = environ["GRAPHGATE_LOG_LEVEL"].upper()
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for YAML serialization."""
        data: dict[str, Any] = {"schema": self.schema}
        if self.context:
            data["context"] = self.context
        data.update({
            "debug": self.debug,
            "tracing": self.tracing,
            "log_level": self.log_level,
            "server": {
                "host": self.server.host,
                "port": self.server.port,
                "path": self.server.path,
                "cors_origins": self.server.cors_origins,
            },
        })
        return data

    def save(self, path: Path | str = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        content = yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)
        path.write_text(content)


def load_config(
    path: Path | str = DEFAULT_CONFIG_PATH,
    environ: Optional[Mapping[str, str]] = None,
) -> GraphgateConfig | None:
    """
    Load configuration from YAML file and environment.

    Returns None when there is no file and GRAPHGATE_SCHEMA is not set.
    """
    environ = os.environ if environ is None else environ
    path = Path(path)

    if path.exists():
        data = yaml.safe_load(path.read_text()) or {}
    elif environ.get("GRAPHGATE_SCHEMA"):
        data = {}
    else:
        return None

    return GraphgateConfig.from_dict(data).apply_env(environ)


def import_string(dotted_path: str) -> Any:
    """
    Import an object from a "package.module:attribute" path.

    Raises:
        GraphgateError: If the path is malformed or cannot be imported
    """
    module_name, _, attribute = dotted_path.partition(":")
    if not module_name or not attribute:
        raise GraphgateError(f"Invalid import path '{dotted_path}', expected 'module:attribute'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise GraphgateError(f"Could not import module '{module_name}': {e}") from e

    try:
        return getattr(module, attribute)
    except AttributeError:
        raise GraphgateError(f"Module '{module_name}' has no attribute '{attribute}'") from None
