# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Server configuration dataclasses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
import os


SERVER_NAME = "mcp-elicitation-server"
SERVER_VERSION = "0.1.0"

HOST_ENV = "MCP_SERVER_HOST"
PORT_ENV = "MCP_SERVER_PORT"

TRANSPORTS = ("streamable-http", "stdio")


@dataclass(slots=True, frozen=True)
class ElicitationConfig:
    """Configuration for the elicitation service.

    Elicitation allows the server to request structured input from the user.

    See: https://modelcontextprotocol.io/specification/2025-06-18/client/elicitation
    """

    timeout: float | None = None
    """Timeout in seconds for elicitation requests. None waits for the client."""


@dataclass(slots=True, frozen=True)
class ServerConfig:
    """Tunable parameters for ElicitationServer.

    All fields have sane defaults. Override only what you need.

    Example:
        >>> config = ServerConfig(port=8080, elicitation=ElicitationConfig(timeout=30.0))
    """

    host: str = "127.0.0.1"
    """Interface the HTTP transport binds to."""

    port: int = 3142
    """Port the HTTP transport binds to."""

    path: str = "/mcp"
    """HTTP path serving the MCP endpoint."""

    transport: str = "streamable-http"
    """Default transport for ``serve()``.

    HTTP sessions are always stateful and answer with SSE streams.
    """

    allow_origins: tuple[str, ...] = ("*",)
    """CORS origins; empty disables the CORS middleware."""

    log_level: str = "info"

    elicitation: ElicitationConfig = field(default_factory=ElicitationConfig)
    """Elicitation service configuration."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> ServerConfig:
        """Build a config from ``MCP_SERVER_HOST`` / ``MCP_SERVER_PORT``.

        Keyword overrides whose value is None are ignored, so parsed CLI
        arguments can be passed through unchanged.
        """
        env = os.environ if environ is None else environ
        config = cls()

        if env.get(HOST_ENV):
            config = replace(config, host=env[HOST_ENV])
        if env.get(PORT_ENV):
            raw = env[PORT_ENV]
            try:
                port = int(raw)
            except ValueError:
                raise ValueError(f"{PORT_ENV} must be an integer, got {raw!r}") from None
            config = replace(config, port=port)

        explicit = {key: value for key, value in overrides.items() if value is not None}
        return replace(config, **explicit) if explicit else config


__all__ = ["ElicitationConfig", "ServerConfig", "SERVER_NAME", "SERVER_VERSION", "TRANSPORTS"]
