# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""MCP elicitation demo.

A single-tool server: ``customer_delete`` asks the calling client to confirm
through an elicitation round-trip before reporting a simulated deletion.

- ``elicitation_demo.server`` - server, transports and configuration
- ``elicitation_demo.tools`` - the confirmation-guarded tools
- ``elicitation_demo.cli`` - command-line entry point
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from . import types
from .exceptions import ElicitationError, ToolError, ToolErrorCode
from .server import ElicitationConfig, ElicitationServer, ServerConfig, build_server
from .tool import ToolSpec, extract_tool_spec, tool

try:
    __version__ = version("mcp-elicitation-demo")
except PackageNotFoundError:
    __version__ = "0.0.0+local"


__all__ = [
    "ElicitationConfig",
    "ElicitationError",
    "ElicitationServer",
    "ServerConfig",
    "ToolError",
    "ToolErrorCode",
    "ToolSpec",
    "__version__",
    "build_server",
    "extract_tool_spec",
    "tool",
    "types",
]
