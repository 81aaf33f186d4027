# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Protocol types used by the elicitation demo.

Thin re-export of the reference SDK models so call sites import from one place.
"""

from mcp.types import (
    INTERNAL_ERROR,
    METHOD_NOT_FOUND,
    ClientCapabilities,
    ElicitationCapability,
    ElicitRequest,
    ElicitResult,
    ErrorData,
    ServerRequest,
    TextContent,
    Tool,
)

__all__ = [
    "INTERNAL_ERROR",
    "METHOD_NOT_FOUND",
    "ClientCapabilities",
    "ElicitationCapability",
    "ElicitRequest",
    "ElicitResult",
    "ErrorData",
    "ServerRequest",
    "TextContent",
    "Tool",
]
