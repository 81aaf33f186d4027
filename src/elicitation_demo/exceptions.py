# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Exceptions raised by tool implementations."""

from __future__ import annotations

from enum import Enum


class ToolErrorCode(str, Enum):
    """Error codes for tool failures, optimized for LLM pattern-matching."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"
    ELICITATION_FAILED = "ELICITATION_FAILED"
    INTERNAL = "INTERNAL"
    ERROR = "ERROR"


class ToolError(Exception):
    """Exception for tool failures with structured error codes.

    Raised from a tool handler, the message is returned to the client as a
    CallToolResult with isError set:

        @tool(description="Fetch user by ID")
        async def get_user(args: GetUserArgs, elicit: Elicitor) -> str:
            raise ToolError("User not found", code=ToolErrorCode.NOT_FOUND)
    """

    def __init__(self, message: str, *, code: str | ToolErrorCode = ToolErrorCode.ERROR) -> None:
        super().__init__(message)
        self.code = code


class ElicitationError(ToolError):
    """The confirmation round-trip with the client could not be completed.

    Attributes:
        cause: The underlying transport, session or protocol error.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"eliciting failed: {cause}", code=ToolErrorCode.ELICITATION_FAILED)
        self.cause = cause


__all__ = ["ToolError", "ToolErrorCode", "ElicitationError"]
