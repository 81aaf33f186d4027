# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Tool metadata and the ``@tool`` decorator.

A tool is an async callable taking a validated argument model and an
elicitation callable, and returning the text to report back to the client.
The decorator only attaches metadata; registration happens on the server via
``ElicitationServer.collect``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Protocol

from pydantic import BaseModel

from . import types


class Elicitor(Protocol):
    """Callable that asks the client for structured input."""

    def __call__(self, message: str, requested_schema: dict[str, Any]) -> Awaitable[types.ElicitResult]: ...


ToolHandler = Callable[[Any, Elicitor], Awaitable[str]]


@dataclass(slots=True, frozen=True)
class ToolSpec:
    name: str
    description: str
    arguments: type[BaseModel]
    fn: ToolHandler

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool arguments, keyed by their wire aliases."""
        return self.arguments.model_json_schema(by_alias=True)

    def to_tool(self) -> types.Tool:
        return types.Tool(name=self.name, description=self.description, inputSchema=self.input_schema())


_SPEC_ATTR = "__elicitation_demo_tool__"


def tool(
    *, arguments: type[BaseModel], name: str | None = None, description: str | None = None
) -> Callable[[ToolHandler], ToolHandler]:
    """Mark an async function as an MCP tool.

    Usage:
        @tool(arguments=EchoArgs, description="Echo text back")
        async def echo(args: EchoArgs, elicit: Elicitor) -> str:
            return args.text
    """

    def decorator(fn: ToolHandler) -> ToolHandler:
        spec = ToolSpec(
            name=name or fn.__name__,
            description=description or (fn.__doc__ or "").strip(),
            arguments=arguments,
            fn=fn,
        )
        setattr(fn, _SPEC_ATTR, spec)
        return fn

    return decorator


def extract_tool_spec(fn: Callable[..., Any]) -> ToolSpec | None:
    return getattr(fn, _SPEC_ATTR, None)


__all__ = ["Elicitor", "ToolHandler", "ToolSpec", "extract_tool_spec", "tool"]
