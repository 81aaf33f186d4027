# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Server surface built on the reference SDK.

``ElicitationServer`` extends the low-level ``mcp`` server with:

* a small tool registry wired to ``tools/list`` and ``tools/call``
* an elicitation service tools use to ask the user for input mid-call
* transport helpers for Streamable HTTP and STDIO
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from mcp.server.lowlevel.server import Server
from pydantic import ValidationError

from .. import types
from ..exceptions import ToolError, ToolErrorCode
from ..tool import ToolSpec, extract_tool_spec
from ..utils import cap_noisy_loggers, get_logger
from .config import SERVER_NAME, SERVER_VERSION, ServerConfig
from .services import ElicitationService


if TYPE_CHECKING:
    from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
    from starlette.types import ASGIApp, Receive, Scope, Send


class ElicitationServer(Server[Any, Any]):
    """MCP server exposing confirmation-guarded tools."""

    def __init__(
        self,
        name: str = SERVER_NAME,
        *,
        version: str | None = SERVER_VERSION,
        instructions: str | None = None,
        config: ServerConfig | None = None,
    ) -> None:
        super().__init__(name, version=version, instructions=instructions)
        self.config = config or ServerConfig()
        self._logger = get_logger(f"elicitation_demo.server.{name}")
        self._tool_specs: dict[str, ToolSpec] = {}
        self.elicitation = ElicitationService(timeout=self.config.elicitation.timeout)

        self.list_tools()(self._list_tools)
        self.call_tool()(self._call_tool)

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------

    @property
    def tool_names(self) -> list[str]:
        return sorted(self._tool_specs)

    def collect(self, *fns: Callable[..., Any]) -> None:
        """Register functions decorated with ``@tool``."""
        for fn in fns:
            spec = extract_tool_spec(fn)
            if spec is None:
                raise ValueError(f"{fn!r} is not decorated with @tool")
            self._tool_specs[spec.name] = spec
            self._logger.debug("Registered tool %s", spec.name)

    async def request_elicitation(self, message: str, requested_schema: dict[str, Any]) -> types.ElicitResult:
        return await self.elicitation.request_elicitation(message, requested_schema)

    async def invoke_tool(self, name: str, arguments: dict[str, Any] | None = None) -> str:
        spec = self._tool_specs.get(name)
        if spec is None:
            raise ToolError(f"Unknown tool '{name}'", code=ToolErrorCode.NOT_FOUND)

        try:
            args = spec.arguments.model_validate(arguments or {})
        except ValidationError as exc:
            raise ToolError(f"Invalid arguments for '{name}': {exc}", code=ToolErrorCode.INVALID_INPUT) from exc

        return await spec.fn(args, self.request_elicitation)

    async def _list_tools(self) -> list[types.Tool]:
        return [self._tool_specs[name].to_tool() for name in self.tool_names]

    async def _call_tool(self, name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        try:
            text = await self.invoke_tool(name, arguments)
        except ToolError as exc:
            self._logger.warning("Tool %s failed [%s]: %s", name, exc.code, exc)
            raise
        return [types.TextContent(type="text", text=text)]

    # ------------------------------------------------------------------
    # Transport helpers
    # ------------------------------------------------------------------

    async def serve(self, *, transport: str | None = None, **kwargs: Any) -> None:
        """Dispatch to a transport-specific serve helper."""
        selected = (transport or self.config.transport).lower()
        if selected == "stdio":
            return await self.serve_stdio(**kwargs)
        if selected in {"http", "shttp", "streamable-http", "streamable_http"}:
            return await self.serve_streamable_http(**kwargs)

        raise ValueError(f"Unsupported transport '{selected}'.")

    async def serve_stdio(self, *, raise_exceptions: bool = False) -> None:
        """Run the server over STDIO."""
        from mcp.server.stdio import stdio_server

        init_options = self.create_initialization_options()

        async with stdio_server() as (read_stream, write_stream):
            self._logger.info("STDIO transport running")
            await self.run(read_stream, write_stream, init_options, raise_exceptions=raise_exceptions)

    def create_http_app(self) -> ASGIApp:
        """Build the Starlette app serving Streamable HTTP at ``config.path``."""
        from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
        from starlette.applications import Starlette
        from starlette.routing import Route

        config = self.config
        session_manager = StreamableHTTPSessionManager(
            app=self,
            event_store=None,
            json_response=False,
            stateless=False,
        )

        @asynccontextmanager
        async def lifespan(app: Starlette):
            async with session_manager.run():
                self._logger.info(
                    "MCP server listening on http://%s:%s%s", config.host, config.port, config.path
                )
                yield

        starlette_app: ASGIApp = Starlette(
            debug=False,
            routes=[Route(config.path, endpoint=_StreamableHTTPEndpoint(session_manager))],
            lifespan=lifespan,
        )

        if config.allow_origins:
            from starlette.middleware.cors import CORSMiddleware

            starlette_app = CORSMiddleware(
                starlette_app,
                allow_origins=list(config.allow_origins),
                allow_methods=["GET", "POST", "DELETE"],
                allow_headers=["*"],
                expose_headers=["Mcp-Session-Id"],
            )

        return starlette_app

    async def serve_streamable_http(self, *, uvicorn_kwargs: dict[str, Any] | None = None) -> None:
        """Serve the MCP server over the Streamable HTTP transport."""
        import uvicorn

        config = uvicorn.Config(
            app=self.create_http_app(),
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level,
            **(uvicorn_kwargs or {}),
        )
        # uvicorn.Config resets its loggers to log_level
        cap_noisy_loggers()
        server = uvicorn.Server(config)
        await server.serve()


class _StreamableHTTPEndpoint:
    """ASGI endpoint forwarding to the session manager.

    Used as a plain ASGI app so the route matches the exact path without a
    trailing-slash redirect.
    """

    def __init__(self, session_manager: StreamableHTTPSessionManager) -> None:
        self._session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self._session_manager.handle_request(scope, receive, send)


def build_server(config: ServerConfig | None = None) -> ElicitationServer:
    """Create the demo server with ``customer_delete`` registered."""
    from ..tools import customer_delete

    server = ElicitationServer(config=config)
    server.collect(customer_delete)
    return server


__all__ = ["ElicitationServer", "build_server"]
