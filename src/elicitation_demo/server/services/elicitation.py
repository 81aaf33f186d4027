# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Elicitation capability service for user input requests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import anyio
from mcp.server.lowlevel.server import request_ctx
from mcp.shared.exceptions import McpError
from mcp.shared.message import ServerMessageMetadata

from ... import types
from ...utils import get_logger


if TYPE_CHECKING:
    from mcp.server.session import ServerSession
    from mcp.shared.context import RequestContext


class ElicitationService:
    """Proxy for ``elicitation/create`` requests.

    The request is sent on the session of the tool call currently being
    handled and tagged with that call's request id, so Streamable HTTP routes
    it over the same response stream.

    See: https://modelcontextprotocol.io/specification/2025-06-18/client/elicitation

    Args:
        timeout: Request timeout in seconds, or None to wait on the transport.
    """

    def __init__(self, *, timeout: float | None = None) -> None:
        self._timeout = timeout
        self._logger = get_logger("elicitation_demo.elicitation")

    async def request_elicitation(self, message: str, requested_schema: dict[str, Any]) -> types.ElicitResult:
        ctx = self._current_context()
        session = ctx.session

        if not session.check_client_capability(types.ClientCapabilities(elicitation=types.ElicitationCapability())):
            self._logger.warning("Client does not advertise the elicitation capability")
            raise McpError(
                types.ErrorData(
                    code=types.METHOD_NOT_FOUND, message="Client does not advertise the elicitation capability"
                )
            )

        request = types.ServerRequest(
            types.ElicitRequest.model_validate(
                {
                    "method": "elicitation/create",
                    "params": {"message": message, "requestedSchema": requested_schema},
                }
            )
        )

        try:
            with anyio.fail_after(self._timeout):
                return await session.send_request(
                    request,
                    types.ElicitResult,
                    metadata=ServerMessageMetadata(related_request_id=ctx.request_id),
                )
        except TimeoutError:
            self._logger.warning("Elicitation request timed out after %ss", self._timeout)
            raise McpError(
                types.ErrorData(code=types.INTERNAL_ERROR, message="elicitation request timed out")
            ) from None
        except McpError as exc:
            self._logger.warning("Elicitation request failed: %s", exc)
            raise

    def _current_context(self) -> RequestContext[ServerSession, Any, Any]:
        try:
            return request_ctx.get()
        except LookupError as exc:
            raise RuntimeError("Elicitation requests require an active MCP session") from exc


__all__ = ["ElicitationService"]
