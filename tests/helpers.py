# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Shared test doubles."""

from __future__ import annotations

from typing import Any

from mcp.server.lowlevel.server import request_ctx
from mcp.shared.context import RequestContext


class DummySession:
    """Stand-in for ``ServerSession`` that records outgoing requests.

    ``result`` is returned from ``send_request``, or raised when it is an
    exception.
    """

    def __init__(self, name: str = "session", result: Any = None, *, capable: bool = True) -> None:
        self.name = name
        self.result = result
        self.capable = capable
        self.requests: list[Any] = []
        self.metadata: list[Any] = []

    def check_client_capability(self, capability: Any) -> bool:
        return self.capable

    async def send_request(
        self,
        request: Any,
        result_type: type[Any],
        request_read_timeout_seconds: Any = None,
        metadata: Any = None,
        progress_callback: Any = None,
    ) -> Any:
        self.requests.append(request)
        self.metadata.append(metadata)
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result


async def run_with_context(session: Any, fn: Any, *args: Any, request_id: str | int = "req-1", **kwargs: Any) -> Any:
    ctx = RequestContext(request_id=request_id, meta=None, session=session, lifespan_context=None)
    token = request_ctx.set(ctx)
    try:
        return await fn(*args, **kwargs)
    finally:
        request_ctx.reset(token)
