# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Client that answers the server's confirmation request.

When ``customer_delete`` asks for confirmation, this client prints the
request and auto-accepts it. The server sends an empty message, so the prompt
shown falls back to the schema description.

Usage:
    # Terminal 1:
    uv run mcp-elicitation-demo

    # Terminal 2:
    uv run python examples/client.py
"""

import argparse
import asyncio
import logging
from typing import Any

from mcp import ClientSession
from mcp.client.streamable_http import streamablehttp_client
from mcp.shared.context import RequestContext
from mcp.types import ElicitResult


for name in ("mcp", "httpx"):
    logging.getLogger(name).setLevel(logging.WARNING)


async def elicitation_handler(context: RequestContext[ClientSession, Any], params: Any) -> ElicitResult:
    schema = params.requestedSchema or {}
    prompt = params.message or schema.get("description", "")
    print(f"\n{'=' * 50}")
    print("USER INPUT REQUESTED")
    print(f"Prompt: {prompt}")
    print(f"Schema: {schema}")
    print(f"{'=' * 50}")

    # Auto-approve for demo
    return ElicitResult(action="accept", content={"confirm": True})


async def main(url: str, customer_id: str) -> None:
    async with streamablehttp_client(url) as (read_stream, write_stream, _):
        async with ClientSession(read_stream, write_stream, elicitation_callback=elicitation_handler) as session:
            init = await session.initialize()
            print(f"Connected to: {init.serverInfo.name}")

            result = await session.call_tool("customer_delete", {"customerId": customer_id})
            for block in result.content:
                print(f"Result: {getattr(block, 'text', block)}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Call customer_delete on the elicitation demo server")
    parser.add_argument("--url", default="http://127.0.0.1:3142/mcp")
    parser.add_argument("--customer-id", default="123")
    args = parser.parse_args()

    asyncio.run(main(args.url, args.customer_id))
