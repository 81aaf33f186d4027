# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Command-line entry point.

Usage:
    uv run mcp-elicitation-demo --host 127.0.0.1 --port 3142
    uv run python -m elicitation_demo --transport stdio
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Mapping, Sequence
import sys

from .server import ServerConfig, build_server
from .server.config import TRANSPORTS
from .utils import configure_logging, get_logger


log = get_logger("elicitation_demo.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the MCP elicitation demo server")
    parser.add_argument("--host", default=None, help="host to listen on (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=None, help="port to listen on (default: 3142)")
    parser.add_argument("--transport", default=None, choices=TRANSPORTS, help="transport to use")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error", "critical"],
        help="logging level (default: info)",
    )
    return parser


def load_config(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> ServerConfig:
    """Resolve configuration: flags, then environment, then defaults."""
    args = build_parser().parse_args(argv)
    return ServerConfig.from_env(
        environ,
        host=args.host,
        port=args.port,
        transport=args.transport,
        log_level=args.log_level,
    )


def main(argv: Sequence[str] | None = None) -> None:
    try:
        config = load_config(argv)
    except ValueError as exc:
        log.error("Invalid configuration: %s", exc)
        sys.exit(2)

    configure_logging(config.log_level)
    server = build_server(config)
    log.info("Starting %s with tools: %s", server.name, server.tool_names)

    try:
        asyncio.run(server.serve())
    except KeyboardInterrupt:
        log.info("Server stopped")
    except Exception:
        log.exception("Server failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
