# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Logging helpers."""

from __future__ import annotations

import logging
import sys


_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_NOISY_LOGGERS = ("mcp", "httpx", "uvicorn.access")


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under elicitation_demo when relative."""
    if not name.startswith("elicitation_demo") and name != "__main__":
        name = f"elicitation_demo.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int = "info") -> None:
    """Install a single stream handler on the root logger.

    Calling this more than once replaces the handler rather than stacking
    duplicates. Chatty third-party loggers are capped at WARNING.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'")
        level = resolved

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_elicitation_demo", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._elicitation_demo = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level)

    cap_noisy_loggers(level)


def cap_noisy_loggers(level: int | None = None) -> None:
    """Hold chatty third-party loggers at WARNING or the root level, whichever is higher."""
    if level is None:
        level = logging.getLogger().level
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


__all__ = ["cap_noisy_loggers", "configure_logging", "get_logger"]
