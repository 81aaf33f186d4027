# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Utility helpers for the elicitation demo."""

from .logger import cap_noisy_loggers, configure_logging, get_logger

__all__ = ["cap_noisy_loggers", "configure_logging", "get_logger"]
