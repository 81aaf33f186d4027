# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Capability services used by the server."""

from .elicitation import ElicitationService

__all__ = ["ElicitationService"]
