# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Server entry points and configuration."""

from .app import ElicitationServer, build_server
from .config import ElicitationConfig, ServerConfig

__all__ = ["ElicitationConfig", "ElicitationServer", "ServerConfig", "build_server"]
