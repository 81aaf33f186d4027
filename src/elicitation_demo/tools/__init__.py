# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Tools exposed by the elicitation demo server."""

from .customer_delete import CustomerDeleteArgs, customer_delete

__all__ = ["CustomerDeleteArgs", "customer_delete"]
