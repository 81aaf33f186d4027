# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Customer deletion guarded by a user confirmation.

The tool asks the client, via ``elicitation/create``, for a boolean
``confirm`` field and reports a simulated deletion only when the user
confirms. Nothing is actually deleted.

The prompt message is deliberately empty: clients must fall back to the
schema description when rendering the prompt.

See: https://modelcontextprotocol.io/specification/2025-06-18/client/elicitation
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .. import types
from ..exceptions import ElicitationError
from ..tool import Elicitor, tool
from ..utils import get_logger


_logger = get_logger("elicitation_demo.tools.customer_delete")

CONFIRM_FIELD = "confirm"
CONFIRM_DESCRIPTION = "Confirm the deletion of the data."

CONFIRMATION_MESSAGE = ""

CONFIRMATION_SCHEMA: dict[str, Any] = {
    "type": "object",
    "description": CONFIRM_DESCRIPTION,
    "properties": {
        CONFIRM_FIELD: {"type": "boolean", "description": CONFIRM_DESCRIPTION},
    },
    "required": [CONFIRM_FIELD],
}


class CustomerDeleteArgs(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(alias="customerId", description="Customer ID to delete")


def coerce_confirmation(value: Any) -> bool:
    """Interpret a submitted ``confirm`` value.

    Booleans are taken as-is. Anything else counts as confirmed only when its
    text, trimmed and compared case-insensitively, is ``"yes"``; so
    ``"true"`` and ``"1"`` are not confirmations.
    """
    if isinstance(value, bool):
        return value
    text = value if isinstance(value, str) else str(value)
    return text.strip().casefold() == "yes"


def is_confirmed(result: types.ElicitResult | None) -> bool:
    """Decline, cancel and a missing field all resolve to not confirmed."""
    if result is None or result.action != "accept":
        return False
    content = result.content or {}
    if CONFIRM_FIELD not in content:
        return False
    return coerce_confirmation(content[CONFIRM_FIELD])


def deleted_message(customer_id: str) -> str:
    return f"Customer {customer_id} deleted."


def cancelled_message(customer_id: str) -> str:
    return f"Deletion cancelled for {customer_id}."


@tool(arguments=CustomerDeleteArgs, name="customer_delete", description="Delete a customer after user confirmation.")
async def customer_delete(args: CustomerDeleteArgs, elicit: Elicitor) -> str:
    _logger.info("Requesting deletion confirmation for customer %s", args.customer_id)
    try:
        result = await elicit(CONFIRMATION_MESSAGE, CONFIRMATION_SCHEMA)
    except Exception as exc:
        raise ElicitationError(exc) from exc

    if is_confirmed(result):
        _logger.info("Deletion confirmed for customer %s", args.customer_id)
        return deleted_message(args.customer_id)

    _logger.info("Deletion cancelled for customer %s (action=%s)", args.customer_id, result.action if result else None)
    return cancelled_message(args.customer_id)


__all__ = [
    "CONFIRMATION_MESSAGE",
    "CONFIRMATION_SCHEMA",
    "CustomerDeleteArgs",
    "coerce_confirmation",
    "customer_delete",
    "is_confirmed",
]
