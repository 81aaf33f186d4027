# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Tests for ToolError and ElicitationError."""

from __future__ import annotations

import pytest

from elicitation_demo.exceptions import ElicitationError, ToolError, ToolErrorCode


class TestToolErrorBasic:
    """Basic ToolError functionality."""

    def test_defaults_to_error_code(self):
        err = ToolError("something went wrong")
        assert str(err) == "something went wrong"
        assert err.code == "ERROR"

    def test_accepts_string_code(self):
        err = ToolError("not found", code="NOT_FOUND")
        assert err.code == "NOT_FOUND"

    def test_accepts_enum_code(self):
        err = ToolError("bad", code=ToolErrorCode.INVALID_INPUT)
        assert err.code == ToolErrorCode.INVALID_INPUT


class TestElicitationError:
    def test_wraps_cause(self):
        cause = ConnectionResetError("peer went away")
        err = ElicitationError(cause)
        assert err.cause is cause
        assert str(err) == "eliciting failed: peer went away"
        assert err.code == ToolErrorCode.ELICITATION_FAILED

    def test_is_a_tool_error(self):
        with pytest.raises(ToolError):
            raise ElicitationError(RuntimeError("boom"))
