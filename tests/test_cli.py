# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Entry point argument handling and exit behaviour."""

from __future__ import annotations

from typing import Any

import pytest

from elicitation_demo import cli
from elicitation_demo.server import ElicitationServer


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)


def test_load_config_defaults() -> None:
    cfg = cli.load_config([], environ={})
    assert (cfg.host, cfg.port) == ("127.0.0.1", 3142)
    assert cfg.transport == "streamable-http"


def test_flags_override_environment() -> None:
    cfg = cli.load_config(
        ["--host", "0.0.0.0", "--port", "9000", "--transport", "stdio"],
        environ={"MCP_SERVER_HOST": "10.0.0.1", "MCP_SERVER_PORT": "8080"},
    )
    assert cfg.host == "0.0.0.0"
    assert cfg.port == 9000
    assert cfg.transport == "stdio"


def test_environment_used_without_flags() -> None:
    cfg = cli.load_config(["--log-level", "debug"], environ={"MCP_SERVER_PORT": "8080"})
    assert cfg.port == 8080
    assert cfg.log_level == "debug"


def test_rejects_unknown_transport() -> None:
    with pytest.raises(SystemExit):
        cli.load_config(["--transport", "carrier-pigeon"], environ={})


@pytest.mark.parametrize("flag", ["--json-response", "--stateless"])
def test_no_flags_for_modes_without_elicitation(flag: str) -> None:
    with pytest.raises(SystemExit):
        cli.load_config([flag], environ={})


def test_serve_failure_exits_with_status_1(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    async def failing_serve(self: ElicitationServer, **kwargs: Any) -> None:
        raise OSError("address already in use")

    monkeypatch.setattr(ElicitationServer, "serve", failing_serve)
    monkeypatch.delenv("MCP_SERVER_PORT", raising=False)
    monkeypatch.delenv("MCP_SERVER_HOST", raising=False)

    with pytest.raises(SystemExit) as exc:
        cli.main([])

    assert exc.value.code == 1
    assert "Server failed" in caplog.text


def test_serve_receives_configured_server(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, Any] = {}

    async def fake_serve(self: ElicitationServer, **kwargs: Any) -> None:
        seen["config"] = self.config
        seen["tools"] = self.tool_names

    monkeypatch.setattr(ElicitationServer, "serve", fake_serve)
    monkeypatch.delenv("MCP_SERVER_HOST", raising=False)
    cli.main(["--port", "4000"])

    assert seen["config"].port == 4000
    assert seen["tools"] == ["customer_delete"]
