"""Tests for the streamgate CLI entrypoint."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from streamgate.interfaces.cli import cli


class TestParseArgs:
    def test_defaults(self) -> None:
        args = cli._parse_args([])
        assert args.host is None
        assert args.port is None
        assert cli.build_cli_overrides(args) == {}

    def test_overrides(self) -> None:
        args = cli._parse_args(
            [
                "--log-level",
                "DEBUG",
                "--log-format",
                "json",
                "--logo-service-url",
                "https://panel.example.com",
            ]
        )
        assert cli.build_cli_overrides(args) == {
            "log_level": "DEBUG",
            "log_format": "json",
            "logo_service_url": "https://panel.example.com",
        }

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(SystemExit):
            cli._parse_args(["--log-level", "TRACE"])


class TestStart:
    def test_runs_uvicorn_with_built_app(self, monkeypatch: pytest.MonkeyPatch) -> None:
        run = MagicMock()
        monkeypatch.setattr(cli.uvicorn, "run", run)
        monkeypatch.setattr(cli, "configure_logging", MagicMock(return_value={"version": 1}))

        cli.start(["--port", "9000", "--host", "127.0.0.1", "--log-level", "WARNING"])

        run.assert_called_once()
        app = run.call_args.args[0]
        assert app.state.config.log_level == "WARNING"
        assert run.call_args.kwargs["port"] == 9000
        assert run.call_args.kwargs["host"] == "127.0.0.1"
        assert run.call_args.kwargs["log_config"] == {"version": 1}

    def test_missing_config_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(cli.uvicorn, "run", MagicMock())
        with pytest.raises(FileNotFoundError):
            cli.start(["--config", str(tmp_path / "missing.yaml")])
