"""Unit tests for main.py -- the uvicorn launcher.

Covers:
- defaults come from settings (port 3000)
- --host / --port override settings
- invalid configuration exits 1 without starting the server
"""

from __future__ import annotations

from unittest.mock import patch

import main


def test_runs_uvicorn_with_settings_defaults(settings):
    with patch.object(main, "get_settings", return_value=settings), patch.object(main.uvicorn, "run") as run:
        assert main.main([]) == 0
    run.assert_called_once()
    _, kwargs = run.call_args
    assert run.call_args.args == ("asgi:app",)
    assert kwargs["port"] == 3000
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["reload"] is False


def test_cli_overrides(settings):
    with patch.object(main, "get_settings", return_value=settings), patch.object(main.uvicorn, "run") as run:
        main.main(["--host", "0.0.0.0", "--port", "8080", "--reload"])
    _, kwargs = run.call_args
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 8080
    assert kwargs["reload"] is True


def test_invalid_configuration_exits_1(capsys):
    with patch.object(main, "get_settings", side_effect=ValueError("ACCESS_TOKEN_SECRET is required")), patch.object(
        main.uvicorn, "run"
    ) as run:
        assert main.main([]) == 1
    run.assert_not_called()
    assert "ACCESS_TOKEN_SECRET" in capsys.readouterr().err
