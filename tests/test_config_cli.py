from __future__ import annotations

from click.testing import CliRunner

import profile_card.cli as cli_mod
import profile_card.gui.app as gui_app
from profile_card.cli import cli
from profile_card.config import (
    DEFAULT_PORT,
    DEFAULT_REPLY_DELAY,
    DEFAULT_TYPING_DELAY,
    Settings,
    load_settings,
)

_ENV_NAMES = (
    "PROFILE_CARD_HOST",
    "PROFILE_CARD_PORT",
    "PROFILE_CARD_TYPING_DELAY",
    "PROFILE_CARD_REPLY_DELAY",
    "PROFILE_CARD_RAIN_COUNT",
    "PROFILE_CARD_LOG_LEVEL",
)


def _clear_env(monkeypatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_load_settings_defaults(monkeypatch) -> None:
    _clear_env(monkeypatch)
    assert load_settings() == Settings()


def test_load_settings_reads_env(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("PROFILE_CARD_HOST", "0.0.0.0")
    monkeypatch.setenv("PROFILE_CARD_PORT", "9001")
    monkeypatch.setenv("PROFILE_CARD_TYPING_DELAY", "0.5")
    monkeypatch.setenv("PROFILE_CARD_RAIN_COUNT", "10")
    monkeypatch.setenv("PROFILE_CARD_LOG_LEVEL", "debug")

    settings = load_settings()
    assert settings.host == "0.0.0.0"
    assert settings.port == 9001
    assert settings.typing_delay == 0.5
    assert settings.reply_delay == DEFAULT_REPLY_DELAY
    assert settings.rain_count == 10
    assert settings.log_level == "DEBUG"


def test_load_settings_invalid_values_fall_back(monkeypatch, caplog) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("PROFILE_CARD_PORT", "eighty")
    monkeypatch.setenv("PROFILE_CARD_TYPING_DELAY", "-1")

    settings = load_settings()
    assert settings.port == DEFAULT_PORT
    assert settings.typing_delay == DEFAULT_TYPING_DELAY
    assert "PROFILE_CARD_PORT" in caplog.text


def test_cli_serve_passes_settings(monkeypatch) -> None:
    _clear_env(monkeypatch)
    captured = {}

    def _fake_main(settings, reload=False):
        captured["settings"] = settings
        captured["reload"] = reload

    monkeypatch.setattr(gui_app, "main", _fake_main)
    result = CliRunner().invoke(cli, ["serve", "--host", "0.0.0.0", "--port", "9000"])

    assert result.exit_code == 0, result.output
    assert captured["settings"].host == "0.0.0.0"
    assert captured["settings"].port == 9000
    assert captured["reload"] is False


def test_cli_serve_rejects_bad_port(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setattr(gui_app, "main", lambda settings, reload=False: None)
    result = CliRunner().invoke(cli, ["serve", "--port", "70000"])
    assert result.exit_code == 1


def test_cli_chat_runs_until_quit(monkeypatch) -> None:
    _clear_env(monkeypatch)
    result = CliRunner().invoke(
        cli,
        ["chat", "--typing-delay", "0", "--reply-delay", "0"],
        input="hi\n\nquit\n",
    )
    assert result.exit_code == 0, result.output
    assert "contact" in result.output
    assert "bye." in result.output


def test_cli_chat_rejects_negative_delay(monkeypatch) -> None:
    _clear_env(monkeypatch)
    result = CliRunner().invoke(cli, ["chat", "--typing-delay", "-1"])
    assert result.exit_code == 1


def test_cli_serve_bad_port_env_falls_back_to_default(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("PROFILE_CARD_PORT", "eighty")
    captured = {}
    monkeypatch.setattr(
        gui_app, "main", lambda settings, reload=False: captured.setdefault("settings", settings)
    )
    result = CliRunner().invoke(cli, ["serve"])

    assert result.exit_code == 0, result.output
    assert captured["settings"].port == DEFAULT_PORT


def test_cli_chat_bad_delay_env_falls_back_to_default(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("PROFILE_CARD_TYPING_DELAY", "-1")
    monkeypatch.setenv("PROFILE_CARD_REPLY_DELAY", "soon")
    delays = {}

    async def _fake_loop(typing_delay, reply_delay):
        delays["typing"] = typing_delay
        delays["reply"] = reply_delay

    monkeypatch.setattr(cli_mod, "_chat_loop", _fake_loop)
    result = CliRunner().invoke(cli, ["chat"], input="quit\n")

    assert result.exit_code == 0, result.output
    assert delays == {"typing": DEFAULT_TYPING_DELAY, "reply": DEFAULT_REPLY_DELAY}


def test_cli_chat_flags_override_env(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("PROFILE_CARD_TYPING_DELAY", "5")
    delays = {}

    async def _fake_loop(typing_delay, reply_delay):
        delays["typing"] = typing_delay
        delays["reply"] = reply_delay

    monkeypatch.setattr(cli_mod, "_chat_loop", _fake_loop)
    result = CliRunner().invoke(cli, ["chat", "--typing-delay", "0.5"])

    assert result.exit_code == 0, result.output
    assert delays == {"typing": 0.5, "reply": DEFAULT_REPLY_DELAY}


def test_cli_serve_rejects_out_of_range_env_port(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("PROFILE_CARD_PORT", "70000")
    monkeypatch.setattr(gui_app, "main", lambda settings, reload=False: None)
    result = CliRunner().invoke(cli, ["serve"])

    assert result.exit_code == 1
