"""Tests de configuración (pydantic-settings) y del .env de usuario."""

from __future__ import annotations

import sys

from questionit.core.config import ClientSettings, get_user_env_file, write_user_env_vars
from questionit.core.services.request_builder import PREFIX


def test_defaults(monkeypatch):
    for name in ("QUESTIONIT_TOKEN", "QUESTIONIT_BASE_URL", "QUESTIONIT_APP_KEY"):
        monkeypatch.delenv(name, raising=False)

    settings = ClientSettings(_env_file=None)

    assert settings.base_url == PREFIX
    assert settings.token is None
    assert settings.http_timeout_seconds == 20.0


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("QUESTIONIT_TOKEN", "tok")
    monkeypatch.setenv("QUESTIONIT_BASE_URL", "http://localhost:5000")
    monkeypatch.setenv("QUESTIONIT_HTTP_TIMEOUT_SECONDS", "3.5")

    settings = ClientSettings(_env_file=None)

    assert settings.token == "tok"
    assert settings.base_url == "http://localhost:5000/"
    assert settings.http_timeout_seconds == 3.5


def test_blank_token_is_absent(monkeypatch):
    monkeypatch.setenv("QUESTIONIT_TOKEN", "  ")

    assert ClientSettings(_env_file=None).token is None


def test_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("QUESTIONIT_TOKEN", raising=False)
    env = tmp_path / ".env"
    env.write_text("QUESTIONIT_TOKEN=from-file\nQUESTIONIT_APP_KEY=key\n", encoding="utf-8")

    settings = ClientSettings(_env_file=env)

    assert settings.token == "from-file"
    assert settings.app_key == "key"


def test_write_user_env_vars(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    path = write_user_env_vars({"QUESTIONIT_TOKEN": "tok", "QUESTIONIT_APP_KEY": "key"})
    assert path == get_user_env_file()
    assert path == tmp_path / "questionit" / ".env"

    write_user_env_vars({"QUESTIONIT_TOKEN": None, "QUESTIONIT_BASE_URL": "http://x/"})

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert lines[1:] == ["QUESTIONIT_APP_KEY=key", "QUESTIONIT_BASE_URL=http://x/"]
