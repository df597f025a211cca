"""Tests for the typed AppConfig dataclass."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from itg_buddy.config import (
    DEFAULT_COMMAND_PREFIX,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_ENDPOINT_ADDRESS,
    AppConfig,
)

_ENV_KEYS = [
    "DISCORD_KEY",
    "ADD_SONG_CHANNEL_ID",
    "ITG_ENDPOINT_ADDRESS",
    "ITG_CONNECT_TIMEOUT",
    "COMMAND_PREFIX",
    "ITG_CALL_TIMEOUT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestAppConfig:
    def test_defaults(self):
        c = AppConfig()
        assert c.discord_key == ""
        assert c.add_song_channel_id == ""
        assert c.endpoint_address == DEFAULT_ENDPOINT_ADDRESS
        assert c.connect_timeout == DEFAULT_CONNECT_TIMEOUT
        assert c.command_prefix == DEFAULT_COMMAND_PREFIX

    def test_from_env(self, clean_env):
        clean_env.setenv("DISCORD_KEY", " secret ")
        clean_env.setenv("ADD_SONG_CHANNEL_ID", "1234567890\n")
        clean_env.setenv("ITG_ENDPOINT_ADDRESS", "http://songs:50051")
        clean_env.setenv("ITG_CONNECT_TIMEOUT", "2.5")
        clean_env.setenv("COMMAND_PREFIX", "?")
        c = AppConfig.from_env()
        assert c.discord_key == "secret"
        assert c.add_song_channel_id == "1234567890"
        assert c.endpoint_address == "http://songs:50051"
        assert c.connect_timeout == 2.5
        assert c.command_prefix == "?"

    def test_from_env_defaults(self, clean_env):
        c = AppConfig.from_env()
        assert c.endpoint_address == DEFAULT_ENDPOINT_ADDRESS
        assert c.connect_timeout == DEFAULT_CONNECT_TIMEOUT
        assert c.command_prefix == "!"

    @pytest.mark.parametrize("raw", ["abc", "0", "-3"])
    def test_invalid_timeout_falls_back(self, clean_env, raw):
        clean_env.setenv("ITG_CONNECT_TIMEOUT", raw)
        assert AppConfig.from_env().connect_timeout == DEFAULT_CONNECT_TIMEOUT

    def test_missing(self):
        assert AppConfig().missing() == ["DISCORD_KEY", "ADD_SONG_CHANNEL_ID"]
        assert AppConfig(discord_key="k").missing() == ["ADD_SONG_CHANNEL_ID"]
        assert AppConfig(discord_key="k", add_song_channel_id="1").missing() == []

    def test_frozen(self):
        c = AppConfig(add_song_channel_id="1")
        with pytest.raises(Exception):
            c.add_song_channel_id = "2"

    def test_call_timeout(self, clean_env):
        assert AppConfig.from_env().call_timeout is None
        clean_env.setenv("ITG_CALL_TIMEOUT", "30")
        assert AppConfig.from_env().call_timeout == 30.0

    def test_connect_timeout_default_shared_with_dispatcher(self):
        from itg_buddy.domain import dispatch

        assert DEFAULT_CONNECT_TIMEOUT is dispatch.DEFAULT_CONNECT_TIMEOUT


# ---------------------------------------------------------------------------
# .env discovery — run in a fresh interpreter so config is imported from cwd
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[1]

_SCRIPT = "from itg_buddy.config import AppConfig\nprint(AppConfig.from_env().missing())\n"


def _run_in(workdir: Path, **extra_env) -> str:
    env = {k: v for k, v in os.environ.items() if k not in _ENV_KEYS + ["ITG_BUDDY_ENV_FILE"]}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))
    env.update(extra_env)
    script = workdir / "show_missing.py"
    script.write_text(_SCRIPT)
    proc = subprocess.run(
        [sys.executable, str(script)],
        cwd=str(workdir),
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )
    assert proc.returncode == 0, proc.stderr
    return proc.stdout.strip()


class TestEnvFileDiscovery:
    def test_env_in_working_directory_is_loaded(self, tmp_path):
        (tmp_path / ".env").write_text("DISCORD_KEY=tok\nADD_SONG_CHANNEL_ID=42\n")
        assert _run_in(tmp_path) == "[]"

    def test_env_file_override(self, tmp_path):
        (tmp_path / "bot.env").write_text("DISCORD_KEY=tok\nADD_SONG_CHANNEL_ID=42\n")
        assert _run_in(tmp_path, ITG_BUDDY_ENV_FILE="bot.env") == "[]"

    def test_no_env_file(self, tmp_path):
        assert _run_in(tmp_path) == "['DISCORD_KEY', 'ADD_SONG_CHANNEL_ID']"
