"""Config directory, config.json round-trips and flag/env/file resolution."""

import json
import os
import stat
import sys
from pathlib import Path

import pytest

from clickup_cli import config
from clickup_cli.errors import ConfigError

# Captured before the autouse fixture redirects the config directory.
real_config_dir = config.get_user_config_dir


def test_config_dir_linux_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert real_config_dir() == tmp_path / "clickup-cli"


def test_config_dir_linux_default(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    assert real_config_dir() == tmp_path / ".config" / "clickup-cli"


def test_config_dir_macos(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    assert real_config_dir() == tmp_path / "Library" / "Application Support" / "clickup-cli"


def test_config_dir_windows_needs_appdata(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.delenv("APPDATA", raising=False)
    with pytest.raises(ConfigError, match="APPDATA"):
        real_config_dir()


def test_missing_or_blank_file_is_empty(isolated_env):
    assert config.load_config() == config.FileConfig()

    isolated_env.mkdir(parents=True)
    (isolated_env / "config.json").write_text("  \n")
    assert config.load_config() == config.FileConfig()


def test_bad_file_raises(isolated_env):
    isolated_env.mkdir(parents=True)
    (isolated_env / "config.json").write_text("{not json")
    with pytest.raises(ConfigError, match="parse config"):
        config.load_config()


def test_save_merges_and_restricts_permissions(isolated_env):
    isolated_env.mkdir(parents=True)
    (isolated_env / "config.json").write_text(json.dumps({"theme": "dark", "team_id": "1"}))

    path = config.save_config(team_id=" 9001 ", workspace_id=None)

    assert json.loads(path.read_text()) == {"theme": "dark", "team_id": "9001"}
    assert config.load_config().team_id == "9001"
    if os.name == "posix":
        assert stat.S_IMODE(path.stat().st_mode) == 0o600


def test_save_rejects_non_object(isolated_env):
    isolated_env.mkdir(parents=True)
    (isolated_env / "config.json").write_text("[1, 2]")
    with pytest.raises(ConfigError, match="expected a JSON object"):
        config.save_config(team_id="1")


def test_keyring_dir_is_created(isolated_env):
    path = config.ensure_keyring_dir()
    assert path == isolated_env / "keyring"
    assert path.is_dir()


def test_resolution_order(monkeypatch):
    """Flag beats environment, environment beats config file."""
    config.save_config(team_id="from-file", workspace_id="ws-file")
    assert config.resolve_team_id() == "from-file"
    assert config.resolve_workspace_id() == "ws-file"

    monkeypatch.setenv("CLICKUP_TEAM_ID", "from-env")
    monkeypatch.setenv("CLICKUP_WORKSPACE_ID", " ws-env ")
    assert config.resolve_team_id() == "from-env"
    assert config.resolve_workspace_id() == "ws-env"

    assert config.resolve_team_id("from-flag") == "from-flag"
    assert config.resolve_team_id("   ") == "from-env"


def test_resolution_with_nothing_configured():
    assert config.resolve_team_id() == ""
    assert config.resolve_workspace_id() == ""


def test_keyring_backend_resolution(monkeypatch):
    assert config.resolve_keyring_backend() == ("auto", "default")

    config.save_config(keyring_backend="File")
    assert config.resolve_keyring_backend() == ("file", "config")

    monkeypatch.setenv("CLICKUP_KEYRING_BACKEND", "KEYCHAIN")
    assert config.resolve_keyring_backend() == ("keychain", "env")
