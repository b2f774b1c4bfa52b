"""Per-user configuration: config directory, config.json and value resolution.

The config file is a small JSON document under the platform config
directory. Values there are the last fallback after command-line flags and
CLICKUP_* environment variables.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from clickup_cli.errors import ConfigError

logger = logging.getLogger(__name__)

APP_NAME = "clickup-cli"
CONFIG_FILE = "config.json"
KEYRING_DIR = "keyring"


class FileConfig(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    team_id: Optional[str] = None
    workspace_id: Optional[str] = None
    keyring_backend: Optional[str] = None


# ---------------------------------------------------------------------------
# Locations
# ---------------------------------------------------------------------------

def get_user_config_dir() -> Path:
    """Platform config directory for clickup-cli (not created)."""
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise ConfigError("APPDATA environment variable not set")
        return Path(appdata) / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def _ensure_dir(path: Path) -> Path:
    try:
        path.mkdir(mode=0o700, parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"ensure dir {path}: {e}") from e
    return path


def ensure_config_dir() -> Path:
    return _ensure_dir(get_user_config_dir())


def ensure_keyring_dir() -> Path:
    """``<config>/keyring``, created with mode 0700 for the encrypted file backend."""
    return _ensure_dir(ensure_config_dir() / KEYRING_DIR)


def config_path() -> Path:
    return get_user_config_dir() / CONFIG_FILE


# ---------------------------------------------------------------------------
# Load / save
# ---------------------------------------------------------------------------

def load_config(path: Optional[Path] = None) -> FileConfig:
    """Read config.json. A missing file yields an empty config."""
    path = path or config_path()
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return FileConfig()
    except OSError as e:
        raise ConfigError(f"read config: {e}") from e

    if not raw.strip():
        return FileConfig()
    try:
        return FileConfig.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigError(f"parse config {path}: {e.errors()[0]['msg']}") from e


def save_config(**values: Optional[str]) -> Path:
    """Merge ``values`` into config.json and write it with mode 0600.

    Keys passed as None are left untouched. Unknown keys already present in
    the file are preserved.
    """
    ensure_config_dir()
    path = config_path()

    existing: dict = {}
    if path.exists():
        try:
            existing = json.loads(path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            raise ConfigError(f"read config: {e}") from e
        if not isinstance(existing, dict):
            raise ConfigError(f"parse config {path}: expected a JSON object")

    update = FileConfig(**{k: v for k, v in values.items() if v is not None})
    existing.update(update.model_dump(exclude_none=True))

    try:
        path.write_text(json.dumps(existing, indent=2) + "\n", encoding="utf-8")
        os.chmod(path, 0o600)
    except OSError as e:
        raise ConfigError(f"write config: {e}") from e
    logger.debug("Wrote %s", path)
    return path


# ---------------------------------------------------------------------------
# Resolution: flag -> environment -> config file
# ---------------------------------------------------------------------------

def _resolve(flag: Optional[str], env_var: str, field: str) -> str:
    if flag and flag.strip():
        return flag.strip()
    env = os.environ.get(env_var, "").strip()
    if env:
        return env
    return getattr(load_config(), field) or ""


def resolve_workspace_id(flag: Optional[str] = None) -> str:
    return _resolve(flag, "CLICKUP_WORKSPACE_ID", "workspace_id")


def resolve_team_id(flag: Optional[str] = None) -> str:
    return _resolve(flag, "CLICKUP_TEAM_ID", "team_id")


def resolve_keyring_backend() -> tuple[str, str]:
    """Requested keyring backend and where it came from (env, config or default)."""
    env = os.environ.get("CLICKUP_KEYRING_BACKEND", "").strip().lower()
    if env:
        return env, "env"
    configured = (load_config().keyring_backend or "").strip().lower()
    if configured:
        return configured, "config"
    return "auto", "default"
