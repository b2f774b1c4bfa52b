"""Credential store: backend planning, the API key slot and the encrypted file backend."""

import threading
import time

import pytest

from clickup_cli import secret_store
from clickup_cli.errors import (
    InvalidBackendError,
    KeyringTimeoutError,
    MissingAPIKeyError,
    NoTTYError,
    SecretNotFoundError,
    SecretStoreError,
)
from clickup_cli.models import KeyringBackend as BackendName
from clickup_cli.secret_store import (
    API_KEY_SLOT,
    SERVICE_NAME,
    BackendPlan,
    FileKeyring,
    SecretStore,
    password_source,
    plan_backend,
)

from conftest import MemoryKeyring

DBUS = {"DBUS_SESSION_BUS_ADDRESS": "unix:path=/run/user/1000/bus"}


# ---------------------------------------------------------------------------
# Backend planning
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "platform, env, requested, expected",
    [
        ("linux", {}, "", BackendPlan(BackendName.FILE, forced_file=True)),
        ("linux", {}, "auto", BackendPlan(BackendName.FILE, forced_file=True)),
        ("linux", DBUS, "auto", BackendPlan(BackendName.AUTO, use_timeout=True)),
        ("linux", DBUS, "file", BackendPlan(BackendName.FILE)),
        ("linux", {}, "keychain", BackendPlan(BackendName.KEYCHAIN)),
        ("darwin", {}, "auto", BackendPlan(BackendName.AUTO)),
        ("darwin", {}, " Keychain ", BackendPlan(BackendName.KEYCHAIN)),
        ("win32", {}, "", BackendPlan(BackendName.AUTO)),
    ],
)
def test_plan_backend(platform, env, requested, expected):
    assert plan_backend(platform, env, requested) == expected


def test_plan_backend_rejects_unknown():
    with pytest.raises(InvalidBackendError, match="expected auto, keychain, or file"):
        plan_backend("linux", {}, "vault")


def test_password_source_prefers_env_value():
    assert password_source("s3cret", is_tty=False)("prompt") == "s3cret"


def test_password_source_prompts_on_tty(monkeypatch):
    monkeypatch.setattr(secret_store.getpass, "getpass", lambda prompt: "typed")
    assert password_source("", is_tty=True)("prompt") == "typed"


def test_password_source_without_tty():
    func = password_source("", is_tty=False)
    with pytest.raises(NoTTYError, match="CLICKUP_KEYRING_PASS"):
        func("prompt")


# ---------------------------------------------------------------------------
# API key slot
# ---------------------------------------------------------------------------

def test_api_key_lifecycle(memory_store, memory_keyring):
    assert not memory_store.has_key()

    memory_store.set_api_key("  pk_123  ")
    assert memory_keyring.data[(SERVICE_NAME, API_KEY_SLOT)] == "pk_123"
    assert memory_store.has_key()
    assert memory_store.get_api_key() == "pk_123"

    memory_store.delete_api_key()
    assert not memory_store.has_key()


def test_delete_missing_key_is_not_an_error(memory_store):
    memory_store.delete_api_key()
    memory_store.delete_api_key()


def test_get_missing_key(memory_store):
    with pytest.raises(SecretNotFoundError, match="not found"):
        memory_store.get_api_key()


@pytest.mark.parametrize("value", ["", "   ", None])
def test_set_empty_key(memory_store, value):
    with pytest.raises(MissingAPIKeyError, match="missing API key"):
        memory_store.set_api_key(value)


def test_generic_secret_bytes(memory_store, memory_keyring):
    payload = b"\x00\xffrefresh-token"
    memory_store.set_secret("oauth_refresh", payload)
    assert memory_keyring.data[(SERVICE_NAME, "oauth_refresh")] != payload
    assert memory_store.get_secret("oauth_refresh") == payload


def test_generic_secret_requires_name(memory_store):
    with pytest.raises(SecretStoreError, match="missing secret key"):
        memory_store.set_secret(" ", b"x")
    with pytest.raises(SecretNotFoundError):
        memory_store.get_secret("absent")


def test_open_uses_resolved_backend(monkeypatch):
    plans = []

    def fake_open_backend(plan, password_func=None):
        plans.append(plan)
        return MemoryKeyring()

    monkeypatch.setattr(secret_store, "open_backend", fake_open_backend)
    monkeypatch.setenv("CLICKUP_KEYRING_BACKEND", "file")

    store = SecretStore.open()
    assert plans == [BackendPlan(BackendName.FILE)]
    assert store.backend_name.endswith("MemoryKeyring")


def test_open_rejects_invalid_backend(monkeypatch):
    monkeypatch.setattr(secret_store, "open_backend", lambda plan: pytest.fail("opened"))
    with pytest.raises(InvalidBackendError):
        SecretStore.open("nope")


# ---------------------------------------------------------------------------
# Encrypted file backend
# ---------------------------------------------------------------------------

def test_file_keyring_round_trip(tmp_path):
    store = SecretStore(FileKeyring(tmp_path, lambda prompt: "hunter2"))
    store.set_api_key("pk_file")

    assert (tmp_path / FileKeyring.filename).exists()
    reopened = SecretStore(FileKeyring(tmp_path, lambda prompt: "hunter2"))
    assert reopened.get_api_key() == "pk_file"


def test_file_keyring_wrong_password(tmp_path):
    SecretStore(FileKeyring(tmp_path, lambda prompt: "hunter2")).set_api_key("pk_file")

    wrong = SecretStore(FileKeyring(tmp_path, lambda prompt: "not-it"))
    with pytest.raises(SecretStoreError, match="incorrect keyring password"):
        wrong.get_api_key()


def test_file_keyring_wrong_password_is_not_a_missing_key(tmp_path):
    SecretStore(FileKeyring(tmp_path, lambda prompt: "hunter2")).set_api_key("pk_file")

    wrong = SecretStore(FileKeyring(tmp_path, lambda prompt: "not-it"))
    with pytest.raises(SecretStoreError, match="incorrect keyring password") as exc:
        wrong.has_key()
    assert not isinstance(exc.value, SecretNotFoundError)


# ---------------------------------------------------------------------------
# Bounded open of the system keyring
# ---------------------------------------------------------------------------

def test_default_backend_open_times_out(monkeypatch):
    release = threading.Event()

    def hanging_backend():
        release.wait(5)
        return MemoryKeyring()

    monkeypatch.setattr(secret_store, "_default_backend", hanging_backend)
    started = time.monotonic()
    try:
        with pytest.raises(KeyringTimeoutError) as exc:
            secret_store._default_backend_with_timeout(0.05)
    finally:
        release.set()

    assert time.monotonic() - started < 1
    message = str(exc.value)
    assert "timed out after 0.05s" in message
    assert "CLICKUP_KEYRING_BACKEND=file" in message
    assert "CLICKUP_KEYRING_PASS" in message


def test_default_backend_open_returns_backend(monkeypatch):
    backend = MemoryKeyring()
    monkeypatch.setattr(secret_store, "_default_backend", lambda: backend)
    assert secret_store._default_backend_with_timeout(1) is backend


def test_default_backend_open_error_propagates(monkeypatch):
    def broken_backend():
        raise SecretStoreError("open keyring: no system keyring available; use the file backend")

    monkeypatch.setattr(secret_store, "_default_backend", broken_backend)
    with pytest.raises(SecretStoreError, match="no system keyring available") as exc:
        secret_store._default_backend_with_timeout(1)
    assert not isinstance(exc.value, KeyringTimeoutError)


def test_open_backend_bounds_dbus_open(monkeypatch):
    release = threading.Event()
    monkeypatch.setattr(secret_store, "_default_backend", lambda: release.wait(5))
    monkeypatch.setattr(secret_store, "KEYRING_OPEN_TIMEOUT", 0.05)
    try:
        with pytest.raises(KeyringTimeoutError):
            secret_store.open_backend(BackendPlan(BackendName.AUTO, use_timeout=True))
    finally:
        release.set()


def test_open_file_backend_in_config_dir(monkeypatch, isolated_env):
    monkeypatch.setenv("CLICKUP_KEYRING_PASS", "pw")
    store = SecretStore.open("file")
    store.set_api_key("pk_cfg")
    assert (isolated_env / "keyring" / FileKeyring.filename).exists()
