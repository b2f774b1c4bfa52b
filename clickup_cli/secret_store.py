"""Credential storage on top of the ``keyring`` package.

Backends:
    auto      the platform default picked by ``keyring`` (Keychain, Windows
              Credential Locker, Secret Service ...)
    keychain  the macOS Keychain only
    file      an encrypted file under ``<config>/keyring`` (keyrings.alt)

On Linux without a D-Bus session the Secret Service cannot be reached, so
``auto`` becomes ``file``. With a D-Bus session, opening the default
backend is bounded by KEYRING_OPEN_TIMEOUT because an unresponsive Secret
Service otherwise blocks forever.
"""

from __future__ import annotations

import base64
import getpass
import logging
import os
import queue
import sys
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional

import keyring
import keyring.backends.fail
from keyring.backend import KeyringBackend
from keyring.errors import KeyringError, PasswordDeleteError
from keyrings.alt.file import EncryptedKeyring

from clickup_cli import config
from clickup_cli.errors import (
    InvalidBackendError,
    KeyringTimeoutError,
    MissingAPIKeyError,
    NoTTYError,
    SecretNotFoundError,
    SecretStoreError,
)
from clickup_cli.models import KeyringBackend as BackendName

logger = logging.getLogger(__name__)

SERVICE_NAME = config.APP_NAME
API_KEY_SLOT = "api_key"
KEYRING_PASSWORD_ENV = "CLICKUP_KEYRING_PASS"
KEYRING_BACKEND_ENV = "CLICKUP_KEYRING_BACKEND"
KEYRING_OPEN_TIMEOUT = 5.0

PasswordFunc = Callable[[str], str]


# ---------------------------------------------------------------------------
# Backend planning
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BackendPlan:
    backend: BackendName
    use_timeout: bool = False
    forced_file: bool = False


def plan_backend(platform: str, env: Mapping[str, str], requested: str) -> BackendPlan:
    """Decide which backend to open for ``requested`` on ``platform``.

    ``platform`` is a ``sys.platform`` value. Raises InvalidBackendError for
    anything other than auto, keychain or file (blank means auto).
    """
    value = (requested or "").strip().lower() or BackendName.AUTO.value
    try:
        backend = BackendName(value)
    except ValueError:
        raise InvalidBackendError(
            f"invalid keyring backend: {value!r} (expected auto, keychain, or file)"
        ) from None

    if backend is not BackendName.AUTO or not platform.startswith("linux"):
        return BackendPlan(backend)
    if not env.get("DBUS_SESSION_BUS_ADDRESS", ""):
        return BackendPlan(BackendName.FILE, forced_file=True)
    return BackendPlan(BackendName.AUTO, use_timeout=True)


# ---------------------------------------------------------------------------
# Encrypted file backend
# ---------------------------------------------------------------------------

def password_source(password: str, is_tty: bool) -> PasswordFunc:
    """Where the file backend gets its password from.

    The environment wins, then an interactive prompt. Without either, the
    returned function raises NoTTYError when called.
    """
    if password:
        return lambda prompt: password
    if is_tty:
        return getpass.getpass

    def no_tty(prompt: str) -> str:
        raise NoTTYError(
            "no TTY available for keyring file backend password prompt; "
            f"set {KEYRING_PASSWORD_ENV}"
        )

    return no_tty


def default_password_source() -> PasswordFunc:
    return password_source(os.environ.get(KEYRING_PASSWORD_ENV, ""), sys.stdin.isatty())


class FileKeyring(EncryptedKeyring):
    """EncryptedKeyring stored in the clickup-cli keyring directory.

    The password comes from ``password_func`` instead of always prompting.
    """

    def __init__(self, directory: Path, password_func: PasswordFunc) -> None:
        super().__init__()
        self.file_path = str(Path(directory) / self.filename)
        self._password_func = password_func

    def _get_new_password(self) -> str:
        return self._password_func("Set a password for the clickup-cli keyring: ")

    def _unlock(self) -> None:
        self.keyring_key = self._password_func("Password for the clickup-cli keyring: ")
        # keyrings.alt asserts on the decrypted prefix; a bad MAC is a ValueError
        try:
            ref = self.get_password("keyring-setting", "password reference")
        except (ValueError, AssertionError):
            ref = None
        if ref != "password reference value":
            self._lock()
            raise SecretStoreError("open keyring: incorrect keyring password")


# ---------------------------------------------------------------------------
# Opening
# ---------------------------------------------------------------------------

def _default_backend() -> KeyringBackend:
    backend = keyring.get_keyring()
    if isinstance(backend, keyring.backends.fail.Keyring):
        raise SecretStoreError("open keyring: no system keyring available; use the file backend")
    return backend


def _default_backend_with_timeout(timeout: float) -> KeyringBackend:
    results: queue.Queue = queue.Queue(maxsize=1)

    def worker() -> None:
        try:
            results.put((_default_backend(), None))
        except Exception as e:  # handed to the waiting thread
            results.put((None, e))

    threading.Thread(target=worker, name="keyring-open", daemon=True).start()
    try:
        backend, error = results.get(timeout=timeout)
    except queue.Empty:
        raise KeyringTimeoutError(
            f"keyring connection timed out after {timeout:g}s "
            "(D-Bus SecretService may be unresponsive); "
            f"set {KEYRING_BACKEND_ENV}=file and {KEYRING_PASSWORD_ENV}=<password> "
            "to use encrypted file storage instead"
        ) from None
    if error is not None:
        raise error
    return backend


def _keychain_backend() -> KeyringBackend:
    if sys.platform != "darwin":
        raise SecretStoreError("open keyring: keychain backend is only available on macOS")
    from keyring.backends import macOS
    return macOS.Keyring()


def open_backend(plan: BackendPlan, password_func: Optional[PasswordFunc] = None) -> KeyringBackend:
    if plan.backend is BackendName.FILE:
        return FileKeyring(config.ensure_keyring_dir(), password_func or default_password_source())
    if plan.backend is BackendName.KEYCHAIN:
        return _keychain_backend()
    if plan.use_timeout:
        return _default_backend_with_timeout(KEYRING_OPEN_TIMEOUT)
    return _default_backend()


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

class SecretStore:
    """The clickup-cli credential slots inside one keyring backend."""

    def __init__(self, backend: KeyringBackend, service: str = SERVICE_NAME) -> None:
        self._backend = backend
        self._service = service

    @classmethod
    def open(cls, requested: Optional[str] = None) -> "SecretStore":
        """Open the store using CLICKUP_KEYRING_BACKEND, the config file, or auto."""
        source = "argument"
        if requested is None:
            requested, source = config.resolve_keyring_backend()
        plan = plan_backend(sys.platform, os.environ, requested)
        if plan.forced_file:
            logger.info("No D-Bus session bus; using encrypted file keyring")
        logger.debug("Keyring backend %s (from %s), timeout=%s",
                     plan.backend.value, source, plan.use_timeout)
        return cls(open_backend(plan))

    @property
    def backend_name(self) -> str:
        return type(self._backend).__module__ + "." + type(self._backend).__name__

    def get_api_key(self) -> str:
        try:
            value = self._backend.get_password(self._service, API_KEY_SLOT)
        except KeyringError as e:
            raise SecretStoreError(f"read API key: {e}") from e
        if value is None:
            raise SecretNotFoundError("read API key: secret not found in keyring")
        return value

    def set_api_key(self, key: str) -> None:
        key = (key or "").strip()
        if not key:
            raise MissingAPIKeyError()
        try:
            self._backend.set_password(self._service, API_KEY_SLOT, key)
        except KeyringError as e:
            raise SecretStoreError(f"store API key: {e}") from e

    def delete_api_key(self) -> None:
        """Remove the stored API key; a missing key is not an error."""
        try:
            self._backend.delete_password(self._service, API_KEY_SLOT)
        except PasswordDeleteError:
            logger.debug("No API key stored")
        except KeyringError as e:
            raise SecretStoreError(f"delete API key: {e}") from e

    def has_key(self) -> bool:
        try:
            self.get_api_key()
        except SecretNotFoundError:
            return False
        return True

    # Generic secrets are stored base64-encoded so arbitrary bytes survive
    # backends that only hold text.

    def get_secret(self, key: str) -> bytes:
        key = (key or "").strip()
        if not key:
            raise SecretStoreError("missing secret key")
        try:
            value = self._backend.get_password(self._service, key)
        except KeyringError as e:
            raise SecretStoreError(f"read secret: {e}") from e
        if value is None:
            raise SecretNotFoundError(f"read secret: {key} not found in keyring")
        return base64.b64decode(value)

    def set_secret(self, key: str, value: bytes) -> None:
        key = (key or "").strip()
        if not key:
            raise SecretStoreError("missing secret key")
        try:
            self._backend.set_password(self._service, key, base64.b64encode(value).decode("ascii"))
        except KeyringError as e:
            raise SecretStoreError(f"store secret: {e}") from e
