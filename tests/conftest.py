"""Shared fixtures: isolated config directory, in-memory keyring, recorded HTTP."""

import json
import os

import httpx
import pytest
from keyring.backend import KeyringBackend
from keyring.errors import PasswordDeleteError

from clickup_cli import config
from clickup_cli.client import ClickUpClient
from clickup_cli.secret_store import SecretStore

BASE_URL = "https://api.test/api"


class MemoryKeyring(KeyringBackend):
    """Keyring backend that keeps passwords in a dict."""

    priority = 1

    def __init__(self):
        super().__init__()
        self.data = {}

    def get_password(self, service, username):
        return self.data.get((service, username))

    def set_password(self, service, username, password):
        self.data[(service, username)] = password

    def delete_password(self, service, username):
        try:
            del self.data[(service, username)]
        except KeyError:
            raise PasswordDeleteError("Password not found") from None


class Recorder:
    """httpx.MockTransport handler that records requests and replays one response."""

    def __init__(self, status=200, payload=None, body=None):
        self.status = status
        self.payload = {} if payload is None else payload
        self.body = body
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if self.body is not None:
            return httpx.Response(self.status, content=self.body)
        return httpx.Response(self.status, json=self.payload)

    @property
    def last(self):
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def json(self):
        return json.loads(self.last.content)


def no_io(request):
    raise AssertionError(f"unexpected request: {request.method} {request.url}")


def make_client(handler, workspace_id=None, api_key="pk_test"):
    return ClickUpClient(
        api_key,
        workspace_id=workspace_id,
        base_url=BASE_URL,
        http_transport=httpx.MockTransport(handler),
    )


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep CLICKUP_* variables and the real config directory out of tests."""
    for name in list(os.environ):
        if name.startswith("CLICKUP_"):
            monkeypatch.delenv(name)
    config_dir = tmp_path / "config" / "clickup-cli"
    monkeypatch.setattr(config, "get_user_config_dir", lambda: config_dir)
    return config_dir


@pytest.fixture
def memory_keyring():
    return MemoryKeyring()


@pytest.fixture
def memory_store(memory_keyring):
    return SecretStore(memory_keyring)
