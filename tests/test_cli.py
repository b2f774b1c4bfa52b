"""End-to-end CLI runs with typer's CliRunner and a mocked HTTP layer."""

import asyncio
import json
import logging
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from clickup_cli import __version__, config
from clickup_cli.cli import app
from clickup_cli.client import ClickUpClient
from clickup_cli.errors import SecretNotFoundError
from clickup_cli.secret_store import SecretStore

from conftest import Recorder, make_client

runner = CliRunner()

TASKS = {
    "tasks": [
        {
            "id": "t1",
            "name": "Write docs",
            "status": {"status": "in progress"},
            "priority": {"id": "2", "priority": "high"},
            "due_date": "1700000000000",
            "url": "https://app.clickup.com/t/t1",
        },
        {"id": "t2", "name": "Tabs\tand\nnewlines"},
    ]
}


@pytest.fixture(autouse=True)
def restore_logging():
    """The root callback reconfigures logging against CliRunner's streams."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def api(monkeypatch):
    """Route every command's client through a Recorder; returns the Recorder."""
    rec = Recorder()

    def from_env(cls, *, workspace_id=None, **kwargs):
        return make_client(rec, workspace_id=config.resolve_workspace_id(workspace_id))

    monkeypatch.setattr(ClickUpClient, "from_env", classmethod(from_env))
    return rec


@pytest.fixture
def store(monkeypatch, memory_store):
    monkeypatch.setattr(SecretStore, "open", lambda *args, **kwargs: memory_store)
    return memory_store


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"clickup-cli {__version__}"


def test_version_json():
    result = runner.invoke(app, ["--json", "version"])
    assert json.loads(result.output) == {"version": __version__}


def test_json_and_plain_conflict():
    result = runner.invoke(app, ["--json", "--plain", "version"])
    assert result.exit_code == 1
    assert "cannot combine --json and --plain" in result.output


def test_env_toggle_selects_json(monkeypatch):
    monkeypatch.setenv("CLICKUP_JSON", "yes")
    result = runner.invoke(app, ["version"])
    assert json.loads(result.output)["version"] == __version__


def test_tasks_list_plain(api):
    api.payload = TASKS
    result = runner.invoke(app, ["--plain", "tasks", "list", "--list", "901", "--status", "in progress"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "ID\tNAME\tSTATUS\tPRIORITY\tDUE_DATE\tURL",
        "t1\tWrite docs\tin progress\thigh\t1700000000000\thttps://app.clickup.com/t/t1",
        "t2\tTabs and newlines\t\t\t\t",
    ]
    assert api.last.url.path == "/api/v2/list/901/task"
    assert b"statuses[]=in%20progress" in api.last.url.query


def test_tasks_list_json_keeps_payload(api):
    api.payload = TASKS
    result = runner.invoke(app, ["--json", "tasks", "list", "--list", "901"])
    data = json.loads(result.output)
    assert [t["id"] for t in data["tasks"]] == ["t1", "t2"]


def test_tasks_list_human(api):
    api.payload = {"tasks": []}
    result = runner.invoke(app, ["tasks", "list", "--list", "901"])
    assert result.exit_code == 0
    assert "No tasks found." in result.output


def test_task_update_assignees(api):
    api.payload = {"id": "t1"}
    result = runner.invoke(app, [
        "--json", "tasks", "update", "t1", "--assignee", "123", "--unassign", "456",
    ])
    assert result.exit_code == 0, result.output
    assert api.json() == {"assignees": {"add": [123], "rem": [456]}}


def test_delete_confirmation_json(api):
    result = runner.invoke(app, ["--json", "tasks", "delete", "t1"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "status": "success", "message": "Task t1 deleted", "task_id": "t1",
    }
    assert api.last.method == "DELETE"


def test_delete_confirmation_plain(api):
    result = runner.invoke(app, ["--plain", "tasks", "delete", "t1"])
    assert result.output.splitlines() == ["STATUS\tTASK_ID", "success\tt1"]


def test_unauthorized_exits_3(api):
    api.status, api.payload = 401, {"err": "Token invalid", "ECODE": "OAUTH_025"}
    result = runner.invoke(app, ["tasks", "get", "t1"])
    assert result.exit_code == 3
    assert "Error: get task: ClickUp API error 401: Token invalid (OAUTH_025)" in result.output
    assert "auth set-key" in result.output


def test_server_error_exits_2(api):
    api.status, api.payload = 500, {"err": "boom"}
    result = runner.invoke(app, ["tasks", "get", "t1"])
    assert result.exit_code == 2
    assert "Error:" in result.output


def test_move_without_workspace_exits_1(api):
    result = runner.invoke(app, ["tasks", "move", "t1", "l2"])
    assert result.exit_code == 1
    assert "workspace ID required" in result.output
    assert api.requests == []


def test_move_with_workspace_flag(api):
    result = runner.invoke(app, ["--workspace", "9001", "tasks", "move", "t1", "l2"])
    assert result.exit_code == 0, result.output
    assert api.last.url.path == "/api/v3/workspaces/9001/tasks/t1/home_list/l2"


def test_missing_credentials_exit_3(store):
    result = runner.invoke(app, ["tasks", "get", "t1"])
    assert result.exit_code == 3
    assert "no credentials found" in result.output


def test_keyring_opens_outside_event_loop(monkeypatch):
    """Blocking keyring backends are opened before asyncio.run starts the loop."""
    loop_running = []

    def open_store(*args, **kwargs):
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            loop_running.append(False)
        else:
            loop_running.append(True)
        raise SecretNotFoundError("read API key: secret not found in keyring")

    monkeypatch.setattr(SecretStore, "open", open_store)
    result = runner.invoke(app, ["tasks", "get", "t1"])
    assert result.exit_code == 3
    assert loop_running == [False]


def test_search_needs_team(api):
    result = runner.invoke(app, ["tasks", "search"])
    assert result.exit_code == 1
    assert "no team ID configured" in result.output


def test_search_uses_team_from_env(api, monkeypatch):
    monkeypatch.setenv("CLICKUP_TEAM_ID", "9001")
    api.payload = {"tasks": []}
    result = runner.invoke(app, ["--json", "tasks", "search", "--status", "open"])
    assert result.exit_code == 0, result.output
    assert api.last.url.path == "/api/v2/team/9001/task"
    assert api.last.url.query == b"statuses[]=open"


def test_set_key_from_stdin(store):
    result = runner.invoke(app, ["auth", "set-key"], input="pk_from_stdin\n")
    assert result.exit_code == 0, result.output
    assert store.get_api_key() == "pk_from_stdin"


def test_set_key_argument_warns(store):
    result = runner.invoke(app, ["auth", "set-key", "pk_arg"])
    assert result.exit_code == 0
    assert "shell history" in result.output
    assert store.get_api_key() == "pk_arg"


def test_set_key_empty(store):
    result = runner.invoke(app, ["auth", "set-key"], input="\n")
    assert result.exit_code == 1
    assert "API key cannot be empty" in result.output


def test_auth_status_json(store):
    store.set_api_key("pk_1234567890")
    result = runner.invoke(app, ["--json", "auth", "status"])
    info = json.loads(result.output)
    assert info["has_key"] is True
    assert info["env_override"] is False
    assert info["key_redacted"] == "pk_1...7890"


def test_auth_status_env_override(store, monkeypatch):
    monkeypatch.setenv("CLICKUP_API_KEY", "pk_env")
    result = runner.invoke(app, ["auth", "status"])
    assert "Using CLICKUP_API_KEY" in result.output


def test_auth_remove(store):
    store.set_api_key("pk_x")
    result = runner.invoke(app, ["auth", "remove"])
    assert result.exit_code == 0
    assert not store.has_key()


def test_set_team_writes_config():
    result = runner.invoke(app, ["--json", "auth", "set-team", "9001"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["team_id"] == "9001"
    assert config.load_config().team_id == "9001"


def test_oauth_token_without_key():
    rec = Recorder(payload={"access_token": "tok_123"})

    def anonymous(api_key, **kwargs):
        assert api_key == ""
        return make_client(rec, api_key=api_key)

    with patch("clickup_cli.cli.common.ClickUpClient", side_effect=anonymous):
        result = runner.invoke(app, [
            "--plain", "auth", "oauth-token",
            "--client-id", "MYID", "--client-secret", "MYSECRET", "--code", "MYCODE",
        ])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["ACCESS_TOKEN", "tok_123"]
    assert "Authorization" not in rec.last.headers


def test_chat_messages_prints_cursor_hint(api):
    api.payload = {"data": [], "pagination": {"next_page_token": "nxt"}}
    result = runner.invoke(app, ["--workspace", "9001", "chat", "messages", "ch1"])
    assert result.exit_code == 0, result.output
    assert "Next page: --cursor nxt" in result.output


def test_members_list_plain(api, monkeypatch):
    monkeypatch.setenv("CLICKUP_TEAM_ID", "9001")
    api.payload = {"team": {"members": [{"user": {"id": 1, "username": "ana", "email": "a@x.io"}}]}}
    result = runner.invoke(app, ["--plain", "members", "list"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[1].startswith("1\tana")
