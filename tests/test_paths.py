import pytest

from clickup_cli.errors import IDRequiredError, WorkspaceIDRequiredError
from clickup_cli.models import ParentType
from clickup_cli.paths import PathBuilder, escape_segment


def test_escape_segment_escapes_reserved_characters():
    """Slashes, question marks and fragments never leak into the path."""
    assert escape_segment("task/with?chars") == "task%2Fwith%3Fchars"
    assert escape_segment("a#b c") == "a%23b%20c"


def test_escape_segment_accepts_integers():
    assert escape_segment(123) == "123"


def test_escape_segment_uses_enum_value():
    assert escape_segment(ParentType.TASK) == "task"
    assert PathBuilder(workspace_id="9001").v3("/{}/{}/attachments", ParentType.LIST, "l1") == (
        "/v3/workspaces/9001/list/l1/attachments"
    )


@pytest.mark.parametrize("value", ["", "   ", "\t"])
def test_escape_segment_rejects_blank(value):
    with pytest.raises(IDRequiredError, match="id is required"):
        escape_segment(value)


def test_v2_prefix_and_escaping():
    paths = PathBuilder()
    assert paths.v2("/task/{}/comment", "abc") == "/v2/task/abc/comment"
    assert paths.v2("/list/{}/task", "list 1") == "/v2/list/list%201/task"


def test_v2_template_without_leading_slash():
    assert PathBuilder().v2("team/{}", "9") == "/v2/team/9"


def test_v2_collapses_repeated_slashes():
    assert PathBuilder().v2("//team//{}/", "9") == "/v2/team/9/"


def test_v3_requires_workspace():
    """v3 paths fail locally when no workspace ID is configured."""
    with pytest.raises(WorkspaceIDRequiredError, match="CLICKUP_WORKSPACE_ID"):
        PathBuilder().v3("/chat/channels")
    with pytest.raises(WorkspaceIDRequiredError):
        PathBuilder(workspace_id="   ").v3("/chat/channels")


def test_v3_prefixes_escaped_workspace():
    paths = PathBuilder(workspace_id=" 9001 ")
    assert paths.workspace_id == "9001"
    assert (
        paths.v3("/tasks/{}/home_list/{}", "task-1", "list/2")
        == "/v3/workspaces/9001/tasks/task-1/home_list/list%2F2"
    )


def test_v3_blank_argument_is_id_error():
    with pytest.raises(IDRequiredError):
        PathBuilder(workspace_id="9001").v3("/docs/{}", "")
