import pytest
from pydantic import ValidationError

from clickup_cli.models import (
    Comment,
    CreateTaskRequest,
    Task,
    TimeEntry,
    UpdateListRequest,
)


@pytest.mark.parametrize("raw, expected", [(123, "123"), ("123", "123"), (9.0, "9")])
def test_flexible_ids(raw, expected):
    """IDs decode from JSON numbers or strings into the same string."""
    assert Comment.model_validate({"id": raw}).id == expected
    assert TimeEntry.model_validate({"id": raw}).id == expected


def test_task_list_alias():
    task = Task.model_validate({"id": 1, "list": {"id": 55, "name": "Backlog"}})
    assert task.home_list.id == "55"
    assert task.home_list.name == "Backlog"
    assert Task(id="1", home_list={"id": "55"}).home_list.id == "55"


def test_request_models_reject_unknown_fields():
    with pytest.raises(ValidationError):
        CreateTaskRequest(name="x", colour="red")


def test_priority_range():
    with pytest.raises(ValidationError):
        CreateTaskRequest(name="x", priority=5)


def test_tri_state_boolean_dump():
    """None is omitted, False is kept."""
    req = UpdateListRequest(unset_status=False)
    assert req.model_dump(exclude_none=True) == {"unset_status": False}
    assert UpdateListRequest().model_dump(exclude_none=True) == {}
