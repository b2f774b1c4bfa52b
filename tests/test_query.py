from clickup_cli.models import ParentType
from clickup_cli.query import encode_query


def test_empty_params():
    assert encode_query(None) == ""
    assert encode_query({}) == ""


def test_keys_are_sorted_and_lists_repeat_with_suffix():
    query = encode_query({
        "statuses": ["open", "in progress"],
        "include_closed": True,
        "assignees": ["123"],
    })
    assert query == (
        "assignees[]=123&include_closed=true"
        "&statuses[]=open&statuses[]=in%20progress"
    )


def test_absent_values_are_skipped():
    """None, empty string, False, 0 and empty lists mean no filter."""
    query = encode_query({
        "a": None,
        "b": "",
        "c": False,
        "d": 0,
        "e": [],
        "f": "kept",
    })
    assert query == "f=kept"


def test_non_zero_integers_are_emitted():
    assert encode_query({"page": 2, "due_date_gt": 1700000000000}) == (
        "due_date_gt=1700000000000&page=2"
    )


def test_string_zero_is_emitted():
    assert encode_query({"page": "0"}) == "page=0"


def test_values_are_escaped():
    assert encode_query({"assignees": ["user+1@example.com"]}) == (
        "assignees[]=user%2B1%40example.com"
    )
    assert encode_query({"task_id": "task/with?chars"}) == "task_id=task%2Fwith%3Fchars"


def test_bare_list_suffix():
    assert encode_query({"task_ids": ["a", "b"]}, list_suffix="") == "task_ids=a&task_ids=b"


def test_blank_list_items_are_dropped():
    assert encode_query({"tags": ["x", "", None, "y"]}) == "tags[]=x&tags[]=y"


def test_enum_values_are_emitted_by_value():
    assert encode_query({"parent_type": ParentType.FOLDER}) == "parent_type=folder"
