"""Query-string encoding with ClickUp's conventions.

* scalars are emitted once: ``key=value``
* booleans only when true: ``key=true``
* lists repeat the key with a ``[]`` suffix: ``key[]=a&key[]=b``
* ``None``, ``""``, ``False`` and integer ``0`` mean "no filter" and are skipped

Keys are emitted in lexicographic order; list elements keep their order.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any
from urllib.parse import quote


def _is_absent(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, int) and value == 0:
        return True
    if isinstance(value, str) and value == "":
        return True
    if isinstance(value, (list, tuple)) and not value:
        return True
    return False


def _scalar(value: Any) -> str:
    if value is True:
        return "true"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _pair(key: str, value: Any) -> str:
    return f"{quote(key, safe='[]')}={quote(_scalar(value), safe='')}"


def encode_query(params: Mapping[str, Any] | None, *, list_suffix: str = "[]") -> str:
    """Encode ``params`` into an ``application/x-www-form-urlencoded`` string.

    ``list_suffix`` is appended to the key of list-valued parameters. A few
    endpoints (bulk time-in-status) repeat the bare key; pass ``""`` there.
    """
    if not params:
        return ""
    parts: list[str] = []
    for key in sorted(params):
        value = params[key]
        if _is_absent(value):
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                if item is None or item == "":
                    continue
                parts.append(_pair(key + list_suffix, item))
        else:
            parts.append(_pair(key, value))
    return "&".join(parts)
