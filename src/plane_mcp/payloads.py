"""Outbound payload normalization.

Callers driven by language models send ``assignees`` in whatever shape comes
to mind: a list, a bare user ID, an index-keyed object, or occasionally the
whole issue nested inside the field. Plane only accepts a list of user IDs,
so the value is decoded into one of a fixed set of shapes and rewritten (or
dropped) before the request goes out.
"""
import enum
import json
from typing import Any, Mapping
from urllib.parse import quote

# Characters encodeURIComponent leaves unescaped, besides alphanumerics
_QUERY_SAFE = "-_.!~*'()"


class AssigneesShape(str, enum.Enum):
    """Recognized shapes of a raw assignees value, in decode precedence order."""

    NESTED_ISSUE = "nested_issue"
    ARRAY = "array"
    SINGLE = "single"
    KEYED = "keyed"
    UNSUPPORTED = "unsupported"


def _looks_like_issue(value: Mapping) -> bool:
    return bool(value.get("project_id")) and bool(value.get("name"))


def classify_assignees(value: Any) -> AssigneesShape:
    """Decode a raw assignees value into its shape."""
    if isinstance(value, Mapping) and _looks_like_issue(value):
        return AssigneesShape.NESTED_ISSUE
    if isinstance(value, list):
        return AssigneesShape.ARRAY
    if isinstance(value, str):
        return AssigneesShape.SINGLE
    if isinstance(value, Mapping):
        return AssigneesShape.KEYED
    return AssigneesShape.UNSUPPORTED


def normalize_assignees(payload: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of an issue payload with assignees coerced to a list.

    Blank values (missing, null, "", false, 0) are left as they are. Nested
    issues and unsupported values drop the field entirely.
    """
    result = dict(payload)
    value = result.get("assignees")
    # Empty lists and objects are not blank: they still go through the decode
    if value is None or value in ("", 0):
        return result

    shape = classify_assignees(value)
    if shape is AssigneesShape.ARRAY:
        pass
    elif shape is AssigneesShape.SINGLE:
        result["assignees"] = [value]
    elif shape is AssigneesShape.KEYED:
        result["assignees"] = list(value.values())
    else:
        del result["assignees"]
    return result


def _query_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(item) for item in value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return json.dumps(value)


def build_query_string(params: Mapping[str, Any]) -> str:
    """Encode params as key=value pairs in the order given, skipping nulls."""
    return "&".join(
        f"{key}={quote(_query_value(value), safe=_QUERY_SAFE)}"
        for key, value in params.items()
        if value is not None
    )
