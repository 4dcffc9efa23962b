from collections.abc import Mapping
from typing import Any, Collection, FrozenSet, Optional

from pydantic import BaseModel

from .errors import InvalidInsightError
from .schemas import Insight


def _fields(value: Any) -> Optional[Mapping]:
    if isinstance(value, Mapping):
        return value
    if isinstance(value, BaseModel):
        # iterating a model yields (field, value) pairs
        return dict(value)
    return None


def _kind_set(kinds: Optional[Collection[str]]) -> Optional[FrozenSet[str]]:
    if kinds is None:
        return None
    if isinstance(kinds, str):
        return frozenset((kinds,))
    return frozenset(kinds)


def _first_failure(value: Any, kinds: Optional[FrozenSet[str]]) -> Optional[str]:
    fields = _fields(value)
    if fields is None:
        return "insight must be an object"
    kind = fields.get("type")
    if not isinstance(kind, str):
        return "type must be a string"
    if not isinstance(fields.get("event"), str):
        return "event must be a string"
    if "data" not in fields:
        return "data is missing"
    if kinds is not None and kind not in kinds:
        return f"unknown insight type '{kind}'"
    return None


def explain_insight(value: Any, kinds: Optional[Collection[str]] = None) -> Optional[str]:
    """Return the first reason `value` is not an insight, or None if it is one.

    `value` may be a mapping or a pydantic model. A bare string passed as
    `kinds` is treated as a single kind. Never raises: a mapping that fails
    while being read is reported as unreadable rather than propagating its error.
    """
    kind_set = _kind_set(kinds)
    try:
        return _first_failure(value, kind_set)
    except Exception:
        return "insight could not be read"


def is_insight(value: Any, kinds: Optional[Collection[str]] = None) -> bool:
    """Check that `value` has the insight shape: `type` and `event` strings and a `data` key.

    Extra keys are ignored. When `kinds` is given, `type` must also be one of them.
    """
    return explain_insight(value, kinds) is None


def ensure_insight(value: Any, kinds: Optional[Collection[str]] = None) -> Insight:
    reason = explain_insight(value, kinds)
    if reason is not None:
        raise InvalidInsightError(reason)
    if isinstance(value, Insight):
        return value
    fields = _fields(value)
    return Insight(type=fields["type"], event=fields["event"], data=fields["data"])
