"""Serialization utilities."""

from dataclasses import asdict
from datetime import date, datetime
from typing import Any


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    return value


def serialize_dataclass(obj) -> dict:
    """Serialize a dataclass to dict, converting dates and datetimes to ISO strings.

    Nested dataclasses, dicts and lists are converted recursively. Field
    order follows the dataclass definition.
    """
    return _to_jsonable(asdict(obj))
