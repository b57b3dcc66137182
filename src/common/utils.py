"""Common utility functions."""

from typing import Any


def get_value(obj: Any, key: str) -> Any:
    """Get value from dict or object attribute."""
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def get_nested_value(obj: Any, *keys: str) -> Any:
    """Walk nested dicts/objects, returning None as soon as a key is missing."""
    for key in keys:
        if obj is None:
            return None
        obj = get_value(obj, key)
    return obj
