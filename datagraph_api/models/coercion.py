"""
    Normalization helpers for decoded JSON documents.

    Identifying fields are mandatory strings; every other field is
    optional and normalizes to an empty string or an empty tuple.
"""
from typing import Any, Mapping, Sequence, Tuple

from ..exceptions import ParseError


def require_mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise ParseError(f"{path}: expected an object, got {type(value).__name__}")
    return value


def require_list(data: Mapping[str, Any], key: str, path: str) -> Sequence[Any]:
    """Return ``data[key]`` as a list; missing or null means empty."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ParseError(f"{path}.{key}: expected an array, got {type(value).__name__}")
    return value


def require_id(data: Mapping[str, Any], key: str, path: str) -> str:
    """Identifying fields must be present and must be strings."""
    if key not in data or data[key] is None:
        raise ParseError(f"{path}.{key}: missing required identifier")
    value = data[key]
    if not isinstance(value, str):
        raise ParseError(f"{path}.{key}: identifier must be a string, got {type(value).__name__}")
    return value


def as_text(value: Any, path: str) -> str:
    """Scalars become strings; null becomes ''."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        # JSON spelling, not Python's
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise ParseError(f"{path}: expected a scalar value, got {type(value).__name__}")


def optional_text(data: Mapping[str, Any], key: str, path: str) -> str:
    return as_text(data.get(key), f"{path}.{key}")


def text_list(data: Mapping[str, Any], key: str, path: str) -> Tuple[str, ...]:
    items = require_list(data, key, path)
    return tuple(as_text(item, f"{path}.{key}[{i}]") for i, item in enumerate(items))
