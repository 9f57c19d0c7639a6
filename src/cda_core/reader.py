"""Reader layer: typed access into a parsed JSON tree."""

from __future__ import annotations

from typing import Any

from .errors import MissingRequiredAttribute, ResourceParseError, StructuralMismatch
from .model import Locale


_MISSING = object()


# ---------------------------------------------------------------------------
# Shape helpers
# ---------------------------------------------------------------------------

def shape_of(node: Any) -> str:
    """Name the JSON shape of *node* as used in error messages."""
    if node is None:
        return "null"
    if isinstance(node, bool):
        return "boolean"
    if isinstance(node, (int, float)):
        return "number"
    if isinstance(node, str):
        return "string"
    if isinstance(node, dict):
        return "object"
    if isinstance(node, (list, tuple)):
        return "array"
    return type(node).__name__


def join_path(parent: str | None, key: str) -> str:
    return f"{parent}.{key}" if parent else key


def _lookup(obj: dict, key: str, path: str | None, required: bool) -> Any:
    value = obj.get(key, _MISSING)
    if value is _MISSING or value is None:
        if required:
            raise MissingRequiredAttribute(join_path(path, key))
        return _MISSING
    return value


# ---------------------------------------------------------------------------
# Typed getters
# ---------------------------------------------------------------------------

def as_object(node: Any, path: str | None = None) -> dict[str, Any]:
    if not isinstance(node, dict):
        raise StructuralMismatch(path, "object", shape_of(node))
    return node


def as_array(node: Any, path: str | None = None) -> list[Any]:
    if not isinstance(node, (list, tuple)):
        raise StructuralMismatch(path, "array", shape_of(node))
    return list(node)


def read_object(
    obj: dict, key: str, path: str | None = None, *, required: bool = True
) -> dict[str, Any] | None:
    """Return ``obj[key]`` as an object, or None when optional and absent."""
    value = _lookup(obj, key, path, required)
    if value is _MISSING:
        return None
    return as_object(value, join_path(path, key))


def read_array(
    obj: dict, key: str, path: str | None = None, *, required: bool = True
) -> list[Any] | None:
    value = _lookup(obj, key, path, required)
    if value is _MISSING:
        return None
    return as_array(value, join_path(path, key))


def read_string(obj: dict, key: str, path: str | None = None) -> str:
    value = _lookup(obj, key, path, True)
    if not isinstance(value, str):
        raise StructuralMismatch(join_path(path, key), "string", shape_of(value))
    return value


def optional_string(obj: dict, key: str, path: str | None = None) -> str | None:
    """Return ``obj[key]`` as a string; absence and null yield None.

    Scalars other than strings are converted with ``str`` the way a
    lenient JSON tree reader would; containers are a shape error.
    """
    value = _lookup(obj, key, path, False)
    if value is _MISSING:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise StructuralMismatch(join_path(path, key), "string", shape_of(value))


def read_bool(obj: dict, key: str, path: str | None = None, default: bool = False) -> bool:
    value = _lookup(obj, key, path, False)
    if value is _MISSING:
        return default
    if not isinstance(value, bool):
        raise StructuralMismatch(join_path(path, key), "boolean", shape_of(value))
    return value


# ---------------------------------------------------------------------------
# Generic conversion
# ---------------------------------------------------------------------------

def read_value(node: Any) -> Any:
    """Convert a JSON tree node into fresh Python containers.

    Objects become new dicts (key order kept), arrays new lists; scalars
    are returned as-is. The result never aliases *node*. Trees nested
    deeper than the interpreter recursion limit raise RecursionError;
    read_mapping and read_sequence report that as ResourceParseError.
    """
    if isinstance(node, dict):
        return {str(k): read_value(v) for k, v in node.items()}
    if isinstance(node, (list, tuple)):
        return [read_value(v) for v in node]
    return node


def _copy_tree(node: Any, path: str | None) -> Any:
    try:
        return read_value(node)
    except RecursionError as exc:
        raise ResourceParseError("JSON nested too deeply", path) from exc


def read_mapping(node: Any, path: str | None = None) -> dict[str, Any]:
    return _copy_tree(as_object(node, path), path)


def read_sequence(node: Any, path: str | None = None) -> list[Any]:
    return _copy_tree(as_array(node, path), path)


def read_locale(node: Any, path: str | None = None) -> Locale:
    obj = as_object(node, path)
    return Locale(
        code=read_string(obj, "code", path),
        name=optional_string(obj, "name", path),
        default=read_bool(obj, "default", path),
    )


def read_locales(nodes: list[Any], path: str = "") -> list[Locale]:
    return [read_locale(n, f"{path}[{i}]") for i, n in enumerate(nodes)]
