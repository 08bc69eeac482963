"""Dictionary helpers used across errortag."""

from __future__ import annotations

from collections.abc import Mapping

__all__ = ["deep_merge", "insert_path"]


def deep_merge(base: Mapping[str, object], override: Mapping[str, object]) -> dict[str, object]:
    """Recursively merge two mappings, giving precedence to override."""
    result: dict[str, object] = dict(base)

    for key, override_value in override.items():
        if override_value is None:
            continue

        existing_value = result.get(key)

        if isinstance(existing_value, Mapping) and isinstance(override_value, Mapping):
            result[key] = deep_merge(dict(existing_value), dict(override_value))
        elif isinstance(override_value, list):
            result[key] = list(override_value)
        else:
            result[key] = override_value

    return result


def insert_path(data: dict[str, object], path: list[str], value: object) -> None:
    """Set ``value`` at the nested ``path`` inside ``data``, creating mappings as needed."""
    cursor = data
    *parents, leaf = path
    for segment in parents:
        child = cursor.get(segment)
        if not isinstance(child, dict):
            child = {}
            cursor[segment] = child
        cursor = child
    cursor[leaf] = value
