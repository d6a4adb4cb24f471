from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List


def key_paths(data: Any, prefix: str = "") -> List[str]:
    """Return dotted paths to every leaf of a nested mapping."""
    paths: List[str] = []
    if not isinstance(data, Mapping):
        return paths

    for key, value in data.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            paths.extend(key_paths(value, path))
        else:
            paths.append(path)
    return paths


def access_key(data: Any, key_path: str) -> Any:
    """Resolve a dotted *key_path* (``"errors.string.not"``) inside nested mappings.

    Raises:
        TypeError: If *data* is not a mapping.
        KeyError: If any segment of the path does not exist.
    """
    if not isinstance(data, Mapping):
        raise TypeError("Given input is not a mapping.")

    value = data
    for segment in key_path.split("."):
        if not isinstance(value, Mapping) or segment not in value:
            raise KeyError(f"Given mapping does not have the path: {key_path}")
        value = value[segment]
    return value
