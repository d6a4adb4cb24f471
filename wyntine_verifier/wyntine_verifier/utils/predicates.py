"""Type-narrowing predicates shared by the checks and exported to callers."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

MAX_SAFE_INTEGER = 9_007_199_254_740_991


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    # bool is an int subclass, it is never treated as a number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_integer(value: Any) -> bool:
    if not is_number(value):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value) and value.is_integer()


def is_safe_integer(value: Any) -> bool:
    return is_integer(value) and abs(value) <= MAX_SAFE_INTEGER
