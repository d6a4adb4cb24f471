"""Small helpers used by the verifiers and the message catalogs."""

from .objects import access_key, key_paths
from .predicates import is_array, is_boolean, is_integer, is_number, is_object, is_safe_integer, is_string
from .strings import replace

__all__ = [
    "access_key",
    "key_paths",
    "is_array",
    "is_boolean",
    "is_integer",
    "is_number",
    "is_object",
    "is_safe_integer",
    "is_string",
    "replace",
]
