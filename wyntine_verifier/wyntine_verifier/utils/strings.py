from __future__ import annotations

from typing import Any, Sequence


def replace(template: str, values: Sequence[Any]) -> str:
    """Substitute positional ``{0}``, ``{1}``, ... placeholders in *template*.

    Every occurrence of a placeholder is replaced, placeholders without a
    matching value are left untouched.
    """
    result = template
    for index, value in enumerate(values):
        result = result.replace(f"{{{index}}}", str(value))
    return result


def section_label(label: str) -> str:
    """Frame a per-index / per-key label so grouped errors stay readable."""
    return f"-- {label} --"
