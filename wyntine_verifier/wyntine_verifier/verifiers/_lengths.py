"""Length option checks shared by the string and array verifiers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Sequence

from ..language import Catalog
from ..models.outcome import Outcome, error, fail, success
from ..utils.predicates import is_integer, is_number


def check_length_options(
    options: Mapping,
    lang: Catalog,
    section: str,
    size: int,
    subject: Sequence[Any] = (),
) -> Outcome:
    """Validate the length option family and compare *size* against it.

    ``length`` cannot be combined with ``min_length``/``max_length``; the
    bounds must be non-negative integers with ``max_length >= min_length``.
    Those are option problems and fail. A *size* outside the configured
    bounds is an error. *subject* is prepended to the message values.
    """
    max_length = options.get("max_length")
    min_length = options.get("min_length")
    length = options.get("length")
    is_max = is_number(max_length)
    is_min = is_number(min_length)
    is_len = is_number(length)

    if not (is_max or is_min or is_len):
        return success()

    if (is_max or is_min) and is_len:
        return fail(lang.error(f"{section}.lengths.both"))

    if is_max:
        if not is_integer(max_length):
            return fail(lang.error(f"{section}.lengths.max.integer"))
        if max_length < 0:
            return fail(lang.error(f"{section}.lengths.max.negative"))
        if max_length < (min_length if is_min else 0):
            return fail(lang.error(f"{section}.lengths.max.lower"))

    if is_min:
        if not is_integer(min_length):
            return fail(lang.error(f"{section}.lengths.min.integer"))
        if min_length < 0:
            return fail(lang.error(f"{section}.lengths.min.negative"))

    if is_len and length != size:
        return error(lang.error(f"{section}.lengths.notEqual", *subject, size, length))

    if is_max and size > max_length:
        return error(lang.error(f"{section}.lengths.max.more", *subject, size, max_length))

    if is_min and size < min_length:
        return error(lang.error(f"{section}.lengths.min.less", *subject, size, min_length))

    return success()
