# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Verifier for number values."""

from __future__ import annotations

import math
from collections.abc import Mapping
from fractions import Fraction
from typing import Any, Dict, Iterable, List, Sequence, Tuple, Union

from ..language import Catalog
from ..models.items import ItemType, NumberRange
from ..models.outcome import Outcome, error, fail, success
from ..utils.predicates import is_integer, is_number, is_safe_integer
from .base import BaseVerifier
from .factory import VerifierFactory

Number = Union[int, float]
RangeInput = Union[NumberRange, Mapping]


def check_number(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    return success() if is_number(value) else error(lang.error("number.not"))


def check_integer_type(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    if not is_number(value):
        return success()

    errors: List[str] = []
    if options.get("integer") and not is_integer(value):
        errors.append(lang.error("number.integers.notInteger", value))
    if options.get("safe_integer") and not is_safe_integer(value):
        errors.append(lang.error("number.integers.notSafe", value))

    return error(*errors) if errors else success()


def check_expected_number(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    expected = options.get("expected_number")
    if not is_number(value) or not is_number(expected):
        return success()

    if value == expected:
        return success()
    return error(lang.error("number.notEqual", value, expected))


def check_allowed_signs(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    if not is_number(value):
        return success()

    # Only an explicit False restricts a sign
    if options.get("positive") is False and value > 0:
        return error(lang.error("number.signs.positive", value))
    if options.get("negative") is False and value < 0:
        return error(lang.error("number.signs.negative", value))
    if options.get("zero") is False and value == 0:
        return error(lang.error("number.signs.zero", value))

    return success()


def check_values(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    if not is_number(value):
        return success()

    min_value = options.get("min_value")
    max_value = options.get("max_value")
    is_min = is_number(min_value)
    is_max = is_number(max_value)

    if is_min and is_max and min_value > max_value:
        return fail(lang.error("number.values.maxLower"))

    if is_min and value < min_value:
        return error(lang.error("number.values.min", value, min_value))
    if is_max and value > max_value:
        return error(lang.error("number.values.max", value, max_value))

    return success()


def check_ranges(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    if not is_number(value):
        return success()

    allowed_ranges: Sequence[NumberRange] = options.get("allowed_ranges") or ()
    excluded_ranges: Sequence[NumberRange] = options.get("excluded_ranges") or ()

    if not allowed_ranges and not excluded_ranges:
        return success()

    if not all(number_range.is_valid for number_range in (*excluded_ranges, *allowed_ranges)):
        return fail(lang.error("number.ranges.endLower"))

    for number_range in excluded_ranges:
        if number_range.contains(value):
            return error(
                lang.error(
                    "number.ranges.excluded",
                    value,
                    number_range.start_tag,
                    number_range.start.number,
                    number_range.end.number,
                    number_range.end_tag,
                )
            )

    if not allowed_ranges:
        return success()

    if any(number_range.contains(value) for number_range in allowed_ranges):
        return success()
    return error(lang.error("number.ranges.notInAllowed", value))


def _divides(value: Number, divisor: Number) -> bool:
    if isinstance(value, int) and isinstance(divisor, int):
        return value % divisor == 0
    if isinstance(value, float) and not math.isfinite(value):
        return False
    if isinstance(divisor, float) and not math.isfinite(divisor):
        return value == 0
    # Exact remainder; ints beyond float range cannot be mixed with floats
    return Fraction(value) % Fraction(divisor) == 0


def check_dividable_numbers(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    if not is_number(value):
        return success()

    dividable_by: Sequence[Number] = options.get("dividable_by") or ()
    if not dividable_by:
        return success()

    if any(divisor == 0 for divisor in dividable_by):
        return fail(lang.error("number.dividable.zero"))

    failed = [divisor for divisor in dividable_by if not _divides(value, divisor)]
    if not failed:
        return success()
    return error(lang.error("number.dividable.cannot", value, ", ".join(str(d) for d in failed)))


def _ranges(ranges: Iterable[RangeInput]) -> Tuple[NumberRange, ...]:
    return tuple(NumberRange.from_value(number_range) for number_range in ranges)


@VerifierFactory.register
class NumberVerifier(BaseVerifier[Number]):
    """Verifier for int and float values (bool is rejected)."""

    ITEM_TYPE = ItemType.NUMBER
    CHECKS = (
        check_number,
        check_integer_type,
        check_expected_number,
        check_allowed_signs,
        check_values,
        check_ranges,
        check_dividable_numbers,
    )

    @classmethod
    def normalize_options(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        for key in ("allowed_ranges", "excluded_ranges"):
            if data.get(key) is not None:
                data[key] = _ranges(data[key])
        if data.get("dividable_by") is not None:
            data["dividable_by"] = tuple(data["dividable_by"])
        return data

    def set_expected_number(self, expected_number: Number) -> "NumberVerifier":
        return self._with_options(expected_number=expected_number)

    def set_min_value(self, min_value: Number) -> "NumberVerifier":
        return self._with_options(min_value=min_value)

    def set_max_value(self, max_value: Number) -> "NumberVerifier":
        return self._with_options(max_value=max_value)

    def set_safe_integer_only(self, safe_integer: bool = True) -> "NumberVerifier":
        return self._with_options(safe_integer=safe_integer)

    def set_integer_only(self, integer: bool = True) -> "NumberVerifier":
        return self._with_options(integer=integer)

    def set_allowed_signs(
        self, positive: bool = True, zero: bool = True, negative: bool = True
    ) -> "NumberVerifier":
        """Set which signs are accepted; a sign left out stays allowed."""
        return self._with_options(positive=positive, zero=zero, negative=negative)

    def add_allowed_ranges(self, allowed_ranges: Iterable[RangeInput]) -> "NumberVerifier":
        current = self._data.get("allowed_ranges") or ()
        return self._with_options(allowed_ranges=(*current, *_ranges(allowed_ranges)))

    def set_allowed_ranges(self, allowed_ranges: Iterable[RangeInput]) -> "NumberVerifier":
        return self._with_options(allowed_ranges=_ranges(allowed_ranges))

    def add_excluded_ranges(self, excluded_ranges: Iterable[RangeInput]) -> "NumberVerifier":
        current = self._data.get("excluded_ranges") or ()
        return self._with_options(excluded_ranges=(*current, *_ranges(excluded_ranges)))

    def set_excluded_ranges(self, excluded_ranges: Iterable[RangeInput]) -> "NumberVerifier":
        return self._with_options(excluded_ranges=_ranges(excluded_ranges))

    def set_dividable_numbers(self, dividable_by: Iterable[Number]) -> "NumberVerifier":
        return self._with_options(dividable_by=tuple(dividable_by))
