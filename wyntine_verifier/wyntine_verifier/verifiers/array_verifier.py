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

"""Verifier for arrays, including positional item matching."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..exceptions import VerifierConfigurationError
from ..language import Catalog
from ..models.items import ArrayItem, ItemType
from ..models.outcome import Outcome, error, fail, success
from ..utils.predicates import is_array, is_integer
from ..utils.strings import section_label
from ._lengths import check_length_options
from .base import BaseVerifier
from .factory import VerifierData, VerifierFactory, verifier_from_item


def check_array(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    return success() if is_array(value) else error(lang.error("array.not"))


def check_lengths(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    if not is_array(value):
        return success()
    return check_length_options(options, lang, "array", len(value))


def check_items(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    """Match the configured items against the input positionally.

    Each item consumes one element, ``repeat_count + 1`` elements, or, when
    it is the repeated tail, every element left. Element failures are
    grouped by index and reported together.
    """
    if not is_array(value):
        return success()

    items: Sequence[ArrayItem] = options.get("items") or ()
    if not items:
        return success()

    last_position = len(items) - 1
    for position, item in enumerate(items):
        if item.repeated and position != last_position:
            return fail(lang.error("array.items.repeatedItem"))
        if item.repeat_count is not None and not (is_integer(item.repeat_count) and item.repeat_count > 0):
            return fail(lang.error("array.items.repeatCountNotInteger", item.repeat_count))

    grouped: List[Tuple[int, Tuple[str, ...]]] = []
    cursor = 0

    for item in items:
        if item.repeat_count is not None:
            count = int(item.repeat_count) + 1
        elif item.repeated:
            count = max(len(value) - cursor, 0)
        else:
            count = 1

        for _ in range(count):
            # Positions past the end are read as None
            element = value[cursor] if cursor < len(value) else None
            result = item.verifier.verify(element, lang=lang)
            if not result.is_success:
                grouped.append((cursor, result.errors))
            cursor += 1

    if not grouped:
        return success()

    errors: List[str] = []
    for index, item_errors in grouped:
        errors.append(section_label(lang.error("array.items.indexOf", index)))
        errors.extend(item_errors)
    return error(*errors)


def check_exact(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    if not is_array(value) or not options.get("exact"):
        return success()

    items: Sequence[ArrayItem] = options.get("items") or ()

    # A repeated tail has no fixed element count
    if items and items[-1].repeated:
        return success()

    item_count = sum(1 + (item.repeat_count or 0) for item in items)
    if len(value) == item_count:
        return success()
    return error(lang.error("array.notEqual"))


def _array_item(value: Any) -> ArrayItem:
    if isinstance(value, ArrayItem):
        return value
    if not isinstance(value, Mapping) or "verifier" not in value:
        raise VerifierConfigurationError("Array item must be an ArrayItem or a mapping with a 'verifier'")

    item_options = {**(value.get("options") or {}), **value}
    verifier = verifier_from_item(value.get("item_type"), value["verifier"])
    return ArrayItem(
        verifier=verifier,
        item_type=verifier.item_type,
        repeat_count=item_options.get("repeat_count"),
        repeated=bool(item_options.get("repeated", False)),
    )


@VerifierFactory.register
class ArrayVerifier(BaseVerifier[list]):
    """Verifier for lists and tuples.

    Items are matched against the input in order; the last item may be
    ``repeated`` to absorb the rest of the input.
    """

    ITEM_TYPE = ItemType.ARRAY
    CHECKS = (check_array, check_lengths, check_items, check_exact)

    @classmethod
    def normalize_options(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        if data.get("items") is not None:
            data["items"] = tuple(_array_item(item) for item in data["items"])
        return data

    def set_max_length(self, max_length: int) -> "ArrayVerifier":
        return self._with_options(max_length=max_length)

    def set_min_length(self, min_length: int) -> "ArrayVerifier":
        return self._with_options(min_length=min_length)

    def set_length(self, length: int) -> "ArrayVerifier":
        return self._with_options(length=length)

    def set_exact(self, exact: bool = True) -> "ArrayVerifier":
        return self._with_options(exact=exact)

    def add_string(
        self, verifier: VerifierData = None, *, repeat_count: Optional[int] = None, repeated: bool = False
    ) -> "ArrayVerifier":
        return self._add_item(ItemType.STRING, verifier, repeat_count=repeat_count, repeated=repeated)

    def add_number(
        self, verifier: VerifierData = None, *, repeat_count: Optional[int] = None, repeated: bool = False
    ) -> "ArrayVerifier":
        return self._add_item(ItemType.NUMBER, verifier, repeat_count=repeat_count, repeated=repeated)

    def add_boolean(
        self, verifier: VerifierData = None, *, repeat_count: Optional[int] = None, repeated: bool = False
    ) -> "ArrayVerifier":
        return self._add_item(ItemType.BOOLEAN, verifier, repeat_count=repeat_count, repeated=repeated)

    def add_array(
        self, verifier: VerifierData = None, *, repeat_count: Optional[int] = None, repeated: bool = False
    ) -> "ArrayVerifier":
        return self._add_item(ItemType.ARRAY, verifier, repeat_count=repeat_count, repeated=repeated)

    def add_object(
        self, verifier: VerifierData = None, *, repeat_count: Optional[int] = None, repeated: bool = False
    ) -> "ArrayVerifier":
        return self._add_item(ItemType.OBJECT, verifier, repeat_count=repeat_count, repeated=repeated)

    def _add_item(
        self,
        item_type: str,
        verifier: VerifierData = None,
        *,
        repeat_count: Optional[int] = None,
        repeated: bool = False,
    ) -> "ArrayVerifier":
        item = ArrayItem(
            verifier=VerifierFactory.create_verifier(item_type, verifier),
            item_type=item_type,
            repeat_count=repeat_count,
            repeated=repeated,
        )
        current = self._data.get("items") or ()
        return self._with_options(items=(*current, item))
