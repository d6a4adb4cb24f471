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

"""Verifier for key/value mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

from ..exceptions import VerifierConfigurationError
from ..language import Catalog
from ..models.items import ItemType, ObjectItem
from ..models.outcome import Outcome, error, fail, success
from ..utils.predicates import is_object
from ..utils.strings import section_label
from .base import BaseVerifier
from .factory import VerifierData, VerifierFactory, verifier_from_item


def _join_keys(keys: Iterable[Hashable]) -> str:
    return ", ".join(str(key) for key in keys)


def extra_keys(options: Mapping, value: Mapping) -> List[Hashable]:
    """Input keys that are neither configured items nor not-allowed keys."""
    not_allowed = options.get("not_allowed_keys") or ()
    item_keys = [item.key for item in options.get("items") or ()]
    return [key for key in value if key not in not_allowed and key not in item_keys]


def check_object(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    return success() if is_object(value) else error(lang.error("object.not"))


def check_not_allowed(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    if not is_object(value):
        return success()

    not_allowed: Sequence[Hashable] = options.get("not_allowed_keys") or ()
    if not not_allowed:
        return success()

    items: Sequence[ObjectItem] = options.get("items") or ()
    item_keys = [item.key for item in items]
    using_not_allowed = [key for key in not_allowed if key in item_keys]
    if using_not_allowed:
        return fail(lang.error("object.usingNotAllowed", _join_keys(using_not_allowed)))

    rejected = [key for key in value if key in not_allowed]
    if rejected:
        return error(lang.error("object.notAllowed", _join_keys(rejected)))

    return success()


def check_items(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    """Verify every configured key, then extra keys against the general type.

    Missing keys are reported only for required items. Failures are grouped
    by key and reported together.
    """
    if not is_object(value):
        return success()

    items: Sequence[ObjectItem] = options.get("items") or ()
    general_type: Optional[BaseVerifier] = options.get("general_type")

    grouped: List[Tuple[Hashable, Tuple[str, ...]]] = []

    def verify_key(key: Hashable, verifier: BaseVerifier) -> None:
        result = verifier.verify(value[key], lang=lang)
        if not result.is_success:
            grouped.append((key, result.errors))

    for item in items:
        if item.key not in value:
            if item.required:
                grouped.append((item.key, (lang.error("object.items.notExists", item.key),)))
            continue
        verify_key(item.key, item.verifier)

    if not options.get("exact") and general_type is not None:
        for key in extra_keys(options, value):
            verify_key(key, general_type)

    if not grouped:
        return success()

    errors: List[str] = []
    for key, key_errors in grouped:
        errors.append(section_label(lang.error("object.items.keyOf", key)))
        errors.extend(key_errors)
    return error(*errors)


def check_exact(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    if not is_object(value) or not options.get("exact"):
        return success()

    extra = extra_keys(options, value)
    if not extra:
        return success()
    return error(lang.error("object.extraKeys", _join_keys(extra)))


def _object_item(value: Any) -> ObjectItem:
    if isinstance(value, ObjectItem):
        return value
    if not isinstance(value, Mapping) or "verifier" not in value or "key" not in value:
        raise VerifierConfigurationError("Object item must be an ObjectItem or a mapping with 'key' and 'verifier'")

    item_options = {**(value.get("options") or {}), **value}
    verifier = verifier_from_item(value.get("item_type"), value["verifier"])
    return ObjectItem(
        verifier=verifier,
        item_type=verifier.item_type,
        key=value["key"],
        required=bool(item_options.get("required", False)),
    )


def _unique(keys: Iterable[Hashable]) -> Tuple[Hashable, ...]:
    return tuple(dict.fromkeys(keys))


@VerifierFactory.register
class ObjectVerifier(BaseVerifier[dict]):
    """Verifier for mappings.

    Configured items verify single keys. Keys without an item can be checked
    against a general type, rejected as a group with ``exact``, or rejected
    individually through the not-allowed key list.
    """

    ITEM_TYPE = ItemType.OBJECT
    CHECKS = (check_object, check_not_allowed, check_items, check_exact)

    @classmethod
    def normalize_options(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        if data.get("items") is not None:
            data["items"] = tuple(_object_item(item) for item in data["items"])
        if data.get("not_allowed_keys") is not None:
            data["not_allowed_keys"] = _unique(data["not_allowed_keys"])
        general_type = data.get("general_type")
        if general_type is not None and not isinstance(general_type, BaseVerifier):
            raise VerifierConfigurationError("General type must be a verifier instance")
        return data

    def set_exact(self, exact: bool = True) -> "ObjectVerifier":
        return self._with_options(exact=exact)

    def set_general_type(self, item_type: str, verifier: VerifierData = None) -> "ObjectVerifier":
        """Verify every key without a configured item against one verifier."""
        return self._with_options(general_type=VerifierFactory.create_verifier(item_type, verifier))

    def set_not_allowed_keys(self, keys: Iterable[Hashable]) -> "ObjectVerifier":
        return self._with_options(not_allowed_keys=_unique(keys))

    def add_not_allowed_keys(self, keys: Iterable[Hashable]) -> "ObjectVerifier":
        current = self._data.get("not_allowed_keys") or ()
        return self.set_not_allowed_keys((*current, *keys))

    def add_string(self, key: Hashable, verifier: VerifierData = None, *, required: bool = False) -> "ObjectVerifier":
        return self._add_item(ItemType.STRING, key, verifier, required=required)

    def add_number(self, key: Hashable, verifier: VerifierData = None, *, required: bool = False) -> "ObjectVerifier":
        return self._add_item(ItemType.NUMBER, key, verifier, required=required)

    def add_boolean(self, key: Hashable, verifier: VerifierData = None, *, required: bool = False) -> "ObjectVerifier":
        return self._add_item(ItemType.BOOLEAN, key, verifier, required=required)

    def add_array(self, key: Hashable, verifier: VerifierData = None, *, required: bool = False) -> "ObjectVerifier":
        return self._add_item(ItemType.ARRAY, key, verifier, required=required)

    def add_object(self, key: Hashable, verifier: VerifierData = None, *, required: bool = False) -> "ObjectVerifier":
        return self._add_item(ItemType.OBJECT, key, verifier, required=required)

    def _add_item(
        self, item_type: str, key: Hashable, verifier: VerifierData = None, *, required: bool = False
    ) -> "ObjectVerifier":
        item = ObjectItem(
            verifier=VerifierFactory.create_verifier(item_type, verifier),
            item_type=item_type,
            key=key,
            required=required,
        )
        current = self._data.get("items") or ()
        return self._with_options(items=(*current, item))
