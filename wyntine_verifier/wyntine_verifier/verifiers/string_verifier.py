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

"""Verifier for string values."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Dict, Pattern, Union

from ..language import Catalog
from ..models.items import ItemType
from ..models.outcome import Outcome, error, success
from ..utils.predicates import is_string
from ._lengths import check_length_options
from .base import BaseVerifier
from .factory import VerifierFactory


def check_string(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    return success() if is_string(value) else error(lang.error("string.not"))


def check_expected_string(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    expected = options.get("expected_string")
    if not is_string(value) or not is_string(expected):
        return success()

    if value == expected:
        return success()
    return error(lang.error("string.notEqual", value, expected))


def check_lengths(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    if not is_string(value):
        return success()
    return check_length_options(options, lang, "string", len(value), subject=(value,))


def check_regex(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    regex = options.get("regex")
    if not is_string(value) or regex is None:
        return success()

    if regex.search(value):
        return success()
    return error(lang.error("string.regex", value, regex.pattern))


@VerifierFactory.register
class StringVerifier(BaseVerifier[str]):
    """Verifier for string values.

    Options: ``length``, ``min_length``, ``max_length``, ``regex`` and
    ``expected_string``.
    """

    ITEM_TYPE = ItemType.STRING
    CHECKS = (check_string, check_expected_string, check_lengths, check_regex)

    @classmethod
    def normalize_options(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        if isinstance(data.get("regex"), str):
            data["regex"] = re.compile(data["regex"])
        return data

    def set_length(self, length: int) -> "StringVerifier":
        return self._with_options(length=length)

    def set_max_length(self, max_length: int) -> "StringVerifier":
        return self._with_options(max_length=max_length)

    def set_min_length(self, min_length: int) -> "StringVerifier":
        return self._with_options(min_length=min_length)

    def set_regex(self, regex: Union[str, Pattern]) -> "StringVerifier":
        """Require the string to contain a match of *regex* (``re.search``)."""
        return self._with_options(regex=re.compile(regex) if isinstance(regex, str) else regex)

    def set_expected_string(self, expected_string: str) -> "StringVerifier":
        return self._with_options(expected_string=expected_string)
