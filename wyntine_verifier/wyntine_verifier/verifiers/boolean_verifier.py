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

"""Verifier for boolean values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..language import Catalog
from ..models.items import ItemType
from ..models.outcome import Outcome, error, success
from ..utils.predicates import is_boolean
from .base import BaseVerifier
from .factory import VerifierFactory


def check_boolean(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    return success() if is_boolean(value) else error(lang.error("boolean.not"))


def check_expected_boolean(options: Mapping, lang: Catalog, value: Any) -> Outcome:
    expected = options.get("expected_boolean")
    if not is_boolean(value) or not is_boolean(expected):
        return success()

    if value is expected:
        return success()
    return error(lang.error("boolean.notEqual", value, expected))


@VerifierFactory.register
class BooleanVerifier(BaseVerifier[bool]):
    """Verifier for boolean values."""

    ITEM_TYPE = ItemType.BOOLEAN
    CHECKS = (check_boolean, check_expected_boolean)

    def set_expected_boolean(self, expected_boolean: bool) -> "BooleanVerifier":
        return self._with_options(expected_boolean=expected_boolean)
