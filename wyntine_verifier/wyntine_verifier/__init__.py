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

"""Declarative, immutable verifiers for strings, numbers, booleans, arrays and objects."""

__version__ = "1.0.0"

from .exceptions import LanguageError, VerificationError, VerifierConfigurationError, VerifierError
from .language import available_langs, get_lang, get_lang_string, set_lang
from .models.items import ArrayItem, ItemType, NumberRange, ObjectItem, RangeEnd
from .models.outcome import Outcome, OutcomeType, error, fail, success
from .utils.predicates import is_array, is_boolean, is_number, is_object, is_string
from .verifiers import (
    ArrayVerifier,
    BaseVerifier,
    BooleanVerifier,
    NumberVerifier,
    ObjectVerifier,
    StringVerifier,
    VerifierFactory,
)

__all__ = [
    "ArrayVerifier",
    "BaseVerifier",
    "BooleanVerifier",
    "NumberVerifier",
    "ObjectVerifier",
    "StringVerifier",
    "VerifierFactory",
    "ArrayItem",
    "ItemType",
    "NumberRange",
    "ObjectItem",
    "RangeEnd",
    "Outcome",
    "OutcomeType",
    "error",
    "fail",
    "success",
    "is_array",
    "is_boolean",
    "is_number",
    "is_object",
    "is_string",
    "available_langs",
    "get_lang",
    "get_lang_string",
    "set_lang",
    "LanguageError",
    "VerificationError",
    "VerifierConfigurationError",
    "VerifierError",
]
