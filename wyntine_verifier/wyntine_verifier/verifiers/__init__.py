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

"""Verifier classes, one per item type."""

from .base import BaseVerifier
from .factory import VerifierFactory
from .string_verifier import StringVerifier
from .number_verifier import NumberVerifier
from .boolean_verifier import BooleanVerifier
from .array_verifier import ArrayVerifier
from .object_verifier import ObjectVerifier

__all__ = [
    "BaseVerifier",
    "VerifierFactory",
    "StringVerifier",
    "NumberVerifier",
    "BooleanVerifier",
    "ArrayVerifier",
    "ObjectVerifier",
]
