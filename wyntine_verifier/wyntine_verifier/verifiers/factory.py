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

"""Factory mapping item type tags to verifier classes."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Type, Union

from ..exceptions import VerifierConfigurationError
from ..models.items import ItemType
from .base import BaseVerifier

# None, a ready verifier, or a callable that configures a fresh one
VerifierData = Union[None, BaseVerifier, Callable[[Any], BaseVerifier]]


class VerifierFactory:
    """Factory for creating verifiers by kind tag."""

    _verifiers: Dict[str, Type[BaseVerifier]] = {}

    @classmethod
    def register(cls, verifier_class: Type[BaseVerifier]) -> Type[BaseVerifier]:
        """Class decorator registering *verifier_class* under its ITEM_TYPE."""
        item_type = getattr(verifier_class, "ITEM_TYPE", None)
        if item_type not in ItemType.get_all_types():
            raise VerifierConfigurationError(f"Unknown item type: {item_type}")
        cls._verifiers[item_type] = verifier_class
        return verifier_class

    @classmethod
    def get_verifier_class(cls, item_type: str) -> Type[BaseVerifier]:
        """Get verifier class for item type."""
        if item_type not in cls._verifiers:
            raise VerifierConfigurationError(f"Unknown item type: {item_type}")
        return cls._verifiers[item_type]

    @classmethod
    def create_verifier(cls, item_type: str, verifier_data: VerifierData = None) -> BaseVerifier:
        """Build the verifier for an array/object item or a general type.

        Args:
            item_type: Kind tag of the wanted verifier.
            verifier_data: Nothing for a default verifier, a verifier of the
                matching class, or a callable receiving a fresh verifier and
                returning the configured one.
        """
        verifier_class = cls.get_verifier_class(item_type)

        if verifier_data is None:
            return verifier_class()

        if isinstance(verifier_data, BaseVerifier):
            verifier = verifier_data
        elif callable(verifier_data):
            verifier = verifier_data(verifier_class())
        else:
            raise VerifierConfigurationError(
                f"Verifier data must be a verifier or a callable, got {type(verifier_data).__name__}"
            )

        if not isinstance(verifier, verifier_class):
            raise VerifierConfigurationError(
                f"Wrong verifier class: expected {verifier_class.__name__}, got {type(verifier).__name__}"
            )
        return verifier


def verifier_from_item(item_type: Optional[str], verifier: Any) -> BaseVerifier:
    """Resolve the verifier of a raw item mapping, inferring the kind when omitted."""
    if item_type is None:
        if not isinstance(verifier, BaseVerifier):
            raise VerifierConfigurationError("Item without 'item_type' must carry a verifier instance")
        item_type = verifier.item_type
    return VerifierFactory.create_verifier(item_type, verifier)
