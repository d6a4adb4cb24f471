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

"""Base verifier shared by every verifier kind."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import partial
from types import MappingProxyType
from typing import Any, Callable, Dict, Generic, List, Tuple, TypeVar, Union

from ..exceptions import VerificationError, VerifierConfigurationError
from ..language import Catalog, resolve_catalog
from ..models.outcome import Outcome
from ..pipeline import BoundCheck, run_checks, run_checks_or_raise

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V", bound="BaseVerifier")

# A check receives the verifier options, the message catalog and the input.
Check = Callable[[Mapping, Catalog, Any], Outcome]
LangArg = Union[None, str, Catalog]


class BaseVerifier(Generic[T]):
    """Immutable pairing of an ordered check list with an options record.

    Subclasses define ``ITEM_TYPE`` and ``CHECKS``; every builder method
    returns a new instance and never touches the current one.
    """

    ITEM_TYPE: str
    CHECKS: Tuple[Check, ...] = ()

    def __init__(self, context: Union[None, "BaseVerifier", Mapping] = None):
        """Create a verifier.

        Args:
            context: Nothing for an unconstrained verifier, a verifier of the
                same kind to share its options, or a raw options mapping.
        """
        if context is None:
            data: Dict[str, Any] = {}
        elif isinstance(context, BaseVerifier):
            if context.item_type != self.item_type:
                raise VerifierConfigurationError(
                    f"Cannot create a {self.item_type} verifier from a {context.item_type} verifier"
                )
            data = context._data
        elif isinstance(context, Mapping):
            data = self.normalize_options(dict(context))
        else:
            raise VerifierConfigurationError(
                f"Verifier context must be a verifier or a mapping, got {type(context).__name__}"
            )
        self._data: Dict[str, Any] = data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._data)!r})"

    @classmethod
    def normalize_options(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Convert a raw options mapping into the stored form."""
        return data

    @property
    def item_type(self) -> str:
        return self.ITEM_TYPE

    @property
    def options(self) -> Mapping:
        """Read-only view of the options record."""
        return MappingProxyType(self._data)

    def _with_options(self: V, **changes: Any) -> V:
        return type(self)({**self._data, **changes})

    def _bind(self, catalog: Catalog) -> List[BoundCheck]:
        options = self.options
        return [partial(check, options, catalog) for check in self.CHECKS]

    def verify(self, value: Any, lang: LangArg = None) -> Outcome:
        """Run every check and collect the messages.

        Args:
            value: Input to verify.
            lang: Optional language identifier or catalog for this call only;
                the active language is used otherwise.
        """
        catalog = resolve_catalog(lang)
        return run_checks(value, self._bind(catalog))

    def verify_and_assert(self, value: Any, lang: LangArg = None) -> T:
        """Return *value* unchanged when it passes, raise on the first failure.

        Raises:
            VerificationError: With the messages of the first non-success check.
        """
        catalog = resolve_catalog(lang)
        try:
            run_checks_or_raise(value, self._bind(catalog))
        except VerificationError as exc:
            logger.debug(f"{type(self).__name__} rejected input: {exc.errors}")
            raise
        return value

    def is_valid(self, value: Any, lang: LangArg = None) -> bool:
        return self.verify(value, lang).is_success
