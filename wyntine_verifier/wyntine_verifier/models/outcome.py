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

"""Outcome records produced by individual checks and by whole verifications.

A check returns exactly one of three outcome kinds:

* ``success`` - the constraint holds.
* ``error``   - the input violates the constraint; later checks still run.
* ``fail``    - the verifier options themselves are unusable; the pipeline
  stops immediately.

``fail`` never escapes a verification: the pipeline folds it into an
``error`` outcome carrying the fail messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


class OutcomeType:
    """Outcome kind tags."""

    SUCCESS = "success"
    ERROR = "error"
    FAIL = "fail"

    @classmethod
    def get_all_types(cls) -> Tuple[str, ...]:
        return (cls.SUCCESS, cls.ERROR, cls.FAIL)


@dataclass(frozen=True)
class Outcome:
    status: str
    errors: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.status not in OutcomeType.get_all_types():
            raise ValueError(f"Invalid outcome status: '{self.status}'. Valid types: {OutcomeType.get_all_types()}")

    @property
    def is_success(self) -> bool:
        return self.status == OutcomeType.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status == OutcomeType.ERROR

    @property
    def is_fail(self) -> bool:
        return self.status == OutcomeType.FAIL


_SUCCESS = Outcome(status=OutcomeType.SUCCESS)


def success() -> Outcome:
    return _SUCCESS


def error(*errors: str) -> Outcome:
    return Outcome(status=OutcomeType.ERROR, errors=tuple(errors))


def fail(*errors: str) -> Outcome:
    return Outcome(status=OutcomeType.FAIL, errors=tuple(errors))
