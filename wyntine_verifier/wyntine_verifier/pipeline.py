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

"""Check pipeline runner."""

from __future__ import annotations

from typing import Any, Callable, List, Sequence

from .exceptions import VerificationError
from .models.outcome import Outcome, OutcomeType, error, success

BoundCheck = Callable[[Any], Outcome]


def run_checks(value: Any, checks: Sequence[BoundCheck]) -> Outcome:
    """Run *checks* in order and collect their messages.

    Error outcomes accumulate and the next check runs. A fail outcome stops
    the pipeline and becomes the result on its own: an ``error`` carrying only
    the fail messages. Otherwise the result is ``success`` when no message was
    collected, ``error`` with every message in check order.
    """
    errors: List[str] = []

    for check in checks:
        result = check(value)

        if result.status == OutcomeType.SUCCESS:
            continue

        if result.status == OutcomeType.FAIL:
            return error(*result.errors)

        errors.extend(result.errors)

    return error(*errors) if errors else success()


def run_checks_or_raise(value: Any, checks: Sequence[BoundCheck]) -> None:
    """Run *checks* in order and raise on the first non-success outcome.

    Raises:
        VerificationError: Carrying only the messages of that outcome.
    """
    for check in checks:
        result = check(value)

        if result.status == OutcomeType.SUCCESS:
            continue

        raise VerificationError(list(result.errors))
