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

"""Custom exceptions for the wyntine verifier library."""

from typing import List, Optional


class VerifierError(Exception):
    """Base exception for verifier related errors."""
    pass


class VerificationError(VerifierError):
    """Exception raised when an asserted verification does not succeed."""

    def __init__(self, errors: Optional[List[str]] = None):
        self.errors: List[str] = list(errors or [])
        super().__init__("\n".join(self.errors))


class LanguageError(VerifierError):
    """Exception raised for message catalog and language selection errors."""
    pass


class VerifierConfigurationError(VerifierError):
    """Exception raised when a verifier is built from unusable arguments."""
    pass
