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

"""Configuration management for the verifier library."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import PACKAGE_LOGGER_NAME, configure_split_stream_logging


@dataclass
class VerifierConfig:
    """Process-wide settings for the verifier library."""
    default_lang: str = "en"
    log_level: str = "INFO"
    print_level: str = "ERROR"

    @classmethod
    def from_env(cls) -> 'VerifierConfig':
        """Create configuration from environment variables."""
        return cls(
            default_lang=os.getenv('WYNTINE_VERIFIER_LANG', 'en').strip().lower(),
            log_level=os.getenv('WYNTINE_VERIFIER_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('WYNTINE_VERIFIER_PRINT_LEVEL', 'ERROR'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(
            level=level,
            stderr_level=stderr_level,
            formatter=formatter,
            logger_name=PACKAGE_LOGGER_NAME,
        )


# Global configuration instance
verifier_config = VerifierConfig.from_env()
