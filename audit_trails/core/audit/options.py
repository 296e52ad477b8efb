# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
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

"""Configuration for audit entry construction."""

import os
from dataclasses import dataclass
from typing import ClassVar, Optional

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class AuditOptions:
    """Tunables shared by every entry the factory builds.

    Constructed once at startup and treated as read-only afterwards.

    Attributes:
        include_stack_trace: Capture the full traceback on error entries
            instead of the exception message only.
        max_description_length: Maximum description length before
            truncation; zero or negative disables truncation.

    Raises:
        ValueError: If a field has the wrong type.
    """

    include_stack_trace: bool = False
    max_description_length: int = 2000

    ENV_INCLUDE_STACK_TRACE: ClassVar[str] = "AUDIT_INCLUDE_STACK_TRACE"
    ENV_MAX_DESCRIPTION_LENGTH: ClassVar[str] = "AUDIT_MAX_DESCRIPTION_LENGTH"

    def __post_init__(self) -> None:
        """Validate field types."""
        if not isinstance(self.include_stack_trace, bool):
            raise ValueError(
                f"include_stack_trace must be a bool, "
                f"got {type(self.include_stack_trace).__name__}"
            )
        # bool is an int subclass
        if isinstance(self.max_description_length, bool) or not isinstance(
            self.max_description_length, int
        ):
            raise ValueError(
                f"max_description_length must be an int, "
                f"got {type(self.max_description_length).__name__}"
            )

    @classmethod
    def from_env(cls) -> "AuditOptions":
        """Build options from environment variables.

        Unset variables fall back to the field defaults.

        Returns:
            AuditOptions populated from the process environment.

        Raises:
            ValueError: If a variable holds an unparseable value.
        """
        defaults = cls()
        include_stack_trace = _parse_bool(
            os.getenv(cls.ENV_INCLUDE_STACK_TRACE),
            defaults.include_stack_trace,
            cls.ENV_INCLUDE_STACK_TRACE,
        )
        raw_length = os.getenv(cls.ENV_MAX_DESCRIPTION_LENGTH)
        if raw_length is None or not raw_length.strip():
            max_description_length = defaults.max_description_length
        else:
            try:
                max_description_length = int(raw_length.strip())
            except ValueError:
                raise ValueError(
                    f"{cls.ENV_MAX_DESCRIPTION_LENGTH} must be an integer, "
                    f"got {raw_length!r}"
                ) from None
        return cls(
            include_stack_trace=include_stack_trace,
            max_description_length=max_description_length,
        )


def _parse_bool(raw: Optional[str], default: bool, name: str) -> bool:
    """Parse a boolean environment value."""
    if raw is None or not raw.strip():
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")
