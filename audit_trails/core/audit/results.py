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

"""Typed result model returned across the audit factory boundary."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .exceptions import AuditDomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a failure message, never both.

    Attributes:
        value: Payload of a successful result.
        error: Human-readable failure message.
    """

    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        """Wrap a successful value."""
        return cls(value=value)

    @classmethod
    def failure(cls, message: str) -> "Result[T]":
        """Wrap a failure message."""
        return cls(error=message)

    @property
    def ok(self) -> bool:
        """Return True when no error is present."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the failure.

        Raises:
            AuditDomainError: If the result is a failure.
        """
        if self.error is not None:
            raise AuditDomainError(self.error)
        return self.value
