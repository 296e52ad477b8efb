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

"""Domain exceptions for the Audit domain."""

from typing import Optional


class AuditDomainError(Exception):
    """Base exception for all audit domain errors."""

    def __init__(self, message: str, correlation_id: Optional[str] = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error description.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(message)
        self.message = message
        self.correlation_id = correlation_id


class EntryConstructionError(AuditDomainError):
    """An audit entry could not be constructed."""

    def __init__(
        self,
        entry_kind: str,
        cause: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize entry construction error.

        Args:
            entry_kind: Kind of entry being built (empty for a basic entry).
            cause: Description of the underlying fault.
            correlation_id: Optional correlation ID for tracing.
        """
        kind = f"{entry_kind} " if entry_kind else ""
        super().__init__(
            f"Failed to create {kind}audit entry: {cause}",
            correlation_id=correlation_id
        )
        self.entry_kind = entry_kind
        self.cause = cause


class SnapshotSerializationError(AuditDomainError):
    """A before/after snapshot value could not be serialized."""

    def __init__(
        self,
        type_name: str,
        reason: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize snapshot serialization error.

        Args:
            type_name: Name of the type that failed to serialize.
            reason: Underlying encoder message.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Cannot serialize snapshot of type {type_name}: {reason}",
            correlation_id=correlation_id
        )
        self.type_name = type_name
        self.reason = reason


class AuditEntrySaveError(AuditDomainError):
    """The save port rejected an audit entry."""

    def __init__(
        self,
        entry_id: str,
        reason: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize audit entry save error.

        Args:
            entry_id: Identifier of the entry that was not saved.
            reason: Failure message reported by the save port.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Failed to save audit entry {entry_id}: {reason}",
            correlation_id=correlation_id
        )
        self.entry_id = entry_id
        self.reason = reason
