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

"""Domain services for the Audit domain."""

import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .entities import AuditEntry
from .exceptions import EntryConstructionError
from .options import AuditOptions
from .repositories import EntryIdGenerator, SnapshotSerializer
from .results import Result
from .value_objects import AuditOperation, AuditSeverity

TRUNCATION_MARKER = "..."

_SEVERITY_BY_OPERATION: Dict[AuditOperation, AuditSeverity] = {
    AuditOperation.DELETE: AuditSeverity.WARNING,
    AuditOperation.ACCESS_DENIED: AuditSeverity.WARNING,
    AuditOperation.CONFIGURATION_CHANGE: AuditSeverity.WARNING,
}


def severity_for(operation: AuditOperation) -> AuditSeverity:
    """Return the fixed severity for an operation kind.

    Args:
        operation: Operation being audited.

    Returns:
        WARNING for deletes, access denials and configuration changes,
        INFORMATION for everything else.
    """
    return _SEVERITY_BY_OPERATION.get(operation, AuditSeverity.INFORMATION)


class AuditEntryFactory:
    """Domain service building fully populated audit entries.

    Every ``create_*`` method returns a ``Result``: a populated
    ``AuditEntry`` on success or a message of the form
    ``"Failed to create <kind> audit entry: <cause>"``. Construction faults
    never propagate as exceptions. The factory holds no mutable state and
    may be shared between threads.

    Attributes:
        options: Shared construction options.
    """

    def __init__(
        self,
        options: AuditOptions,
        id_generator: EntryIdGenerator,
        serializer: SnapshotSerializer,
    ) -> None:
        """Initialize the factory with its collaborators.

        Args:
            options: Construction options.
            id_generator: Entry identifier generator.
            serializer: Snapshot serializer.
        """
        self.options = options
        self._id_generator = id_generator
        self._serializer = serializer

    def create_entry(
        self,
        operation: AuditOperation,
        description: str,
        user_id: Optional[str] = None,
    ) -> Result[AuditEntry]:
        """Create a basic audit entry.

        Args:
            operation: Operation being audited.
            description: Human-readable description.
            user_id: Optional actor identifier.

        Returns:
            Result wrapping the new entry.
        """
        try:
            entry = self._build(
                operation,
                description=self._truncate(description),
                user_id=user_id,
                severity=severity_for(operation),
            )
            return Result.success(entry)
        except Exception as exc:  # pylint: disable=broad-except
            return self._fail("", exc)

    def create_entity_entry(
        self,
        operation: AuditOperation,
        entity_type: str,
        entity_id: str,
        description: str,
        user_id: Optional[str] = None,
    ) -> Result[AuditEntry]:
        """Create an audit entry about a specific entity.

        Entity fields are stored as given; no validation is performed.

        Args:
            operation: Operation being audited.
            entity_type: Type of the affected entity.
            entity_id: Identifier of the affected entity.
            description: Human-readable description.
            user_id: Optional actor identifier.

        Returns:
            Result wrapping the new entry.
        """
        try:
            entry = self._build(
                operation,
                entity_type=entity_type,
                entity_id=entity_id,
                description=self._truncate(description),
                user_id=user_id,
                severity=severity_for(operation),
            )
            return Result.success(entry)
        except Exception as exc:  # pylint: disable=broad-except
            return self._fail("entity", exc)

    def create_change_entry(
        self,
        operation: AuditOperation,
        entity_type: str,
        entity_id: str,
        old_value: Any = None,
        new_value: Any = None,
        user_id: Optional[str] = None,
    ) -> Result[AuditEntry]:
        """Create an audit entry recording a before/after change.

        The description is generated as ``"{operation} on {entity_type}
        {entity_id}"``. A snapshot is serialized only for values that are
        not None; if either serialization fails no entry is produced.

        Args:
            operation: Operation being audited.
            entity_type: Type of the changed entity.
            entity_id: Identifier of the changed entity.
            old_value: Entity state before the change.
            new_value: Entity state after the change.
            user_id: Optional actor identifier.

        Returns:
            Result wrapping the new entry.
        """
        try:
            old_values = self._snapshot(old_value)
            new_values = self._snapshot(new_value)
            entry = self._build(
                operation,
                entity_type=entity_type,
                entity_id=entity_id,
                description=self._truncate(
                    f"{operation.value} on {entity_type} {entity_id}"
                ),
                user_id=user_id,
                severity=severity_for(operation),
                old_values=old_values,
                new_values=new_values,
            )
            return Result.success(entry)
        except Exception as exc:  # pylint: disable=broad-except
            return self._fail("change", exc)

    def create_error_entry(
        self,
        operation: AuditOperation,
        description: str,
        exception: BaseException,
        user_id: Optional[str] = None,
    ) -> Result[AuditEntry]:
        """Create an audit entry for a failed action.

        Severity is always ERROR and success always False, whatever the
        operation.

        Args:
            operation: Operation that failed.
            description: Human-readable description.
            exception: Exception raised by the failed action.
            user_id: Optional actor identifier.

        Returns:
            Result wrapping the new entry.
        """
        try:
            entry = self._build(
                operation,
                description=self._truncate(description),
                user_id=user_id,
                severity=AuditSeverity.ERROR,
                success=False,
                exception_details=self._exception_details(exception),
            )
            return Result.success(entry)
        except Exception as exc:  # pylint: disable=broad-except
            return self._fail("error", exc)

    def _build(self, operation: AuditOperation, **fields: Any) -> AuditEntry:
        """Assemble an entry with a fresh identifier and timestamp."""
        return AuditEntry(
            entry_id=self._id_generator.generate(),
            timestamp=self._now_utc(),
            operation=operation,
            **fields,
        )

    def _truncate(self, description: str) -> str:
        """Cap a description at the configured length plus a marker."""
        max_length = self.options.max_description_length
        if max_length > 0 and len(description) > max_length:
            return description[:max_length] + TRUNCATION_MARKER
        return description

    def _snapshot(self, value: Any) -> Optional[str]:
        """Serialize a snapshot, leaving absent values unset."""
        if value is None:
            return None
        return self._serializer.serialize(value)

    def _exception_details(self, exception: BaseException) -> str:
        """Render exception details according to the options."""
        if self.options.include_stack_trace:
            return "".join(
                traceback.format_exception(
                    type(exception), exception, exception.__traceback__
                )
            ).rstrip()
        return self._exception_message(exception)

    @staticmethod
    def _exception_message(exception: BaseException) -> str:
        """Return the bare exception message.

        A single argument is rendered directly so that ``KeyError("k")``
        yields ``k`` rather than its quoted repr.
        """
        if len(exception.args) == 1:
            return str(exception.args[0])
        return str(exception)

    def _now_utc(self) -> datetime:
        """Return current UTC timestamp."""
        return datetime.now(timezone.utc)

    @staticmethod
    def _fail(entry_kind: str, exc: Exception) -> Result[AuditEntry]:
        """Convert an unexpected construction fault into a failure result."""
        error = EntryConstructionError(entry_kind, str(exc))
        return Result.failure(error.message)
