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

"""Audit entry entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..value_objects import AuditOperation, AuditSeverity


@dataclass(frozen=True)
class AuditEntry:
    """Immutable audit entry record.

    Describes a single noteworthy action taken in a host system. Entries
    are built in one step by ``AuditEntryFactory`` and never change once
    returned; absent optional fields are ``None``.

    Attributes:
        entry_id: Unique entry identifier (UUID string).
        timestamp: UTC instant the entry was constructed.
        operation: Kind of action that occurred.
        severity: Impact classification.
        entity_type: Type of the affected entity.
        entity_id: Identifier of the affected entity.
        user_id: Actor who performed the action.
        name: Optional short name for the entry.
        description: Human-readable description (possibly truncated).
        old_values: JSON snapshot of the entity before the change.
        new_values: JSON snapshot of the entity after the change.
        metadata: Additional string key/value context.
        exception_details: Captured exception message or traceback.
        success: False when the entry records a failed action.
    """

    entry_id: str
    timestamp: datetime
    operation: AuditOperation
    severity: AuditSeverity = AuditSeverity.INFORMATION
    entity_type: Optional[str] = None
    entity_id: Optional[str] = None
    user_id: Optional[str] = None
    name: Optional[str] = None
    description: str = ""
    old_values: Optional[str] = None
    new_values: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
    exception_details: Optional[str] = None
    success: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Return the entry as a plain mapping ready for persistence.

        Enum members are rendered by value and the timestamp as ISO 8601.
        """
        return {
            "entry_id": self.entry_id,
            "timestamp": self.timestamp.isoformat(),
            "operation": self.operation.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "user_id": self.user_id,
            "name": self.name,
            "description": self.description,
            "old_values": self.old_values,
            "new_values": self.new_values,
            "metadata": dict(self.metadata) if self.metadata is not None else None,
            "exception_details": self.exception_details,
            "success": self.success,
        }
