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

"""Audit entry response DTO."""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class AuditEntryResponse:
    """Response DTO for recorded audit entries.

    Immutable data transfer object returned to callers once an entry has
    been saved. Timestamps are ISO 8601 formatted strings and enums are
    rendered by value.

    Attributes:
        entry_id: Unique entry identifier.
        timestamp: Construction timestamp (ISO 8601).
        operation: Operation name.
        severity: Severity name.
        entity_type: Type of the affected entity.
        entity_id: Identifier of the affected entity.
        user_id: Actor identifier.
        description: Entry description.
        success: False when the entry records a failed action.
        has_snapshots: True if either snapshot is present.
        metadata: Additional string key/value context.
    """

    entry_id: str
    timestamp: str
    operation: str
    severity: str
    entity_type: Optional[str]
    entity_id: Optional[str]
    user_id: Optional[str]
    description: str
    success: bool
    has_snapshots: bool = False
    metadata: Optional[Dict[str, str]] = None

    @staticmethod
    def from_entity(entry) -> "AuditEntryResponse":
        """Create response DTO from an AuditEntry entity.

        Args:
            entry: AuditEntry domain entity.

        Returns:
            AuditEntryResponse DTO with serialized values.
        """
        return AuditEntryResponse(
            entry_id=entry.entry_id,
            timestamp=entry.timestamp.isoformat(),
            operation=entry.operation.value,
            severity=entry.severity.value,
            entity_type=entry.entity_type,
            entity_id=entry.entity_id,
            user_id=entry.user_id,
            description=entry.description,
            success=entry.success,
            has_snapshots=entry.old_values is not None or entry.new_values is not None,
            metadata=dict(entry.metadata) if entry.metadata is not None else None,
        )
