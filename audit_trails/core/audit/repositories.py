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

"""Port interfaces (Protocols) for the Audit domain.

These define the contracts that infrastructure implementations must satisfy.
The library ships adapters for identifiers and snapshots; persistence is
always supplied by the caller.
"""

import threading
from typing import Any, Optional, Protocol

from .entities import AuditEntry
from .results import Result


class EntryIdGenerator(Protocol):
    """Generator port for creating audit entry identifiers."""

    def generate(self) -> str:
        """Generate a new entry identifier.

        Implementations must be safe to call from several threads and
        must not rely on a shared counter.

        Returns:
            A new, unique identifier string.
        """
        ...


class SnapshotSerializer(Protocol):
    """Serializer port for before/after entity snapshots."""

    def serialize(self, value: Any) -> str:
        """Serialize a snapshot value to text.

        Args:
            value: Entity state to capture. Never None.

        Returns:
            Textual snapshot.

        Raises:
            SnapshotSerializationError: If the value cannot be represented
                without losing data.
        """
        ...


class AuditEntryRepository(Protocol):
    """Save port receiving completed audit entries for durable storage."""

    def save_entry(
        self,
        entry: AuditEntry,
        cancel_event: Optional[threading.Event] = None,
    ) -> Result[None]:
        """Persist an audit entry.

        Must not retain partial state when it fails; callers do not retry.

        Args:
            entry: Completed audit entry.
            cancel_event: Optional signal that the caller gave up.

        Returns:
            Successful result, or a failure carrying a descriptive message.
        """
        ...
