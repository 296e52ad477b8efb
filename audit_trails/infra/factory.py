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

"""Infrastructure wiring for the audit entry factory."""

from typing import Optional

from audit_trails.core.audit.options import AuditOptions
from audit_trails.core.audit.repositories import EntryIdGenerator, SnapshotSerializer
from audit_trails.core.audit.services import AuditEntryFactory

from .id_generator import UUIDv4EntryIdGenerator
from .serializers import JsonSnapshotSerializer


def create_audit_entry_factory(
    options: Optional[AuditOptions] = None,
    id_generator: Optional[EntryIdGenerator] = None,
    serializer: Optional[SnapshotSerializer] = None,
) -> AuditEntryFactory:
    """Build an AuditEntryFactory wired with the default adapters.

    Args:
        options: Construction options. Defaults to ``AuditOptions()``.
        id_generator: Entry identifier generator. Defaults to UUID v4.
        serializer: Snapshot serializer. Defaults to compact JSON.

    Returns:
        AuditEntryFactory ready to share across the application.
    """
    return AuditEntryFactory(
        options or AuditOptions(),
        id_generator or UUIDv4EntryIdGenerator(),
        serializer or JsonSnapshotSerializer(),
    )
