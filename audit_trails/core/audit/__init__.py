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

"""Audit domain module for Audit Trails."""

from .entities import AuditEntry
from .exceptions import (
    AuditDomainError,
    EntryConstructionError,
    SnapshotSerializationError,
    AuditEntrySaveError,
)
from .results import Result
from .repositories import (
    AuditEntryRepository,
    EntryIdGenerator,
    SnapshotSerializer,
)
from .options import AuditOptions
from .value_objects import AuditOperation, AuditSeverity
from .services import AuditEntryFactory, severity_for, TRUNCATION_MARKER

__all__ = [
    "AuditEntry",
    "AuditDomainError",
    "EntryConstructionError",
    "SnapshotSerializationError",
    "AuditEntrySaveError",
    "Result",
    "AuditEntryRepository",
    "EntryIdGenerator",
    "SnapshotSerializer",
    "AuditOptions",
    "AuditOperation",
    "AuditSeverity",
    "AuditEntryFactory",
    "severity_for",
    "TRUNCATION_MARKER",
]
