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

"""Unit tests for AuditEntry entity."""

from datetime import datetime, timezone

import pytest

from audit_trails.core.audit.entities.audit_entry import AuditEntry
from audit_trails.core.audit.value_objects import AuditOperation, AuditSeverity


class TestAuditEntry:
    """Tests for AuditEntry entity."""

    def test_defaults(self, sample_timestamp):
        """Optional fields should default to None and success to True."""
        entry = AuditEntry(
            entry_id="entry-1",
            timestamp=sample_timestamp,
            operation=AuditOperation.READ,
        )
        assert entry.severity == AuditSeverity.INFORMATION
        assert entry.description == ""
        assert entry.success is True
        assert entry.entity_type is None
        assert entry.entity_id is None
        assert entry.user_id is None
        assert entry.name is None
        assert entry.old_values is None
        assert entry.new_values is None
        assert entry.metadata is None
        assert entry.exception_details is None

    def test_absent_distinct_from_empty(self, sample_timestamp):
        """An empty string should be kept, not collapsed to None."""
        entry = AuditEntry(
            entry_id="entry-1",
            timestamp=sample_timestamp,
            operation=AuditOperation.READ,
            entity_type="",
        )
        assert entry.entity_type == ""
        assert entry.entity_id is None

    def test_entry_immutability(self, sample_timestamp):
        """AuditEntry should be frozen."""
        entry = AuditEntry(
            entry_id="entry-1",
            timestamp=sample_timestamp,
            operation=AuditOperation.CREATE,
        )
        with pytest.raises(AttributeError):
            entry.success = False

    def test_to_dict(self):
        """to_dict should render enums by value and the timestamp as ISO 8601."""
        timestamp = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        entry = AuditEntry(
            entry_id="entry-1",
            timestamp=timestamp,
            operation=AuditOperation.CONFIGURATION_CHANGE,
            severity=AuditSeverity.WARNING,
            entity_type="Setting",
            entity_id="theme",
            metadata={"source": "admin-ui"},
        )
        data = entry.to_dict()
        assert data["timestamp"] == "2026-01-02T03:04:05+00:00"
        assert data["operation"] == "ConfigurationChange"
        assert data["severity"] == "Warning"
        assert data["metadata"] == {"source": "admin-ui"}
        assert data["old_values"] is None
        assert data["success"] is True

    def test_to_dict_copies_metadata(self, sample_timestamp):
        """Mutating the rendered mapping should not touch the entry."""
        entry = AuditEntry(
            entry_id="entry-1",
            timestamp=sample_timestamp,
            operation=AuditOperation.EXPORT,
            metadata={"format": "csv"},
        )
        entry.to_dict()["metadata"]["format"] = "xlsx"
        assert entry.metadata == {"format": "csv"}
