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

"""Shared fixtures for audit use case tests."""

import threading
from typing import List, Optional

import pytest

from audit_trails.core.audit.entities import AuditEntry
from audit_trails.core.audit.results import Result


class FakeAuditEntryRepository:
    """In-memory fake implementation of AuditEntryRepository."""
    def __init__(self) -> None:
        """Initialize the fake repository."""
        self._entries: List[AuditEntry] = []
        self.cancel_events: List[Optional[threading.Event]] = []

    def save_entry(
        self,
        entry: AuditEntry,
        cancel_event: Optional[threading.Event] = None,
    ) -> Result[None]:
        """Save an audit entry unless the caller cancelled."""
        self.cancel_events.append(cancel_event)
        if cancel_event is not None and cancel_event.is_set():
            return Result.failure("operation cancelled")
        self._entries.append(entry)
        return Result.success(None)

    def find_all(self) -> List[AuditEntry]:
        """Return all saved entries."""
        return list(self._entries)


class RejectingAuditEntryRepository:
    """Fake repository that rejects every entry."""
    def __init__(self, reason: str = "storage unavailable") -> None:
        """Initialize the fake repository."""
        self._reason = reason
        self.attempts = 0

    def save_entry(
        self,
        entry: AuditEntry,
        cancel_event: Optional[threading.Event] = None,
    ) -> Result[None]:
        """Reject the entry."""
        self.attempts += 1
        return Result.failure(self._reason)


@pytest.fixture
def audit_repo():
    """Provide fake audit entry repository."""
    return FakeAuditEntryRepository()


@pytest.fixture
def rejecting_audit_repo():
    """Provide fake repository that always fails."""
    return RejectingAuditEntryRepository()
