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

"""Shared fixtures and fakes for audit domain tests."""

from datetime import datetime, timezone

import pytest

from audit_trails.core.audit.exceptions import SnapshotSerializationError


class FakeEntryIdGenerator:
    """Fake entry id generator returning predictable identifiers."""
    def __init__(self):
        """Initialize the fake generator."""
        self._counter = 1

    def generate(self) -> str:
        """Generate a predictable identifier for testing."""
        entry_id = f"123e4567-e89b-42d3-a456-426614174{self._counter:03d}"
        self._counter += 1
        return entry_id


class FailingSnapshotSerializer:
    """Serializer that rejects every value."""
    def __init__(self):
        """Initialize the fake serializer."""
        self.calls = []

    def serialize(self, value) -> str:
        """Record the call and raise."""
        self.calls.append(value)
        raise SnapshotSerializationError(type(value).__name__, "rejected by test")


class RecordingSnapshotSerializer:
    """Serializer that records values and returns a fixed marker."""
    def __init__(self):
        """Initialize the fake serializer."""
        self.calls = []

    def serialize(self, value) -> str:
        """Record the call and return a marker string."""
        self.calls.append(value)
        return f"snapshot-{len(self.calls)}"


@pytest.fixture
def entry_id_generator():
    """Provide fake entry id generator."""
    return FakeEntryIdGenerator()


@pytest.fixture
def failing_serializer():
    """Provide serializer that always fails."""
    return FailingSnapshotSerializer()


@pytest.fixture
def recording_serializer():
    """Provide serializer that records its inputs."""
    return RecordingSnapshotSerializer()


@pytest.fixture
def sample_timestamp():
    """Sample timestamp for testing."""
    return datetime.now(timezone.utc)
