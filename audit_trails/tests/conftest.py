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

"""Shared pytest fixtures for Audit Trails tests."""

import sys
from pathlib import Path

import pytest

# Add repository root to Python path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from audit_trails.core.audit.options import AuditOptions  # noqa: E402
from audit_trails.infra.factory import create_audit_entry_factory  # noqa: E402


@pytest.fixture
def audit_options():
    """Default audit options."""
    return AuditOptions()


@pytest.fixture
def entry_factory(audit_options):  # noqa: W0621
    """Create an AuditEntryFactory with default adapters.

    Args:
        audit_options: Audit options fixture.

    Returns:
        AuditEntryFactory using UUID v4 ids and JSON snapshots.
    """
    return create_audit_entry_factory(audit_options)
