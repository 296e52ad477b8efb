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

"""Infrastructure layer for audit entry identifier generation."""

import uuid

from audit_trails.core.audit.repositories import EntryIdGenerator


class UUIDv4EntryIdGenerator(EntryIdGenerator):
    """UUID v4 generator for audit entry identifiers.

    Draws 122 random bits from the operating system per identifier, so
    concurrent callers need no coordination and collisions are negligible.
    """

    def generate(self) -> str:
        """Generate a new UUID v4 entry identifier.

        Returns:
            str: Canonical 36-character UUID string.
        """
        return str(uuid.uuid4())
