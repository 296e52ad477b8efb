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

"""Value objects for the Audit domain.

All value objects are immutable and defined by their values, not identity.
"""

from enum import Enum


class AuditOperation(str, Enum):
    """Kind of action an audit entry describes.

    Values are the PascalCase operation names so that generated
    descriptions read ``"Update on Order 42"``.
    """

    CREATE = "Create"
    READ = "Read"
    UPDATE = "Update"
    DELETE = "Delete"
    LOGIN = "Login"
    LOGOUT = "Logout"
    ACCESS_DENIED = "AccessDenied"
    EXPORT = "Export"
    IMPORT = "Import"
    CONFIGURATION_CHANGE = "ConfigurationChange"
    CUSTOM = "Custom"

    def __str__(self) -> str:
        """Return the operation name."""
        return self.value


class AuditSeverity(str, Enum):
    """Coarse impact classification attached to an audit entry."""

    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"
    SUCCESS = "Success"

    def __str__(self) -> str:
        """Return the severity name."""
        return self.value
