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

"""RecordAuditEntry use case implementation."""

import logging
import threading
from typing import Optional

from audit_trails.core.audit.entities import AuditEntry
from audit_trails.core.audit.exceptions import AuditEntrySaveError
from audit_trails.core.audit.repositories import AuditEntryRepository
from audit_trails.core.audit.results import Result

from ..dtos import AuditEntryResponse

logger = logging.getLogger(__name__)


class RecordAuditEntryUseCase:
    """Use case forwarding constructed audit entries to the save port.

    This use case owns the caller side of the audit flow:
    - Failed constructions are reported and never saved
    - Successful entries are handed to the repository exactly once
    - Save failures are returned, not retried

    Attributes:
        audit_repo: Audit entry repository port.
    """

    def __init__(self, audit_repo: AuditEntryRepository) -> None:
        """Initialize use case with repository dependency.

        Args:
            audit_repo: Audit entry repository implementation.
        """
        self._audit_repo = audit_repo

    def execute(
        self,
        entry_result: Result[AuditEntry],
        cancel_event: Optional[threading.Event] = None,
    ) -> Result[AuditEntryResponse]:
        """Save the entry carried by a factory result.

        Args:
            entry_result: Result returned by an ``AuditEntryFactory`` method.
            cancel_event: Optional cancellation signal passed to the repository.

        Returns:
            Result wrapping the saved entry DTO, or the construction or
            save failure message.
        """
        if not entry_result.ok:
            logger.warning("Audit entry not saved: %s", entry_result.error)
            return Result.failure(entry_result.error)

        entry = entry_result.value
        save_result = self._audit_repo.save_entry(entry, cancel_event)
        if not save_result.ok:
            error = AuditEntrySaveError(entry.entry_id, save_result.error)
            logger.warning("Audit entry %s not saved: %s", entry.entry_id, save_result.error)
            return Result.failure(error.message)

        logger.info(
            "Audit entry saved: %s (%s, %s)",
            entry.entry_id,
            entry.operation.value,
            entry.severity.value,
        )
        return Result.success(self._to_response(entry))

    def _to_response(self, entry: AuditEntry) -> AuditEntryResponse:
        """Map domain entity to response DTO."""
        return AuditEntryResponse.from_entity(entry)
