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

"""Infrastructure layer for snapshot serialization."""

import dataclasses
import json
import math
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Set
from uuid import UUID

from audit_trails.core.audit.exceptions import SnapshotSerializationError
from audit_trails.core.audit.repositories import SnapshotSerializer


class JsonSnapshotSerializer(SnapshotSerializer):
    """Compact JSON serializer for entity snapshots.

    Besides the JSON-native types it encodes dataclasses, models exposing
    ``model_dump()``, enums, dates and times, UUIDs, Decimals and sets.
    Anything else is rejected instead of being stringified, as are
    circular references, non-finite floats and mappings whose keys would
    collide once rendered as JSON object names (``1`` and ``"1"``).
    """

    def serialize(self, value: Any) -> str:
        """Serialize a snapshot to compact JSON.

        Args:
            value: Entity state to capture.

        Returns:
            JSON text.

        Raises:
            SnapshotSerializationError: If the value cannot be encoded.
        """
        try:
            return json.dumps(
                self._normalize(value, set()),
                ensure_ascii=False,
                allow_nan=False,
                separators=(',', ':'),
            )
        except (TypeError, ValueError, RecursionError) as exc:
            raise SnapshotSerializationError(type(value).__name__, str(exc)) from exc

    def _normalize(self, obj: Any, active: Set[int]) -> Any:
        """Convert a value into JSON-native data with string keys only."""
        if isinstance(obj, Enum):
            return self._normalize(obj.value, active)
        if obj is None or isinstance(obj, (str, int, float)):
            return obj
        if isinstance(obj, (datetime, date, time)):
            return obj.isoformat()
        if isinstance(obj, (UUID, Decimal)):
            return str(obj)

        if id(obj) in active:
            raise ValueError("Circular reference detected")
        active.add(id(obj))
        try:
            if isinstance(obj, Mapping):
                return self._normalize_mapping(obj, active)
            if isinstance(obj, (list, tuple, set, frozenset)):
                return [self._normalize(item, active) for item in obj]
            if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
                return self._normalize_mapping(
                    {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)},
                    active,
                )
            model_dump = getattr(obj, "model_dump", None)
            if callable(model_dump) and not isinstance(obj, type):
                return self._normalize(model_dump(mode="json"), active)
        finally:
            active.discard(id(obj))
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    def _normalize_mapping(self, mapping: Mapping, active: Set[int]) -> Dict[str, Any]:
        """Normalize a mapping, rejecting keys that collide as JSON names."""
        result: Dict[str, Any] = {}
        for key, item in mapping.items():
            name = _json_key(key)
            if name in result:
                raise ValueError(
                    f"Key {key!r} collides with another key as JSON name {name!r}"
                )
            result[name] = self._normalize(item, active)
        return result


def _json_key(key: Any) -> str:
    """Render a mapping key the way the JSON encoder names it."""
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, str):
        return key
    if key is True:
        return "true"
    if key is False:
        return "false"
    if key is None:
        return "null"
    if isinstance(key, int):
        return str(key)
    if isinstance(key, float):
        if not math.isfinite(key):
            raise ValueError(f"Out of range float key {key!r}")
        return float.__repr__(key)
    raise TypeError(
        f"Keys must be str, int, float, bool or None, not {type(key).__name__}"
    )
