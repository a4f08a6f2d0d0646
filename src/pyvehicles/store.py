"""Vehicle persistence.

The store is the sole owner of persisted vehicle state. It assigns
identifiers and maintains the ``created_at`` bookkeeping field; the
aggregation service never sets either.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol

from pyvehicles.models.vehicle import Vehicle

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class VehicleStore(Protocol):
    """Persists and retrieves vehicle records by id."""

    async def find_all(self) -> list[Vehicle]:
        ...

    async def find_by_id(self, vehicle_id: int) -> Vehicle | None:
        ...

    async def save(self, vehicle: Vehicle) -> Vehicle:
        """Persist *vehicle*, assigning an id when it has none."""
        ...

    async def delete(self, vehicle: Vehicle) -> None:
        ...


class InMemoryVehicleStore:
    """Thread-safe in-memory :class:`VehicleStore`.

    Ids are assigned sequentially starting at ``start_id`` and are never
    reused. ``find_all`` returns records in insertion order. Prices are
    derived data and are stripped on save.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = _utcnow,
        start_id: int = 1,
    ) -> None:
        self._clock = clock
        self._next_id = start_id
        self._records: dict[int, Vehicle] = {}
        self._lock = threading.Lock()

    async def find_all(self) -> list[Vehicle]:
        with self._lock:
            return list(self._records.values())

    async def find_by_id(self, vehicle_id: int) -> Vehicle | None:
        with self._lock:
            return self._records.get(vehicle_id)

    async def save(self, vehicle: Vehicle) -> Vehicle:
        with self._lock:
            now = self._clock()
            existing = self._records.get(vehicle.id) if vehicle.id is not None else None

            if vehicle.id is None:
                vehicle_id = self._next_id
                self._next_id += 1
            else:
                vehicle_id = vehicle.id
                self._next_id = max(self._next_id, vehicle_id + 1)

            created_at = existing.created_at if existing is not None else now
            stored = vehicle.model_copy(
                update={
                    "id": vehicle_id,
                    "price": None,
                    "created_at": created_at,
                    "modified_at": vehicle.modified_at or now,
                }
            )
            self._records[vehicle_id] = stored

        _logger.debug("Stored vehicle id=%s (%s)", vehicle_id, "update" if existing else "insert")
        return stored

    async def delete(self, vehicle: Vehicle) -> None:
        with self._lock:
            removed = self._records.pop(vehicle.id, None) if vehicle.id is not None else None
        if removed is None:
            _logger.debug("Delete of unknown vehicle id=%s ignored", vehicle.id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
