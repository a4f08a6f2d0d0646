"""Vehicle aggregation service.

Combines persisted vehicle records with a price lookup and a location
lookup, and owns create/update/delete including the merge-on-update
policy. Every call is independent: nothing is cached between calls and
no collaborator error is retried, swallowed or translated.

Deadlines are the caller's: wrap a call in ``asyncio.timeout(...)`` and
cancellation reaches whichever collaborator call is in flight.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pyvehicles.exceptions import CarNotFoundError
from pyvehicles.models.price import Price
from pyvehicles.models.vehicle import Location, Vehicle
from pyvehicles.sources import LocationResolver, PriceSource
from pyvehicles.store import VehicleStore

_logger = logging.getLogger(__name__)

#: Fields an update payload may change on an existing record. Everything
#: else (id, created_at, any store-managed field) is kept from the stored
#: record. Do not widen this list.
UPDATABLE_FIELDS: tuple[str, ...] = ("details", "location", "condition", "modified_at")


def _require_id(vehicle_id: Any) -> int:
    if vehicle_id is None:
        raise ValueError("vehicle_id is required")
    if isinstance(vehicle_id, bool) or not isinstance(vehicle_id, int):
        raise TypeError(f"vehicle_id must be an int, got {type(vehicle_id).__name__}")
    return vehicle_id


def merge_update(existing: Vehicle, incoming: Vehicle) -> Vehicle:
    """Copy exactly :data:`UPDATABLE_FIELDS` from *incoming* onto *existing*."""
    return existing.model_copy(update={name: getattr(incoming, name) for name in UPDATABLE_FIELDS})


class VehicleAggregationService:
    """Create, read, update and delete vehicles, enriching reads.

    Parameters
    ----------
    store : VehicleStore
        Persistence for vehicle records.
    price_source : PriceSource
        Price lookup used by :meth:`find_by_id`.
    location_resolver : LocationResolver
        Address lookup used by :meth:`list` and :meth:`find_by_id`.
    concurrent_lookups : bool
        Run the price and location lookups of :meth:`find_by_id`
        concurrently. The result is the same either way.
    """

    def __init__(
        self,
        store: VehicleStore,
        price_source: PriceSource,
        location_resolver: LocationResolver,
        *,
        concurrent_lookups: bool = False,
    ) -> None:
        self._store = store
        self._price_source = price_source
        self._location_resolver = location_resolver
        self._concurrent_lookups = concurrent_lookups

    async def list(self) -> list[Vehicle]:
        """Return all vehicles in store order, each with its location resolved."""
        vehicles = await self._store.find_all()
        enriched: list[Vehicle] = []
        for vehicle in vehicles:
            location = await self._location_resolver.resolve(vehicle.location)
            enriched.append(vehicle.model_copy(update={"location": location}))
        _logger.debug("Listed %d vehicles", len(enriched))
        return enriched

    async def find_by_id(self, vehicle_id: int) -> Vehicle:
        """Return one vehicle with price and location filled in.

        Raises
        ------
        CarNotFoundError
            No record with this id; no lookup is attempted.
        PriceNotFoundError
            The price source has no price for this id.
        """
        vehicle_id = _require_id(vehicle_id)
        vehicle = await self._store.find_by_id(vehicle_id)
        if vehicle is None:
            raise CarNotFoundError(vehicle_id)

        if self._concurrent_lookups:
            price, location = await self._lookup_concurrently(vehicle_id, vehicle.location)
        else:
            price = await self._price_source.get_price(vehicle_id)
            location = await self._location_resolver.resolve(vehicle.location)

        return vehicle.model_copy(update={"price": price, "location": location})

    async def save(self, vehicle: Vehicle) -> Vehicle:
        """Create a vehicle, or update an existing one when ``vehicle.id`` is set.

        On update only :data:`UPDATABLE_FIELDS` are taken from *vehicle*.

        Raises
        ------
        CarNotFoundError
            ``vehicle.id`` is set but no such record exists.
        """
        if vehicle.id is None:
            stored = await self._store.save(vehicle)
            _logger.debug("Created vehicle id=%s", stored.id)
            return stored

        existing = await self._store.find_by_id(vehicle.id)
        if existing is None:
            raise CarNotFoundError(vehicle.id)
        stored = await self._store.save(merge_update(existing, vehicle))
        _logger.debug("Updated vehicle id=%s", stored.id)
        return stored

    async def delete(self, vehicle_id: int) -> None:
        """Delete a vehicle. No price or location lookup is made.

        Raises
        ------
        CarNotFoundError
            No record with this id; the store's delete is not called.
        """
        vehicle_id = _require_id(vehicle_id)
        _logger.debug("Deleting vehicle id=%s", vehicle_id)
        vehicle = await self._store.find_by_id(vehicle_id)
        if vehicle is None:
            raise CarNotFoundError(vehicle_id)
        await self._store.delete(vehicle)

    async def _lookup_concurrently(self, vehicle_id: int, location: Location) -> tuple[Price, Location]:
        price_task = asyncio.ensure_future(self._price_source.get_price(vehicle_id))
        location_task = asyncio.ensure_future(self._location_resolver.resolve(location))
        try:
            price, resolved = await asyncio.gather(price_task, location_task)
        except BaseException:
            # A failed (or cancelled) lookup must not leave the other one running.
            price_task.cancel()
            location_task.cancel()
            raise
        return price, resolved
