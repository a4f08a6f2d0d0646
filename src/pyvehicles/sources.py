"""Price and location lookups consumed by the aggregation service.

Two deployments satisfy :class:`PriceSource`: the in-process catalog
(:class:`CatalogPriceSource`) and a remote pricing service
(:class:`RemotePriceSource`). Locations are resolved by the maps
service (:class:`RemoteLocationResolver`).
"""

from __future__ import annotations

import logging
from typing import Protocol

from pyvehicles._api.maps import fetch_address
from pyvehicles._api.pricing import fetch_price
from pyvehicles._transport import Transport
from pyvehicles.catalog import PriceCatalog, default_catalog
from pyvehicles.models.price import Price
from pyvehicles.models.vehicle import Location

_logger = logging.getLogger(__name__)


class PriceSource(Protocol):
    """Resolves a price for a vehicle id.

    Implementations raise :class:`~pyvehicles.exceptions.PriceNotFoundError`
    for unknown ids.
    """

    async def get_price(self, vehicle_id: int) -> Price:
        ...


class LocationResolver(Protocol):
    """Resolves human-readable address text for raw coordinates."""

    async def resolve(self, location: Location) -> Location:
        ...


class CatalogPriceSource:
    """Serve prices straight from a :class:`PriceCatalog`.

    Uses the process-wide catalog unless one is injected.
    """

    def __init__(self, catalog: PriceCatalog | None = None) -> None:
        self._catalog = catalog if catalog is not None else default_catalog()

    @property
    def catalog(self) -> PriceCatalog:
        return self._catalog

    async def get_price(self, vehicle_id: int) -> Price:
        return self._catalog.get_price(vehicle_id)


class RemotePriceSource:
    """Fetch prices from a pricing service over HTTP."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def get_price(self, vehicle_id: int) -> Price:
        price = await fetch_price(self._transport, vehicle_id)
        _logger.debug("Remote price for vehicle %s: %s", vehicle_id, price)
        return price


class RemoteLocationResolver:
    """Reverse-geocode coordinates through the maps service."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def resolve(self, location: Location) -> Location:
        return await fetch_address(self._transport, location)
