"""Maps (reverse geocoding) service endpoint.

Endpoint:
  - GET /maps?lat=<lat>&lon=<lon>

Replies ``{"address": "...", "city": "...", "state": "...", "zip": "..."}``.
"""

from __future__ import annotations

import logging
from typing import Any

from pyvehicles._constants import MAPS_ENDPOINT
from pyvehicles._transport import Transport
from pyvehicles.exceptions import VehiclesTransportError
from pyvehicles.models.vehicle import Location

_logger = logging.getLogger(__name__)

_ADDRESS_FIELDS = ("address", "city", "state", "zip")


def _address_update(payload: dict[str, Any]) -> dict[str, Any]:
    """Pick the address fields out of a maps reply, keeping non-empty text only."""
    parsed = Location.model_validate({key: payload.get(key) for key in _ADDRESS_FIELDS})
    return {key: getattr(parsed, key) for key in _ADDRESS_FIELDS if getattr(parsed, key) is not None}


async def fetch_address(transport: Transport, location: Location) -> Location:
    """Return a copy of *location* with the address fields filled in.

    Locations without coordinates are returned unchanged; there is
    nothing to look up.
    """
    if location.lat is None or location.lon is None:
        _logger.debug("Skipping address lookup for location without coordinates")
        return location

    payload = await transport.get_json(MAPS_ENDPOINT, {"lat": location.lat, "lon": location.lon})
    if not isinstance(payload, dict):
        raise VehiclesTransportError(
            f"{MAPS_ENDPOINT} returned {type(payload).__name__}, expected an object",
            endpoint=MAPS_ENDPOINT,
        )

    return location.model_copy(update=_address_update(payload))
