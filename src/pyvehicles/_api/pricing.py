"""Pricing service endpoint.

Endpoint:
  - GET /services/price?vehicleId=<id>

Replies ``{"currency": "USD", "price": 12345.67, "vehicleId": 1}``;
an unknown vehicle id is answered with HTTP 404.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from pyvehicles._constants import PRICE_ENDPOINT
from pyvehicles._transport import Transport
from pyvehicles.exceptions import PriceNotFoundError, VehiclesTransportError
from pyvehicles.models.price import Price

_logger = logging.getLogger(__name__)


async def fetch_price(transport: Transport, vehicle_id: int) -> Price:
    """Fetch the price for *vehicle_id* from the pricing service.

    Raises
    ------
    PriceNotFoundError
        The service answered 404 for this id.
    VehiclesTransportError
        Any other HTTP failure, or a body that is not a valid price.
    """
    try:
        payload = await transport.get_json(PRICE_ENDPOINT, {"vehicleId": vehicle_id})
    except VehiclesTransportError as exc:
        if exc.status_code == 404:
            raise PriceNotFoundError(vehicle_id) from exc
        raise

    if not isinstance(payload, dict):
        raise VehiclesTransportError(
            f"{PRICE_ENDPOINT} returned {type(payload).__name__}, expected an object",
            endpoint=PRICE_ENDPOINT,
        )

    try:
        price = Price.model_validate(payload)
    except ValidationError as exc:
        raise VehiclesTransportError(
            f"{PRICE_ENDPOINT} returned an invalid price for vehicle {vehicle_id}: {exc}",
            endpoint=PRICE_ENDPOINT,
        ) from exc

    if price.vehicle_id is None:
        price = price.model_copy(update={"vehicle_id": vehicle_id})
    elif price.vehicle_id != vehicle_id:
        _logger.warning("Pricing service answered vehicle %s for request %s", price.vehicle_id, vehicle_id)

    return price
