"""Custom exception hierarchy for pyvehicles."""

from __future__ import annotations


class VehiclesError(Exception):
    """Base exception for all pyvehicles errors."""


class VehiclesConfigError(VehiclesError):
    """Invalid or missing configuration."""


class VehiclesTransportError(VehiclesError):
    """HTTP-level failure (network, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class NotFoundError(VehiclesError):
    """A lookup keyed by vehicle id found nothing."""

    def __init__(self, message: str, *, vehicle_id: int | None) -> None:
        self.vehicle_id = vehicle_id
        super().__init__(message)


class CarNotFoundError(NotFoundError):
    """The vehicle store has no record for the requested id.

    Raised by ``find_by_id``, the update path of ``save`` and ``delete``.
    """

    def __init__(self, vehicle_id: int | None) -> None:
        super().__init__(f"Car not found: id={vehicle_id}", vehicle_id=vehicle_id)


class PriceNotFoundError(NotFoundError):
    """The price source has no entry for the requested vehicle id."""

    def __init__(self, vehicle_id: int | None) -> None:
        super().__init__(f"Cannot find price for vehicle {vehicle_id}", vehicle_id=vehicle_id)


class PriceCatalogError(VehiclesError):
    """The price catalog could not be built (duplicate or invalid entries)."""
