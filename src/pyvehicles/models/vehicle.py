"""Vehicle record models."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from pyvehicles.models._base import Timestamp, VehiclesBaseModel
from pyvehicles.models.price import Price
from pyvehicles.normalize import safe_float, safe_int, safe_str


class Condition(StrEnum):
    """Vehicle condition."""

    NEW = "NEW"
    USED = "USED"

    @classmethod
    def _missing_(cls, value: object) -> Condition | None:
        if isinstance(value, str):
            upper = value.strip().upper()
            for member in cls:
                if member.value == upper:
                    return member
        return None


class Manufacturer(VehiclesBaseModel):
    """Vehicle manufacturer (e.g. ``101`` / ``"Chevrolet"``)."""

    code: int | None = None
    name: str | None = None


class Details(VehiclesBaseModel):
    """Descriptive vehicle attributes.

    The aggregation service treats this as an opaque block: it is copied
    as a whole on update and never inspected.
    """

    # ``model_year`` would otherwise clash with pydantic's ``model_`` namespace.
    model_config = ConfigDict(protected_namespaces=())

    body: str | None = None
    model: str | None = None
    manufacturer: Manufacturer | None = None
    number_of_doors: int | None = None
    fuel_type: str | None = None
    engine: str | None = None
    mileage: int | None = None
    model_year: int | None = None
    production_year: int | None = None
    external_color: str | None = None

    @field_validator("number_of_doors", "mileage", "model_year", "production_year", mode="before")
    @classmethod
    def _coerce_ints(cls, value: Any) -> int | None:
        return safe_int(value)


class Location(VehiclesBaseModel):
    """Raw coordinates plus the address text a location resolver fills in.

    Parameters
    ----------
    lat : float or None
        Latitude in degrees.
    lon : float or None
        Longitude in degrees.
    address : str or None
        Street address.
    city : str or None
        City name.
    state : str or None
        State or region.
    zip : str or None
        Postal code.
    """

    lat: float | None = None
    lon: float | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None

    @property
    def is_resolved(self) -> bool:
        """Whether address text is attached to the coordinates."""
        return self.address is not None

    @field_validator("lat", "lon", mode="before")
    @classmethod
    def _coerce_floats(cls, value: Any) -> float | None:
        return safe_float(value)

    @field_validator("address", "city", "state", "zip", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return safe_str(value)


class Vehicle(VehiclesBaseModel):
    """A vehicle record.

    ``id`` stays ``None`` until the store persists the record for the
    first time. ``price`` is derived on read and is never the source of
    truth; ``created_at`` is managed by the store.
    """

    id: int | None = None
    details: Details = Field(default_factory=Details)
    location: Location = Field(default_factory=Location)
    condition: Condition | None = None
    price: Price | None = None
    created_at: Timestamp = None
    modified_at: Timestamp = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @field_validator("condition", mode="before")
    @classmethod
    def _coerce_condition(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value
