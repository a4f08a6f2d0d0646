"""Base model and shared field types for vehicle records.

Every model inherits from :class:`VehiclesBaseModel` which provides:

* ``alias_generator=to_camel`` so camelCase JSON keys from the vehicle,
  pricing and maps services map automatically to snake_case fields.
* A ``model_validator(mode="before")`` that drops placeholder values
  (``None``, ``""``, ``"--"``) so the field default is used.
* Frozen instances; enrichment and merges produce copies.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from pyvehicles.normalize import normalize_timestamp_seconds

# Placeholder strings treated as "not available".
_PLACEHOLDERS = frozenset({"", "--"})


def parse_timestamp(value: Any) -> datetime | None:
    """Coerce epoch seconds, epoch milliseconds or ISO-8601 text to a UTC datetime.

    Naive datetimes are assumed to be UTC.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    if isinstance(value, str) and not value.strip().lstrip("-").replace(".", "", 1).isdigit():
        parsed = datetime.fromisoformat(value.strip())
        return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)
    seconds = normalize_timestamp_seconds(value)
    if seconds is None:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=UTC)
    except (OverflowError, OSError) as exc:
        raise ValueError(f"timestamp out of range: {value!r}") from exc


Timestamp = Annotated[datetime | None, BeforeValidator(parse_timestamp)]
"""Annotated type that coerces epoch ints (seconds or ms) and ISO strings to UTC datetimes."""


class VehiclesBaseModel(BaseModel):
    """Base for all pyvehicles models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_placeholders(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and value.strip() in _PLACEHOLDERS:
                continue
            cleaned[key] = value
        return cleaned
