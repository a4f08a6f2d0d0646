"""Internal constants shared across the library."""

from decimal import Decimal

USER_AGENT = "pyvehicles/1"
DEFAULT_MAPS_URL = "http://localhost:9191"

PRICE_ENDPOINT = "/services/price"
MAPS_ENDPOINT = "/maps"

# ------------------------------------------------------------------
# Price catalog shape
# ------------------------------------------------------------------

#: Catalog covers vehicle ids ``1 .. CATALOG_SIZE - 1``.
CATALOG_SIZE = 20
DEFAULT_CURRENCY = "USD"

#: Amounts are ``uniform[PRICE_FACTOR_MIN, PRICE_FACTOR_MAX) * PRICE_MULTIPLIER``.
PRICE_FACTOR_MIN = 1.0
PRICE_FACTOR_MAX = 5.0
PRICE_MULTIPLIER = Decimal(5000)

#: Prices always carry exactly two fractional digits.
PRICE_QUANTUM = Decimal("0.01")
