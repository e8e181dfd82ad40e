"""Domain models for warehouses, packages and carrier quotes."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(slots=True, frozen=True)
class Coordinate:
    lat: float = 0.0
    lon: float = 0.0


@dataclass(slots=True, frozen=True)
class Warehouse:
    """Represents an origin distribution center keyed by postal code."""

    name: str
    postal_code: str


@dataclass(slots=True, frozen=True)
class Address:
    street: str
    city: str
    state: str


@dataclass(slots=True)
class SkuLine:
    """A purchased item as supplied by the caller; missing fields take package defaults."""

    weight: Optional[float] = None
    price: Optional[float] = None
    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    quantity: Optional[int] = None


@dataclass(slots=True, frozen=True)
class ConsolidatedPackage:
    total_weight: float
    declared_value: float
    length: float
    width: float
    height: float


@dataclass(slots=True, frozen=True)
class CarrierContract:
    """Carrier contract credentials and the service codes enabled for quoting."""

    company_code: str
    password: str
    service_codes: tuple[str, ...]
    express_service_code: str


@dataclass(slots=True, frozen=True)
class QuotingConfig:
    """Process-wide configuration shared read-only by every quote request."""

    contract: CarrierContract
    warehouses: tuple[Warehouse, ...]


@dataclass(slots=True, frozen=True)
class RawRateOption:
    """One carrier service row, with values kept as the carrier formats them."""

    code: str
    price: str
    lead_time: str
    error_code: str = "0"
    error_message: str = ""


class ServiceLevel(str, Enum):
    EXPRESS = "EXPRESS"
    STANDARD = "STANDARD"


@dataclass(slots=True, frozen=True)
class Quote:
    label: str
    service_level: ServiceLevel
    price: float
    eta_days: int
    quote_id: int
