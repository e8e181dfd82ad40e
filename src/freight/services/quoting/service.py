"""Quote orchestration: destination, nearest warehouse, package, carrier rates."""

from __future__ import annotations

import logging
from typing import Sequence

from ...config import Settings
from ...data.warehouse_repository import get_warehouses
from ...models.domain import CarrierContract, Quote, QuotingConfig, SkuLine
from ..carrier.correios_client import CorreiosClient
from ..carrier.normalizer import normalize
from ..carrier.rate_request import build_rate_request
from ..geocoding import GeoResolver
from .consolidation import consolidate
from .warehouse_selector import select_nearest

logger = logging.getLogger(__name__)


def build_quoting_config(app_settings: Settings) -> QuotingConfig:
    contract = CarrierContract(
        company_code=app_settings.correios_company_code,
        password=app_settings.correios_password,
        service_codes=tuple(app_settings.correios_services),
        express_service_code=app_settings.correios_express_service,
    )
    return QuotingConfig(contract=contract, warehouses=get_warehouses(app_settings))


def calculate_quote(postal_code: str, items: Sequence[SkuLine], config: QuotingConfig) -> list[Quote]:
    """Run the full quote pipeline for one order.

    Any failure aborts the whole request; there are no partial results.
    """
    resolver = GeoResolver()
    destination = resolver.resolve(postal_code)
    origin = select_nearest(destination, config.warehouses, resolver)

    package = consolidate(items)
    rate_request = build_rate_request(config.contract, origin, postal_code, package)
    raw_options = CorreiosClient().quote(rate_request)

    quotes = normalize(raw_options, config.contract.express_service_code)
    logger.info(f"Quoted {len(quotes)} options from {origin.name} to {rate_request.destination_postal_code}")
    return quotes
