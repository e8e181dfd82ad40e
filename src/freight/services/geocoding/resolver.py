"""Postal code to coordinate resolution."""

from __future__ import annotations

import logging
import re

from ...models.domain import Coordinate
from .nominatim_client import NominatimClient
from .viacep_client import ViaCepClient

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D")


def digits_only(postal_code: str) -> str:
    return _NON_DIGITS.sub("", postal_code)


class GeoResolver:
    """Resolve a postal code through an address lookup followed by a place search.

    Each call issues two outbound requests; nothing is cached. When the place
    search has no match the resolver returns ``Coordinate(0, 0)`` instead of
    failing, so callers comparing distances must tolerate that point.
    """

    def __init__(
        self,
        address_client: ViaCepClient | None = None,
        geocoder: NominatimClient | None = None,
    ) -> None:
        self.address_client = address_client or ViaCepClient()
        self.geocoder = geocoder or NominatimClient()

    def resolve(self, postal_code: str) -> Coordinate:
        code = digits_only(postal_code)
        address = self.address_client.lookup(code)
        query = f"{address.street}, {address.city}, {address.state}"
        match = self.geocoder.first_match(query)
        if match is None:
            logger.warning(f"No geocoding match for postal code {code} ('{query}'), using (0, 0)")
            return Coordinate(lat=0.0, lon=0.0)
        return match
