"""Failures raised while building a freight quote."""

from __future__ import annotations


class QuoteError(Exception):
    """Base class for every failure that aborts a quote request."""


class UpstreamUnavailable(QuoteError, ConnectionError):
    """An address lookup, geocoding or carrier call failed at the transport or HTTP level."""


class NoWarehouseAvailable(QuoteError):
    """No origin warehouse is configured."""


class CarrierRejected(QuoteError):
    """The carrier answered with a business error for a service."""

    def __init__(self, service_code: str, error_code: str, message: str) -> None:
        super().__init__(f"Carrier rejected service {service_code} (error {error_code}): {message}")
        self.service_code = service_code
        self.error_code = error_code


class MalformedCarrierResponse(QuoteError):
    """The carrier response could not be parsed."""
