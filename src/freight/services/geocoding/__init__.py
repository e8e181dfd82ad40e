"""Postal code geocoding services."""

from .resolver import GeoResolver, digits_only

__all__ = ["GeoResolver", "digits_only"]
