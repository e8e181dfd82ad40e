"""Route group exports."""

from . import health, quotes

__all__ = ["health", "quotes"]
