"""Nearest origin warehouse selection."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Protocol, Sequence

from ...config import settings
from ...models.domain import Coordinate, Warehouse
from ..geospatial import distance
from .errors import NoWarehouseAvailable

logger = logging.getLogger(__name__)


class CoordinateResolver(Protocol):
    def resolve(self, postal_code: str) -> Coordinate: ...


def select_nearest(
    destination: Coordinate,
    warehouses: Sequence[Warehouse],
    resolver: CoordinateResolver,
    max_parallel_requests: int | None = None,
) -> Warehouse:
    """Return the warehouse closest to ``destination``.

    Warehouse coordinates are resolved in parallel; ``map`` keeps configured
    order so ties go to the first warehouse listed.
    """
    if not warehouses:
        raise NoWarehouseAvailable("No origin warehouse is configured.")

    workers = max_parallel_requests or settings.geocode_max_parallel_requests
    with ThreadPoolExecutor(max_workers=min(workers, len(warehouses))) as executor:
        coordinates = list(executor.map(lambda wh: resolver.resolve(wh.postal_code), warehouses))

    nearest = warehouses[0]
    shortest = distance(destination, coordinates[0])
    for warehouse, coordinate in zip(warehouses[1:], coordinates[1:]):
        km = distance(destination, coordinate)
        logger.debug(f"Warehouse {warehouse.name} is {km:.1f} km from destination")
        if km < shortest:
            shortest = km
            nearest = warehouse

    logger.info(f"Selected warehouse {nearest.name} ({shortest:.1f} km)")
    return nearest
