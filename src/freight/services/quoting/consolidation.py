"""Merge order lines into a single shippable package."""

from __future__ import annotations

from typing import Iterable

from ...models.domain import ConsolidatedPackage, SkuLine

# Correios minimum box dimensions (cm)
MIN_LENGTH = 16.0
MIN_WIDTH = 11.0
MIN_HEIGHT = 2.0


def consolidate(items: Iterable[SkuLine]) -> ConsolidatedPackage:
    """Build one conservative box for all items.

    Volume is the sum of per-unit cubes, not a packing solution. Every axis is
    at least the largest item on that axis, the cube root of the total volume
    and the carrier minimum.
    """
    total_weight = 0.0
    total_price = 0.0
    volume = 0.0
    max_length = max_width = max_height = 0.0

    for item in items:
        quantity = item.quantity or 1
        length = item.length or 1
        width = item.width or 1
        height = item.height or 1

        total_weight += (item.weight or 1) * quantity
        total_price += (item.price or 0) * quantity
        volume += length * width * height * quantity

        max_length = max(max_length, length)
        max_width = max(max_width, width)
        max_height = max(max_height, height)

    edge = volume ** (1 / 3) if volume > 0 else 0.0

    return ConsolidatedPackage(
        total_weight=round(total_weight, 2),
        declared_value=round(total_price, 2),
        length=max(max_length, edge, MIN_LENGTH),
        width=max(max_width, edge, MIN_WIDTH),
        height=max(max_height, edge, MIN_HEIGHT),
    )
