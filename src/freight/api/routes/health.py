"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...models.domain import QuotingConfig
from .quotes import get_quoting_config

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/warehouses", status_code=status.HTTP_200_OK)
def health_warehouses(config: QuotingConfig = Depends(get_quoting_config)) -> dict:
    """List the origin warehouses loaded at startup."""
    return {
        "count": len(config.warehouses),
        "warehouses": [
            {"name": warehouse.name, "postal_code": warehouse.postal_code} for warehouse in config.warehouses
        ],
        "services": list(config.contract.service_codes),
    }
