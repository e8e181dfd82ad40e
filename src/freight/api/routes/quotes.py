"""Freight quote endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ...models.domain import QuotingConfig
from ...schemas.quotes import QuoteModel, QuoteRequest, QuoteResponse
from ...services.quoting.service import calculate_quote

router = APIRouter(prefix="/quotes", tags=["quotes"])

logger = logging.getLogger(__name__)

QUOTE_FAILED_DETAIL = "Erro ao calcular cotação de frete."


def get_quoting_config(request: Request) -> QuotingConfig:
    return request.app.state.quoting_config


@router.post("", response_model=QuoteResponse, status_code=status.HTTP_200_OK)
def create_quote(payload: QuoteRequest, config: QuotingConfig = Depends(get_quoting_config)) -> QuoteResponse:
    try:
        quotes = calculate_quote(
            payload.postal_code,
            [item.to_domain() for item in payload.items],
            config,
        )
    except Exception as exc:
        # Callers get one uniform failure whichever stage broke.
        logger.exception(f"Error calculating quote for {payload.postal_code}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=QUOTE_FAILED_DETAIL,
        ) from exc
    return QuoteResponse(quotes=[QuoteModel.from_domain(quote) for quote in quotes])
