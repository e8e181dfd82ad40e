"""Quote request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.domain import Quote, ServiceLevel, SkuLine


class SkuLineModel(BaseModel):
    weight: Optional[float] = Field(None, ge=0, description="Unit weight in kg; defaults to 1.")
    price: Optional[float] = Field(None, ge=0, description="Unit price; defaults to 0.")
    length: Optional[float] = Field(None, ge=0, description="Unit length in cm; defaults to 1.")
    width: Optional[float] = Field(None, ge=0, description="Unit width in cm; defaults to 1.")
    height: Optional[float] = Field(None, ge=0, description="Unit height in cm; defaults to 1.")
    quantity: Optional[int] = Field(None, ge=1, description="Defaults to 1.")

    def to_domain(self) -> SkuLine:
        return SkuLine(**self.model_dump())


class QuoteRequest(BaseModel):
    postal_code: str = Field(..., min_length=1, description="Destination postal code (CEP), any punctuation.")
    items: List[SkuLineModel] = Field(default_factory=list)


class QuoteModel(BaseModel):
    label: str
    service_level: ServiceLevel
    price: float
    eta_days: int
    quote_id: int

    @classmethod
    def from_domain(cls, quote: Quote) -> "QuoteModel":
        return cls(
            label=quote.label,
            service_level=quote.service_level,
            price=quote.price,
            eta_days=quote.eta_days,
            quote_id=quote.quote_id,
        )


class QuoteResponse(BaseModel):
    quotes: List[QuoteModel]
