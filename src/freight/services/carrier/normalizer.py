"""Map raw carrier rate rows to caller-facing quotes."""

from __future__ import annotations

from typing import Optional, Sequence

from ...models.domain import Quote, RawRateOption, ServiceLevel
from ..quoting.errors import MalformedCarrierResponse

LABEL_PREFIX = "OPÇÃO FRETE"


def parse_price(raw: str) -> Optional[float]:
    """Parse a Brazilian-formatted price such as ``"1.234,56"``; ``None`` when unparsable."""
    try:
        return float(raw.strip().replace(".", "").replace(",", "."))
    except (AttributeError, ValueError):
        return None


def parse_lead_time(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except (AttributeError, ValueError):
        return None


def normalize(raw_options: Sequence[RawRateOption], express_code: str) -> list[Quote]:
    quotes: list[Quote] = []
    for index, option in enumerate(raw_options):
        price = parse_price(option.price)
        if price is None:
            raise MalformedCarrierResponse(f"Unparsable price '{option.price}' for service {option.code}.")
        eta_days = parse_lead_time(option.lead_time)
        if eta_days is None:
            raise MalformedCarrierResponse(
                f"Unparsable lead time '{option.lead_time}' for service {option.code}."
            )
        quotes.append(
            Quote(
                label=f"{LABEL_PREFIX} {index + 1}",
                service_level=ServiceLevel.EXPRESS if option.code == express_code else ServiceLevel.STANDARD,
                price=price,
                eta_days=eta_days,
                quote_id=index + 1,
            )
        )
    return quotes
