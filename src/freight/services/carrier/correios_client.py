"""HTTP client for the Correios price and lead time service."""

from __future__ import annotations

import logging
from typing import Any
from xml.parsers.expat import ExpatError

import httpx
import xmltodict

from ...config import settings
from ...models.domain import RawRateOption
from ..quoting.errors import CarrierRejected, MalformedCarrierResponse, UpstreamUnavailable
from .rate_request import RateRequest

logger = logging.getLogger(__name__)

# Restricted-delivery notices: the service is still quoted with valid values.
ADVISORY_ERROR_CODES = frozenset({"009", "010", "011"})


class CorreiosClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.correios_base_url
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self.transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(timeout=httpx.Timeout(self.timeout, connect=10.0), transport=self.transport)

    def quote(self, request: RateRequest) -> list[RawRateOption]:
        """Request rates for every enabled service in a single call.

        Rows come back in the carrier's order. Nothing is retried.
        """
        with self._get_client() as client:
            try:
                response = client.get(self.base_url, params=request.to_params())
                response.raise_for_status()
            except httpx.HTTPError as exc:
                raise UpstreamUnavailable(f"Carrier rate request failed: {exc}") from exc

        options = parse_rate_response(response.content)
        logger.debug(f"Carrier returned {len(options)} rate options for {request.destination_postal_code}")
        return options


def parse_rate_response(payload: bytes | str) -> list[RawRateOption]:
    try:
        document = xmltodict.parse(payload, force_list=("cServico",))
    except ExpatError as exc:
        raise MalformedCarrierResponse(f"Carrier response is not valid XML: {exc}") from exc

    services = (document or {}).get("Servicos")
    if not isinstance(services, dict):
        raise MalformedCarrierResponse("Carrier response has no 'Servicos' element.")

    options: list[RawRateOption] = []
    for row in services.get("cServico") or []:
        option = _to_option(row)
        if _is_rejection(option.error_code):
            raise CarrierRejected(option.code, option.error_code, option.error_message)
        options.append(option)
    return options


def _to_option(row: Any) -> RawRateOption:
    if not isinstance(row, dict):
        raise MalformedCarrierResponse("Carrier service row is not an element.")
    return RawRateOption(
        code=_text(row.get("Codigo")),
        price=_text(row.get("Valor")),
        lead_time=_text(row.get("PrazoEntrega")),
        error_code=_text(row.get("Erro")) or "0",
        error_message=_text(row.get("MsgErro")),
    )


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _is_rejection(error_code: str) -> bool:
    if error_code in ADVISORY_ERROR_CODES:
        return False
    try:
        return int(error_code) != 0
    except ValueError:
        return True
