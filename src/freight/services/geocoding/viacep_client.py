"""HTTP client for the ViaCEP postal code lookup service."""

from __future__ import annotations

import logging

import httpx

from ...config import settings
from ...models.domain import Address
from ..quoting.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)


class ViaCepClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.viacep_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self.transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(timeout=httpx.Timeout(self.timeout, connect=10.0), transport=self.transport)

    def lookup(self, postal_code: str) -> Address:
        """Return street, city and state for a digits-only postal code."""
        url = f"{self.base_url}/{postal_code}/json/"
        with self._get_client() as client:
            try:
                response = client.get(url)
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPError as exc:
                raise UpstreamUnavailable(f"Address lookup failed for postal code {postal_code}: {exc}") from exc
            except ValueError as exc:
                raise UpstreamUnavailable(f"Address lookup returned invalid JSON for {postal_code}") from exc

        # ViaCEP answers 200 with {"erro": true} (or "true") for unknown codes
        if not isinstance(data, dict) or str(data.get("erro", "")).lower() == "true":
            logger.warning(f"Postal code {postal_code} not found by address lookup")
            return Address(street="", city="", state="")

        address = Address(
            street=data.get("logradouro") or "",
            city=data.get("localidade") or "",
            state=data.get("uf") or "",
        )
        logger.debug(f"Postal code {postal_code} resolved to {address}")
        return address
