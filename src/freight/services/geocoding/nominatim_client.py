"""HTTP client for the OpenStreetMap Nominatim search endpoint."""

from __future__ import annotations

import httpx

from ...config import settings
from ...models.domain import Coordinate
from ..quoting.errors import UpstreamUnavailable


class NominatimClient:
    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.nominatim_base_url).rstrip("/")
        self.user_agent = user_agent or settings.nominatim_user_agent
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self.transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=10.0),
            headers={"User-Agent": self.user_agent},
            transport=self.transport,
        )

    def first_match(self, query: str) -> Coordinate | None:
        """Return the top-ranked place for a free-text query, or None when nothing matches."""
        params = {"format": "json", "q": query}
        with self._get_client() as client:
            try:
                response = client.get(f"{self.base_url}/search", params=params)
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPError as exc:
                raise UpstreamUnavailable(f"Geocoding failed for '{query}': {exc}") from exc
            except ValueError as exc:
                raise UpstreamUnavailable(f"Geocoding returned invalid JSON for '{query}'") from exc

        if not isinstance(data, list):
            raise UpstreamUnavailable(f"Geocoding returned an unexpected payload for '{query}'")
        if not data:
            return None
        place = data[0]
        try:
            return Coordinate(lat=float(place["lat"]), lon=float(place["lon"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise UpstreamUnavailable(f"Geocoding returned a malformed place for '{query}': {place!r}") from exc
