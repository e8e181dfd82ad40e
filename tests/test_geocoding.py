import httpx
import pytest

from freight.models.domain import Coordinate
from freight.services.geocoding import GeoResolver, digits_only
from freight.services.geocoding.nominatim_client import NominatimClient
from freight.services.geocoding.viacep_client import ViaCepClient
from freight.services.quoting.errors import UpstreamUnavailable

VIACEP_URL = "https://viacep.test/ws"
NOMINATIM_URL = "https://nominatim.test"


def _resolver(handler) -> GeoResolver:
    transport = httpx.MockTransport(handler)
    return GeoResolver(
        address_client=ViaCepClient(base_url=VIACEP_URL, transport=transport),
        geocoder=NominatimClient(base_url=NOMINATIM_URL, user_agent="freight-tests", transport=transport),
    )


def _handler(address: dict, places: list, seen: list[httpx.Request] | None = None):
    def handle(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if request.url.host == "viacep.test":
            return httpx.Response(200, json=address)
        return httpx.Response(200, json=places)

    return handle


def test_digits_only():
    assert digits_only("01001-000") == "01001000"
    assert digits_only(" 30.130-010 ") == "30130010"


def test_resolve_uses_address_lookup_then_place_search():
    seen: list[httpx.Request] = []
    resolver = _resolver(
        _handler(
            {"logradouro": "Praça da Sé", "localidade": "São Paulo", "uf": "SP"},
            [{"lat": "-23.5503", "lon": "-46.6339"}, {"lat": "1", "lon": "1"}],
            seen,
        )
    )

    coordinate = resolver.resolve("01001-000")

    assert coordinate == Coordinate(lat=-23.5503, lon=-46.6339)
    lookup, search = seen
    assert lookup.url.path == "/ws/01001000/json/"
    assert search.url.path == "/search"
    assert search.url.params["format"] == "json"
    assert search.url.params["q"] == "Praça da Sé, São Paulo, SP"
    assert search.headers["User-Agent"] == "freight-tests"


def test_missing_street_leaves_empty_segment():
    seen: list[httpx.Request] = []
    resolver = _resolver(
        _handler({"logradouro": "", "localidade": "Belo Horizonte", "uf": "MG"}, [{"lat": "-19.9", "lon": "-43.9"}], seen)
    )

    resolver.resolve("30000-000")

    assert seen[1].url.params["q"] == ", Belo Horizonte, MG"


def test_no_geocoding_match_degrades_to_origin():
    resolver = _resolver(_handler({"logradouro": "Rua X", "localidade": "Lugar", "uf": "ZZ"}, []))

    assert resolver.resolve("12345678") == Coordinate(lat=0.0, lon=0.0)


def test_each_resolution_issues_fresh_requests():
    seen: list[httpx.Request] = []
    resolver = _resolver(_handler({"localidade": "São Paulo", "uf": "SP"}, [{"lat": "-23.5", "lon": "-46.6"}], seen))

    resolver.resolve("01001-000")
    resolver.resolve("01001-000")

    assert len(seen) == 4


def test_unknown_postal_code_degrades_to_origin():
    seen: list[httpx.Request] = []
    resolver = _resolver(_handler({"erro": True}, [], seen))

    assert resolver.resolve("99999-999") == Coordinate(lat=0.0, lon=0.0)
    assert seen[1].url.params["q"] == ", , "


def test_unknown_postal_code_as_string_flag_degrades_to_origin():
    resolver = _resolver(_handler({"erro": "true"}, []))

    assert resolver.resolve("99999999") == Coordinate(lat=0.0, lon=0.0)


def test_only_first_place_is_used():
    resolver = _resolver(
        _handler(
            {"logradouro": "Rua A", "localidade": "Recife", "uf": "PE"},
            [{"lat": "-8.05", "lon": "-34.9"}, {"lat": "-8.10", "lon": "-34.95"}],
        )
    )

    assert resolver.resolve("50010-000") == Coordinate(lat=-8.05, lon=-34.9)


def test_malformed_first_place_raises():
    resolver = _resolver(
        _handler(
            {"logradouro": "Rua A", "localidade": "Recife", "uf": "PE"},
            [{"display_name": "Recife"}, {"lat": "-8.10", "lon": "-34.95"}],
        )
    )

    with pytest.raises(UpstreamUnavailable):
        resolver.resolve("50010-000")


def test_address_lookup_http_error_propagates():
    def handle(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    with pytest.raises(UpstreamUnavailable):
        _resolver(handle).resolve("01001-000")


def test_geocoder_connection_error_propagates():
    def handle(request: httpx.Request) -> httpx.Response:
        if request.url.host == "viacep.test":
            return httpx.Response(200, json={"localidade": "São Paulo", "uf": "SP"})
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamUnavailable):
        _resolver(handle).resolve("01001-000")
