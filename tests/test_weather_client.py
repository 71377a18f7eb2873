import pytest
import requests

from fakes import FakeSession, make_response, weatherapi_payload
from weathertunes.core import (
    CanonicalCondition,
    CityNotFoundError,
    CredentialsMissingError,
    UpstreamError,
    UpstreamUnavailableError,
)
from weathertunes.weather import WeatherClient
from weathertunes.weather.client import round_half_up


def _client(session: FakeSession, api_key: str = "test-key") -> WeatherClient:
    return WeatherClient(
        api_key=api_key,
        base_url="https://weather.test/v1",
        session=session,
        timeout=10,
    )


def test_fetch_weather_normalizes_record() -> None:
    session = FakeSession([make_response(200, weatherapi_payload())])

    record = _client(session).fetch_weather("tokyo")

    assert record.city == "Tokyo"
    assert record.temp_c == 18
    assert record.condition == CanonicalCondition.cloudy
    assert record.humidity_pct == 60
    assert record.wind_kph == 12
    assert record.description == "Partly cloudy"

    call = session.calls[0]
    assert call["url"] == "https://weather.test/v1/current.json"
    assert call["params"] == {"key": "test-key", "q": "tokyo"}
    assert call["timeout"] == 10


def test_fetch_weather_rounds_units() -> None:
    payload = weatherapi_payload(temp_c=21.6, text="Light rain", wind_kph=7.4)
    session = FakeSession([make_response(200, payload)])

    record = _client(session).fetch_weather("Paris")

    assert record.temp_c == 22
    assert record.wind_kph == 7
    assert record.condition == CanonicalCondition.rainy


def test_fetch_weather_rounds_halves_up() -> None:
    payload = weatherapi_payload(temp_c=2.5, wind_kph=12.5)
    session = FakeSession([make_response(200, payload)])

    record = _client(session).fetch_weather("Reykjavik")

    assert (record.temp_c, record.wind_kph) == (3, 13)


def test_round_half_up_on_negative_halves() -> None:
    assert round_half_up(-2.5) == -2
    assert round_half_up(-2.6) == -3
    assert round_half_up(0.49) == 0


def test_fetch_weather_converts_imperial_only_payload() -> None:
    payload = weatherapi_payload()
    current = payload["current"]
    del current["temp_c"], current["wind_kph"]
    current["temp_f"] = 50
    current["wind_mph"] = 10

    record = _client(FakeSession([make_response(200, payload)])).fetch_weather("Oslo")

    assert record.temp_c == 10
    assert record.wind_kph == 16


def test_unknown_city_raises_city_not_found() -> None:
    body = {"error": {"code": 1006, "message": "No matching location found."}}
    session = FakeSession([make_response(400, body)])

    with pytest.raises(CityNotFoundError) as exc_info:
        _client(session).fetch_weather("Nowhereville")

    assert exc_info.value.status_code == 404
    assert exc_info.value.details == "No matching location found."


def test_http_404_raises_city_not_found() -> None:
    session = FakeSession([make_response(404, {"error": {"message": "not found"}})])

    with pytest.raises(CityNotFoundError):
        _client(session).fetch_weather("Nowhereville")


@pytest.mark.parametrize(
    "exc", [requests.ConnectionError("dns failure"), requests.Timeout("too slow")]
)
def test_network_failures_raise_unavailable(exc: Exception) -> None:
    with pytest.raises(UpstreamUnavailableError) as exc_info:
        _client(FakeSession([exc])).fetch_weather("Tokyo")

    assert exc_info.value.status_code == 503


def test_other_status_raises_upstream_error() -> None:
    body = {"error": {"code": 2006, "message": "API key is invalid."}}
    session = FakeSession([make_response(401, body)])

    with pytest.raises(UpstreamError) as exc_info:
        _client(session).fetch_weather("Tokyo")

    assert not isinstance(exc_info.value, (CityNotFoundError, UpstreamUnavailableError))
    assert exc_info.value.status_code == 500


def test_unexpected_shape_raises_upstream_error() -> None:
    session = FakeSession([make_response(200, {"location": {"name": "Tokyo"}})])

    with pytest.raises(UpstreamError):
        _client(session).fetch_weather("Tokyo")


def test_missing_api_key_skips_network() -> None:
    session = FakeSession()

    with pytest.raises(CredentialsMissingError):
        _client(session, api_key="").fetch_weather("Tokyo")

    assert session.calls == []


def test_health_check_states() -> None:
    assert _client(FakeSession([make_response(200, weatherapi_payload())])).check_health() == "connected"
    assert _client(FakeSession(), api_key="").check_health() == "not configured"
    assert _client(FakeSession([make_response(403, {})])).check_health() == "unauthorized"
    assert _client(FakeSession([requests.ConnectionError()])).check_health() == "unreachable"
