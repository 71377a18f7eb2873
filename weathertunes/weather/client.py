"""WeatherAPI.com current-conditions lookup.

fetch_weather() is the only weather source of the service. Unlike the music
side there is no safe substitute for a weather report, so every failure is
raised to the HTTP layer with its own error class:

  - CityNotFoundError        : the provider does not know the location
  - UpstreamUnavailableError : network / DNS / timeout
  - UpstreamError            : any other status or an unexpected payload
"""

import math
from typing import Any, Dict, Optional

import requests

from weathertunes import config
from weathertunes.core import (
    CityNotFoundError,
    CredentialsMissingError,
    UpstreamError,
    UpstreamUnavailableError,
    WeatherRecord,
    log_step,
    log_warning,
)

from .conditions import normalize_condition

# WeatherAPI.com answers 400 with this code for unknown locations
NO_MATCHING_LOCATION_CODE = 1006

KM_PER_MILE = 1.609344

HEALTH_CHECK_QUERY = "London"


def _provider_error(response: requests.Response) -> Dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    error = body.get("error") if isinstance(body, dict) else None
    return error if isinstance(error, dict) else {}


def round_half_up(value: float) -> int:
    """Round halves towards +inf like JavaScript Math.round (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def _celsius(current: Dict[str, Any]) -> int:
    if current.get("temp_c") is not None:
        return round_half_up(float(current["temp_c"]))
    return round_half_up((float(current["temp_f"]) - 32) * 5 / 9)


def _kph(current: Dict[str, Any]) -> int:
    if current.get("wind_kph") is not None:
        return round_half_up(float(current["wind_kph"]))
    return round_half_up(float(current["wind_mph"]) * KM_PER_MILE)


def parse_current_weather(data: Dict[str, Any], requested_city: str) -> WeatherRecord:
    """
    Build a WeatherRecord from a `current.json` payload.

    Raises UpstreamError if the payload does not have the expected shape.
    """
    try:
        current = data["current"]
        condition_text = (current.get("condition") or {}).get("text") or ""
        location = data.get("location") or {}
        return WeatherRecord(
            city=location.get("name") or requested_city,
            temp_c=_celsius(current),
            condition=normalize_condition(condition_text),
            humidity_pct=int(current["humidity"]),
            wind_kph=_kph(current),
            description=condition_text,
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise UpstreamError(
            "Unexpected weather provider response",
            details=f"{type(e).__name__}: {e}",
        ) from e


class WeatherClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key if api_key is not None else config.WEATHERAPI_KEY
        self.base_url = (base_url or config.WEATHERAPI_BASE).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT_S

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)

    def _get_current(self, city: str) -> requests.Response:
        if not self.has_credentials:
            raise CredentialsMissingError("WEATHERAPI_KEY is not configured")

        try:
            return self.session.get(
                f"{self.base_url}/current.json",
                params={"key": self.api_key, "q": city},
                timeout=self.timeout,
            )
        except (requests.ConnectionError, requests.Timeout) as e:
            raise UpstreamUnavailableError(
                "Weather provider unreachable", details=str(e)
            ) from e
        except requests.RequestException as e:
            raise UpstreamError("Weather request failed", details=str(e)) from e

    def fetch_weather(self, city: str) -> WeatherRecord:
        log_step(f"Fetching weather for {city!r}...", component="weather")
        r = self._get_current(city)

        if not r.ok:
            err = _provider_error(r)
            if r.status_code == 404 or err.get("code") == NO_MATCHING_LOCATION_CODE:
                raise CityNotFoundError(
                    f"City not found: {city}",
                    details=err.get("message"),
                )
            log_warning(
                f"Weather provider answered HTTP {r.status_code} for {city!r}",
                component="weather",
            )
            raise UpstreamError(
                "Failed to fetch weather data",
                details=err.get("message") or f"HTTP {r.status_code}",
            )

        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamError(
                "Weather provider returned invalid JSON", details=str(e)
            ) from e

        return parse_current_weather(data, requested_city=city)

    def check_health(self) -> str:
        """
        Live reachability check used by /health.

        Returns one of "connected", "not configured", "unauthorized",
        "unreachable".
        """
        try:
            r = self._get_current(HEALTH_CHECK_QUERY)
        except CredentialsMissingError:
            return "not configured"
        except UpstreamError:
            return "unreachable"

        if r.ok:
            return "connected"
        if r.status_code in (401, 403):
            return "unauthorized"
        return "unreachable"
