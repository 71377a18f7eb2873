from fastapi import APIRouter, Depends

from weathertunes.core import ValidationError, log_info
from weathertunes.weather import WeatherClient, extract_city

from ..services import get_weather_client
from .schemas import WeatherRequest, WeatherResponse

router = APIRouter()


@router.post(
    "/weather",
    response_model=WeatherResponse,
    response_model_by_alias=True,
)
def get_weather(
    req: WeatherRequest,
    weather: WeatherClient = Depends(get_weather_client),
) -> WeatherResponse:
    """
    Current weather for a city.

    Errors are rendered as {"error", "details"}:
      - 400 : no city given (and none found in `query`)
      - 404 : unknown city
      - 503 : weather provider unreachable
      - 500 : anything else
    """
    city = (req.city or "").strip() or extract_city(req.query)
    if not city:
        raise ValidationError(
            "City is required",
            details="Provide a non-empty 'city' (or a 'query' naming one).",
        )

    record = weather.fetch_weather(city)
    log_info(
        f"Weather for {record.city}: {record.temp_c}°C, {record.condition.value} "
        f"({record.description})",
        component="api",
    )
    return WeatherResponse.from_record(record)
