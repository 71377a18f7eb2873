from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from weathertunes.core import CanonicalCondition, WeatherRecord


class WeatherRequest(BaseModel):
    city: Optional[str] = None
    # Free-text question ("weather in Paris?"), used when city is absent
    query: Optional[str] = None


class WeatherResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    city: str
    temp_c: int
    condition: CanonicalCondition
    humidity_pct: int
    wind_kph: float
    description: str

    @classmethod
    def from_record(cls, record: WeatherRecord) -> "WeatherResponse":
        return cls(
            city=record.city,
            temp_c=record.temp_c,
            condition=record.condition,
            humidity_pct=record.humidity_pct,
            wind_kph=record.wind_kph,
            description=record.description,
        )
