import pytest

from weathertunes.core import CanonicalCondition
from weathertunes.weather import normalize_condition


@pytest.mark.parametrize(
    "raw",
    ["rain", "Light RAIN showers", "Patchy rain possible", "Torrential rain shower", "RaInY"],
)
def test_any_text_containing_rain_is_rainy(raw: str) -> None:
    assert normalize_condition(raw) == CanonicalCondition.rainy


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Sunny", CanonicalCondition.sunny),
        ("Clear", CanonicalCondition.sunny),
        ("Patchy light drizzle", CanonicalCondition.rainy),
        ("Moderate snow", CanonicalCondition.snowy),
        ("Partly cloudy", CanonicalCondition.cloudy),
        ("Overcast", CanonicalCondition.cloudy),
    ],
)
def test_provider_vocabulary(raw: str, expected: CanonicalCondition) -> None:
    assert normalize_condition(raw) == expected


@pytest.mark.parametrize("raw", ["Mist", "Thundery outbreaks possible", "", None, "??"])
def test_unmatched_text_defaults_to_cloudy(raw) -> None:
    assert normalize_condition(raw) == CanonicalCondition.cloudy


def test_first_match_wins() -> None:
    # "sun" is checked before "rain"
    assert normalize_condition("sun showers with rain") == CanonicalCondition.sunny
    # "snow" is checked before "cloud"
    assert normalize_condition("cloudy with snow") == CanonicalCondition.snowy


def test_canonical_values_pass_through() -> None:
    for condition in CanonicalCondition:
        assert normalize_condition(condition) == condition
        assert normalize_condition(condition.value) == condition
