"""Pull a city name out of a free-text weather question."""

import re
from typing import Optional

_CITY = r"([A-Za-z][A-Za-z .'-]*?)"
_TAIL = r"\s*(?:today|now|tomorrow|please)?\s*[?!.,]*$"

# Checked in order, first match wins.
_CITY_PATTERNS = [
    re.compile(rf"weather\s+(?:in|for|at)\s+{_CITY}{_TAIL}", re.I),
    re.compile(rf"\bin\s+{_CITY}\s+weather\b", re.I),
    re.compile(rf"\bin\s+{_CITY}{_TAIL}", re.I),
    re.compile(rf"^\s*{_CITY}\s+weather\b", re.I),
    re.compile(rf"weather\s+{_CITY}{_TAIL}", re.I),
]


def extract_city(text: Optional[str]) -> Optional[str]:
    """
    Return the city mentioned in `text`, or None.

    Examples:
      "What's the weather like in Paris?" -> "Paris"
      "Tokyo weather"                     -> "Tokyo"
      "in New York weather please"        -> "New York"
    """
    if not text:
        return None

    for pattern in _CITY_PATTERNS:
        match = pattern.search(text.strip())
        if match:
            city = match.group(1).strip(" .'-")
            if city:
                return city
    return None
