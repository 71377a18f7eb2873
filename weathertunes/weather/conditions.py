"""Map free-form weather wording onto the four canonical conditions.

Providers describe the sky in their own vocabulary ("Patchy light drizzle",
"Overcast", "Clear") and clients may send loosely typed values. Everything
downstream (mood profiles, fallback tracks) only understands the canonical
conditions, so every string goes through normalize_condition() first.
"""

from typing import Optional, Sequence, Tuple

from weathertunes.core import CanonicalCondition

# Checked in order, first match wins.
_CONDITION_MARKERS: Sequence[Tuple[Tuple[str, ...], CanonicalCondition]] = (
    (("sun", "clear"), CanonicalCondition.sunny),
    (("rain", "drizzle"), CanonicalCondition.rainy),
    (("snow",), CanonicalCondition.snowy),
    (("cloud", "overcast"), CanonicalCondition.cloudy),
)

DEFAULT_CONDITION = CanonicalCondition.cloudy


def normalize_condition(raw_text: Optional[str]) -> CanonicalCondition:
    """
    Return the canonical condition for `raw_text`.

    Matching is case-insensitive substring search; unknown, empty or None
    input maps to Cloudy. Never raises.
    """
    if isinstance(raw_text, CanonicalCondition):
        return raw_text

    text = str(raw_text or "").lower()
    for markers, condition in _CONDITION_MARKERS:
        if any(marker in text for marker in markers):
            return condition
    return DEFAULT_CONDITION
