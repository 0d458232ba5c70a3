"""Static vocabularies and lookups used by the compatibility scorers.

Covers skill synonyms, timezone offsets, currency conversion, country and
continent lookup, time-of-day windows, learning formats and personality
trait words. Everything here is deterministic: timezone names are resolved
against a fixed reference instant so daylight saving never changes a score.
"""

import logging
import re
from datetime import datetime, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from models.schemas.enums import LearningFormat, ResponseTime, SessionLength, TimeOfDay

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------

# canonical name -> accepted variants
SKILL_SYNONYMS: dict[str, tuple[str, ...]] = {
    "javascript": ("js", "ecmascript"),
    "typescript": ("ts",),
    "react": ("reactjs", "react.js"),
    "node": ("nodejs", "node.js"),
    "python": ("py",),
    "go": ("golang",),
    "kubernetes": ("k8s",),
    "postgresql": ("postgres",),
    "machine learning": ("ml", "ai"),
    "data science": ("data analysis", "analytics"),
    "ci/cd": ("cicd", "continuous integration"),
}

_SKILL_ALIASES: dict[str, str] = {
    variant: canonical
    for canonical, variants in SKILL_SYNONYMS.items()
    for variant in variants
}


def normalize_term(term: str) -> str:
    """Lowercase and collapse whitespace."""
    return re.sub(r"\s+", " ", term.strip().lower())


def canonical_skill(skill: str) -> str:
    key = normalize_term(skill)
    return _SKILL_ALIASES.get(key, key)


def canonical_skills(skills) -> set[str]:
    """Canonicalize a collection of skill names, dropping blanks."""
    return {canonical_skill(s) for s in skills if s and s.strip()}


# ---------------------------------------------------------------------------
# Timezones
# ---------------------------------------------------------------------------

TIMEZONE_ABBREVIATIONS: dict[str, float] = {
    "UTC": 0, "GMT": 0, "WET": 0, "BST": 1, "CET": 1, "CEST": 2,
    "EET": 2, "EEST": 3, "MSK": 3, "GST": 4, "PKT": 5, "IST": 5.5,
    "ICT": 7, "SGT": 8, "HKT": 8, "JST": 9, "KST": 9, "AEST": 10,
    "AEDT": 11, "NZST": 12, "BRT": -3, "ART": -3, "EST": -5, "EDT": -4,
    "CST": -6, "CDT": -5, "MST": -7, "MDT": -6, "PST": -8, "PDT": -7,
    "AKST": -9, "HST": -10,
}

_UTC_OFFSET_PATTERN = re.compile(r"^(?:UTC|GMT)\s*([+-])\s*(\d{1,2})(?::?(\d{2}))?$")

# Fixed instant so IANA zones resolve to the same offset all year round.
_REFERENCE_INSTANT = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


@lru_cache(maxsize=512)
def utc_offset_hours(tz: str) -> float | None:
    """Resolve an abbreviation, ``UTC+5:30`` style offset or IANA name.

    Returns None for blank or unknown values.
    """
    name = tz.strip()
    if not name:
        return None
    upper = name.upper()
    if upper in TIMEZONE_ABBREVIATIONS:
        return float(TIMEZONE_ABBREVIATIONS[upper])
    m = _UTC_OFFSET_PATTERN.match(upper)
    if m:
        sign = -1 if m.group(1) == "-" else 1
        return sign * (int(m.group(2)) + int(m.group(3) or 0) / 60)
    try:
        offset = _REFERENCE_INSTANT.astimezone(ZoneInfo(name)).utcoffset()
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.debug("Unknown timezone %r", tz)
        return None
    return offset.total_seconds() / 3600 if offset is not None else None


def offset_distance_hours(a: float, b: float) -> float:
    """Hours between two UTC offsets, going the short way round the clock."""
    d = abs(a - b) % 24
    return min(d, 24 - d)


# ---------------------------------------------------------------------------
# Currency
# ---------------------------------------------------------------------------

# units per 1 USD
CURRENCY_RATES: dict[str, float] = {
    "USD": 1.0,
    "EUR": 0.85,
    "GBP": 0.73,
    "JPY": 110.0,
    "INR": 83.0,
    "CAD": 1.35,
    "AUD": 1.5,
}


def convert_currency(amount: float, from_currency: str, to_currency: str) -> float:
    """Convert using the static table; unknown codes are treated as USD."""
    src = (from_currency or "USD").upper()
    dst = (to_currency or "USD").upper()
    if src == dst:
        return amount
    return amount / CURRENCY_RATES.get(src, 1.0) * CURRENCY_RATES.get(dst, 1.0)


# ---------------------------------------------------------------------------
# Locations
# ---------------------------------------------------------------------------

_COUNTRY_ALIASES = {
    "us": "usa", "united states": "usa", "united states of america": "usa",
    "united kingdom": "uk", "england": "uk", "great britain": "uk",
}

COUNTRY_CONTINENTS: dict[str, str] = {
    "usa": "north-america", "canada": "north-america", "mexico": "north-america",
    "brazil": "south-america", "argentina": "south-america", "chile": "south-america",
    "uk": "europe", "ireland": "europe", "germany": "europe", "france": "europe",
    "spain": "europe", "italy": "europe", "netherlands": "europe", "poland": "europe",
    "china": "asia", "japan": "asia", "india": "asia", "singapore": "asia",
    "south korea": "asia", "pakistan": "asia",
    "nigeria": "africa", "kenya": "africa", "south africa": "africa", "egypt": "africa",
    "australia": "oceania", "new zealand": "oceania",
}


def country_of(location: str) -> str:
    """Last comma-separated part of a location string, e.g. "Austin, TX, USA"."""
    if not location.strip():
        return ""
    country = normalize_term(location.split(",")[-1])
    return _COUNTRY_ALIASES.get(country, country)


def continent_of(country: str) -> str:
    return COUNTRY_CONTINENTS.get(country, "")


# ---------------------------------------------------------------------------
# Scheduling
# ---------------------------------------------------------------------------

# (start, end) in minutes after local midnight; FLEXIBLE imposes no window.
TIME_OF_DAY_WINDOWS: dict[TimeOfDay, tuple[int, int]] = {
    TimeOfDay.MORNING: (8 * 60, 12 * 60),
    TimeOfDay.AFTERNOON: (12 * 60, 17 * 60),
    TimeOfDay.EVENING: (17 * 60, 21 * 60),
}

# upper bound of each expected response band, in hours
RESPONSE_TIME_HOURS: dict[ResponseTime, float] = {
    ResponseTime.IMMEDIATE: 0.5,
    ResponseTime.WITHIN_HOURS: 4.0,
    ResponseTime.WITHIN_DAYS: 24.0,
}

DURATION_MINUTES: dict[SessionLength, int] = {
    SessionLength.SHORT: 30,
    SessionLength.MEDIUM: 60,
    SessionLength.LONG: 90,
}

_CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_clock(value: str) -> int | None:
    """Parse "HH:MM" into minutes after midnight, or None if malformed."""
    m = _CLOCK_PATTERN.match(value.strip())
    if not m:
        return None
    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 24 or minutes > 59 or (hours == 24 and minutes):
        return None
    return hours * 60 + minutes


def response_band(hours: float | None) -> ResponseTime | None:
    """Smallest band whose bound the given response time meets."""
    if hours is None:
        return None
    for band, bound in RESPONSE_TIME_HOURS.items():
        if hours <= bound:
            return band
    return ResponseTime.WITHIN_DAYS


# ---------------------------------------------------------------------------
# Learning formats
# ---------------------------------------------------------------------------

# session types that can serve each learning format
FORMAT_SESSION_TYPES: dict[LearningFormat, frozenset[str]] = {
    LearningFormat.VISUAL: frozenset({"video", "in-person"}),
    LearningFormat.TEXT: frozenset({"chat", "email"}),
    LearningFormat.HANDS_ON: frozenset({"in-person", "video"}),
    LearningFormat.MIXED: frozenset({"video", "phone", "chat", "in-person"}),
}


def supported_formats(session_types: set[str]) -> set[LearningFormat]:
    """Learning formats a mentor can serve given the session types they offer."""
    if "mixed" in session_types:
        return set(LearningFormat)
    return {fmt for fmt, types in FORMAT_SESSION_TYPES.items() if types & session_types}


# ---------------------------------------------------------------------------
# Personality
# ---------------------------------------------------------------------------

TRAIT_VOCABULARY: frozenset[str] = frozenset({
    "analytical", "calm", "collaborative", "creative", "curious",
    "detail-oriented", "direct", "empathetic", "encouraging", "energetic",
    "extroverted", "friendly", "introverted", "motivating", "organized",
    "patient", "pragmatic", "structured", "supportive", "strategic",
})

_WORD_PATTERN = re.compile(r"[a-z]+(?:-[a-z]+)*")


def traits_in_text(text: str) -> set[str]:
    """Trait words mentioned in free text such as a mentor bio."""
    return {w for w in _WORD_PATTERN.findall(text.lower()) if w in TRAIT_VOCABULARY}
