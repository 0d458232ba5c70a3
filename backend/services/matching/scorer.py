"""Per-factor compatibility scorers.

Each scorer takes a normalized mentee and mentor and returns a float in
[0, 1]. They are pure and total: missing mentee input yields the neutral
0.5 unless a factor documents otherwise, so an unstated preference never
counts against a mentor.
"""

import logging

from models.schemas.compatibility import CompatibilityVector
from models.schemas.mentee_profile import MenteeProfile
from models.schemas.mentor_profile import MentorProfile, TimeSlot
from services.matching.taxonomy import (
    RESPONSE_TIME_HOURS,
    TIME_OF_DAY_WINDOWS,
    continent_of,
    convert_currency,
    country_of,
    normalize_term,
    offset_distance_hours,
    parse_clock,
    supported_formats,
    traits_in_text,
    utc_offset_hours,
)

logger = logging.getLogger(__name__)

NEUTRAL = 0.5

# experience: cost per ordinal step; 3+ steps apart scores 0
EXPERIENCE_STEP_COST = 0.25
EXPERIENCE_MAX_STEPS = 3

LEARNING_MISMATCH = 0.3

# budget: zero once the rate is this many budget-widths beyond a bound
BUDGET_DECAY_SPAN = 2.0
FREE_SESSION_BONUS = 0.1

# response time reaches 0 at this multiple of the expected bound
RESPONSE_DECAY_MULTIPLE = 3.0

LOCATION_FLOOR = 0.2
LOCATION_DECAY_HOURS = 12.0
SAME_CONTINENT = 0.6

_DAY_MINUTES = 24 * 60


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------

def shared_skills(mentee: MenteeProfile, mentor: MentorProfile) -> set[str]:
    mentor_skills = mentor.professional_info.skills | mentor.professional_info.specializations
    return mentee.professional_info.skills & mentor_skills


def score_skills(mentee: MenteeProfile, mentor: MentorProfile) -> float:
    """Share of the mentee's skills the mentor covers (recall, not breadth)."""
    wanted = mentee.professional_info.skills
    if not wanted:
        return NEUTRAL
    return min(len(shared_skills(mentee, mentor)) / max(len(wanted), 1), 1.0)


# ---------------------------------------------------------------------------
# Availability
# ---------------------------------------------------------------------------

def _slot_intervals(slot: TimeSlot, shift_minutes: float) -> list[tuple[float, float]]:
    """Slot as one or two [start, end) intervals within a single local day."""
    start = parse_clock(slot.start_time)
    end = parse_clock(slot.end_time)
    if start is None or end is None or start == end:
        return []
    length = end - start if end > start else end + _DAY_MINUTES - start  # overnight
    begin = (start + shift_minutes) % _DAY_MINUTES
    finish = begin + length
    if finish <= _DAY_MINUTES:
        return [(begin, finish)]
    return [(begin, _DAY_MINUTES), (0.0, finish - _DAY_MINUTES)]


def _window_open(window: tuple[int, int], mentee_offset: float | None, mentor: MentorProfile) -> bool:
    mentor_offset = utc_offset_hours(mentor.personal_info.timezone)
    for slot in mentor.mentoring_info.availability.time_slots:
        slot_offset = utc_offset_hours(slot.timezone) if slot.timezone else mentor_offset
        shift = 0.0
        if mentee_offset is not None and slot_offset is not None:
            shift = (mentee_offset - slot_offset) * 60
        for start, end in _slot_intervals(slot, shift):
            if start < window[1] and window[0] < end:
                return True
    return False


def preferred_window_open(mentee: MenteeProfile, mentor: MentorProfile) -> bool | None:
    """Whether any mentor slot overlaps the mentee's time-of-day window.

    None when the mentee states no window (or is flexible).
    """
    window = TIME_OF_DAY_WINDOWS.get(mentee.learning_preferences.time_of_day)
    if window is None:
        return None
    return _window_open(window, utc_offset_hours(mentee.personal_info.timezone), mentor)


def score_availability(mentee: MenteeProfile, mentor: MentorProfile) -> float:
    """Share of requested windows (time of day, session types) the mentor can serve.

    No requested windows means no constraint: 1.0. Mentor slots are shifted
    into the mentee's timezone before checking overlap.
    """
    matched = 0
    requested = 0

    window_open = preferred_window_open(mentee, mentor)
    if window_open is not None:
        requested += 1
        matched += int(window_open)

    offered = mentor.preferences.session_types
    if offered:
        for session_type in mentee.mentoring_needs.session_types:
            requested += 1
            if session_type in offered or "mixed" in offered:
                matched += 1

    if requested == 0:
        return 1.0
    return matched / requested


# ---------------------------------------------------------------------------
# Communication
# ---------------------------------------------------------------------------

def shared_methods(mentee: MenteeProfile, mentor: MentorProfile) -> set[str]:
    return mentee.communication_style.preferred_methods & mentor.mentoring_info.communication_preferences


def response_time_fit(mentee: MenteeProfile, mentor: MentorProfile) -> float:
    """1.0 within the expected band, linear to 0 at 3x the band's bound."""
    band = mentee.communication_style.response_time
    actual = mentor.stats.response_time_hours
    if band is None or actual is None:
        return NEUTRAL
    bound = RESPONSE_TIME_HOURS[band]
    if actual <= bound:
        return 1.0
    return _clamp(1.0 - (actual - bound) / ((RESPONSE_DECAY_MULTIPLE - 1.0) * bound))


def score_communication(mentee: MenteeProfile, mentor: MentorProfile) -> float:
    methods = mentee.communication_style.preferred_methods
    if methods:
        overlap = len(shared_methods(mentee, mentor)) / len(methods)
    else:
        overlap = NEUTRAL
    return (overlap + response_time_fit(mentee, mentor)) / 2


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------

def score_experience(mentee: MenteeProfile, mentor: MentorProfile) -> float:
    mentee_level = mentee.professional_info.experience_level
    mentor_level = mentor.mentoring_info.experience_level
    if mentee_level is None or mentor_level is None:
        return NEUTRAL
    steps = abs(mentor_level.rank - mentee_level.rank)
    if steps >= EXPERIENCE_MAX_STEPS:
        return 0.0
    return 1.0 - EXPERIENCE_STEP_COST * steps


# ---------------------------------------------------------------------------
# Personality
# ---------------------------------------------------------------------------

def mentor_traits(mentor: MentorProfile) -> set[str]:
    """Declared traits plus trait words found in the mentor's bio."""
    return mentor.personality_traits | traits_in_text(mentor.personal_info.bio)


def score_personality(mentee: MenteeProfile, mentor: MentorProfile) -> float:
    """Jaccard similarity of trait sets; neutral when either side is unknown."""
    ours = mentee.personality_traits
    theirs = mentor_traits(mentor)
    if not ours or not theirs:
        return NEUTRAL
    return len(ours & theirs) / len(ours | theirs)


# ---------------------------------------------------------------------------
# Learning style
# ---------------------------------------------------------------------------

def score_learning(mentee: MenteeProfile, mentor: MentorProfile) -> float:
    fmt = mentee.learning_preferences.format
    offered = mentor.preferences.session_types
    if fmt is None or not offered:
        return NEUTRAL
    return 1.0 if fmt in supported_formats(offered) else LEARNING_MISMATCH


# ---------------------------------------------------------------------------
# Budget
# ---------------------------------------------------------------------------

def rate_in_budget_currency(mentee: MenteeProfile, mentor: MentorProfile) -> float:
    pricing = mentor.mentoring_info.pricing
    budget = mentee.mentoring_needs.budget
    return convert_currency(pricing.hourly_rate, pricing.currency, budget.currency)


def score_budget(mentee: MenteeProfile, mentor: MentorProfile) -> float:
    """1.0 inside [min, max]; linear decay to 0 at 2x the bound beyond it.

    Mentors offering free sessions get a flat bonus, capped at 1.0.
    """
    budget = mentee.mentoring_needs.budget
    rate = rate_in_budget_currency(mentee, mentor)

    if budget.min <= rate <= budget.max:
        score = 1.0
    elif rate > budget.max:
        span = BUDGET_DECAY_SPAN * budget.max
        score = _clamp(1.0 - (rate - budget.max) / span) if span > 0 else 0.0
    else:
        span = BUDGET_DECAY_SPAN * budget.min
        score = _clamp(1.0 - (budget.min - rate) / span)

    if mentor.mentoring_info.pricing.free_sessions > 0:
        score = min(score + FREE_SESSION_BONUS, 1.0)
    return score


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------

def timezone_gap_hours(mentee: MenteeProfile, mentor: MentorProfile) -> float | None:
    ours = utc_offset_hours(mentee.personal_info.timezone)
    theirs = utc_offset_hours(mentor.personal_info.timezone)
    if ours is None or theirs is None:
        return None
    return offset_distance_hours(ours, theirs)


def score_location(mentee: MenteeProfile, mentor: MentorProfile) -> float:
    """Timezone proximity, falling back to country/continent.

    Never drops below the floor: remote sessions work across any distance.
    """
    gap = timezone_gap_hours(mentee, mentor)
    if gap is not None:
        return max(LOCATION_FLOOR, 1.0 - gap / LOCATION_DECAY_HOURS)

    our_country = country_of(mentee.personal_info.location)
    their_country = country_of(mentor.personal_info.location)
    if not our_country or not their_country:
        return NEUTRAL
    if our_country == their_country:
        return 1.0
    our_continent = continent_of(our_country)
    if our_continent and our_continent == continent_of(their_country):
        return SAME_CONTINENT
    return LOCATION_FLOOR


# ---------------------------------------------------------------------------
# Vector
# ---------------------------------------------------------------------------

SCORERS = {
    "skills": score_skills,
    "availability": score_availability,
    "communication": score_communication,
    "experience": score_experience,
    "personality": score_personality,
    "learning": score_learning,
    "budget": score_budget,
    "location": score_location,
}


def score_pair(mentee: MenteeProfile, mentor: MentorProfile) -> CompatibilityVector:
    """Compute all eight factors for one normalized (mentee, mentor) pair."""
    return CompatibilityVector(**{
        name: round(_clamp(fn(mentee, mentor)), 4) for name, fn in SCORERS.items()
    })


def goal_overlap(mentee: MenteeProfile, mentor: MentorProfile) -> list[str]:
    """Mentor expertise areas (mentor wording and order) matching a mentee goal."""
    goals = {normalize_term(g) for g in mentee.professional_info.goals}
    return [a for a in mentor.mentoring_info.areas_of_expertise if normalize_term(a) in goals]
