"""Template-based explanations for a scored match.

Deterministic, no model needed. Produces the reasons a mentor was matched,
the cautions worth raising, and a suggested engagement plan, all derived
from the compatibility vector and the two normalized profiles.
"""

import logging
from collections.abc import Callable

from models.schemas.compatibility import CompatibilityVector
from models.schemas.enums import ResponseTime, SessionFrequency, SessionLength
from models.schemas.match_result import Recommendations
from models.schemas.mentee_profile import MenteeProfile
from models.schemas.mentor_profile import MentorProfile
from services.matching.confidence import WEAK_FACTOR
from services.matching.scorer import (
    goal_overlap,
    mentor_traits,
    preferred_window_open,
    rate_in_budget_currency,
    shared_methods,
    shared_skills,
    timezone_gap_hours,
)
from services.matching.taxonomy import (
    DURATION_MINUTES,
    RESPONSE_TIME_HOURS,
    country_of,
    response_band,
)

logger = logging.getLogger(__name__)

STRONG_FACTOR = 0.75
MAX_REASONS = 3
MAX_FOCUS_AREAS = 3
# availability needed before the mentee's own cadence is trusted as-is
PREFERENCE_AVAILABILITY = 0.6

# most to least preferred when several channels are shared
_METHOD_ORDER = ["video", "phone", "chat", "email", "in-person"]

# minimum sessions per week per mentee for each cadence
_CADENCE_CAPACITY = {
    SessionFrequency.WEEKLY: 1.0,
    SessionFrequency.BI_WEEKLY: 0.5,
    SessionFrequency.MONTHLY: 0.25,
    SessionFrequency.AS_NEEDED: 0.0,
}


def _listing(values, limit: int = 3) -> str:
    return ", ".join(sorted(values)[:limit])


def _money(amount: float) -> str:
    return f"{amount:,.0f}"


_REPLY_PHRASES = {
    ResponseTime.IMMEDIATE: "within minutes",
    ResponseTime.WITHIN_HOURS: "within a few hours",
    ResponseTime.WITHIN_DAYS: "within a day",
}


def _reply_phrase(hours: float) -> str:
    if hours > RESPONSE_TIME_HOURS[ResponseTime.WITHIN_DAYS]:
        return "in a few days"
    return _REPLY_PHRASES[response_band(hours)]


# ---------------------------------------------------------------------------
# Match reasons
# ---------------------------------------------------------------------------

def _reason_skills(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    shared = shared_skills(mentee, mentor)
    if shared:
        return f"Covers your skills: {_listing(shared)}"
    return "Strong coverage of the skills you want to build"


def _reason_availability(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    tod = mentee.learning_preferences.time_of_day
    if preferred_window_open(mentee, mentor):
        return f"Has open slots in your preferred {tod.value} window"
    types = mentee.mentoring_needs.session_types & mentor.preferences.session_types
    if types:
        return f"Offers the session types you asked for: {_listing(types)}"
    return "Fits your schedule with no constraints to work around"


def _reason_communication(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    methods = shared_methods(mentee, mentor)
    hours = mentor.stats.response_time_hours
    text = "Communicates the way you prefer"
    if methods:
        text += f" ({_listing(methods)})"
    if hours is not None:
        text += f" and usually replies {_reply_phrase(hours)}"
    return text


def _reason_experience(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    mentor_level = mentor.mentoring_info.experience_level
    mentee_level = mentee.professional_info.experience_level
    if mentor_level is None or mentee_level is None:
        return "Experience level suits your stage"
    return f"Mentors at the {mentor_level.value} level, a good fit for your {mentee_level.value} stage"


def _reason_personality(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    shared = mentee.personality_traits & mentor_traits(mentor)
    if shared:
        return f"Similar working style: {_listing(shared)}"
    return "Compatible working style"


def _reason_learning(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    fmt = mentee.learning_preferences.format
    if fmt is None:
        return "Session formats suit how you learn"
    return f"Runs sessions suited to {fmt.value} learning"


def _reason_budget(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    pricing = mentor.mentoring_info.pricing
    budget = mentee.mentoring_needs.budget
    rate = rate_in_budget_currency(mentee, mentor)
    if budget.min <= rate <= budget.max:
        text = f"Rate of {_money(pricing.hourly_rate)} {pricing.currency}/hr fits your budget"
    else:
        text = f"Rate of {_money(pricing.hourly_rate)} {pricing.currency}/hr is close to your budget"
    if pricing.free_sessions > 0:
        plural = "s" if pricing.free_sessions > 1 else ""
        text += f", with {pricing.free_sessions} free session{plural}"
    return text


def _reason_location(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    gap = timezone_gap_hours(mentee, mentor)
    if gap == 0:
        return "Works in your time zone"
    if gap is not None:
        return f"Only {gap:g}h time difference"
    country = country_of(mentor.personal_info.location)
    if country and country == country_of(mentee.personal_info.location):
        return "Based in the same country as you"
    return "Close to your region"


_REASONS: dict[str, Callable[[MenteeProfile, MentorProfile], str]] = {
    "skills": _reason_skills,
    "availability": _reason_availability,
    "communication": _reason_communication,
    "experience": _reason_experience,
    "personality": _reason_personality,
    "learning": _reason_learning,
    "budget": _reason_budget,
    "location": _reason_location,
}


def build_match_reasons(
    mentee: MenteeProfile,
    mentor: MentorProfile,
    compatibility: CompatibilityVector,
) -> list[str]:
    """Top factors scoring >= 0.75, strongest first (ties in factor order)."""
    strong = [(name, value) for name, value in compatibility.items() if value >= STRONG_FACTOR]
    strong.sort(key=lambda item: -item[1])
    return [_REASONS[name](mentee, mentor) for name, _ in strong[:MAX_REASONS]]


# ---------------------------------------------------------------------------
# Potential challenges
# ---------------------------------------------------------------------------

def _challenge_skills(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    missing = mentee.professional_info.skills - shared_skills(mentee, mentor)
    return f"Limited overlap with your skills; not covered: {_listing(missing)}"


def _challenge_availability(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    tod = mentee.learning_preferences.time_of_day
    if preferred_window_open(mentee, mentor) is False:
        return f"No open slots in your preferred {tod.value} window; scheduling may be difficult"
    return "Does not offer most of the session types you asked for"


def _challenge_communication(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    methods = mentee.communication_style.preferred_methods
    if methods and not shared_methods(mentee, mentor):
        return f"Does not use your preferred channels ({_listing(methods)})"
    hours = mentor.stats.response_time_hours
    if hours is not None:
        return f"Typically replies {_reply_phrase(hours)}, slower than you expect"
    return "Communication preferences may not line up"


def _challenge_experience(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    mentor_level = mentor.mentoring_info.experience_level
    mentee_level = mentee.professional_info.experience_level
    return (
        f"Experience gap: mentor works at the {mentor_level.value} level "
        f"while you are at the {mentee_level.value} level"
    )


def _challenge_personality(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    return "Working styles may differ; agree on expectations early"


def _challenge_learning(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    return f"Session formats may not suit {mentee.learning_preferences.format.value} learning"


def _challenge_budget(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    budget = mentee.mentoring_needs.budget
    rate = rate_in_budget_currency(mentee, mentor)
    return (
        f"Hourly rate of {_money(rate)} {budget.currency} is outside your budget "
        f"of {_money(budget.min)}-{_money(budget.max)} {budget.currency}"
    )


def _challenge_location(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    gap = timezone_gap_hours(mentee, mentor)
    if gap is not None:
        return f"{gap:g}h time difference may require flexible scheduling"
    return "Based in a different region; expect remote sessions"


_CHALLENGES: dict[str, Callable[[MenteeProfile, MentorProfile], str]] = {
    "skills": _challenge_skills,
    "availability": _challenge_availability,
    "communication": _challenge_communication,
    "experience": _challenge_experience,
    "personality": _challenge_personality,
    "learning": _challenge_learning,
    "budget": _challenge_budget,
    "location": _challenge_location,
}


def build_challenges(
    mentee: MenteeProfile,
    mentor: MentorProfile,
    compatibility: CompatibilityVector,
) -> list[str]:
    """One caution per factor below 0.4, worst first."""
    weak = [(name, value) for name, value in compatibility.items() if value < WEAK_FACTOR]
    weak.sort(key=lambda item: item[1])
    return [_CHALLENGES[name](mentee, mentor) for name, _ in weak]


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

def supported_cadences(mentor: MentorProfile) -> list[SessionFrequency]:
    """Cadences the mentor has capacity for, most frequent first."""
    availability = mentor.mentoring_info.availability
    per_week = availability.max_sessions_per_week or len(availability.time_slots)
    capacity = per_week / max(mentor.preferences.max_mentees, 1)
    return [c for c, needed in _CADENCE_CAPACITY.items() if capacity >= needed]


def recommend_frequency(mentee: MenteeProfile, mentor: MentorProfile, availability: float) -> str:
    wanted = mentee.mentoring_needs.frequency
    if wanted is not None and availability >= PREFERENCE_AVAILABILITY:
        return wanted.value

    cadences = supported_cadences(mentor)
    if wanted is None:
        return cadences[0].value
    order = list(SessionFrequency)
    target = order.index(wanted)
    # nearest cadence, preferring the less frequent one on a tie
    best = min(cadences, key=lambda c: (abs(order.index(c) - target), -order.index(c)))
    return best.value


def recommend_duration(mentee: MenteeProfile, mentor: MentorProfile, availability: float) -> str:
    wanted = mentee.learning_preferences.duration
    if wanted is not None and availability >= PREFERENCE_AVAILABILITY:
        return wanted.value

    minutes = mentor.mentoring_info.availability.session_duration
    if minutes <= 0:
        return (wanted or SessionLength.MEDIUM).value
    best = min(DURATION_MINUTES.items(), key=lambda kv: (abs(kv[1] - minutes), kv[1]))
    return best[0].value


def recommend_focus_areas(mentee: MenteeProfile, mentor: MentorProfile) -> list[str]:
    overlap = goal_overlap(mentee, mentor)
    if overlap:
        return overlap[:MAX_FOCUS_AREAS]
    return mentor.mentoring_info.areas_of_expertise[:MAX_FOCUS_AREAS]


def _ordered_methods(methods: set[str]) -> list[str]:
    known = [m for m in _METHOD_ORDER if m in methods]
    return known + sorted(methods - set(_METHOD_ORDER))


def recommend_communication(mentee: MenteeProfile, mentor: MentorProfile) -> str:
    candidates = (
        _ordered_methods(shared_methods(mentee, mentor))
        or _ordered_methods(mentee.communication_style.preferred_methods)
    )
    hours = mentor.stats.response_time_hours

    if candidates:
        text = f"Use {candidates[0]} as the main channel"
    else:
        text = "Agree on a main channel in the first session"
    if hours is None:
        return text + "; confirm expected reply times up front."
    return text + f"; this mentor usually replies {_reply_phrase(hours)}."


def build_recommendations(
    mentee: MenteeProfile,
    mentor: MentorProfile,
    compatibility: CompatibilityVector,
) -> Recommendations:
    return Recommendations(
        session_frequency=recommend_frequency(mentee, mentor, compatibility.availability),
        session_duration=recommend_duration(mentee, mentor, compatibility.availability),
        focus_areas=recommend_focus_areas(mentee, mentor),
        communication_strategy=recommend_communication(mentee, mentor),
    )
