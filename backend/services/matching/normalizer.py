"""Profile normalization: validate identity, fill defaults, clamp ranges.

Raw profiles come from the profile service as loosely filled mappings. The
functions here turn them into fully populated ``MenteeProfile`` /
``MentorProfile`` models so the scorers never have to guess at a field.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from models.schemas.enums import ExperienceLevel
from models.schemas.mentee_profile import Budget, MenteeProfile
from models.schemas.mentor_profile import MentorProfile, TimeSlot
from services.matching.errors import ValidationError
from services.matching.taxonomy import canonical_skills, normalize_term, parse_clock

logger = logging.getLogger(__name__)

# years of experience -> inferred mentoring level, checked top-down
_LEVEL_BY_YEARS: list[tuple[float, ExperienceLevel]] = [
    (15, ExperienceLevel.EXPERT),
    (8, ExperienceLevel.ADVANCED),
    (3, ExperienceLevel.INTERMEDIATE),
    (0, ExperienceLevel.BEGINNER),
]


def _record_id(raw: Any) -> str:
    value = raw.get("id") if isinstance(raw, Mapping) else getattr(raw, "id", None)
    return "" if value is None else str(value)


def _parse(model: type, raw: Any, kind: str):
    """Build ``model`` from a mapping or pass an instance through."""
    record_id = _record_id(raw).strip()
    if not record_id:
        raise ValidationError(f"{kind} record is missing a mandatory id")
    if isinstance(raw, model):
        return raw
    if not isinstance(raw, Mapping):
        raise ValidationError(f"{kind} {record_id}: expected a mapping, got {type(raw).__name__}",
                              record_id=record_id)
    if not isinstance(raw["id"], str):
        # numeric ids from upstream stores
        raw = {**raw, "id": record_id}
    try:
        return model.model_validate(raw)
    except PydanticValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(p) for p in first["loc"])
        raise ValidationError(f"{kind} {record_id}: {loc}: {first['msg']}",
                              record_id=record_id) from e


def _terms(values) -> set[str]:
    return {normalize_term(v) for v in values if v and v.strip()}


def _non_negative(value: float) -> float:
    return value if value > 0 else 0.0


def _bounded(value: float, high: float) -> float:
    """Clamp into [0, high]; NaN and infinities become 0."""
    if not math.isfinite(value):
        return 0.0
    return min(max(value, 0.0), high)


def normalize_budget(budget: Budget | None) -> Budget:
    """Fill a missing budget with [0, inf) and repair out-of-range bounds."""
    if budget is None:
        return Budget()
    low = _non_negative(budget.min)
    high = _non_negative(budget.max) if not math.isnan(budget.max) else math.inf
    if low > high:
        logger.debug("Swapping inverted budget bounds %s > %s", low, high)
        low, high = high, low
    return Budget(min=low, max=high, currency=(budget.currency or "USD").upper())


def normalize_mentee(raw: Mapping[str, Any] | MenteeProfile) -> MenteeProfile:
    """Validate and normalize a mentee record.

    Raises:
        ValidationError: the id is missing/blank or the record is malformed.
    """
    mentee = _parse(MenteeProfile, raw, "Mentee")
    prof = mentee.professional_info
    needs = mentee.mentoring_needs
    comm = mentee.communication_style

    commitment = needs.time_commitment
    if commitment is not None and commitment < 0:
        commitment = None

    return mentee.model_copy(update={
        "id": mentee.id.strip(),
        "personal_info": mentee.personal_info.model_copy(update={
            "timezone": mentee.personal_info.timezone.strip(),
            "location": mentee.personal_info.location.strip(),
        }),
        "professional_info": prof.model_copy(update={
            "skills": canonical_skills(prof.skills),
            "goals": {g.strip() for g in prof.goals if g and g.strip()},
            "interests": _terms(prof.interests),
        }),
        "mentoring_needs": needs.model_copy(update={
            "areas_of_focus": {a.strip() for a in needs.areas_of_focus if a and a.strip()},
            "session_types": _terms(needs.session_types),
            "budget": normalize_budget(needs.budget),
            "time_commitment": commitment,
        }),
        "communication_style": comm.model_copy(update={
            "preferred_methods": _terms(comm.preferred_methods),
        }),
        "personality_traits": _terms(mentee.personality_traits),
    })


def infer_experience_level(years: float) -> ExperienceLevel | None:
    if years <= 0:
        return None
    for threshold, level in _LEVEL_BY_YEARS:
        if years >= threshold:
            return level
    return None


def _valid_slots(slots: list[TimeSlot], mentor_id: str) -> list[TimeSlot]:
    valid = []
    for slot in slots:
        if parse_clock(slot.start_time) is None or parse_clock(slot.end_time) is None:
            logger.debug("Mentor %s: dropping slot with unreadable times %s-%s",
                         mentor_id, slot.start_time, slot.end_time)
            continue
        valid.append(slot)
    return valid


def normalize_mentor(raw: Mapping[str, Any] | MentorProfile) -> MentorProfile:
    """Validate and normalize a mentor record.

    Raises:
        ValidationError: the id is missing/blank or the record is malformed.
    """
    mentor = _parse(MentorProfile, raw, "Mentor")
    mentor_id = mentor.id.strip()
    prof = mentor.professional_info
    info = mentor.mentoring_info
    stats = mentor.stats

    years = _bounded(prof.years_of_experience, math.inf)
    level = info.experience_level
    if level is None:
        level = infer_experience_level(years)
        if level is not None:
            logger.debug("Mentor %s: inferred level %s from %.1f years", mentor_id, level.value, years)

    response = stats.response_time_hours
    if response is not None and (response < 0 or math.isnan(response)):
        response = None

    return mentor.model_copy(update={
        "id": mentor_id,
        "personal_info": mentor.personal_info.model_copy(update={
            "timezone": mentor.personal_info.timezone.strip(),
            "location": mentor.personal_info.location.strip(),
        }),
        "professional_info": prof.model_copy(update={
            "years_of_experience": years,
            "skills": canonical_skills(prof.skills),
            "specializations": canonical_skills(prof.specializations),
        }),
        "mentoring_info": info.model_copy(update={
            "areas_of_expertise": [a.strip() for a in info.areas_of_expertise if a and a.strip()],
            "experience_level": level,
            "availability": info.availability.model_copy(update={
                "time_slots": _valid_slots(info.availability.time_slots, mentor_id),
                "max_sessions_per_week": max(info.availability.max_sessions_per_week, 0),
                "session_duration": max(info.availability.session_duration, 0),
            }),
            "pricing": info.pricing.model_copy(update={
                "hourly_rate": _non_negative(info.pricing.hourly_rate),
                "currency": (info.pricing.currency or "USD").upper(),
                "free_sessions": max(info.pricing.free_sessions, 0),
            }),
            "communication_preferences": _terms(info.communication_preferences),
        }),
        "stats": stats.model_copy(update={
            "average_rating": _bounded(stats.average_rating, 5.0),
            "completion_rate": _bounded(stats.completion_rate, 1.0),
            "total_sessions": max(stats.total_sessions, 0),
            "response_time_hours": response,
        }),
        "preferences": mentor.preferences.model_copy(update={
            "session_types": _terms(mentor.preferences.session_types),
        }),
        "personality_traits": _terms(mentor.personality_traits),
    })
