"""Mentor-independent guidance derived from a mentee profile alone."""

from collections.abc import Mapping
from typing import Any

from models.schemas.enums import ExperienceLevel
from models.schemas.mentee_analysis import MenteeAnalysis
from models.schemas.mentee_profile import MenteeProfile
from services.matching.normalizer import normalize_mentee

_MENTOR_TYPES: dict[ExperienceLevel | None, list[str]] = {
    ExperienceLevel.BEGINNER: ["Patient and encouraging mentors", "Mentors with teaching experience"],
    ExperienceLevel.INTERMEDIATE: ["Industry experts", "Mentors with leadership experience"],
    ExperienceLevel.ADVANCED: ["Senior executives", "Mentors with strategic expertise"],
    ExperienceLevel.EXPERT: ["Senior executives", "Mentors with strategic expertise"],
    None: ["Generalist mentors who can help assess your current level"],
}


def analyze_mentee_profile(raw: Mapping[str, Any] | MenteeProfile) -> MenteeAnalysis:
    """Summarize strengths, gaps and the kind of mentor that suits this mentee."""
    mentee = normalize_mentee(raw)
    prof = mentee.professional_info
    history = mentee.learning_history

    strengths: list[str] = []
    improvements: list[str] = []

    if len(prof.skills) >= 5:
        strengths.append("Strong technical foundation")
    else:
        improvements.append("Consider developing more technical skills")

    if len(prof.goals) >= 3:
        strengths.append("Clear career objectives")
    else:
        improvements.append("Define more specific career goals")

    if history.completed_courses >= 5:
        strengths.append("Consistent learner")
    if history.learning_streak >= 30:
        strengths.append("Maintains learning momentum")
    if history.projects_built >= 3:
        strengths.append("Hands-on project experience")

    if not mentee.personality_traits:
        improvements.append("Add personality traits to sharpen mentor matching")

    return MenteeAnalysis(
        strengths=strengths,
        areas_for_improvement=improvements,
        recommended_mentor_types=list(_MENTOR_TYPES[prof.experience_level]),
    )
