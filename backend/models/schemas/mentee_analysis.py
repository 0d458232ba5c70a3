"""Profile-level guidance for a mentee, independent of any mentor."""

from models.schemas.base import CamelModel


class MenteeAnalysis(CamelModel):
    strengths: list[str] = []
    areas_for_improvement: list[str] = []
    recommended_mentor_types: list[str] = []
