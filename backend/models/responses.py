from models.schemas.base import CamelModel
from models.schemas.match_result import MatchResult, SkippedMentor


class MatchResponse(CamelModel):
    matches: list[MatchResult] = []
    skipped: list[SkippedMentor] = []
    excluded_unverified: int = 0
    candidates_scored: int = 0
