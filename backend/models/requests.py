from typing import Any

from pydantic import Field

from models.schemas.base import CamelModel
from models.schemas.compatibility import WeightVector


class MatchRequest(CamelModel):
    # Profiles stay raw here so the engine decides what is malformed:
    # a bad mentee fails the request, a bad mentor is skipped.
    mentee: dict[str, Any]
    mentors: list[dict[str, Any]] = []
    weights: WeightVector = WeightVector()
    top_n: int | None = Field(default=None, ge=1)
    min_score: int | None = Field(default=None, ge=0, le=100)


class AnalyzeMenteeRequest(CamelModel):
    mentee: dict[str, Any]
