"""Weight vector and per-factor compatibility vector."""

from pydantic import Field

from models.schemas.base import CamelModel

# Factor order is fixed: it drives aggregation, tie-breaks in explanations
# and the order of keys in API output.
FACTORS: tuple[str, ...] = (
    "skills",
    "availability",
    "communication",
    "experience",
    "personality",
    "learning",
    "budget",
    "location",
)


class WeightVector(CamelModel):
    """Relative importance of each factor.

    Values need not sum to 1; the aggregator normalizes them. Omitted keys
    take the platform defaults. Negative values are accepted here and clamped
    to 0 at aggregation time.
    """
    skills: float = 0.25
    availability: float = 0.20
    communication: float = 0.15
    experience: float = 0.15
    personality: float = 0.10
    learning: float = 0.10
    budget: float = 0.03
    location: float = 0.02

    @classmethod
    def uniform(cls, value: float = 1.0) -> "WeightVector":
        return cls(**{name: value for name in FACTORS})

    def as_list(self) -> list[float]:
        return [getattr(self, name) for name in FACTORS]


class CompatibilityVector(CamelModel):
    """Scores in [0, 1] for one (mentee, mentor) pair."""
    skills: float = Field(ge=0.0, le=1.0)
    availability: float = Field(ge=0.0, le=1.0)
    communication: float = Field(ge=0.0, le=1.0)
    experience: float = Field(ge=0.0, le=1.0)
    personality: float = Field(ge=0.0, le=1.0)
    learning: float = Field(ge=0.0, le=1.0)
    budget: float = Field(ge=0.0, le=1.0)
    location: float = Field(ge=0.0, le=1.0)

    def as_list(self) -> list[float]:
        return [getattr(self, name) for name in FACTORS]

    def items(self) -> list[tuple[str, float]]:
        return [(name, getattr(self, name)) for name in FACTORS]
