import logging

from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import AnalyzeMenteeRequest, MatchRequest
from models.responses import MatchResponse
from models.schemas.enums import VerificationStatus
from models.schemas.mentee_analysis import MenteeAnalysis
from services.matching import ValidationError, analyze_mentee_profile, rank_mentors

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _is_verified(record: dict) -> bool:
    status = record.get("verificationStatus", record.get("verification_status"))
    return status == VerificationStatus.VERIFIED.value


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "max_candidates": settings.max_candidates,
    }


@router.post("/mentors/match", response_model=MatchResponse)
@limiter.limit(settings.rate_limit)
async def match_mentors(request: Request, body: MatchRequest):
    if len(body.mentors) > settings.max_candidates:
        raise HTTPException(
            status_code=400,
            detail=f"Too many mentors. Max pool size: {settings.max_candidates}",
        )

    # Only verified mentors are eligible; the engine itself does not filter.
    eligible = [m for m in body.mentors if _is_verified(m)]
    excluded = len(body.mentors) - len(eligible)

    try:
        report = rank_mentors(
            body.mentee,
            eligible,
            body.weights,
            body.top_n or settings.default_top_n,
            min_score=body.min_score,
            workers=settings.scoring_workers,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if excluded:
        logger.info("Excluded %d unverified mentors from match request", excluded)

    return MatchResponse(
        matches=report.matches,
        skipped=report.skipped,
        excluded_unverified=excluded,
        candidates_scored=report.candidates_scored,
    )


@router.post("/mentees/analyze", response_model=MenteeAnalysis)
@limiter.limit(settings.rate_limit)
async def analyze_mentee(request: Request, body: AnalyzeMenteeRequest):
    try:
        return analyze_mentee_profile(body.mentee)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
