import logging

from fastapi import APIRouter, Depends

from shared.ai.base import AIProvider
from shared.schemas.base import DataEnvelope
from shared.schemas.resume import ImproveResult, ImproveResumeRequest, ScoreResult, ScoreResumeRequest

from ..dependencies import get_provider, require_api_key
from .responses import PROTECTED_RESPONSES

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/resume",
    tags=["Resume"],
    dependencies=[Depends(require_api_key)],
    responses=PROTECTED_RESPONSES,
)


@router.post(
    "/score",
    response_model=DataEnvelope[ScoreResult],
    summary="Score a resume against a job description",
)
async def score_resume(request: ScoreResumeRequest, provider: AIProvider = Depends(get_provider)):
    """
    Evaluate a resume with an ATS score (0-100), matched/missing skills and a rationale.

    The job description is optional; without it the resume is scored
    against general best practices.
    """
    logger.info(f"Scoring resume ({len(request.resume_text)} chars, jd={request.job_description is not None})")
    result = await provider.score_resume(request.resume_text, request.job_description)
    return DataEnvelope(data=result)


@router.post(
    "/improve",
    response_model=DataEnvelope[ImproveResult],
    summary="Improve a resume for ATS optimization",
)
async def improve_resume(request: ImproveResumeRequest, provider: AIProvider = Depends(get_provider)):
    """Return improved bullets, keywords, formatting suggestions, and an optimized resume."""
    logger.info(f"Improving resume for role={request.target_role or 'unspecified'}")
    result = await provider.improve_resume(
        request.resume_text,
        job_description=request.job_description,
        target_role=request.target_role,
    )
    return DataEnvelope(data=result)
