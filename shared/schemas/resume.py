from typing import List, Optional
from pydantic import Field

from .base import CamelModel


MIN_RESUME_LENGTH = 10
MAX_RESUME_LENGTH = 100_000
MAX_JOB_DESCRIPTION_LENGTH = 50_000
MAX_TARGET_ROLE_LENGTH = 200


class ScoreResumeRequest(CamelModel):
    """Request to score a resume, optionally against a job description."""

    resume_text: str = Field(
        ..., min_length=MIN_RESUME_LENGTH, max_length=MAX_RESUME_LENGTH, description="Original resume text"
    )
    job_description: Optional[str] = Field(
        None, max_length=MAX_JOB_DESCRIPTION_LENGTH, description="Target job description"
    )


class ImproveResumeRequest(ScoreResumeRequest):
    """Request to rewrite a resume for ATS optimization."""

    target_role: Optional[str] = Field(None, max_length=MAX_TARGET_ROLE_LENGTH, description="Role being applied for")


class ScoreResult(CamelModel):
    """ATS score for a resume."""

    overall_score: int = Field(..., ge=0, le=100, description="Overall score from 0 to 100")
    rationale: str = Field(..., description="Why the resume received this score")
    matched_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)


class ImproveResult(CamelModel):
    """Suggested improvements and a rewritten resume."""

    improved_bullets: List[str] = Field(default_factory=list)
    keywords_to_add: List[str] = Field(default_factory=list)
    formatting_suggestions: List[str] = Field(default_factory=list)
    optimized_version: str = Field(..., description="The full optimized resume text")
