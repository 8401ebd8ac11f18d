from typing import Literal, Optional
from pydantic import Field

from .base import CamelModel


ContentLength = Literal["short", "medium", "long"]


class GenerateContentRequest(CamelModel):
    """Request to generate free-form content from a prompt."""

    prompt: str = Field(..., min_length=1, max_length=50_000, description="What to write")
    tone: Optional[str] = Field(None, max_length=100, description="Desired tone, e.g. 'casual'")
    length: ContentLength = Field("medium", description="Approximate output length")


class TokenUsage(CamelModel):
    prompt: int = Field(0, ge=0)
    completion: int = Field(0, ge=0)
    total: int = Field(0, ge=0)


class GenerateResult(CamelModel):
    generated_text: str
    tokens_usage: TokenUsage
