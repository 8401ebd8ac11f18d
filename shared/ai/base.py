"""
Provider interface shared by the mock and live text-generation backends.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from shared.schemas.chat import InsightSignals, InsightsResult, Message, SummaryResult, SummaryStyle
from shared.schemas.content import ContentLength, GenerateResult
from shared.schemas.resume import ImproveResult, ScoreResult


class ProviderError(Exception):
    """An upstream provider call failed."""

    status_code = 500


class ProviderResponseError(ProviderError):
    """The provider answered, but not with the JSON shape that was asked for."""

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw


class AIProvider(ABC):
    """Capability set every backend implements."""

    name: str = "base"

    @abstractmethod
    async def summarize_chat(self, messages: List[Message], style: SummaryStyle = "concise") -> SummaryResult:
        """Summarize a conversation into a summary, key points and action items."""
        pass

    @abstractmethod
    async def extract_insights(
        self, messages: List[Message], signals: Optional[InsightSignals] = None
    ) -> InsightsResult:
        """Extract sentiment, topics, entities, risks and follow-ups."""
        pass

    @abstractmethod
    async def score_resume(self, resume_text: str, job_description: Optional[str] = None) -> ScoreResult:
        """Score a resume from 0 to 100."""
        pass

    @abstractmethod
    async def improve_resume(
        self,
        resume_text: str,
        job_description: Optional[str] = None,
        target_role: Optional[str] = None,
    ) -> ImproveResult:
        """Suggest improvements and produce an optimized resume."""
        pass

    @abstractmethod
    async def generate_content(
        self, prompt: str, tone: Optional[str] = None, length: ContentLength = "medium"
    ) -> GenerateResult:
        """Generate free-form content for a prompt."""
        pass
