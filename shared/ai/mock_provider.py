"""
Deterministic provider used for local development and tests.

No network I/O: every result is a pure function of the input.
"""
import math
from typing import List, Optional

from shared.schemas.chat import InsightSignals, InsightsResult, Message, Sentiment, SummaryResult, SummaryStyle
from shared.schemas.content import ContentLength, GenerateResult, TokenUsage
from shared.schemas.resume import ImproveResult, ScoreResult

from .base import AIProvider


TARGET_WORDS = {"short": 50, "medium": 150, "long": 300}
DEFAULT_TONE = "professional"
DEFAULT_ROLE = "Software Engineer"
PROMPT_PREVIEW_CHARS = 100


def estimate_tokens(text: str) -> int:
    """Rough token count: one token per four characters."""
    return math.ceil(len(text) / 4)


class MockAIProvider(AIProvider):
    """Canned responses shaped exactly like the live provider's."""

    name = "mock"

    async def summarize_chat(self, messages: List[Message], style: SummaryStyle = "concise") -> SummaryResult:
        count = len(messages)
        if style == "detailed":
            summary = (
                f"Detailed summary of {count} messages: The conversation covered multiple topics including "
                "project planning, technical decisions, and follow-up actions. Participants discussed key "
                "architectural choices and agreed on next steps."
            )
        else:
            summary = f"Concise summary of {count} messages: Key topics discussed with action items identified."

        return SummaryResult(
            summary=summary,
            key_points=[
                "Project architecture was discussed",
                "Team alignment on tech stack confirmed",
                "Timeline for delivery set to Q1",
            ],
            action_items=[
                "Schedule follow-up meeting for next week",
                "Review the technical proposal document",
                "Share updated timeline with stakeholders",
            ],
        )

    async def extract_insights(
        self, messages: List[Message], signals: Optional[InsightSignals] = None
    ) -> InsightsResult:
        signals = signals or InsightSignals()
        result = InsightsResult()

        if signals.sentiment:
            result.sentiment = Sentiment(label="positive", score=0.82)
        if signals.topics:
            result.topics = ["project planning", "technology", "team collaboration"]
        if signals.entities:
            result.entities = ["Python", "FastAPI", "Azure OpenAI"]

        result.risks = ["Tight deadline may require scope adjustment"]
        result.follow_ups = [
            f"Review the {len(messages)} messages for pending decisions",
            "Confirm resource allocation by end of week",
        ]
        return result

    async def score_resume(self, resume_text: str, job_description: Optional[str] = None) -> ScoreResult:
        has_jd = bool(job_description)
        word_count = len(resume_text.split())
        score = min(100, max(0, 45 + word_count // 10))

        if has_jd:
            rationale = (
                f"Evaluated against the provided job description. Resume has {word_count} words "
                "and covers several matching areas."
            )
            missing = ["Kubernetes", "CI/CD pipelines", "GraphQL"]
        else:
            rationale = (
                f"General ATS evaluation. Resume has {word_count} words. "
                "Consider providing a job description for more targeted feedback."
            )
            missing = ["Consider specifying a job description for skill gap analysis"]

        return ScoreResult(
            overall_score=score,
            rationale=rationale,
            matched_skills=["Python", "FastAPI", "REST APIs", "Git"],
            missing_skills=missing,
        )

    async def improve_resume(
        self,
        resume_text: str,
        job_description: Optional[str] = None,
        target_role: Optional[str] = None,
    ) -> ImproveResult:
        role = target_role or DEFAULT_ROLE
        aligned_with = "job description" if job_description else "industry standards"

        return ImproveResult(
            improved_bullets=[
                "Led cross-functional team of 5 engineers to deliver a high-availability microservices "
                "platform, improving system uptime to 99.9%",
                "Architected and implemented RESTful APIs serving 10K+ daily active users with sub-100ms latency",
                "Reduced CI/CD pipeline execution time by 40% through parallelization and caching strategies",
            ],
            keywords_to_add=[
                "scalable architecture",
                "agile methodology",
                "cloud-native",
                role.lower(),
            ],
            formatting_suggestions=[
                "Use consistent bullet point style throughout",
                "Add quantifiable metrics to each achievement",
                "Ensure contact information is at the top",
                "Keep resume to 1-2 pages maximum",
            ],
            optimized_version=(
                f"# {role} - Optimized Resume\n\n{resume_text}\n\n## Key Additions\n"
                f"- Added quantifiable metrics\n- Aligned keywords with {aligned_with}\n"
                "- Improved formatting for ATS compatibility"
            ),
        )

    async def generate_content(
        self, prompt: str, tone: Optional[str] = None, length: ContentLength = "medium"
    ) -> GenerateResult:
        target_words = TARGET_WORDS[length]
        tone = tone or DEFAULT_TONE
        preview = prompt[:PROMPT_PREVIEW_CHARS] + ("..." if len(prompt) > PROMPT_PREVIEW_CHARS else "")

        generated_text = (
            f"[Generated content in {tone} tone, ~{target_words} words]\n\n"
            f'Based on the prompt: "{preview}"\n\n'
            "This is a mock-generated response that demonstrates the content generation capability. "
            "In production with a real AI provider, this would contain meaningful, contextual content "
            "tailored to your specific requirements and tone preferences. The response would be "
            f"approximately {target_words} words long and written in a {tone} tone."
        )

        prompt_tokens = estimate_tokens(prompt)
        completion_tokens = estimate_tokens(generated_text)
        return GenerateResult(
            generated_text=generated_text,
            tokens_usage=TokenUsage(
                prompt=prompt_tokens,
                completion=completion_tokens,
                total=prompt_tokens + completion_tokens,
            ),
        )
