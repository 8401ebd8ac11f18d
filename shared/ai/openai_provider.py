"""
Live provider backed by the OpenAI chat completions API (openai.com or Azure).

Every operation sends a system prompt that embeds the expected JSON shape and
parses the model's reply back into the result model. The parse is only as
reliable as the model's obedience to that prompt: replies that are not JSON,
or not the requested shape, raise ProviderResponseError. Nothing is retried.
"""
import json
import logging
import re
from typing import Any, List, Optional, Tuple, Type, TypeVar

from openai import AsyncAzureOpenAI, AsyncOpenAI, OpenAIError
from pydantic import BaseModel, ValidationError

from shared.schemas.chat import InsightSignals, InsightsResult, Message, SummaryResult, SummaryStyle
from shared.schemas.content import ContentLength, GenerateResult, TokenUsage
from shared.schemas.resume import ImproveResult, ScoreResult

from .base import AIProvider, ProviderError, ProviderResponseError

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)

DEFAULT_MODEL = "gpt-4o"

SUMMARY_SYSTEM_PROMPT = """You are an expert conversation analyst. Summarize the following conversation.
Return ONLY valid JSON with this exact structure:
{{
  "summary": "string",
  "keyPoints": ["string"],
  "actionItems": ["string"]
}}
Style: {style}. {guidance}"""

INSIGHTS_SYSTEM_PROMPT = """You are an expert conversation analyst. Extract insights from the conversation.
Return ONLY valid JSON:
{{
  {signals},
  "risks": ["string"],
  "followUps": ["string"]
}}"""

SCORE_SYSTEM_PROMPT = """You are an expert ATS resume evaluator. Score the resume 0-100.
Return ONLY valid JSON:
{
  "overallScore": number,
  "rationale": "string",
  "matchedSkills": ["string"],
  "missingSkills": ["string"]
}"""

IMPROVE_SYSTEM_PROMPT = """You are an expert resume writer and ATS optimizer.
Return ONLY valid JSON:
{
  "improvedBullets": ["string"],
  "keywordsToAdd": ["string"],
  "formattingSuggestions": ["string"],
  "optimizedVersion": "string (the full optimized resume text)"
}"""

CONTENT_SYSTEM_PROMPT = (
    "Generate content in a {tone} tone. Target length: {length}. "
    "Write only the requested content, no meta commentary."
)

LENGTH_GUIDE = {"short": "~100 words", "medium": "~300 words", "long": "~600 words"}

_FENCE_OPEN = re.compile(r"```json\n?")
_FENCE_ANY = re.compile(r"```\n?")


def strip_code_fences(raw: str) -> str:
    """Remove markdown code fences the model may wrap its JSON in."""
    return _FENCE_ANY.sub("", _FENCE_OPEN.sub("", raw)).strip()


def parse_json_reply(raw: str) -> Any:
    """
    Parse a model reply as JSON.

    Raises:
        ProviderResponseError: if the reply is not valid JSON once fences are removed
    """
    try:
        return json.loads(strip_code_fences(raw))
    except json.JSONDecodeError as e:
        logger.error(f"Model reply is not valid JSON: {e}")
        raise ProviderResponseError(f"Model reply is not valid JSON: {e}", raw=raw) from e


def render_conversation(messages: List[Message]) -> str:
    return "\n".join(f"{m.role}: {m.content}" for m in messages)


class OpenAIProvider(AIProvider):
    """Forwards each operation to a chat completions endpoint."""

    def __init__(self, client: AsyncOpenAI, model: str = DEFAULT_MODEL, name: str = "openai"):
        self._client = client
        self.model = model
        self.name = name

    @classmethod
    def from_config(cls, config: Any) -> "OpenAIProvider":
        """Build the client for openai.com or Azure OpenAI from the API config."""
        if config.ai_provider == "azure":
            client = AsyncAzureOpenAI(
                api_key=config.azure_openai_key,
                azure_endpoint=config.azure_openai_endpoint,
                azure_deployment=config.azure_openai_deployment,
                api_version=config.azure_openai_api_version,
                timeout=config.ai_request_timeout_seconds,
                max_retries=0,
            )
            return cls(client, model=config.azure_openai_deployment, name="azure-openai")

        client = AsyncOpenAI(
            api_key=config.openai_api_key,
            timeout=config.ai_request_timeout_seconds,
            max_retries=0,
        )
        return cls(client, model=config.openai_model or DEFAULT_MODEL, name="openai")

    async def _chat(self, system_prompt: str, user_content: str, temperature: float) -> Tuple[str, TokenUsage]:
        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_content},
                ],
            )
        except OpenAIError as e:
            logger.error(f"{self.name} completion failed: {e}")
            raise ProviderError(f"{self.name} completion failed: {e}") from e

        text = ""
        if response.choices:
            text = response.choices[0].message.content or ""

        usage = TokenUsage()
        if response.usage is not None:
            usage = TokenUsage(
                prompt=response.usage.prompt_tokens or 0,
                completion=response.usage.completion_tokens or 0,
                total=response.usage.total_tokens or 0,
            )
        logger.debug(f"{self.name} reply: {text[:200]}...")
        return text, usage

    def _parse_result(self, raw: str, result_type: Type[ResultT], payload: Any = None) -> ResultT:
        if payload is None:
            payload = parse_json_reply(raw)
        try:
            return result_type.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Model reply does not match {result_type.__name__}: {e}")
            raise ProviderResponseError(f"Model reply does not match {result_type.__name__}", raw=raw) from e

    async def summarize_chat(self, messages: List[Message], style: SummaryStyle = "concise") -> SummaryResult:
        guidance = "Provide thorough analysis." if style == "detailed" else "Be brief and focused."
        system_prompt = SUMMARY_SYSTEM_PROMPT.format(style=style, guidance=guidance)

        text, _ = await self._chat(system_prompt, render_conversation(messages), temperature=0.3)
        return self._parse_result(text, SummaryResult)

    async def extract_insights(
        self, messages: List[Message], signals: Optional[InsightSignals] = None
    ) -> InsightsResult:
        signals = signals or InsightSignals()
        fields = [
            '"sentiment": { "label": "positive|negative|neutral", "score": 0.0-1.0 }'
            if signals.sentiment
            else '"sentiment": null',
            '"topics": ["string"]' if signals.topics else '"topics": []',
            '"entities": ["string"]' if signals.entities else '"entities": []',
        ]
        system_prompt = INSIGHTS_SYSTEM_PROMPT.format(signals=",\n  ".join(fields))

        text, _ = await self._chat(system_prompt, render_conversation(messages), temperature=0.3)
        return self._parse_result(text, InsightsResult)

    async def score_resume(self, resume_text: str, job_description: Optional[str] = None) -> ScoreResult:
        if job_description:
            jd_clause = f"\n\nJob Description:\n{job_description}"
        else:
            jd_clause = "\n\nNo specific job description provided. Evaluate against general best practices."

        text, _ = await self._chat(SCORE_SYSTEM_PROMPT, f"Resume:\n{resume_text}{jd_clause}", temperature=0.2)

        payload = parse_json_reply(text)
        if isinstance(payload, dict) and isinstance(payload.get("overallScore"), (int, float)):
            payload["overallScore"] = min(100, max(0, round(payload["overallScore"])))
        return self._parse_result(text, ScoreResult, payload=payload)

    async def improve_resume(
        self,
        resume_text: str,
        job_description: Optional[str] = None,
        target_role: Optional[str] = None,
    ) -> ImproveResult:
        extra = []
        if job_description:
            extra.append(f"Job Description: {job_description}")
        if target_role:
            extra.append(f"Target Role: {target_role}")

        user_content = f"Resume:\n{resume_text}\n" + "\n".join(extra)
        text, _ = await self._chat(IMPROVE_SYSTEM_PROMPT, user_content, temperature=0.4)
        return self._parse_result(text, ImproveResult)

    async def generate_content(
        self, prompt: str, tone: Optional[str] = None, length: ContentLength = "medium"
    ) -> GenerateResult:
        system_prompt = CONTENT_SYSTEM_PROMPT.format(tone=tone or "professional", length=LENGTH_GUIDE[length])

        text, usage = await self._chat(system_prompt, prompt, temperature=0.7)
        return GenerateResult(generated_text=text, tokens_usage=usage)
