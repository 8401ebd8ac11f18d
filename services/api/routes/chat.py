import logging

from fastapi import APIRouter, Depends

from shared.ai.base import AIProvider
from shared.schemas.base import DataEnvelope
from shared.schemas.chat import InsightsRequest, InsightsResult, SummarizeRequest, SummaryResult

from ..dependencies import get_provider, require_api_key
from .responses import PROTECTED_RESPONSES

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/chat",
    tags=["Chat"],
    dependencies=[Depends(require_api_key)],
    responses=PROTECTED_RESPONSES,
)


@router.post(
    "/summarize",
    response_model=DataEnvelope[SummaryResult],
    summary="Summarize a chat conversation",
)
async def summarize_chat(request: SummarizeRequest, provider: AIProvider = Depends(get_provider)):
    """Analyzes chat messages and returns a summary, key points, and action items."""
    logger.info(f"Summarizing {len(request.messages)} messages ({request.style})")
    result = await provider.summarize_chat(request.messages, request.style)
    return DataEnvelope(data=result)


@router.post(
    "/insights",
    response_model=DataEnvelope[InsightsResult],
    summary="Extract insights from a chat conversation",
)
async def extract_insights(request: InsightsRequest, provider: AIProvider = Depends(get_provider)):
    """Analyzes chat messages and returns sentiment, topics, entities, risks, and follow-ups."""
    logger.info(f"Extracting insights from {len(request.messages)} messages")
    result = await provider.extract_insights(request.messages, request.signals)
    return DataEnvelope(data=result)
