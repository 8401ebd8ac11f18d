from fastapi import APIRouter, Depends

from shared.ai.base import AIProvider
from shared.schemas.base import DataEnvelope
from shared.schemas.content import GenerateContentRequest, GenerateResult

from ..dependencies import get_provider, require_api_key
from .responses import PROTECTED_RESPONSES

router = APIRouter(
    prefix="/content",
    tags=["Content"],
    dependencies=[Depends(require_api_key)],
    responses=PROTECTED_RESPONSES,
)


@router.post(
    "/generate",
    response_model=DataEnvelope[GenerateResult],
    summary="Generate content from a prompt",
)
async def generate_content(request: GenerateContentRequest, provider: AIProvider = Depends(get_provider)):
    """Generates text content based on a prompt with configurable tone and length."""
    result = await provider.generate_content(request.prompt, tone=request.tone, length=request.length)
    return DataEnvelope(data=result)
