from .base import AIProvider, ProviderError, ProviderResponseError
from .mock_provider import MockAIProvider
from .openai_provider import OpenAIProvider, parse_json_reply, strip_code_fences
from .factory import create_provider, get_ai_provider, reset_ai_provider

__all__ = [
    "AIProvider",
    "ProviderError",
    "ProviderResponseError",
    "MockAIProvider",
    "OpenAIProvider",
    "parse_json_reply",
    "strip_code_fences",
    "create_provider",
    "get_ai_provider",
    "reset_ai_provider",
]
