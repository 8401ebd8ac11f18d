"""
Provider selection.

The chosen provider is cached for the life of the process; tests call
reset_ai_provider() between cases.
"""
import logging
from typing import Any, Optional

from .base import AIProvider
from .mock_provider import MockAIProvider
from .openai_provider import OpenAIProvider

logger = logging.getLogger(__name__)

_provider: Optional[AIProvider] = None


def create_provider(config: Any) -> AIProvider:
    """Build a fresh provider for config.ai_provider (mock, openai or azure)."""
    if config.ai_provider in ("openai", "azure"):
        return OpenAIProvider.from_config(config)
    return MockAIProvider()


def get_ai_provider(config: Any) -> AIProvider:
    """Get or create the process-wide provider."""
    global _provider
    if _provider is None:
        _provider = create_provider(config)
        logger.info(f"AI provider initialized: {_provider.name}")
    return _provider


def reset_ai_provider() -> None:
    """Forget the cached provider."""
    global _provider
    _provider = None
