import secrets
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from shared.ai.base import AIProvider

from .config import APIConfig
from .context import AppContext
from .errors import UnauthorizedError

API_KEY_HEADER = "X-API-KEY"

api_key_header = APIKeyHeader(
    name=API_KEY_HEADER,
    description="Shared API key passed via the X-API-KEY header",
    auto_error=False,
)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_config(context: AppContext = Depends(get_context)) -> APIConfig:
    return context.config


def get_provider(context: AppContext = Depends(get_context)) -> AIProvider:
    return context.provider


def require_api_key(
    api_key: Optional[str] = Depends(api_key_header),
    config: APIConfig = Depends(get_config),
) -> None:
    """Reject the request unless X-API-KEY matches the configured secret."""
    if not api_key:
        raise UnauthorizedError("Missing X-API-KEY header.")
    if not secrets.compare_digest(api_key.encode("utf-8"), config.api_key.encode("utf-8")):
        raise UnauthorizedError("Invalid API key.")
