"""
AI Backend Platform - FastAPI Application

Builds the app around an AppContext (config + provider) so handlers never
reach for module-level state. Public routes: /health, /openapi.json, /docs.
Everything under /v1 requires the X-API-KEY header.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIMiddleware

from shared.ai.base import AIProvider
from shared.ai.factory import get_ai_provider

from .config import APIConfig, load_config, log_startup_banner
from .context import AppContext
from .errors import register_error_handlers
from .middleware import REQUEST_ID_HEADER, BodySizeLimitMiddleware, RequestIDMiddleware
from .rate_limit import create_limiter
from .routes import chat_router, content_router, health_router, resume_router

logger = logging.getLogger(__name__)

API_TITLE = "AI Backend Platform"
API_DESCRIPTION = "Modular AI backend API: chat insights, resume ATS scoring, and content generation."


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    context: AppContext = app.state.context
    log_startup_banner(context.config, context.provider.name)

    yield

    logger.info("Shutting down AI Backend Platform...")


def create_app(config: Optional[APIConfig] = None, provider: Optional[AIProvider] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Configuration to use; loaded from the environment when omitted
        provider: AI provider to use; selected from config when omitted

    Raises:
        ConfigError: if config is omitted and the environment is invalid
    """
    config = config or load_config()
    provider = provider or get_ai_provider(config)

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=config.build_version,
        lifespan=lifespan,
        openapi_url="/openapi.json",
        docs_url="/docs",
        redoc_url=None,
    )
    app.state.context = AppContext(config=config, provider=provider)
    app.state.limiter = create_limiter(config)

    register_error_handlers(app)

    # Added innermost first: the request id covers 413/429/500 answers, and CORS covers the request id
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(BodySizeLimitMiddleware, max_body_size=config.max_body_size_bytes)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-API-KEY", REQUEST_ID_HEADER],
        expose_headers=[
            REQUEST_ID_HEADER,
            "X-RateLimit-Limit",
            "X-RateLimit-Remaining",
            "X-RateLimit-Reset",
            "Retry-After",
        ],
    )

    app.include_router(health_router)
    app.include_router(chat_router, prefix="/v1")
    app.include_router(resume_router, prefix="/v1")
    app.include_router(content_router, prefix="/v1")

    return app
