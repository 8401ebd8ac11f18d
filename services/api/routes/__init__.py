from .health import router as health_router
from .chat import router as chat_router
from .resume import router as resume_router
from .content import router as content_router

__all__ = ["health_router", "chat_router", "resume_router", "content_router"]
