"""
Per-client request budget, shared by every route (health and docs included).
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import APIConfig


def create_limiter(config: APIConfig) -> Limiter:
    """In-memory limiter allowing RATE_LIMIT_PER_MINUTE requests per client address."""
    return Limiter(
        key_func=get_remote_address,
        application_limits=[f"{config.rate_limit_per_minute}/minute"],
        headers_enabled=True,
        storage_uri="memory://",
    )
