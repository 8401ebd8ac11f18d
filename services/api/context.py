import time
from dataclasses import dataclass, field

from shared.ai.base import AIProvider

from .config import APIConfig


@dataclass
class AppContext:
    """Everything a request handler needs, built once per app."""
    config: APIConfig
    provider: AIProvider
    started_at: float = field(default_factory=time.monotonic)

    @property
    def uptime_seconds(self) -> int:
        return round(time.monotonic() - self.started_at)
