from .base import CamelModel, DataEnvelope, ErrorBody, ErrorEnvelope, HealthStatus
from .chat import (
    Message,
    SummarizeRequest,
    InsightSignals,
    InsightsRequest,
    SummaryResult,
    Sentiment,
    InsightsResult,
)
from .resume import ScoreResumeRequest, ImproveResumeRequest, ScoreResult, ImproveResult
from .content import GenerateContentRequest, TokenUsage, GenerateResult

__all__ = [
    "CamelModel",
    "DataEnvelope",
    "ErrorBody",
    "ErrorEnvelope",
    "HealthStatus",
    "Message",
    "SummarizeRequest",
    "InsightSignals",
    "InsightsRequest",
    "SummaryResult",
    "Sentiment",
    "InsightsResult",
    "ScoreResumeRequest",
    "ImproveResumeRequest",
    "ScoreResult",
    "ImproveResult",
    "GenerateContentRequest",
    "TokenUsage",
    "GenerateResult",
]
