from typing import List, Literal, Optional
from pydantic import Field

from .base import CamelModel


Role = Literal["user", "assistant", "system"]
SummaryStyle = Literal["concise", "detailed"]

MAX_MESSAGES = 200
MAX_CONTENT_LENGTH = 50_000


class Message(CamelModel):
    """A single chat turn."""

    role: Role
    content: str = Field(..., min_length=1, max_length=MAX_CONTENT_LENGTH)


class SummarizeRequest(CamelModel):
    """Request to summarize a conversation."""

    messages: List[Message] = Field(..., min_length=1, max_length=MAX_MESSAGES)
    style: SummaryStyle = Field("concise", description="Summary verbosity")


class InsightSignals(CamelModel):
    """Which optional signals to extract. Everything is on by default."""

    sentiment: bool = True
    topics: bool = True
    entities: bool = True


class InsightsRequest(CamelModel):
    """Request to extract insights from a conversation."""

    messages: List[Message] = Field(..., min_length=1, max_length=MAX_MESSAGES)
    signals: InsightSignals = Field(default_factory=InsightSignals)


class SummaryResult(CamelModel):
    summary: str
    key_points: List[str] = Field(default_factory=list)
    action_items: List[str] = Field(default_factory=list)


class Sentiment(CamelModel):
    label: str
    score: float


class InsightsResult(CamelModel):
    # Always serialized, null when the sentiment signal is off
    sentiment: Optional[Sentiment] = None
    topics: List[str] = Field(default_factory=list)
    entities: List[str] = Field(default_factory=list)
    risks: List[str] = Field(default_factory=list)
    follow_ups: List[str] = Field(default_factory=list)
