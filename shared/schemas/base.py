from typing import Any, Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model exchanged as camelCase JSON, accessed as snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DataEnvelope(CamelModel, Generic[T]):
    """Successful response wrapper."""

    data: T


class ErrorBody(BaseModel):
    """Error payload carried by a failed response."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Any] = Field(None, description="Field-level details, when available")


class ErrorEnvelope(BaseModel):
    """Failed response wrapper: data is always null."""

    data: None = None
    error: ErrorBody


class HealthStatus(CamelModel):
    status: str = Field("ok", description="Always 'ok' while the process serves traffic")
    uptime_seconds: float = Field(..., ge=0, description="Seconds since the app was created")
    build_version: str = Field(..., description="Configured build version")
