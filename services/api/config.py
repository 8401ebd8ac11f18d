import logging
from collections import defaultdict
from typing import List, Literal, Optional

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

Environment = Literal["development", "production", "test"]
LogLevel = Literal["fatal", "error", "warn", "info", "debug", "trace"]
ProviderKind = Literal["mock", "openai", "azure"]


class ConfigError(ValueError):
    """The environment cannot produce a valid configuration. Fatal at startup."""


class APIConfig(BaseSettings):
    """Configuration for the API service, read from the environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = "0.0.0.0"
    port: int = Field(3000, ge=1, le=65535)
    environment: Environment = "development"
    log_level: LogLevel = "info"
    build_version: str = "0.0.0"

    # Shared secret expected in the X-API-KEY header
    api_key: str = Field(..., min_length=1)

    # Transport limits
    cors_origins: str = "*"
    rate_limit_per_minute: int = Field(60, ge=1)
    max_body_size_bytes: int = Field(1_048_576, ge=1)

    # Provider selection
    ai_provider: ProviderKind = "mock"
    ai_request_timeout_seconds: float = Field(60.0, gt=0)

    openai_api_key: str = ""
    openai_model: str = "gpt-4o"

    azure_openai_endpoint: str = ""
    azure_openai_key: str = ""
    azure_openai_deployment: str = ""
    azure_openai_api_version: str = "2024-08-01-preview"

    @model_validator(mode="after")
    def check_provider_credentials(self) -> "APIConfig":
        if self.ai_provider == "openai":
            required = {"OPENAI_API_KEY": self.openai_api_key}
        elif self.ai_provider == "azure":
            required = {
                "AZURE_OPENAI_ENDPOINT": self.azure_openai_endpoint,
                "AZURE_OPENAI_KEY": self.azure_openai_key,
                "AZURE_OPENAI_DEPLOYMENT": self.azure_openai_deployment,
            }
        else:
            required = {}

        missing = [name for name, value in required.items() if not value]
        if missing:
            raise ValueError(f"{', '.join(missing)} required when AI_PROVIDER={self.ai_provider}")
        return self

    @property
    def cors_origin_list(self) -> List[str]:
        """Allowed CORS origins: ["*"] or the comma-separated list, trimmed."""
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def format_config_errors(error: ValidationError) -> str:
    """Aggregate every field error into one message, one line per variable."""
    by_field = defaultdict(list)
    for item in error.errors():
        loc = item.get("loc") or ()
        name = str(loc[0]).upper() if loc else "AI_PROVIDER"
        by_field[name].append(item["msg"])

    lines = [f"  {name}: {', '.join(messages)}" for name, messages in by_field.items()]
    return "Invalid environment configuration:\n" + "\n".join(lines)


_config: Optional[APIConfig] = None


def load_config() -> APIConfig:
    """
    Load and validate configuration from the environment.

    Repeat calls return the cached instance.

    Raises:
        ConfigError: if API_KEY is missing or any field fails its constraint
    """
    global _config
    if _config is not None:
        return _config

    try:
        _config = APIConfig()
    except ValidationError as e:
        raise ConfigError(format_config_errors(e)) from e
    return _config


def reset_config() -> None:
    """Drop the cached configuration (used by tests)."""
    global _config
    _config = None


def mask_secret(value: str) -> str:
    """Mask a secret for logging: first 4 chars followed by ****."""
    if len(value) <= 4:
        return "****"
    return f"{value[:4]}****"


def log_startup_banner(config: APIConfig, provider_name: str) -> None:
    """Log the effective configuration at startup (never the raw API key)."""
    base_url = f"http://{config.host}:{config.port}"
    logger.info("=" * 60)
    logger.info(f"AI Backend Platform v{config.build_version}")
    logger.info(f"Base URL: {base_url}")
    logger.info(f"Environment: {config.environment}")
    logger.info(f"AI Provider: {provider_name}")
    logger.info(f"API Key: {mask_secret(config.api_key)}")
    logger.info(f"Rate limit: {config.rate_limit_per_minute}/minute, max body: {config.max_body_size_bytes} bytes")
    logger.info(f"Swagger UI: {base_url}/docs")
    logger.info(f"OpenAPI JSON: {base_url}/openapi.json")
    logger.info("=" * 60)
