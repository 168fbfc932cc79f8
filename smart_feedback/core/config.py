
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices
import logging
import structlog
from pythonjsonlogger.json import JsonFormatter

PLACEHOLDER_API_KEYS = frozenset({"demo_key_for_testing"})


class Settings(BaseSettings):
    app_name: str = "smart-feedback-backend"
    environment: str = "dev"

    database_url: str = Field(
        default="sqlite+aiosqlite:///./smart_feedback.db",
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
    )
    auto_create_schema: bool = Field(
        default=False, validation_alias=AliasChoices("AUTO_CREATE_SCHEMA", "auto_create_schema")
    )

    # comma separated; empty means the API is open
    api_keys: str = Field(default="", validation_alias=AliasChoices("APP_API_KEYS", "api_keys"))

    ai_gateway_url: str = Field(
        default="https://ai.gateway.lovable.dev/v1/chat/completions",
        validation_alias=AliasChoices("AI_GATEWAY_URL", "ai_gateway_url"),
    )
    ai_gateway_model: str = Field(
        default="google/gemini-2.5-flash",
        validation_alias=AliasChoices("AI_GATEWAY_MODEL", "ai_gateway_model"),
    )
    ai_gateway_temperature: float = Field(
        default=0.3, validation_alias=AliasChoices("AI_GATEWAY_TEMPERATURE", "ai_gateway_temperature")
    )
    ai_gateway_max_tokens: int = Field(
        default=10, validation_alias=AliasChoices("AI_GATEWAY_MAX_TOKENS", "ai_gateway_max_tokens")
    )
    ai_gateway_timeout: float = Field(
        default=15.0, gt=0, validation_alias=AliasChoices("AI_GATEWAY_TIMEOUT", "ai_gateway_timeout")
    )
    ai_gateway_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("AI_GATEWAY_API_KEY", "LOVABLE_API_KEY", "ai_gateway_api_key"),
    )

    cors_origins: str = Field(
        default="http://localhost:5173,http://localhost:3000",
        validation_alias=AliasChoices("CORS_ORIGINS", "cors_origins"),
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def ai_gateway_configured(self) -> bool:
        key = (self.ai_gateway_api_key or "").strip()
        return bool(key) and key not in PLACEHOLDER_API_KEYS


settings = Settings()

def setup_logging() -> None:

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter("%(levelname)s %(message)s %(name)s %(asctime)s"))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.INFO)


    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        context_class=dict,
        cache_logger_on_first_use=True,
    )
