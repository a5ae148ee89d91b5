"""Application configuration management."""

from decimal import Decimal
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ===========================================
    # AI Providers (tried in this order)
    # ===========================================

    # Google Gemini (primary)
    # Get key: https://aistudio.google.com/app/apikey
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-flash"

    # Groq
    # Get key: https://console.groq.com/keys
    groq_api_key: Optional[str] = None
    groq_model: str = "llama-3.1-8b-instant"

    # OpenRouter
    # Get key: https://openrouter.ai/keys
    openrouter_api_key: Optional[str] = None
    openrouter_model: str = "mistralai/mistral-7b-instruct:free"

    # Ollama (local, no API key)
    ollama_enabled: bool = False
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.2"

    ai_temperature: float = 0.3
    ai_max_tokens: int = 1000
    ai_timeout_seconds: float = 60.0

    # ===========================================
    # Application Settings
    # ===========================================

    app_name: str = "Sales Copilot"
    debug: bool = True

    # DEBUG, INFO, WARNING, ...
    log_level: str = "INFO"
    # "text" for the console, "json" for log aggregation
    log_format: str = "text"

    # ===========================================
    # Proposal workflow
    # ===========================================

    # Quiet period before an edited proposal is snapshotted
    autosave_quiet_seconds: float = 8.0

    # Volume discount: N+ units of the designated item
    volume_discount_item: str = "Robotic Arm"
    volume_discount_threshold: int = 3
    volume_discount_rate: Decimal = Decimal("5")

    # Upper bound accepted for a requested discount (request validation only)
    max_requested_discount: int = 15

    sales_rep_name: str = "Sales Rep"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
