## Application settings configuration
from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    host: str = "0.0.0.0"
    port: int = 4000
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # Upstream model settings
    LLM_PROVIDER: str = "gemini"
    gemini_api_key: str
    gemini_model: str = "gemini-2.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_openai_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    llm_timeout_seconds: float = 30.0

    @field_validator("gemini_api_key")
    @classmethod
    def _key_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("GEMINI_API_KEY must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.strip().upper()


@lru_cache
def get_settings() -> Settings:
    """Read settings once per process; later calls return the same instance."""
    return Settings()
