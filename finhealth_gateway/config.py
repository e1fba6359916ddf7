"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Advisor (OpenAI-compatible chat completions API)
    advisor_api_base: str = "https://openrouter.ai/api/v1"
    advisor_api_key: str = ""
    advisor_model: str = "google/gemini-2.0-flash-lite-001"
    advisor_referer: str = "http://localhost:5173"

    # Service
    service_name: str = "finhealth-gateway"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 15.0


settings = Settings()
