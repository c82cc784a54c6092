from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Redis
    redis_url: str = "redis://localhost:6379/0"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Logging
    log_level: str = "INFO"

    # Google Cloud Translation API
    google_translate_api_key: str = ""
    google_translate_api_url: str = "https://translation.googleapis.com/language/translate/v2"
    translate_api_timeout: float | None = None  # None = 타임아웃 없음

    # Gateway → Proxy
    translate_endpoint_url: str = "http://localhost:8000/api/translate"
    gateway_timeout: float | None = None  # provider 타임아웃보다 길게 잡을 것


@lru_cache
def get_settings() -> Settings:
    return Settings()
