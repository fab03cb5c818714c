# backend/quickverify/config.py
from pydantic_settings import BaseSettings
import os

class Settings(BaseSettings):
    APP_NAME: str = "quickverify"

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    DEBUG: bool = os.environ.get("DEBUG", "False").lower() in ("1", "true", "yes")

    # Outbound lookups
    HTTP_TIMEOUT: float = float(os.environ.get("HTTP_TIMEOUT", 10.0))
    # passed through as Cache-Control max-age, nothing is cached locally
    CACHE_TTL: int = int(os.environ.get("CACHE_TTL", 300))
    USER_AGENT: str = os.environ.get("USER_AGENT", "Mozilla/5.0")

    IMAGE_SEARCH_URL: str = os.environ.get("IMAGE_SEARCH_URL", "https://duckduckgo.com/")
    DOH_URL: str = os.environ.get("DOH_URL", "https://dns.google/resolve")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
