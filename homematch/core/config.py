from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import validator


class Settings(BaseSettings):
    PROJECT_NAME: str = "HomeMatch"

    # Backend API
    API_BASE_URL: str = "https://your-mongodb-api-endpoint.com/api"
    HTTP_TIMEOUT: Optional[float] = None

    @validator("API_BASE_URL")
    def strip_trailing_slash(cls, v: str) -> str:
        if not v:
            raise ValueError("API_BASE_URL must not be empty")
        return v.rstrip("/")

    # Session
    AUTH_TOKEN_KEY: str = "authToken"
    LOGIN_PATH: str = "/login"

    # Token persistence: memory, file or redis
    TOKEN_STORE: str = "memory"
    TOKEN_FILE_PATH: str = ".homematch/session.json"
    REDIS_URL: str = "redis://redis:6379/0"

    @validator("TOKEN_STORE")
    def normalize_token_store(cls, v: str) -> str:
        return v.strip().lower()

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # Page defaults
    DEFAULT_MARKET_LOCATION: str = "New York, NY"
    DEFAULT_MIN_PRICE: int = 500
    DEFAULT_MAX_PRICE: int = 10000

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
