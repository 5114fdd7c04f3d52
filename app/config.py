from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql+asyncpg://user:password@db:5432/housing_db"
    REDIS_URL: str = "redis://localhost:6379/0"
    # Identity provider that owns sessions; tokens are verified against it
    IDENTITY_PROVIDER_URL: str = "http://identity:8000"
    IDENTITY_TIMEOUT_SECONDS: float = 10.0
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]
    LOG_LEVEL: str = "INFO"
    RATE_LIMIT_ENABLED: bool = True
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100
    SEARCH_HISTORY_LIMIT: int = 10
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
