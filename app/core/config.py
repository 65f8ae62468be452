import os
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

class Settings(BaseSettings):
    """Application settings."""

    # Application
    PROJECT_NAME: str = "Y-Gym API"
    PROJECT_DESCRIPTION: str = "Backend API for Y-Gym membership management"
    VERSION: str = "0.1.0"
    API_PREFIX: str = "/api"

    # Security
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-me-in-production")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7  # 1 week, same as the session cookie
    JWT_ALGORITHM: str = "HS256"
    PASSWORD_HASH_ROUNDS: int = int(os.getenv("PASSWORD_HASH_ROUNDS", "10"))

    # Session cookies
    AUTH_COOKIE_NAME: str = "auth"
    ROLE_COOKIE_NAME: str = "role"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost", "http://localhost:3000"]

    # Database
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOCAL_DATABASE_URL: str = os.getenv("LOCAL_DATABASE_URL", "sqlite:///./ygym_dev.db")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    DB_POOL_PRE_PING: bool = os.getenv("DB_POOL_PRE_PING", "true").lower() == "true"
    DB_ECHO: bool = os.getenv("DB_ECHO", "false").lower() == "true"

    @property
    def database_url(self) -> str:
        """Get database URL based on environment."""
        if self.ENVIRONMENT == "development":
            base_url = self.LOCAL_DATABASE_URL
        else:
            base_url = self.DATABASE_URL

        # Heroku-style URLs use the old scheme name
        if base_url.startswith("postgres://"):
            return base_url.replace("postgres://", "postgresql://", 1)
        return base_url

    @property
    def cookie_secure(self) -> bool:
        return self.ENVIRONMENT == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

settings = Settings()
