# app/core/config.py

from functools import lru_cache
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_name: str = Field(default="CharBit", description="Application name")
    debug: bool = Field(default=False, description="Debug mode (SQL echo)")
    log_level: str = Field(default="INFO", description="Root log level")

    # Database
    database_url: str = Field(
        default="sqlite:///./charbit.db", description="SQLAlchemy database URL"
    )

    # JWT
    secret_key: str = Field(default="fallback-secret-for-dev", description="JWT signing key")
    algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 7, description="JWT lifetime in minutes"
    )

    # Google OAuth
    google_client_id: str = Field(default="", description="Google OAuth Client ID")
    google_client_secret: str = Field(default="", description="Google OAuth Client Secret")
    google_redirect_uri: str = Field(
        default="http://127.0.0.1:8000/api/v1/auth/google/callback",
        description="Google OAuth redirect URI"
    )
    frontend_url: str = Field(
        default="http://localhost:5173", description="Where the OAuth callback lands"
    )

    allowed_origins: List[str] = Field(
        default=["http://localhost:5173"], description="CORS origins"
    )
    admin_emails: List[str] = Field(
        default_factory=list, description="Accounts allowed on admin routes"
    )

    @property
    def google_oauth_configured(self) -> bool:
        return bool(self.google_client_id and self.google_client_secret)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
