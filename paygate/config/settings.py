"""
Configuration settings for paygate
Handles environment variables and application settings
"""
from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator, model_validator


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "paygate"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Stripe
    STRIPE_SECRET_KEY: Optional[str] = None
    STRIPE_ROUTE_PREFIX: str = "api/stripe"

    # CORS (comma-separated)
    ALLOWED_ORIGINS: str = "*"

    @field_validator("STRIPE_ROUTE_PREFIX")
    @classmethod
    def normalize_route_prefix(cls, v: str) -> str:
        return v.strip().strip("/")

    @model_validator(mode="after")
    def development_enables_debug(self):
        if self.ENVIRONMENT == "development":
            self.DEBUG = True
        return self

    def allowed_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields from .env file


# Create settings instance
settings = Settings()
