"""
Application configuration

Defaults run the storefront against an in-memory SQLite database seeded with
the fixture catalog. That store does not survive a restart, so production
configuration refuses it and requires a real DATABASE_URL.
"""
import json
import logging
from typing import List

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

IN_MEMORY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Fashion Storefront"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = IN_MEMORY_DATABASE_URL
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 3600  # 1 hour

    # CORS - accepts JSON array or comma-separated string
    CORS_ORIGINS: List[str] = DEFAULT_CORS_ORIGINS

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            if not v or v.strip() == "":
                return DEFAULT_CORS_ORIGINS
            if v.startswith("["):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Fixture catalog
    SEED_ON_STARTUP: bool = True

    # Catalog paging
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # Recommendations (fixed-slice stub sizes)
    RECOMMENDATION_ALSO_LIKE_COUNT: int = 4
    RECOMMENDATION_PAIR_WITH_COUNT: int = 3

    # Orders
    ORDER_NUMBER_PREFIX: str = "SNT"
    ORDER_ENFORCE_TRANSITIONS: bool = True

    # Rate Limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_DEFAULT: str = "100/minute"
    RATE_LIMIT_WRITE: str = "30/minute"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def is_in_memory(self) -> bool:
        return self.is_sqlite and ":memory:" in self.DATABASE_URL

    @model_validator(mode="after")
    def validate_production_config(self):
        """Reject configurations that are unsafe or non-durable in production."""
        if self.ENVIRONMENT == "production":
            errors = []

            if self.DEBUG:
                errors.append(
                    "DEBUG=True is forbidden in production. "
                    "Set DEBUG=false or ENVIRONMENT=development"
                )

            if self.is_sqlite:
                errors.append(
                    "SQLite DATABASE_URL detected in production. Carts and orders "
                    "would be lost on restart; configure a PostgreSQL database."
                )

            cors_warnings = []
            for origin in self.CORS_ORIGINS:
                if origin == "*":
                    cors_warnings.append("Wildcard '*' CORS origin is insecure in production")
                elif "localhost" in origin or "127.0.0.1" in origin:
                    cors_warnings.append(f"Localhost CORS origin '{origin}' should be removed in production")

            if cors_warnings:
                logger.warning(
                    "CORS warnings in production:\n" +
                    "\n".join(f"  - {w}" for w in cors_warnings)
                )

            if errors:
                raise ValueError(
                    "PRODUCTION CONFIGURATION VIOLATIONS:\n" + "\n".join(f"  - {e}" for e in errors)
                )

        return self

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
