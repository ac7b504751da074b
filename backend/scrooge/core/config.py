"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union
import os
from decimal import Decimal


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Scrooge"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Budget
    DEFAULT_BUDGET: Decimal = Decimal("600")
    SHOPPING_WEEKDAYS: Union[List[int], str] = [2, 5]  # Monday=0, so Wednesday and Saturday
    CUTOFF_HOUR: int = 17  # After this hour on a shopping day, today's trip counts as done

    @field_validator("SHOPPING_WEEKDAYS", mode="before")
    @classmethod
    def parse_shopping_weekdays(cls, v):
        """Parse SHOPPING_WEEKDAYS from comma-separated string or list."""
        if isinstance(v, str):
            v = [int(day.strip()) for day in v.split(",") if day.strip()]
        if isinstance(v, int):
            v = [v]
        for day in v:
            if not 0 <= int(day) <= 6:
                raise ValueError(f"Weekday must be between 0 (Monday) and 6 (Sunday), got {day}")
        return sorted(set(int(day) for day in v))

    @field_validator("CUTOFF_HOUR")
    @classmethod
    def check_cutoff_hour(cls, v):
        if not 0 <= v <= 24:
            raise ValueError("CUTOFF_HOUR must be between 0 and 24")
        return v

    @field_validator("DEFAULT_BUDGET")
    @classmethod
    def check_default_budget(cls, v):
        if v < 0:
            raise ValueError("DEFAULT_BUDGET must not be negative")
        return v

    # Storage
    STORE_BACKEND: str = "json"  # Options: "json", "sql"
    DATA_DIR: str = "."
    DATA_FILE: str = "data.json"  # Relative to DATA_DIR
    DATABASE_URL: str = "sqlite:///./scrooge.db"
    DB_ECHO: bool = False

    @field_validator("STORE_BACKEND")
    @classmethod
    def check_store_backend(cls, v):
        v = v.lower()
        if v not in ("json", "sql"):
            raise ValueError(f"Unknown STORE_BACKEND '{v}', expected 'json' or 'sql'")
        return v

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Static files and mascot image
    STATIC_DIR: str = "public"
    IMAGE_URL: str = "https://static.wikia.nocookie.net/scroogemcduck/images/e/e8/Scrooge_1987.webp/revision/latest?cb=20240215123632"
    IMAGE_FILENAME: str = "scrooge.webp"  # Cached inside STATIC_DIR
    FETCH_IMAGE_ON_STARTUP: bool = True

    @property
    def data_file_path(self) -> str:
        return os.path.join(self.DATA_DIR, self.DATA_FILE)

    @property
    def image_path(self) -> str:
        return os.path.join(self.STATIC_DIR, self.IMAGE_FILENAME)

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
