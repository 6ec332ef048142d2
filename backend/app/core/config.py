"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Application
    APP_NAME: str = "EvenSplit"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Database
    DATABASE_URL: str = "sqlite:///./evensplit.db"
    DB_ECHO: bool = False
    
    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:8081"]
    
    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v
    
    # Splits
    DEFAULT_CURRENCY: str = "USD"
    DEFAULT_SPLIT_NAME: str = "Untitled Split"  # Used when a split is renamed to blank
    
    @field_validator("DEFAULT_CURRENCY", mode="before")
    @classmethod
    def normalize_currency(cls, v):
        """Currency codes are stored upper-case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
