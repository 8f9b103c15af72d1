"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""
    
    # API server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    
    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    # Paired writes (snapshot + history, delete + archive) run in one
    # transaction when enabled. Requires a replica set.
    mongo_transactions: bool = False
    
    # Logging
    log_level: str = "INFO"
    
    # CORS
    cors_origins: list[str] = ["*"]
    
    # Credential hashing
    bcrypt_rounds: int = 12
    
    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
