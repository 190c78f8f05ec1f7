# ============================================================================
# FILE: moodplaylist/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""

    # App settings
    APP_NAME: str = "Mood Playlist Generator"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./mood_playlist.db"  # Change to PostgreSQL in production
    DB_CONNECT_TIMEOUT_SECONDS: int = 15

    # Redis cache
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_EXPIRE_SECONDS: int = 3600

    # Security
    SECRET_KEY: str = "your-secret-key-change-this-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    PASSWORD_RESET_EXPIRE_MINUTES: int = 60

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Playlist generation
    PLAYLIST_MIN_SONGS: int = 1
    PLAYLIST_MAX_SONGS: int = 50
    PLAYLIST_DEFAULT_SONGS: int = 10

    # Media
    FALLBACK_VIDEO_URL: str = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
