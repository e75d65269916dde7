# ============================================================================
# FILE: songbook/config.py
# ============================================================================
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""
    
    # App settings
    APP_NAME: str = "Songbook"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Database
    DATABASE_URL: str = "sqlite:///./songbook.db"  # Change to PostgreSQL in production
    
    # Security
    BCRYPT_WORK_FACTOR: int = 12
    
    # Default artwork
    DEFAULT_USER_IMG_URL: str = "https://i.pinimg.com/474x/65/25/a0/6525a08f1df98a2e3a545fe2ace4be47.jpg"
    DEFAULT_PLAYLIST_IMG_URL: str = (
        "https://us.123rf.com/450wm/soloviivka/soloviivka1606/soloviivka160600001/"
        "59688426-music-note-vector-icon-white-on-black-background.jpg?ver=6"
    )
    
    # Favorites playlist, created for every user at registration
    FAVORITES_PLAYLIST_NAME: str = "Favorite Songs"
    FAVORITES_PLAYLIST_IMG_URL: str = "https://ak.picdn.net/shutterstock/videos/3361085/thumb/1.jpg"
    
    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
