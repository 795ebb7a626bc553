from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Environment
    environment: str = "development"
    debug: bool = True
    
    # Application
    app_name: str = "Portfolio Backend"
    app_version: str = "1.0.0"
    
    # Database
    database_url: str = "sqlite:///./portfolio.db"
    
    # Generated links
    base_url: str = "http://127.0.0.1:8000"
    trust_forwarded_for: bool = False  # Only enable behind a proxy that sets X-Forwarded-For
    link_id_strategy: str = "uuid4"  # Options: "uuid4", "random"
    link_id_length: int = 12  # Only used by the "random" strategy
    max_retries: int = 5
    
    # Contact notifications
    notifier_backend: str = "console"  # Options: "console", "null"
    admin_email: Optional[str] = None
    
    # Dashboard windows and limits
    click_trend_days: int = 30
    recent_activity_days: int = 7
    recent_activity_limit: int = 20
    top_links_limit: int = 10
    top_referers_limit: int = 10
    detailed_days_limit: int = 30
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
