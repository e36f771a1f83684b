"""
Application configuration using Pydantic Settings.
Loads from environment variables and .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Book Reviews API"
    app_version: str = "1.0.0"
    debug: bool = False
    port: int = 5000
    log_level: str = "INFO"

    # Access tokens (JWT)
    access_token_secret: str = "access"
    access_token_algorithm: str = "HS256"
    access_token_ttl: int = 3600  # 1 hour in seconds

    # Session & cookies
    session_secret: str = "fingerprint_customer"
    session_cookie_name: str = "connect.sid"  # Match Express default
    session_cookie_path: str = "/"
    session_max_age: int = 3600
    secure_cookies: bool = False

    # Simulated latency on catalog reads, in seconds
    catalog_read_delay: float = 0.0

    @property
    def session_cookie_max_age(self) -> int:
        """Cookie lifetime never outlives the token bound to the session."""
        return min(self.session_max_age, self.access_token_ttl)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
