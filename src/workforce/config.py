"""
Configuration management for Workforce API
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite:///./workforce.db"
    database_pool_size: int = 10
    database_max_overflow: int = 20
    database_timeout: float = 10.0  # seconds allowed per data-access call
    sql_echo: bool = False

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Password hashing (bcrypt work factor)
    password_hash_rounds: int = 10

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "WORKFORCE_"
        case_sensitive = False


# Global settings instance
settings = Settings()

if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        environment=settings.environment,
        api_port=settings.api_port,
    )


def is_production() -> bool:
    """Return True when running in a production environment."""
    return settings.environment.lower() in ("production", "prod")
