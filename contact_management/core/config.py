# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


def _get_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        self.app_name: Final[str] = os.getenv("APP_NAME", "Contact Management API")

        # Database Configuration
        # DATABASE_URL example: postgresql+psycopg2://user:password@db:5432/contacts
        self.database_url: Final[str] = os.getenv(
            "DATABASE_URL",
            "sqlite:///./contact_management.db"
        )
        self.database_echo: Final[bool] = _get_bool("DB_ECHO", "false")

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # Token Configuration
        # Defaults match the tokens issued by the previous deployment; override in production.
        self.jwt_secret: Final[str] = os.getenv("JWT_SECRET", "my32byteverysecretkey12345678901")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.jwt_issuer: Final[str] = os.getenv("JWT_ISSUER", "YourIssuer")
        self.jwt_audience: Final[str] = os.getenv("JWT_AUDIENCE", "YourAudience")
        self.jwt_ttl_minutes: Final[int] = int(os.getenv("JWT_TTL_MINUTES", "60"))

        # Static login credentials
        self.auth_username: Final[str] = os.getenv("AUTH_USERNAME", "mile")
        self.auth_password: Final[str] = os.getenv("AUTH_PASSWORD", "mile123")

        # CORS Configuration (comma-separated origins)
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
