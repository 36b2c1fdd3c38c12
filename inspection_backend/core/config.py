# Standard library imports
import os
from typing import Final, List, Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "transformer_inspections")
        # Multi-document transactions need a replica set; standalone servers must leave this off
        self.mongo_transactions_enabled: Final[bool] = _env_flag("MONGO_TRANSACTIONS_ENABLED")

        # Detection model (Roboflow workflow) Configuration
        self.roboflow_api_url: Final[str] = os.getenv(
            "ROBOFLOW_API_URL",
            "https://serverless.roboflow.com/infer/workflows/orbit/detect-transformer-faults"
        )
        self.roboflow_api_key: Final[str] = os.getenv("ROBOFLOW_API_KEY", "")
        self.roboflow_timeout_seconds: Final[float] = float(os.getenv("ROBOFLOW_TIMEOUT_SECONDS", "60"))

        # File storage Configuration
        self.upload_dir: Final[str] = os.getenv("UPLOAD_DIR", "uploads")

        # HTTP Configuration
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
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
