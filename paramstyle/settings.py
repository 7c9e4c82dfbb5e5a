"""
Configuration management for paramstyle.

Loads configuration from environment variables with sensible defaults.
Only the command-line tool reads it; encoding never does.
"""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv


class Config:
    """Application configuration."""

    PROJECT_ROOT: Path = Path(__file__).parent.parent

    ENV_PATH: Path = PROJECT_ROOT / ".env"
    if ENV_PATH.exists():
        load_dotenv(ENV_PATH)

    # Logging Configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = os.getenv(
        "PARAMSTYLE_LOG_LEVEL", "WARNING"
    ).upper()  # type: ignore
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # CLI Configuration
    DEFAULT_LOCATION: str = os.getenv("PARAMSTYLE_DEFAULT_LOCATION", "query")

    # Application Metadata
    APP_NAME: str = "paramstyle"
    VERSION: str = "0.1.0"

    @classmethod
    def validate(cls) -> None:
        """
        Validate configuration at startup.

        Raises:
            ValueError: If the log level or default location is unknown.
        """
        if cls.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(
                f"Unknown PARAMSTYLE_LOG_LEVEL '{cls.LOG_LEVEL}'. "
                "Use one of DEBUG, INFO, WARNING, ERROR."
            )

        if cls.DEFAULT_LOCATION not in ("path", "query", "header", "cookie"):
            raise ValueError(
                f"Unknown PARAMSTYLE_DEFAULT_LOCATION '{cls.DEFAULT_LOCATION}'. "
                "Use one of path, query, header, cookie."
            )


# Global config instance
config = Config()
