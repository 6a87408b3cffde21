import os
import logging
from typing import Optional, Sequence
from dotenv import load_dotenv

from humanize_scale.models.scale import SCALE_PRESETS

logger = logging.getLogger(__name__)

# Try multiple locations for .env file
env_paths = [
    ".env",  # Current directory
    "../.env",  # Parent directory
    "../../.env",  # Grandparent directory
]


def load_env_file(paths: Sequence[str] = tuple(env_paths)) -> Optional[str]:
    """
    Load the first .env file found in paths.

    Returns:
        The path that was loaded, or None if no file exists
    """
    for env_path in paths:
        if os.path.exists(env_path):
            load_dotenv(env_path)
            logger.debug(f"Loaded environment variables from: {env_path}")
            return env_path

    logger.debug("No .env file found in expected locations")
    return None


# Path of the loaded .env file, if any
ENV_FILE = load_env_file()


class Settings:
    """Application settings loaded from environment variables."""

    # Host Configuration
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))

    # API Configuration
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Humanize Scale API"
    VERSION: str = "0.0.1"

    # Formatting defaults
    DEFAULT_MIN_VALUE: str = os.getenv("HSCALE_MIN_VALUE", "10000")
    DEFAULT_SCALE_PRESET: str = os.getenv("HSCALE_PRESET", "western")

    # Development settings
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"

    # Logging Configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __init__(self):
        """Initialize settings and validate formatting defaults."""
        self.DEBUG = os.getenv("DEBUG", "False").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if self.DEBUG else "INFO")
        self.DEFAULT_MIN_VALUE = os.getenv("HSCALE_MIN_VALUE", "10000")
        self.DEFAULT_SCALE_PRESET = os.getenv("HSCALE_PRESET", "western").lower()

        if self.DEFAULT_SCALE_PRESET not in SCALE_PRESETS:
            logger.warning(
                f"Unknown HSCALE_PRESET {self.DEFAULT_SCALE_PRESET!r}, using 'western'")
            self.DEFAULT_SCALE_PRESET = "western"

        if not isinstance(logging.getLevelName(self.LOG_LEVEL.upper()), int):
            logger.warning(f"Unknown LOG_LEVEL {self.LOG_LEVEL!r}, using 'INFO'")
            self.LOG_LEVEL = "INFO"


# Create global settings instance
settings = Settings()

# Export commonly used values for convenience
DEBUG = settings.DEBUG
