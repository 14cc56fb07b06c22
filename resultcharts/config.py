"""
Global Configuration Settings

Centralized configuration for the result browser backend, read from
environment variables (and a .env file when present).
"""

import os
from typing import Optional
import logging

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_PREFERENCES_PATH = os.path.join("~", ".resultcharts", "preferences.json")


class AppConfig:
    """Global application configuration."""

    def __init__(self):
        # Database Configuration
        self.DATABASE_PATH: Optional[str] = os.getenv("DATABASE_PATH") or None

        # Preferences Configuration
        self.PREFERENCES_PATH = os.getenv("PREFERENCES_PATH", DEFAULT_PREFERENCES_PATH)

        # Chart Configuration
        self.MAX_CHART_POINTS = self._get_int_env("MAX_CHART_POINTS", default=1000)

        # Logging Configuration
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        # Server Configuration
        self.HOST = os.getenv("HOST", "127.0.0.1")
        self.PORT = self._get_int_env("PORT", default=8000)

        # Development/Debug Configuration
        self.DEBUG_MODE = self._get_bool_env("DEBUG_MODE", default=False)
        self.ENABLE_CORS = self._get_bool_env("ENABLE_CORS", default=True)

    def _get_bool_env(self, key: str, default: bool = False) -> bool:
        """Get boolean value from environment variable."""
        value = os.getenv(key, "").lower()
        if value in ("true", "1", "yes", "on"):
            return True
        elif value in ("false", "0", "no", "off"):
            return False
        else:
            return default

    def _get_int_env(self, key: str, default: int) -> int:
        """Get a positive integer from an environment variable."""
        value = os.getenv(key)
        if not value:
            return default
        try:
            parsed = int(value)
        except ValueError:
            logger.warning(f"Invalid integer for {key}: {value!r}, using {default}")
            return default
        return parsed if parsed > 0 else default

    def log_configuration(self):
        """Log the current configuration settings."""
        logger.info("🔧 Application Configuration:")
        logger.info(f"   Database: {self.DATABASE_PATH or 'none (open one via /db/open)'}")
        logger.info(f"   Preferences: {self.PREFERENCES_PATH}")
        logger.info(f"   Max Chart Points: {self.MAX_CHART_POINTS}")
        logger.info(f"   Debug Mode: {'✅ ENABLED' if self.DEBUG_MODE else '❌ DISABLED'}")
        logger.info(f"   CORS: {'✅ ENABLED' if self.ENABLE_CORS else '❌ DISABLED'}")
        logger.info(f"   Log Level: {self.LOG_LEVEL}")

    def is_development_mode(self) -> bool:
        """Check if running in development mode."""
        return self.DEBUG_MODE or os.getenv("ENVIRONMENT", "").lower() in ("dev", "development", "local")

    def get_summary(self) -> dict:
        """Get a summary of current configuration."""
        return {
            "database_path": self.DATABASE_PATH,
            "preferences_path": self.PREFERENCES_PATH,
            "max_chart_points": self.MAX_CHART_POINTS,
            "debug_mode": self.DEBUG_MODE,
            "enable_cors": self.ENABLE_CORS,
            "log_level": self.LOG_LEVEL,
            "development_mode": self.is_development_mode()
        }


# Global configuration instance
config = AppConfig()


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    return config
