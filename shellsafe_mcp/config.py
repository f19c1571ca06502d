"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Transport
    transport: str = field(default="http")
    http_host: str = field(default="0.0.0.0")
    http_port: int = field(default=8000)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)
    log_timezone: str = field(default="America/New_York")
    log_payloads: bool = field(default=False)
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from SHELLSAFE_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        settings = cls(
            transport=cls._get_transport(),
            http_host=os.getenv("SHELLSAFE_HTTP_HOST", "0.0.0.0"),
            http_port=cls._get_int("SHELLSAFE_HTTP_PORT", 8000),
            log_level=cls._get_log_level(),
            log_colors=cls._get_bool("SHELLSAFE_LOG_COLORS", True),
            log_timezone=cls._get_timezone(),
            log_payloads=cls._get_bool("SHELLSAFE_LOG_PAYLOADS", False),
            slow_threshold_ms=cls._get_int("SHELLSAFE_SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("SHELLSAFE_INCLUDE_TRACEBACK", False),
        )
        logger.debug(
            "Settings loaded: transport=%s, http=%s:%d, log_level=%s",
            settings.transport,
            settings.http_host,
            settings.http_port,
            settings.log_level,
        )
        return settings

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_transport() -> str:
        """Get transport from environment with validation.

        Returns:
            Transport type ("http" or "stdio")
        """
        transport = os.getenv("SHELLSAFE_TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            return transport
        if transport:
            logger.warning("Unknown SHELLSAFE_TRANSPORT %r, using http", transport)
        return "http"

    @staticmethod
    def _get_log_level() -> str:
        """Get log level name from environment with validation.

        Returns:
            One of LOG_LEVELS, "INFO" if unset or unknown
        """
        level = os.getenv("SHELLSAFE_LOG_LEVEL", "INFO").strip().upper()
        if level in LOG_LEVELS:
            return level
        logger.warning("Unknown SHELLSAFE_LOG_LEVEL %r, using INFO", level)
        return "INFO"

    @staticmethod
    def _get_timezone() -> str:
        """Get log timezone from environment with validation.

        Returns:
            A zone name ZoneInfo can load, "America/New_York" if unset or unknown
        """
        name = os.getenv("SHELLSAFE_LOG_TIMEZONE", "America/New_York").strip()
        try:
            ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            logger.warning(
                "Unknown SHELLSAFE_LOG_TIMEZONE %r (%s), using America/New_York", name, e
            )
            return "America/New_York"
        return name


# Global settings (initialized on first access)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create settings."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance.

    Allows tests to inject custom settings without touching the environment.
    """
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset global settings so the next access re-reads the environment."""
    global _settings
    _settings = None
