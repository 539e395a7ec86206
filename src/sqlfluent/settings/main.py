import logging
import re
from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from sqlfluent.constants import DEFAULT_ALIAS_PREFIX, DialectType
from .base import SQLFluentBaseSettings


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class _Settings(SQLFluentBaseSettings):

    dialect: DialectType = Field(
        default=DialectType.ANSI,
        description="Dialect used when an adapter is created without an explicit dialect"
    )
    alias_prefix: str = Field(
        default=DEFAULT_ALIAS_PREFIX,
        description="Prefix of the synthesized aliases given to derived tables (e.g. t_1, t_2)"
    )
    log_level: str = Field(
        default="INFO",
        description="Log level applied by setup_logging() when called without an explicit level"
    )
    database_url: Optional[str] = Field(
        default=None,
        description="SQLAlchemy URL used by create_executor() when no URL is passed"
    )
    adapter_options: Dict[str, Any] = Field(
        default_factory=dict,
        description="Options handed to every adapter created by the factory"
    )

    @field_validator("alias_prefix")
    @classmethod
    def validate_alias_prefix(cls, v: str) -> str:
        """Ensure the alias prefix can start a bare identifier."""
        if not re.match(r"^[A-Za-z_][A-Za-z0-9_]*$", v):
            raise ValueError(
                f"Invalid alias prefix '{v}'. "
                f"Prefixes must start with a letter or underscore and contain only letters, digits or underscores."
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}. Use one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


_settings: Optional[_Settings] = None


def get_settings(force_reload: bool = False) -> _Settings:
    """Get the singleton settings instance for the application.

    Args:
        force_reload: If True, creates a new Settings instance even if
                     one already exists. Useful for testing or when
                     environment variables have changed.

    Returns:
        Settings: The singleton Settings instance

    Note:
        This function is thread-safe for reading but not for the initial
        creation. In practice, settings are loaded once at application
        startup before threading begins.
    """
    global _settings

    if _settings is None or force_reload:
        _settings = _Settings()

    return _settings


def _reload_settings() -> _Settings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.

    Returns:
        A fresh _Settings instance
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
