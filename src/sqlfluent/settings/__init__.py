"""Settings module providing configuration management for sqlfluent.

Built on Pydantic Settings: values are type-checked on load and read
from environment variables prefixed with ``SQLFLUENT_``.

Configuration Sources (precedence order):
    1. Environment Variables (highest priority)
    2. ``.env`` file in the working directory
    3. Default Values in code (lowest priority)

Quick Start:
    >>> from sqlfluent.settings import get_settings
    >>>
    >>> settings = get_settings()
    >>> settings.dialect
    <DialectType.ANSI: 'ansi'>

Recognised variables:
    - SQLFLUENT_DIALECT: generic, ansi, postgresql, sqlite, mysql, mssql
    - SQLFLUENT_ALIAS_PREFIX: prefix of derived-table aliases (default ``t_``)
    - SQLFLUENT_LOG_LEVEL: level used by ``setup_logging``
    - SQLFLUENT_DATABASE_URL: SQLAlchemy URL for ``create_executor``
    - SQLFLUENT_ADAPTER_OPTIONS: JSON object of adapter options
"""

from .main import _Settings, get_settings, _reload_settings
from .base import SQLFluentBaseSettings

__all__ = [
    "get_settings",
]
