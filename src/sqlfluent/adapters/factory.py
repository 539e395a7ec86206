"""Adapter Factory.

This module provides a factory for creating dialect-specific identifier
adapters with automatic configuration from environment settings.
"""

from typing import Any, Dict, Optional, Type, Union

from sqlfluent.adapters.ansi import AnsiAdapter, PostgreSQLAdapter, SQLiteAdapter
from sqlfluent.adapters.base import BaseAdapter
from sqlfluent.adapters.mssql import MSSQLAdapter
from sqlfluent.adapters.mysql import MySQLAdapter
from sqlfluent.common.exceptions import unsupported_dialect_error
from sqlfluent.constants import DialectType


class AdapterFactory:
    """Factory for creating dialect-specific adapters.

    Example:
        >>> mysql = AdapterFactory.create(DialectType.MYSQL)
        >>> auto = AdapterFactory.create()  # Uses SQLFLUENT_DIALECT
    """

    _registry: Dict[DialectType, Type[BaseAdapter]] = {
        DialectType.GENERIC: BaseAdapter,
        DialectType.ANSI: AnsiAdapter,
        DialectType.POSTGRESQL: PostgreSQLAdapter,
        DialectType.SQLITE: SQLiteAdapter,
        DialectType.MYSQL: MySQLAdapter,
        DialectType.MSSQL: MSSQLAdapter,
    }

    @classmethod
    def register(cls, dialect: DialectType, adapter_cls: Type[BaseAdapter]) -> None:
        """Register (or replace) the adapter class used for ``dialect``."""
        cls._registry[dialect] = adapter_cls

    @classmethod
    def create(
        cls,
        dialect: Optional[Union[DialectType, str]] = None,
        dsn: Optional[str] = None,
        **options: Any,
    ) -> BaseAdapter:
        """Create the adapter for ``dialect``.

        When ``dialect`` is omitted the active dialect is read from
        settings. Options from ``settings.adapter_options`` are merged
        underneath the explicit keyword options.

        Raises:
            SQLFluentError: DIALECT_NOT_SUPPORTED for unknown dialects.
        """
        from sqlfluent.settings import get_settings

        settings = get_settings()
        if dialect is None:
            dialect = settings.dialect

        try:
            dialect = DialectType(dialect)
        except ValueError:
            raise unsupported_dialect_error(str(dialect))

        adapter_cls = cls._registry.get(dialect)
        if adapter_cls is None:
            raise unsupported_dialect_error(dialect.value)

        merged = {**settings.adapter_options, **options}
        return adapter_cls(dsn=dsn, options=merged)


def get_adapter(dialect: Optional[Union[DialectType, str]] = None, **options: Any) -> BaseAdapter:
    """Get an adapter for ``dialect`` (or the configured dialect)."""
    return AdapterFactory.create(dialect, **options)
