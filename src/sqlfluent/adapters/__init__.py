"""Identifier adapters.

Adapters are the dialect seam of sqlfluent: the select builder only asks
them to quote identifiers. Each dialect lives in its own module:

    - base.py: IdentifierAdapter protocol, BaseAdapter (no quoting), QuotingAdapter
    - ansi.py: double-quote quoting (ANSI, PostgreSQL, SQLite)
    - mysql.py: backtick quoting
    - mssql.py: square-bracket quoting
    - factory.py: dialect -> adapter, configured from settings

Example:
    >>> from sqlfluent.adapters import get_adapter
    >>> get_adapter("mysql").quote_identifier("users")
    '`users`'
"""

from sqlfluent.adapters.base import BaseAdapter, IdentifierAdapter, QuotingAdapter
from sqlfluent.adapters.ansi import AnsiAdapter, PostgreSQLAdapter, SQLiteAdapter
from sqlfluent.adapters.mysql import MySQLAdapter
from sqlfluent.adapters.mssql import MSSQLAdapter
from sqlfluent.adapters.factory import AdapterFactory, get_adapter

__all__ = [
    "IdentifierAdapter",
    "BaseAdapter",
    "QuotingAdapter",
    "AnsiAdapter",
    "PostgreSQLAdapter",
    "SQLiteAdapter",
    "MySQLAdapter",
    "MSSQLAdapter",
    "AdapterFactory",
    "get_adapter",
]
