"""ANSI SQL identifier adapter (also used for PostgreSQL and SQLite)."""

from sqlfluent.adapters.base import QuotingAdapter
from sqlfluent.constants import DialectType


class AnsiAdapter(QuotingAdapter):
    """Adapter quoting identifiers with double quotes.

    Example:
        >>> AnsiAdapter().quote_identifier("public.users")
        '"public"."users"'
    """

    dialect = DialectType.ANSI
    open_quote = '"'
    close_quote = '"'


class PostgreSQLAdapter(AnsiAdapter):
    dialect = DialectType.POSTGRESQL


class SQLiteAdapter(AnsiAdapter):
    dialect = DialectType.SQLITE
