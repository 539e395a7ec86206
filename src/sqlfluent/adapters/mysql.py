"""MySQL identifier adapter."""

from sqlfluent.adapters.base import QuotingAdapter
from sqlfluent.constants import DialectType


class MySQLAdapter(QuotingAdapter):
    """Adapter quoting identifiers with backticks.

    Example:
        >>> MySQLAdapter().quote_identifier("order")
        '`order`'
    """

    dialect = DialectType.MYSQL
    open_quote = "`"
    close_quote = "`"
