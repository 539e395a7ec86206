"""SQL Server identifier adapter."""

from sqlfluent.adapters.base import QuotingAdapter
from sqlfluent.constants import DialectType


class MSSQLAdapter(QuotingAdapter):
    """Adapter quoting identifiers with square brackets.

    Only the closing bracket needs escaping inside a bracketed name;
    it is doubled.

    Example:
        >>> MSSQLAdapter().quote_identifier("dbo.Order Details")
        '[dbo].[Order Details]'
    """

    dialect = DialectType.MSSQL
    open_quote = "["
    close_quote = "]"
