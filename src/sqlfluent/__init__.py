from sqlfluent.__version__ import __version__

from sqlfluent.adapters import (
    AdapterFactory,
    AnsiAdapter,
    BaseAdapter,
    IdentifierAdapter,
    MSSQLAdapter,
    MySQLAdapter,
    PostgreSQLAdapter,
    SQLiteAdapter,
    get_adapter,
)
from sqlfluent.query_builder import (
    AliasGenerator,
    CompiledQuery,
    OrderBy,
    QueryExecutor,
    RawExpression,
    SelectQueryBuilder,
    SQLAlchemyExecutor,
    create_executor,
)
from sqlfluent.common.exceptions import SQLFluentError, ErrorCode
from sqlfluent.constants import DialectType, SortDirection

# Short alias matching the builder's role
Select = SelectQueryBuilder


__all__ = [
    "__version__",

    # Builder
    "SelectQueryBuilder",
    "Select",
    "RawExpression",
    "CompiledQuery",
    "OrderBy",
    "AliasGenerator",

    # Adapters
    "IdentifierAdapter",
    "BaseAdapter",
    "AnsiAdapter",
    "PostgreSQLAdapter",
    "SQLiteAdapter",
    "MySQLAdapter",
    "MSSQLAdapter",
    "AdapterFactory",
    "get_adapter",

    # Execution
    "QueryExecutor",
    "SQLAlchemyExecutor",
    "create_executor",

    # Exceptions (public API)
    "SQLFluentError",
    "ErrorCode",

    # Constants
    "DialectType",
    "SortDirection",
]
