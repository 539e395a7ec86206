"""Query builder module for parameterized SELECT generation.

Builders only generate SQL text plus bound values; running the
statement is delegated to an executor.

Architecture:
    - expression.py: RawExpression, literal SQL emitted verbatim
    - types.py: ClauseState, WhereFragment, GroupSpec, OrderBy, CompiledQuery
    - aliases.py: thread-safe derived-table alias generation
    - select.py: SelectQueryBuilder, the fluent API and compiler
    - executor.py: QueryExecutor protocol and the SQLAlchemy implementation

Example:
    >>> from sqlfluent.adapters import AnsiAdapter
    >>> from sqlfluent.query_builder import SelectQueryBuilder
    >>>
    >>> adapter = AnsiAdapter()
    >>> recent = SelectQueryBuilder(adapter, "orders").set_columns("user_id").where("total > ?", 100)
    >>> query = SelectQueryBuilder(adapter, "users").where_in("id", recent).compile()
    >>> query.text
    'SELECT * FROM "users" WHERE ("id" IN (SELECT "user_id" FROM "orders" WHERE (total > ?)))'
    >>> query.values
    [100]
"""

from sqlfluent.query_builder.aliases import AliasGenerator, get_default_alias_generator
from sqlfluent.query_builder.executor import QueryExecutor, SQLAlchemyExecutor, create_executor
from sqlfluent.query_builder.expression import RawExpression
from sqlfluent.query_builder.select import SelectQueryBuilder
from sqlfluent.query_builder.types import (
    ClauseState,
    CompiledQuery,
    GroupSpec,
    OrderBy,
    WhereFragment,
)

__all__ = [
    "SelectQueryBuilder",
    "RawExpression",
    "CompiledQuery",
    "ClauseState",
    "WhereFragment",
    "GroupSpec",
    "OrderBy",
    "AliasGenerator",
    "get_default_alias_generator",
    "QueryExecutor",
    "SQLAlchemyExecutor",
    "create_executor",
]
