"""Fluent SELECT statement builder.

``SelectQueryBuilder`` accumulates clause fragments through chainable
mutators and compiles them into a single parameterized statement:

    SELECT <columns> FROM <table> [WHERE ...] [GROUP BY ... [HAVING ...]]
    [ORDER BY ...] [LIMIT n] [OFFSET n]

Bound values are returned separately, in the same left-to-right order
as their ``?`` placeholders, including values coming from subqueries
used as a derived table or as an IN/NOT IN relation.

Identifier quoting is the only dialect-specific step and is delegated
to the adapter.

Example:
    >>> from sqlfluent.adapters import MySQLAdapter
    >>> builder = SelectQueryBuilder(MySQLAdapter(), "users")
    >>> query = (
    ...     builder.set_columns("id", "name")
    ...     .where("age > ?", 18)
    ...     .where_in("status", ["active", "pending"])
    ...     .order({"column": "name", "sort": "desc"})
    ...     .limit(10)
    ...     .compile()
    ... )
    >>> query.text
    'SELECT `id`, `name` FROM `users` WHERE (age > ?) AND (`status` IN (?, ?)) ORDER BY `name` DESC LIMIT 10'
    >>> query.values
    [18, 'active', 'pending']
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Tuple, Union

from sqlfluent.adapters.base import IdentifierAdapter
from sqlfluent.common.exceptions import ErrorCode, configuration_error, invalid_argument_error
from sqlfluent.constants import PLACEHOLDER, WILDCARD, SortDirection
from sqlfluent.logging import get_logger
from sqlfluent.query_builder.aliases import AliasGenerator, get_default_alias_generator
from sqlfluent.query_builder.expression import RawExpression
from sqlfluent.query_builder.types import (
    ClauseState,
    ColumnTerm,
    CompiledQuery,
    GroupSpec,
    OrderBy,
    WhereFragment,
)
from sqlfluent.utils.decorators import traced

if TYPE_CHECKING:
    from sqlfluent.query_builder.executor import QueryExecutor

logger = get_logger(__name__)

TableReference = Union[str, RawExpression, "SelectQueryBuilder"]
OrderTerm = Union[str, RawExpression, OrderBy, Mapping]
Fragment = Tuple[str, List[Any]]

_SEQUENCE_TYPES = (list, tuple)
_RELATION_TYPES = (list, tuple, set, frozenset)


def _as_sequence(args: Tuple[Any, ...]) -> List[Any]:
    """Normalize variadic arguments.

    ``f(a, b)``, ``f([a, b])`` and ``f((a, b))`` all yield ``[a, b]``;
    ``f(a)`` yields ``[a]`` and ``f()`` yields ``[]``.
    """
    if len(args) == 1 and isinstance(args[0], _SEQUENCE_TYPES):
        return list(args[0])
    return list(args)


def _clamp_count(count: Any) -> int:
    """Coerce a LIMIT/OFFSET count to a non-negative integer.

    Truncates toward zero, wraps into the signed 32-bit range and takes
    the absolute value. Non-numeric input counts as zero.
    """
    if isinstance(count, str):
        try:
            count = float(count.strip())
        except ValueError:
            return 0
    try:
        if isinstance(count, float) and not math.isfinite(count):
            return 0
        value = int(count)
    except (TypeError, ValueError, OverflowError):
        return 0
    value = ((value + 2 ** 31) % 2 ** 32) - 2 ** 31
    return abs(value)


class SelectQueryBuilder:
    """Fluent builder for a single parameterized SELECT statement.

    Every mutator returns the builder itself so calls can be chained in
    any order; ``compile()`` turns the current state into a
    ``CompiledQuery`` without changing it.

    Args:
        adapter: Identifier quoting capability for the target dialect
        table: Table name, raw SQL, or another builder used as a derived table
        alias_generator: Source of derived-table aliases (defaults to the
            process-wide generator)
        executor: Execution collaborator used by ``query``/``get``/
            ``get_one``/``count``

    Raises:
        SQLFluentError: INVALID_ARGUMENT if ``table`` has an unsupported shape
    """

    def __init__(
        self,
        adapter: IdentifierAdapter,
        table: TableReference,
        *,
        alias_generator: Optional[AliasGenerator] = None,
        executor: Optional["QueryExecutor"] = None,
    ):
        if table is self or not isinstance(table, (str, RawExpression, SelectQueryBuilder)):
            raise invalid_argument_error(
                "Invalid table reference: expected a name, a RawExpression or a SelectQueryBuilder",
                argument="table",
                value=table,
            )

        self._adapter = adapter
        self._table = table
        self._alias_generator = alias_generator or get_default_alias_generator()
        self._executor = executor
        self._processor: Optional[Callable[[Any], Any]] = None
        self._clause = ClauseState()

    @property
    def adapter(self) -> IdentifierAdapter:
        return self._adapter

    @property
    def table(self) -> TableReference:
        return self._table

    def reset(self) -> "SelectQueryBuilder":
        """Return the builder to an empty state (``SELECT * FROM <table>``)."""
        self._clause = ClauseState()
        return self

    def clone(self) -> "SelectQueryBuilder":
        """Copy the builder; mutating the copy leaves this builder untouched."""
        other = SelectQueryBuilder(
            self._adapter,
            self._table,
            alias_generator=self._alias_generator,
            executor=self._executor,
        )
        other._processor = self._processor
        other._clause = self._clause.copy()
        return other

    # ------------------------------------------------------------------ #
    # Clause mutators
    # ------------------------------------------------------------------ #

    def set_columns(self, *columns: Any) -> "SelectQueryBuilder":
        """Set the selected columns.

        Accepts ``"*"``, a list of names, or names as separate arguments.
        An empty list selects all columns; calling with no arguments
        leaves the current selection unchanged.
        """
        if not columns:
            return self

        if len(columns) == 1 and isinstance(columns[0], str) and columns[0] == WILDCARD:
            self._clause.columns = []
        else:
            self._clause.columns = _as_sequence(columns)
        return self

    def where(self, predicate: str, *values: Any) -> "SelectQueryBuilder":
        """Append a predicate; predicates from separate calls are ANDed.

        Values may be passed as separate arguments or as one list.

        Example:
            >>> builder.where("a = ? OR b = ?", 1, 2)
            >>> builder.where("c BETWEEN ? AND ?", [10, 20])
        """
        self._clause.where.append(WhereFragment(predicate, tuple(_as_sequence(values))))
        return self

    def where_in(self, column: ColumnTerm, relation: Any) -> "SelectQueryBuilder":
        """Add ``<column> IN (...)`` for a list of values or a subquery."""
        return self._where_include(column, relation, include=True)

    def where_not_in(self, column: ColumnTerm, relation: Any) -> "SelectQueryBuilder":
        """Add ``<column> NOT IN (...)`` for a list of values or a subquery."""
        return self._where_include(column, relation, include=False)

    def group(self, columns: Any, having: Optional[str] = None, *values: Any) -> "SelectQueryBuilder":
        """Set GROUP BY columns with an optional HAVING predicate.

        Replaces any previous grouping; a statement has a single GROUP BY.
        ``columns`` may be one column or a list, tuple or set of them.

        Raises:
            SQLFluentError: INVALID_ARGUMENT if a column is neither a name
                nor a ``RawExpression``; the current grouping is kept.
        """
        if columns is None:
            columns = []
        elif isinstance(columns, _RELATION_TYPES):
            columns = list(columns)
        else:
            columns = [columns]

        for column in columns:
            if not isinstance(column, (str, RawExpression)):
                raise invalid_argument_error(
                    "Invalid group by column!",
                    argument="columns",
                    value=column,
                )

        self._clause.group = GroupSpec(
            columns=tuple(columns),
            having=having,
            values=tuple(_as_sequence(values)),
        )
        return self

    def order(self, *expressions: OrderTerm) -> "SelectQueryBuilder":
        """Set the ORDER BY terms, replacing any previous ordering.

        Each term is a column name (quoted, ascending), a ``RawExpression``
        (verbatim) or a ``{"column": ..., "sort": ...}`` descriptor.

        Example:
            >>> builder.order("foo", {"column": "bar", "sort": "desc"}, RawExpression("baz asc"))
            # ORDER BY foo, bar DESC, baz asc

        Raises:
            SQLFluentError: INVALID_ARGUMENT for any other term shape; the
                current ordering is left unchanged.
        """
        terms = [self._resolve_order_term(term) for term in _as_sequence(expressions)]
        self._clause.order = terms
        return self

    def limit(self, count: Any) -> "SelectQueryBuilder":
        self._clause.limit = _clamp_count(count)
        return self

    def offset(self, count: Any) -> "SelectQueryBuilder":
        self._clause.offset = _clamp_count(count)
        return self

    def set_processor(self, processor: Optional[Callable[[Any], Any]]) -> "SelectQueryBuilder":
        """Set the hook applied to every row returned by ``get``/``get_one``."""
        self._processor = processor
        return self

    # ------------------------------------------------------------------ #
    # Compilation
    # ------------------------------------------------------------------ #

    @traced(
        span_name="sqlfluent.select.compile",
        attribute_getter=lambda self: {"sqlfluent.table": self._table_label()},
    )
    def compile(self) -> CompiledQuery:
        """Compile the current state into SQL text and ordered values.

        Returns:
            CompiledQuery whose ``?`` placeholders match ``values`` one to one

        Raises:
            SQLFluentError: propagated from a nested builder's compile
        """
        values: List[Any] = []
        parts = ["SELECT", self._compile_columns()]

        from_text, from_values = self._compile_from()
        parts.append(f"FROM {from_text}")
        values.extend(from_values)

        where_text, where_values = self._compile_where()
        if where_text:
            parts.append(f"WHERE {where_text}")
            values.extend(where_values)

        group_text, group_values = self._compile_group()
        if group_text:
            parts.append(group_text)
            values.extend(group_values)

        order_text = self._compile_order()
        if order_text:
            parts.append(order_text)

        if self._clause.limit:
            parts.append(f"LIMIT {self._clause.limit}")

        if self._clause.offset:
            parts.append(f"OFFSET {self._clause.offset}")

        text = " ".join(parts)
        logger.debug(
            "Compiled SELECT statement",
            extra={"sql.text": text, "sql.placeholders": len(values)},
        )
        return CompiledQuery(text=text, values=values)

    def _quote(self, term: ColumnTerm) -> str:
        if isinstance(term, RawExpression):
            return str(term)
        return self._adapter.quote_identifier(term)

    def _table_label(self) -> str:
        if isinstance(self._table, SelectQueryBuilder):
            return "(subquery)"
        return str(self._table)

    def _compile_columns(self) -> str:
        return ", ".join(self._quote(column) for column in self._clause.columns) or WILDCARD

    def _compile_from(self) -> Fragment:
        relation = self._table

        if isinstance(relation, SelectQueryBuilder):
            query = relation.compile()
            alias = self._adapter.quote_identifier(self._alias_generator.next_alias())
            return f"({query.text}) AS {alias}", list(query.values)

        if isinstance(relation, RawExpression):
            return str(relation), []

        return self._adapter.quote_identifier(relation), []

    def _compile_where(self) -> Fragment:
        fragments = self._clause.where
        if not fragments:
            return "", []

        text = "(" + ") AND (".join(fragment.text for fragment in fragments) + ")"
        values = [value for fragment in fragments for value in fragment.values]
        return text, values

    def _compile_group(self) -> Fragment:
        spec = self._clause.group
        if spec is None or not spec.columns:
            return "", []

        text = "GROUP BY " + ", ".join(self._quote(column) for column in spec.columns)
        if not spec.having:
            return text, []

        return f"{text} HAVING {spec.having}", list(spec.values)

    def _compile_order(self) -> str:
        if not self._clause.order:
            return ""
        return "ORDER BY " + ", ".join(self._clause.order)

    def _resolve_order_term(self, term: Any) -> str:
        if isinstance(term, RawExpression):
            return str(term)

        if isinstance(term, str):
            return self._adapter.quote_identifier(term)

        if isinstance(term, Mapping) and isinstance(term.get("column"), str) and term["column"]:
            sort = term.get("sort")
            term = OrderBy(column=term["column"], sort=sort if isinstance(sort, str) else None)

        if isinstance(term, OrderBy) and term.column:
            column = self._adapter.quote_identifier(term.column)
            if term.direction == SortDirection.DESC:
                return f"{column} DESC"
            return column

        raise invalid_argument_error(
            "Invalid order by expression!",
            argument="expression",
            value=term,
        )

    def _where_include(self, column: ColumnTerm, relation: Any, include: bool) -> "SelectQueryBuilder":
        quoted = self._quote(column)

        if isinstance(relation, SelectQueryBuilder):
            query = relation.compile()
            text = query.text
            values = list(query.values)
        elif isinstance(relation, _RELATION_TYPES):
            values = list(relation)
            text = ", ".join(PLACEHOLDER for _ in values)
        else:
            raise invalid_argument_error(
                "Invalid relation: expected a SelectQueryBuilder or a sequence of values",
                argument="relation",
                value=relation,
            )

        keyword = "IN" if include else "NOT IN"
        self._clause.where.append(WhereFragment(f"{quoted} {keyword} ({text})", tuple(values)))
        return self

    # ------------------------------------------------------------------ #
    # Execution
    # ------------------------------------------------------------------ #

    def _require_executor(self) -> "QueryExecutor":
        if self._executor is None:
            raise configuration_error(
                "No query executor configured for this builder",
                config_key="executor",
                error_code=ErrorCode.CONFIG_MISSING,
            )
        return self._executor

    def query(self) -> List[Any]:
        """Compile and run the statement, returning the raw rows."""
        executor = self._require_executor()
        return list(executor.fetch_all(self.compile()))

    def get(self) -> List[Any]:
        """Run the statement and return rows mapped through the processor."""
        rows = self.query()
        if self._processor is None:
            return rows
        return [self._processor(row) for row in rows]

    def get_one(self) -> Optional[Any]:
        """Run the statement with ``LIMIT 1`` and return the first row or None.

        The limit is applied to a clone, so this builder is not modified.
        """
        rows = self.clone().limit(1).get()
        return rows[0] if rows else None

    def count(self) -> int:
        """Count the rows this statement would return.

        Compiles ``SELECT COUNT(*) FROM (<statement>) AS <alias>`` with
        ORDER BY, LIMIT and OFFSET removed from the inner statement.
        """
        executor = self._require_executor()

        inner = self.clone()
        inner._clause.order = []
        inner._clause.limit = 0
        inner._clause.offset = 0

        counter = SelectQueryBuilder(
            self._adapter,
            inner,
            alias_generator=self._alias_generator,
            executor=executor,
        ).set_columns(RawExpression("COUNT(*)"))

        value = executor.fetch_scalar(counter.compile())
        return int(value or 0)

    def __repr__(self) -> str:
        return f"SelectQueryBuilder(table={self._table_label()!r}, adapter={self._adapter!r})"
