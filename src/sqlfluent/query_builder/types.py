"""Clause state and compiled statement types for the select builder."""

from dataclasses import dataclass, field, replace
from typing import Any, List, NamedTuple, Optional, Tuple, Union

from pydantic import Field

from sqlfluent.constants import PLACEHOLDER, SortDirection
from sqlfluent.query_builder.expression import RawExpression
from sqlfluent.types.base import SQLFluentBaseModel


ColumnTerm = Union[str, RawExpression]


class WhereFragment(NamedTuple):
    """One WHERE predicate and the values bound to its placeholders.

    Fragments are ANDed together at compile time; any OR logic inside
    ``text`` is opaque to the builder.
    """

    text: str
    values: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class GroupSpec:
    """GROUP BY columns plus an optional HAVING predicate.

    The HAVING predicate and its values are ignored unless at least one
    grouping column is present.
    """

    columns: Tuple[ColumnTerm, ...] = ()
    having: Optional[str] = None
    values: Tuple[Any, ...] = ()


@dataclass
class ClauseState:
    """Mutable clause fragments accumulated by a ``SelectQueryBuilder``.

    ``order`` holds already-resolved ORDER BY terms. ``limit`` and
    ``offset`` of zero mean the clause is omitted.
    """

    columns: List[ColumnTerm] = field(default_factory=list)
    where: List[WhereFragment] = field(default_factory=list)
    group: Optional[GroupSpec] = None
    order: List[str] = field(default_factory=list)
    limit: int = 0
    offset: int = 0

    def copy(self) -> "ClauseState":
        return replace(
            self,
            columns=list(self.columns),
            where=list(self.where),
            order=list(self.order),
        )


class OrderBy(SQLFluentBaseModel):
    """A ``{column, sort}`` ORDER BY descriptor.

    ``sort`` is free text: only a case-insensitive ``"desc"`` sorts
    descending, anything else (including ``None``) is ascending.
    """

    column: str
    sort: Optional[str] = None

    @property
    def direction(self) -> SortDirection:
        if isinstance(self.sort, str) and self.sort.lower() == SortDirection.DESC.value:
            return SortDirection.DESC
        return SortDirection.ASC


class CompiledQuery(SQLFluentBaseModel):
    """A compiled statement ready to hand to a database driver.

    Attributes:
        text: SQL text using ``?`` positional placeholders
        values: Bound values, in placeholder order
    """

    text: str
    values: List[Any] = Field(default_factory=list)

    @property
    def params(self) -> Tuple[Any, ...]:
        """Values as a tuple, the shape DB-API ``execute`` expects."""
        return tuple(self.values)

    @property
    def placeholder_count(self) -> int:
        """Number of ``?`` markers in ``text``.

        This is a plain character count, so ``?`` inside literal SQL
        supplied through raw expressions or predicates is counted too.
        """
        return self.text.count(PLACEHOLDER)
