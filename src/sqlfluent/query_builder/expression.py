"""Literal SQL expressions."""

from typing import Union


class RawExpression:
    """A piece of literal SQL emitted verbatim.

    Raw expressions are never quoted by the adapter and never turned
    into placeholders. They can be used as a table reference, a column
    or an ORDER BY term.

    Wrapping another ``RawExpression`` copies its text, so wrapping is
    idempotent.

    Example:
        >>> str(RawExpression(RawExpression("COUNT(*)")))
        'COUNT(*)'
    """

    __slots__ = ("expr",)

    def __init__(self, expr: Union[str, "RawExpression"]):
        if isinstance(expr, RawExpression):
            expr = expr.expr
        self.expr = expr

    def __str__(self) -> str:
        return self.expr

    def __repr__(self) -> str:
        return f"RawExpression({self.expr!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RawExpression):
            return self.expr == other.expr
        return NotImplemented

    def __hash__(self) -> int:
        return hash((RawExpression, self.expr))
