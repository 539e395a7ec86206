"""Constants shared across sqlfluent."""

from sqlfluent.constants.sql import (
    DEFAULT_ALIAS_PREFIX,
    PLACEHOLDER,
    WILDCARD,
    DialectType,
    SortDirection,
)

__all__ = [
    "DialectType",
    "SortDirection",
    "PLACEHOLDER",
    "WILDCARD",
    "DEFAULT_ALIAS_PREFIX",
]
