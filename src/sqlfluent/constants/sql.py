"""SQL and query-related constants.

This module contains fundamental SQL enums and keyword constants that
are shared by adapters, the select builder and settings without
creating circular dependencies.
"""

from enum import Enum


class DialectType(str, Enum):
    """SQL dialect enumeration.

    Selects which identifier quoting an adapter applies. Clause
    generation itself is dialect-neutral.

    Values:
        GENERIC: No quoting at all (names emitted as given)
        ANSI: Double-quoted identifiers ("name")
        POSTGRESQL: Same quoting as ANSI
        SQLITE: Same quoting as ANSI
        MYSQL: Backtick-quoted identifiers (`name`)
        MSSQL: Bracket-quoted identifiers ([name])
    """

    GENERIC = "generic"
    ANSI = "ansi"
    POSTGRESQL = "postgresql"
    SQLITE = "sqlite"
    MYSQL = "mysql"
    MSSQL = "mssql"


class SortDirection(str, Enum):
    """Sort direction of an ORDER BY term.

    Only DESC is ever rendered; ascending terms carry no suffix.
    """

    ASC = "asc"
    DESC = "desc"


PLACEHOLDER = "?"
WILDCARD = "*"
DEFAULT_ALIAS_PREFIX = "t_"
