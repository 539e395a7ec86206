"""Identifier adapter interface and base implementation.

The adapter is the only dialect-specific seam of the select builder:
everything the builder emits is dialect-neutral except identifier
quoting, which is delegated to ``quote_identifier``.
"""

from typing import Any, Dict, Optional, Protocol, runtime_checkable

from sqlfluent.common.exceptions import invalid_argument_error
from sqlfluent.constants import DialectType, WILDCARD


@runtime_checkable
class IdentifierAdapter(Protocol):
    """Protocol defining the identifier quoting capability.

    Any object providing ``quote_identifier`` can be handed to a
    ``SelectQueryBuilder``; no inheritance is required.
    """

    def quote_identifier(self, identifier: str) -> str:
        """Return ``identifier`` quoted for the target dialect.

        Implementations must not mutate their argument and must be safe
        to call repeatedly during one compile pass.
        """
        ...


class BaseAdapter:
    """Default adapter that emits identifiers unchanged.

    Also carries the connection DSN and a dictionary of adapter options
    so dialect adapters can be configured uniformly by the factory.

    Example:
        >>> adapter = BaseAdapter(options={"schema": "sales"})
        >>> adapter.quote_identifier("orders")
        'orders'
        >>> adapter.get_option("schema")
        'sales'
    """

    dialect: DialectType = DialectType.GENERIC

    def __init__(self, dsn: Optional[str] = None, options: Optional[Dict[str, Any]] = None):
        self.dsn = dsn
        self._options: Dict[str, Any] = dict(options or {})

    def quote_identifier(self, identifier: str) -> str:
        return identifier

    def has_option(self, key: str) -> bool:
        return key in self._options

    def get_options(self) -> Dict[str, Any]:
        return dict(self._options)

    def get_option(self, key: str) -> Any:
        """Return a configured option.

        Raises:
            SQLFluentError: INVALID_ARGUMENT if the option was never set
        """
        if not self.has_option(key):
            raise invalid_argument_error(
                f"Undefined {self.__class__.__name__} option: {key}",
                argument="key",
                value=key,
            )
        return self._options[key]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dialect={self.dialect.value!r})"


class QuotingAdapter(BaseAdapter):
    """Adapter wrapping each identifier part in a pair of quote characters.

    Dotted names are quoted part by part (``schema.table`` becomes
    ``"schema"."table"``), embedded closing quotes are doubled and the
    ``*`` wildcard is never quoted.
    """

    open_quote: str = '"'
    close_quote: str = '"'

    def quote_identifier(self, identifier: str) -> str:
        return ".".join(self._quote_part(part) for part in identifier.split("."))

    def _quote_part(self, part: str) -> str:
        if part == WILDCARD:
            return part
        escaped = part.replace(self.close_quote, self.close_quote * 2)
        return f"{self.open_quote}{escaped}{self.close_quote}"
