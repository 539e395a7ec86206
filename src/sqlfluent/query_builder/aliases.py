"""Derived-table alias generation.

A subquery used as a FROM source needs an alias that is unique within
the statement being built. ``AliasGenerator`` hands out ``t_1``,
``t_2`` and so on from a lock-guarded counter, so independent builders
compiling on different threads never receive the same alias.

Builders take a generator at construction time. When none is given
they share the process-wide generator returned by
``get_default_alias_generator``, whose prefix comes from the
``SQLFLUENT_ALIAS_PREFIX`` setting.
"""

import itertools
import threading
from typing import Optional

from sqlfluent.constants import DEFAULT_ALIAS_PREFIX


class AliasGenerator:
    """Thread-safe, monotonically increasing alias source."""

    def __init__(self, prefix: str = DEFAULT_ALIAS_PREFIX, start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_alias(self) -> str:
        with self._lock:
            number = next(self._counter)
        return f"{self.prefix}{number}"

    def __repr__(self) -> str:
        return f"AliasGenerator(prefix={self.prefix!r})"


_default_generator: Optional[AliasGenerator] = None
_default_lock = threading.Lock()


def get_default_alias_generator() -> AliasGenerator:
    """Return the process-wide alias generator, creating it on first use."""
    global _default_generator

    with _default_lock:
        if _default_generator is None:
            from sqlfluent.settings import get_settings

            _default_generator = AliasGenerator(prefix=get_settings().alias_prefix)
        return _default_generator


def _reset_default_alias_generator() -> None:
    """Drop the process-wide generator so the next call re-reads settings."""
    global _default_generator

    with _default_lock:
        _default_generator = None
