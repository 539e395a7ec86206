"""Shared utilities for sqlfluent."""

from sqlfluent.utils.decorators import traced

__all__ = [
    "traced",
]
