"""Shared model base classes."""

from sqlfluent.types.base import SQLFluentBaseModel

__all__ = [
    "SQLFluentBaseModel",
]
