"""Core package for the micro snippet manager."""

from .config import StoreConfig
from .errors import (
    SnippetError,
    SnippetIOError,
    SnippetNotFoundError,
    SnippetParseError,
    UsageError,
)
from .snippet import SnippetStorage, SnippetTable

__all__ = [
    "StoreConfig",
    "SnippetStorage",
    "SnippetTable",
    "SnippetError",
    "SnippetIOError",
    "SnippetNotFoundError",
    "SnippetParseError",
    "UsageError",
]
