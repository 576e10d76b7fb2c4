"""Exceptions raised by the snippet store and the CLI."""

from __future__ import annotations


class SnippetError(Exception):
    """Base class for every snippet manager failure."""


class SnippetIOError(SnippetError):
    """The snippets file could not be read or written."""


class SnippetParseError(SnippetError):
    """The snippets file is not a JSON object of string pairs."""


class SnippetNotFoundError(SnippetError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Snippet '{name}' not found")
        self.name = name


class UsageError(SnippetError):
    """A command was invoked with missing or invalid arguments."""


__all__ = [
    "SnippetError",
    "SnippetIOError",
    "SnippetParseError",
    "SnippetNotFoundError",
    "UsageError",
]
