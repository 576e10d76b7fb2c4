"""Snippet table model and its file-backed storage."""

from .model import SnippetTable
from .snippet_storage import SnippetStorage, read_snippet_body

__all__ = ["SnippetTable", "SnippetStorage", "read_snippet_body"]
