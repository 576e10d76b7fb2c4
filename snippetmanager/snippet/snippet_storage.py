from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Iterable, List

from pydantic import ValidationError

from ..config import StoreConfig
from ..errors import (
    SnippetIOError,
    SnippetNotFoundError,
    SnippetParseError,
    UsageError,
)
from .model import SnippetTable

logger = logging.getLogger("snippet_manager")

EMPTY_NOTICE = "No snippets saved."
LIST_HEADER = "Saved snippets:"


def read_snippet_body(source: Iterable[str]) -> str:
    """Collect lines from ``source`` up to the first blank line and join them."""
    lines: List[str] = []
    for raw in source:
        line = raw.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]
        if line == "":
            break
        lines.append(line)
    return "\n".join(lines)


class SnippetStorage:
    """Snippet table backed by a single JSON file."""

    def __init__(self, config: StoreConfig) -> None:
        self.config = config
        self.snippets: Dict[str, str] = {}

    @property
    def filepath(self) -> Path:
        return self.config.filepath

    def load(self) -> None:
        """Replace the in-memory table with the contents of the snippets file.

        A missing file is the first-run state and leaves the table empty.
        """
        try:
            raw = self.filepath.read_bytes()
        except FileNotFoundError:
            logger.debug("No snippets file at %s, starting empty", self.filepath)
            self.snippets = {}
            return
        except OSError as exc:
            raise SnippetIOError(f"cannot read {self.filepath}: {exc}") from exc

        try:
            table = SnippetTable.model_validate_json(raw)
        except ValueError as exc:
            detail = exc.errors()[0]["msg"] if isinstance(exc, ValidationError) else str(exc)
            raise SnippetParseError(
                f"{self.filepath} is not a JSON object of string values: {detail}"
            ) from exc

        self.snippets = dict(table.root)
        logger.debug("Loaded %d snippets from %s", len(self.snippets), self.filepath)

    def save(self) -> None:
        """Write the table to disk, replacing the previous file in one step."""
        directory = self.config.config_dir
        payload = json.dumps(self.snippets, indent=2, ensure_ascii=False, sort_keys=True) + "\n"

        tmp_path: str | None = None
        try:
            directory.mkdir(mode=self.config.dir_mode, parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=directory, prefix=f".{self.config.filename}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.chmod(tmp_path, self.config.file_mode)
            os.replace(tmp_path, self.filepath)
        except (OSError, UnicodeError) as exc:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise SnippetIOError(f"cannot write {self.filepath}: {exc}") from exc

        logger.debug("Saved %d snippets to %s", len(self.snippets), self.filepath)

    def list_snippets(self) -> List[str]:
        return SnippetTable(self.snippets).names()

    def format_list(self) -> str:
        names = self.list_snippets()
        if not names:
            return EMPTY_NOTICE
        return "\n".join([LIST_HEADER, *(f"- {name}" for name in names)])

    def show(self, name: str) -> str | None:
        return self.snippets.get(name)

    def add(self, name: str, source: Iterable[str]) -> str:
        """Store the body read from ``source`` under ``name`` and persist it.

        An existing snippet with the same name is overwritten without
        confirmation. If saving fails the in-memory table keeps the new
        value and :class:`SnippetIOError` propagates.
        """
        if not name:
            raise UsageError("snippet name must not be empty")

        try:
            body = read_snippet_body(source)
        except UnicodeDecodeError as exc:
            raise SnippetIOError(f"cannot read snippet body: {exc}") from exc
        if name in self.snippets:
            logger.debug("Overwriting snippet %r", name)
        self.snippets[name] = body
        self.save()
        return body

    def delete(self, name: str) -> None:
        if name not in self.snippets:
            raise SnippetNotFoundError(name)
        del self.snippets[name]
        self.save()


__all__ = ["SnippetStorage", "read_snippet_body", "EMPTY_NOTICE", "LIST_HEADER"]
