from __future__ import annotations

from typing import Dict, List

from pydantic import RootModel, StrictStr


class SnippetTable(RootModel[Dict[StrictStr, StrictStr]]):
    """Name to body mapping exactly as persisted on disk."""

    root: Dict[StrictStr, StrictStr] = {}

    def names(self) -> List[str]:
        return sorted(self.root)


__all__ = ["SnippetTable"]
