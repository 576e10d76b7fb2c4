from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping


@dataclass(slots=True)
class StoreConfig:
    """Location and permissions of the snippets file."""

    config_dir: Path
    filename: str = "snippets.json"
    file_mode: int = 0o644
    dir_mode: int = 0o755

    @property
    def filepath(self) -> Path:
        return self.config_dir / self.filename

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "StoreConfig":
        env = os.environ if environ is None else environ
        home = env.get("HOME")
        base = Path(home) if home else Path.home()
        # Snippets live next to micro's own settings.
        return cls(config_dir=base / ".config" / "micro")


__all__ = ["StoreConfig"]
