"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

STORE_CHOICES = ("memory", "json", "orm", "sql")
# Each CLI call is its own process, so the default store must persist
DEFAULT_STORE = "json"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    store: str = DEFAULT_STORE
    data_dir: Path = _DEFAULT_DATA_DIR
    database_url: str | None = None
    seed: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.store not in STORE_CHOICES:
            raise ValueError(
                f"Unknown store {self.store!r}; expected one of {', '.join(STORE_CHOICES)}"
            )

    @property
    def json_path(self) -> Path:
        return self.data_dir / "catalog.json"

    @property
    def resolved_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.data_dir / 'catalog.db'}"

    @classmethod
    def from_env(cls, **overrides) -> Settings:
        """Build settings from ``PMS_*`` variables; ``overrides`` win."""
        values = {
            "store": os.getenv("PMS_STORE", DEFAULT_STORE).strip().lower(),
            "data_dir": Path(os.getenv("PMS_DATA_DIR") or _DEFAULT_DATA_DIR),
            "database_url": os.getenv("PMS_DATABASE_URL") or None,
            "seed": os.getenv("PMS_SEED", "true").strip().lower() not in _FALSE_VALUES,
            "log_level": os.getenv("PMS_LOG_LEVEL", "WARNING"),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
