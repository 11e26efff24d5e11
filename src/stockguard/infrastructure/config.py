"""Runtime configuration read from the environment.

| Variable                    | Default                          |
|-----------------------------|----------------------------------|
| STOCKGUARD_DATABASE_URL     | sqlite file data/stockguard.db   |
| STOCKGUARD_LOG_LEVEL        | WARNING                          |
| STOCKGUARD_SQLITE_TIMEOUT   | 30 (seconds a writer waits)      |
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_DATABASE_URL = f"sqlite:///{_DATA_DIR / 'stockguard.db'}"


@dataclass(frozen=True)
class Settings:

    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "WARNING"
    sqlite_timeout: float = 30.0

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            database_url=os.getenv("STOCKGUARD_DATABASE_URL", DEFAULT_DATABASE_URL),
            log_level=os.getenv("STOCKGUARD_LOG_LEVEL", "WARNING").upper(),
            sqlite_timeout=float(os.getenv("STOCKGUARD_SQLITE_TIMEOUT", "30")),
        )

    def override(self, database_url: str | None = None, log_level: str | None = None) -> Settings:
        """Return a copy with the non-None values replaced (CLI options win)."""
        changes: dict[str, str] = {}
        if database_url:
            changes["database_url"] = database_url
        if log_level:
            changes["log_level"] = log_level.upper()
        return replace(self, **changes)

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")
