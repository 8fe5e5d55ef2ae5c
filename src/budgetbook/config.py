"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

STORAGE_BACKENDS = frozenset({"sqlite", "memory"})


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "BudgetBook"
    DB_FILENAME = "budgetbook.db"
    LOG_FILENAME = "budgetbook.log"

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("BUDGETBOOK_DEV_MODE", default=True)
        self.STORAGE_BACKEND = os.getenv("BUDGETBOOK_STORAGE", "sqlite").strip().lower()
        if self.STORAGE_BACKEND not in STORAGE_BACKENDS:
            raise ValueError(
                f"BUDGETBOOK_STORAGE must be one of {sorted(STORAGE_BACKENDS)}, "
                f"got {self.STORAGE_BACKEND!r}."
            )
        self.DATABASE_URL = os.getenv("BUDGETBOOK_DATABASE_URL", self._build_sqlite_url())

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("BUDGETBOOK_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        """Construct the default SQLite URL inside the data directory."""

        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        connect_args: dict[str, Any] = {}
        if self.DATABASE_URL.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        return {"connect_args": connect_args}

