"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from budgetbook.config import BaseConfig


def test_defaults(tmp_path):
    config = BaseConfig()

    assert config.DATA_DIR == (tmp_path / "data").resolve()
    assert config.DATA_DIR.exists()
    assert config.STORAGE_BACKEND == "sqlite"
    assert config.DEV_MODE is True
    assert config.DATABASE_URL == f"sqlite:///{config.DATA_DIR / 'budgetbook.db'}"


def test_database_url_override(monkeypatch):
    monkeypatch.setenv("BUDGETBOOK_DATABASE_URL", "sqlite:///:memory:")

    assert BaseConfig().DATABASE_URL == "sqlite:///:memory:"


@pytest.mark.parametrize(("raw", "expected"), [("0", False), ("false", False), ("YES", True), ("on", True)])
def test_dev_mode_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("BUDGETBOOK_DEV_MODE", raw)

    assert BaseConfig().DEV_MODE is expected


def test_memory_backend(monkeypatch):
    monkeypatch.setenv("BUDGETBOOK_STORAGE", " Memory ")

    assert BaseConfig().STORAGE_BACKEND == "memory"


def test_unknown_backend_fails_fast(monkeypatch):
    monkeypatch.setenv("BUDGETBOOK_STORAGE", "redis")

    with pytest.raises(ValueError, match="BUDGETBOOK_STORAGE"):
        BaseConfig()


def test_sqlite_engine_options():
    assert BaseConfig().sqlalchemy_engine_options() == {"connect_args": {"check_same_thread": False}}
