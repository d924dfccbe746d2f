from __future__ import annotations

import os

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from contractflow.core.config import settings

BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def test_initial_migration_creates_schema(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrations.db'}"
    monkeypatch.setattr(settings, "database_url", url)

    cfg = Config()
    cfg.set_main_option("script_location", os.path.join(BACKEND_DIR, "contractflow", "core", "db", "migrations"))
    cfg.set_main_option("sqlalchemy.url", url)

    command.upgrade(cfg, "head")

    inspector = inspect(create_engine(url))
    assert {"contracts", "obligations", "audit_events"} <= set(inspector.get_table_names())
    columns = {c["name"] for c in inspector.get_columns("obligations")}
    assert {"contract_id", "clause_ref", "description", "due_date", "status", "is_deleted", "updated_at"} <= columns

    command.downgrade(cfg, "base")
    assert "obligations" not in inspect(create_engine(url)).get_table_names()
