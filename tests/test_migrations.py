"""Tests des migrations Alembic sur une base SQLite fichier."""

from argparse import Namespace
from pathlib import Path

from sqlalchemy import create_engine, inspect

import app.models  # noqa: F401
from alembic import command
from alembic.config import Config
from app.core.database import Base

ROOT = Path(__file__).resolve().parents[1]


def alembic_config(db_path: Path) -> Config:
    # Sans fichier ini: env.py ne reconfigure pas le logging des autres tests
    config = Config()
    config.set_main_option("script_location", str(ROOT / "alembic"))
    config.cmd_opts = Namespace(x=[f"db_url=sqlite+aiosqlite:///{db_path}"])
    return config


def test_upgrade_matches_models(tmp_path):
    db_path = tmp_path / "migrations.db"

    command.upgrade(alembic_config(db_path), "head")

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        inspector = inspect(engine)
        assert set(inspector.get_table_names()) == set(Base.metadata.tables) | {
            "alembic_version"
        }
        for name, table in Base.metadata.tables.items():
            columns = {column["name"] for column in inspector.get_columns(name)}
            assert columns == set(table.columns.keys()), name
        unique = inspector.get_unique_constraints("refresh_tokens")
        assert [c["column_names"] for c in unique] == [["user_id", "device_id"]]
    finally:
        engine.dispose()


def test_downgrade_to_base(tmp_path):
    db_path = tmp_path / "migrations.db"
    config = alembic_config(db_path)
    command.upgrade(config, "head")

    command.downgrade(config, "base")

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        assert inspect(engine).get_table_names() == ["alembic_version"]
    finally:
        engine.dispose()
