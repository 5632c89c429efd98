"""
Tests for the school-migrate command
"""

import pytest
from click.testing import CliRunner
from sqlalchemy import create_engine, inspect

from school.database.cli import get_alembic_config, main


@pytest.fixture
def runner():
    return CliRunner()


def test_alembic_config_carries_database_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'cfg.db'}"

    config = get_alembic_config(url)

    assert config.attributes["database_url"] == url
    assert config.get_main_option("script_location").endswith("alembic")


def test_upgrade_then_downgrade_uses_given_url(runner, tmp_path):
    db_path = tmp_path / "migrated.db"
    url = f"sqlite:///{db_path}"

    upgraded = runner.invoke(main, ["--database-url", url, "upgrade"])
    assert upgraded.exit_code == 0, upgraded.output

    engine = create_engine(url)
    try:
        tables = set(inspect(engine).get_table_names())
        assert {"departments", "students", "teachers", "courses"} <= tables

        downgraded = runner.invoke(main, ["--database-url", url, "downgrade", "base"])
        assert downgraded.exit_code == 0, downgraded.output
        assert "students" not in set(inspect(engine).get_table_names())
    finally:
        engine.dispose()


def test_unreachable_database_fails_before_alembic(runner, tmp_path):
    url = f"sqlite:///{tmp_path / 'missing' / 'dir' / 'x.db'}"

    result = runner.invoke(main, ["--database-url", url, "upgrade"])

    assert result.exit_code == 1
    assert "unable to open database file" in result.output
