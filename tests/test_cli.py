from sqlmodel import Session, SQLModel, select
from typer.testing import CliRunner

from swissvault import cli
from swissvault.config import settings
from swissvault.db import engine
from swissvault.exceptions import PersistenceError
from swissvault.models import Account, User


runner = CliRunner()


def test_cli_creates_schema_and_seeds():
    SQLModel.metadata.drop_all(engine)

    result = runner.invoke(cli.APP, [])

    assert result.exit_code == 0, result.output
    assert "Database seeded successfully" in result.output
    assert "6 users, 18 accounts, 3 transactions" in result.output
    with Session(engine) as session:
        assert len(session.exec(select(User)).all()) == 6
        assert len(session.exec(select(Account)).all()) == 18


def test_cli_refuses_production_without_force(monkeypatch):
    monkeypatch.setattr(settings, "environment", "production")

    result = runner.invoke(cli.APP, [])

    assert result.exit_code == 2
    with Session(engine) as session:
        assert session.exec(select(User)).all() == []


def test_cli_runs_in_production_with_force(monkeypatch):
    monkeypatch.setattr(settings, "environment", "production")
    monkeypatch.setattr(cli, "seed_database", _summary)

    result = runner.invoke(cli.APP, ["--force", "--no-create-schema"])

    assert result.exit_code == 0, result.output
    assert "6 users, 18 accounts, 3 transactions" in result.output


def test_cli_reports_seed_failure_with_non_zero_exit(monkeypatch):
    def failing_seed():
        raise PersistenceError("Could not insert into users: UNIQUE constraint failed")

    monkeypatch.setattr(cli, "seed_database", failing_seed)

    result = runner.invoke(cli.APP, ["--no-create-schema"])

    assert result.exit_code == 1
    assert "Seed failed" in result.output


def _summary():
    from swissvault.seed import SeedSummary

    return SeedSummary(users=6, accounts=18, transactions=3)
