"""Command line entry point that resets the demo database."""

from __future__ import annotations

import logging

import typer

from .config import settings
from .db import init_db
from .exceptions import SeedError
from .seed import seed_database

APP = typer.Typer(add_completion=False, help="Reset the SwissVault demo database to its fixture data.")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@APP.command()
def run(
    force: bool = typer.Option(False, "--force", help="Allow the destructive reset in a production environment."),
    create_schema: bool = typer.Option(
        True, "--create-schema/--no-create-schema", help="Create missing tables before seeding."
    ),
) -> None:
    configure_logging(settings.log_level)

    if settings.is_production and not force:
        typer.secho(
            f"Refusing to wipe and reseed the {settings.environment} database; pass --force to override.",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=2)

    if create_schema:
        init_db()

    try:
        summary = seed_database()
    except SeedError as exc:
        typer.secho(f"❌ Seed failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(
        f"✅ Database seeded successfully! "
        f"{summary.users} users, {summary.accounts} accounts, {summary.transactions} transactions.",
        fg=typer.colors.GREEN,
    )


if __name__ == "__main__":
    APP()
