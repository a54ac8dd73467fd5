"""
Database management commands.

Usage:
    thingful db migrate              # Apply sql/install.sql
    thingful db seed                 # Insert sample users, things and reviews
    thingful db clean                # Truncate all tables
    thingful db migrate -c postgresql://...   # Override the connection string
"""

import asyncio
import importlib.resources
import time
from pathlib import Path

import click
from loguru import logger

from ...services.postgres import PostgresService
from ...settings import settings

connection_option = click.option(
    "--connection",
    "-c",
    help="PostgreSQL connection string (overrides POSTGRES__CONNECTION_STRING)",
)


def install_sql_path() -> Path:
    """Location of the packaged install.sql."""
    return Path(str(importlib.resources.files("thingful") / "sql" / "install.sql"))


def _service(connection: str | None) -> PostgresService:
    return PostgresService(connection or settings.postgres.connection_string, pool_max_size=2)


async def _run(connection: str | None, action) -> None:
    db = _service(connection)
    await db.connect()
    try:
        await action(db)
    finally:
        await db.disconnect()


@click.command()
@connection_option
@click.option(
    "--sql-file",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="SQL file to apply (defaults to the packaged install.sql)",
)
def migrate(connection: str | None, sql_file: Path | None):
    """Create the Thingful tables (safe to re-run)."""
    sql_file = sql_file or install_sql_path()
    click.echo(f"Applying: {sql_file}")

    async def apply(db: PostgresService) -> None:
        await db.execute(sql_file.read_text(encoding="utf-8"))

    start_time = time.time()
    try:
        asyncio.run(_run(connection, apply))
    except Exception as e:
        logger.error(f"Migration failed: {e}")
        click.secho("✗ Migration failed", fg="red")
        raise click.Abort()
    click.secho(f"✓ Applied in {(time.time() - start_time) * 1000:.0f}ms", fg="green")


@click.command()
@connection_option
@click.option("--password", default="password", show_default=True, help="Password for every seeded user")
def seed(connection: str | None, password: str):
    """Insert sample users, things and reviews."""
    from ...services.seed import sample_reviews, sample_things, sample_users, seed_database

    async def insert(db: PostgresService) -> None:
        await seed_database(
            db,
            sample_users(password),
            sample_things(),
            sample_reviews(),
            bcrypt_rounds=settings.auth.bcrypt_rounds,
        )

    try:
        asyncio.run(_run(connection, insert))
    except Exception as e:
        logger.error(f"Seeding failed: {e}")
        click.secho("✗ Seeding failed", fg="red")
        raise click.Abort()
    click.secho("✓ Sample data inserted", fg="green")


@click.command()
@connection_option
@click.confirmation_option(prompt="Delete all Thingful data?")
def clean(connection: str | None):
    """Truncate every Thingful table."""
    from ...services.seed import clean_tables

    try:
        asyncio.run(_run(connection, clean_tables))
    except Exception as e:
        logger.error(f"Clean failed: {e}")
        raise click.Abort()
    click.secho("✓ Tables truncated", fg="green")


def register_commands(db_group):
    """Register all db commands."""
    db_group.add_command(migrate)
    db_group.add_command(seed)
    db_group.add_command(clean)
