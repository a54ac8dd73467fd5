"""
Thingful CLI entry point.

Usage:
    thingful serve --reload
    thingful db migrate
    thingful db seed
    thingful db clean
    thingful client things --user-name dunder --password password
"""

import sys

import click
from loguru import logger


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool):
    """Thingful - things and their reviews."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


@cli.group()
def db():
    """Database operations (migrate, seed, clean)."""
    pass


@cli.group()
def client():
    """Call a running Thingful API."""
    pass


# Register commands
from .commands.client import register_commands as register_client_commands
from .commands.db import register_commands as register_db_commands
from .commands.serve import register_command as register_serve_command

register_db_commands(db)
register_client_commands(client)
register_serve_command(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
