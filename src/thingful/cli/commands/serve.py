"""
Run the Thingful API with uvicorn.

Usage:
    thingful serve                   # API__HOST / API__PORT from settings
    thingful serve --port 8080
    thingful serve --reload          # Restart on code changes
"""

import click
from loguru import logger


@click.command("serve")
@click.option("--host", default=None, help="Bind address (default: API__HOST)")
@click.option("--port", default=None, type=int, help="Port (default: API__PORT)")
@click.option("--reload", is_flag=True, help="Restart on code changes")
def serve_command(host: str | None, port: int | None, reload: bool):
    """Start the Thingful API server."""
    import uvicorn

    from ...settings import settings

    host = host or settings.api.host
    port = port or settings.api.port
    db_state = "enabled" if settings.postgres.enabled else "disabled"
    logger.info(f"Serving Thingful API on http://{host}:{port} (PostgreSQL {db_state})")
    uvicorn.run(
        "thingful.api.main:app",
        host=host,
        port=port,
        reload=reload or settings.api.reload,
        log_level=settings.api.log_level,
    )


def register_command(cli_group):
    """Register the serve command."""
    cli_group.add_command(serve_command)
