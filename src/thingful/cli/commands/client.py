"""
Client commands: call a running Thingful API.

Usage:
    thingful client things
    thingful client thing 2 --user-name dunder --password password
    thingful client reviews 1 -u dunder -p password
    thingful client review 1 "Great thing" --rating 5 -u dunder -p password

Credentials may also come from THINGFUL_USER_NAME / THINGFUL_PASSWORD.
"""

import asyncio
import json

import click
from loguru import logger

from ...client import ThingApiError, ThingApiService, TokenService
from ...settings import settings


def credential_options(func):
    func = click.option(
        "--password", "-p", envvar="THINGFUL_PASSWORD", default="", help="Password"
    )(func)
    func = click.option(
        "--user-name", "-u", envvar="THINGFUL_USER_NAME", default="", help="User name"
    )(func)
    func = click.option(
        "--api-endpoint", default=None, help="API base URL (overrides CLIENT__API_ENDPOINT)"
    )(func)
    return func


def _call(api_endpoint: str | None, user_name: str, password: str, method: str, *args):
    """Build a client with the given credentials, make one call, print the JSON."""
    tokens = TokenService(settings.client.token_key)
    if user_name or password:
        tokens.save_auth_token(TokenService.make_basic_auth_token(user_name, password))

    async def run():
        async with ThingApiService(
            api_endpoint or settings.client.api_endpoint,
            tokens,
            timeout=settings.client.timeout,
        ) as api:
            return await getattr(api, method)(*args)

    try:
        result = asyncio.run(run())
    except ThingApiError as e:
        logger.error(f"API error {e.status_code}: {e.error}")
        raise click.exceptions.Exit(1)

    click.echo(json.dumps(result, indent=2))


@click.command("things")
@credential_options
def things_command(api_endpoint: str | None, user_name: str, password: str):
    """List all things."""
    _call(api_endpoint, user_name, password, "get_things")


@click.command("thing")
@click.argument("thing_id", type=int)
@credential_options
def thing_command(thing_id: int, api_endpoint: str | None, user_name: str, password: str):
    """Show one thing."""
    _call(api_endpoint, user_name, password, "get_thing", thing_id)


@click.command("reviews")
@click.argument("thing_id", type=int)
@credential_options
def reviews_command(thing_id: int, api_endpoint: str | None, user_name: str, password: str):
    """List the reviews for a thing."""
    _call(api_endpoint, user_name, password, "get_thing_reviews", thing_id)


@click.command("review")
@click.argument("thing_id", type=int)
@click.argument("text")
@click.option("--rating", "-r", type=click.IntRange(1, 5), required=True, help="Rating 1-5")
@credential_options
def review_command(
    thing_id: int,
    text: str,
    rating: int,
    api_endpoint: str | None,
    user_name: str,
    password: str,
):
    """Post a review for a thing."""
    _call(api_endpoint, user_name, password, "post_review", thing_id, text, rating)


def register_commands(client_group):
    """Register all client commands."""
    client_group.add_command(things_command)
    client_group.add_command(thing_command)
    client_group.add_command(reviews_command)
    client_group.add_command(review_command)
