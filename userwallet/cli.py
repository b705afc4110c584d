"""CLI entry point for UserWallet.

Each command runs as one logical request: it binds its own request context,
calls the same handlers the REST API uses and disposes the engine on exit.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar
from uuid import UUID

import click

from userwallet.core.config import get_settings
from userwallet.core.request_context import request_scope

T = TypeVar("T")


def _run(operation: Callable[[], Awaitable[T]]) -> T:
    """Run ``operation`` inside a request scope on a fresh event loop."""
    from userwallet.core.container import get_database

    async def runner() -> T:
        database = get_database()
        try:
            if get_settings().db_auto_create:
                await database.create_all()
            async with request_scope():
                return await operation()
        finally:
            # Pooled connections are bound to this loop
            await database.close()

    return asyncio.run(runner())


@click.group()
def main() -> None:
    """UserWallet: users, each with one wallet."""


@main.command("new-user")
@click.argument("email")
@click.argument("country")
@click.argument("postal_code")
@click.argument("street")
def new_user(email: str, country: str, postal_code: str, street: str) -> None:
    """Create a user (and its wallet)."""
    from userwallet.application.commands.user_commands import CreateUser
    from userwallet.core.container import get_create_user_handler, get_logger
    from userwallet.core.result import Failure, Success

    command = CreateUser(
        email=email,
        country=country,
        postal_code=postal_code,
        street=street,
    )
    result = _run(lambda: get_create_user_handler().handle(command))

    match result:
        case Success(value=user_id):
            get_logger().info("cli_user_created", user_id=str(user_id))
            click.echo(f"User created: {user_id}")
        case Failure(error=error):
            raise click.ClickException(error.message)


@main.command("update-address")
@click.argument("user_id", type=click.UUID)
@click.option("--country", default=None, help="New country")
@click.option("--postal-code", default=None, help="New postal code")
@click.option("--street", default=None, help="New street")
def update_address(
    user_id: UUID,
    country: str | None,
    postal_code: str | None,
    street: str | None,
) -> None:
    """Change part or all of a user's address."""
    from userwallet.application.commands.user_commands import UpdateUserAddress
    from userwallet.core.container import get_update_user_address_handler
    from userwallet.core.result import Failure, Success

    command = UpdateUserAddress(
        user_id=user_id,
        country=country,
        postal_code=postal_code,
        street=street,
    )
    result = _run(lambda: get_update_user_address_handler().handle(command))

    match result:
        case Success():
            click.echo(f"Address updated: {user_id}")
        case Failure(error=error):
            raise click.ClickException(error.message)


@main.command("list-users")
@click.option("--page", default=0, type=int, help="Zero-based page number")
@click.option("--limit", default=None, type=int, help="Page size")
@click.option("--country", default=None, help="Only users in this country")
def list_users(page: int, limit: int | None, country: str | None) -> None:
    """List users, one per line."""
    from userwallet.application.queries.user_queries import FindUsers
    from userwallet.core.container import get_find_users_handler
    from userwallet.core.result import Failure, Success

    query = FindUsers(page=page, limit=limit, country=country)
    result = _run(lambda: get_find_users_handler().handle(query))

    match result:
        case Success(value=users):
            for user in users.data:
                click.echo(
                    f"{user.id}\t{user.email}\t{user.country}\t"
                    f"{user.postal_code}\t{user.street}\t{user.role}"
                )
            click.echo(
                f"{len(users.data)} of {users.count} users "
                f"(page {users.page}, limit {users.limit})"
            )
        case Failure(error=error):
            raise click.ClickException(error.message)


if __name__ == "__main__":
    main()
