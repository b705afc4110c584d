"""User seeder for the demo account.

Seeds one guest user with an empty wallet. Idempotent via an existence check
on the user id - safe to run on every migration.
"""

from uuid import UUID

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

logger = structlog.get_logger(__name__)

DEFAULT_USERS = [
    {
        "id": UUID("f59d0748-d455-4465-b0a8-8d8260b1c877"),
        "email": "john@gmail.com",
        "country": "England",
        "postal_code": "24312",
        "street": "Road Avenue",
        "role": "guest",
    },
]


async def seed_users(session: AsyncSession) -> None:
    """Seed default users, each with a zero-balance wallet.

    Args:
        session: Async database session.
    """
    seeded_count = 0
    skipped_count = 0

    for user_data in DEFAULT_USERS:
        result = await session.execute(
            text("SELECT 1 FROM users WHERE id = :id OR email = :email LIMIT 1"),
            {"id": user_data["id"], "email": user_data["email"]},
        )

        if result.fetchone() is not None:
            skipped_count += 1
            logger.debug("user_exists", email=user_data["email"])
            continue

        await session.execute(
            text("""
                INSERT INTO users (
                    id, email, country, postal_code, street, role,
                    created_at, updated_at
                )
                VALUES (
                    :id, :email, :country, :postal_code, :street, :role,
                    NOW(), NOW()
                )
            """),
            user_data,
        )
        await session.execute(
            text("""
                INSERT INTO wallets (id, balance, user_id, created_at, updated_at)
                VALUES (:id, 0, :user_id, NOW(), NOW())
            """),
            {"id": uuid7(), "user_id": user_data["id"]},
        )
        seeded_count += 1
        logger.info("user_seeded", email=user_data["email"], id=str(user_data["id"]))

    logger.info(
        "user_seeding_complete",
        seeded=seeded_count,
        skipped=skipped_count,
        total=len(DEFAULT_USERS),
    )
