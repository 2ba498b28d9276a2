"""Issue a bearer token for an existing user.

Signs a token with the service's JWT settings and stores it as the user's
current session in Redis, for local development and smoke tests without the
identity service. Prints the token on stdout.

    python -m bookstore.jobs.issue_token <user-id>
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from uuid import UUID

from bookstore.application.identity.services import SessionIssuer
from bookstore.infrastructure.persistence_postgres import SqlaUserReader
from bookstore.infrastructure.persistence_redis import RedisSessionStore, build_async_client
from bookstore.setup.config import get_settings
from bookstore.setup.database import build_engine, build_session_factory
from bookstore.setup.dependencies import get_token_service
from bookstore.setup.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Issue a bearer token and register it as the user's session.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("user_id", type=UUID, help="id of an existing user")
    return parser.parse_args(argv)


async def issue_token(user_id: UUID) -> str | None:
    """Return the new token, or None when the user does not exist."""
    settings = get_settings()
    engine = build_engine(settings)
    redis = build_async_client(settings.redis_url, max_connections=1)
    try:
        async with build_session_factory(engine)() as session:
            user = await SqlaUserReader(session).get_by_id(user_id)
        if user is None:
            logger.error("User not found", extra={"user_id": str(user_id)})
            return None

        issuer = SessionIssuer(
            get_token_service(), RedisSessionStore(redis), settings.session_ttl_seconds
        )
        return await issuer.issue(user)
    finally:
        await redis.aclose()
        await engine.dispose()


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(get_settings().log_level)
    token = asyncio.run(issue_token(args.user_id))
    if token is None:
        sys.exit(1)
    print(token)


if __name__ == "__main__":
    main()
