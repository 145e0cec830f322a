import asyncio
from datetime import datetime
from tokengate.repositories.token_repo import TokenRepository
import logging

logger = logging.getLogger(__name__)

def cleanup_expired_tokens(token_repo: TokenRepository, now: datetime | None = None) -> int:
    purged = token_repo.purge_expired(now)
    logger.info("Cleaned up %d expired refresh tokens, %d still active", purged, len(token_repo))
    return purged


async def periodic_cleanup(token_repo: TokenRepository, interval_seconds: float) -> None:
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            cleanup_expired_tokens(token_repo)
        except Exception:
            logger.exception("Refresh token cleanup failed, retrying in %s seconds", interval_seconds)
