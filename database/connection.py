import logging
from pathlib import Path
from typing import Optional

import asyncpg

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).with_name("schema.sql")


class DatabasePool:
    """Owns the asyncpg pool for the settlement ledger."""

    def __init__(self):
        self._pool: Optional[asyncpg.Pool] = None

    async def initialize(self, dsn: str, *, min_size: int = 1, max_size: int = 10) -> None:
        """Create the pool. Call once at app startup; later calls are no-ops."""
        if self._pool is not None:
            return
        self._pool = await asyncpg.create_pool(dsn=dsn, min_size=min_size, max_size=max_size)
        logger.info("Database pool ready (min=%d, max=%d)", min_size, max_size)

    async def apply_schema(self, path: Path = SCHEMA_PATH) -> None:
        """Create the settlements table if it does not exist yet."""
        async with self.pool.acquire() as conn:
            await conn.execute(path.read_text())

    async def close(self) -> None:
        if self._pool:
            await self._pool.close()
            self._pool = None
            logger.info("Database pool closed")

    @property
    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError(
                "Database pool not initialized. Call await db.initialize() first."
            )
        return self._pool

    async def health_check(self) -> bool:
        try:
            async with self.pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except (asyncpg.PostgresError, OSError, RuntimeError):
            logger.warning("Database health check failed", exc_info=True)
            return False


db = DatabasePool()
