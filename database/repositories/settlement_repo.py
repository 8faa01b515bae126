"""Settlement storage on PostgreSQL."""

import asyncpg
from typing import List, Optional, Sequence

from models import Settlement, SettlementStatus
from database.converters import parse_id, settlement_from_row, settlement_to_row
from database.exceptions import DuplicateError, IntegrityError
from settlements.exceptions import DuplicateSettlementError

INSERT_SQL = """INSERT INTO wagers.settlements
                (round_id, from_user_id, to_user_id, amount, status)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING *"""


class SettlementRepositoryDB:
    """Async storage for wagers.settlements.

    Status changes go through ``compare_and_set``, a single conditional
    UPDATE, so concurrent transitions on one row cannot both succeed.
    """

    UPDATABLE = {"status", "paid_at", "confirmed_at", "disputed_at", "dispute_reason"}

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Read
    # ================================================================

    async def get(self, settlement_id: str) -> Optional[Settlement]:
        uid = parse_id(settlement_id)
        if uid is None:
            return None
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM wagers.settlements WHERE id = $1", uid
            )
            return settlement_from_row(row) if row else None

    async def list_for_round(self, round_id: str) -> List[Settlement]:
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT * FROM wagers.settlements
                   WHERE round_id = $1
                   ORDER BY created_at, id""",
                round_id,
            )
            return [settlement_from_row(r) for r in rows]

    async def list_for_user(self, user_id: str) -> List[Settlement]:
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT * FROM wagers.settlements
                   WHERE from_user_id = $1 OR to_user_id = $1
                   ORDER BY created_at DESC""",
                user_id,
            )
            return [settlement_from_row(r) for r in rows]

    # ================================================================
    # Create
    # ================================================================

    async def create(self, settlement: Settlement) -> Settlement:
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(INSERT_SQL, *settlement_to_row(settlement))
                return settlement_from_row(row)
        except asyncpg.UniqueViolationError as e:
            raise DuplicateError(str(e)) from e
        except asyncpg.CheckViolationError as e:
            raise IntegrityError(str(e)) from e

    async def create_many(self, round_id: str, settlements: Sequence[Settlement]) -> List[Settlement]:
        """Insert all of a round's settlements in one transaction.

        A transaction-scoped advisory lock on the round id keeps two
        finalize requests from both passing the existence check.
        """
        try:
            async with self._pool.acquire() as conn:
                async with conn.transaction():
                    await conn.execute(
                        "SELECT pg_advisory_xact_lock(hashtext($1))", round_id
                    )
                    existing = await conn.fetchval(
                        "SELECT COUNT(*) FROM wagers.settlements WHERE round_id = $1",
                        round_id,
                    )
                    if existing:
                        raise DuplicateSettlementError(f"Round {round_id} already has settlements")
                    created = []
                    for settlement in settlements:
                        row = await conn.fetchrow(
                            INSERT_SQL, *settlement_to_row(settlement, round_id)
                        )
                        created.append(settlement_from_row(row))
                    return created
        except asyncpg.UniqueViolationError as e:
            raise DuplicateError(str(e)) from e
        except asyncpg.CheckViolationError as e:
            raise IntegrityError(str(e)) from e

    # ================================================================
    # Update
    # ================================================================

    async def compare_and_set(
        self, settlement_id: str, expected: SettlementStatus, **fields
    ) -> Optional[Settlement]:
        """Apply ``fields`` only if the row is still in ``expected`` status.

        Returns the updated settlement, or None when the row is missing or
        another request changed it first.
        """
        uid = parse_id(settlement_id)
        if uid is None:
            return None
        updates = {k: v for k, v in fields.items() if k in self.UPDATABLE}
        if "status" in updates:
            updates["status"] = SettlementStatus(updates["status"]).value
        if not updates:
            return await self.get(settlement_id)

        set_clause = ", ".join(f"{k} = ${i+3}" for i, k in enumerate(updates))
        values = [uid, expected.value] + list(updates.values())

        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                f"""UPDATE wagers.settlements SET {set_clause}
                    WHERE id = $1 AND status = $2
                    RETURNING *""",
                *values,
            )
            return settlement_from_row(row) if row else None
