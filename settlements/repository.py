"""Settlement storage.

``SettlementRepository`` is the contract the service depends on. The
PostgreSQL implementation lives in ``database.repositories``; the in-memory
one here backs tests and local runs without ``DATABASE_URL``.
"""

import asyncio
from datetime import datetime, timezone
from typing import Dict, List, Optional, Protocol, Sequence
from uuid import uuid4

from models import Settlement, SettlementStatus
from settlements.exceptions import DuplicateSettlementError


class SettlementRepository(Protocol):
    async def get(self, settlement_id: str) -> Optional[Settlement]: ...

    async def list_for_round(self, round_id: str) -> List[Settlement]: ...

    async def list_for_user(self, user_id: str) -> List[Settlement]: ...

    async def create(self, settlement: Settlement) -> Settlement: ...

    async def create_many(self, round_id: str, settlements: Sequence[Settlement]) -> List[Settlement]: ...

    async def compare_and_set(
        self, settlement_id: str, expected: SettlementStatus, **fields
    ) -> Optional[Settlement]: ...


class InMemorySettlementRepository:
    """Dict-backed repository. One lock serializes every write so the
    status check and the update happen as a single step."""

    def __init__(self):
        self._items: Dict[str, Settlement] = {}
        self._lock = asyncio.Lock()

    def _stamp(self, settlement: Settlement) -> Settlement:
        return settlement.updated(
            id=settlement.id or str(uuid4()),
            created_at=settlement.created_at or datetime.now(timezone.utc),
        )

    async def get(self, settlement_id: str) -> Optional[Settlement]:
        return self._items.get(settlement_id)

    async def list_for_round(self, round_id: str) -> List[Settlement]:
        return [s for s in self._items.values() if s.round_id == round_id]

    async def list_for_user(self, user_id: str) -> List[Settlement]:
        return [
            s for s in self._items.values()
            if user_id in (s.from_user_id, s.to_user_id)
        ]

    async def create(self, settlement: Settlement) -> Settlement:
        async with self._lock:
            stored = self._stamp(settlement)
            if stored.id in self._items:
                raise DuplicateSettlementError(f"Settlement {stored.id} already exists")
            self._items[stored.id] = stored
            return stored

    async def create_many(self, round_id: str, settlements: Sequence[Settlement]) -> List[Settlement]:
        """All or nothing: refuses if the round already has settlements."""
        async with self._lock:
            if any(s.round_id == round_id for s in self._items.values()):
                raise DuplicateSettlementError(f"Round {round_id} already has settlements")
            stored = [self._stamp(s.updated(round_id=round_id)) for s in settlements]
            for settlement in stored:
                self._items[settlement.id] = settlement
            return stored

    async def compare_and_set(
        self, settlement_id: str, expected: SettlementStatus, **fields
    ) -> Optional[Settlement]:
        async with self._lock:
            current = self._items.get(settlement_id)
            if current is None or current.status != expected:
                return None
            updated = current.updated(**fields)
            self._items[settlement_id] = updated
            return updated
