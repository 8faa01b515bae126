"""Conversion between asyncpg rows and the Settlement model."""

from typing import Optional
from uuid import UUID

from models import Settlement, SettlementStatus


# ================================================================
# Row -> Model (reads)
# ================================================================

def settlement_from_row(row) -> Settlement:
    """wagers.settlements row -> Settlement model."""
    return Settlement(
        id=str(row["id"]),
        round_id=row["round_id"],
        from_user_id=row["from_user_id"],
        to_user_id=row["to_user_id"],
        amount=row["amount"],
        status=SettlementStatus(row["status"]),
        created_at=row["created_at"],
        paid_at=row["paid_at"],
        confirmed_at=row["confirmed_at"],
        disputed_at=row["disputed_at"],
        dispute_reason=row["dispute_reason"],
    )


# ================================================================
# Model -> Row (writes)
# ================================================================

def settlement_to_row(settlement: Settlement, round_id: Optional[str] = None) -> tuple:
    """Settlement -> tuple for wagers.settlements INSERT (for executemany)."""
    return (
        round_id if round_id is not None else settlement.round_id,
        settlement.from_user_id,
        settlement.to_user_id,
        settlement.amount,
        settlement.status.value,
    )


def parse_id(settlement_id: str) -> Optional[UUID]:
    """Settlement ids are UUIDs in the database; anything else cannot exist."""
    try:
        return UUID(settlement_id)
    except (TypeError, ValueError):
        return None
