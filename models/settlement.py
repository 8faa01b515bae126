from datetime import datetime
from decimal import Decimal
from enum import Enum
from pydantic import Field, model_validator
from typing import Optional

from .base import BaseGolfModel


class SettlementStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    SETTLED = "SETTLED"
    DISPUTED = "DISPUTED"


class Settlement(BaseGolfModel):
    """One payer -> payee obligation for a round. Never deleted."""
    id: Optional[str] = None
    round_id: Optional[str] = None
    from_user_id: str
    to_user_id: str
    amount: Decimal = Field(..., gt=0, decimal_places=2)
    status: SettlementStatus = SettlementStatus.PENDING
    created_at: Optional[datetime] = None
    paid_at: Optional[datetime] = None
    confirmed_at: Optional[datetime] = None
    disputed_at: Optional[datetime] = None
    dispute_reason: Optional[str] = None

    @model_validator(mode='after')
    def validate_parties(self):
        if self.from_user_id == self.to_user_id:
            raise ValueError("Payer and payee must be different players")
        return self

    @property
    def is_open(self) -> bool:
        """Still waiting on one of the two parties."""
        return self.status in (SettlementStatus.PENDING, SettlementStatus.PAID)


class Transfer(BaseGolfModel):
    """A planned payment between two players, before it becomes a Settlement."""
    from_user_id: str
    to_user_id: str
    amount: Decimal = Field(..., gt=0)
