"""Push-style notifications sent when settlements change.

Delivery is somebody else's job; the service only hands a ``Notification`` to
whatever ``NotificationSender`` it was given.
"""

import logging
from decimal import Decimal
from typing import Dict, List, Protocol

from pydantic import BaseModel, Field

from models import Settlement

logger = logging.getLogger(__name__)

DEFAULT_NAME = "A player"


class Notification(BaseModel):
    user_id: str
    type: str = "settlement"
    title: str
    body: str
    data: Dict[str, str] = Field(default_factory=dict)


class NotificationSender(Protocol):
    async def send(self, notification: Notification) -> None: ...


class LoggingNotificationSender:
    """Writes notifications to the log instead of delivering them."""

    async def send(self, notification: Notification) -> None:
        logger.info("Notify %s: %s", notification.user_id, notification.body)


class RecordingNotificationSender:
    """Keeps every notification in memory."""

    def __init__(self):
        self.sent: List[Notification] = []

    async def send(self, notification: Notification) -> None:
        self.sent.append(notification)


def _settlement_link(round_id: str) -> Dict[str, str]:
    return {"url": f"/rounds/{round_id}/settlement", "round_id": round_id}


def _format_amount(amount: Decimal) -> str:
    return f"{abs(amount):.2f}"


def settlement_update(user_id: str, other_name: str, amount: Decimal, is_owed: bool, round_id: str) -> Notification:
    """``is_owed`` means ``user_id`` is the one who has to pay."""
    if is_owed:
        body = f"You owe {other_name} ${_format_amount(amount)}"
    else:
        body = f"{other_name} owes you ${_format_amount(amount)}"
    return Notification(
        user_id=user_id,
        title="Settlement Update",
        body=body,
        data=_settlement_link(round_id),
    )


def payment_sent(settlement: Settlement, payer_name: str) -> Notification:
    return Notification(
        user_id=settlement.to_user_id,
        title="Payment Received",
        body=f"{payer_name} says they paid you ${_format_amount(settlement.amount)}. Tap to confirm.",
        data=_settlement_link(settlement.round_id or ""),
    )
