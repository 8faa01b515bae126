from settlements.exceptions import (
    AuthorizationError,
    DuplicateSettlementError,
    InvalidSettlementError,
    NotFoundError,
    SettlementError,
    StateGuardError,
)
from settlements.notifications import (
    LoggingNotificationSender,
    Notification,
    NotificationSender,
    RecordingNotificationSender,
)
from settlements.repository import InMemorySettlementRepository, SettlementRepository
from settlements.service import SettlementService, TransitionResult

__all__ = [
    "AuthorizationError",
    "DuplicateSettlementError",
    "InMemorySettlementRepository",
    "InvalidSettlementError",
    "LoggingNotificationSender",
    "Notification",
    "NotificationSender",
    "NotFoundError",
    "RecordingNotificationSender",
    "SettlementError",
    "SettlementRepository",
    "SettlementService",
    "StateGuardError",
    "TransitionResult",
]
