"""Settlement lifecycle: PENDING -> PAID -> SETTLED, with DISPUTED off PAID.

The payer marks a settlement paid, the payee confirms it (or disputes it).
Each transition is a compare-and-set on the status it starts from, so two
racing requests can never both win.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Callable, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from models import Settlement, SettlementStatus, Transfer
from models.money import CENTS
from settlements.exceptions import (
    AuthorizationError,
    InvalidSettlementError,
    NotFoundError,
    SettlementError,
    StateGuardError,
)
from settlements.notifications import (
    DEFAULT_NAME,
    LoggingNotificationSender,
    Notification,
    NotificationSender,
    payment_sent,
    settlement_update,
)
from settlements.repository import SettlementRepository

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class TransitionResult:
    ok: bool
    settlement: Optional[Settlement] = None
    error: Optional[SettlementError] = None

    def unwrap(self) -> Settlement:
        if not self.ok:
            raise self.error
        return self.settlement


class SettlementService:

    def __init__(
        self,
        repository: SettlementRepository,
        notifier: Optional[NotificationSender] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._repo = repository
        self._notifier = notifier or LoggingNotificationSender()
        self._clock = clock

    # ================================================================
    # Private helpers
    # ================================================================

    async def _notify(self, notification: Notification) -> None:
        """Deliver a notification. Failures are logged and never raised."""
        try:
            await self._notifier.send(notification)
        except Exception:
            logger.exception("Failed to send notification to %s", notification.user_id)

    def _build(self, round_id: Optional[str], from_user_id: str, to_user_id: str, amount) -> Settlement:
        try:
            amount = Decimal(str(amount))
        except InvalidOperation:
            raise InvalidSettlementError(f"Invalid amount: {amount}")
        if amount <= 0:
            raise InvalidSettlementError("Settlement amount must be positive")
        if amount != amount.quantize(CENTS):
            raise InvalidSettlementError("Settlement amount must be in whole cents")
        if from_user_id == to_user_id:
            raise InvalidSettlementError("Payer and payee must be different players")
        try:
            return Settlement(
                round_id=round_id,
                from_user_id=from_user_id,
                to_user_id=to_user_id,
                amount=amount.quantize(CENTS),
            )
        except ValidationError as e:
            raise InvalidSettlementError(e.errors()[0]["msg"]) from e

    async def _transition(
        self,
        settlement_id: str,
        actor_id: str,
        *,
        action: str,
        party: str,
        expected: SettlementStatus,
        target: SettlementStatus,
        **fields,
    ) -> TransitionResult:
        settlement = await self._repo.get(settlement_id)
        if settlement is None:
            return TransitionResult(False, error=NotFoundError(f"Settlement {settlement_id} not found"))

        allowed_actor = settlement.from_user_id if party == "payer" else settlement.to_user_id
        if actor_id != allowed_actor:
            logger.warning(
                "Settlement %s: %s refused for %s (only the %s may do this)",
                settlement_id, action, actor_id, party,
            )
            return TransitionResult(
                False, settlement,
                AuthorizationError(f"Only the {party} can {action} this settlement"),
            )

        if settlement.status != expected:
            return TransitionResult(
                False, settlement,
                StateGuardError(
                    f"Cannot {action} a settlement that is {settlement.status.value}"
                ),
            )

        logger.info(
            "Settlement %s: %s attempt by %s (amount=%s, round=%s)",
            settlement_id, action, actor_id, settlement.amount, settlement.round_id,
        )
        updated = await self._repo.compare_and_set(settlement_id, expected, status=target, **fields)
        if updated is None:
            logger.warning("Settlement %s: %s lost a race, already updated", settlement_id, action)
            current = await self._repo.get(settlement_id)
            return TransitionResult(
                False, current,
                StateGuardError("Settlement was already updated by another request"),
            )

        logger.info("Settlement %s: %s -> %s", settlement_id, expected.value, target.value)
        return TransitionResult(True, updated)

    # ================================================================
    # Create
    # ================================================================

    async def create_settlement(self, round_id: Optional[str], from_user_id: str, to_user_id: str, amount) -> Settlement:
        settlement = await self._repo.create(self._build(round_id, from_user_id, to_user_id, amount))
        logger.info(
            "Settlement %s created: %s owes %s %s",
            settlement.id, from_user_id, to_user_id, settlement.amount,
        )
        return settlement

    async def create_round_settlements(
        self,
        round_id: str,
        transfers: Sequence[Transfer],
        names: Optional[Mapping[str, str]] = None,
    ) -> List[Settlement]:
        """Create every settlement for a round in one step and tell both
        sides of each one what they owe or are owed."""
        pending = [self._build(round_id, t.from_user_id, t.to_user_id, t.amount) for t in transfers]
        created = await self._repo.create_many(round_id, pending)
        logger.info(
            "Round %s finalized: %d settlements totalling %s",
            round_id, len(created), sum((s.amount for s in created), Decimal("0")),
        )

        names = names or {}
        for settlement in created:
            await self._notify(settlement_update(
                settlement.from_user_id,
                names.get(settlement.to_user_id, DEFAULT_NAME),
                settlement.amount, True, round_id,
            ))
            await self._notify(settlement_update(
                settlement.to_user_id,
                names.get(settlement.from_user_id, DEFAULT_NAME),
                settlement.amount, False, round_id,
            ))
        return created

    # ================================================================
    # Read
    # ================================================================

    async def get_settlement(self, settlement_id: str) -> Settlement:
        settlement = await self._repo.get(settlement_id)
        if settlement is None:
            raise NotFoundError(f"Settlement {settlement_id} not found")
        return settlement

    async def list_round_settlements(self, round_id: str) -> List[Settlement]:
        return await self._repo.list_for_round(round_id)

    async def list_user_settlements(self, user_id: str) -> List[Settlement]:
        return await self._repo.list_for_user(user_id)

    # ================================================================
    # Transitions
    # ================================================================

    async def mark_paid(self, settlement_id: str, actor_id: str, payer_name: Optional[str] = None) -> TransitionResult:
        """Payer says the money went out. The payee is notified once."""
        result = await self._transition(
            settlement_id, actor_id,
            action="mark paid",
            party="payer",
            expected=SettlementStatus.PENDING,
            target=SettlementStatus.PAID,
            paid_at=self._clock(),
        )
        if result.ok:
            await self._notify(payment_sent(result.settlement, payer_name or DEFAULT_NAME))
        return result

    async def confirm_receipt(self, settlement_id: str, actor_id: str) -> TransitionResult:
        return await self._transition(
            settlement_id, actor_id,
            action="confirm",
            party="payee",
            expected=SettlementStatus.PAID,
            target=SettlementStatus.SETTLED,
            confirmed_at=self._clock(),
        )

    async def dispute(self, settlement_id: str, actor_id: str, reason: Optional[str] = None) -> TransitionResult:
        """Payee says the money never arrived. Terminal."""
        return await self._transition(
            settlement_id, actor_id,
            action="dispute",
            party="payee",
            expected=SettlementStatus.PAID,
            target=SettlementStatus.DISPUTED,
            disputed_at=self._clock(),
            dispute_reason=reason,
        )
