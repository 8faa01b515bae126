"""Settlement endpoints: finalize a round, then payer marks paid and payee confirms."""

import logging
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_actor_id, get_app_settings, get_settlement_service
from api.schemas import DisputeRequest, FinalizeRoundRequest, FinalizeRoundResponse, MarkPaidRequest
from config import Settings
from database.exceptions import DatabaseError
from games import (
    GameCalculationError,
    InvalidInputError,
    SettlementLimitError,
    check_settlement_limits,
    compute_round_results,
    plan_transfers,
)
from models import Settlement
from settlements import (
    AuthorizationError,
    DuplicateSettlementError,
    InvalidSettlementError,
    NotFoundError,
    SettlementError,
    SettlementService,
    StateGuardError,
    TransitionResult,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def to_http_error(error: Exception) -> HTTPException:
    if isinstance(error, NotFoundError):
        return HTTPException(404, str(error))
    if isinstance(error, AuthorizationError):
        return HTTPException(403, str(error))
    if isinstance(error, (InvalidInputError, InvalidSettlementError)):
        return HTTPException(422, str(error))
    if isinstance(error, (StateGuardError, DuplicateSettlementError, GameCalculationError, SettlementError)):
        return HTTPException(400, str(error))
    return HTTPException(500, "Unexpected error")


def unwrap(result: TransitionResult) -> Settlement:
    if not result.ok:
        raise to_http_error(result.error)
    return result.settlement


@router.post("/rounds/{round_id}", response_model=FinalizeRoundResponse)
async def finalize_round(
    round_id: str,
    req: FinalizeRoundRequest,
    service: SettlementService = Depends(get_settlement_service),
    settings: Settings = Depends(get_app_settings),
):
    try:
        results = compute_round_results(req.players, req.holes, req.games)
        transfers = plan_transfers(results.net_positions)
        check_settlement_limits(
            transfers,
            settings.max_individual_settlement,
            settings.max_total_settlement,
        )
        created = await service.create_round_settlements(round_id, transfers, req.names)
    except SettlementLimitError as e:
        logger.warning("Round %s rejected: %s", round_id, e)
        raise HTTPException(400, str(e))
    except (GameCalculationError, SettlementError) as e:
        raise to_http_error(e)
    except DatabaseError as e:
        raise HTTPException(400, str(e))

    return FinalizeRoundResponse(
        results=results,
        settlements=created,
        total_amount=sum((s.amount for s in created), Decimal("0")),
    )


@router.get("/rounds/{round_id}", response_model=List[Settlement])
async def round_settlements(
    round_id: str,
    service: SettlementService = Depends(get_settlement_service),
):
    return await service.list_round_settlements(round_id)


@router.get("/mine", response_model=List[Settlement])
async def my_settlements(
    actor_id: str = Depends(get_actor_id),
    service: SettlementService = Depends(get_settlement_service),
):
    return await service.list_user_settlements(actor_id)


@router.get("/{settlement_id}", response_model=Settlement)
async def get_settlement(
    settlement_id: str,
    service: SettlementService = Depends(get_settlement_service),
):
    try:
        return await service.get_settlement(settlement_id)
    except NotFoundError as e:
        raise HTTPException(404, str(e))


@router.patch("/{settlement_id}/paid", response_model=Settlement)
async def mark_paid(
    settlement_id: str,
    req: MarkPaidRequest = MarkPaidRequest(),
    actor_id: str = Depends(get_actor_id),
    service: SettlementService = Depends(get_settlement_service),
):
    """Step 1 of 2: the payer says the money went out."""
    return unwrap(await service.mark_paid(settlement_id, actor_id, req.payer_name))


@router.patch("/{settlement_id}/confirm", response_model=Settlement)
async def confirm_receipt(
    settlement_id: str,
    actor_id: str = Depends(get_actor_id),
    service: SettlementService = Depends(get_settlement_service),
):
    """Step 2 of 2: the payee confirms the money arrived."""
    return unwrap(await service.confirm_receipt(settlement_id, actor_id))


@router.patch("/{settlement_id}/dispute", response_model=Settlement)
async def dispute(
    settlement_id: str,
    req: DisputeRequest = DisputeRequest(),
    actor_id: str = Depends(get_actor_id),
    service: SettlementService = Depends(get_settlement_service),
):
    return unwrap(await service.dispute(settlement_id, actor_id, req.reason))
