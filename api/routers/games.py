"""Game calculation endpoints. Pure computation, nothing is stored."""

from fastapi import APIRouter, HTTPException

from api.schemas import GameResultRequest, RoundResultsRequest, RoundResultsResponse
from games import (
    GameCalculationError,
    InvalidInputError,
    compute_game_result,
    compute_round_results,
    plan_transfers,
)
from models import GameInput

router = APIRouter()


@router.post("/results")
async def game_result(req: GameResultRequest):
    try:
        return compute_game_result(
            req.game_type,
            GameInput(
                players=req.players,
                holes=req.holes,
                bet_amount=req.bet_amount,
                options=req.options,
            ),
        )
    except InvalidInputError as e:
        raise HTTPException(422, str(e))


@router.post("/round-results", response_model=RoundResultsResponse)
async def round_results(req: RoundResultsRequest):
    """All games on a round, their net positions, and the payments that would clear them."""
    try:
        results = compute_round_results(req.players, req.holes, req.games)
        transfers = plan_transfers(results.net_positions)
    except InvalidInputError as e:
        raise HTTPException(422, str(e))
    except GameCalculationError as e:
        raise HTTPException(400, str(e))
    return RoundResultsResponse(results=results, transfers=transfers)
