"""Request and response bodies for the HTTP API."""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from games import RoundResults
from models import GameConfig, Hole, Player, Settlement, Transfer


class GameResultRequest(BaseModel):
    """A single game, computed on its own."""
    game_type: str
    players: List[Player]
    holes: List[Hole]
    bet_amount: Decimal = Field(..., ge=0)
    options: Optional[Dict[str, Any]] = None


class RoundResultsRequest(BaseModel):
    players: List[Player]
    holes: List[Hole]
    games: List[GameConfig]


class RoundResultsResponse(BaseModel):
    results: RoundResults
    transfers: List[Transfer]


class FinalizeRoundRequest(RoundResultsRequest):
    """Compute every game and open the settlements that clear the round."""
    names: Dict[str, str] = Field(default_factory=dict)


class FinalizeRoundResponse(BaseModel):
    results: RoundResults
    settlements: List[Settlement]
    total_amount: Decimal


class MarkPaidRequest(BaseModel):
    payer_name: Optional[str] = None


class DisputeRequest(BaseModel):
    reason: Optional[str] = Field(None, max_length=500)
