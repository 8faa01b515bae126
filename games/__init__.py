from .aggregator import (
    RoundResults,
    check_settlement_limits,
    compute_round_results,
    plan_transfers,
)
from .exceptions import GameCalculationError, InvalidInputError, SettlementLimitError
from .handicap import allocate_strokes, playing_handicaps
from .registry import CALCULATORS, compute_game_result

__all__ = [
    "CALCULATORS",
    "GameCalculationError",
    "InvalidInputError",
    "RoundResults",
    "SettlementLimitError",
    "allocate_strokes",
    "check_settlement_limits",
    "compute_game_result",
    "compute_round_results",
    "plan_transfers",
    "playing_handicaps",
]
