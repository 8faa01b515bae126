from .base import BaseGolfModel
from .games import (
    BankerDecision,
    BingoBangoBongoPoint,
    GameConfig,
    GameInput,
    GameOptions,
    GameType,
    NetMode,
    Press,
    PressSegment,
    VegasTeam,
    WolfDecision,
)
from .hole import Hole
from .hole_score import HoleScore
from .player import Player
from .results import GameResult, PressResult
from .settlement import Settlement, SettlementStatus, Transfer

# Resolve self-references (nested presses) once at import time.
Press.model_rebuild()
PressResult.model_rebuild()

__all__ = [
    "BaseGolfModel",
    "BankerDecision",
    "BingoBangoBongoPoint",
    "GameConfig",
    "GameInput",
    "GameOptions",
    "GameResult",
    "GameType",
    "Hole",
    "HoleScore",
    "NetMode",
    "Player",
    "Press",
    "PressResult",
    "PressSegment",
    "Settlement",
    "SettlementStatus",
    "Transfer",
    "VegasTeam",
    "WolfDecision",
]
