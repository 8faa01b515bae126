"""Per-format result structures produced by the game calculators.

Every result can be projected to money with ``money_by_player(rate)``. Money
formats ignore the rate; points formats (Wolf, Nines) return None unless a
rate is supplied.
"""

from decimal import Decimal
from enum import Enum
from pydantic import BaseModel, Field
from typing import Annotated, ClassVar, Dict, List, Literal, Optional, Union

from .games import GameType, PressSegment
from .money import allocate_cents, differential_money

ZERO = Decimal("0")


class GameResult(BaseModel):
    """Base for all format results."""
    game_type: GameType
    bet_amount: Decimal

    points_only: ClassVar[bool] = False

    def money_by_player(self, rate: Optional[Decimal] = None) -> Optional[Dict[str, Decimal]]:
        return {s.player_id: s.money for s in self.standings}


class MoneyStanding(BaseModel):
    player_id: str
    money: Decimal = ZERO


# ================================================================
# Nassau / Match Play
# ================================================================

class SegmentStatus(str, Enum):
    WON = "WON"
    TIE = "TIE"
    NOT_STARTED = "NOT_STARTED"


class PressStatus(str, Enum):
    WON = "WON"
    LOST = "LOST"
    PUSHED = "PUSHED"


class MatchSegment(BaseModel):
    start_hole: int
    end_hole: int
    winner_id: Optional[str] = None
    loser_id: Optional[str] = None
    margin: int = 0
    status: SegmentStatus
    holes_played: int = 0
    holes_remaining: int = 0
    summary: str


class PressResult(BaseModel):
    segment: PressSegment
    start_hole: int
    end_hole: int
    initiated_by: str
    multiplier: Decimal
    amount: Decimal
    winner_id: Optional[str] = None
    loser_id: Optional[str] = None
    margin: int = 0
    status: PressStatus
    children: List["PressResult"] = Field(default_factory=list)


class NassauResult(GameResult):
    game_type: Literal[GameType.NASSAU] = GameType.NASSAU
    front: MatchSegment
    back: MatchSegment
    overall: MatchSegment
    presses: List[PressResult] = Field(default_factory=list)
    standings: List[MoneyStanding]


class MatchHole(BaseModel):
    hole: int
    net_scores: Dict[str, Optional[int]]
    winner_id: Optional[str] = None


class MatchPlayStanding(MoneyStanding):
    status: str


class MatchPlayResult(GameResult):
    game_type: Literal[GameType.MATCH_PLAY] = GameType.MATCH_PLAY
    holes: List[MatchHole]
    standings: List[MatchPlayStanding]
    match_status: str
    holes_up: int = 0  # from the first player's point of view
    presses: List[PressResult] = Field(default_factory=list)


# ================================================================
# Skins
# ================================================================

class Skin(BaseModel):
    hole: int
    winner_id: Optional[str] = None
    value: Decimal = ZERO
    carried: Decimal = ZERO


class SkinsStanding(MoneyStanding):
    skins_won: int = 0
    winnings: Decimal = ZERO


class SkinsResult(GameResult):
    game_type: Literal[GameType.SKINS] = GameType.SKINS
    skins: List[Skin]
    total_pot: Decimal
    total_won: Decimal
    carryover: Decimal
    standings: List[SkinsStanding]


# ================================================================
# Wolf
# ================================================================

class WolfHole(BaseModel):
    hole: int
    wolf_id: Optional[str] = None
    partner_id: Optional[str] = None
    is_lone_wolf: bool = False
    is_blind: bool = False
    wolf_team_score: Optional[int] = None
    other_team_score: Optional[int] = None
    winner: Optional[Literal["wolf", "pack"]] = None
    points: Dict[str, Decimal] = Field(default_factory=dict)


class WolfStanding(BaseModel):
    player_id: str
    points: Decimal = ZERO


class WolfResult(GameResult):
    game_type: Literal[GameType.WOLF] = GameType.WOLF
    holes: List[WolfHole]
    standings: List[WolfStanding]

    points_only: ClassVar[bool] = True

    def points_by_player(self) -> Dict[str, Decimal]:
        return {s.player_id: s.points for s in self.standings}

    def money_by_player(self, rate: Optional[Decimal] = None) -> Optional[Dict[str, Decimal]]:
        if rate is None:
            return None
        return allocate_cents({s.player_id: s.points * rate for s in self.standings})


# ================================================================
# Nines
# ================================================================

class NinesHole(BaseModel):
    hole: int
    net_scores: Dict[str, Optional[int]]
    points: Dict[str, Decimal] = Field(default_factory=dict)


class NinesStanding(BaseModel):
    player_id: str
    front: Decimal = ZERO
    back: Decimal = ZERO
    total: Decimal = ZERO


class NinesResult(GameResult):
    game_type: Literal[GameType.NINES] = GameType.NINES
    holes: List[NinesHole]
    standings: List[NinesStanding]

    points_only: ClassVar[bool] = True

    def points_by_player(self) -> Dict[str, Decimal]:
        return {s.player_id: s.total for s in self.standings}

    def money_by_player(self, rate: Optional[Decimal] = None) -> Optional[Dict[str, Decimal]]:
        if rate is None:
            return None
        return differential_money({s.player_id: s.total for s in self.standings}, rate)


# ================================================================
# Stableford
# ================================================================

class StablefordScore(BaseModel):
    player_id: str
    gross: Optional[int] = None
    net: Optional[int] = None
    points: int = 0


class StablefordHole(BaseModel):
    hole: int
    scores: List[StablefordScore]


class StablefordStanding(MoneyStanding):
    front: int = 0
    back: int = 0
    total: int = 0


class StablefordResult(GameResult):
    game_type: Literal[GameType.STABLEFORD] = GameType.STABLEFORD
    holes: List[StablefordHole]
    standings: List[StablefordStanding]


# ================================================================
# Bingo Bango Bongo
# ================================================================

class BingoBangoBongoHole(BaseModel):
    hole: int
    bingo_id: Optional[str] = None
    bango_id: Optional[str] = None
    bongo_id: Optional[str] = None


class BingoBangoBongoStanding(MoneyStanding):
    bingo: int = 0
    bango: int = 0
    bongo: int = 0
    total: int = 0


class BingoBangoBongoResult(GameResult):
    game_type: Literal[GameType.BINGO_BANGO_BONGO] = GameType.BINGO_BANGO_BONGO
    holes: List[BingoBangoBongoHole]
    standings: List[BingoBangoBongoStanding]


# ================================================================
# Vegas
# ================================================================

class VegasHole(BaseModel):
    hole: int
    team1_number: Optional[int] = None
    team2_number: Optional[int] = None
    diff: int = 0  # positive = team 1 won the hole by this many


class VegasTeamResult(BaseModel):
    team_number: int
    player_ids: List[str]
    total_diff: int = 0
    money: Decimal = ZERO


class VegasResult(GameResult):
    game_type: Literal[GameType.VEGAS] = GameType.VEGAS
    holes: List[VegasHole]
    teams: List[VegasTeamResult]
    standings: List[MoneyStanding]


# ================================================================
# Snake
# ================================================================

class ThreePutt(BaseModel):
    hole: int
    player_id: str


class SnakeStanding(MoneyStanding):
    three_putts: int = 0
    holds_snake: bool = False


class SnakeResult(GameResult):
    game_type: Literal[GameType.SNAKE] = GameType.SNAKE
    snake_holder_id: Optional[str] = None
    three_putt_history: List[ThreePutt]
    standings: List[SnakeStanding]


# ================================================================
# Banker
# ================================================================

class BankerMatchup(BaseModel):
    opponent_id: str
    banker_net: int
    opponent_net: int
    banker_money: Decimal  # signed, from the banker's side


class BankerHole(BaseModel):
    hole: int
    banker_id: str
    matchups: List[BankerMatchup] = Field(default_factory=list)


class BankerResult(GameResult):
    game_type: Literal[GameType.BANKER] = GameType.BANKER
    holes: List[BankerHole]
    standings: List[MoneyStanding]


AnyGameResult = Annotated[
    Union[
        NassauResult,
        SkinsResult,
        MatchPlayResult,
        WolfResult,
        NinesResult,
        StablefordResult,
        BingoBangoBongoResult,
        VegasResult,
        SnakeResult,
        BankerResult,
    ],
    Field(discriminator="game_type"),
]
