"""Game formats, their per-format options, and the calculator input contract."""

from decimal import Decimal
from enum import Enum
from pydantic import Field, model_validator
from typing import Any, Dict, List, Optional

from .base import BaseGolfModel
from .hole import Hole
from .player import Player


class GameType(str, Enum):
    """Wagering formats supported by the engine."""
    NASSAU = "NASSAU"
    SKINS = "SKINS"
    MATCH_PLAY = "MATCH_PLAY"
    WOLF = "WOLF"
    NINES = "NINES"
    STABLEFORD = "STABLEFORD"
    BINGO_BANGO_BONGO = "BINGO_BANGO_BONGO"
    VEGAS = "VEGAS"
    SNAKE = "SNAKE"
    BANKER = "BANKER"


class NetMode(str, Enum):
    """How handicap strokes are turned into per-hole allowances."""
    DIFFERENTIAL = "differential"  # play off the low handicap in the field
    FULL = "full"                  # every player gets their full course handicap


class PressSegment(str, Enum):
    FRONT = "FRONT"
    BACK = "BACK"
    OVERALL = "OVERALL"
    MATCH = "MATCH"


class Press(BaseGolfModel):
    """A new side match started mid-segment, optionally pressed again."""
    segment: PressSegment
    start_hole: int = Field(..., ge=1, le=18)
    initiated_by: str
    multiplier: Decimal = Field(Decimal("1"), gt=0)
    children: List["Press"] = Field(default_factory=list)


class WolfDecision(BaseGolfModel):
    hole_number: int = Field(..., ge=1, le=18)
    wolf_id: str
    partner_id: Optional[str] = None
    is_lone_wolf: bool = False
    is_blind: bool = False

    @model_validator(mode='after')
    def validate_partnership(self):
        if self.partner_id is not None and self.partner_id == self.wolf_id:
            raise ValueError("Wolf cannot pick themselves as partner")
        if self.is_lone_wolf and self.partner_id is not None:
            raise ValueError("A lone wolf cannot have a partner")
        if not self.is_lone_wolf and self.partner_id is None:
            raise ValueError("Wolf must pick a partner or go lone wolf")
        if self.is_blind and not self.is_lone_wolf:
            raise ValueError("Only a lone wolf can be blind")
        return self


class VegasTeam(BaseGolfModel):
    team_number: int = Field(..., ge=1, le=2)
    player1_id: str
    player2_id: str

    @model_validator(mode='after')
    def validate_members(self):
        if self.player1_id == self.player2_id:
            raise ValueError("Vegas team needs two different players")
        return self

    @property
    def player_ids(self) -> List[str]:
        return [self.player1_id, self.player2_id]


class BingoBangoBongoPoint(BaseGolfModel):
    """Externally recorded attributions for one hole."""
    hole_number: int = Field(..., ge=1, le=18)
    bingo_id: Optional[str] = None  # first on the green
    bango_id: Optional[str] = None  # closest to the pin once all are on
    bongo_id: Optional[str] = None  # first in the hole


class BankerDecision(BaseGolfModel):
    hole_number: int = Field(..., ge=1, le=18)
    banker_id: str


# ================================================================
# Per-format options
# ================================================================

class GameOptions(BaseGolfModel):
    """Options shared by every format."""
    use_handicaps: bool = True
    net_mode: NetMode = NetMode.DIFFERENTIAL


class NassauOptions(GameOptions):
    presses: List[Press] = Field(default_factory=list)


class SkinsOptions(GameOptions):
    carryover: bool = True


class MatchPlayOptions(GameOptions):
    presses: List[Press] = Field(default_factory=list)


class WolfOptions(GameOptions):
    decisions: List[WolfDecision] = Field(default_factory=list)
    lone_wolf_multiplier: Decimal = Field(Decimal("2"), gt=0)
    blind_wolf_multiplier: Decimal = Field(Decimal("3"), gt=0)


class NinesOptions(GameOptions):
    pass


class StablefordOptions(GameOptions):
    pass


class BingoBangoBongoOptions(GameOptions):
    points: List[BingoBangoBongoPoint] = Field(default_factory=list)


class VegasOptions(GameOptions):
    teams: List[VegasTeam] = Field(default_factory=list)
    flip_threshold: int = Field(10, ge=2)
    birdie_flip: bool = False


class SnakeOptions(GameOptions):
    pass


class BankerOptions(GameOptions):
    decisions: List[BankerDecision] = Field(default_factory=list)


OPTIONS_BY_TYPE = {
    GameType.NASSAU: NassauOptions,
    GameType.SKINS: SkinsOptions,
    GameType.MATCH_PLAY: MatchPlayOptions,
    GameType.WOLF: WolfOptions,
    GameType.NINES: NinesOptions,
    GameType.STABLEFORD: StablefordOptions,
    GameType.BINGO_BANGO_BONGO: BingoBangoBongoOptions,
    GameType.VEGAS: VegasOptions,
    GameType.SNAKE: SnakeOptions,
    GameType.BANKER: BankerOptions,
}


# ================================================================
# Calculator / aggregator inputs
# ================================================================

class GameInput(BaseGolfModel):
    """Everything a single calculator consumes."""
    players: List[Player]
    holes: List[Hole]
    bet_amount: Decimal = Field(..., ge=0)
    options: Optional[Any] = None


class GameConfig(BaseGolfModel):
    """One game configured on a round."""
    game_type: GameType
    bet_amount: Decimal = Field(..., ge=0)
    key: Optional[str] = None
    point_rate: Optional[Decimal] = Field(None, ge=0)
    participant_ids: List[str] = Field(default_factory=list)
    options: Dict[str, Any] = Field(default_factory=dict)
