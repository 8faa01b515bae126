"""Dispatch a game type to its calculator."""

import logging
from typing import Any, Callable, Dict, Union

from pydantic import ValidationError

from models import GameInput, GameType
from models.games import OPTIONS_BY_TYPE
from models.results import GameResult
from games.banker import calculate_banker
from games.bingo_bango_bongo import calculate_bingo_bango_bongo
from games.common import resolve_options
from games.exceptions import InvalidInputError
from games.match_play import calculate_match_play
from games.nassau import calculate_nassau
from games.nines import calculate_nines
from games.skins import calculate_skins
from games.snake import calculate_snake
from games.stableford import calculate_stableford
from games.vegas import calculate_vegas
from games.wolf import calculate_wolf

logger = logging.getLogger(__name__)

CALCULATORS: Dict[GameType, Callable[..., GameResult]] = {
    GameType.NASSAU: calculate_nassau,
    GameType.SKINS: calculate_skins,
    GameType.MATCH_PLAY: calculate_match_play,
    GameType.WOLF: calculate_wolf,
    GameType.NINES: calculate_nines,
    GameType.STABLEFORD: calculate_stableford,
    GameType.BINGO_BANGO_BONGO: calculate_bingo_bango_bongo,
    GameType.VEGAS: calculate_vegas,
    GameType.SNAKE: calculate_snake,
    GameType.BANKER: calculate_banker,
}


def parse_game_type(game_type: Union[str, GameType]) -> GameType:
    if isinstance(game_type, GameType):
        return game_type
    try:
        return GameType(str(game_type).upper())
    except ValueError:
        raise InvalidInputError(f"Unknown game type: {game_type}")


def compute_game_result(game_type: Union[str, GameType], game_input: Union[GameInput, Dict[str, Any]]) -> GameResult:
    """Run one calculator. Unknown types and malformed input raise InvalidInputError."""
    game_type = parse_game_type(game_type)

    if isinstance(game_input, dict):
        try:
            game_input = GameInput.model_validate(game_input)
        except ValidationError as e:
            raise InvalidInputError(f"Invalid game input: {e.errors()[0]['msg']}") from e

    options = resolve_options(game_input.options, OPTIONS_BY_TYPE[game_type])
    logger.debug("Calculating %s for %d players", game_type.value, len(game_input.players))
    return CALCULATORS[game_type](
        game_input.players,
        game_input.holes,
        game_input.bet_amount,
        options,
    )
