"""Input validation and net-score lookup shared by every calculator."""

from typing import Dict, Iterable, List, Optional, Sequence, Type, TypeVar

from pydantic import ValidationError

from models import GameOptions, Hole, Player
from games.exceptions import InvalidInputError
from games.handicap import HOLES_PER_ROUND, stroke_table

FRONT_NINE = range(1, 10)
BACK_NINE = range(10, 19)

OptionsT = TypeVar("OptionsT", bound=GameOptions)

NetScores = Dict[str, Dict[int, Optional[int]]]


def validate_round(
    players: Sequence[Player],
    holes: Sequence[Hole],
    *,
    game: str,
    min_players: int = 2,
    max_players: int = 4,
) -> None:
    """Raise InvalidInputError unless the round is well formed for this game."""
    if len(holes) != HOLES_PER_ROUND:
        raise InvalidInputError(f"{game} requires {HOLES_PER_ROUND} holes, got {len(holes)}")

    numbers = sorted(h.number for h in holes)
    if numbers != list(range(1, HOLES_PER_ROUND + 1)):
        raise InvalidInputError("Hole numbers must be exactly 1-18")
    ranks = sorted(h.handicap_rank for h in holes)
    if ranks != list(range(1, HOLES_PER_ROUND + 1)):
        raise InvalidInputError("Hole handicap ranks must be unique and cover 1-18")

    if not min_players <= len(players) <= max_players:
        if min_players == max_players:
            expected = f"exactly {min_players}"
        else:
            expected = f"{min_players}-{max_players}"
        raise InvalidInputError(f"{game} requires {expected} players, got {len(players)}")

    ids = [p.id for p in players]
    if len(set(ids)) != len(ids):
        raise InvalidInputError("Player ids must be unique")

    for player in players:
        hole_numbers = [s.hole_number for s in player.scores]
        if len(set(hole_numbers)) != len(hole_numbers):
            raise InvalidInputError(f"Player {player.id} has more than one score for a hole")
        for score in player.scores:
            if score.strokes is not None and score.strokes < 1:
                raise InvalidInputError(f"Player {player.id} has invalid strokes on hole {score.hole_number}")
            if score.putts is not None and score.putts < 0:
                raise InvalidInputError(f"Player {player.id} has invalid putts on hole {score.hole_number}")


def ensure_known(player_ids: Iterable[str], referenced: Iterable[Optional[str]], what: str) -> None:
    """Every referenced id must belong to a player in the game."""
    known = set(player_ids)
    for pid in referenced:
        if pid is not None and pid not in known:
            raise InvalidInputError(f"{what} references unknown player {pid}")


def resolve_options(options, options_cls: Type[OptionsT]) -> OptionsT:
    """Accept None, a dict, or the right options model; anything else is invalid."""
    if options is None:
        return options_cls()
    if isinstance(options, options_cls):
        return options
    if isinstance(options, dict):
        try:
            return options_cls.model_validate(options)
        except ValidationError as e:
            raise InvalidInputError(f"Invalid {options_cls.__name__}: {e.errors()[0]['msg']}") from e
    raise InvalidInputError(
        f"Expected {options_cls.__name__}, got {type(options).__name__}"
    )


def net_scores(players: Sequence[Player], holes: Sequence[Hole], options: GameOptions) -> NetScores:
    """player id -> hole number -> net score (None when the hole is unplayed)."""
    strokes = stroke_table(
        players, holes,
        use_handicaps=options.use_handicaps,
        net_mode=options.net_mode,
    )
    table: NetScores = {}
    for player in players:
        gross = player.strokes_by_hole()
        allocation = strokes[player.id]
        table[player.id] = {
            hole.number: (
                gross[hole.number] - allocation[hole.number]
                if gross.get(hole.number) is not None else None
            )
            for hole in holes
        }
    return table


def gross_scores(players: Sequence[Player], holes: Sequence[Hole]) -> NetScores:
    """Same shape as net_scores, with no strokes taken off."""
    table: NetScores = {}
    for player in players:
        gross = player.strokes_by_hole()
        table[player.id] = {hole.number: gross.get(hole.number) for hole in holes}
    return table


def scores_on_hole(table: NetScores, player_ids: Sequence[str], hole_number: int) -> Dict[str, Optional[int]]:
    return {pid: table[pid][hole_number] for pid in player_ids}


def all_scored(scores: Dict[str, Optional[int]]) -> bool:
    return all(value is not None for value in scores.values())


def hole_numbers(holes: Sequence[Hole]) -> List[int]:
    return sorted(h.number for h in holes)
