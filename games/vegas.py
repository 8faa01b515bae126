"""Vegas: two teams of two combine their gross scores into a two-digit number.

Handicaps do not apply; a stroke would shift a whole digit.
"""

from decimal import Decimal
from typing import Optional, Sequence

from models import Hole, Player
from models.games import VegasOptions
from models.money import split_evenly, to_cents
from models.results import MoneyStanding, VegasHole, VegasResult, VegasTeamResult
from games.common import all_scored, gross_scores, resolve_options, scores_on_hole, validate_round
from games.exceptions import InvalidInputError


def team_number(first: int, second: int, *, flip_threshold: int = 10, flipped: bool = False) -> int:
    """Low score leads (4 and 5 -> 45). A blow-up at or above the threshold,
    or a flip forced by the other team, puts the high score first (4 and 10 -> 104)."""
    low, high = sorted((first, second))
    if flipped or high >= flip_threshold:
        return int(f"{high}{low}")
    return int(f"{low}{high}")


def calculate_vegas(
    players: Sequence[Player],
    holes: Sequence[Hole],
    bet_amount: Decimal,
    options: Optional[VegasOptions] = None,
) -> VegasResult:
    options = resolve_options(options, VegasOptions)
    validate_round(players, holes, game="Vegas", min_players=4, max_players=4)

    ids = [p.id for p in players]
    teams = {team.team_number: team for team in options.teams}
    if len(options.teams) != 2 or set(teams) != {1, 2}:
        raise InvalidInputError("Vegas requires team 1 and team 2")
    members = teams[1].player_ids + teams[2].player_ids
    if sorted(members) != sorted(ids):
        raise InvalidInputError("Vegas teams must contain each player exactly once")

    table = gross_scores(players, holes)
    total_diff = 0
    hole_results = []
    for hole in sorted(holes, key=lambda h: h.number):
        scores = scores_on_hole(table, ids, hole.number)
        if not all_scored(scores):
            hole_results.append(VegasHole(hole=hole.number))
            continue

        t1 = [scores[pid] for pid in teams[1].player_ids]
        t2 = [scores[pid] for pid in teams[2].player_ids]

        flip_t1 = flip_t2 = False
        if options.birdie_flip:
            t1_birdie = min(t1) < hole.par
            t2_birdie = min(t2) < hole.par
            flip_t2 = t1_birdie and not t2_birdie
            flip_t1 = t2_birdie and not t1_birdie

        t1_number = team_number(*t1, flip_threshold=options.flip_threshold, flipped=flip_t1)
        t2_number = team_number(*t2, flip_threshold=options.flip_threshold, flipped=flip_t2)
        diff = t2_number - t1_number
        total_diff += diff
        hole_results.append(VegasHole(
            hole=hole.number, team1_number=t1_number, team2_number=t2_number, diff=diff,
        ))

    bet = to_cents(bet_amount)
    team1_money = bet * total_diff
    team_money = {1: team1_money, 2: -team1_money}
    diffs = {1: total_diff, 2: -total_diff}

    per_player = {}
    for number in (1, 2):
        for pid, share in zip(teams[number].player_ids, split_evenly(team_money[number], 2)):
            per_player[pid] = share

    return VegasResult(
        bet_amount=bet,
        holes=hole_results,
        teams=[
            VegasTeamResult(
                team_number=number,
                player_ids=teams[number].player_ids,
                total_diff=diffs[number],
                money=team_money[number],
            )
            for number in (1, 2)
        ],
        standings=[MoneyStanding(player_id=pid, money=per_player[pid]) for pid in ids],
    )
