"""Stableford: points for net score against par, paid against the field average."""

from decimal import Decimal
from typing import Optional, Sequence

from models import Hole, Player
from models.games import StablefordOptions
from models.money import differential_money, to_cents
from models.results import StablefordHole, StablefordResult, StablefordScore, StablefordStanding
from games.common import net_scores, resolve_options, validate_round


def stableford_points(net_to_par: int) -> int:
    """albatross or better 5, eagle 4, birdie 3, par 2, bogey 1, worse 0."""
    if net_to_par <= -3:
        return 5
    if net_to_par >= 2:
        return 0
    return 2 - net_to_par


def calculate_stableford(
    players: Sequence[Player],
    holes: Sequence[Hole],
    bet_amount: Decimal,
    options: Optional[StablefordOptions] = None,
) -> StablefordResult:
    options = resolve_options(options, StablefordOptions)
    validate_round(players, holes, game="Stableford")

    ids = [p.id for p in players]
    table = net_scores(players, holes, options)
    gross = {p.id: p.strokes_by_hole() for p in players}

    front = {pid: 0 for pid in ids}
    back = {pid: 0 for pid in ids}
    hole_results = []
    for hole in sorted(holes, key=lambda h: h.number):
        scores = []
        for pid in ids:
            net = table[pid][hole.number]
            points = stableford_points(net - hole.par) if net is not None else 0
            scores.append(StablefordScore(
                player_id=pid,
                gross=gross[pid].get(hole.number),
                net=net,
                points=points,
            ))
            if hole.is_front_nine:
                front[pid] += points
            else:
                back[pid] += points
        hole_results.append(StablefordHole(hole=hole.number, scores=scores))

    bet = to_cents(bet_amount)
    totals = {pid: front[pid] + back[pid] for pid in ids}
    money = differential_money(totals, bet)

    return StablefordResult(
        bet_amount=bet,
        holes=hole_results,
        standings=[
            StablefordStanding(
                player_id=pid,
                front=front[pid],
                back=back[pid],
                total=totals[pid],
                money=money[pid],
            )
            for pid in ids
        ],
    )
