"""Wolf: a rotating wolf picks a partner or goes alone against the pack.

Decisions are recorded outside the engine, one for every fully scored
hole. Points are exchanged per hole and always net to zero; turning them
into money is left to the caller's rate.
"""

from decimal import Decimal
from typing import Dict, Optional, Sequence

from models import Hole, Player
from models.games import WolfOptions
from models.money import ZERO
from models.results import WolfHole, WolfResult, WolfStanding
from games.common import all_scored, ensure_known, net_scores, resolve_options, scores_on_hole, validate_round
from games.exceptions import InvalidInputError


def _hole_points(
    ids: Sequence[str],
    wolf_side: Sequence[str],
    pack_side: Sequence[str],
    wolf_won: bool,
    stake: Decimal,
    lone: bool,
) -> Dict[str, Decimal]:
    points = {pid: ZERO for pid in ids}
    winners, losers = (wolf_side, pack_side) if wolf_won else (pack_side, wolf_side)
    if lone:
        # The lone wolf settles separately with every member of the pack.
        wolf = wolf_side[0]
        for opponent in pack_side:
            delta = stake if wolf_won else -stake
            points[wolf] += delta
            points[opponent] -= delta
        return points

    pot = stake * len(losers)
    for pid in losers:
        points[pid] -= stake
    for pid in winners:
        points[pid] += pot / len(winners)
    return points


def calculate_wolf(
    players: Sequence[Player],
    holes: Sequence[Hole],
    bet_amount: Decimal,
    options: Optional[WolfOptions] = None,
) -> WolfResult:
    options = resolve_options(options, WolfOptions)
    validate_round(players, holes, game="Wolf", min_players=3, max_players=4)

    ids = [p.id for p in players]
    decisions = {}
    for decision in options.decisions:
        if decision.hole_number in decisions:
            raise InvalidInputError(f"More than one wolf decision for hole {decision.hole_number}")
        ensure_known(ids, (decision.wolf_id, decision.partner_id), "Wolf decision")
        decisions[decision.hole_number] = decision

    table = net_scores(players, holes, options)
    totals = {pid: ZERO for pid in ids}
    hole_results = []

    for hole in sorted(holes, key=lambda h: h.number):
        decision = decisions.get(hole.number)
        scores = scores_on_hole(table, ids, hole.number)
        if decision is None:
            if all_scored(scores):
                raise InvalidInputError(f"Hole {hole.number} was played without a wolf decision")
            hole_results.append(WolfHole(hole=hole.number))
            continue

        result = WolfHole(
            hole=hole.number,
            wolf_id=decision.wolf_id,
            partner_id=decision.partner_id,
            is_lone_wolf=decision.is_lone_wolf,
            is_blind=decision.is_blind,
        )
        if not all_scored(scores):
            hole_results.append(result)
            continue

        wolf_side = [decision.wolf_id] if decision.is_lone_wolf else [decision.wolf_id, decision.partner_id]
        pack_side = [pid for pid in ids if pid not in wolf_side]
        result.wolf_team_score = min(scores[pid] for pid in wolf_side)
        result.other_team_score = min(scores[pid] for pid in pack_side)

        stake = bet_amount
        if decision.is_lone_wolf:
            multiplier = options.blind_wolf_multiplier if decision.is_blind else options.lone_wolf_multiplier
            stake = bet_amount * multiplier

        if result.wolf_team_score != result.other_team_score:
            wolf_won = result.wolf_team_score < result.other_team_score
            result.winner = "wolf" if wolf_won else "pack"
            result.points = _hole_points(ids, wolf_side, pack_side, wolf_won, stake, decision.is_lone_wolf)
            for pid, delta in result.points.items():
                totals[pid] += delta

        hole_results.append(result)

    return WolfResult(
        bet_amount=bet_amount,
        holes=hole_results,
        standings=[WolfStanding(player_id=pid, points=totals[pid]) for pid in ids],
    )
