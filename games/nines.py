"""Nines: nine points split on every hole by net-score order."""

from decimal import Decimal
from typing import Optional, Sequence

from models import Hole, Player
from models.games import NinesOptions
from models.money import ZERO, split_evenly
from models.results import NinesHole, NinesResult, NinesStanding
from games.common import all_scored, net_scores, resolve_options, scores_on_hole, validate_round

POINTS_PER_HOLE = 9

# Points for 1st, 2nd, ... place by field size; each row sums to 9.
DISTRIBUTIONS = {
    2: [6, 3],
    3: [5, 3, 1],
    4: [5, 3, 1, 0],
}


def calculate_nines(
    players: Sequence[Player],
    holes: Sequence[Hole],
    bet_amount: Decimal,
    options: Optional[NinesOptions] = None,
) -> NinesResult:
    """Tied places pool their points and split them to the cent, so a hole
    everyone finished always awards exactly 9."""
    options = resolve_options(options, NinesOptions)
    validate_round(players, holes, game="Nines")

    ids = [p.id for p in players]
    table = net_scores(players, holes, options)
    distribution = DISTRIBUTIONS[len(ids)]

    front = {pid: ZERO for pid in ids}
    back = {pid: ZERO for pid in ids}
    hole_results = []

    for hole in sorted(holes, key=lambda h: h.number):
        scores = scores_on_hole(table, ids, hole.number)
        if not all_scored(scores):
            hole_results.append(NinesHole(hole=hole.number, net_scores=scores))
            continue

        ranked = sorted(ids, key=lambda pid: scores[pid])
        points = {}
        i = 0
        while i < len(ranked):
            j = i + 1
            while j < len(ranked) and scores[ranked[j]] == scores[ranked[i]]:
                j += 1
            pooled = sum(distribution[i:j])
            for pid, share in zip(ranked[i:j], split_evenly(pooled, j - i)):
                points[pid] = share
            i = j

        bucket = front if hole.is_front_nine else back
        for pid in ids:
            bucket[pid] += points[pid]

        hole_results.append(NinesHole(
            hole=hole.number,
            net_scores=scores,
            points={pid: points[pid] for pid in ids},
        ))

    return NinesResult(
        bet_amount=bet_amount,
        holes=hole_results,
        standings=[
            NinesStanding(player_id=pid, front=front[pid], back=back[pid], total=front[pid] + back[pid])
            for pid in ids
        ],
    )
