"""Bingo Bango Bongo: three externally attributed points per hole."""

from decimal import Decimal
from typing import Optional, Sequence

from models import Hole, Player
from models.games import BingoBangoBongoOptions
from models.money import differential_money, to_cents
from models.results import BingoBangoBongoHole, BingoBangoBongoResult, BingoBangoBongoStanding
from games.common import ensure_known, resolve_options, validate_round
from games.exceptions import InvalidInputError

AWARDS = ("bingo", "bango", "bongo")


def calculate_bingo_bango_bongo(
    players: Sequence[Player],
    holes: Sequence[Hole],
    bet_amount: Decimal,
    options: Optional[BingoBangoBongoOptions] = None,
) -> BingoBangoBongoResult:
    """Bingo: first on the green. Bango: closest to the pin once all are on.
    Bongo: first in the hole. Who earned each is recorded on the course, not
    inferred from scores."""
    options = resolve_options(options, BingoBangoBongoOptions)
    validate_round(players, holes, game="Bingo Bango Bongo")

    ids = [p.id for p in players]
    by_hole = {}
    for point in options.points:
        if point.hole_number in by_hole:
            raise InvalidInputError(f"More than one Bingo Bango Bongo entry for hole {point.hole_number}")
        ensure_known(ids, (point.bingo_id, point.bango_id, point.bongo_id), "Bingo Bango Bongo point")
        by_hole[point.hole_number] = point

    counts = {pid: {award: 0 for award in AWARDS} for pid in ids}
    hole_results = []
    for hole in sorted(holes, key=lambda h: h.number):
        point = by_hole.get(hole.number)
        if point is None:
            hole_results.append(BingoBangoBongoHole(hole=hole.number))
            continue
        for award in AWARDS:
            winner = getattr(point, f"{award}_id")
            if winner is not None:
                counts[winner][award] += 1
        hole_results.append(BingoBangoBongoHole(
            hole=hole.number,
            bingo_id=point.bingo_id,
            bango_id=point.bango_id,
            bongo_id=point.bongo_id,
        ))

    bet = to_cents(bet_amount)
    totals = {pid: sum(counts[pid].values()) for pid in ids}
    money = differential_money(totals, bet)

    return BingoBangoBongoResult(
        bet_amount=bet,
        holes=hole_results,
        standings=[
            BingoBangoBongoStanding(
                player_id=pid,
                total=totals[pid],
                money=money[pid],
                **counts[pid],
            )
            for pid in ids
        ],
    )
