"""Nassau: three two-player matches (front nine, back nine, overall)."""

from decimal import Decimal
from typing import Optional, Sequence

from models import Hole, Player, PressSegment
from models.games import NassauOptions
from models.money import ZERO, to_cents
from models.results import MoneyStanding, NassauResult
from games.common import net_scores, resolve_options, validate_round
from games.match import press_money, press_results, segment_result


def calculate_nassau(
    players: Sequence[Player],
    holes: Sequence[Hole],
    bet_amount: Decimal,
    options: Optional[NassauOptions] = None,
) -> NassauResult:
    """Each segment is worth ``bet_amount`` to whoever leads it; ties push."""
    options = resolve_options(options, NassauOptions)
    validate_round(players, holes, game="Nassau", min_players=2, max_players=2)

    p1, p2 = players[0].id, players[1].id
    table = net_scores(players, holes, options)

    front = segment_result(table, p1, p2, 1, 9)
    back = segment_result(table, p1, p2, 10, 18)
    overall = segment_result(table, p1, p2, 1, 18)

    bet = to_cents(bet_amount)
    money = {p1: ZERO, p2: ZERO}
    for segment in (front, back, overall):
        if segment.winner_id:
            money[segment.winner_id] += bet
            money[segment.loser_id] -= bet

    presses = press_results(
        table, p1, p2, options.presses, bet,
        allowed=(PressSegment.FRONT, PressSegment.BACK, PressSegment.OVERALL),
    )
    press_money(presses, money)

    return NassauResult(
        bet_amount=bet,
        front=front,
        back=back,
        overall=overall,
        presses=presses,
        standings=[MoneyStanding(player_id=pid, money=money[pid]) for pid in (p1, p2)],
    )
