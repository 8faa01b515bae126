"""Banker: the banker on each hole plays a separate net match against every
other player."""

from decimal import Decimal
from typing import Optional, Sequence

from models import Hole, Player
from models.games import BankerOptions
from models.money import ZERO, to_cents
from models.results import BankerHole, BankerMatchup, BankerResult, MoneyStanding
from games.common import ensure_known, net_scores, resolve_options, validate_round
from games.exceptions import InvalidInputError


def calculate_banker(
    players: Sequence[Player],
    holes: Sequence[Hole],
    bet_amount: Decimal,
    options: Optional[BankerOptions] = None,
) -> BankerResult:
    """Holes without a recorded banker rotate through the players in order."""
    options = resolve_options(options, BankerOptions)
    validate_round(players, holes, game="Banker")

    ids = [p.id for p in players]
    bankers = {}
    for decision in options.decisions:
        if decision.hole_number in bankers:
            raise InvalidInputError(f"More than one banker for hole {decision.hole_number}")
        ensure_known(ids, (decision.banker_id,), "Banker decision")
        bankers[decision.hole_number] = decision.banker_id

    table = net_scores(players, holes, options)
    bet = to_cents(bet_amount)
    money = {pid: ZERO for pid in ids}
    hole_results = []

    for hole in sorted(holes, key=lambda h: h.number):
        banker = bankers.get(hole.number, ids[(hole.number - 1) % len(ids)])
        result = BankerHole(hole=hole.number, banker_id=banker)
        banker_net = table[banker][hole.number]

        if banker_net is not None:
            for opponent in ids:
                opponent_net = table[opponent][hole.number]
                if opponent == banker or opponent_net is None:
                    continue
                if banker_net < opponent_net:
                    delta = bet
                elif banker_net > opponent_net:
                    delta = -bet
                else:
                    delta = ZERO
                money[banker] += delta
                money[opponent] -= delta
                result.matchups.append(BankerMatchup(
                    opponent_id=opponent,
                    banker_net=banker_net,
                    opponent_net=opponent_net,
                    banker_money=delta,
                ))

        hole_results.append(result)

    return BankerResult(
        bet_amount=bet,
        holes=hole_results,
        standings=[MoneyStanding(player_id=pid, money=money[pid]) for pid in ids],
    )
