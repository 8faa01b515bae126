"""Skins: the sole lowest net score on a hole wins the stake, ties carry."""

from decimal import Decimal
from typing import Optional, Sequence

from models import Hole, Player
from models.games import SkinsOptions
from models.money import ZERO, allocate_cents, to_cents
from models.results import Skin, SkinsResult, SkinsStanding
from games.common import all_scored, net_scores, resolve_options, scores_on_hole, validate_round


def calculate_skins(
    players: Sequence[Player],
    holes: Sequence[Hole],
    bet_amount: Decimal,
    options: Optional[SkinsOptions] = None,
) -> SkinsResult:
    """Pot is 18 * bet. Whatever is not won by the last hole stays as carryover,
    so ``total_won + carryover == total_pot`` always holds."""
    options = resolve_options(options, SkinsOptions)
    validate_round(players, holes, game="Skins")

    ids = [p.id for p in players]
    table = net_scores(players, holes, options)
    bet = to_cents(bet_amount)

    skins = []
    carry = ZERO
    dead = ZERO  # tied stakes when carryover is off
    for hole in sorted(holes, key=lambda h: h.number):
        value = bet + carry
        scores = scores_on_hole(table, ids, hole.number)

        winner = None
        if all_scored(scores):
            lowest = min(scores.values())
            lowest_ids = [pid for pid, net in scores.items() if net == lowest]
            if len(lowest_ids) == 1:
                winner = lowest_ids[0]

        if winner:
            skins.append(Skin(hole=hole.number, winner_id=winner, value=value, carried=carry))
            carry = ZERO
        else:
            skins.append(Skin(hole=hole.number, carried=carry))
            if options.carryover:
                carry = value
            else:
                dead += value

    winnings = {pid: ZERO for pid in ids}
    won_count = {pid: 0 for pid in ids}
    for skin in skins:
        if skin.winner_id:
            winnings[skin.winner_id] += skin.value
            won_count[skin.winner_id] += 1

    total_won = sum(winnings.values(), ZERO)
    share = total_won / len(ids)
    money = allocate_cents({pid: winnings[pid] - share for pid in ids})

    return SkinsResult(
        bet_amount=bet,
        skins=skins,
        total_pot=bet * len(holes),
        total_won=total_won,
        carryover=carry + dead,
        standings=[
            SkinsStanding(
                player_id=pid,
                skins_won=won_count[pid],
                winnings=winnings[pid],
                money=money[pid],
            )
            for pid in ids
        ],
    )
