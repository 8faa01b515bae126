"""Match Play: one 18-hole, two-player net match paid per hole up."""

from decimal import Decimal
from typing import Optional, Sequence

from models import Hole, Player, PressSegment
from models.games import MatchPlayOptions
from models.money import to_cents
from models.results import MatchHole, MatchPlayResult, MatchPlayStanding
from games.common import net_scores, resolve_options, validate_round
from games.match import describe, head_to_head, press_money, press_results


def _match_status(p1_up: int, played: int, total: int) -> str:
    remaining = total - played
    if played == 0:
        return "Not started"
    if remaining == 0:
        return "HALVED" if p1_up == 0 else f"{abs(p1_up)} & 0"
    if abs(p1_up) > remaining:
        return f"{abs(p1_up)} & {remaining}"
    return f"{describe(p1_up)} thru {played}"


def calculate_match_play(
    players: Sequence[Player],
    holes: Sequence[Hole],
    bet_amount: Decimal,
    options: Optional[MatchPlayOptions] = None,
) -> MatchPlayResult:
    """Money is ``bet_amount`` per net hole up at the end (or at the current state)."""
    options = resolve_options(options, MatchPlayOptions)
    validate_round(players, holes, game="Match Play", min_players=2, max_players=2)

    p1, p2 = players[0].id, players[1].id
    table = net_scores(players, holes, options)

    hole_results = []
    for hole in sorted(holes, key=lambda h: h.number):
        p1_net = table[p1][hole.number]
        p2_net = table[p2][hole.number]
        winner = None
        if p1_net is not None and p2_net is not None:
            if p1_net < p2_net:
                winner = p1
            elif p2_net < p1_net:
                winner = p2
        hole_results.append(MatchHole(
            hole=hole.number,
            net_scores={p1: p1_net, p2: p2_net},
            winner_id=winner,
        ))

    p1_up, played = head_to_head(table, p1, p2, 1, 18)
    bet = to_cents(bet_amount)
    money = {p1: bet * p1_up, p2: bet * -p1_up}

    presses = press_results(table, p1, p2, options.presses, bet, allowed=(PressSegment.MATCH,))
    press_money(presses, money)

    return MatchPlayResult(
        bet_amount=bet,
        holes=hole_results,
        holes_up=p1_up,
        match_status=_match_status(p1_up, played, len(holes)),
        presses=presses,
        standings=[
            MatchPlayStanding(player_id=p1, status=describe(p1_up), money=money[p1]),
            MatchPlayStanding(player_id=p2, status=describe(-p1_up), money=money[p2]),
        ],
    )
