"""Snake: whoever three-putted last holds the snake and pays everyone."""

from decimal import Decimal
from typing import Optional, Sequence

from models import Hole, Player
from models.games import SnakeOptions
from models.money import ZERO, to_cents
from models.results import SnakeResult, SnakeStanding, ThreePutt
from games.common import resolve_options, validate_round

THREE_PUTT = 3


def calculate_snake(
    players: Sequence[Player],
    holes: Sequence[Hole],
    bet_amount: Decimal,
    options: Optional[SnakeOptions] = None,
) -> SnakeResult:
    """Only putts matter. Within a hole, later players in the group take the
    snake from earlier ones."""
    resolve_options(options, SnakeOptions)
    validate_round(players, holes, game="Snake")

    history = []
    holder = None
    for hole in sorted(holes, key=lambda h: h.number):
        for player in players:
            score = player.get_score(hole.number)
            if score is not None and score.putts is not None and score.putts >= THREE_PUTT:
                holder = player.id
                history.append(ThreePutt(hole=hole.number, player_id=player.id))

    bet = to_cents(bet_amount)
    standings = []
    for player in players:
        if holder is None:
            money = ZERO
        elif player.id == holder:
            money = -bet * (len(players) - 1)
        else:
            money = bet
        standings.append(SnakeStanding(
            player_id=player.id,
            three_putts=sum(1 for t in history if t.player_id == player.id),
            holds_snake=player.id == holder,
            money=money,
        ))

    return SnakeResult(
        bet_amount=bet,
        snake_holder_id=holder,
        three_putt_history=history,
        standings=standings,
    )
