"""Combine every game on a round into per-player net positions, and plan the
payments that clear them."""

import logging
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, Field

from models import GameConfig, GameInput, Hole, Player, Transfer
from models.money import ZERO, to_cents
from models.results import AnyGameResult
from games.common import ensure_known
from games.exceptions import GameCalculationError, InvalidInputError, SettlementLimitError
from games.registry import compute_game_result

logger = logging.getLogger(__name__)

DEFAULT_MAX_INDIVIDUAL_SETTLEMENT = Decimal("50000")
DEFAULT_MAX_TOTAL_SETTLEMENT = Decimal("100000")


class RoundResults(BaseModel):
    results: Dict[str, AnyGameResult] = Field(default_factory=dict)
    net_positions: Dict[str, Decimal] = Field(default_factory=dict)
    points_only: Dict[str, Dict[str, Decimal]] = Field(default_factory=dict)
    excluded_from_net: List[str] = Field(default_factory=list)


def _result_key(config: GameConfig, used: Dict[str, int]) -> str:
    base = config.key or config.game_type.value.lower()
    count = used.get(base, 0) + 1
    used[base] = count
    return base if count == 1 else f"{base}_{count}"


def compute_round_results(
    players: Sequence[Player],
    holes: Sequence[Hole],
    games: Sequence[GameConfig],
) -> RoundResults:
    """Run every configured game and sum their money into net positions.

    Points-only games (Wolf, Nines) count toward the net only when the game
    carries a ``point_rate``; otherwise their points are reported separately.
    Any invalid game fails the whole round.
    """
    all_ids = [p.id for p in players]
    round_results = RoundResults(net_positions={pid: ZERO for pid in all_ids})
    used_keys: Dict[str, int] = {}

    for config in games:
        key = _result_key(config, used_keys)
        if key in round_results.results:
            raise InvalidInputError(f"Duplicate game key: {key}")

        if config.participant_ids:
            ensure_known(all_ids, config.participant_ids, f"Game {key}")
            wanted = set(config.participant_ids)
            game_players = [p for p in players if p.id in wanted]
        else:
            game_players = list(players)

        result = compute_game_result(
            config.game_type,
            GameInput(
                players=game_players,
                holes=list(holes),
                bet_amount=config.bet_amount,
                options=config.options or None,
            ),
        )
        round_results.results[key] = result

        money = result.money_by_player(config.point_rate)
        if money is None:
            round_results.points_only[key] = result.points_by_player()
            round_results.excluded_from_net.append(key)
            logger.info("Game %s has no point rate; excluded from net positions", key)
            continue

        for pid, amount in money.items():
            round_results.net_positions[pid] += amount

    return round_results


def plan_transfers(net_positions: Dict[str, Decimal]) -> List[Transfer]:
    """Greedy settle-up: the biggest debtor pays the biggest creditor until
    every position is cleared."""
    positions = {pid: to_cents(amount) for pid, amount in net_positions.items()}
    imbalance = sum(positions.values(), ZERO)
    if imbalance != ZERO:
        raise GameCalculationError(f"Net positions do not balance (off by {imbalance})")

    debtors = sorted(
        ([pid, -amount] for pid, amount in positions.items() if amount < 0),
        key=lambda item: (-item[1], item[0]),
    )
    creditors = sorted(
        ([pid, amount] for pid, amount in positions.items() if amount > 0),
        key=lambda item: (-item[1], item[0]),
    )

    transfers = []
    d = c = 0
    while d < len(debtors) and c < len(creditors):
        debtor, creditor = debtors[d], creditors[c]
        amount = min(debtor[1], creditor[1])
        transfers.append(Transfer(from_user_id=debtor[0], to_user_id=creditor[0], amount=amount))
        debtor[1] -= amount
        creditor[1] -= amount
        if debtor[1] == ZERO:
            d += 1
        if creditor[1] == ZERO:
            c += 1
    return transfers


def check_settlement_limits(
    transfers: Sequence[Transfer],
    max_individual: Optional[Decimal] = None,
    max_total: Optional[Decimal] = None,
) -> None:
    max_individual = DEFAULT_MAX_INDIVIDUAL_SETTLEMENT if max_individual is None else max_individual
    max_total = DEFAULT_MAX_TOTAL_SETTLEMENT if max_total is None else max_total

    for transfer in transfers:
        if transfer.amount > max_individual:
            raise SettlementLimitError(
                f"Settlement of {transfer.amount} from {transfer.from_user_id} "
                f"exceeds the maximum of {max_individual}"
            )
    total = sum((t.amount for t in transfers), ZERO)
    if total > max_total:
        raise SettlementLimitError(f"Round settlements total {total} exceeds the maximum of {max_total}")
