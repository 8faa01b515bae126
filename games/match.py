"""Head-to-head hole-by-hole matches and presses (Nassau, Match Play)."""

from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from models import Press, PressSegment
from models.money import ZERO, to_cents
from models.results import MatchSegment, PressResult, PressStatus, SegmentStatus
from games.common import NetScores
from games.exceptions import InvalidInputError

SEGMENT_BOUNDS = {
    PressSegment.FRONT: (1, 9),
    PressSegment.BACK: (10, 18),
    PressSegment.OVERALL: (1, 18),
    PressSegment.MATCH: (1, 18),
}


def head_to_head(table: NetScores, p1: str, p2: str, start: int, end: int) -> Tuple[int, int]:
    """Return (holes p1 is up, holes both players scored) over start..end."""
    p1_up = 0
    played = 0
    for hole in range(start, end + 1):
        p1_net = table[p1][hole]
        p2_net = table[p2][hole]
        if p1_net is None or p2_net is None:
            continue
        played += 1
        if p1_net < p2_net:
            p1_up += 1
        elif p2_net < p1_net:
            p1_up -= 1
    return p1_up, played


def describe(p1_up: int) -> str:
    if p1_up > 0:
        return f"{p1_up} UP"
    if p1_up < 0:
        return f"{-p1_up} DOWN"
    return "AS"


def segment_result(table: NetScores, p1: str, p2: str, start: int, end: int) -> MatchSegment:
    p1_up, played = head_to_head(table, p1, p2, start, end)
    remaining = (end - start + 1) - played

    if played == 0:
        return MatchSegment(
            start_hole=start, end_hole=end,
            status=SegmentStatus.NOT_STARTED,
            holes_remaining=remaining,
            summary="No scores yet",
        )

    if remaining > 0:
        summary = f"{describe(p1_up)} ({remaining} to play)"
    else:
        summary = "TIED" if p1_up == 0 else f"{abs(p1_up)} & 0"

    winner, loser = None, None
    if p1_up > 0:
        winner, loser = p1, p2
    elif p1_up < 0:
        winner, loser = p2, p1

    return MatchSegment(
        start_hole=start,
        end_hole=end,
        winner_id=winner,
        loser_id=loser,
        margin=abs(p1_up),
        status=SegmentStatus.WON if winner else SegmentStatus.TIE,
        holes_played=played,
        holes_remaining=remaining,
        summary=summary,
    )


def press_results(
    table: NetScores,
    p1: str,
    p2: str,
    presses: Iterable[Press],
    bet_amount: Decimal,
    allowed: Iterable[PressSegment],
) -> List[PressResult]:
    """Settle presses (and presses of presses) from their start hole to the end of their segment."""
    allowed = set(allowed)
    results = []
    for press in presses:
        if press.segment not in allowed:
            raise InvalidInputError(f"Press segment {press.segment.value} not allowed here")
        if press.initiated_by not in (p1, p2):
            raise InvalidInputError(f"Press initiated by unknown player {press.initiated_by}")
        seg_start, seg_end = SEGMENT_BOUNDS[press.segment]
        if not seg_start <= press.start_hole <= seg_end:
            raise InvalidInputError(
                f"Press on {press.segment.value} cannot start on hole {press.start_hole}"
            )

        segment = segment_result(table, p1, p2, press.start_hole, seg_end)
        if segment.winner_id is None:
            status = PressStatus.PUSHED
        elif segment.winner_id == press.initiated_by:
            status = PressStatus.WON
        else:
            status = PressStatus.LOST

        results.append(PressResult(
            segment=press.segment,
            start_hole=press.start_hole,
            end_hole=seg_end,
            initiated_by=press.initiated_by,
            multiplier=press.multiplier,
            amount=to_cents(bet_amount * press.multiplier),
            winner_id=segment.winner_id,
            loser_id=segment.loser_id,
            margin=segment.margin,
            status=status,
            children=press_results(table, p1, p2, press.children, bet_amount, allowed),
        ))
    return results


def press_money(results: Iterable[PressResult], money: Dict[str, Decimal]) -> Dict[str, Decimal]:
    """Add every decided press (recursively) into ``money``."""
    for press in results:
        if press.winner_id and press.loser_id:
            money[press.winner_id] = money.get(press.winner_id, ZERO) + press.amount
            money[press.loser_id] = money.get(press.loser_id, ZERO) - press.amount
        press_money(press.children, money)
    return money
