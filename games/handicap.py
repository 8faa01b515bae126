"""Handicap stroke allocation (USGA-style)."""

from typing import Dict, Iterable, List, Optional, Sequence

from models import Hole, NetMode, Player

HOLES_PER_ROUND = 18


def allocate_strokes(course_handicap: Optional[int], holes: Sequence[Hole]) -> Dict[int, int]:
    """Map hole number -> handicap strokes received on that hole.

    Every hole gets ``abs(hcp) // 18`` strokes; the ``abs(hcp) % 18`` hardest
    holes (by handicap rank, then hole number) get one more. Plus handicaps
    give strokes back starting from the easiest holes instead.
    """
    if not course_handicap:
        return {hole.number: 0 for hole in holes}

    sign = 1 if course_handicap > 0 else -1
    base, extra = divmod(abs(course_handicap), HOLES_PER_ROUND)

    ordered = sorted(holes, key=lambda h: (h.handicap_rank, h.number), reverse=sign < 0)
    strokes = {hole.number: base * sign for hole in holes}
    for hole in ordered[:extra]:
        strokes[hole.number] += sign
    return strokes


def playing_handicaps(
    players: Iterable[Player],
    *,
    use_handicaps: bool = True,
    net_mode: NetMode = NetMode.DIFFERENTIAL,
) -> Dict[str, int]:
    """Handicap each player actually plays off in a game.

    In differential mode the lowest handicap in the field plays at scratch and
    everyone else receives the difference. A missing handicap counts as 0.
    """
    players = list(players)
    if not use_handicaps:
        return {p.id: 0 for p in players}

    course = {p.id: p.course_handicap or 0 for p in players}
    if net_mode == NetMode.FULL or not course:
        return course
    low = min(course.values())
    return {pid: hcp - low for pid, hcp in course.items()}


def stroke_table(
    players: Iterable[Player],
    holes: Sequence[Hole],
    *,
    use_handicaps: bool = True,
    net_mode: NetMode = NetMode.DIFFERENTIAL,
) -> Dict[str, Dict[int, int]]:
    """player id -> hole number -> strokes received."""
    handicaps = playing_handicaps(players, use_handicaps=use_handicaps, net_mode=net_mode)
    return {pid: allocate_strokes(hcp, holes) for pid, hcp in handicaps.items()}


def hardest_holes(holes: Sequence[Hole], count: int) -> List[int]:
    """Hole numbers of the ``count`` hardest holes, hardest first."""
    ordered = sorted(holes, key=lambda h: (h.handicap_rank, h.number))
    return [h.number for h in ordered[:count]]
