import random

import pytest
from decimal import Decimal

from models import (
    BankerDecision,
    BingoBangoBongoPoint,
    GameType,
    Hole,
    HoleScore,
    NetMode,
    Player,
    Press,
    PressSegment,
    VegasTeam,
    WolfDecision,
)
from models.games import (
    BingoBangoBongoOptions,
    MatchPlayOptions,
    NassauOptions,
    SkinsOptions,
    VegasOptions,
    WolfOptions,
)
from models.results import PressStatus, SegmentStatus
from games import InvalidInputError, compute_game_result
from games.banker import calculate_banker
from games.bingo_bango_bongo import calculate_bingo_bango_bongo
from games.match_play import calculate_match_play
from games.nassau import calculate_nassau
from games.nines import calculate_nines
from games.skins import calculate_skins
from games.snake import calculate_snake
from games.stableford import calculate_stableford, stableford_points
from games.vegas import calculate_vegas, team_number
from games.wolf import calculate_wolf


def _holes():
    """18 par-4 holes, hole n is the n-th hardest."""
    return [Hole(number=i, par=4, handicap_rank=i) for i in range(1, 19)]


def _player(pid, gross, *, hcp=None, putts=None):
    """gross / putts: one int for every hole, or a dict of hole -> value (missing = unplayed)."""
    if isinstance(gross, int):
        gross = {i: gross for i in range(1, 19)}
    putts = putts or {}
    scores = [
        HoleScore(hole_number=n, strokes=s, putts=putts.get(n, 2))
        for n, s in sorted(gross.items())
    ]
    return Player(id=pid, course_handicap=hcp, scores=scores)


def _with(base, **overrides):
    """All holes at ``base`` except the given ones, e.g. _with(4, h4=3)."""
    gross = {i: base for i in range(1, 19)}
    for key, value in overrides.items():
        gross[int(key[1:])] = value
    return gross


def _money(result):
    return result.money_by_player()


BET = Decimal("10")


# ================================================================
# Nassau
# ================================================================

def test_nassau_alice_bob_scenario():
    """Alice (10) shoots 3s, Bob (15) shoots pars; Bob's five strokes fall on holes 1-5."""
    alice = _player("alice", 3, hcp=10)
    bob = _player("bob", 4, hcp=15)
    result = calculate_nassau([alice, bob], _holes(), BET)

    assert result.front.winner_id == "alice"
    assert result.front.margin == 4
    assert result.front.summary == "4 & 0"
    assert result.back.winner_id == "alice"
    assert result.back.margin == 9
    assert result.overall.winner_id == "alice"
    assert result.overall.margin == 13
    assert _money(result) == {"alice": Decimal("30.00"), "bob": Decimal("-30.00")}


def test_nassau_full_handicaps_match_differential():
    alice = _player("alice", 3, hcp=10)
    bob = _player("bob", 4, hcp=15)
    options = NassauOptions(net_mode=NetMode.FULL)
    result = calculate_nassau([alice, bob], _holes(), BET, options)
    # Both get strokes on holes 1-10; Bob's extra five land on 11-15 and halve them.
    assert result.overall.margin == 13
    assert result.front.margin == 9


def test_nassau_tie_pushes():
    result = calculate_nassau([_player("a", 4), _player("b", 4)], _holes(), BET)
    for segment in (result.front, result.back, result.overall):
        assert segment.status == SegmentStatus.TIE
        assert segment.winner_id is None
    assert _money(result) == {"a": 0, "b": 0}


def test_nassau_excludes_unplayed_holes():
    alice = _player("alice", {i: 3 for i in range(1, 10)})
    bob = _player("bob", 4)
    result = calculate_nassau([alice, bob], _holes(), BET)

    assert result.front.margin == 9
    assert result.back.status == SegmentStatus.NOT_STARTED
    assert result.back.summary == "No scores yet"
    assert result.overall.summary == "9 UP (9 to play)"
    assert result.overall.holes_remaining == 9


def test_nassau_press_on_back():
    alice = _player("alice", 3)
    bob = _player("bob", 4)
    options = NassauOptions(presses=[
        Press(segment=PressSegment.BACK, start_hole=12, initiated_by="bob",
              children=[Press(segment=PressSegment.BACK, start_hole=15, initiated_by="bob",
                              multiplier=Decimal("2"))]),
    ])
    result = calculate_nassau([alice, bob], _holes(), BET, options)

    press = result.presses[0]
    assert press.status == PressStatus.LOST
    assert press.margin == 7
    assert press.children[0].amount == Decimal("20.00")
    assert _money(result)["alice"] == Decimal("30.00") + Decimal("10.00") + Decimal("20.00")


def test_nassau_rejects_bad_press():
    options = NassauOptions(presses=[Press(segment=PressSegment.FRONT, start_hole=12, initiated_by="a")])
    with pytest.raises(InvalidInputError):
        calculate_nassau([_player("a", 4), _player("b", 4)], _holes(), BET, options)

    options = NassauOptions(presses=[Press(segment=PressSegment.MATCH, start_hole=2, initiated_by="a")])
    with pytest.raises(InvalidInputError):
        calculate_nassau([_player("a", 4), _player("b", 4)], _holes(), BET, options)


def test_nassau_requires_two_players_and_eighteen_holes():
    with pytest.raises(InvalidInputError):
        calculate_nassau([_player("a", 4), _player("b", 4), _player("c", 4)], _holes(), BET)
    with pytest.raises(InvalidInputError):
        calculate_nassau([_player("a", 4), _player("b", 4)], _holes()[:17], BET)


# ================================================================
# Skins
# ================================================================

def test_skins_carryover_scenario():
    a = _player("a", _with(4, h4=3))
    b = _player("b", 4)
    result = calculate_skins([a, b], _holes(), BET)

    assert [s.winner_id for s in result.skins[:3]] == [None, None, None]
    fourth = result.skins[3]
    assert fourth.winner_id == "a"
    assert fourth.carried == Decimal("30.00")
    assert fourth.value == Decimal("40.00")

    assert result.total_pot == Decimal("180.00")
    assert result.total_won == Decimal("40.00")
    assert result.carryover == Decimal("140.00")
    assert result.total_won + result.carryover == result.total_pot
    assert _money(result) == {"a": Decimal("20.00"), "b": Decimal("-20.00")}


def test_skins_without_carryover():
    a = _player("a", _with(4, h4=3))
    b = _player("b", 4)
    result = calculate_skins([a, b], _holes(), BET, SkinsOptions(carryover=False))

    assert result.skins[3].value == Decimal("10.00")
    assert result.total_won + result.carryover == result.total_pot


def test_skins_unplayed_hole_carries():
    a = _player("a", _with(4, h4=3))
    b = _player("b", {i: 4 for i in range(1, 19) if i != 4})
    result = calculate_skins([a, b], _holes(), BET)
    assert result.skins[3].winner_id is None
    assert result.total_won == 0
    assert result.carryover == result.total_pot


def test_skins_uses_net_scores():
    # b's stroke on hole 1 turns a bogey into a halve.
    a = _player("a", 4, hcp=0)
    b = _player("b", _with(4, h1=5, h2=3), hcp=1)
    result = calculate_skins([a, b], _holes(), BET)
    assert result.skins[0].winner_id is None
    assert result.skins[1].winner_id == "b"
    assert result.skins[1].value == Decimal("20.00")


def test_skins_rejects_duplicate_player_ids():
    with pytest.raises(InvalidInputError):
        calculate_skins([_player("a", 4), _player("a", 4)], _holes(), BET)


# ================================================================
# Match Play
# ================================================================

def test_match_play_paid_per_hole_up():
    result = calculate_match_play([_player("alice", 3, hcp=10), _player("bob", 4, hcp=15)], _holes(), BET)
    assert result.holes_up == 13
    assert result.match_status == "13 & 0"
    assert _money(result) == {"alice": Decimal("130.00"), "bob": Decimal("-130.00")}


def test_match_play_closed_out_early():
    a = _player("a", 3)
    b = _player("b", {i: 4 for i in range(1, 11)})
    result = calculate_match_play([a, b], _holes(), BET)
    assert result.match_status == "10 & 8"
    assert result.standings[1].status == "10 DOWN"
    assert sum(_money(result).values()) == 0


def test_match_play_in_progress_and_halved():
    a = _player("a", _with(4, h1=3, h2=5))
    b = _player("b", 4)
    assert calculate_match_play([a, b], _holes(), BET).match_status == "HALVED"

    a = _player("a", {1: 3, 2: 4})
    b = _player("b", {1: 4, 2: 4})
    assert calculate_match_play([a, b], _holes(), BET).match_status == "1 UP thru 2"

    assert calculate_match_play([_player("a", {}), _player("b", {})], _holes(), BET).match_status == "Not started"


def test_match_play_press():
    a = _player("a", 4)
    b = _player("b", _with(4, h17=3, h18=3))
    options = MatchPlayOptions(presses=[Press(segment=PressSegment.MATCH, start_hole=17, initiated_by="b")])
    result = calculate_match_play([a, b], _holes(), BET, options)
    assert result.presses[0].status == PressStatus.WON
    assert _money(result) == {"a": Decimal("-30.00"), "b": Decimal("30.00")}


# ================================================================
# Wolf
# ================================================================

def _wolf_players():
    return [
        _player("a", _with(4, h1=3, h2=5)),
        _player("b", 4),
        _player("c", 4),
        _player("d", _with(4, h1=5, h3=3)),
    ]


def _wolf_options(*decisions, ids="abcd"):
    """The given decisions, and a lone wolf in rotation on every other hole."""
    decided = {d.hole_number for d in decisions}
    rotation = [
        WolfDecision(hole_number=n, wolf_id=ids[(n - 1) % len(ids)], is_lone_wolf=True)
        for n in range(1, 19) if n not in decided
    ]
    return WolfOptions(decisions=[*decisions, *rotation])


def _scored_wolf_options():
    return _wolf_options(
        WolfDecision(hole_number=1, wolf_id="a", partner_id="b"),
        WolfDecision(hole_number=2, wolf_id="a", is_lone_wolf=True),
        WolfDecision(hole_number=3, wolf_id="d", is_lone_wolf=True, is_blind=True),
    )


def test_wolf_points():
    result = calculate_wolf(_wolf_players(), _holes(), Decimal("1"), _scored_wolf_options())

    assert result.holes[0].winner == "wolf"
    assert result.holes[1].winner == "pack"
    assert result.holes[2].winner == "wolf"
    assert result.holes[3].wolf_id == "d"
    assert result.holes[3].winner is None
    assert result.points_by_player() == {"a": -8, "b": 0, "c": -2, "d": 10}
    for hole in result.holes:
        assert sum(hole.points.values()) == 0


def test_wolf_money_needs_a_rate():
    result = calculate_wolf(_wolf_players(), _holes(), Decimal("1"), _scored_wolf_options())
    assert result.points_only
    assert result.money_by_player() is None
    assert result.money_by_player(Decimal("0.5")) == {
        "a": Decimal("-4.00"), "b": Decimal("0.00"), "c": Decimal("-1.00"), "d": Decimal("5.00"),
    }


def test_wolf_tied_hole_scores_nothing():
    players = [_player(pid, 4) for pid in "abcd"]
    options = _wolf_options(WolfDecision(hole_number=1, wolf_id="a", partner_id="b"))
    result = calculate_wolf(players, _holes(), Decimal("1"), options)
    assert result.holes[0].winner is None
    assert result.points_by_player() == {"a": 0, "b": 0, "c": 0, "d": 0}


def test_wolf_played_hole_needs_a_decision():
    players = [_player("a", 3), _player("b", 4), _player("c", 5)]
    options = WolfOptions(decisions=[WolfDecision(hole_number=1, wolf_id="a", partner_id="b")])
    with pytest.raises(InvalidInputError, match="Hole 2"):
        calculate_wolf(players, _holes(), Decimal("1"), options)


def test_wolf_unfinished_hole_needs_no_decision():
    players = [_player("a", {1: 3, 2: 3}), _player("b", {1: 4, 2: 4}), _player("c", {1: 5})]
    options = WolfOptions(decisions=[WolfDecision(hole_number=1, wolf_id="c", is_lone_wolf=True)])
    result = calculate_wolf(players, _holes(), Decimal("1"), options)
    assert result.holes[1].wolf_id is None
    assert result.points_by_player() == {"a": 2, "b": 2, "c": -4}


def test_wolf_rejects_bad_decisions():
    duplicate = WolfOptions(decisions=[
        WolfDecision(hole_number=1, wolf_id="a", partner_id="b"),
        WolfDecision(hole_number=1, wolf_id="c", partner_id="d"),
    ])
    with pytest.raises(InvalidInputError):
        calculate_wolf(_wolf_players(), _holes(), Decimal("1"), duplicate)

    stranger = WolfOptions(decisions=[WolfDecision(hole_number=1, wolf_id="a", partner_id="zed")])
    with pytest.raises(InvalidInputError):
        calculate_wolf(_wolf_players(), _holes(), Decimal("1"), stranger)

    with pytest.raises(InvalidInputError):
        calculate_wolf(_wolf_players()[:2], _holes(), Decimal("1"))


# ================================================================
# Nines
# ================================================================

def test_nines_clear_order():
    players = [_player("a", 3), _player("b", 4), _player("c", 5)]
    result = calculate_nines(players, _holes(), Decimal("1"))

    assert result.points_by_player() == {"a": 90, "b": 54, "c": 18}
    assert result.standings[0].front == 45
    for hole in result.holes:
        assert sum(hole.points.values()) == 9
    assert result.money_by_player(Decimal("1")) == {
        "a": Decimal("36.00"), "b": Decimal("0.00"), "c": Decimal("-36.00"),
    }


def test_nines_ties_pool_points():
    players = [_player("a", 3), _player("b", 3), _player("c", 5)]
    result = calculate_nines(players, _holes(), Decimal("1"))
    assert result.holes[0].points == {"a": Decimal("4.00"), "b": Decimal("4.00"), "c": Decimal("1.00")}

    players = [_player(pid, 4) for pid in "abcd"]
    result = calculate_nines(players, _holes(), Decimal("1"))
    assert set(result.holes[0].points.values()) == {Decimal("2.25")}
    assert sum(result.points_by_player().values()) == 162


def test_nines_two_players():
    result = calculate_nines([_player("a", 3), _player("b", 4)], _holes(), Decimal("1"))
    assert result.holes[0].points == {"a": 6, "b": 3}


def test_nines_skips_partly_scored_hole():
    players = [_player("a", 3), _player("b", 4), _player("c", {i: 5 for i in range(2, 19)})]
    result = calculate_nines(players, _holes(), Decimal("1"))
    assert result.holes[0].points == {}
    assert sum(result.points_by_player().values()) == 9 * 17


# ================================================================
# Stableford
# ================================================================

@pytest.mark.parametrize("to_par,points", [(-4, 5), (-3, 5), (-2, 4), (-1, 3), (0, 2), (1, 1), (2, 0), (5, 0)])
def test_stableford_points_table(to_par, points):
    assert stableford_points(to_par) == points


def test_stableford_money_against_field_average():
    result = calculate_stableford([_player("a", 3), _player("b", 4)], _holes(), Decimal("1"))
    assert [s.total for s in result.standings] == [54, 36]
    assert _money(result) == {"a": Decimal("9.00"), "b": Decimal("-9.00")}


def test_stableford_unplayed_hole_scores_zero():
    result = calculate_stableford([_player("a", {1: 4}), _player("b", {})], _holes(), Decimal("1"))
    assert result.standings[0].total == 2
    assert result.holes[1].scores[0].net is None


# ================================================================
# Bingo Bango Bongo
# ================================================================

def test_bingo_bango_bongo():
    players = [_player(pid, 4) for pid in "abc"]
    options = BingoBangoBongoOptions(points=[
        BingoBangoBongoPoint(hole_number=1, bingo_id="a", bango_id="a", bongo_id="b"),
        BingoBangoBongoPoint(hole_number=2, bingo_id="c"),
    ])
    result = calculate_bingo_bango_bongo(players, _holes(), Decimal("3"), options)

    a = result.standings[0]
    assert (a.bingo, a.bango, a.bongo, a.total) == (1, 1, 0, 2)
    assert _money(result) == {"a": Decimal("2.00"), "b": Decimal("-1.00"), "c": Decimal("-1.00")}


def test_bingo_bango_bongo_rejects_bad_points():
    players = [_player(pid, 4) for pid in "abc"]
    with pytest.raises(InvalidInputError):
        calculate_bingo_bango_bongo(players, _holes(), BET, BingoBangoBongoOptions(points=[
            BingoBangoBongoPoint(hole_number=1, bingo_id="zed"),
        ]))
    with pytest.raises(InvalidInputError):
        calculate_bingo_bango_bongo(players, _holes(), BET, BingoBangoBongoOptions(points=[
            BingoBangoBongoPoint(hole_number=1, bingo_id="a"),
            BingoBangoBongoPoint(hole_number=1, bango_id="b"),
        ]))


# ================================================================
# Vegas
# ================================================================

def _vegas_options(**kwargs):
    return VegasOptions(
        teams=[
            VegasTeam(team_number=1, player1_id="a", player2_id="b"),
            VegasTeam(team_number=2, player1_id="c", player2_id="d"),
        ],
        **kwargs,
    )


def test_team_number():
    assert team_number(5, 4) == 45
    assert team_number(4, 10) == 104
    assert team_number(4, 5, flipped=True) == 54
    assert team_number(4, 10, flip_threshold=12) == 410


def test_vegas_money_split_between_partners():
    players = [_player("a", 4), _player("b", _with(4, h1=5)), _player("c", 4), _player("d", 4)]
    result = calculate_vegas(players, _holes(), Decimal("2"), _vegas_options())

    assert result.holes[0].team1_number == 45
    assert result.holes[0].team2_number == 44
    assert result.holes[0].diff == -1
    assert result.teams[0].money == Decimal("-2.00")
    assert _money(result) == {
        "a": Decimal("-1.00"), "b": Decimal("-1.00"), "c": Decimal("1.00"), "d": Decimal("1.00"),
    }


def test_vegas_ignores_handicaps():
    players = [_player("a", 4, hcp=18), _player("b", 4), _player("c", 4), _player("d", 4)]
    result = calculate_vegas(players, _holes(), Decimal("1"), _vegas_options())

    assert result.holes[0].team1_number == 44
    assert result.holes[0].team2_number == 44
    assert all(hole.diff == 0 for hole in result.holes)
    assert set(_money(result).values()) == {Decimal("0.00")}

    players[0] = _player("a", _with(4, h1=2), hcp=36)
    result = calculate_vegas(players, _holes(), Decimal("1"), _vegas_options())
    assert result.holes[0].team1_number == 24
    assert result.holes[0].diff == 20


def test_vegas_birdie_flip():
    players = [_player("a", _with(4, h1=3)), _player("b", _with(4, h1=5)),
               _player("c", 4), _player("d", _with(4, h1=6))]
    plain = calculate_vegas(players, _holes(), Decimal("1"), _vegas_options())
    assert plain.holes[0].diff == 46 - 35

    flipped = calculate_vegas(players, _holes(), Decimal("1"), _vegas_options(birdie_flip=True))
    assert flipped.holes[0].team2_number == 64
    assert flipped.holes[0].diff == 64 - 35


def test_vegas_requires_two_full_teams():
    players = [_player(pid, 4) for pid in "abcd"]
    with pytest.raises(InvalidInputError):
        calculate_vegas(players, _holes(), BET)
    bad = VegasOptions(teams=[
        VegasTeam(team_number=1, player1_id="a", player2_id="b"),
        VegasTeam(team_number=2, player1_id="a", player2_id="c"),
    ])
    with pytest.raises(InvalidInputError):
        calculate_vegas(players, _holes(), BET, bad)


# ================================================================
# Snake
# ================================================================

def test_snake_last_three_putt_pays_everyone():
    players = [
        _player("a", 4, putts={2: 3}),
        _player("b", 4, putts={5: 3}),
        _player("c", 4),
    ]
    result = calculate_snake(players, _holes(), BET)
    assert result.snake_holder_id == "b"
    assert [t.hole for t in result.three_putt_history] == [2, 5]
    assert _money(result) == {"a": Decimal("10.00"), "b": Decimal("-20.00"), "c": Decimal("10.00")}


def test_snake_same_hole_goes_to_later_player():
    players = [_player("a", 4, putts={7: 3}), _player("b", 4), _player("c", 4, putts={7: 4})]
    result = calculate_snake(players, _holes(), BET)
    assert result.snake_holder_id == "c"
    assert result.standings[2].holds_snake


def test_snake_nobody_three_putts():
    result = calculate_snake([_player("a", 4), _player("b", 4)], _holes(), BET)
    assert result.snake_holder_id is None
    assert set(_money(result).values()) == {0}


# ================================================================
# Banker
# ================================================================

def test_banker_rotation():
    players = [_player("a", 4), _player("b", 5), _player("c", 4)]
    result = calculate_banker(players, _holes(), Decimal("1"))

    assert [h.banker_id for h in result.holes[:4]] == ["a", "b", "c", "a"]
    assert len(result.holes[0].matchups) == 2
    assert _money(result) == {"a": Decimal("12.00"), "b": Decimal("-24.00"), "c": Decimal("12.00")}


def test_banker_decisions_override_rotation():
    players = [_player("a", 4), _player("b", 5)]
    options = {"decisions": [{"hole_number": 2, "banker_id": "a"}]}
    result = calculate_banker(players, _holes(), Decimal("1"), options)
    assert result.holes[1].banker_id == "a"

    with pytest.raises(InvalidInputError):
        calculate_banker(players, _holes(), Decimal("1"), {"decisions": [
            BankerDecision(hole_number=1, banker_id="zed").model_dump(),
        ]})


# ================================================================
# Dispatch
# ================================================================

def test_compute_game_result_dispatches_by_name():
    game_input = {
        "players": [_player("a", _with(4, h4=3)).model_dump(), _player("b", 4).model_dump()],
        "holes": [h.model_dump() for h in _holes()],
        "bet_amount": "10",
        "options": {"carryover": True},
    }
    result = compute_game_result("skins", game_input)
    assert result.game_type == GameType.SKINS
    assert result.total_won == Decimal("40.00")


def test_compute_game_result_rejects_bad_input():
    holes = [h.model_dump() for h in _holes()]
    players = [_player("a", 4).model_dump(), _player("b", 4).model_dump()]

    with pytest.raises(InvalidInputError):
        compute_game_result("HORSE", {"players": players, "holes": holes, "bet_amount": 1})
    with pytest.raises(InvalidInputError):
        compute_game_result(GameType.SKINS, {"players": players, "holes": holes, "bet_amount": -1})
    with pytest.raises(InvalidInputError):
        compute_game_result(GameType.SKINS, {
            "players": players, "holes": holes, "bet_amount": 1, "options": {"carryover": "maybe"},
        })


# ================================================================
# Zero-sum across random rounds
# ================================================================

def _random_round(seed, count):
    rng = random.Random(seed)
    players = []
    for idx in range(count):
        gross = {}
        putts = {}
        for hole in range(1, 19):
            if rng.random() < 0.1:
                continue
            gross[hole] = rng.randint(3, 8)
            putts[hole] = rng.randint(0, 3)
        players.append(_player(f"p{idx}", gross, hcp=rng.randint(-2, 30), putts=putts))
    return players


def _random_wolf_options(seed, players):
    rng = random.Random(seed)
    ids = [p.id for p in players]
    decisions = []
    for hole in range(1, 19):
        wolf = rng.choice(ids)
        if rng.random() < 0.4:
            decisions.append(WolfDecision(
                hole_number=hole, wolf_id=wolf, is_lone_wolf=True, is_blind=rng.random() < 0.5,
            ))
        else:
            partner = rng.choice([pid for pid in ids if pid != wolf])
            decisions.append(WolfDecision(hole_number=hole, wolf_id=wolf, partner_id=partner))
    return WolfOptions(decisions=decisions)


@pytest.mark.parametrize("seed", range(8))
def test_money_is_zero_sum(seed):
    holes = _holes()
    four = _random_round(seed, 4)
    two = four[:2]

    for result in (
        calculate_match_play(two, holes, BET),
        calculate_nassau(two, holes, BET),
        calculate_skins(four, holes, BET),
        calculate_stableford(four, holes, Decimal("0.75")),
        calculate_snake(four, holes, BET),
        calculate_banker(four, holes, BET),
        calculate_vegas(four, holes, BET, VegasOptions(teams=[
            VegasTeam(team_number=1, player1_id="p0", player2_id="p1"),
            VegasTeam(team_number=2, player1_id="p2", player2_id="p3"),
        ])),
    ):
        assert sum(result.money_by_player().values()) == 0

    wolf = calculate_wolf(four, holes, Decimal("1"), _random_wolf_options(seed, four))
    assert sum(wolf.money_by_player(Decimal("0.35")).values()) == 0
    for hole in wolf.holes:
        assert sum(hole.points.values()) == 0

    nines = calculate_nines(four[:3], holes, Decimal("1"))
    assert sum(nines.money_by_player(Decimal("0.33")).values()) == 0
    for hole in nines.holes:
        if hole.points:
            assert sum(hole.points.values()) == 9


@pytest.mark.parametrize("seed", range(8))
def test_skins_pot_is_conserved(seed):
    result = calculate_skins(_random_round(seed, 3), _holes(), Decimal("2.5"))
    assert result.total_won + result.carryover == result.total_pot == Decimal("45.00")
