import pytest
from pydantic import ValidationError

from models import Course, Hole, HoleResult, Match, MatchPlayer
from scoring.exceptions import HoleNotFoundError, InvalidHoleRankError, ScoringError
from scoring.holes import UNPLAYED, hole_net_score, score_hole
from scoring.match import match_totals, new_match_holes, record_hole_score, score_match, total_strokes
from scoring.settings import ScoringSettings
from scoring.strokes import match_stroke_allocation, stroke_table


def _course() -> Course:
    # Stroke index runs backwards: hole 18 is the hardest.
    holes = [Hole(number=i, par=4, handicap=19 - i) for i in range(1, 19)]
    return Course(id="course-1", name="Demo Course", holes=holes)


def _match(handicap1=10, handicap2=13, holes=None) -> Match:
    return Match(
        id="m1",
        player1=MatchPlayer(name="Ann", team_name="Eagles", handicap=handicap1),
        player2=MatchPlayer(name="Bob", team_name="Hawks", handicap=handicap2),
        holes=holes if holes is not None else new_match_holes(_course()),
    )


def _hole(number, score1, score2, *, putt1=False, putt2=False, strokes1=0, strokes2=0):
    outcome = hole_net_score(strokes1, score1, putt1, strokes2, score2, putt2, 4)
    return HoleResult(
        hole=number,
        handicap=number,
        player1_score=score1,
        player2_score=score2,
        player1_putt=putt1,
        player2_putt=putt2,
        player1_strokes=strokes1,
        player2_strokes=strokes2,
        player1_net=outcome.net1,
        player2_net=outcome.net2,
        winner=outcome.winner,
    )


# ================================================================
# Stroke allocation
# ================================================================

def test_equal_handicaps_receive_no_strokes():
    for rank in range(1, 19):
        assert match_stroke_allocation(10, 10, rank) == (0, 0)
        assert match_stroke_allocation(-1.5, -1.5, rank) == (0, 0)


def test_higher_handicap_receives_strokes_on_hardest_holes():
    assert match_stroke_allocation(15, 10, 1) == (1, 0)
    assert match_stroke_allocation(15, 10, 5) == (1, 0)
    assert match_stroke_allocation(15, 10, 6) == (0, 0)

    assert match_stroke_allocation(10, 15, 4) == (0, 1)
    assert match_stroke_allocation(10, 15, 8) == (0, 0)


def test_large_differentials_wrap_around():
    assert match_stroke_allocation(24, 2, 1) == (2, 0)
    assert match_stroke_allocation(24, 2, 4) == (2, 0)
    assert match_stroke_allocation(24, 2, 5) == (1, 0)
    assert match_stroke_allocation(24, 2, 18) == (1, 0)
    assert match_stroke_allocation(180, 0, 18) == (10, 0)


@pytest.mark.parametrize("differential", [0, 1, 3, 17, 18, 19, 36, 40])
def test_strokes_across_course_add_up_to_differential(differential):
    table = stroke_table(0, differential)
    received = [table[rank][1] for rank in range(1, 19)]

    assert sum(received) == differential
    assert all(table[rank][0] == 0 for rank in table)
    assert received[0] == max(received)
    assert received == sorted(received, reverse=True)


def test_fractional_differential_is_rounded():
    assert sum(s for s, _ in stroke_table(10.4, 7.0).values()) == 3
    assert sum(s for s, _ in stroke_table(10.5, 7.0).values()) == 4
    assert match_stroke_allocation(10.2, 10.0, 1) == (0, 0)


def test_plus_handicaps_use_the_same_scale():
    assert match_stroke_allocation(-2, 3, 5) == (0, 1)
    assert match_stroke_allocation(-2, 3, 6) == (0, 0)
    assert match_stroke_allocation(-1, -4, 3) == (1, 0)


def test_nine_hole_allocation():
    assert match_stroke_allocation(0, 10, 1, hole_count=9) == (0, 2)
    assert match_stroke_allocation(0, 10, 2, hole_count=9) == (0, 1)
    assert sum(s for _, s in stroke_table(0, 10, hole_count=9).values()) == 10


def test_invalid_hole_rank():
    with pytest.raises(InvalidHoleRankError):
        match_stroke_allocation(10, 5, 0)
    with pytest.raises(InvalidHoleRankError):
        match_stroke_allocation(10, 5, 19)
    with pytest.raises(InvalidHoleRankError):
        match_stroke_allocation(10, 5, 10, hole_count=9)


# ================================================================
# Hole scoring
# ================================================================

def test_hole_net_score_lower_net_wins():
    outcome = hole_net_score(0, 5, False, 1, 5, False, 4)
    assert (outcome.net1, outcome.net2, outcome.winner) == (5, 4, "player2")

    outcome = hole_net_score(0, 4, False, 0, 4, False, 4)
    assert outcome.winner == "tie"


def test_unplayed_hole_is_a_tie():
    assert hole_net_score(0, 0, True, 0, 5, False, 4) == UNPLAYED
    assert hole_net_score(1, 5, True, 0, 0, True, 4) == UNPLAYED
    assert UNPLAYED.winner == "tie"
    assert (UNPLAYED.net1, UNPLAYED.net2) == (0, 0)


def test_one_putt_takes_exactly_one_stroke_off():
    without = hole_net_score(1, 5, False, 0, 5, False, 4)
    with_putt = hole_net_score(1, 5, True, 0, 5, False, 4)

    assert with_putt.net1 == without.net1 - 1
    assert with_putt.net2 == without.net2
    assert (without.winner, with_putt.winner) == ("player1", "player1")

    levelled = hole_net_score(0, 5, True, 0, 4, False, 4)
    assert levelled.winner == "tie"


def test_par_does_not_move_net_scores():
    assert hole_net_score(0, 4, False, 0, 5, False, 3) == hole_net_score(0, 4, False, 0, 5, False, 5)


def test_custom_stroke_and_putt_values():
    outcome = hole_net_score(0, 4, True, 1, 5, False, 4, stroke_value=2, one_putt_value=3)
    assert (outcome.net1, outcome.net2) == (5, 9)


def test_score_hole_fills_strokes_and_winner():
    hole = HoleResult(hole=1, handicap=1, par=4, player1_score=5, player2_score=5)
    scored = score_hole(hole, 15, 10)

    assert (scored.player1_strokes, scored.player2_strokes) == (1, 0)
    assert (scored.player1_net, scored.player2_net) == (4, 5)
    assert scored.winner == "player1"
    assert hole.winner == "tie"


# ================================================================
# Match totals
# ================================================================

def test_match_totals_before_any_score():
    totals = match_totals(new_match_holes())
    assert (totals.total1, totals.total2, totals.wins1, totals.wins2) == (0, 0, 0, 0)
    assert totals.leader == "tie"


def test_bonus_goes_to_player_with_more_hole_wins():
    holes = [_hole(1, 4, 5), _hole(2, 4, 5), _hole(3, 5, 4)]
    totals = match_totals(holes)

    assert (totals.wins1, totals.wins2) == (2, 1)
    assert totals.total1 == 4 + 4 + 5 + 32
    assert totals.total2 == 5 + 5 + 4
    assert totals.leader == "player1"


def test_no_bonus_when_hole_wins_are_level():
    holes = [_hole(1, 4, 5), _hole(2, 6, 5), _hole(3, 4, 4)]
    totals = match_totals(holes)

    assert (totals.wins1, totals.wins2) == (1, 1)
    assert (totals.total1, totals.total2) == (14, 14)


def test_unplayed_holes_contribute_nothing():
    holes = [_hole(1, 4, 5), _hole(2, 4, 0, putt1=True), _hole(3, 0, 7)]
    totals = match_totals(holes)

    assert (totals.total1, totals.total2) == (4 + 32, 5)
    assert (totals.wins1, totals.wins2) == (1, 0)


def test_match_totals_use_strokes_received_and_putts():
    holes = [_hole(1, 5, 4, strokes1=1, putt1=True), _hole(2, 4, 4, strokes2=1)]
    totals = match_totals(holes, bonus=10)

    assert (totals.wins1, totals.wins2) == (1, 1)
    assert (totals.total1, totals.total2) == (3 + 4, 4 + 3)


def test_match_totals_read_the_scored_hole_result():
    # scored elsewhere: strokes received are folded into the nets only
    outcome = hole_net_score(1, 5, True, 0, 4, False, 4)
    hole = HoleResult(
        hole=1,
        handicap=1,
        player1_score=5,
        player2_score=4,
        player1_putt=True,
        player1_net=outcome.net1,
        player2_net=outcome.net2,
        winner=outcome.winner,
    )
    totals = match_totals([hole])

    assert (totals.wins1, totals.wins2) == (1, 0)
    assert (totals.total1, totals.total2) == (3 + 32, 4)


def test_match_totals_skip_holes_missing_a_score():
    stale = HoleResult(hole=1, handicap=1, player1_score=4, player1_net=4, winner="player1")
    assert match_totals([stale]) == match_totals([])


def test_match_totals_idempotent():
    holes = [_hole(1, 4, 5), _hole(2, 5, 5, putt2=True)]
    assert match_totals(holes) == match_totals(holes)


# ================================================================
# Match workflow
# ================================================================

def test_new_match_holes_default_layout():
    holes = new_match_holes()
    assert [h.hole for h in holes] == list(range(1, 19))
    assert sorted(h.handicap for h in holes) == list(range(1, 19))
    assert sum(h.par for h in holes) == 71
    assert all(h.player1_score == 0 and h.player2_score == 0 for h in holes)


def test_new_match_holes_from_course():
    holes = new_match_holes(_course())
    assert holes[0].handicap == 18
    assert holes[17].handicap == 1
    assert all(h.par == 4 and h.pace == 15 for h in holes)


def test_level_match_after_strokes_is_halved():
    match = _match(handicap1=10, handicap2=13)
    for hole in match.holes:
        # Bob takes exactly the strokes he receives more than Ann
        received = 1 if hole.handicap <= 3 else 0
        match = record_hole_score(match, hole.hole, player1_score=4, player2_score=4 + received)

    stroked = sorted(h.hole for h in match.holes if h.player2_strokes == 1)
    assert stroked == [16, 17, 18]
    assert all(h.player1_strokes == 0 for h in match.holes)
    assert all(h.winner == "tie" for h in match.holes)
    assert (match.player1.score, match.player2.score) == (72, 72)
    assert (match.player1.hole_wins, match.player2.hole_wins) == (0, 0)


def test_score_match_applies_bonus_and_counts_putts():
    match = _match(handicap1=10, handicap2=10)
    match = record_hole_score(match, 1, player1_score=4, player2_score=5, player1_putt=True)
    match = record_hole_score(match, 2, player1_score=5, player2_score=5)
    match = record_hole_score(match, 3, player2_putt=True)   # hole not played yet

    assert match.player1.hole_wins == 1
    assert match.player1.score == 3 + 5 + 32
    assert match.player2.score == 5 + 5
    assert match.player1.putts == 1
    assert match.player2.putts == 0


def test_record_hole_score_rescores_after_every_edit():
    match = _match(handicap1=10, handicap2=10)
    match = record_hole_score(match, 1, player1_score=4, player2_score=5)
    assert match.player1.score == 4 + 32

    match = record_hole_score(match, 1, player2_score=3)
    assert match.get_hole(1).winner == "player2"
    assert (match.player1.score, match.player2.score) == (4, 3 + 32)


def test_record_hole_score_does_not_mutate_input():
    match = _match()
    updated = record_hole_score(match, 5, player1_score=4, player2_score=4)
    assert match.get_hole(5).player1_score == 0
    assert updated.get_hole(5).player1_score == 4


def test_record_hole_score_errors():
    match = _match()
    with pytest.raises(HoleNotFoundError):
        record_hole_score(match, 19, player1_score=4)
    with pytest.raises(ValidationError):
        record_hole_score(match, 1, player1_score=25)


def test_score_match_uses_settings():
    match = _match(handicap1=0, handicap2=0, holes=[_hole(1, 4, 5, putt1=True)])
    scored = score_match(match, ScoringSettings(hole_win_bonus=10, one_putt_value=2))
    assert scored.player1.score == 2 + 10
    assert scored.player2.score == 5


def test_score_match_nine_hole_card():
    holes = [HoleResult(hole=i, handicap=i, player1_score=4, player2_score=4) for i in range(1, 10)]
    scored = score_match(_match(handicap1=0, handicap2=10, holes=holes))
    assert [h.player2_strokes for h in scored.holes] == [2, 1, 1, 1, 1, 1, 1, 1, 1]
    assert scored.player2.hole_wins == 9
    assert scored.player2.score == 36 - 10 + 32


# ================================================================
# total_strokes
# ================================================================

def test_total_strokes():
    assert total_strokes([5, 4, 0], [True, False, True], [1, 0, 0]) == 7
    assert total_strokes([5, 4, 0], [True, False, True], [1, 0, 0], [4, 4, 4]) == -1


def test_total_strokes_length_mismatch():
    with pytest.raises(ScoringError):
        total_strokes([5, 4], [True], [0, 0])
    with pytest.raises(ScoringError):
        total_strokes([5, 4], [True, False], [0, 0], [4])
