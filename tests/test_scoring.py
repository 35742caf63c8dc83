import math

import pytest

from roundrobin.models import Weights
from roundrobin.scoring import REJECTED, court_load, court_score, team_score

W = Weights()


def fs(*names):
    return frozenset(names)


def test_fresh_teams_collect_new_pair_bonuses(history):
    score = team_score(history, fs("A", "B"), fs("C", "D"), 1, W)
    assert score == pytest.approx(2 * W.new_partnership + 4 * W.new_interaction)


def test_repeated_partnership_is_rejected(history):
    history.record_game(fs("A", "B"), fs("C", "D"), 1, 1)
    assert team_score(history, fs("A", "B"), fs("E", "F"), 2, W) == REJECTED


def test_repeated_partnership_allowed_costs_a_steep_penalty(history):
    history.record_game(fs("A", "B"), fs("C", "D"), 1, 1)
    relaxed = team_score(history, fs("A", "B"), fs("E", "F"), 2, W, allow_repeats=True)
    fresh = team_score(history, fs("A", "E"), fs("B", "F"), 2, W)
    assert math.isfinite(relaxed)
    assert relaxed < fresh
    assert relaxed <= W.new_partnership + 4 * W.new_interaction - W.partnership * 4


def test_previous_opponents_are_penalised(history):
    history.record_game(fs("A", "B"), fs("C", "D"), 1, 1)
    score = team_score(history, fs("A", "C"), fs("B", "D"), 2, W)
    # new partners A-C and B-D, new opponents A-B and C-D, repeats A-D and C-B
    expected = 2 * W.new_partnership + 2 * W.new_interaction - 2 * W.opposition
    assert score == pytest.approx(expected)


def test_game_imbalance_above_tolerance(history):
    history.record_game(fs("A", "B"), fs("C", "D"), 1, 1)
    score = team_score(history, fs("E", "F"), fs("A", "C"), 2, W)
    fresh = 2 * W.new_partnership + 4 * W.new_interaction
    assert score == pytest.approx(fresh - W.game_balance)

    within = team_score(history, fs("E", "A"), fs("F", "G"), 2, W)
    assert within == pytest.approx(fresh)


def test_rested_players_get_a_bonus(history):
    history.record_rest("E", 1)
    score = team_score(history, fs("E", "F"), fs("G", "H"), 2, W)
    assert score == pytest.approx(2 * W.new_partnership + 4 * W.new_interaction + W.rested_bonus)


def test_consecutive_games_are_penalised(history):
    history.record_game(fs("A", "B"), fs("C", "D"), 1, 1)
    history.record_game(fs("A", "E"), fs("F", "G"), 1, 2)
    score = team_score(history, fs("A", "H"), fs("I", "J"), 3, W)
    fresh = 2 * W.new_partnership + 4 * W.new_interaction
    # A has played 2 games against a team with none: excess 1 over tolerance
    assert score == pytest.approx(fresh - W.game_balance - 2 * W.consecutive_penalty)


def test_court_load_grows_quadratically_then_logarithmically():
    assert court_load(0, 3) == 0
    assert court_load(2, 3) == 4
    assert court_load(3, 3) == 9
    assert court_load(4, 3) > court_load(3, 3)
    assert court_load(6, 3) == pytest.approx(9 * (1 + math.log(2)))
    assert court_load(12, 3) < 12 ** 2


def test_court_score(history):
    assert court_score(history, "ABCD", 1, W) == pytest.approx(4 * W.new_court_bonus)
    history.record_game(fs("A", "B"), fs("C", "D"), 1, 1)
    assert court_score(history, "ABCD", 1, W) == pytest.approx(-4 * W.court_repeat)
    assert court_score(history, "ABEF", 1, W) == pytest.approx(2 * W.new_court_bonus - 2 * W.court_repeat)
