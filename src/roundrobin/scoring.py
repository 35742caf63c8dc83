"""Scoring of candidate team and court assignments.

Higher scores are better. A repeated partnership is rejected outright with
``-inf`` unless ``allow_repeats`` is set, in which case it only costs a
steep finite penalty. That mode is reserved for the last-resort fallback.
"""

import math
from typing import Iterable

from roundrobin.history import HistoryTracker
from roundrobin.models import RoundStatus, Team, Weights

REJECTED = float("-inf")


def team_score(
    history: HistoryTracker,
    team1: Team,
    team2: Team,
    round_num: int,
    weights: Weights,
    allow_repeats: bool = False,
) -> float:
    score = 0.0

    # Partnerships
    for team in (team1, team2):
        a, b = sorted(team)
        count = history.partnership_count(a, b)
        if count == 0:
            score += weights.new_partnership
        elif allow_repeats:
            score -= weights.partnership * (count + 1) ** 2
        else:
            return REJECTED

    # Oppositions
    for a in team1:
        for b in team2:
            count = history.opposition_count(a, b)
            if count == 0:
                score += weights.new_interaction
            else:
                score -= weights.opposition * count ** weights.opposition_power

    # Game balance
    games1 = sum(history.games_played(p) for p in team1)
    games2 = sum(history.games_played(p) for p in team2)
    excess = abs(games1 - games2) - weights.game_balance_tolerance
    if excess > 0:
        score -= weights.game_balance * excess ** weights.game_balance_power

    # Rotation
    for player in team1 | team2:
        if history.status(player, round_num - 1) is RoundStatus.RESTED:
            score += weights.rested_bonus
        streak = history.consecutive_games(player, round_num)
        if streak >= 2:
            score -= weights.consecutive_penalty * streak

    return score


def court_load(count: int, cap: int) -> float:
    """Quadratic up to ``cap`` prior assignments, logarithmic after."""
    if count <= cap:
        return float(count ** 2)
    return cap ** 2 * (1 + math.log(count / cap))


def court_score(history: HistoryTracker, players: Iterable[str], court: int, weights: Weights) -> float:
    score = 0.0
    for player in players:
        count = history.court_count(player, court)
        if count == 0:
            score += weights.new_court_bonus
        else:
            score -= weights.court_repeat * court_load(count, weights.court_cap)
    return score
