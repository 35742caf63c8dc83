import itertools
import random
from typing import Dict, List, Optional, Sequence, Tuple

from roundrobin.history import HistoryTracker
from roundrobin.logger import setup_logger
from roundrobin.models import Assignment, RoundResult, RoundStatus, Team, Weights
from roundrobin.scoring import REJECTED, court_score, team_score

logger = setup_logger(__name__)

PLAYERS_PER_COURT = 4

Split = Tuple[Team, Team]


def courts_for(player_count: int, max_courts: int) -> int:
    return min(player_count // PLAYERS_PER_COURT, max_courts)


def select_resting_players(
    players: Sequence[str],
    num_courts: int,
    history: HistoryTracker,
    round_num: int,
    weights: Weights,
    rng: random.Random,
) -> Tuple[List[str], List[str]]:
    """Split players into (active, resting) and record the rests.

    Players who most need a game are kept active: few games, many rests,
    a long rest streak or a rest last round all raise the priority.
    """
    needed = num_courts * PLAYERS_PER_COURT
    if len(players) <= needed:
        return list(players), []

    def need_to_play(p: str) -> float:
        priority = history.rest_count(p) * weights.rest_priority
        priority -= history.games_played(p) * weights.games_priority
        priority += history.consecutive_rests(p, round_num) * weights.rest_streak_priority
        if history.last_round(p) is RoundStatus.RESTED:
            priority += weights.rested_last_priority
        return priority

    # Shuffle first so equal priorities do not always favour input order
    pool = list(players)
    rng.shuffle(pool)
    ranked = sorted(
        pool,
        key=lambda p: (-need_to_play(p), history.games_played(p), -history.rest_count(p)),
    )
    active, resting = ranked[:needed], ranked[needed:]
    for p in resting:
        history.record_rest(p, round_num)
    return active, resting


def team_combinations(four: Sequence[str]) -> List[Split]:
    """The three ways to split four players into two teams of two."""
    a, b, c, d = four
    return [
        (frozenset((a, b)), frozenset((c, d))),
        (frozenset((a, c)), frozenset((b, d))),
        (frozenset((a, d)), frozenset((b, c))),
    ]


def bias_weights(
    players: Sequence[str], history: HistoryTracker, round_num: int, weights: Weights
) -> Dict[str, float]:
    return {
        p: history.games_played(p) * weights.bias_games
        + history.consecutive_games(p, round_num) * weights.bias_consecutive
        - history.unique_opponents(p) * weights.bias_diversity
        for p in players
    }


def shuffle_with_bias(
    players: Sequence[str],
    history: HistoryTracker,
    round_num: int,
    weights: Weights,
    rng: random.Random,
    base: Optional[Dict[str, float]] = None,
) -> List[str]:
    """Randomised ordering, ascending by jitter plus the player's bias weight."""
    if base is None:
        base = bias_weights(players, history, round_num, weights)
    keyed = [(rng.random() * weights.bias_jitter + base[p], p) for p in players]
    keyed.sort(key=lambda item: item[0])
    return [p for _, p in keyed]


class SplitScorer:
    """Scores (split, court) candidates for one round, caching the results.

    History does not change while a round is being searched, so a cached
    score stays valid until the round is committed.
    """

    def __init__(self, history: HistoryTracker, round_num: int, weights: Weights, allow_repeats: bool = False):
        self.history = history
        self.round_num = round_num
        self.weights = weights
        self.allow_repeats = allow_repeats
        self._cache: Dict[Tuple[frozenset, int], float] = {}

    def score(self, team1: Team, team2: Team, court: int) -> float:
        key = (frozenset((team1, team2)), court)
        cached = self._cache.get(key)
        if cached is None:
            cached = team_score(self.history, team1, team2, self.round_num, self.weights, self.allow_repeats)
            if cached != REJECTED:
                cached += court_score(self.history, team1 | team2, court, self.weights)
            self._cache[key] = cached
        return cached

    def best_split(self, four: Sequence[str], court: int) -> Tuple[float, Optional[Split]]:
        best_score, best = REJECTED, None
        for team1, team2 in team_combinations(four):
            s = self.score(team1, team2, court)
            if s > best_score:
                best_score, best = s, (team1, team2)
        return best_score, best


def _scan_court(pool: Sequence[str], court: int, scorer: SplitScorer) -> Tuple[float, Optional[Split]]:
    # At most C(24, 4) quartets; scores are cached by the scorer
    best_score, best = REJECTED, None
    for four in itertools.combinations(pool, PLAYERS_PER_COURT):
        s, split = scorer.best_split(four, court)
        if split is not None and s > best_score:
            best_score, best = s, split
    return best_score, best


def greedy_round(
    pool: Sequence[str],
    num_courts: int,
    history: HistoryTracker,
    round_num: int,
    weights: Weights,
) -> Tuple[List[Assignment], bool]:
    """Court-by-court fallback.

    Each court takes the best repeat-free split of the remaining players; only
    when none exists is a repeated partnership accepted, and the round is
    reported as degraded.
    """
    strict = SplitScorer(history, round_num, weights)
    relaxed = SplitScorer(history, round_num, weights, allow_repeats=True)
    remaining = list(pool)
    assignments: List[Assignment] = []
    degraded = False

    for court in range(1, num_courts + 1):
        _, split = _scan_court(remaining, court, strict)
        if split is None:
            _, split = _scan_court(remaining, court, relaxed)
            degraded = True
            logger.warning(
                "round %d court %d: no repeat-free split left, accepting a repeated partnership",
                round_num, court,
            )
        team1, team2 = split
        assignments.append(Assignment(court=court, team1=team1, team2=team2))
        remaining = [p for p in remaining if p not in team1 and p not in team2]

    return assignments, degraded


def optimize_round(
    pool: Sequence[str],
    num_courts: int,
    history: HistoryTracker,
    round_num: int,
    weights: Weights,
    rng: random.Random,
) -> Tuple[List[Assignment], bool]:
    """Randomised search over whole-round assignments.

    Each trial fills every court from one biased shuffle of the pool; a trial
    with any court that cannot avoid a repeated partnership is discarded.
    Returns the assignments and whether the fallback had to accept a repeat.
    """
    scorer = SplitScorer(history, round_num, weights)
    base = bias_weights(pool, history, round_num, weights)
    iterations = min(
        weights.round_iteration_cap,
        max(weights.round_iteration_floor, len(pool) * weights.round_iterations_per_player),
    )

    best_total, best = REJECTED, None
    for _ in range(iterations):
        order = shuffle_with_bias(pool, history, round_num, weights, rng, base)
        total = 0.0
        trial: List[Assignment] = []
        for court in range(1, num_courts + 1):
            four = order[(court - 1) * PLAYERS_PER_COURT:court * PLAYERS_PER_COURT]
            s, split = scorer.best_split(four, court)
            if split is None:
                break
            total += s
            trial.append(Assignment(court=court, team1=split[0], team2=split[1]))
        else:
            if total > best_total:
                best_total, best = total, trial

    if best is not None:
        return best, False

    logger.info("round %d: no valid trial in %d iterations, using greedy fallback", round_num, iterations)
    return greedy_round(pool, num_courts, history, round_num, weights)


def build_round(
    players: Sequence[str],
    round_num: int,
    max_courts: int,
    history: HistoryTracker,
    weights: Weights,
    rng: random.Random,
) -> RoundResult:
    """Pick who rests, assign the rest to courts and record the games."""
    num_courts = courts_for(len(players), max_courts)
    active, resting = select_resting_players(players, num_courts, history, round_num, weights, rng)
    assignments, degraded = optimize_round(active, num_courts, history, round_num, weights, rng)

    for a in assignments:
        history.record_game(a.team1, a.team2, a.court, round_num)

    logger.debug(
        "round %d: %d courts, %d resting%s",
        round_num, num_courts, len(resting), " (degraded)" if degraded else "",
    )
    return RoundResult(round=round_num, resting=set(resting), assignments=assignments, degraded=degraded)
