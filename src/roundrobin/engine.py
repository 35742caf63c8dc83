"""Badminton doubles round-robin scheduler.

One ``BadmintonScheduler`` handles one generation: load the players, generate
the schedule once, then read the games-only text and fairness statistics.
A new schedule needs a new instance.

Example:
    >>> scheduler = BadmintonScheduler(max_courts=2, max_rounds=3, seed=7)
    >>> scheduler.load_players("A\\nB\\nC\\nD\\nE\\nF\\nG\\nH")
    >>> text = scheduler.generate_schedule()
"""

import random
from typing import List, Optional, Tuple

from roundrobin import config
from roundrobin.exceptions import (
    InvalidConfigurationError,
    InvalidRoundRangeError,
    NoPlayersLoadedError,
    ScheduleAlreadyGeneratedError,
    SchedulerError,
)
from roundrobin.functions import build_round
from roundrobin.history import HistoryTracker
from roundrobin.logger import setup_logger
from roundrobin.models import FairnessReport, RoundResult, Weights
from roundrobin.players import load_players
from roundrobin.render import (
    calculate_fairness_stats,
    render_player_stats,
    render_schedule,
)

logger = setup_logger(__name__)


class BadmintonScheduler:
    def __init__(
        self,
        max_courts: int,
        max_rounds: int,
        weights: Optional[Weights] = None,
        print_stats: bool = False,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        max_courts_cap: int = config.MAX_COURTS,
        max_rounds_cap: int = config.MAX_ROUNDS,
        min_players: int = config.MIN_PLAYERS,
    ):
        if not 1 <= max_courts <= max_courts_cap:
            raise InvalidConfigurationError(f"Courts must be between 1 and {max_courts_cap}, got {max_courts}")
        if not 1 <= max_rounds <= max_rounds_cap:
            raise InvalidConfigurationError(f"Rounds must be between 1 and {max_rounds_cap}, got {max_rounds}")

        self.max_courts = max_courts
        self.max_rounds = max_rounds
        self.weights = weights or config.DEFAULT_WEIGHTS
        self.print_stats = print_stats
        self.min_players = min_players
        self.rng = rng or random.Random(seed)

        self._players: List[str] = []
        self._history: Optional[HistoryTracker] = None
        self._rounds: List[RoundResult] = []
        self._generated = False
        self._games_only = ""

    @property
    def players(self) -> Tuple[str, ...]:
        return tuple(self._players)

    @property
    def history(self) -> HistoryTracker:
        if self._history is None:
            raise NoPlayersLoadedError()
        return self._history

    @property
    def schedule(self) -> Tuple[RoundResult, ...]:
        return tuple(self._rounds)

    @property
    def degraded_rounds(self) -> List[int]:
        return [r.round for r in self._rounds if r.degraded]

    def load_players(self, text: str) -> None:
        if self._generated or self._rounds:
            raise ScheduleAlreadyGeneratedError()
        try:
            players = load_players(text, self.min_players)
        except SchedulerError as err:
            logger.info("rejected player list: %s", err)
            raise
        self._players = players
        self._history = HistoryTracker(players)
        logger.debug("loaded %d players", len(players))

    def generate_round(self, round_num: int) -> RoundResult:
        """Generate the next round; rounds are built strictly in order."""
        if self._history is None:
            raise NoPlayersLoadedError()
        if self._generated:
            raise ScheduleAlreadyGeneratedError()
        if not 1 <= round_num <= self.max_rounds:
            raise InvalidRoundRangeError(round_num, self.max_rounds)
        expected = len(self._rounds) + 1
        if round_num != expected:
            raise InvalidRoundRangeError(round_num, self.max_rounds, expected)

        result = build_round(self._players, round_num, self.max_courts, self._history, self.weights, self.rng)
        self._rounds.append(result)
        return result

    def generate_schedule(self) -> str:
        if self._history is None:
            raise NoPlayersLoadedError()
        if self._generated:
            raise ScheduleAlreadyGeneratedError()

        # rounds already built through generate_round are kept
        for round_num in range(len(self._rounds) + 1, self.max_rounds + 1):
            self.generate_round(round_num)
        self._generated = True

        games = render_schedule(self._rounds)
        self._games_only = games.strip()
        if self.degraded_rounds:
            logger.warning("repeated partnerships were unavoidable in rounds %s", self.degraded_rounds)
        logger.info(
            "generated %d rounds for %d players on up to %d courts",
            self.max_rounds, len(self._players), self.max_courts,
        )

        if self.print_stats:
            return games + render_player_stats(self._history)
        return games

    def games_only_text(self) -> str:
        return self._games_only

    def calculate_fairness_stats(self) -> FairnessReport:
        return calculate_fairness_stats(self.history)
