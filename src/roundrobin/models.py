from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

Team = FrozenSet[str]
Pair = Tuple[str, str]


class RoundStatus(Enum):
    UNKNOWN = "unknown"
    PLAYED = "played"
    RESTED = "rested"


def pair_key(a: str, b: str) -> Pair:
    """Unordered pair of player names, normalised to sorted order."""
    return (a, b) if a <= b else (b, a)


@dataclass
class PlayerStats:
    name: str
    games_played: int = 0
    rest_count: int = 0
    partnerships: Dict[str, int] = field(default_factory=dict)
    oppositions: Dict[str, int] = field(default_factory=dict)
    court_assignments: Dict[int, int] = field(default_factory=dict)
    last_round: RoundStatus = RoundStatus.UNKNOWN


@dataclass(frozen=True)
class Game:
    team1: Team
    team2: Team
    court: int
    round: int


@dataclass(frozen=True)
class Assignment:
    court: int
    team1: Team
    team2: Team

    @property
    def players(self) -> FrozenSet[str]:
        return self.team1 | self.team2


@dataclass
class RoundResult:
    round: int
    resting: Set[str] = field(default_factory=set)
    assignments: List[Assignment] = field(default_factory=list)
    degraded: bool = False

    @property
    def active(self) -> Set[str]:
        return {p for a in self.assignments for p in a.players}


@dataclass(frozen=True)
class Weights:
    # team scoring
    partnership: float = 2000
    opposition: float = 800
    game_balance: float = 200
    new_interaction: float = 400
    new_partnership: float = 600
    opposition_power: float = 1.5
    game_balance_tolerance: int = 1
    game_balance_power: float = 1.8
    # court balance
    court_repeat: float = 150
    court_cap: int = 3
    new_court_bonus: float = 50
    # rotation
    rested_bonus: float = 500
    consecutive_penalty: float = 300
    # who rests
    rest_priority: float = 1000
    games_priority: float = 500
    rest_streak_priority: float = 800
    rested_last_priority: float = 1200
    # sampling order
    bias_jitter: float = 1.0
    bias_games: float = 0.1
    bias_consecutive: float = 0.2
    bias_diversity: float = 0.05
    # search bounds
    round_iteration_cap: int = 500
    round_iteration_floor: int = 50
    round_iterations_per_player: int = 20


@dataclass
class RepeatedPair:
    players: Pair
    count: int


@dataclass
class PairStats:
    total: int = 0
    repeated: int = 0
    max_repeats: int = 0
    distribution: Dict[int, int] = field(default_factory=dict)
    repeated_pairs: List[RepeatedPair] = field(default_factory=list)


@dataclass
class CourtUsage:
    court: int
    count: int


@dataclass
class CourtStats:
    players: int = 0
    all_courts: List[CourtUsage] = field(default_factory=list)
    most_used: Optional[CourtUsage] = None
    least_used: Optional[CourtUsage] = None


@dataclass
class FairnessReport:
    partnerships: PairStats = field(default_factory=PairStats)
    oppositions: PairStats = field(default_factory=PairStats)
    courts: CourtStats = field(default_factory=CourtStats)
