import copy
from typing import Dict, Iterable, List

from roundrobin.models import Game, Pair, PlayerStats, RoundStatus, pair_key


class HistoryTracker:
    """Per-player counters for one scheduling run.

    Every update touches both sides of a relationship, so partnership and
    opposition tables stay symmetric.
    """

    def __init__(self, players: Iterable[str]):
        self._stats: Dict[str, PlayerStats] = {p: PlayerStats(name=p) for p in players}
        self._round_status: Dict[str, Dict[int, RoundStatus]] = {p: {} for p in self._stats}
        self.games: List[Game] = []

    @property
    def players(self) -> List[str]:
        return list(self._stats)

    def stats(self, player: str) -> PlayerStats:
        return copy.deepcopy(self._stats[player])

    # -- Updates ---------------------------------------------------------------

    def record_game(self, team1: Iterable[str], team2: Iterable[str], court: int, round_num: int) -> Game:
        team1, team2 = frozenset(team1), frozenset(team2)
        if len(team1) != 2 or len(team2) != 2 or team1 & team2:
            raise ValueError(f"Teams must be two disjoint pairs: {sorted(team1)} vs {sorted(team2)}")

        game = Game(team1=team1, team2=team2, court=court, round=round_num)
        self.games.append(game)

        for player in team1 | team2:
            s = self._stats[player]
            s.games_played += 1
            s.court_assignments[court] = s.court_assignments.get(court, 0) + 1
            s.last_round = RoundStatus.PLAYED
            self._round_status[player][round_num] = RoundStatus.PLAYED

        for team in (team1, team2):
            a, b = sorted(team)
            self._bump(a, b, "partnerships")

        for a in team1:
            for b in team2:
                self._bump(a, b, "oppositions")
        return game

    def record_rest(self, player: str, round_num: int) -> None:
        s = self._stats[player]
        s.rest_count += 1
        s.last_round = RoundStatus.RESTED
        self._round_status[player][round_num] = RoundStatus.RESTED

    def _bump(self, a: str, b: str, table: str) -> None:
        ta = getattr(self._stats[a], table)
        tb = getattr(self._stats[b], table)
        ta[b] = ta.get(b, 0) + 1
        tb[a] = tb.get(a, 0) + 1

    # -- Queries ---------------------------------------------------------------

    def games_played(self, player: str) -> int:
        return self._stats[player].games_played

    def rest_count(self, player: str) -> int:
        return self._stats[player].rest_count

    def last_round(self, player: str) -> RoundStatus:
        return self._stats[player].last_round

    def status(self, player: str, round_num: int) -> RoundStatus:
        return self._round_status[player].get(round_num, RoundStatus.UNKNOWN)

    def partnership_count(self, a: str, b: str) -> int:
        return self._stats[a].partnerships.get(b, 0)

    def opposition_count(self, a: str, b: str) -> int:
        return self._stats[a].oppositions.get(b, 0)

    def court_count(self, player: str, court: int) -> int:
        return self._stats[player].court_assignments.get(court, 0)

    def unique_opponents(self, player: str) -> int:
        return len(self._stats[player].oppositions)

    def _streak(self, player: str, upto_round: int, wanted: RoundStatus) -> int:
        count = 0
        for round_num in range(upto_round - 1, 0, -1):
            if self.status(player, round_num) is not wanted:
                break
            count += 1
        return count

    def consecutive_games(self, player: str, upto_round: int) -> int:
        return self._streak(player, upto_round, RoundStatus.PLAYED)

    def consecutive_rests(self, player: str, upto_round: int) -> int:
        return self._streak(player, upto_round, RoundStatus.RESTED)

    # -- Aggregates ------------------------------------------------------------

    def _pairs(self, table: str) -> Dict[Pair, int]:
        pairs: Dict[Pair, int] = {}
        for player, s in self._stats.items():
            for other, count in getattr(s, table).items():
                pairs[pair_key(player, other)] = count
        return pairs

    def partnership_pairs(self) -> Dict[Pair, int]:
        return self._pairs("partnerships")

    def opposition_pairs(self) -> Dict[Pair, int]:
        return self._pairs("oppositions")

    def court_totals(self) -> Dict[int, int]:
        totals: Dict[int, int] = {}
        for s in self._stats.values():
            for court, count in s.court_assignments.items():
                totals[court] = totals.get(court, 0) + count
        return totals
