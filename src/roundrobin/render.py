from typing import Dict, Iterable, List

from roundrobin.history import HistoryTracker
from roundrobin.models import (
    CourtStats,
    CourtUsage,
    FairnessReport,
    Pair,
    PairStats,
    RepeatedPair,
    RoundResult,
)

SEPARATOR = "-" * 50
BANNER = "=" * 50


def _names(players: Iterable[str]) -> str:
    return ", ".join(sorted(players))


def render_round(result: RoundResult) -> str:
    lines = [f"Round {result.round}", f"Resting Players: {_names(result.resting)}"]
    for a in sorted(result.assignments, key=lambda a: a.court):
        lines.append(f"Court {a.court}: {_names(a.team1)} vs {_names(a.team2)}")
    lines.append(SEPARATOR)
    return "\n".join(lines) + "\n"


def render_schedule(results: Iterable[RoundResult]) -> str:
    return "".join(render_round(r) for r in results)


def render_player_stats(history: HistoryTracker) -> str:
    """Per-player appendix: games, rests, partners, opponents and courts."""
    out = ["", "Player Statistics:", BANNER]
    for player in sorted(history.players):
        s = history.stats(player)
        out += ["", f"Player: {player}", "-" * 20]
        out.append(f"Games Played: {s.games_played}")
        out += [f"Times Rested: {s.rest_count}", ""]

        out.append("Partnership History:")
        for partner, count in sorted(s.partnerships.items(), key=lambda kv: (-kv[1], kv[0])):
            out.append(f"  - with {partner}: {count} times")

        out += ["", "Opposition History:"]
        for opponent, count in sorted(s.oppositions.items(), key=lambda kv: (-kv[1], kv[0])):
            out.append(f"  - against {opponent}: {count} times")

        out += ["", "Court Distribution:"]
        for court, count in sorted(s.court_assignments.items()):
            out.append(f"  - Court {court}: {count} times")

        out += ["", BANNER]
    return "\n".join(out) + "\n"


def _pair_stats(pairs: Dict[Pair, int]) -> PairStats:
    stats = PairStats(total=len(pairs))
    for pair in sorted(pairs):
        count = pairs[pair]
        if count > 1:
            stats.repeated += 1
            stats.repeated_pairs.append(RepeatedPair(players=pair, count=count))
        stats.max_repeats = max(stats.max_repeats, count)
        stats.distribution[count] = stats.distribution.get(count, 0) + 1
    stats.repeated_pairs.sort(key=lambda rp: (-rp.count, rp.players))
    return stats


def calculate_fairness_stats(history: HistoryTracker) -> FairnessReport:
    """Summarise partner, opponent and court spread from the tracker. Read-only."""
    court_games = {court: round(slots / 4) for court, slots in history.court_totals().items()}
    courts = CourtStats(
        players=sum(1 for p in history.players if history.stats(p).court_assignments),
        all_courts=[CourtUsage(court=c, count=court_games[c]) for c in sorted(court_games)],
    )
    if courts.all_courts:
        # first court wins ties, in court order
        courts.most_used = max(courts.all_courts, key=lambda u: u.count)
        courts.least_used = min(courts.all_courts, key=lambda u: u.count)

    return FairnessReport(
        partnerships=_pair_stats(history.partnership_pairs()),
        oppositions=_pair_stats(history.opposition_pairs()),
        courts=courts,
    )


def _pair_lines(title: str, stats: PairStats) -> List[str]:
    lines = [
        f"{title}:",
        f"  Unique pairs: {stats.total}",
        f"  Repeated pairs: {stats.repeated}",
        f"  Max repeats: {stats.max_repeats}",
    ]
    for rp in stats.repeated_pairs:
        lines.append(f"  - {rp.players[0]} & {rp.players[1]}: {rp.count} times")
    return lines


def render_fairness_report(report: FairnessReport) -> str:
    lines = ["Fairness Statistics:", BANNER]
    lines += _pair_lines("Partnerships", report.partnerships)
    lines += _pair_lines("Oppositions", report.oppositions)
    lines.append("Courts:")
    for usage in report.courts.all_courts:
        lines.append(f"  Court {usage.court}: {usage.count} games")
    if report.courts.most_used is not None:
        lines.append(f"  Most used: Court {report.courts.most_used.court} ({report.courts.most_used.count} games)")
        lines.append(f"  Least used: Court {report.courts.least_used.court} ({report.courts.least_used.count} games)")
    return "\n".join(lines) + "\n"
