from roundrobin.models import Assignment, CourtUsage, RepeatedPair, RoundResult
from roundrobin.render import (
    calculate_fairness_stats,
    render_fairness_report,
    render_player_stats,
    render_round,
    render_schedule,
)


def fs(*names):
    return frozenset(names)


def played(history):
    history.record_game(fs("A", "B"), fs("C", "D"), 1, 1)
    history.record_game(fs("B", "A"), fs("E", "C"), 2, 2)
    return history


def test_render_round_sorts_names_and_courts():
    result = RoundResult(
        round=3,
        resting={"Zed", "Amy"},
        assignments=[
            Assignment(court=2, team1=fs("Hal", "Eve"), team2=fs("Gus", "Fay")),
            Assignment(court=1, team1=fs("Dan", "Bea"), team2=fs("Cal", "Ann")),
        ],
    )
    assert render_round(result) == (
        "Round 3\n"
        "Resting Players: Amy, Zed\n"
        "Court 1: Bea, Dan vs Ann, Cal\n"
        "Court 2: Eve, Hal vs Fay, Gus\n"
        + "-" * 50 + "\n"
    )


def test_render_schedule_concatenates_rounds():
    rounds = [
        RoundResult(round=1, assignments=[Assignment(1, fs("A", "B"), fs("C", "D"))]),
        RoundResult(round=2, assignments=[Assignment(1, fs("A", "C"), fs("B", "D"))]),
    ]
    text = render_schedule(rounds)
    assert text.index("Round 1") < text.index("Round 2")
    assert "Court 1: A, C vs B, D" in text


def test_fairness_stats(history):
    report = calculate_fairness_stats(played(history))

    assert report.partnerships.total == 3
    assert report.partnerships.repeated == 1
    assert report.partnerships.max_repeats == 2
    assert report.partnerships.distribution == {1: 2, 2: 1}
    assert report.partnerships.repeated_pairs == [RepeatedPair(players=("A", "B"), count=2)]

    assert report.oppositions.total == 6
    assert report.oppositions.repeated == 2
    assert [rp.players for rp in report.oppositions.repeated_pairs] == [("A", "C"), ("B", "C")]

    assert report.courts.players == 5
    assert report.courts.all_courts == [CourtUsage(1, 1), CourtUsage(2, 1)]
    assert report.courts.most_used == CourtUsage(1, 1)
    assert report.courts.least_used == CourtUsage(1, 1)


def test_fairness_stats_without_games(history):
    report = calculate_fairness_stats(history)
    assert report.partnerships.total == 0
    assert report.courts.all_courts == []
    assert report.courts.most_used is None
    assert "Unique pairs: 0" in render_fairness_report(report)


def test_render_fairness_report(history):
    text = render_fairness_report(calculate_fairness_stats(played(history)))
    assert text.startswith("Fairness Statistics:")
    assert "Unique pairs: 3" in text
    assert "  - A & B: 2 times" in text
    assert "Most used: Court 1 (1 games)" in text


def test_render_player_stats(history):
    text = render_player_stats(played(history))
    assert "Player: A\n" in text
    assert "Games Played: 2" in text
    assert "  - with B: 2 times" in text
    assert "  - against C: 2 times" in text
    assert "  - Court 2: 1 times" in text
    assert text.index("Player: A") < text.index("Player: J")
