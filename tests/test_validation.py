import pytest

from roundrobin.validation import (
    clean_player_names,
    estimate_tournament_duration,
    format_player_count,
    validate_players,
    validate_tournament_config,
)


def test_valid_list_has_no_errors():
    assert validate_players("Alice\nBob\nCharlie\nDan\n") == []


def test_too_few_and_too_many():
    assert validate_players("A\nB") == ["At least 4 players are required. Currently have 2."]
    errors = validate_players("\n".join("ABCDEF"), max_players=5)
    assert errors == ["Maximum 5 players supported. Currently have 6."]


def test_blank_line_between_names():
    errors = validate_players("Alice\nBob\n\nCharlie\nDan")
    assert "Empty lines detected between player names. Please remove them." in errors


def test_long_and_invalid_names():
    errors = validate_players("Alice\nBob\nR2D2\nMaximilian Alexander Smith", max_name_length=20)
    assert any("too long" in e and "Maximilian Alexander Smith" in e for e in errors)
    assert any("Invalid characters" in e and "R2D2" in e for e in errors)


def test_duplicates_are_reported():
    errors = validate_players("Alice\nBob\nalice\nDan")
    assert any(e.startswith("Duplicate names detected!") and "Alice, alice" in e for e in errors)


def test_clean_player_names():
    assert clean_player_names("  john smith \n\nMARY\nmary-ann o.\n") == "John Smith\nMary\nMary-ann O."


def test_tournament_config_warnings():
    assert validate_tournament_config("\n".join("ABCDEFGH"), 2, 3) == []
    warnings = validate_tournament_config("\n".join("ABCDEFGHIJKLMNOPQRS"), 2, 20)
    assert "Many players will rest each round" in warnings
    assert "More rounds than players - some may play very frequently" in warnings
    assert validate_tournament_config("A\nB\nC\nD\nE", 2, 1) == ["Not enough players to fill all courts"]


@pytest.mark.parametrize("rounds, expected", [
    (2, "30 minutes"),
    (4, "1 hour"),
    (8, "2 hours"),
    (10, "2h 30m"),
])
def test_estimate_tournament_duration(rounds, expected):
    assert estimate_tournament_duration(rounds) == expected


@pytest.mark.parametrize("count, expected", [(0, "No players"), (1, "1 player"), (7, "7 players")])
def test_format_player_count(count, expected):
    assert format_player_count(count) == expected


def test_other_line_breaks_do_not_separate_names():
    assert validate_players("Ann\u2028Bo\nCy\nDan") == ["At least 4 players are required. Currently have 3."]
