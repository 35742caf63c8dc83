import re
from typing import List

from roundrobin import config
from roundrobin.exceptions import DuplicateNameError
from roundrobin.players import find_duplicates, parse_player_names

NAME_PATTERN = re.compile(r"^[a-zA-Z\s.\-]+$")


def validate_players(
    text: str,
    min_players: int = config.MIN_PLAYERS,
    max_players: int = config.MAX_PLAYERS,
    max_name_length: int = config.MAX_NAME_LENGTH,
) -> List[str]:
    """Return every problem with a player list; empty when the list is usable."""
    errors = []
    players = parse_player_names(text)

    if len(players) < min_players:
        errors.append(f"At least {min_players} players are required. Currently have {len(players)}.")
    if len(players) > max_players:
        errors.append(f"Maximum {max_players} players supported. Currently have {len(players)}.")

    lines = text.strip().split("\n")
    if any(not line.strip() for line in lines[1:-1]):
        errors.append("Empty lines detected between player names. Please remove them.")

    long_names = [p for p in players if len(p) > max_name_length]
    if long_names:
        errors.append(f"Player names too long (max {max_name_length} characters): {', '.join(long_names)}")

    invalid = [p for p in players if not NAME_PATTERN.match(p)]
    if invalid:
        errors.append(
            "Invalid characters in names (only letters, spaces, dots, and hyphens allowed): "
            + ", ".join(invalid)
        )

    duplicates = find_duplicates(text)
    if duplicates:
        errors.append(str(DuplicateNameError(duplicates)))
    return errors


def clean_player_names(text: str) -> str:
    """Trim, drop blank lines and capitalise each word of each name."""
    return "\n".join(
        " ".join(word.capitalize() for word in name.split(" "))
        for name in parse_player_names(text)
    )


def validate_tournament_config(text: str, courts: int, rounds: int) -> List[str]:
    count = len(parse_player_names(text))
    warnings = []
    if count > courts * 4 * 2:
        warnings.append("Many players will rest each round")
    if rounds > count:
        warnings.append("More rounds than players - some may play very frequently")
    if courts > count // 4:
        warnings.append("Not enough players to fill all courts")
    return warnings


def estimate_tournament_duration(rounds: int, avg_game_minutes: int = 15) -> str:
    hours, minutes = divmod(rounds * avg_game_minutes, 60)
    if hours == 0:
        return f"{minutes} minutes"
    if minutes == 0:
        return f"{hours} hour{'s' if hours > 1 else ''}"
    return f"{hours}h {minutes}m"


def format_player_count(count: int) -> str:
    if count == 0:
        return "No players"
    if count == 1:
        return "1 player"
    return f"{count} players"
