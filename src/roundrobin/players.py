from typing import Dict, List, Tuple

from roundrobin.exceptions import DuplicateNameError, InsufficientPlayersError


def parse_player_names(text: str) -> List[str]:
    """Split raw text on newlines into trimmed, non-empty player names."""
    return [n.strip() for n in text.split("\n") if n.strip()]


def find_duplicates(text: str) -> List[Tuple[str, List[str]]]:
    """Group names case-insensitively, keeping only groups with more than one spelling."""
    groups: Dict[str, List[str]] = {}
    for name in parse_player_names(text):
        groups.setdefault(name.lower(), []).append(name)
    return [(key, names) for key, names in groups.items() if len(names) > 1]


def load_players(text: str, min_players: int = 4) -> List[str]:
    duplicates = find_duplicates(text)
    if duplicates:
        raise DuplicateNameError(duplicates)

    names = parse_player_names(text)
    if len(names) < min_players:
        raise InsufficientPlayersError(len(names), min_players)
    return names
