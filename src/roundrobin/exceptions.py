from typing import List, Optional, Tuple

DuplicateGroup = Tuple[str, List[str]]


class SchedulerError(Exception):
    """Base class for every error raised by the scheduler."""


class DuplicateNameError(SchedulerError):
    def __init__(self, groups: List[DuplicateGroup]):
        self.groups = groups
        details = "\n".join(", ".join(names) for _, names in groups)
        super().__init__(
            "Duplicate names detected!\n"
            "Please add surnames to make these names unique:\n"
            f"{details}"
        )


class InsufficientPlayersError(SchedulerError):
    def __init__(self, count: int, minimum: int = 4):
        self.count = count
        self.minimum = minimum
        super().__init__(
            f"Need at least {minimum} players to create games (got {count})"
        )


class NoPlayersLoadedError(SchedulerError):
    def __init__(self):
        super().__init__("Load players before generating a schedule")


class InvalidRoundRangeError(SchedulerError):
    def __init__(self, round_num: int, max_rounds: int, expected: Optional[int] = None):
        self.round_num = round_num
        self.max_rounds = max_rounds
        self.expected = expected
        if expected is None:
            message = f"Round {round_num} is outside 1..{max_rounds}"
        else:
            message = f"Round {round_num} requested, next round is {expected}"
        super().__init__(message)


class ScheduleAlreadyGeneratedError(SchedulerError):
    def __init__(self):
        super().__init__(
            "Schedule already generated; create a new scheduler to regenerate"
        )


class InvalidConfigurationError(SchedulerError, ValueError):
    pass
