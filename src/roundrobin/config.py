import os
from typing import Optional

from dotenv import load_dotenv

from roundrobin.models import Weights

load_dotenv()


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value not in (None, "") else default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value in (None, ""):
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _optional_int_env(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value not in (None, "") else None


MIN_PLAYERS = _int_env("SCHEDULER_MIN_PLAYERS", 4)
MAX_PLAYERS = _int_env("SCHEDULER_MAX_PLAYERS", 25)
MAX_COURTS = _int_env("SCHEDULER_MAX_COURTS", 6)
MAX_ROUNDS = _int_env("SCHEDULER_MAX_ROUNDS", 10)
MAX_NAME_LENGTH = _int_env("SCHEDULER_MAX_NAME_LENGTH", 20)

DEFAULT_COURTS = _int_env("SCHEDULER_DEFAULT_COURTS", 4)
DEFAULT_ROUNDS = _int_env("SCHEDULER_DEFAULT_ROUNDS", 10)
PRINT_STATS = _bool_env("SCHEDULER_PRINT_STATS", False)
SEED = _optional_int_env("SCHEDULER_SEED")

HOST = os.getenv("HOST", "127.0.0.1")
PORT = _int_env("PORT", 8000)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")

DEFAULT_WEIGHTS = Weights()

DEFAULT_PLAYERS = "\n".join([
    "Appa",
    "Jeevan",
    "Koti",
    "Madhu",
    "Murali",
    "Phani",
    "Prasad",
    "Praveen",
    "Raghu R",
    "Rambabu",
    "Rao Seema",
    "Ravi G",
    "Tarun",
    "Sreeni",
    "Subhani",
    "Tripura",
    "Srinivas",
    "Vijay",
    "Randeep",
])
