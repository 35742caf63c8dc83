import logging

import pytest

from roundrobin.history import HistoryTracker

EIGHT = "\n".join("ABCDEFGH")


@pytest.fixture
def eight_players():
    return EIGHT


@pytest.fixture
def history():
    return HistoryTracker(list("ABCDEFGHIJ"))


@pytest.fixture
def roundrobin_caplog(caplog):
    """caplog wired to the package logger, which does not propagate to root."""
    lgr = logging.getLogger("roundrobin")
    lgr.addHandler(caplog.handler)
    try:
        yield caplog
    finally:
        lgr.removeHandler(caplog.handler)
