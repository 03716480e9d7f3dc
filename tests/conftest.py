import os
import threading
import time
from datetime import datetime, timedelta

import pytest

from file_log.constants import file_logger as constants


class FakeClock:
    """Callable standing in for datetime.now; moved forward by hand."""

    def __init__(self, start: datetime):
        self.now = start
        self._lock = threading.Lock()

    def __call__(self) -> datetime:
        with self._lock:
            return self.now

    def advance(self, **kwargs) -> None:
        with self._lock:
            self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 10, 19, 12, 30, 0))


@pytest.fixture
def log_dir(tmp_path):
    path = tmp_path / "Logs"
    path.mkdir()
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        constants.ENV_BASE_NAME,
        constants.ENV_LOG_DIR,
        constants.ENV_USE_DATE,
        constants.ENV_USE_PREFIX,
        constants.ENV_RETENTION_DAYS,
    ):
        monkeypatch.delenv(name, raising=False)


def read_lines(path) -> list:
    with open(path, "r", encoding="utf-8") as file:
        return file.read().split("\n")


def age_file(path, days: float, now: datetime) -> None:
    stamp = (now - timedelta(days=days)).timestamp()
    os.utime(path, (stamp, stamp))


def wait_for(predicate, timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()
