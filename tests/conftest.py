from datetime import datetime, timedelta

import pytest

from healthsync.config import settings


@pytest.fixture(autouse=True)
def isolated_project_root(tmp_path, monkeypatch):
    # Logs and JSON store files land in the per-test temp directory
    monkeypatch.setattr(settings, "PROJECT_ROOT", tmp_path)
    monkeypatch.setattr(settings, "TELEGRAM_TOKEN", None)
    monkeypatch.setattr(settings, "TELEGRAM_CHAT_ID", None)
    return tmp_path


class FakeClock:
    def __init__(self, start: datetime = datetime(2024, 1, 3, 9, 30, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()
