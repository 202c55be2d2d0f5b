"""Shared fixtures for tracker tests."""
from datetime import date, timedelta

import pytest

from biotracker.common.config import Config
from biotracker.store import Entry, RecordStore

CONFIG_ENV_VARS = [
    "TRACKER_DEFAULT_SCORE",
    "TRACKER_DEFAULT_BIOMARKERS",
    "TRACKER_RANGE_DAYS",
    "TRACKER_DEMO_DATA",
    "TRACKER_DEMO_SEED",
]


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch, tmp_path):
    """Every test starts from default config, away from any local config.yaml/.env."""
    for var in CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def january_store():
    """Store with one entry per day for 2024-01-01 .. 2024-01-10."""
    store = RecordStore()
    for i in range(10):
        day = date(2024, 1, 1) + timedelta(days=i)
        store.insert(Entry(day, {"Sleep": 1 + i * 0.5, "Mood": 5}))
    return store
