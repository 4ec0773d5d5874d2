"""
Pytest configuration and fixtures for TetraFlow tests.
"""

import os
from datetime import datetime, timedelta
from typing import List

import pytest

os.environ.setdefault("TETRAFLOW_LOG_LEVEL", "WARNING")

from tetraflow.storage.interface import Discipline, RecordStoreInterface, StorageError
from tetraflow.storage.memory import InMemoryRecordStore
from tetraflow.storage.model import (
    RideSession, RunningSession, SwimmingSession, ShootingSession, ShootingEnd, Shot
)


T0 = datetime(2024, 5, 15, 9, 0, 0)  # a Wednesday


class FailingRecordStore(RecordStoreInterface):
    """Wraps a store and raises for selected disciplines"""

    def __init__(self, inner: RecordStoreInterface, failing: List[Discipline]):
        self.inner = inner
        self.failing = set(failing)
        self.calls: List[Discipline] = []

    def initialize(self, config):
        return True

    def fetch_all(self, discipline):
        self.calls.append(discipline)
        if discipline in self.failing:
            raise StorageError(f"{discipline.value} index unavailable")
        return self.inner.fetch_all(discipline)


def make_shoot(start: datetime, minutes: int = 45, scores=(10, 9, 8)) -> ShootingSession:
    end = ShootingEnd(order_index=0, shots=[
        Shot(order_index=i, score=score, is_x=(score == 10)) for i, score in enumerate(scores)
    ])
    return ShootingSession(
        start_date=start,
        end_date=start + timedelta(minutes=minutes),
        name="Practice",
        number_of_ends=1,
        arrows_per_end=len(scores),
        ends=[end],
    )


@pytest.fixture
def ride():
    return RideSession(start_date=T0, total_duration=3600, total_distance=20000, name="Hack")


@pytest.fixture
def run():
    return RunningSession(start_date=T0 + timedelta(seconds=10), total_duration=1800,
                          total_distance=5000, name="Easy run")


@pytest.fixture
def mixed_records():
    """Two sessions per discipline spread over a week, inserted out of order"""
    return [
        RideSession(start_date=T0 - timedelta(days=1), total_duration=3000, total_distance=15000),
        RideSession(start_date=T0 - timedelta(days=6), total_duration=2400, total_distance=12000),
        RunningSession(start_date=T0 - timedelta(days=5), total_duration=1500, total_distance=4000),
        RunningSession(start_date=T0, total_duration=1800, total_distance=5000),
        SwimmingSession(start_date=T0 - timedelta(days=2), total_duration=2000, total_distance=1500),
        SwimmingSession(start_date=T0 - timedelta(days=3, hours=2), total_duration=1800, total_distance=1200),
        make_shoot(T0 - timedelta(days=4)),
        make_shoot(T0 - timedelta(hours=3), minutes=30, scores=(7, 7)),
    ]


@pytest.fixture
def memory_store(mixed_records):
    return InMemoryRecordStore(mixed_records)
