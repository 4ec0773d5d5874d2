#!/usr/bin/env python3
"""
Tests for session record models and the Trainable accessors
"""

import pytest
from datetime import datetime, timedelta, timezone
from pydantic import ValidationError

from tetraflow.storage.interface import Discipline
from tetraflow.storage.model import (
    RideSession, RunningSession, SwimmingSession, ShootingSession,
    ShootingTargetType, discipline_of, session_start, session_duration,
    session_distance, parse_record
)

from conftest import T0, make_shoot


class TestDiscipline:
    """Test Discipline enum"""

    def test_enumeration_order(self):
        assert list(Discipline) == [
            Discipline.RIDING, Discipline.RUNNING, Discipline.SWIMMING, Discipline.SHOOTING
        ]
        assert Discipline.SWIMMING.order == 2

    def test_distance_bearing(self):
        assert Discipline.RIDING.is_distance_bearing
        assert Discipline.SWIMMING.is_distance_bearing
        assert not Discipline.SHOOTING.is_distance_bearing

    def test_unit_of_measure(self):
        assert Discipline.RUNNING.unit_of_measure == "km"
        assert Discipline.SWIMMING.unit_of_measure == "m"
        assert Discipline.SHOOTING.unit_of_measure == "points"


class TestSessionModels:
    """Test discipline-specific session models"""

    def test_negative_distance_rejected(self):
        with pytest.raises(ValidationError):
            RunningSession(start_date=T0, total_distance=-1)

    def test_heart_rate_range(self):
        RideSession(start_date=T0, average_heart_rate=0)
        with pytest.raises(ValidationError):
            RideSession(start_date=T0, average_heart_rate=10)

    def test_running_pace(self):
        run = RunningSession(start_date=T0, total_duration=1500, total_distance=5000)
        assert run.average_pace == 300.0
        assert RunningSession(start_date=T0).average_pace == 0.0

    def test_swimming_laps_and_pace(self):
        swim = SwimmingSession(start_date=T0, total_duration=1200, total_distance=1000)
        assert swim.lap_count == 40
        assert swim.average_pace == 120.0

    def test_ride_average_speed(self):
        ride = RideSession(start_date=T0, total_duration=3600, total_distance=18000)
        assert ride.average_speed == 5.0

    def test_ids_are_unique(self):
        assert RideSession(start_date=T0).id != RideSession(start_date=T0).id


class TestShootingSession:
    """Test shooting scoring"""

    def test_scoring(self):
        shoot = make_shoot(T0, scores=(10, 9, 8))
        assert shoot.total_score == 27
        assert shoot.shot_count == 3
        assert shoot.max_possible_score == 30
        assert shoot.score_percentage == pytest.approx(90.0)
        assert shoot.x_count == 1

    def test_field_target_max_score(self):
        shoot = ShootingSession(start_date=T0, target_type="field",
                                number_of_ends=2, arrows_per_end=3)
        assert shoot.target_type is ShootingTargetType.FIELD
        assert shoot.max_possible_score == 36

    def test_duration_from_dates(self):
        assert make_shoot(T0, minutes=45).total_duration == 2700.0

    def test_unfinished_session_has_no_duration(self):
        assert ShootingSession(start_date=T0).total_duration == 0.0

    def test_empty_session_percentage(self):
        shoot = ShootingSession(start_date=T0, number_of_ends=0)
        assert shoot.score_percentage == 0.0


class TestTrainableAccessors:
    """Test tag-dispatched accessors"""

    def test_discipline_of(self, ride, run):
        assert discipline_of(ride) is Discipline.RIDING
        assert discipline_of(run) is Discipline.RUNNING
        assert discipline_of(SwimmingSession(start_date=T0)) is Discipline.SWIMMING
        assert discipline_of(make_shoot(T0)) is Discipline.SHOOTING

    def test_unknown_type(self):
        with pytest.raises(TypeError):
            discipline_of(object())

    def test_duration_and_distance(self, ride):
        assert session_start(ride) == T0
        assert session_duration(ride) == 3600.0
        assert session_distance(ride) == 20000.0

    def test_shooting_has_no_distance(self):
        shoot = make_shoot(T0, minutes=30)
        assert session_distance(shoot) is None
        assert session_duration(shoot) == 1800.0

    def test_parse_record(self):
        record = parse_record(Discipline.SWIMMING, {
            "start_date": "2024-05-15T09:00:00",
            "total_distance": 1500,
            "total_duration": 1800,
            "pool_length": 50,
        })
        assert isinstance(record, SwimmingSession)
        assert record.start_date == T0
        assert record.lap_count == 30

    def test_parse_record_end_date(self):
        record = parse_record(Discipline.SHOOTING, {
            "start_date": T0.isoformat(),
            "end_date": (T0 + timedelta(hours=1)).isoformat(),
        })
        assert record.total_duration == 3600.0


class TestTimestampNormalization:
    """Test that session timestamps share one naive UTC convention"""

    def test_aware_start_converted_to_naive_utc(self):
        ride = RideSession(start_date=datetime(2024, 5, 15, 11, 0, tzinfo=timezone(timedelta(hours=2))))
        assert ride.start_date.tzinfo is None
        assert ride.start_date == T0

    def test_parsed_zulu_timestamp(self):
        record = parse_record(Discipline.RUNNING, {"start_date": "2024-05-15T09:00:00Z"})
        assert record.start_date == T0
        assert record.start_date.tzinfo is None

    def test_end_date_normalized(self):
        shoot = ShootingSession(
            start_date=T0,
            end_date=datetime(2024, 5, 15, 10, 0, tzinfo=timezone.utc),
        )
        assert shoot.end_date.tzinfo is None
        assert shoot.total_duration == 3600.0

    def test_naive_start_unchanged(self):
        assert RideSession(start_date=T0).start_date == T0

    def test_session_start_normalizes_unvalidated_assignment(self, ride):
        ride.start_date = datetime(2024, 5, 15, 9, 0, tzinfo=timezone.utc)
        assert session_start(ride) == T0
        assert session_start(ride).tzinfo is None
