#!/usr/bin/env python3
"""
Pydantic Data Models for Training Session Records

Provides one model per discipline (ride, run, swim, shoot). The models are
independent shapes that only share the identity and timing fields of
``TrainingSessionModel``; the common Trainable view over them (start,
duration, distance) lives in the accessor functions at the bottom of this
module and is dispatched on the discipline tag.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .interface import Discipline
from ..const import TARGET_MAX_SCORES


class ShootingTargetType(str, Enum):
    """Target face types"""

    OLYMPIC = "olympic"
    FIELD = "field"
    COMPOUND = "compound"
    BAREBOW = "barebow"
    NFAA = "nfaa"

    @property
    def max_score(self) -> int:
        return TARGET_MAX_SCORES[self.value]


def to_naive_utc(value: datetime) -> datetime:
    """Session timestamps are naive UTC; aware values are converted"""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class TrainingSessionModel(BaseModel):
    """Identity and timing fields shared by every session record

    ``start_date`` and ``end_date`` are stored as naive UTC so sessions from
    any source compare with each other.
    """

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()), description="Session identifier"
    )
    start_date: datetime = Field(..., description="Session start time")
    end_date: Optional[datetime] = Field(None, description="Session end time")
    name: str = Field(default="", description="Session name")
    notes: str = Field(default="", description="Free-form notes")

    model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_timestamp(cls, v):
        if v is None:
            return v
        return to_naive_utc(v)

    @property
    def is_completed(self) -> bool:
        return self.end_date is not None


class HeartRateMixin(BaseModel):
    """Heart rate summary fields"""

    average_heart_rate: int = Field(default=0, ge=0, description="Average HR in bpm")
    max_heart_rate: int = Field(default=0, ge=0, description="Max HR in bpm")

    @field_validator("average_heart_rate", "max_heart_rate")
    @classmethod
    def validate_heart_rate(cls, v):
        if v and not (30 <= v <= 250):
            raise ValueError("heart rate must be 0 (unknown) or between 30-250 bpm")
        return v


class RideSession(TrainingSessionModel, HeartRateMixin):
    """Riding session"""

    total_distance: float = Field(default=0.0, ge=0, description="Distance in meters")
    total_duration: float = Field(default=0.0, ge=0, description="Duration in seconds")
    elevation_gain: float = Field(default=0.0, ge=0, description="Ascent in meters")
    elevation_loss: float = Field(default=0.0, ge=0, description="Descent in meters")
    max_speed: float = Field(default=0.0, ge=0, description="Max speed in m/s")
    ride_type: str = Field(default="hack", description="Ride type")

    @property
    def average_speed(self) -> float:
        """Average speed in m/s"""
        if self.total_duration <= 0:
            return 0.0
        return self.total_distance / self.total_duration


class RunningSession(TrainingSessionModel, HeartRateMixin):
    """Running session"""

    total_distance: float = Field(default=0.0, ge=0, description="Distance in meters")
    total_duration: float = Field(default=0.0, ge=0, description="Duration in seconds")
    total_ascent: float = Field(default=0.0, ge=0, description="Ascent in meters")
    total_descent: float = Field(default=0.0, ge=0, description="Descent in meters")
    average_cadence: int = Field(default=0, ge=0, description="Steps per minute")
    session_type: str = Field(default="easy", description="Run type")
    run_mode: str = Field(default="outdoor", description="outdoor, treadmill, track")

    @property
    def average_pace(self) -> float:
        """Average pace in seconds per km"""
        if self.total_distance <= 0:
            return 0.0
        return self.total_duration / (self.total_distance / 1000)


class SwimmingSession(TrainingSessionModel, HeartRateMixin):
    """Swimming session"""

    total_distance: float = Field(default=0.0, ge=0, description="Distance in meters")
    total_duration: float = Field(default=0.0, ge=0, description="Duration in seconds")
    pool_length: float = Field(default=25.0, gt=0, description="Pool length in meters")
    pool_mode: str = Field(default="pool", description="pool or open_water")
    total_strokes: int = Field(default=0, ge=0, description="Total strokes")

    @property
    def lap_count(self) -> int:
        return int(self.total_distance // self.pool_length)

    @property
    def average_pace(self) -> float:
        """Average pace in seconds per 100m"""
        if self.total_distance <= 0:
            return 0.0
        return self.total_duration / (self.total_distance / 100)


class Shot(BaseModel):
    """Single arrow"""

    order_index: int = Field(default=0, ge=0)
    score: int = Field(default=0, ge=0, le=10)
    is_x: bool = Field(default=False, description="Inner ten")


class ShootingEnd(BaseModel):
    """A group of arrows shot before scoring"""

    order_index: int = Field(default=0, ge=0)
    shots: List[Shot] = Field(default_factory=list)

    @property
    def total_score(self) -> int:
        return sum(shot.score for shot in self.shots)


class ShootingSession(TrainingSessionModel):
    """Shooting session

    ``distance`` is the distance to the target, not distance travelled;
    shooting sessions report no distance to statistics.
    """

    target_type: ShootingTargetType = Field(default=ShootingTargetType.OLYMPIC)
    distance: float = Field(default=10.0, ge=0, description="Target distance in meters")
    number_of_ends: int = Field(default=6, ge=0)
    arrows_per_end: int = Field(default=6, ge=0)
    ends: List[ShootingEnd] = Field(default_factory=list)

    @property
    def total_duration(self) -> float:
        """Elapsed seconds between start and end, 0 while unfinished"""
        if self.end_date is None:
            return 0.0
        return max((self.end_date - self.start_date).total_seconds(), 0.0)

    @property
    def total_score(self) -> int:
        return sum(end.total_score for end in self.ends)

    @property
    def shot_count(self) -> int:
        return sum(len(end.shots) for end in self.ends)

    @property
    def max_possible_score(self) -> int:
        return self.target_type.max_score * self.number_of_ends * self.arrows_per_end

    @property
    def score_percentage(self) -> float:
        if self.max_possible_score <= 0:
            return 0.0
        return self.total_score / self.max_possible_score * 100

    @property
    def x_count(self) -> int:
        return sum(1 for end in self.ends for shot in end.shots if shot.is_x)


SessionRecord = Union[RideSession, RunningSession, SwimmingSession, ShootingSession]

RECORD_MODELS: Dict[Discipline, Type[TrainingSessionModel]] = {
    Discipline.RIDING: RideSession,
    Discipline.RUNNING: RunningSession,
    Discipline.SWIMMING: SwimmingSession,
    Discipline.SHOOTING: ShootingSession,
}


# Trainable accessors


def discipline_of(record: SessionRecord) -> Discipline:
    """Return the discipline tag for a session record"""
    for discipline, model in RECORD_MODELS.items():
        if type(record) is model:
            return discipline
    raise TypeError(f"Not a session record: {type(record).__name__}")


def session_start(record: SessionRecord) -> datetime:
    """Start time as naive UTC, also for records built without validation"""
    discipline_of(record)
    return to_naive_utc(record.start_date)


def session_duration(record: SessionRecord) -> float:
    """Elapsed duration in seconds"""
    discipline_of(record)
    return float(record.total_duration)


def session_distance(record: SessionRecord) -> Optional[float]:
    """Distance in meters, None for disciplines that cover no distance"""
    if not discipline_of(record).is_distance_bearing:
        return None
    return float(record.total_distance)


def parse_record(discipline: Discipline, document: dict) -> SessionRecord:
    """Validate a raw document into the model for ``discipline``"""
    return RECORD_MODELS[discipline].model_validate(document)
