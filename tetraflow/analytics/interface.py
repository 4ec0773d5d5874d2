#!/usr/bin/env python3
"""
Analytics interface definitions and data structures.

This module defines the query options and the result types produced by the
history merger and the statistics aggregator.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..storage.interface import Discipline
from ..storage.model import to_naive_utc


class SessionQuery:
    """Query options shared by every engine entry point

    Defaults: all disciplines, no lower date bound, no limit.
    """

    def __init__(self,
                 discipline: Optional[Union[Discipline, str]] = None,
                 since: Optional[datetime] = None,
                 limit: Optional[int] = None):
        self.discipline: Optional[Discipline] = None
        self.since: Optional[datetime] = None
        self.limit: Optional[int] = None
        self.for_discipline(discipline)
        self.since_date(since)
        self.with_limit(limit)

    def for_discipline(self, discipline: Optional[Union[Discipline, str]]) -> "SessionQuery":
        """Restrict to one discipline, None for all"""
        if discipline is None or isinstance(discipline, Discipline):
            self.discipline = discipline
            return self
        try:
            self.discipline = Discipline(str(discipline).lower())
        except ValueError:
            raise InvalidParameterError(f"Unknown discipline: {discipline!r}")
        return self

    def since_date(self, since: Optional[datetime]) -> "SessionQuery":
        """Keep only sessions starting at or after ``since``

        Aware values are converted to naive UTC, the convention used by
        session records.
        """
        if since is not None and not isinstance(since, datetime):
            raise InvalidParameterError(f"since must be a datetime, got {type(since).__name__}")
        self.since = to_naive_utc(since) if since is not None else None
        return self

    def with_limit(self, limit: Optional[int]) -> "SessionQuery":
        """Cap history length; zero or negative returns nothing"""
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int)):
            raise InvalidParameterError(f"limit must be an int, got {type(limit).__name__}")
        self.limit = limit
        return self

    def selects(self, discipline: Discipline) -> bool:
        return self.discipline is None or self.discipline is discipline

    def __repr__(self) -> str:
        discipline = self.discipline.value if self.discipline else None
        return f"SessionQuery(discipline={discipline!r}, since={self.since!r}, limit={self.limit!r})"


@dataclass(frozen=True)
class HistoryItem:
    """Discipline-tagged projection of one session record"""
    discipline: Discipline
    start_date: datetime
    record_id: str
    name: str
    duration: float
    distance: Optional[float]
    record: Any = field(repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'discipline': self.discipline.value,
            'start_date': self.start_date.isoformat(),
            'record_id': self.record_id,
            'name': self.name,
            'duration': self.duration,
            'distance': self.distance,
        }


@dataclass(frozen=True)
class DisciplineTotals:
    """Subtotals for one discipline"""
    count: int = 0
    total_duration: float = 0.0
    total_distance: float = 0.0

    @property
    def average_duration(self) -> float:
        return self.total_duration / self.count if self.count else 0.0

    @property
    def average_distance(self) -> float:
        return self.total_distance / self.count if self.count else 0.0


@dataclass(frozen=True)
class WeeklyActivitySummary:
    """Activity within one ISO week"""
    week_start: date
    session_count: int
    total_duration: float
    total_distance: float
    by_discipline: Mapping[Discipline, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "by_discipline", MappingProxyType(dict(self.by_discipline)))


@dataclass(frozen=True)
class ShootingSummary:
    """Scoring summary over shooting sessions"""
    session_count: int = 0
    total_shots: int = 0
    total_score: int = 0
    average_accuracy: float = 0.0
    best_score: Optional[int] = None


@dataclass(frozen=True)
class SessionStatistics:
    """Immutable summary over a filtered set of session records"""
    total_sessions: int
    total_duration: float
    total_distance: float
    average_duration: float
    average_distance: float
    by_discipline: Mapping[Discipline, DisciplineTotals]
    most_active_discipline: Optional[Discipline] = None
    sessions_this_week: int = 0
    duration_this_week: float = 0.0
    current_streak: int = 0
    weekly_trend: Tuple[WeeklyActivitySummary, ...] = ()
    shooting: ShootingSummary = field(default_factory=ShootingSummary)

    def __post_init__(self):
        object.__setattr__(self, "by_discipline", MappingProxyType(dict(self.by_discipline)))

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary format"""
        return {
            'total_sessions': self.total_sessions,
            'total_duration': self.total_duration,
            'total_distance': self.total_distance,
            'average_duration': self.average_duration,
            'average_distance': self.average_distance,
            'by_discipline': {
                discipline.value: {
                    'count': totals.count,
                    'total_duration': totals.total_duration,
                    'total_distance': totals.total_distance,
                    'average_duration': totals.average_duration,
                    'average_distance': totals.average_distance,
                }
                for discipline, totals in self.by_discipline.items()
            },
            'most_active_discipline': (
                self.most_active_discipline.value if self.most_active_discipline else None
            ),
            'sessions_this_week': self.sessions_this_week,
            'duration_this_week': self.duration_this_week,
            'current_streak': self.current_streak,
            'weekly_trend': [
                {
                    'week_start': week.week_start.isoformat(),
                    'session_count': week.session_count,
                    'total_duration': week.total_duration,
                    'total_distance': week.total_distance,
                    'by_discipline': {d.value: n for d, n in week.by_discipline.items()},
                }
                for week in self.weekly_trend
            ],
            'shooting': {
                'session_count': self.shooting.session_count,
                'total_shots': self.shooting.total_shots,
                'total_score': self.shooting.total_score,
                'average_accuracy': self.shooting.average_accuracy,
                'best_score': self.shooting.best_score,
            },
        }


# Exception classes
class AnalyticsError(Exception):
    """Base exception for analytics operations"""
    pass


class InvalidParameterError(AnalyticsError):
    """Raised when invalid parameters are provided"""
    pass


class SessionFetchError(AnalyticsError):
    """Raised in strict mode when one or more discipline fetches failed"""

    def __init__(self, failed: List[Discipline], errors: Optional[Dict[Discipline, str]] = None):
        self.failed = tuple(failed)
        self.errors = errors or {}
        names = ", ".join(d.value for d in self.failed)
        super().__init__(f"Failed to fetch sessions for: {names}")
