#!/usr/bin/env python3
"""
Session statistics aggregation.

Reduces the per-discipline session lists to a single ``SessionStatistics``.
Every record is counted once in the grand totals and once in its own
discipline's subtotal. Shooting sessions add duration but no distance, and
the average distance is taken over distance-bearing sessions only.

Calendar-relative figures (this week, streak, weekly trend) are computed
against ``reference_date`` so results are reproducible for a fixed date.
"""
from collections import Counter
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from ..const import DEFAULT_WEEKLY_TREND_WEEKS
from ..storage.interface import Discipline, DISCIPLINE_ORDER
from ..storage.model import (
    SessionRecord, ShootingSession, session_distance, session_duration, session_start, to_naive_utc
)
from .interface import (
    DisciplineTotals, SessionStatistics, ShootingSummary, WeeklyActivitySummary,
    InvalidParameterError
)
from ..utils import get_logger


logger = get_logger(__name__)

_Entry = Tuple[Discipline, SessionRecord]


def _tagged(rides, runs, swims, shoots) -> List[_Entry]:
    entries = []
    for discipline, records in zip(DISCIPLINE_ORDER, (rides, runs, swims, shoots)):
        entries.extend((discipline, record) for record in records)
    return entries


def week_start_of(day: date) -> date:
    """Monday of the ISO week containing ``day``"""
    return day - timedelta(days=day.weekday())


def discipline_totals(records: Sequence[SessionRecord]) -> DisciplineTotals:
    return DisciplineTotals(
        count=len(records),
        total_duration=sum(session_duration(r) for r in records),
        total_distance=sum(session_distance(r) or 0.0 for r in records),
    )


def most_active_discipline(by_discipline: Dict[Discipline, DisciplineTotals]) -> Optional[Discipline]:
    """Discipline with the most sessions, earliest in discipline order on ties"""
    best = None
    for discipline in DISCIPLINE_ORDER:
        totals = by_discipline.get(discipline)
        if totals and totals.count and (best is None or totals.count > by_discipline[best].count):
            best = discipline
    return best


def calculate_streak(active_days: Set[date], today: date) -> int:
    """Consecutive active days ending on ``today``"""
    streak = 0
    expected = today
    for day in sorted(active_days, reverse=True):
        if day > expected:
            continue
        if day < expected:
            break
        streak += 1
        expected -= timedelta(days=1)
    return streak


def calculate_weekly_trend(entries: Iterable[_Entry], reference_day: date,
                           weeks: int = DEFAULT_WEEKLY_TREND_WEEKS) -> Tuple[WeeklyActivitySummary, ...]:
    """Per-week activity for the last ``weeks`` ISO weeks, oldest first"""
    if weeks < 1:
        raise InvalidParameterError("weeks must be at least 1")

    current_week = week_start_of(reference_day)
    first_week = current_week - timedelta(weeks=weeks - 1)
    buckets = {first_week + timedelta(weeks=i): [] for i in range(weeks)}

    for discipline, record in entries:
        bucket = buckets.get(week_start_of(session_start(record).date()))
        if bucket is not None:
            bucket.append((discipline, record))

    trend = []
    for week_start in sorted(buckets):
        bucket = buckets[week_start]
        trend.append(WeeklyActivitySummary(
            week_start=week_start,
            session_count=len(bucket),
            total_duration=sum(session_duration(r) for _, r in bucket),
            total_distance=sum(session_distance(r) or 0.0 for _, r in bucket),
            by_discipline=dict(Counter(d for d, _ in bucket)),
        ))
    return tuple(trend)


def summarize_shooting(shoots: Sequence[ShootingSession]) -> ShootingSummary:
    if not shoots:
        return ShootingSummary()

    scores = [s.total_score for s in shoots]
    best = max(scores)
    return ShootingSummary(
        session_count=len(shoots),
        total_shots=sum(s.shot_count for s in shoots),
        total_score=sum(scores),
        average_accuracy=sum(s.score_percentage for s in shoots) / len(shoots),
        best_score=best if best > 0 else None,
    )


def compute_statistics(rides: Sequence[SessionRecord],
                       runs: Sequence[SessionRecord],
                       swims: Sequence[SessionRecord],
                       shoots: Sequence[SessionRecord],
                       reference_date: Optional[datetime] = None,
                       trend_weeks: int = DEFAULT_WEEKLY_TREND_WEEKS) -> SessionStatistics:
    """Aggregate statistics over the given per-discipline session lists

    Args:
        rides, runs, swims, shoots: filtered records of each discipline
        reference_date: "now" for weekly and streak figures, defaults to
            the current time
        trend_weeks: number of weeks in ``weekly_trend``
    """
    if reference_date is None:
        reference_date = datetime.now()
    if isinstance(reference_date, datetime):
        reference_day = to_naive_utc(reference_date).date()
    else:
        reference_day = reference_date

    entries = _tagged(rides, runs, swims, shoots)

    by_discipline = {
        discipline: discipline_totals(records)
        for discipline, records in zip(DISCIPLINE_ORDER, (rides, runs, swims, shoots))
    }

    total_sessions = sum(t.count for t in by_discipline.values())
    total_duration = sum(t.total_duration for t in by_discipline.values())
    total_distance = sum(t.total_distance for t in by_discipline.values())
    distance_sessions = sum(
        t.count for d, t in by_discipline.items() if d.is_distance_bearing
    )

    week_start = week_start_of(reference_day)
    this_week = [r for _, r in entries if session_start(r).date() >= week_start]
    active_days = {session_start(r).date() for _, r in entries}

    stats = SessionStatistics(
        total_sessions=total_sessions,
        total_duration=total_duration,
        total_distance=total_distance,
        average_duration=total_duration / total_sessions if total_sessions else 0.0,
        average_distance=total_distance / distance_sessions if distance_sessions else 0.0,
        by_discipline=by_discipline,
        most_active_discipline=most_active_discipline(by_discipline),
        sessions_this_week=len(this_week),
        duration_this_week=sum(session_duration(r) for r in this_week),
        current_streak=calculate_streak(active_days, reference_day),
        weekly_trend=calculate_weekly_trend(entries, reference_day, trend_weeks),
        shooting=summarize_shooting(shoots),
    )

    logger.debug(f"📊 Aggregated {total_sessions} sessions "
                 f"({total_duration:.0f}s, {total_distance:.0f}m)")
    return stats
