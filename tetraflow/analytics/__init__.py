#!/usr/bin/env python3
"""
TetraFlow Analytics Module

Cross-discipline history merging and statistics aggregation over session
records fetched from a record store.
"""

from .interface import (
    SessionQuery,
    HistoryItem,
    DisciplineTotals,
    WeeklyActivitySummary,
    ShootingSummary,
    SessionStatistics,
    AnalyticsError,
    InvalidParameterError,
    SessionFetchError,
)

from .history import project, merge_history
from .statistics import (
    compute_statistics,
    calculate_streak,
    calculate_weekly_trend,
    summarize_shooting,
    week_start_of,
)

__all__ = [
    # Interfaces and data structures
    'SessionQuery',
    'HistoryItem',
    'DisciplineTotals',
    'WeeklyActivitySummary',
    'ShootingSummary',
    'SessionStatistics',

    # Exceptions
    'AnalyticsError',
    'InvalidParameterError',
    'SessionFetchError',

    # History
    'project',
    'merge_history',

    # Statistics
    'compute_statistics',
    'calculate_streak',
    'calculate_weekly_trend',
    'summarize_shooting',
    'week_start_of',
]
