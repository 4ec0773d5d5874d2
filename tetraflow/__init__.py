#!/usr/bin/env python3
"""
TetraFlow - Cross-discipline training session history and statistics
Unifies riding, running, swimming and shooting sessions behind one query engine
"""

# Setup logging first
from .config import get_settings
from .utils import setup_tetraflow_logging

_settings = get_settings()
setup_tetraflow_logging(log_level=_settings.log_level, log_dir=_settings.log_dir)

# Storage interfaces, models and implementations
from .storage.interface import (
    RecordStoreInterface, Discipline, ValidationError, StorageError
)
from .storage.model import (
    RideSession, RunningSession, SwimmingSession, ShootingSession,
    ShootingEnd, Shot, SessionRecord
)
from .storage.memory import InMemoryRecordStore
from .storage.elasticsearch import ElasticsearchRecordStore

# Analytics
from .analytics.interface import (
    SessionQuery, HistoryItem, DisciplineTotals, SessionStatistics,
    AnalyticsError, InvalidParameterError, SessionFetchError
)

# Query engine
from .services.query_service import SessionQueryService, DisciplineSessions

__version__ = "0.1.0"

__all__ = [
    # Storage
    'RecordStoreInterface', 'Discipline', 'ValidationError', 'StorageError',
    'RideSession', 'RunningSession', 'SwimmingSession', 'ShootingSession',
    'ShootingEnd', 'Shot', 'SessionRecord',
    'InMemoryRecordStore', 'ElasticsearchRecordStore',

    # Analytics
    'SessionQuery', 'HistoryItem', 'DisciplineTotals', 'SessionStatistics',
    'AnalyticsError', 'InvalidParameterError', 'SessionFetchError',

    # Query engine
    'SessionQueryService', 'DisciplineSessions',
]
