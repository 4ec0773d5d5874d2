#!/usr/bin/env python3
"""
Storage Module - Record store abstraction, session models and implementations
"""

from .interface import (
    RecordStoreInterface,
    Discipline,
    DISCIPLINE_ORDER,
    ValidationError,
    StorageError
)

from .model import (
    TrainingSessionModel,
    RideSession,
    RunningSession,
    SwimmingSession,
    ShootingSession,
    ShootingEnd,
    ShootingTargetType,
    Shot,
    SessionRecord,
    RECORD_MODELS,
    discipline_of,
    session_start,
    session_duration,
    session_distance,
    parse_record,
    to_naive_utc
)

from .memory import InMemoryRecordStore
from .elasticsearch import ElasticsearchRecordStore

__all__ = [
    'RecordStoreInterface',
    'Discipline',
    'DISCIPLINE_ORDER',
    'ValidationError',
    'StorageError',
    'TrainingSessionModel',
    'RideSession',
    'RunningSession',
    'SwimmingSession',
    'ShootingSession',
    'ShootingEnd',
    'ShootingTargetType',
    'Shot',
    'SessionRecord',
    'RECORD_MODELS',
    'discipline_of',
    'session_start',
    'session_duration',
    'session_distance',
    'parse_record',
    'to_naive_utc',
    'InMemoryRecordStore',
    'ElasticsearchRecordStore'
]
