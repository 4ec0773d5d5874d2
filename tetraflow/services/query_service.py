#!/usr/bin/env python3
"""
Session Query Service - Cross-discipline history and statistics

Fetches sessions of each selected discipline from a record store, applies the
date filter, and either merges them into one newest-first history or reduces
them to summary statistics.

Store failures are handled per discipline: by default a discipline whose
fetch raises contributes no sessions and the other disciplines are still
processed. The failed disciplines are reported on ``DisciplineSessions.failed``.
With ``strict_fetch`` enabled a ``SessionFetchError`` is raised instead, after
all disciplines have been attempted.
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterator, List, Optional, Tuple

from ..analytics.history import merge_history
from ..analytics.interface import (
    HistoryItem, SessionQuery, SessionStatistics, SessionFetchError
)
from ..analytics.statistics import compute_statistics
from ..config import get_settings
from ..storage.interface import RecordStoreInterface, Discipline, DISCIPLINE_ORDER
from ..storage.model import SessionRecord, RECORD_MODELS, session_start
from ..utils import get_logger

logger = get_logger(__name__)


@dataclass
class DisciplineSessions:
    """Filtered, newest-first sessions per discipline

    Unpacks as ``rides, runs, swims, shoots``.
    """
    rides: List[SessionRecord] = field(default_factory=list)
    runs: List[SessionRecord] = field(default_factory=list)
    swims: List[SessionRecord] = field(default_factory=list)
    shoots: List[SessionRecord] = field(default_factory=list)
    failed: Tuple[Discipline, ...] = ()

    def __iter__(self) -> Iterator[List[SessionRecord]]:
        return iter((self.rides, self.runs, self.swims, self.shoots))

    def for_discipline(self, discipline: Discipline) -> List[SessionRecord]:
        return list(self)[discipline.order]

    @property
    def total(self) -> int:
        return sum(len(records) for records in self)


class SessionQueryService:
    """Query engine over a discipline record store"""

    def __init__(self, store: RecordStoreInterface,
                 strict_fetch: Optional[bool] = None,
                 trend_weeks: Optional[int] = None):
        """
        Initialize the query service

        Args:
            store: Record store implementation (e.g., InMemoryRecordStore)
            strict_fetch: Raise SessionFetchError when a discipline fetch
                fails; defaults to the ``strict_fetch`` setting
            trend_weeks: Weeks covered by the statistics weekly trend;
                defaults to the ``weekly_trend_weeks`` setting
        """
        settings = get_settings()
        self.store = store
        self.strict_fetch = settings.strict_fetch if strict_fetch is None else strict_fetch
        self.trend_weeks = settings.weekly_trend_weeks if trend_weeks is None else trend_weeks
        # Stores are not assumed to be thread-safe
        self._store_lock = threading.Lock()

    def fetch_by_discipline(self, query: Optional[SessionQuery] = None) -> DisciplineSessions:
        """
        Fetch the sessions of each selected discipline

        Args:
            query: Discipline and ``since`` filters; ``limit`` is ignored

        Returns:
            Newest-first sessions per discipline; unselected or failed
            disciplines have empty lists
        """
        query = query or SessionQuery()
        lists: Dict[Discipline, List[SessionRecord]] = {}
        errors: Dict[Discipline, str] = {}

        for discipline in DISCIPLINE_ORDER:
            if not query.selects(discipline):
                lists[discipline] = []
                continue
            try:
                records = self._fetch(discipline)
                lists[discipline] = self._filter(discipline, records, query.since)
            except Exception as e:
                logger.warning(f"⚠️ Fetch failed for {discipline.value} sessions, skipping: {e}")
                errors[discipline] = str(e)
                lists[discipline] = []

        failed = tuple(d for d in DISCIPLINE_ORDER if d in errors)
        if failed and self.strict_fetch:
            raise SessionFetchError(list(failed), errors)

        result = DisciplineSessions(*(lists[d] for d in DISCIPLINE_ORDER), failed=failed)
        logger.debug(f"🔍 {query!r} matched {result.total} sessions")
        return result

    def fetch_history(self, query: Optional[SessionQuery] = None) -> List[HistoryItem]:
        """
        Fetch a newest-first history across disciplines

        Args:
            query: Discipline, ``since`` and ``limit`` options

        Returns:
            History items, at most ``query.limit`` of them when set
        """
        query = query or SessionQuery()
        rides, runs, swims, shoots = self.fetch_by_discipline(query)
        return merge_history(rides, runs, swims, shoots, limit=query.limit)

    def statistics(self, query: Optional[SessionQuery] = None,
                   reference_date: Optional[datetime] = None) -> SessionStatistics:
        """
        Compute statistics over the sessions matching ``query``

        Args:
            query: Discipline and ``since`` filters; ``limit`` is ignored
            reference_date: "now" for weekly and streak figures

        Returns:
            Statistics aggregate
        """
        rides, runs, swims, shoots = self.fetch_by_discipline(query)
        return compute_statistics(
            rides, runs, swims, shoots,
            reference_date=reference_date,
            trend_weeks=self.trend_weeks,
        )

    def _fetch(self, discipline: Discipline) -> List[SessionRecord]:
        with self._store_lock:
            return list(self.store.fetch_all(discipline))

    @staticmethod
    def _filter(discipline: Discipline, records: List[SessionRecord],
                since: Optional[datetime]) -> List[SessionRecord]:
        model = RECORD_MODELS[discipline]
        kept = []
        for record in records:
            if type(record) is not model:
                logger.warning(f"Dropping {type(record).__name__} returned for {discipline.value}")
                continue
            if since is not None and session_start(record) < since:
                continue
            kept.append(record)
        # Stable sort so equal start times keep the store's order
        kept.sort(key=session_start, reverse=True)
        return kept
