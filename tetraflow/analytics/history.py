#!/usr/bin/env python3
"""
Session history merging.

Projects per-discipline session lists into ``HistoryItem`` objects and merges
them into one newest-first sequence. Inputs must already be sorted newest
first; the merge is a k-way merge over the four lists, so equal start times
from different disciplines come out in discipline order (riding, running,
swimming, shooting) and equal start times within a discipline keep their
input order.
"""
import heapq
from itertools import islice
from typing import Iterator, List, Optional, Sequence

from ..storage.interface import Discipline, DISCIPLINE_ORDER
from ..storage.model import SessionRecord, session_distance, session_duration, session_start
from .interface import HistoryItem


def project(record: SessionRecord, discipline: Discipline) -> HistoryItem:
    """Build the history projection of ``record``"""
    return HistoryItem(
        discipline=discipline,
        start_date=session_start(record),
        record_id=record.id,
        name=record.name,
        duration=session_duration(record),
        distance=session_distance(record),
        record=record,
    )


def _projected(records: Sequence[SessionRecord], discipline: Discipline) -> Iterator[HistoryItem]:
    for record in records:
        yield project(record, discipline)


def merge_history(rides: Sequence[SessionRecord],
                  runs: Sequence[SessionRecord],
                  swims: Sequence[SessionRecord],
                  shoots: Sequence[SessionRecord],
                  limit: Optional[int] = None) -> List[HistoryItem]:
    """Merge four newest-first lists into one newest-first history

    Args:
        rides, runs, swims, shoots: per-discipline records, newest first
        limit: keep at most this many leading items; None keeps all,
            zero or negative returns an empty list
    """
    if limit is not None and limit <= 0:
        return []

    # heapq.merge breaks key ties by iterable position
    streams = [
        _projected(records, discipline)
        for discipline, records in zip(DISCIPLINE_ORDER, (rides, runs, swims, shoots))
    ]
    merged = heapq.merge(*streams, key=lambda item: item.start_date, reverse=True)

    if limit is None:
        return list(merged)
    return list(islice(merged, limit))
