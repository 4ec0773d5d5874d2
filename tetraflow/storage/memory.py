#!/usr/bin/env python3
"""
In-memory record store - implements RecordStoreInterface
"""
from typing import Dict, List, Any, Iterable

from .interface import RecordStoreInterface, Discipline, StorageError, ValidationError
from .model import SessionRecord, discipline_of, parse_record
from ..utils import get_logger


logger = get_logger(__name__)


class InMemoryRecordStore(RecordStoreInterface):
    """Keeps session records in per-discipline lists, in insertion order"""

    def __init__(self, records: Iterable[SessionRecord] = ()):
        self._records: Dict[Discipline, List[SessionRecord]] = {
            discipline: [] for discipline in Discipline
        }
        self.add_many(records)

    def initialize(self, config: Dict[str, Any]) -> bool:
        """Load optional seed documents: ``{"riding": [{...}, ...], ...}``"""
        for name, documents in config.get("documents", {}).items():
            try:
                discipline = Discipline(name)
            except ValueError:
                raise StorageError(f"Unknown discipline in seed data: {name}")
            for document in documents:
                try:
                    self.add(parse_record(discipline, document))
                except ValueError as e:
                    raise ValidationError(f"Invalid {discipline.value} document: {e}")
        return True

    def add(self, record: SessionRecord) -> None:
        self._records[discipline_of(record)].append(record)

    def add_many(self, records: Iterable[SessionRecord]) -> int:
        count = 0
        for record in records:
            self.add(record)
            count += 1
        return count

    def remove(self, discipline: Discipline, record_id: str) -> bool:
        records = self._records[discipline]
        for index, record in enumerate(records):
            if record.id == record_id:
                del records[index]
                return True
        return False

    def fetch_all(self, discipline: Discipline) -> List[SessionRecord]:
        return list(self._records[discipline])

    def count(self, discipline: Discipline) -> int:
        return len(self._records[discipline])
