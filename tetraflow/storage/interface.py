#!/usr/bin/env python3
"""
Record Store Abstract Interface - Separates the query engine from storage implementation
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Any
from enum import Enum


class Discipline(str, Enum):
    """Training discipline enumeration

    Declaration order is the canonical order used for dispatch and for
    breaking timestamp ties between disciplines.
    """

    RIDING = "riding"
    RUNNING = "running"
    SWIMMING = "swimming"
    SHOOTING = "shooting"

    @property
    def is_distance_bearing(self) -> bool:
        """Whether sessions of this discipline cover a distance"""
        return self is not Discipline.SHOOTING

    @property
    def unit_of_measure(self) -> str:
        if self in (Discipline.RIDING, Discipline.RUNNING):
            return "km"
        if self is Discipline.SWIMMING:
            return "m"
        return "points"

    @property
    def order(self) -> int:
        return DISCIPLINE_ORDER.index(self)


DISCIPLINE_ORDER = list(Discipline)


class RecordStoreInterface(ABC):
    """Record store abstract interface

    A store hands back every session of one discipline. Order is not
    guaranteed and no cross-discipline joins are performed.
    """

    @abstractmethod
    def initialize(self, config: Dict[str, Any]) -> bool:
        """Initialize the store connection"""
        pass

    @abstractmethod
    def fetch_all(self, discipline: Discipline) -> List[Any]:
        """Fetch all session records of a discipline

        Raises:
            StorageError: when the backend cannot complete the fetch
        """
        pass


class ValidationError(Exception):
    """Record validation error"""

    pass


class StorageError(Exception):
    """Storage error"""

    pass
