#!/usr/bin/env python3
"""
Services package - High-level services for tetraflow functionality
"""

from .query_service import SessionQueryService, DisciplineSessions

__all__ = ['SessionQueryService', 'DisciplineSessions']
