"""
Practice flow combining the session engine with persistence.
"""
from .practice_service import PracticeService, get_practice_service

__all__ = ['PracticeService', 'get_practice_service']
