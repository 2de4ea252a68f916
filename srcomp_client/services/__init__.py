# srcomp_client/services/__init__.py
"""
Services package exports.
"""
from .competition_service import CompetitionService

__all__ = ["CompetitionService"]
