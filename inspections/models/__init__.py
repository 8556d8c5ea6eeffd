"""
Models package - Data models and type definitions.
"""

from .date import Date, compare
from .inspection import InspectionRecord, RiskLevel

__all__ = ['Date', 'compare', 'InspectionRecord', 'RiskLevel']
