"""
Services package - Query layer over loaded inspection records.
"""

from .inspection_service import InspectionService

__all__ = ['InspectionService']
