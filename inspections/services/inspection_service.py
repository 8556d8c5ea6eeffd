"""
Inspection service - one loaded snapshot of records and the queries over it.
"""

from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from ..metrics import (
    OverallSummary,
    RiskDistribution,
    calculate_overall_summary,
    calculate_risk_distribution,
    get_neighborhood_summary,
    search_by_name,
)
from ..models.date import Date
from ..models.inspection import InspectionRecord
from ..parsing import load_records
from ..logger import setup_logger

logger = setup_logger(__name__)


class InspectionService:
    """
    Read-only query interface over a fixed set of inspection records.
    Records are loaded once and kept as a tuple for the life of the service.
    """

    def __init__(self, records: Iterable[InspectionRecord] = ()):
        self._records = tuple(records)

    @classmethod
    def from_file(cls, filepath: str | Path) -> "InspectionService":
        """
        Load records from a data file.

        A missing file gives a service with zero records.
        """
        return cls(load_records(filepath))

    @property
    def records(self) -> tuple[InspectionRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def overall_summary(self, floor: Optional[Date] = None) -> OverallSummary:
        return calculate_overall_summary(self._records, floor=floor)

    def risk_distribution(self) -> RiskDistribution:
        return calculate_risk_distribution(self._records)

    def neighborhood_summary(self) -> pd.DataFrame:
        return get_neighborhood_summary(self._records)

    def search(self, term: str) -> list[InspectionRecord]:
        logger.debug(f"Searching {len(self._records)} records for '{term}'")
        return search_by_name(self._records, term)
