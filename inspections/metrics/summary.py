"""
Summary metrics over inspection records.
Overall pass statistics, risk distribution, neighborhood breakdown and name search.
All functions are pure: they read the records and never modify them.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

import pandas as pd

from ..config import (
    NEIGHBORHOOD_COLUMNS,
    RESULT_PASS,
    RESULT_CONDITIONAL,
    RESULT_FAIL,
    RISK_BUCKETS,
)
from ..logger import setup_logger
from ..models.date import Date
from ..models.inspection import InspectionRecord, RiskLevel

logger = setup_logger(__name__)

RISK_LEVELS = [RiskLevel(code) for code in RISK_BUCKETS]


@dataclass(frozen=True)
class OverallSummary:
    """Totals plus the most recent passing inspection, if any."""
    total: int
    passing: int
    most_recent: Optional[InspectionRecord] = None


@dataclass(frozen=True)
class RiskDistribution:
    """Per-bucket counts and percentages for the H/M/L risk codes."""
    counts: dict = field(default_factory=dict)
    percentages: dict = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.counts.values())


def records_to_dataframe(records: Sequence[InspectionRecord]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per record, in record order.

    Args:
        records: Inspection records

    Returns:
        DataFrame with name, address, inspection_date, risk, result, neighborhood
    """
    columns = ['name', 'address', 'inspection_date', 'risk', 'result', 'neighborhood']
    return pd.DataFrame([record.to_dict() for record in records], columns=columns)


def calculate_overall_summary(
    records: Sequence[InspectionRecord],
    floor: Optional[Date] = None,
) -> OverallSummary:
    """
    Count records and passing records and find the latest passing inspection.

    A record is passing when its result is exactly "Pass" or "Conditional".
    When several passing records share the latest date the first one wins.

    Args:
        records: Inspection records
        floor: Only consider passing records dated strictly after this date

    Returns:
        OverallSummary
    """
    passing = 0
    most_recent: Optional[InspectionRecord] = None

    for record in records:
        if not record.is_passing:
            continue
        passing += 1

        if floor is not None and record.inspection_date <= floor:
            continue
        if most_recent is None or record.inspection_date > most_recent.inspection_date:
            most_recent = record

    return OverallSummary(total=len(records), passing=passing, most_recent=most_recent)


def calculate_risk_distribution(records: Sequence[InspectionRecord]) -> RiskDistribution:
    """
    Share of records per risk bucket (H, M, L).

    Records whose risk is RiskLevel.UNKNOWN are left out of both the counts and the
    denominator. With no eligible records every percentage is 0.0.

    Args:
        records: Inspection records

    Returns:
        RiskDistribution keyed by risk code
    """
    levels = pd.Series([record.risk for record in records], dtype=object)
    counts = levels.value_counts().reindex(RISK_LEVELS, fill_value=0)

    total = int(counts.sum())
    if total == 0:
        percentages = {level.value: 0.0 for level in RISK_LEVELS}
    else:
        percentages = {level.value: float(counts.loc[level]) / total * 100.0 for level in RISK_LEVELS}

    logger.debug(f"Risk distribution over {total} eligible records")

    return RiskDistribution(
        counts={level.value: int(counts.loc[level]) for level in RISK_LEVELS},
        percentages=percentages,
    )


def get_neighborhood_summary(records: Sequence[InspectionRecord]) -> pd.DataFrame:
    """
    Pass / conditional / fail counts per neighborhood.

    Neighborhoods are listed in order of first appearance. Results other than
    the three exact strings are not counted, but their neighborhood is still
    listed.

    Args:
        records: Inspection records

    Returns:
        DataFrame with columns neighborhood, passed, conditional, failed
    """
    if not records:
        return pd.DataFrame(columns=NEIGHBORHOOD_COLUMNS)

    df = records_to_dataframe(records)
    neighborhoods = pd.unique(df['neighborhood'])

    counts = pd.crosstab(df['neighborhood'], df['result'])
    summary = counts.reindex(
        index=neighborhoods,
        columns=[RESULT_PASS, RESULT_CONDITIONAL, RESULT_FAIL],
        fill_value=0,
    ).rename(columns={
        RESULT_PASS: 'passed',
        RESULT_CONDITIONAL: 'conditional',
        RESULT_FAIL: 'failed',
    })

    summary = summary.rename_axis(index='neighborhood', columns=None).reset_index()
    return summary[NEIGHBORHOOD_COLUMNS].astype({'passed': int, 'conditional': int, 'failed': int})


def search_by_name(records: Sequence[InspectionRecord], term: str) -> list[InspectionRecord]:
    """
    Case-insensitive substring search on restaurant names.

    Examples:
        'joe' matches "Joe's Diner" and "JOE'S GRILL"

    Args:
        records: Inspection records
        term: Text to look for; an empty term matches everything

    Returns:
        Matching records in record order
    """
    needle = term.lower()
    return [record for record in records if needle in record.name.lower()]
