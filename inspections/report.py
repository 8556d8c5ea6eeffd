"""
Text rendering for the menu reports.
Each function turns an aggregator result into the lines printed to the console.
"""

from typing import List

import pandas as pd

from .config import NEIGHBORHOOD_COLUMN_WIDTHS, PERCENT_DECIMALS, RISK_BUCKETS, RISK_LABELS
from .metrics.summary import OverallSummary, RiskDistribution
from .models.inspection import InspectionRecord

NO_RECENT_PASSING = "No recent passing inspections found."
NO_MATCHES = "No matching restaurants found."


def render_overall_summary(summary: OverallSummary) -> List[str]:
    lines = [
        f"Number of restaurants: {summary.total}",
        f"Number that pass: {summary.passing}",
    ]
    if summary.most_recent is None:
        lines.append(NO_RECENT_PASSING)
    else:
        record = summary.most_recent
        lines.append(
            f"Most recent passing inspection was of {record.name} "
            f"on {record.inspection_date.display(pad_day=False)}"
        )
    return lines


def render_risk_distribution(distribution: RiskDistribution) -> List[str]:
    return [
        f"{RISK_LABELS[code]}: {distribution.percentages[code]:.{PERCENT_DECIMALS}f}%"
        for code in RISK_BUCKETS
    ]


def render_neighborhood_summary(summary: pd.DataFrame) -> List[str]:
    """Fixed-width table, one row per neighborhood."""
    lines = [
        "Neighborhood               Passed Cond. Pass     Failed",
        "============               ====== ==========     ======",
    ]
    for row in summary.itertuples(index=False):
        cells = [row.neighborhood, row.passed, row.conditional, row.failed]
        lines.append(
            "".join(f"{cell!s:<{width}}" for cell, width in zip(cells, NEIGHBORHOOD_COLUMN_WIDTHS))
        )
    return lines


def render_search_results(matches: List[InspectionRecord]) -> List[str]:
    if not matches:
        return [NO_MATCHES]

    lines = []
    for record in matches:
        lines.extend([
            f"Restaurant: {record.name}",
            f"Address: {record.address}",
            f"Inspection Date: {record.inspection_date.display()}",
            f"Inspection Result: {record.result}",
            "",
        ])
    return lines
