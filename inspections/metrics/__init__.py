"""Metrics package for inspection record analysis."""

from .summary import (
    OverallSummary,
    RiskDistribution,
    records_to_dataframe,
    calculate_overall_summary,
    calculate_risk_distribution,
    get_neighborhood_summary,
    search_by_name,
)
