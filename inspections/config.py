"""
Configuration constants for the inspection analyser.
Centralized configuration for file format, result categories, and logging.
"""

import os
from pathlib import Path
from typing import List

from .models.date import Date

# Input file format
FIELD_DELIMITER = ","
FIELD_COUNT = 6  # name, address, date, risk, result, neighborhood
DATE_PATTERN = r"\s*([0-9]+)\s*-\s*([0-9]+)\s*-\s*([+-]?[0-9]+)\s*"  # M-D-Y, ASCII digits, signed year
FILE_ENCODING = "utf-8"

# Inspection results (compared verbatim, case-sensitive)
RESULT_PASS = "Pass"
RESULT_CONDITIONAL = "Conditional"
RESULT_FAIL = "Fail"
PASSING_RESULTS: List[str] = [RESULT_PASS, RESULT_CONDITIONAL]

# Risk buckets in report order
RISK_BUCKETS: List[str] = ['H', 'M', 'L']
RISK_LABELS = {
    'H': 'High Risk',
    'M': 'Medium Risk',
    'L': 'Low Risk',
}

# Floor used by the original menu program for "most recent passing"
LEGACY_PASSING_FLOOR = Date(day=1, month=1, year=2000)

# Display
PERCENT_DECIMALS = 1
NEIGHBORHOOD_COLUMNS = ['neighborhood', 'passed', 'conditional', 'failed']
NEIGHBORHOOD_COLUMN_WIDTHS = [30, 11, 13, 9]

# Logging
LOG_LEVEL = os.environ.get("INSPECTIONS_LOG_LEVEL", "INFO").upper()
CONSOLE_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DIR = Path(os.environ.get("INSPECTIONS_LOG_DIR", Path(__file__).parent.parent / "logs"))
