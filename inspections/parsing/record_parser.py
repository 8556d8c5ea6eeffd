"""
Record loader for inspection data files.
Handles file reading, line splitting, and per-line error reporting.
"""

from pathlib import Path
from typing import Iterable

from ..config import FIELD_DELIMITER, FIELD_COUNT, FILE_ENCODING
from ..logger import setup_logger, log_record_stats
from ..models.inspection import InspectionRecord
from .date_parser import parse_date

logger = setup_logger(__name__)


class RecordParseError(ValueError):
    """Raised when a line cannot be turned into an InspectionRecord."""

    def __init__(self, message: str, line: str):
        super().__init__(message)
        self.line = line


def parse_line(line: str) -> InspectionRecord:
    """
    Parse one line of the data file.

    The line holds six comma-separated fields: name, address, date, risk,
    result, neighborhood. The neighborhood is everything after the fifth
    comma, so it may itself contain commas.

    Args:
        line: Raw line, with or without its line terminator

    Returns:
        Parsed InspectionRecord

    Raises:
        RecordParseError: If the line has too few fields or a bad date
    """
    line = line.rstrip("\r\n")
    fields = line.split(FIELD_DELIMITER, FIELD_COUNT - 1)

    # An empty trailing neighborhood counts as a missing field
    if len(fields) < FIELD_COUNT or not fields[-1]:
        raise RecordParseError(f"Failed to parse line: {line}", line)

    name, address, date_str, risk_str, result, neighborhood = fields

    try:
        inspection_date = parse_date(date_str)
    except ValueError as e:
        raise RecordParseError(f"Failed to parse date: {date_str}", line) from e

    return InspectionRecord(
        name=name,
        address=address,
        inspection_date=inspection_date,
        risk_code=risk_str[:1],
        result=result,
        neighborhood=neighborhood,
    )


def parse_lines(lines: Iterable[str]) -> tuple[list[InspectionRecord], list[str]]:
    """
    Parse lines, skipping the malformed ones.

    Args:
        lines: Lines of the data file

    Returns:
        Tuple of (records, warnings), records in input order
    """
    records = []
    warnings = []

    for line_number, line in enumerate(lines, start=1):
        try:
            records.append(parse_line(line))
        except RecordParseError as e:
            warnings.append(f"Line {line_number}: {e}")

    return records, warnings


def load_records(filepath: str | Path) -> list[InspectionRecord]:
    """
    Load inspection records from a data file.

    A missing or unreadable file is logged and yields an empty list so the
    caller can carry on with zero records.

    Args:
        filepath: Path to the data file

    Returns:
        Records in file order
    """
    filepath = Path(filepath)
    logger.info(f"Loading inspection file: {filepath}")

    try:
        with filepath.open(encoding=FILE_ENCODING, errors="replace") as f:
            records, warnings = parse_lines(f)
    except OSError as e:
        logger.error(f"Failed to open the data file: {filepath} ({e})")
        return []

    for warning in warnings:
        logger.warning(warning)
    if warnings:
        logger.info(f"Skipped {len(warnings)} malformed lines")

    log_record_stats(records, logger, "Loaded inspections")

    return records
