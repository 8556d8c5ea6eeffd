"""Parsing package for inspection file ingestion and date handling."""

from .date_parser import parse_date
from .record_parser import RecordParseError, parse_line, parse_lines, load_records
