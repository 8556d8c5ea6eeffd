"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


SAMPLE_LINES = [
    "Joe's Diner,123 Main St,05-17-2022,H,Pass,Downtown",
    "JOE'S GRILL,9 Elm Ave,01-03-2021,M,Fail,Uptown",
    "Taco Stand,4 Oak Rd,11-30-2022,L,Conditional,Downtown",
    "Noodle Bar,77 Pine St,02-14-2020,H,Fail,Riverside",
    "Bagel Barn,5 Birch Ln,07-04-2019,X,Pass,Uptown",
]


@pytest.fixture
def sample_lines():
    """Well-formed data file lines."""
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_records(sample_lines):
    """Parsed records for the sample lines."""
    from inspections.parsing import parse_line

    return [parse_line(line) for line in sample_lines]


@pytest.fixture
def data_file(tmp_path, sample_lines):
    """Write the sample lines to a temporary data file."""
    path = tmp_path / "inspections.csv"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def make_record():
    """Factory for records with sensible defaults."""
    from inspections.models import Date, InspectionRecord

    def _make(name="Cafe", date=(1, 1, 2022), risk="H", result="Pass", neighborhood="Downtown"):
        day, month, year = date
        return InspectionRecord(
            name=name,
            address="1 Test St",
            inspection_date=Date(day, month, year),
            risk_code=risk,
            result=result,
            neighborhood=neighborhood,
        )

    return _make
