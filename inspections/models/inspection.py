"""
Inspection record data models and type definitions.
"""

from dataclasses import dataclass
from enum import Enum

from .. import config
from .date import Date


class RiskLevel(Enum):
    """Risk categories. Anything that is not H/M/L is UNKNOWN."""
    HIGH = "H"
    MEDIUM = "M"
    LOW = "L"
    UNKNOWN = ""

    @classmethod
    def from_code(cls, code: str) -> "RiskLevel":
        """
        Categorise a risk field by its first character.

        Examples:
            'H' -> HIGH
            'High' -> HIGH
            '' -> UNKNOWN
            'X' -> UNKNOWN
        """
        if not code:
            return cls.UNKNOWN
        for level in (cls.HIGH, cls.MEDIUM, cls.LOW):
            if code[0] == level.value:
                return level
        return cls.UNKNOWN


@dataclass(frozen=True)
class InspectionRecord:
    """
    A single restaurant inspection.

    Attributes:
        name: Restaurant name
        address: Street address
        inspection_date: Date of the inspection
        risk_code: First character of the risk field ('' when the field was empty)
        result: Inspection outcome, stored verbatim ("Pass", "Conditional", "Fail", ...)
        neighborhood: Neighborhood the restaurant belongs to
    """
    name: str
    address: str
    inspection_date: Date
    risk_code: str
    result: str
    neighborhood: str

    @property
    def risk(self) -> RiskLevel:
        return RiskLevel.from_code(self.risk_code)

    @property
    def is_passing(self) -> bool:
        """Whether the result is exactly "Pass" or "Conditional"."""
        return self.result in config.PASSING_RESULTS

    def to_dict(self) -> dict:
        """Convert record to dictionary."""
        return {
            'name': self.name,
            'address': self.address,
            'inspection_date': self.inspection_date.display(),
            'risk': self.risk_code,
            'result': self.result,
            'neighborhood': self.neighborhood,
        }
