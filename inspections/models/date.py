"""
Calendar date value used for inspection dates.
"""

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class Date:
    """
    A calendar date as read from the data file.

    Values are not validated: the parser accepts any integers, so
    Date(40, 13, 2022) and the unset sentinel Date(0, 0, 0) are both valid.
    Ordering is by year, then month, then day.

    Attributes:
        day: Day of month
        month: Month number
        year: Year
    """
    day: int
    month: int
    year: int

    def sort_key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def is_leap_year(self) -> bool:
        """Gregorian leap year rule."""
        return (self.year % 4 == 0 and self.year % 100 != 0) or self.year % 400 == 0

    def display(self, pad_day: bool = True) -> str:
        """
        Render as MM-DD-YYYY.

        Args:
            pad_day: Zero-pad the day to two digits. The overall summary
                prints the day unpadded (MM-D-YYYY).
        """
        day = f"{self.day:02d}" if pad_day else str(self.day)
        return f"{self.month:02d}-{day}-{self.year}"

    def __str__(self) -> str:
        return self.display()


def compare(a: Date, b: Date) -> int:
    """Return -1, 0 or 1 as a is before, equal to, or after b."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0
