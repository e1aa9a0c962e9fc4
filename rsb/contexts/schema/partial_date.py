"""
Partial Date

A calendar date whose month and day are optional, e.g. 2014-06-29, 2023-04 or 1999.
"""

import calendar
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rsb.contexts.schema.exceptions import GrammarMismatchError, InvalidCalendarDateError

# Compiled once at import; used with fullmatch so a trailing newline never slips through
PARTIAL_DATE_REGEX = re.compile(r"[0-9]{4}(?:-([0-9]{2}))?(?:-([0-9]{2}))?")


class DatePrecision(Enum):
    """Which components of a partial date are present."""

    YEAR = "year"
    YEAR_MONTH = "year_month"
    FULL = "full"


@dataclass(frozen=True)
class PartialDate:
    """
    Immutable year, year-month or year-month-day value.

    Build instances with PartialDate.parse(). Direct construction runs the same
    calendar checks, so an invalid value can never exist.

    Attributes:
        year: Four digit year (0-9999)
        month: Month 1-12, or None for year-only dates
        day: Day of month, or None unless month is also set
    """

    year: int
    month: Optional[int] = None
    day: Optional[int] = None

    def __post_init__(self) -> None:
        text = "-".join(str(part) for part in (self.year, self.month, self.day) if part is not None)
        _check_calendar(text, self.year, self.month, self.day)

    @classmethod
    def parse(cls, text: str) -> "PartialDate":
        """
        Parse YYYY, YYYY-MM or YYYY-MM-DD.

        Args:
            text: Date text

        Returns:
            PartialDate with as many components as the text carries

        Raises:
            GrammarMismatchError: If text does not match the date grammar
            InvalidCalendarDateError: If the components name no real date
                (e.g. 2024-13 or 2023-02-31)
        """
        if not isinstance(text, str):
            raise GrammarMismatchError(str(text))

        match = PARTIAL_DATE_REGEX.fullmatch(text)
        if match is None:
            raise GrammarMismatchError(text)

        year = int(text[:4])
        month = int(match.group(1)) if match.group(1) is not None else None
        day = int(match.group(2)) if match.group(2) is not None else None

        _check_calendar(text, year, month, day)
        return cls(year, month, day)

    @property
    def precision(self) -> DatePrecision:
        if self.month is None:
            return DatePrecision.YEAR
        if self.day is None:
            return DatePrecision.YEAR_MONTH
        return DatePrecision.FULL

    def serialize(self) -> str:
        """Render as YYYY, YYYY-MM or YYYY-MM-DD (components zero-padded)."""
        if self.month is None:
            return f"{self.year:04d}"
        if self.day is None:
            return f"{self.year:04d}-{self.month:02d}"
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.serialize()


def _check_calendar(text: str, year: int, month: Optional[int], day: Optional[int]) -> None:
    """Raise InvalidCalendarDateError unless the components fit the proleptic Gregorian calendar."""
    if not 0 <= year <= 9999:
        valid = False
    elif month is None:
        # A day without a month
        valid = day is None
    elif not 1 <= month <= 12:
        valid = False
    elif day is None:
        valid = True
    else:
        days_in_month = calendar.mdays[month] + (month == 2 and calendar.isleap(year))
        valid = 1 <= day <= days_in_month

    if not valid:
        raise InvalidCalendarDateError(text, year, month, day)
