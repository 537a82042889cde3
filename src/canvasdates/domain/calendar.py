"""Calendar arithmetic for directive dates.

Pure functions over a proleptic Gregorian calendar. Works for every integer
year (including year 0 and negative years), so an offset never fails to
normalize.

INVARIANT: A CalendarDate is always normalized. Arithmetic returns a new
value; nothing mutates in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Sunday first, matching the weekday numbering below.
WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

START_DATE_FORMAT = "%m/%d/%Y"

# 1970-01-01 was a Thursday.
_EPOCH_WEEKDAY = 4


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def days_from_civil(year: int, month: int, day: int) -> int:
    """Count days from 1970-01-01 to the given date (negative before it).

    Uses 400-year eras so floor division handles years <= 0 without
    special cases.
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = month - 3 if month > 2 else month + 9
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of :func:`days_from_civil`: ``(year, month, day)``."""
    z = days + 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


@dataclass(frozen=True)
class CalendarDate:
    """A normalized calendar date.

    ``weekday`` counts from Sunday (0) to Saturday (6); ``day_of_year``
    starts at 1 on January 1st.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            msg = f"Month out of range: {self.month}"
            raise ValueError(msg)
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            msg = f"Day out of range for {self.year}-{self.month:02d}: {self.day}"
            raise ValueError(msg)

    @classmethod
    def from_ordinal(cls, days: int) -> CalendarDate:
        """Build a date from a day count relative to 1970-01-01."""
        return cls(*civil_from_days(days))

    def to_ordinal(self) -> int:
        return days_from_civil(self.year, self.month, self.day)

    @property
    def weekday(self) -> int:
        return (self.to_ordinal() + _EPOCH_WEEKDAY) % 7

    @property
    def day_of_year(self) -> int:
        return self.to_ordinal() - days_from_civil(self.year, 1, 1) + 1

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    @property
    def weekday_name(self) -> str:
        return WEEKDAY_NAMES[self.weekday]

    def add_days(self, offset: int) -> CalendarDate:
        """Return the date *offset* days away (negative moves backwards)."""
        return CalendarDate.from_ordinal(self.to_ordinal() + offset)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def add_days(base: CalendarDate, offset: int) -> CalendarDate:
    """Add *offset* days to *base*, rolling over months and years."""
    return base.add_days(offset)


def parse_start_date(text: str) -> CalendarDate:
    """Parse a ``MM/DD/YYYY`` start date.

    Single-digit months and days are accepted. Raises ``ValueError`` for
    anything else, including impossible dates such as ``02/30/2024``.
    """
    parsed = datetime.strptime(text.strip(), START_DATE_FORMAT)
    return CalendarDate(parsed.year, parsed.month, parsed.day)
