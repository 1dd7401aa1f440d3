"""Date parsing utilities for FEC bulk-data encodings"""

from datetime import date, datetime
from typing import Optional

# Tried in order; 8-digit strings are ambiguous so YYYYMMDD wins over MMDDYYYY
FEC_DATE_FORMATS = ("%m/%d/%Y", "%Y%m%d", "%m%d%Y", "%Y-%m-%d")


def parse_fec_date(value: str) -> Optional[date]:
    """Parse an FEC date string, returning None when it matches no known encoding"""
    value = value.strip()
    if not value:
        return None
    for fmt in FEC_DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    return None


def cycle_for_date(day: date) -> int:
    """Two-year election cycle (named by its even closing year) containing a date"""
    return day.year + (day.year % 2)


def cycle_start_date(cycle: int) -> date:
    """First day of a two-year election cycle"""
    return date(cycle - 1, 1, 1)
