"""Calendar and epoch arithmetic helpers."""

from datetime import date as _date

SECS_PER_DAY = 86_400
NANOS_PER_SECOND = 1_000_000_000

# Days from 0000-03-01 to 1970-01-01 in the proleptic Gregorian calendar.
# The civil algorithms below count years from March so that the leap day
# is the last day of the (shifted) year.
_DAYS_0000_03_01_TO_EPOCH = 719_468
_DAYS_PER_ERA = 146_097  # 400 years


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


# 1-indexed days per month
_MONTHDAYS = [0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def days_in_month(year: int, month: int) -> int:
    return _MONTHDAYS[month] + (month == 2 and is_leap(year))


def days_in_year(year: int) -> int:
    return 366 if is_leap(year) else 365


def replace_year_clamped(d: _date, year: int, /) -> _date:
    try:
        return d.replace(year=year)
    except ValueError:
        # only happens when we move Feb 29 to a non-leap year
        return d.replace(year=year, day=28)


def replace_month_clamped(d: _date, month: int, /) -> _date:
    return d.replace(
        month=month, day=min(d.day, days_in_month(d.year, month))
    )


def add_months(d: _date, months: int, /) -> _date:
    """Shift by a number of months, clamping the day to the end of the
    resulting month. Raises ``ValueError`` if the year is out of range."""
    year_delta, month0_new = divmod(d.month - 1 + months, 12)
    year_new = d.year + year_delta
    month_new = month0_new + 1
    if not 1 <= year_new <= 9999:
        raise ValueError(f"year {year_new} is out of range")
    return d.replace(
        year=year_new,
        month=month_new,
        day=min(d.day, days_in_month(year_new, month_new)),
    )


def days_from_civil(year: int, month: int, day: int) -> int:
    """Number of days since 1970-01-01 (negative before it)"""
    year -= month <= 2
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    return era * _DAYS_PER_ERA + day_of_era - _DAYS_0000_03_01_TO_EPOCH


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of :func:`days_from_civil`. Valid for any integer,
    the resulting year is not range-checked."""
    days += _DAYS_0000_03_01_TO_EPOCH
    era = days // _DAYS_PER_ERA
    day_of_era = days - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // (_DAYS_PER_ERA - 1)
    ) // 365
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    month_from_march = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * month_from_march + 2) // 5 + 1
    month = month_from_march + 3 if month_from_march < 10 else month_from_march - 9
    return year_of_era + era * 400 + (month <= 2), month, day


def split_epoch_seconds(secs: int) -> tuple[int, int]:
    """Split into (epoch day, second of day). Floors towards negative
    infinity, so the second of day is always in ``[0, 86400)``."""
    return divmod(secs, SECS_PER_DAY)
