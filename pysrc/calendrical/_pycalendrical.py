# The MIT License (MIT)
#
# Copyright (c) Arie Bovenberg
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

# Maintainer's notes:
#
# - All value types live in this one module. They refer to each other
#   (a date knows how to combine with a time, an instant knows how to
#   become an offset datetime), and keeping them together avoids
#   circular imports.
# - Calendar rules (validation, month lengths) are left to the standard
#   library ``datetime`` module wherever possible. Nanoseconds are stored
#   next to the microsecond-free standard library objects.
# - OffsetDateTime never does calendar arithmetic itself. It delegates to
#   LocalDateTime and re-attaches its offset.
from __future__ import annotations

__version__ = "0.1.0"

import enum
from datetime import (
    date as _date,
    datetime as _datetime,
    time as _time,
    timedelta as _timedelta,
)
from struct import pack, unpack
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    ClassVar,
    Mapping,
    TypeVar,
    no_type_check,
)

from ._common import (
    DUMMY_LEAP_YEAR,
    MAX_OFFSET_SECS,
    MAX_YEAR,
    MIN_YEAR,
    mk_fixed_tzinfo,
)
from ._math import (
    NANOS_PER_SECOND,
    SECS_PER_DAY,
    add_months,
    civil_from_days,
    days_from_civil,
    days_in_month,
    days_in_year,
    is_leap,
    replace_month_clamped,
    replace_year_clamped,
    split_epoch_seconds,
)

__all__ = [
    # Date and time
    "LocalDate",
    "LocalTime",
    "LocalDateTime",
    "YearMonth",
    "MonthDay",
    "ZoneOffset",
    "Instant",
    "OffsetDateTime",
    # Amounts of time
    "Period",
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "nanoseconds",
    # Fields
    "Field",
    "Weekday",
    # Exceptions
    "MissingArgument",
    "FieldOutOfRange",
    "ArithmeticOverflow",
    "UnsupportedField",
    # Constants
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
]


class Weekday(enum.Enum):
    """The days of the week; ``.value`` corresponds with ISO numbering."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


MONDAY = Weekday.MONDAY
TUESDAY = Weekday.TUESDAY
WEDNESDAY = Weekday.WEDNESDAY
THURSDAY = Weekday.THURSDAY
FRIDAY = Weekday.FRIDAY
SATURDAY = Weekday.SATURDAY
SUNDAY = Weekday.SUNDAY


class Field(enum.Enum):
    """The fields that can be queried with ``get()``.

    This is a closed set. Each type declares which of these fields it
    supports; see ``is_supported()``.
    """

    YEAR = "year"
    MONTH_OF_YEAR = "month_of_year"
    DAY_OF_MONTH = "day_of_month"
    DAY_OF_YEAR = "day_of_year"
    DAY_OF_WEEK = "day_of_week"
    HOUR_OF_DAY = "hour_of_day"
    MINUTE_OF_HOUR = "minute_of_hour"
    SECOND_OF_MINUTE = "second_of_minute"
    NANO_OF_SECOND = "nano_of_second"
    OFFSET_SECONDS = "offset_seconds"


class MissingArgument(TypeError):
    """A required argument was ``None``"""


class FieldOutOfRange(ValueError):
    """A field value is outside of its valid range"""


class ArithmeticOverflow(OverflowError):
    """The result of a calculation falls outside the supported range"""


class UnsupportedField(ValueError):
    """The field can't be queried or set on this type"""


_T = TypeVar("_T")
_C = TypeVar("_C", bound="_Calendrical")

# Helpers that pre-compute/lookup as much as possible
_object_new = object.__new__
_DATE_FIELDS = frozenset(
    {
        Field.YEAR,
        Field.MONTH_OF_YEAR,
        Field.DAY_OF_MONTH,
        Field.DAY_OF_YEAR,
        Field.DAY_OF_WEEK,
    }
)
_TIME_FIELDS = frozenset(
    {
        Field.HOUR_OF_DAY,
        Field.MINUTE_OF_HOUR,
        Field.SECOND_OF_MINUTE,
        Field.NANO_OF_SECOND,
    }
)


class _ImmutableBase:
    __slots__ = ()

    # Immutable classes don't need to be copied
    @no_type_check
    def __copy__(self):
        return self

    @no_type_check
    def __deepcopy__(self, _):
        return self


if TYPE_CHECKING:
    from typing import final
else:

    def final(cls):

        def init_subclass_not_allowed(cls, **kwargs):  # pragma: no cover
            raise TypeError("Subclassing not allowed")

        cls.__init_subclass__ = init_subclass_not_allowed
        return cls


class _Calendrical(_ImmutableBase):
    """Field queries shared by the date and time types:

    - :class:`LocalDate`
    - :class:`LocalTime`
    - :class:`LocalDateTime`
    - :class:`OffsetDateTime`

    (This base class itself is not for public use.)
    """

    __slots__ = ()
    _supported_fields: ClassVar[frozenset[Field]]

    def is_supported(self, field: Field, /) -> bool:
        """Whether :meth:`get` can be called with the given field

        Example
        -------
        >>> LocalDate(2021, 1, 2).is_supported(Field.HOUR_OF_DAY)
        False
        """
        return _check_field(field) in self._supported_fields

    def get(self, field: Field, /) -> int:
        """Get the value of a field.
        Day of week is returned as its ISO number (Monday is 1).

        Example
        -------
        >>> LocalDate(2021, 1, 2).get(Field.DAY_OF_YEAR)
        2
        """
        if _check_field(field) not in self._supported_fields:
            raise UnsupportedField(
                f"{type(self).__name__} does not support {field}"
            )
        return _FIELD_GETTERS[field](self)

    def with_field(self: _C, field: Field, value: int, /) -> _C:
        """Set a single field, dispatching to the matching ``with_*`` method

        Example
        -------
        >>> LocalDate(2021, 1, 2).with_field(Field.MONTH_OF_YEAR, 3)
        LocalDate(2021-03-02)
        """
        if _check_field(field) not in self._supported_fields:
            raise UnsupportedField(
                f"{type(self).__name__} does not support {field}"
            )
        return getattr(self, _FIELD_SETTERS[field])(value)  # type: ignore[no-any-return]

    def calendrical_state(self) -> Mapping[Field, int]:
        """A read-only mapping of all supported fields to their values"""
        return MappingProxyType(
            {
                field: _FIELD_GETTERS[field](self)
                for field in Field
                if field in self._supported_fields
            }
        )


@final
class LocalDate(_Calendrical):
    """A date without a time component

    Example
    -------
    >>> d = LocalDate(2021, 1, 2)
    LocalDate(2021-01-02)
    """

    __slots__ = ("_py_date",)
    _supported_fields = _DATE_FIELDS

    MIN: ClassVar[LocalDate]
    """The minimum possible date"""
    MAX: ClassVar[LocalDate]
    """The maximum possible date"""

    def __init__(self, year: int, month: int, day: int) -> None:
        self._py_date = _mk_date(year, month, day)

    @classmethod
    def from_epoch_day(cls, epoch_day: int, /) -> LocalDate:
        """Create from the number of days since 1970-01-01

        Example
        -------
        >>> LocalDate.from_epoch_day(-1)
        LocalDate(1969-12-31)
        """
        year, month, day = civil_from_days(_check_int(epoch_day, "epoch_day"))
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise ArithmeticOverflow(f"Epoch day out of range: {epoch_day}")
        return cls._from_py_unchecked(_date(year, month, day))

    @property
    def year(self) -> int:
        return self._py_date.year

    @property
    def month(self) -> int:
        return self._py_date.month

    @property
    def day(self) -> int:
        return self._py_date.day

    def day_of_year(self) -> int:
        return self._py_date.timetuple().tm_yday

    def day_of_week(self) -> Weekday:
        """The day of the week

        Example
        -------
        >>> LocalDate(2021, 1, 2).day_of_week()
        Weekday.SATURDAY
        """
        return Weekday(self._py_date.isoweekday())

    def is_leap_year(self) -> bool:
        return is_leap(self._py_date.year)

    def epoch_day(self) -> int:
        """The number of days since 1970-01-01. Inverse of
        :meth:`from_epoch_day`."""
        d = self._py_date
        return days_from_civil(d.year, d.month, d.day)

    def year_month(self) -> YearMonth:
        """The year and month (without a day component)

        Example
        -------
        >>> LocalDate(2021, 1, 2).year_month()
        YearMonth(2021-01)
        """
        return YearMonth._from_py_unchecked(self._py_date.replace(day=1))

    def month_day(self) -> MonthDay:
        """The month and day (without a year component)

        Example
        -------
        >>> LocalDate(2021, 1, 2).month_day()
        MonthDay(--01-02)
        """
        return MonthDay._from_py_unchecked(
            self._py_date.replace(year=DUMMY_LEAP_YEAR)
        )

    def at(self, t: LocalTime, /) -> LocalDateTime:
        """Combine a date with a time to create a datetime

        Example
        -------
        >>> d = LocalDate(2021, 1, 2)
        >>> d.at(LocalTime(12, 30))
        LocalDateTime(2021-01-02 12:30)
        """
        _require(t, "time")
        return LocalDateTime._from_py_unchecked(
            _datetime.combine(self._py_date, t._py_time), t._nanos
        )

    def with_year(self, year: int, /) -> LocalDate:
        """Change the year. If the day doesn't exist in that year
        (February 29th), it's clamped to the last day of the month.

        Example
        -------
        >>> LocalDate(2020, 2, 29).with_year(2021)
        LocalDate(2021-02-28)
        """
        return LocalDate._from_py_unchecked(
            replace_year_clamped(self._py_date, _check_year(year))
        )

    def with_month(self, month: int, /) -> LocalDate:
        """Change the month, clamping the day to the end of the month

        Example
        -------
        >>> LocalDate(2021, 3, 31).with_month(4)
        LocalDate(2021-04-30)
        """
        return LocalDate._from_py_unchecked(
            replace_month_clamped(self._py_date, _check_month(month))
        )

    def with_day(self, day: int, /) -> LocalDate:
        d = self._py_date
        return LocalDate._from_py_unchecked(_mk_date(d.year, d.month, day))

    def with_day_of_year(self, day_of_year: int, /) -> LocalDate:
        year = self._py_date.year
        _check_int(day_of_year, "day_of_year")
        if not 1 <= day_of_year <= days_in_year(year):
            raise FieldOutOfRange(
                f"day_of_year out of range for {year}: {day_of_year}"
            )
        return LocalDate._from_py_unchecked(
            _date.fromordinal(
                _date(year, 1, 1).toordinal() + day_of_year - 1
            )
        )

    def with_day_of_week(self, day_of_week: Weekday | int, /) -> LocalDate:
        """Move to the given day within the same Monday-Sunday week

        Example
        -------
        >>> LocalDate(2021, 1, 2).with_day_of_week(Weekday.MONDAY)
        LocalDate(2020-12-28)
        """
        return self.plus_days(
            _load_weekday(day_of_week).value - self._py_date.isoweekday()
        )

    def with_last_day_of_month(self) -> LocalDate:
        d = self._py_date
        return LocalDate._from_py_unchecked(
            d.replace(day=days_in_month(d.year, d.month))
        )

    def with_last_day_of_year(self) -> LocalDate:
        return LocalDate._from_py_unchecked(
            self._py_date.replace(month=12, day=31)
        )

    def plus_years(self, years: int, /) -> LocalDate:
        """Add years, clamping the day to the end of the month if needed

        Example
        -------
        >>> LocalDate(2008, 2, 29).plus_years(1)
        LocalDate(2009-02-28)
        """
        return self.plus_months(_check_int(years, "years") * 12)

    def plus_months(self, months: int, /) -> LocalDate:
        try:
            return LocalDate._from_py_unchecked(
                add_months(self._py_date, _check_int(months, "months"))
            )
        except (ValueError, OverflowError):
            raise ArithmeticOverflow("Resulting date out of range") from None

    def plus_weeks(self, weeks: int, /) -> LocalDate:
        return self.plus_days(_check_int(weeks, "weeks") * 7)

    def plus_days(self, days: int, /) -> LocalDate:
        try:
            return LocalDate._from_py_unchecked(
                self._py_date + _timedelta(days=_check_int(days, "days"))
            )
        except OverflowError:
            raise ArithmeticOverflow("Resulting date out of range") from None

    def py_date(self) -> _date:
        """Convert to a standard library :class:`~datetime.date`"""
        return self._py_date

    def format_common_iso(self) -> str:
        """Format as the common ISO 8601 date format ``YYYY-MM-DD``

        Example
        -------
        >>> LocalDate(2021, 1, 2).format_common_iso()
        '2021-01-02'
        """
        return self._py_date.isoformat()

    __str__ = format_common_iso

    def __repr__(self) -> str:
        return f"LocalDate({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._py_date == other._py_date

    def __hash__(self) -> int:
        return hash(self._py_date)

    def __lt__(self, other: LocalDate) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._py_date < other._py_date

    def __le__(self, other: LocalDate) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._py_date <= other._py_date

    def __gt__(self, other: LocalDate) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._py_date > other._py_date

    def __ge__(self, other: LocalDate) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._py_date >= other._py_date

    @classmethod
    def _from_py_unchecked(cls, d: _date, /) -> LocalDate:
        self = _object_new(cls)
        self._py_date = d
        return self

    @no_type_check
    def __reduce__(self):
        return _unpkl_date, (pack("<HBB", self.year, self.month, self.day),)


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
@no_type_check
def _unpkl_date(data: bytes) -> LocalDate:
    return LocalDate(*unpack("<HBB", data))


LocalDate.MIN = LocalDate._from_py_unchecked(_date.min)
LocalDate.MAX = LocalDate._from_py_unchecked(_date.max)


@final
class YearMonth(_ImmutableBase):
    """A year and month without a day component

    Example
    -------
    >>> ym = YearMonth(2021, 1)
    YearMonth(2021-01)
    """

    __slots__ = ("_py_date",)

    def __init__(self, year: int, month: int) -> None:
        self._py_date = _mk_date(year, month, 1)

    @property
    def year(self) -> int:
        return self._py_date.year

    @property
    def month(self) -> int:
        return self._py_date.month

    def length_of_month(self) -> int:
        return days_in_month(self._py_date.year, self._py_date.month)

    def on_day(self, day: int, /) -> LocalDate:
        """Create a date from this year-month with a given day

        Example
        -------
        >>> YearMonth(2021, 1).on_day(2)
        LocalDate(2021-01-02)
        """
        return LocalDate(self.year, self.month, day)

    def format_common_iso(self) -> str:
        return self._py_date.isoformat()[:7]

    __str__ = format_common_iso

    def __repr__(self) -> str:
        return f"YearMonth({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._py_date == other._py_date

    def __hash__(self) -> int:
        return hash(self._py_date)

    def __lt__(self, other: YearMonth) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._py_date < other._py_date

    def __le__(self, other: YearMonth) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._py_date <= other._py_date

    def __gt__(self, other: YearMonth) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._py_date > other._py_date

    def __ge__(self, other: YearMonth) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._py_date >= other._py_date

    @classmethod
    def _from_py_unchecked(cls, d: _date, /) -> YearMonth:
        assert d.day == 1
        self = _object_new(cls)
        self._py_date = d
        return self


@final
class MonthDay(_ImmutableBase):
    """A month and day without a year component.
    February 29th is a valid month-day.

    Example
    -------
    >>> md = MonthDay(11, 23)
    MonthDay(--11-23)
    """

    __slots__ = ("_py_date",)

    def __init__(self, month: int, day: int) -> None:
        self._py_date = _mk_date(DUMMY_LEAP_YEAR, month, day)

    @property
    def month(self) -> int:
        return self._py_date.month

    @property
    def day(self) -> int:
        return self._py_date.day

    def in_year(self, year: int, /) -> LocalDate:
        """Create a date from this month-day with a given year.
        Raises :class:`FieldOutOfRange` for February 29th in a non-leap year.

        Example
        -------
        >>> MonthDay(8, 1).in_year(2025)
        LocalDate(2025-08-01)
        """
        return LocalDate(year, self.month, self.day)

    def format_common_iso(self) -> str:
        return f"--{self._py_date.isoformat()[5:]}"

    __str__ = format_common_iso

    def __repr__(self) -> str:
        return f"MonthDay({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._py_date == other._py_date

    def __hash__(self) -> int:
        return hash(self._py_date)

    def __lt__(self, other: MonthDay) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._py_date < other._py_date

    def __le__(self, other: MonthDay) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._py_date <= other._py_date

    def __gt__(self, other: MonthDay) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._py_date > other._py_date

    def __ge__(self, other: MonthDay) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._py_date >= other._py_date

    @classmethod
    def _from_py_unchecked(cls, d: _date, /) -> MonthDay:
        assert d.year == DUMMY_LEAP_YEAR
        self = _object_new(cls)
        self._py_date = d
        return self


@final
class LocalTime(_Calendrical):
    """Time of day without a date component, with nanosecond precision

    Example
    -------
    >>> t = LocalTime(12, 30, 0)
    LocalTime(12:30)
    """

    __slots__ = ("_py_time", "_nanos")
    _supported_fields = _TIME_FIELDS

    MIDNIGHT: ClassVar[LocalTime]
    """The time at midnight"""
    NOON: ClassVar[LocalTime]
    """The time at noon"""
    MAX: ClassVar[LocalTime]
    """The maximum time, just before midnight"""

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
    ) -> None:
        self._py_time = _mk_time(hour, minute, second)
        self._nanos = _check_nanos(nanosecond)

    @property
    def hour(self) -> int:
        return self._py_time.hour

    @property
    def minute(self) -> int:
        return self._py_time.minute

    @property
    def second(self) -> int:
        return self._py_time.second

    @property
    def nanosecond(self) -> int:
        return self._nanos

    def nano_fraction(self) -> float:
        """The nanosecond as a fraction of a second"""
        return self._nanos / NANOS_PER_SECOND

    def second_of_day(self) -> int:
        t = self._py_time
        return t.hour * 3_600 + t.minute * 60 + t.second

    def on(self, d: LocalDate, /) -> LocalDateTime:
        """Combine a time with a date to create a datetime"""
        return _require(d, "date").at(self)

    def with_hour(self, hour: int, /) -> LocalTime:
        return LocalTime._from_py_unchecked(
            _replace_py(self._py_time, hour=hour), self._nanos
        )

    def with_minute(self, minute: int, /) -> LocalTime:
        return LocalTime._from_py_unchecked(
            _replace_py(self._py_time, minute=minute), self._nanos
        )

    def with_second(self, second: int, /) -> LocalTime:
        return LocalTime._from_py_unchecked(
            _replace_py(self._py_time, second=second), self._nanos
        )

    def with_nanosecond(self, nanosecond: int, /) -> LocalTime:
        return LocalTime._from_py_unchecked(
            self._py_time, _check_nanos(nanosecond)
        )

    def py_time(self) -> _time:
        """Convert to a standard library :class:`~datetime.time`

        Note
        ----
        Nanoseconds are truncated to microseconds.
        """
        return self._py_time.replace(microsecond=self._nanos // 1_000)

    def format_common_iso(self) -> str:
        """Format in the shortest ISO 8601 form that doesn't lose precision:
        ``HH:MM``, ``HH:MM:SS``, or with 3, 6, or 9 fractional digits.

        Example
        -------
        >>> LocalTime(12, 30).format_common_iso()
        '12:30'
        >>> LocalTime(12, 30, 5, nanosecond=120_000_000).format_common_iso()
        '12:30:05.120'
        """
        return _format_time(self._py_time, self._nanos)

    __str__ = format_common_iso

    def __repr__(self) -> str:
        return f"LocalTime({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return (self._py_time, self._nanos) == (other._py_time, other._nanos)

    def __hash__(self) -> int:
        return hash((self._py_time, self._nanos))

    def __lt__(self, other: LocalTime) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return (self._py_time, self._nanos) < (other._py_time, other._nanos)

    def __le__(self, other: LocalTime) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return (self._py_time, self._nanos) <= (other._py_time, other._nanos)

    def __gt__(self, other: LocalTime) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return (self._py_time, self._nanos) > (other._py_time, other._nanos)

    def __ge__(self, other: LocalTime) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return (self._py_time, self._nanos) >= (other._py_time, other._nanos)

    @classmethod
    def _from_py_unchecked(cls, t: _time, nanos: int, /) -> LocalTime:
        assert not t.microsecond
        self = _object_new(cls)
        self._py_time = t
        self._nanos = nanos
        return self

    @no_type_check
    def __reduce__(self):
        return (
            _unpkl_time,
            (
                pack(
                    "<BBBI",
                    self._py_time.hour,
                    self._py_time.minute,
                    self._py_time.second,
                    self._nanos,
                ),
            ),
        )


def _unpkl_time(data: bytes) -> LocalTime:
    *args, nanos = unpack("<BBBI", data)
    return LocalTime._from_py_unchecked(_time(*args), nanos)


LocalTime.MIDNIGHT = LocalTime._from_py_unchecked(_time(), 0)
LocalTime.NOON = LocalTime._from_py_unchecked(_time(12), 0)
LocalTime.MAX = LocalTime._from_py_unchecked(_time(23, 59, 59), 999_999_999)


@final
class LocalDateTime(_Calendrical):
    """A date and time of day, without any timezone or offset.
    It can't be placed on the timeline by itself: use
    :meth:`assume_fixed_offset` for that.

    Example
    -------
    >>> d = LocalDateTime(2020, 8, 15, 23, 12)
    LocalDateTime(2020-08-15 23:12)
    """

    __slots__ = ("_py_dt", "_nanos")
    _supported_fields = _DATE_FIELDS | _TIME_FIELDS

    MIN: ClassVar[LocalDateTime]
    """The minimum representable value"""
    MAX: ClassVar[LocalDateTime]
    """The maximum representable value"""

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
    ) -> None:
        self._py_dt = _mk_datetime(year, month, day, hour, minute, second)
        self._nanos = _check_nanos(nanosecond)

    @property
    def year(self) -> int:
        return self._py_dt.year

    @property
    def month(self) -> int:
        return self._py_dt.month

    @property
    def day(self) -> int:
        return self._py_dt.day

    @property
    def hour(self) -> int:
        return self._py_dt.hour

    @property
    def minute(self) -> int:
        return self._py_dt.minute

    @property
    def second(self) -> int:
        return self._py_dt.second

    @property
    def nanosecond(self) -> int:
        return self._nanos

    def day_of_year(self) -> int:
        return self._py_dt.timetuple().tm_yday

    def day_of_week(self) -> Weekday:
        return Weekday(self._py_dt.isoweekday())

    def nano_fraction(self) -> float:
        """The nanosecond as a fraction of a second"""
        return self._nanos / NANOS_PER_SECOND

    def date(self) -> LocalDate:
        """The date part of the datetime"""
        return LocalDate._from_py_unchecked(self._py_dt.date())

    def time(self) -> LocalTime:
        """The time-of-day part of the datetime"""
        return LocalTime._from_py_unchecked(self._py_dt.time(), self._nanos)

    def year_month(self) -> YearMonth:
        return self.date().year_month()

    def month_day(self) -> MonthDay:
        return self.date().month_day()

    def with_year(self, year: int, /) -> LocalDateTime:
        """Change the year, clamping February 29th to the 28th
        in non-leap years"""
        return self._with_date(self.date().with_year(year))

    def with_month(self, month: int, /) -> LocalDateTime:
        """Change the month, clamping the day to the end of the month"""
        return self._with_date(self.date().with_month(month))

    def with_day(self, day: int, /) -> LocalDateTime:
        return self._with_date(self.date().with_day(day))

    def with_day_of_year(self, day_of_year: int, /) -> LocalDateTime:
        return self._with_date(self.date().with_day_of_year(day_of_year))

    def with_day_of_week(
        self, day_of_week: Weekday | int, /
    ) -> LocalDateTime:
        return self._with_date(self.date().with_day_of_week(day_of_week))

    def with_last_day_of_month(self) -> LocalDateTime:
        return self._with_date(self.date().with_last_day_of_month())

    def with_last_day_of_year(self) -> LocalDateTime:
        return self._with_date(self.date().with_last_day_of_year())

    def with_date(self, year: int, month: int, day: int) -> LocalDateTime:
        """Replace the date completely. Unlike :meth:`with_year`
        and :meth:`with_month`, invalid dates are not clamped."""
        return self._with_date(LocalDate(year, month, day))

    def with_hour(self, hour: int, /) -> LocalDateTime:
        return LocalDateTime._from_py_unchecked(
            _replace_py(self._py_dt, hour=hour), self._nanos
        )

    def with_minute(self, minute: int, /) -> LocalDateTime:
        return LocalDateTime._from_py_unchecked(
            _replace_py(self._py_dt, minute=minute), self._nanos
        )

    def with_second(self, second: int, /) -> LocalDateTime:
        return LocalDateTime._from_py_unchecked(
            _replace_py(self._py_dt, second=second), self._nanos
        )

    def with_nanosecond(self, nanosecond: int, /) -> LocalDateTime:
        return LocalDateTime._from_py_unchecked(
            self._py_dt, _check_nanos(nanosecond)
        )

    def with_time(
        self,
        hour: int,
        minute: int,
        second: int = 0,
        *,
        nanosecond: int = 0,
    ) -> LocalDateTime:
        """Replace the time of day completely.
        Omitted seconds and nanoseconds are set to zero."""
        return self.replace_time(
            LocalTime(hour, minute, second, nanosecond=nanosecond)
        )

    def replace(self, /, **kwargs: Any) -> LocalDateTime:
        """Construct a new instance with the given fields replaced.
        Invalid dates are not clamped.

        Example
        -------
        >>> d = LocalDateTime(2020, 8, 15, 23, 12)
        >>> d.replace(year=2021, nanosecond=4)
        LocalDateTime(2021-08-15 23:12:00.000000004)
        """
        _check_invalid_replace_kwargs(kwargs)
        nanos = _pop_nanos_kwarg(kwargs, self._nanos)
        return LocalDateTime._from_py_unchecked(
            _replace_py(self._py_dt, **kwargs), nanos
        )

    def replace_date(self, d: LocalDate, /) -> LocalDateTime:
        return self._with_date(_require(d, "date"))

    def replace_time(self, t: LocalTime, /) -> LocalDateTime:
        _require(t, "time")
        return LocalDateTime._from_py_unchecked(
            _datetime.combine(self._py_dt.date(), t._py_time), t._nanos
        )

    def plus_years(self, years: int, /) -> LocalDateTime:
        return self._with_date(self.date().plus_years(years))

    def plus_months(self, months: int, /) -> LocalDateTime:
        return self._with_date(self.date().plus_months(months))

    def plus_weeks(self, weeks: int, /) -> LocalDateTime:
        return self._with_date(self.date().plus_weeks(weeks))

    def plus_days(self, days: int, /) -> LocalDateTime:
        return self._with_date(self.date().plus_days(days))

    def plus_hours(self, hours: int, /) -> LocalDateTime:
        return self._shift_nanos(
            _check_int(hours, "hours") * 3_600 * NANOS_PER_SECOND
        )

    def plus_minutes(self, minutes: int, /) -> LocalDateTime:
        return self._shift_nanos(
            _check_int(minutes, "minutes") * 60 * NANOS_PER_SECOND
        )

    def plus_seconds(self, seconds: int, /) -> LocalDateTime:
        return self._shift_nanos(
            _check_int(seconds, "seconds") * NANOS_PER_SECOND
        )

    def plus_nanos(self, nanos: int, /) -> LocalDateTime:
        return self._shift_nanos(_check_int(nanos, "nanos"))

    def plus(self, *periods: Period) -> LocalDateTime:
        """Add one or more periods. The periods are summed first,
        then applied: months, then days, then the time part.

        Example
        -------
        >>> d = LocalDateTime(2020, 1, 31, 22)
        >>> d.plus(months(1), hours(3))
        LocalDateTime(2020-03-01 01:00)
        """
        return self._add_period(_sum_periods(periods))

    def minus(self, *periods: Period) -> LocalDateTime:
        """Inverse of :meth:`plus`"""
        return self._add_period(-_sum_periods(periods))

    def __add__(self, p: Period) -> LocalDateTime:
        if not isinstance(p, Period):
            return NotImplemented
        return self._add_period(p)

    def __sub__(self, p: Period) -> LocalDateTime:
        if not isinstance(p, Period):
            return NotImplemented
        return self._add_period(-p)

    def compare_to(self, other: LocalDateTime, /) -> int:
        """Compare with another datetime: -1, 0 or 1"""
        if not isinstance(_require(other, "other"), LocalDateTime):
            raise TypeError(
                f"Cannot compare LocalDateTime with {type(other).__name__}"
            )
        return _cmp((self._py_dt, self._nanos), (other._py_dt, other._nanos))

    def assume_fixed_offset(self, offset: ZoneOffset, /) -> OffsetDateTime:
        """Pair this datetime with a fixed UTC offset

        Example
        -------
        >>> LocalDateTime(2020, 8, 15, 23, 12).assume_fixed_offset(
        ...     ZoneOffset(hours=2)
        ... )
        OffsetDateTime(2020-08-15 23:12+02:00)
        """
        return OffsetDateTime.from_local_datetime(self, offset)

    def py_datetime(self) -> _datetime:
        """Convert to a naive standard library :class:`~datetime.datetime`

        Note
        ----
        Nanoseconds are truncated to microseconds.
        """
        return self._py_dt.replace(microsecond=self._nanos // 1_000)

    def format_common_iso(self) -> str:
        """Format as ``YYYY-MM-DDTHH:MM[:SS[.fff[fff[fff]]]]``, choosing
        the shortest form that doesn't lose precision.

        Example
        -------
        >>> LocalDateTime(2020, 8, 15, 23, 12, 9).format_common_iso()
        '2020-08-15T23:12:09'
        """
        py_dt = self._py_dt
        return (
            f"{py_dt.date().isoformat()}T"
            f"{_format_time(py_dt.time(), self._nanos)}"
        )

    __str__ = format_common_iso

    def __repr__(self) -> str:
        return f"LocalDateTime({str(self).replace('T', ' ')})"

    def __eq__(self, other: object) -> bool:
        """Compare for equality

        Example
        -------
        >>> d = LocalDateTime(2020, 8, 15, 23)
        >>> d == LocalDateTime(2020, 8, 15, 23)
        True
        >>> d == LocalDateTime(2020, 8, 15, 23, 1)
        False
        """
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return (self._py_dt, self._nanos) == (other._py_dt, other._nanos)

    def __hash__(self) -> int:
        return hash((self._py_dt, self._nanos))

    def __lt__(self, other: LocalDateTime) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return (self._py_dt, self._nanos) < (other._py_dt, other._nanos)

    def __le__(self, other: LocalDateTime) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return (self._py_dt, self._nanos) <= (other._py_dt, other._nanos)

    def __gt__(self, other: LocalDateTime) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return (self._py_dt, self._nanos) > (other._py_dt, other._nanos)

    def __ge__(self, other: LocalDateTime) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return (self._py_dt, self._nanos) >= (other._py_dt, other._nanos)

    def _with_date(self, d: LocalDate) -> LocalDateTime:
        return LocalDateTime._from_py_unchecked(
            _datetime.combine(d._py_date, self._py_dt.time()), self._nanos
        )

    def _shift_nanos(self, nanos: int) -> LocalDateTime:
        delta_secs, nanos = divmod(nanos + self._nanos, NANOS_PER_SECOND)
        try:
            py_dt = self._py_dt + _timedelta(seconds=delta_secs)
        except OverflowError:
            raise ArithmeticOverflow("Resulting datetime out of range") from None
        return LocalDateTime._from_py_unchecked(py_dt, nanos)

    def _add_period(self, p: Period) -> LocalDateTime:
        return (
            self.plus_months(p._total_months())
            .plus_days(p._total_days())
            ._shift_nanos(p._total_time_nanos())
        )

    def _epoch_secs(self) -> int:
        # seconds since 1970-01-01T00:00, as if this local time were UTC
        py_dt = self._py_dt
        return (
            days_from_civil(py_dt.year, py_dt.month, py_dt.day) * SECS_PER_DAY
            + py_dt.hour * 3_600
            + py_dt.minute * 60
            + py_dt.second
        )

    @classmethod
    def _from_py_unchecked(cls, d: _datetime, nanos: int, /) -> LocalDateTime:
        assert not d.microsecond
        assert 0 <= nanos < NANOS_PER_SECOND
        self = _object_new(cls)
        self._py_dt = d
        self._nanos = nanos
        return self

    @no_type_check
    def __reduce__(self):
        return (
            _unpkl_local,
            (pack("<HBBBBBI", *self._py_dt.timetuple()[:6], self._nanos),),
        )


def _unpkl_local(data: bytes) -> LocalDateTime:
    *args, nanos = unpack("<HBBBBBI", data)
    return LocalDateTime._from_py_unchecked(_datetime(*args), nanos)


LocalDateTime.MIN = LocalDateTime._from_py_unchecked(_datetime.min, 0)
LocalDateTime.MAX = LocalDateTime._from_py_unchecked(
    _datetime.max.replace(microsecond=0), 999_999_999
)


@final
class ZoneOffset(_ImmutableBase):
    """A fixed amount of time by which a local time differs from UTC,
    in whole seconds. There are no rules attached: the offset never
    changes, unlike a timezone.

    Example
    -------
    >>> ZoneOffset(hours=2)
    ZoneOffset(+02:00)
    >>> ZoneOffset(hours=-5, minutes=-30)
    ZoneOffset(-05:30)
    """

    __slots__ = ("_secs",)

    UTC: ClassVar[ZoneOffset]
    """The zero offset"""

    def __init__(
        self, *, hours: int = 0, minutes: int = 0, seconds: int = 0
    ) -> None:
        _check_int(hours, "hours")
        _check_int(minutes, "minutes")
        _check_int(seconds, "seconds")
        if (hours > 0 or minutes > 0 or seconds > 0) and (
            hours < 0 or minutes < 0 or seconds < 0
        ):
            raise ValueError("Mixed sign in zone offset")
        self._secs = _check_offset_secs(hours * 3_600 + minutes * 60 + seconds)

    @classmethod
    def from_seconds(cls, secs: int, /) -> ZoneOffset:
        """Create from the total number of seconds

        Example
        -------
        >>> ZoneOffset.from_seconds(-3_600)
        ZoneOffset(-01:00)
        """
        return cls._from_secs_unchecked(
            _check_offset_secs(_check_int(secs, "secs"))
        )

    @classmethod
    def _from_secs_unchecked(cls, secs: int, /) -> ZoneOffset:
        self = _object_new(cls)
        self._secs = secs
        return self

    @property
    def amount_seconds(self) -> int:
        """The signed number of seconds from UTC"""
        return self._secs

    def py_timedelta(self) -> _timedelta:
        return _timedelta(seconds=self._secs)

    def format_common_iso(self) -> str:
        """Format as ``Z``, ``±HH:MM``, or ``±HH:MM:SS``

        Example
        -------
        >>> ZoneOffset(hours=2).format_common_iso()
        '+02:00'
        >>> ZoneOffset.UTC.format_common_iso()
        'Z'
        """
        if not self._secs:
            return "Z"
        sign = "-" if self._secs < 0 else "+"
        hrs, rest = divmod(abs(self._secs), 3_600)
        mins, secs = divmod(rest, 60)
        return (
            f"{sign}{hrs:02d}:{mins:02d}:{secs:02d}"
            if secs
            else f"{sign}{hrs:02d}:{mins:02d}"
        )

    __str__ = format_common_iso

    def __repr__(self) -> str:
        return f"ZoneOffset({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._secs == other._secs

    def __hash__(self) -> int:
        return hash(self._secs)

    @no_type_check
    def __reduce__(self):
        return _unpkl_zone_offset, (self._secs,)


def _unpkl_zone_offset(secs: int) -> ZoneOffset:
    return ZoneOffset.from_seconds(secs)


ZoneOffset.UTC = ZoneOffset._from_secs_unchecked(0)


@final
class Instant(_ImmutableBase):
    """A point on the UTC timeline, as seconds since the UNIX epoch
    and a nanosecond within that second.

    Example
    -------
    >>> Instant.from_epoch_seconds(1_597_493_310, 45)
    Instant(epoch_seconds=1597493310, nano_of_second=45)
    """

    __slots__ = ("_secs", "_nanos")

    EPOCH: ClassVar[Instant]
    """1970-01-01T00:00Z"""

    def __init__(self) -> None:
        raise TypeError(
            "Instant cannot be instantiated directly. "
            "Use Instant.from_epoch_seconds() or OffsetDateTime.to_instant()"
        )

    @classmethod
    def from_epoch_seconds(
        cls, secs: int, /, nano_adjustment: int = 0
    ) -> Instant:
        """Create from seconds since the epoch, with an optional
        nanosecond adjustment that may be negative or exceed one second.

        Example
        -------
        >>> Instant.from_epoch_seconds(3, -1)
        Instant(epoch_seconds=2, nano_of_second=999999999)
        """
        extra_secs, nanos = divmod(
            _check_int(nano_adjustment, "nano_adjustment"), NANOS_PER_SECOND
        )
        return cls._from_epoch_unchecked(
            _check_int(secs, "secs") + extra_secs, nanos
        )

    @classmethod
    def from_timestamp(cls, i: int, /) -> Instant:
        """Create from a UNIX timestamp in whole seconds"""
        return cls.from_epoch_seconds(i)

    @classmethod
    def from_timestamp_nanos(cls, i: int, /) -> Instant:
        """Create from a UNIX timestamp in nanoseconds"""
        secs, nanos = divmod(_check_int(i, "i"), NANOS_PER_SECOND)
        return cls._from_epoch_unchecked(secs, nanos)

    @property
    def epoch_seconds(self) -> int:
        return self._secs

    @property
    def nano_of_second(self) -> int:
        return self._nanos

    def timestamp(self) -> int:
        return self._secs

    def timestamp_nanos(self) -> int:
        return self._secs * NANOS_PER_SECOND + self._nanos

    def to_fixed_offset(self, offset: ZoneOffset, /) -> OffsetDateTime:
        """The local date and time at this instant, in the given offset

        Example
        -------
        >>> Instant.EPOCH.to_fixed_offset(ZoneOffset(hours=-1))
        OffsetDateTime(1969-12-31 23:00-01:00)
        """
        return OffsetDateTime.from_instant(self, offset)

    def __repr__(self) -> str:
        return (
            f"Instant(epoch_seconds={self._secs}, "
            f"nano_of_second={self._nanos})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return (self._secs, self._nanos) == (other._secs, other._nanos)

    def __hash__(self) -> int:
        return hash((self._secs, self._nanos))

    def __lt__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return (self._secs, self._nanos) < (other._secs, other._nanos)

    def __le__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return (self._secs, self._nanos) <= (other._secs, other._nanos)

    def __gt__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return (self._secs, self._nanos) > (other._secs, other._nanos)

    def __ge__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return (self._secs, self._nanos) >= (other._secs, other._nanos)

    @classmethod
    def _from_epoch_unchecked(cls, secs: int, nanos: int, /) -> Instant:
        assert 0 <= nanos < NANOS_PER_SECOND
        self = _object_new(cls)
        self._secs = secs
        self._nanos = nanos
        return self

    @no_type_check
    def __reduce__(self):
        return _unpkl_inst, (self._secs, self._nanos)


def _unpkl_inst(secs: int, nanos: int) -> Instant:
    return Instant._from_epoch_unchecked(secs, nanos)


Instant.EPOCH = Instant._from_epoch_unchecked(0, 0)


@final
class Period(_ImmutableBase):
    """An amount of time in calendar and clock units. Components are
    kept as given: ``Period(hours=25)`` is not normalized to a day,
    and components may have different signs.

    Example
    -------
    >>> p = Period(years=1, days=-3, hours=12)
    Period(P1Y-3DT12H)
    """

    __slots__ = (
        "_years",
        "_months",
        "_weeks",
        "_days",
        "_hours",
        "_minutes",
        "_seconds",
        "_nanos",
    )

    ZERO: ClassVar[Period]

    def __init__(
        self,
        *,
        years: int = 0,
        months: int = 0,
        weeks: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        self._years = _check_int(years, "years")
        self._months = _check_int(months, "months")
        self._weeks = _check_int(weeks, "weeks")
        self._days = _check_int(days, "days")
        self._hours = _check_int(hours, "hours")
        self._minutes = _check_int(minutes, "minutes")
        self._seconds = _check_int(seconds, "seconds")
        self._nanos = _check_int(nanoseconds, "nanoseconds")

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def weeks(self) -> int:
        return self._weeks

    @property
    def days(self) -> int:
        return self._days

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def nanoseconds(self) -> int:
        return self._nanos

    def format_common_iso(self) -> str:
        """Format in an ISO 8601-like duration format.
        Each component carries its own sign.

        Example
        -------
        >>> Period(months=-2, seconds=1, nanoseconds=5).format_common_iso()
        'P-2MT1.000000005S'
        """
        date_part = "".join(
            f"{value}{unit}"
            for value, unit in (
                (self._years, "Y"),
                (self._months, "M"),
                (self._weeks, "W"),
                (self._days, "D"),
            )
            if value
        )
        time_part = "".join(
            f"{value}{unit}"
            for value, unit in ((self._hours, "H"), (self._minutes, "M"))
            if value
        )
        total_ns = self._seconds * NANOS_PER_SECOND + self._nanos
        if total_ns:
            secs, nanos = divmod(abs(total_ns), NANOS_PER_SECOND)
            time_part += (
                ("-" if total_ns < 0 else "")
                + str(secs)
                + bool(nanos) * f".{nanos:09d}".rstrip("0")
                + "S"
            )
        if not (date_part or time_part):
            return "P0D"
        return "P" + date_part + ("T" + time_part if time_part else "")

    __str__ = format_common_iso

    def __repr__(self) -> str:
        return f"Period({self})"

    def _components(self) -> tuple[int, ...]:
        return (
            self._years,
            self._months,
            self._weeks,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._nanos,
        )

    def _total_months(self) -> int:
        return self._years * 12 + self._months

    def _total_days(self) -> int:
        return self._weeks * 7 + self._days

    def _total_time_nanos(self) -> int:
        return (
            (self._hours * 60 + self._minutes) * 60 + self._seconds
        ) * NANOS_PER_SECOND + self._nanos

    def __eq__(self, other: object) -> bool:
        """Compare component-wise: ``Period(hours=24) != Period(days=1)``"""
        if not isinstance(other, Period):
            return NotImplemented
        return self._components() == other._components()

    def __hash__(self) -> int:
        return hash(self._components())

    def __bool__(self) -> bool:
        return any(self._components())

    def __add__(self, other: Period) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return Period._from_components(
            *(a + b for a, b in zip(self._components(), other._components()))
        )

    def __sub__(self, other: Period) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self + -other

    def __neg__(self) -> Period:
        return Period._from_components(*(-c for c in self._components()))

    def __pos__(self) -> Period:
        return self

    def __mul__(self, other: int) -> Period:
        if not isinstance(other, int):
            return NotImplemented
        return Period._from_components(*(c * other for c in self._components()))

    def __rmul__(self, other: int) -> Period:
        return self.__mul__(other)

    @classmethod
    def _from_components(cls, *components: int) -> Period:
        self = _object_new(cls)
        (
            self._years,
            self._months,
            self._weeks,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._nanos,
        ) = components
        return self

    @no_type_check
    def __reduce__(self):
        return _unpkl_period, self._components()


def _unpkl_period(*components: int) -> Period:
    return Period._from_components(*components)


Period.ZERO = Period._from_components(0, 0, 0, 0, 0, 0, 0, 0)


@final
class OffsetDateTime(_Calendrical):
    """A date and time of day with a fixed offset from UTC,
    e.g. ``2007-10-02T13:45:30.123456789+02:00``.

    It combines a :class:`LocalDateTime` (the wall-clock reading) with a
    :class:`ZoneOffset`. Both the wall-clock reading and the instant it
    denotes are preserved:

    - Field access and field arithmetic (``with_*``, ``plus_*``) work on
      the wall-clock reading. The offset is carried along unchanged.
    - Ordering (``<``, :meth:`compare_to`, :meth:`is_before`, ...) works
      on the instant.
    - Equality (``==``) and ``hash()`` work on the representation: both
      the wall-clock reading and the offset must be equal.

    Important
    ---------
    Ordering and equality are deliberately inconsistent. Two values with
    different offsets denoting the same instant are neither before nor after
    each other, yet they are not equal:

    >>> a = OffsetDateTime(2007, 1, 1, 10, offset=ZoneOffset(hours=1))
    >>> b = OffsetDateTime(2007, 1, 1, 9, offset=ZoneOffset.UTC)
    >>> a.compare_to(b), a < b, a > b, a == b
    (0, False, False, False)
    >>> a.is_same_instant(b)
    True

    The offset has no rules attached. Adding hours to an offset datetime
    never changes its offset, even where the real-world offset of the
    location would have changed (e.g. due to DST).
    """

    __slots__ = ("_local", "_offset")
    _supported_fields = _DATE_FIELDS | _TIME_FIELDS | {Field.OFFSET_SECONDS}

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
        offset: ZoneOffset,
    ) -> None:
        _check_offset(offset)
        self._local = LocalDateTime(
            year, month, day, hour, minute, second, nanosecond=nanosecond
        )
        self._offset = offset

    @classmethod
    def from_local_datetime(
        cls, local: LocalDateTime, /, offset: ZoneOffset
    ) -> OffsetDateTime:
        """Pair a local datetime with an offset

        Example
        -------
        >>> OffsetDateTime.from_local_datetime(
        ...     LocalDateTime(2020, 8, 15, 23, 12), ZoneOffset(hours=-4)
        ... )
        OffsetDateTime(2020-08-15 23:12-04:00)
        """
        if not isinstance(_require(local, "local"), LocalDateTime):
            raise TypeError(
                f"Expected LocalDateTime, got {type(local).__name__}"
            )
        _check_offset(offset)
        return cls._new(local, offset)

    @classmethod
    def from_instant(
        cls, instant: Instant, /, offset: ZoneOffset
    ) -> OffsetDateTime:
        """The wall-clock reading of an instant at the given offset

        Example
        -------
        >>> OffsetDateTime.from_instant(
        ...     Instant.from_epoch_seconds(-1), ZoneOffset.UTC
        ... )
        OffsetDateTime(1969-12-31 23:59:59Z)

        Raises
        ------
        ArithmeticOverflow
            If the local date falls outside the supported year range.
        """
        if not isinstance(_require(instant, "instant"), Instant):
            raise TypeError(f"Expected Instant, got {type(instant).__name__}")
        _check_offset(offset)
        epoch_day, secs_of_day = split_epoch_seconds(
            instant._secs + offset._secs
        )
        hour, rest = divmod(secs_of_day, 3_600)
        minute, second = divmod(rest, 60)
        return cls._new(
            LocalDate.from_epoch_day(epoch_day).at(
                LocalTime._from_py_unchecked(
                    _time(hour, minute, second), instant._nanos
                )
            ),
            offset,
        )

    @classmethod
    def from_timestamp(cls, i: int, /, *, offset: ZoneOffset) -> OffsetDateTime:
        """Create from a UNIX timestamp (in seconds).
        The inverse of :meth:`timestamp`."""
        return cls.from_instant(Instant.from_timestamp(i), offset)

    @classmethod
    def from_timestamp_nanos(
        cls, i: int, /, *, offset: ZoneOffset
    ) -> OffsetDateTime:
        """Create from a UNIX timestamp (in nanoseconds).
        The inverse of :meth:`timestamp_nanos`."""
        return cls.from_instant(Instant.from_timestamp_nanos(i), offset)

    @classmethod
    def from_py_datetime(cls, d: _datetime, /) -> OffsetDateTime:
        """Create from an aware standard library ``datetime``.
        The inverse of :meth:`py_datetime`.
        """
        if not isinstance(_require(d, "d"), _datetime):
            raise TypeError(f"Expected datetime, got {type(d)!r}")
        if d.tzinfo is None:
            raise ValueError(
                "Cannot create from a naive datetime. "
                "Use LocalDateTime instead."
            )
        if (offset := d.utcoffset()) is None:
            raise ValueError(
                "Cannot create from datetime with utcoffset() None"
            )
        elif offset.microseconds:
            raise ValueError("Sub-second offsets are not supported")
        return cls._new(
            LocalDateTime._from_py_unchecked(
                _datetime(
                    d.year, d.month, d.day, d.hour, d.minute, d.second
                ),
                d.microsecond * 1_000,
            ),
            ZoneOffset.from_seconds(offset.days * SECS_PER_DAY + offset.seconds),
        )

    @property
    def year(self) -> int:
        return self._local.year

    @property
    def month(self) -> int:
        return self._local.month

    @property
    def day(self) -> int:
        return self._local.day

    @property
    def hour(self) -> int:
        return self._local.hour

    @property
    def minute(self) -> int:
        return self._local.minute

    @property
    def second(self) -> int:
        return self._local.second

    @property
    def nanosecond(self) -> int:
        return self._local.nanosecond

    @property
    def offset(self) -> ZoneOffset:
        """The fixed offset from UTC"""
        return self._offset

    def day_of_year(self) -> int:
        return self._local.day_of_year()

    def day_of_week(self) -> Weekday:
        return self._local.day_of_week()

    def nano_fraction(self) -> float:
        return self._local.nano_fraction()

    def year_month(self) -> YearMonth:
        return self._local.year_month()

    def month_day(self) -> MonthDay:
        return self._local.month_day()

    def with_offset(self, offset: ZoneOffset, /) -> OffsetDateTime:
        """Replace the offset, keeping the wall-clock reading.
        The result denotes a *different* instant (unless the offset
        is unchanged). Use :meth:`adjust_for_offset` to keep the instant.

        Example
        -------
        >>> d = OffsetDateTime(2020, 8, 15, 10, 30, offset=ZoneOffset(hours=2))
        >>> d.with_offset(ZoneOffset(hours=3))
        OffsetDateTime(2020-08-15 10:30+03:00)
        """
        _check_offset(offset)
        return self if offset == self._offset else self._new(self._local, offset)

    def adjust_for_offset(self, offset: ZoneOffset, /) -> OffsetDateTime:
        """Change the offset while keeping the instant. The wall-clock
        reading moves by the difference between the two offsets.

        Example
        -------
        >>> d = OffsetDateTime(2020, 8, 15, 10, 30, offset=ZoneOffset(hours=2))
        >>> d.adjust_for_offset(ZoneOffset(hours=3))
        OffsetDateTime(2020-08-15 11:30+03:00)
        """
        _check_offset(offset)
        if offset == self._offset:
            return self
        return self._new(
            self._local.plus_seconds(offset._secs - self._offset._secs),
            offset,
        )

    def with_year(self, year: int, /) -> OffsetDateTime:
        """Change the year. February 29th is clamped to the 28th
        in non-leap years."""
        return self._with_local(self._local.with_year(year))

    def with_month(self, month: int, /) -> OffsetDateTime:
        """Change the month, clamping the day to the end of the month"""
        return self._with_local(self._local.with_month(month))

    def with_day(self, day: int, /) -> OffsetDateTime:
        return self._with_local(self._local.with_day(day))

    def with_day_of_year(self, day_of_year: int, /) -> OffsetDateTime:
        return self._with_local(self._local.with_day_of_year(day_of_year))

    def with_day_of_week(
        self, day_of_week: Weekday | int, /
    ) -> OffsetDateTime:
        """Move to the given day within the same Monday-Sunday week"""
        return self._with_local(self._local.with_day_of_week(day_of_week))

    def with_last_day_of_month(self) -> OffsetDateTime:
        return self._with_local(self._local.with_last_day_of_month())

    def with_last_day_of_year(self) -> OffsetDateTime:
        return self._with_local(self._local.with_last_day_of_year())

    def with_date(self, year: int, month: int, day: int) -> OffsetDateTime:
        return self._with_local(self._local.with_date(year, month, day))

    def with_hour(self, hour: int, /) -> OffsetDateTime:
        return self._with_local(self._local.with_hour(hour))

    def with_minute(self, minute: int, /) -> OffsetDateTime:
        return self._with_local(self._local.with_minute(minute))

    def with_second(self, second: int, /) -> OffsetDateTime:
        return self._with_local(self._local.with_second(second))

    def with_nanosecond(self, nanosecond: int, /) -> OffsetDateTime:
        return self._with_local(self._local.with_nanosecond(nanosecond))

    def with_time(
        self,
        hour: int,
        minute: int,
        second: int = 0,
        *,
        nanosecond: int = 0,
    ) -> OffsetDateTime:
        """Replace the time of day. Omitted seconds and nanoseconds
        are set to zero."""
        return self._with_local(
            self._local.with_time(hour, minute, second, nanosecond=nanosecond)
        )

    def replace(self, /, **kwargs: Any) -> OffsetDateTime:
        """Construct a new instance with the given fields replaced.
        Accepts the same keyword arguments as the constructor.

        Note
        ----
        Replacing the ``offset`` here behaves like :meth:`with_offset`:
        the wall-clock reading is kept.

        Example
        -------
        >>> d = OffsetDateTime(2020, 8, 15, 23, 12, offset=ZoneOffset(hours=1))
        >>> d.replace(year=2021, offset=ZoneOffset.UTC)
        OffsetDateTime(2021-08-15 23:12Z)
        """
        offset = kwargs.pop("offset", self._offset)
        _check_offset(offset)
        local = self._local.replace(**kwargs)
        if local == self._local and offset == self._offset:
            return self
        return self._new(local, offset)

    def replace_date(self, d: LocalDate, /) -> OffsetDateTime:
        return self._with_local(self._local.replace_date(d))

    def replace_time(self, t: LocalTime, /) -> OffsetDateTime:
        return self._with_local(self._local.replace_time(t))

    def plus_years(self, years: int, /) -> OffsetDateTime:
        """Add years, clamping the day to the end of the month if needed

        Example
        -------
        >>> d = OffsetDateTime(2008, 2, 29, 12, offset=ZoneOffset.UTC)
        >>> d.plus_years(1)
        OffsetDateTime(2009-02-28 12:00Z)
        """
        return self._with_local(self._local.plus_years(years))

    def plus_months(self, months: int, /) -> OffsetDateTime:
        """Add months, clamping the day to the end of the month if needed"""
        return self._with_local(self._local.plus_months(months))

    def plus_weeks(self, weeks: int, /) -> OffsetDateTime:
        return self._with_local(self._local.plus_weeks(weeks))

    def plus_days(self, days: int, /) -> OffsetDateTime:
        return self._with_local(self._local.plus_days(days))

    def plus_hours(self, hours: int, /) -> OffsetDateTime:
        return self._with_local(self._local.plus_hours(hours))

    def plus_minutes(self, minutes: int, /) -> OffsetDateTime:
        return self._with_local(self._local.plus_minutes(minutes))

    def plus_seconds(self, seconds: int, /) -> OffsetDateTime:
        return self._with_local(self._local.plus_seconds(seconds))

    def plus_nanos(self, nanos: int, /) -> OffsetDateTime:
        return self._with_local(self._local.plus_nanos(nanos))

    def plus(self, *periods: Period) -> OffsetDateTime:
        """Add one or more periods to the wall-clock reading.
        See :meth:`LocalDateTime.plus` for the order of application.

        Example
        -------
        >>> d = OffsetDateTime(2020, 1, 31, 22, offset=ZoneOffset(hours=2))
        >>> d.plus(months(1), hours(3))
        OffsetDateTime(2020-03-01 01:00+02:00)
        """
        return self._with_local(self._local.plus(*periods))

    def minus(self, *periods: Period) -> OffsetDateTime:
        """Inverse of :meth:`plus`"""
        return self._with_local(self._local.minus(*periods))

    def __add__(self, p: Period) -> OffsetDateTime:
        """Same as :meth:`plus` with a single period"""
        if not isinstance(p, Period):
            return NotImplemented
        return self._with_local(self._local + p)

    def __sub__(self, p: Period) -> OffsetDateTime:
        """Same as :meth:`minus` with a single period"""
        if not isinstance(p, Period):
            return NotImplemented
        return self._with_local(self._local - p)

    def to_local_date(self) -> LocalDate:
        return self._local.date()

    def to_local_time(self) -> LocalTime:
        return self._local.time()

    def to_local_datetime(self) -> LocalDateTime:
        return self._local

    def to_instant(self) -> Instant:
        """The instant this datetime denotes.
        The inverse of :meth:`from_instant`.

        Example
        -------
        >>> OffsetDateTime(1970, 1, 1, 2, offset=ZoneOffset(hours=2)).to_instant()
        Instant(epoch_seconds=0, nano_of_second=0)
        """
        return Instant._from_epoch_unchecked(
            self._local._epoch_secs() - self._offset._secs, self._local._nanos
        )

    def timestamp(self) -> int:
        """The UNIX timestamp in whole seconds"""
        return self._local._epoch_secs() - self._offset._secs

    def timestamp_nanos(self) -> int:
        """Like :meth:`timestamp`, but with nanosecond precision"""
        return self.to_instant().timestamp_nanos()

    def py_datetime(self) -> _datetime:
        """Convert to an aware standard library :class:`~datetime.datetime`

        Note
        ----
        Nanoseconds are truncated to microseconds.
        """
        return self._local.py_datetime().replace(
            tzinfo=mk_fixed_tzinfo(self._offset._secs)
        )

    def compare_to(self, other: OffsetDateTime, /) -> int:
        """Compare by instant: -1 if this is earlier, 1 if later,
        0 if both denote the same instant (even when not ``==``)."""
        if not isinstance(_require(other, "other"), OffsetDateTime):
            raise TypeError(
                f"Cannot compare OffsetDateTime with {type(other).__name__}"
            )
        if self._offset == other._offset:
            return self._local.compare_to(other._local)
        return _cmp(self._utc_key(), other._utc_key())

    def is_before(self, other: OffsetDateTime, /) -> bool:
        return self.compare_to(other) < 0

    def is_after(self, other: OffsetDateTime, /) -> bool:
        return self.compare_to(other) > 0

    def is_same_instant(self, other: OffsetDateTime, /) -> bool:
        """Whether both denote the same instant, regardless of offset"""
        return self.compare_to(other) == 0

    def __lt__(self, other: OffsetDateTime) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: OffsetDateTime) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: OffsetDateTime) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: OffsetDateTime) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __eq__(self, other: object) -> bool:
        """Compare the wall-clock reading and the offset.
        Use :meth:`is_same_instant` to compare instants instead.

        Example
        -------
        >>> d = OffsetDateTime(2020, 8, 15, 12, offset=ZoneOffset(hours=5))
        >>> d == OffsetDateTime(2020, 8, 15, 12, offset=ZoneOffset(hours=5))
        True
        >>> d == OffsetDateTime(2020, 8, 15, 11, offset=ZoneOffset(hours=4))
        False  # same instant, different representation
        """
        if self is other:
            return True
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._local == other._local and self._offset == other._offset

    def __hash__(self) -> int:
        return hash(self._local) ^ hash(self._offset)

    def format_common_iso(self) -> str:
        """The local datetime in its shortest lossless form,
        followed by the offset

        Example
        -------
        >>> OffsetDateTime(
        ...     2007, 10, 2, 13, 45, 30, nanosecond=123_456_789,
        ...     offset=ZoneOffset(hours=2),
        ... ).format_common_iso()
        '2007-10-02T13:45:30.123456789+02:00'
        """
        return (
            self._local.format_common_iso() + self._offset.format_common_iso()
        )

    __str__ = format_common_iso

    def __repr__(self) -> str:
        return f"OffsetDateTime({str(self).replace('T', ' ')})"

    def _with_local(self, local: LocalDateTime) -> OffsetDateTime:
        return self if local == self._local else self._new(local, self._offset)

    def _with_offset_seconds(self, secs: int) -> OffsetDateTime:
        return self.with_offset(ZoneOffset.from_seconds(secs))

    def _utc_key(self) -> tuple[int, int]:
        return (
            self._local._epoch_secs() - self._offset._secs,
            self._local._nanos,
        )

    @classmethod
    def _new(cls, local: LocalDateTime, offset: ZoneOffset) -> OffsetDateTime:
        self = _object_new(cls)
        self._local = local
        self._offset = offset
        return self

    # a custom pickle implementation with a smaller payload
    def __reduce__(self) -> tuple[object, ...]:
        return (
            _unpkl_offset,
            (
                pack(
                    "<HBBBBBIl",
                    *self._local._py_dt.timetuple()[:6],
                    self._local._nanos,
                    self._offset._secs,
                ),
            ),
        )


# A separate function is needed for unpickling, because the
# constructor doesn't accept positional offset argument as
# required by __reduce__.
# Also, it allows backwards-compatible changes to the pickling format.
def _unpkl_offset(data: bytes) -> OffsetDateTime:
    *args, nanos, offset_secs = unpack("<HBBBBBIl", data)
    return OffsetDateTime._new(
        LocalDateTime._from_py_unchecked(_datetime(*args), nanos),
        ZoneOffset.from_seconds(offset_secs),
    )


_FIELD_GETTERS: dict[Field, Callable[[Any], int]] = {
    Field.YEAR: lambda c: c.year,
    Field.MONTH_OF_YEAR: lambda c: c.month,
    Field.DAY_OF_MONTH: lambda c: c.day,
    Field.DAY_OF_YEAR: lambda c: c.day_of_year(),
    Field.DAY_OF_WEEK: lambda c: c.day_of_week().value,
    Field.HOUR_OF_DAY: lambda c: c.hour,
    Field.MINUTE_OF_HOUR: lambda c: c.minute,
    Field.SECOND_OF_MINUTE: lambda c: c.second,
    Field.NANO_OF_SECOND: lambda c: c.nanosecond,
    Field.OFFSET_SECONDS: lambda c: c.offset.amount_seconds,
}

_FIELD_SETTERS: dict[Field, str] = {
    Field.YEAR: "with_year",
    Field.MONTH_OF_YEAR: "with_month",
    Field.DAY_OF_MONTH: "with_day",
    Field.DAY_OF_YEAR: "with_day_of_year",
    Field.DAY_OF_WEEK: "with_day_of_week",
    Field.HOUR_OF_DAY: "with_hour",
    Field.MINUTE_OF_HOUR: "with_minute",
    Field.SECOND_OF_MINUTE: "with_second",
    Field.NANO_OF_SECOND: "with_nanosecond",
    Field.OFFSET_SECONDS: "_with_offset_seconds",
}


def years(i: int, /) -> Period:
    """Create a :class:`Period` with the given number of years.
    ``years(1) == Period(years=1)``
    """
    return Period(years=i)


def months(i: int, /) -> Period:
    """Create a :class:`Period` with the given number of months.
    ``months(1) == Period(months=1)``
    """
    return Period(months=i)


def weeks(i: int, /) -> Period:
    """Create a :class:`Period` with the given number of weeks.
    ``weeks(1) == Period(weeks=1)``
    """
    return Period(weeks=i)


def days(i: int, /) -> Period:
    """Create a :class:`Period` with the given number of days.
    ``days(1) == Period(days=1)``
    """
    return Period(days=i)


def hours(i: int, /) -> Period:
    """Create a :class:`Period` with the given number of hours.
    ``hours(1) == Period(hours=1)``
    """
    return Period(hours=i)


def minutes(i: int, /) -> Period:
    """Create a :class:`Period` with the given number of minutes.
    ``minutes(1) == Period(minutes=1)``
    """
    return Period(minutes=i)


def seconds(i: int, /) -> Period:
    """Create a :class:`Period` with the given number of seconds.
    ``seconds(1) == Period(seconds=1)``
    """
    return Period(seconds=i)


def nanoseconds(i: int, /) -> Period:
    """Create a :class:`Period` with the given number of nanoseconds.
    ``nanoseconds(1) == Period(nanoseconds=1)``
    """
    return Period(nanoseconds=i)


def _require(value: _T, name: str) -> _T:
    if value is None:
        raise MissingArgument(f"{name} must not be None")
    return value


def _require_fields(**fields: Any) -> None:
    for name, value in fields.items():
        _require(value, name)


def _check_int(value: int, name: str) -> int:
    if not isinstance(_require(value, name), int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _check_field(field: Field) -> Field:
    if not isinstance(_require(field, "field"), Field):
        raise TypeError(f"Expected Field, got {type(field).__name__}")
    return field


def _check_offset(offset: ZoneOffset) -> None:
    if not isinstance(_require(offset, "offset"), ZoneOffset):
        raise TypeError(f"Expected ZoneOffset, got {type(offset).__name__}")


def _check_offset_secs(secs: int) -> int:
    if not -MAX_OFFSET_SECS < secs < MAX_OFFSET_SECS:
        raise FieldOutOfRange(
            f"offset out of range: {secs}s. It must be within 24 hours"
        )
    return secs


def _check_year(year: int) -> int:
    if not MIN_YEAR <= _check_int(year, "year") <= MAX_YEAR:
        raise FieldOutOfRange(f"year {year} is out of range")
    return year


def _check_month(month: int) -> int:
    if not 1 <= _check_int(month, "month") <= 12:
        raise FieldOutOfRange(f"month must be in 1..12, got {month}")
    return month


def _check_nanos(nanos: int) -> int:
    if not 0 <= _check_int(nanos, "nanosecond") < NANOS_PER_SECOND:
        raise FieldOutOfRange(f"nanosecond out of range: {nanos}")
    return nanos


def _load_weekday(value: Weekday | int) -> Weekday:
    if isinstance(value, Weekday):
        return value
    try:
        return Weekday(_check_int(value, "day_of_week"))
    except ValueError:
        raise FieldOutOfRange(
            f"day_of_week must be in 1..7, got {value}"
        ) from None


def _mk_date(year: int, month: int, day: int) -> _date:
    _require_fields(year=year, month=month, day=day)
    try:
        return _date(year, month, day)
    except (ValueError, OverflowError) as e:
        raise FieldOutOfRange(str(e)) from None


def _mk_time(hour: int, minute: int, second: int) -> _time:
    _require_fields(hour=hour, minute=minute, second=second)
    try:
        return _time(hour, minute, second)
    except (ValueError, OverflowError) as e:
        raise FieldOutOfRange(str(e)) from None


def _mk_datetime(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> _datetime:
    _require_fields(
        year=year, month=month, day=day, hour=hour, minute=minute, second=second
    )
    try:
        return _datetime(year, month, day, hour, minute, second)
    except (ValueError, OverflowError) as e:
        raise FieldOutOfRange(str(e)) from None


def _replace_py(obj: Any, **kwargs: Any) -> Any:
    _require_fields(**kwargs)
    try:
        return obj.replace(**kwargs)
    except (ValueError, OverflowError) as e:
        raise FieldOutOfRange(str(e)) from None


_no_tzinfo_fold_or_ms = {"tzinfo", "fold", "microsecond"}.isdisjoint


def _check_invalid_replace_kwargs(kwargs: Any) -> None:
    if not _no_tzinfo_fold_or_ms(kwargs):
        raise TypeError(
            "tzinfo, fold, or microsecond are not allowed arguments"
        )


def _pop_nanos_kwarg(kwargs: Any, default: int) -> int:
    return _check_nanos(kwargs.pop("nanosecond", default))


def _sum_periods(periods: tuple[Period, ...]) -> Period:
    total = Period.ZERO
    for p in periods:
        if not isinstance(_require(p, "period"), Period):
            raise TypeError(f"Expected Period, got {type(p).__name__}")
        total += p
    return total


def _format_time(t: _time, nanos: int) -> str:
    hhmm = f"{t.hour:02d}:{t.minute:02d}"
    if not (t.second or nanos):
        return hhmm
    elif not nanos:
        return f"{hhmm}:{t.second:02d}"
    elif nanos % 1_000_000 == 0:
        return f"{hhmm}:{t.second:02d}.{nanos // 1_000_000:03d}"
    elif nanos % 1_000 == 0:
        return f"{hhmm}:{t.second:02d}.{nanos // 1_000:06d}"
    return f"{hhmm}:{t.second:02d}.{nanos:09d}"


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)
