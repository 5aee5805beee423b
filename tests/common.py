from hypothesis.strategies import (
    SearchStrategy,
    builds,
    datetimes,
    integers,
)

from calendrical import LocalDateTime, OffsetDateTime, ZoneOffset


class AlwaysEqual:
    def __eq__(self, _):
        return True


class NeverEqual:
    def __eq__(self, _):
        return False


class AlwaysLarger:
    def __lt__(self, _):
        return False

    def __le__(self, _):
        return False

    def __gt__(self, _):
        return True

    def __ge__(self, _):
        return True


class AlwaysSmaller:
    def __lt__(self, _):
        return True

    def __le__(self, _):
        return True

    def __gt__(self, _):
        return False

    def __ge__(self, _):
        return False


def _mk_local(dt, nanos: int) -> LocalDateTime:
    return LocalDateTime(
        dt.year,
        dt.month,
        dt.day,
        dt.hour,
        dt.minute,
        dt.second,
        nanosecond=nanos,
    )


zone_offsets: SearchStrategy[ZoneOffset] = builds(
    ZoneOffset.from_seconds, integers(-86_399, 86_399)
)
local_datetimes: SearchStrategy[LocalDateTime] = builds(
    _mk_local, datetimes(), integers(0, 999_999_999)
)
offset_datetimes: SearchStrategy[OffsetDateTime] = builds(
    OffsetDateTime.from_local_datetime, local_datetimes, zone_offsets
)
