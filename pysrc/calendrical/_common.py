from datetime import timedelta as _timedelta, timezone as _timezone
from functools import lru_cache

MIN_YEAR = 1
MAX_YEAR = 9999
DUMMY_LEAP_YEAR = 4
Nanos = int  # 0-999_999_999
MAX_OFFSET_SECS = 86_400  # exclusive


# We cache fixed-offset tzinfo objects to avoid creating multiple identical ones.
# It's very common to only have whole-hour offsets, so this helps a lot.
@lru_cache
def mk_fixed_tzinfo(secs: int, /) -> _timezone:
    return _timezone(_timedelta(seconds=secs))
