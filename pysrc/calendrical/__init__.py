from __future__ import annotations

from ._pycalendrical import *
from ._pycalendrical import (  # for the docs and pickling
    __all__,
    __version__,
    _Calendrical,
    _unpkl_date,
    _unpkl_inst,
    _unpkl_local,
    _unpkl_offset,
    _unpkl_period,
    _unpkl_time,
    _unpkl_zone_offset,
)
