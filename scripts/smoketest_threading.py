"""
Stress test for sharing immutable values between threads.

Note this isn't a unit test: it's meant to run on a free-threaded build.
"""

import sys
import time
from threading import Thread

from calendrical import Instant, OffsetDateTime, ZoneOffset, hours

if not hasattr(sys, "_is_gil_enabled") or sys._is_gil_enabled():
    # Running with GIL enabled can still be useful to compare performance,
    # but be sure to warn that threading hasn't been stress tested.
    print("WARNING: Running with GIL enabled. Threading not stress tested.")


SHARED_DT = OffsetDateTime(2024, 6, 15, 12, offset=ZoneOffset(hours=2))
NUM_THREADS = 16
NUM_ITERATIONS = 500
OFFSET_SAMPLE = [
    ZoneOffset.from_seconds(secs)
    for secs in range(-50_400, 50_400 + 1, 3_600 * 3 + 900)
]
assert (
    len(OFFSET_SAMPLE) % NUM_THREADS
), "Offset sample should not be evenly divisible by number of threads"
OFFSETS = OFFSET_SAMPLE * (NUM_THREADS * NUM_ITERATIONS)


def adjust_offsets(offsets):
    """Rebase the shared value and check the instant is preserved"""
    expect = SHARED_DT.to_instant()
    for offset in offsets:
        adjusted = SHARED_DT.adjust_for_offset(offset)
        assert adjusted.to_instant() == expect


def round_trip_instants(offsets):
    """Convert back and forth, creating many tzinfo objects on the way"""
    for n, offset in enumerate(offsets):
        inst = Instant.from_epoch_seconds(n * 3_601)
        dt = inst.to_fixed_offset(offset).plus(hours(1))
        assert dt.py_datetime().utcoffset() == offset.py_timedelta()


def main(func):
    print(f"Starting test: {func.__name__}")
    threads = []

    start_time = time.time()

    for n in range(NUM_THREADS):
        thread = Thread(target=func, args=(OFFSETS[n::NUM_THREADS],))
        threads.append(thread)
        thread.start()

    for thread in threads:
        thread.join()

    end_time = time.time()
    print(f"Execution time: {end_time - start_time:.2f} seconds")


if __name__ == "__main__":
    main(adjust_offsets)
    main(round_trip_instants)
