"""
Clock time source - turns a wall-clock reading into seconds since local midnight.
"""

from datetime import datetime
from typing import Callable, Optional

SECONDS_PER_DAY = 24 * 60 * 60
ACCELERATION_FACTOR = 6.0

ClockSource = Callable[[], datetime]


class ClockUnavailableError(RuntimeError):
    """Raised when the wall clock cannot be read. No fallback time is used."""


def seconds_since_midnight(moment: datetime) -> float:
    integer_seconds = (moment.hour * 60 + moment.minute) * 60 + moment.second
    return integer_seconds + moment.microsecond / 1_000_000


def accelerate(seconds: float, factor: float = ACCELERATION_FACTOR) -> float:
    """Speed time up by `factor`, wrapped back into a single day."""
    return (seconds * factor) % SECONDS_PER_DAY


def read_clock(clock: Optional[ClockSource] = None) -> datetime:
    source = clock or datetime.now
    try:
        moment = source()
    except (OSError, OverflowError, ValueError) as e:
        raise ClockUnavailableError(f"Unable to read the system clock: {e}") from e
    if not isinstance(moment, datetime):
        raise ClockUnavailableError(f"Clock returned {type(moment).__name__}, expected datetime")
    return moment


def now(accelerated: bool = False,
        clock: Optional[ClockSource] = None,
        factor: float = ACCELERATION_FACTOR) -> float:
    """
    Return the time to display as seconds since midnight.
    If accelerated, time runs `factor` times faster (preview mode).
    """
    seconds = seconds_since_midnight(read_clock(clock))
    if accelerated:
        seconds = accelerate(seconds, factor)
    return seconds
