import re
from dataclasses import dataclass, field
from datetime import time
from typing import Optional

from hiveddl.utils.exceptions import MalformedTimeError

NANOS_DIGITS = 9
MAX_NANOS = 999_999_999

_TIME_PATTERN = re.compile(r"^([0-9]{1,2}):([0-9]{1,2}):([0-9]{1,2})(?:\.([0-9]+))?$")


@dataclass(frozen=True)
class TimeValue:
    """
    Time of day with nanosecond resolution.

    fraction_digits is the width the sub-second part is rendered with.
    It is tracked separately from nanos so that text such as
    "12:13:14.1000" formats back to exactly the same string.

    Two construction paths exist and derive fraction_digits differently:
    - TimeValue(h, m, s, nanos): from the decimal length of the nanos integer
    - TimeValue.parse(text): from the width of the fractional text
    Both feed the same pad-only formatter.
    """
    hour: int
    minute: int
    second: int
    nanos: int = 0
    fraction_digits: Optional[int] = field(default=None)

    def __post_init__(self):
        _check_range("hour", self.hour, 0, 23)
        _check_range("minute", self.minute, 0, 59)
        _check_range("second", self.second, 0, 59)
        _check_range("nanos", self.nanos, 0, MAX_NANOS)

        if self.fraction_digits is not None:
            _check_range("fraction_digits", self.fraction_digits, 0, NANOS_DIGITS)

        # No explicit width, or a zero width for a nonzero fraction: fall back
        # to the decimal length of nanos.
        if not self.fraction_digits:
            digits = len(str(self.nanos)) if self.nanos else 0
            object.__setattr__(self, "fraction_digits", digits)

        # A zero fraction is never rendered, so it has no width either.
        if self.nanos == 0:
            object.__setattr__(self, "fraction_digits", 0)

    # --------------------------------------------------
    # PARSE
    # --------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "TimeValue":
        """
        Parse "hh:mm:ss[.fraction]".

        Fractions longer than nine digits are truncated to nine. A fraction
        made only of zeros counts as no fraction at all.
        """
        if not isinstance(text, str):
            raise MalformedTimeError(f"Time value must be text, got {type(text).__name__}")

        match = _TIME_PATTERN.match(text.strip())
        if not match:
            raise MalformedTimeError(
                f"Time format must be hh:mm:ss[.fffffffff], got {text!r}"
            )

        hour, minute, second, fraction = match.groups()

        nanos = 0
        fraction_digits = 0
        if fraction and fraction.strip("0"):
            fraction = fraction[:NANOS_DIGITS]
            fraction_digits = len(fraction)
            nanos = int(fraction.ljust(NANOS_DIGITS, "0"))

        return cls(int(hour), int(minute), int(second), nanos, fraction_digits)

    @classmethod
    def from_time(cls, value: time) -> "TimeValue":
        if value.microsecond:
            return cls(value.hour, value.minute, value.second, value.microsecond * 1000, 6)
        return cls(value.hour, value.minute, value.second, 0, 0)

    # --------------------------------------------------
    # FORMAT
    # --------------------------------------------------

    def format(self) -> str:
        base = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        if self.nanos == 0:
            return base

        fraction = f"{self.nanos:0{NANOS_DIGITS}d}".rstrip("0")
        if len(fraction) < self.fraction_digits:
            fraction = fraction.ljust(self.fraction_digits, "0")

        return f"{base}.{fraction}"

    def __str__(self) -> str:
        return self.format()

    # --------------------------------------------------
    # CONVERSIONS
    # --------------------------------------------------

    def to_time(self) -> time:
        """Convert to datetime.time; sub-microsecond digits are dropped."""
        return time(self.hour, self.minute, self.second, self.nanos // 1000)

    @property
    def total_nanos(self) -> int:
        seconds = self.hour * 3600 + self.minute * 60 + self.second
        return seconds * 1_000_000_000 + self.nanos


def _check_range(name: str, value, low: int, high: int):
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedTimeError(f"{name} must be an integer, got {value!r}")
    if value < low or value > high:
        raise MalformedTimeError(f"{name} must be between {low} and {high}, got {value}")
