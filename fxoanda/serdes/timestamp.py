"""Nanosecond-resolution UTC timestamp with strict RFC3339 parsing."""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

NANOS_PER_SECOND = 1_000_000_000

_RFC3339 = re.compile(
    r"(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2})[Tt]"
    r"(?P<time>[0-9]{2}:[0-9]{2}:[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]{1,9}))?"
    r"(?:(?P<utc>[Zz])|(?P<sign>[+-])(?P<off_h>[0-9]{2}):(?P<off_m>[0-9]{2}))"
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, order=True)
class Timestamp:
    """A point in time with up to nanosecond resolution, normalized to UTC.

    ``seconds`` is an aware UTC datetime with no sub-second part; the
    fraction lives in ``nanosecond``. Python's ``datetime`` stops at
    microseconds, which is not enough for the broker's 9-digit fractions.
    """

    seconds: datetime
    nanosecond: int = 0

    def __post_init__(self) -> None:
        if self.seconds.tzinfo is None:
            raise ValueError("Timestamp requires a timezone-aware datetime")
        if not 0 <= self.nanosecond < NANOS_PER_SECOND:
            raise ValueError(f"nanosecond out of range: {self.nanosecond}")
        normalized = self.seconds.astimezone(timezone.utc)
        if normalized.microsecond:
            raise ValueError("seconds must not carry a sub-second part")
        object.__setattr__(self, "seconds", normalized)

    @classmethod
    def parse(cls, text: str) -> "Timestamp":
        """Parse an RFC3339 string. Naive timestamps are rejected."""
        match = _RFC3339.fullmatch(text)
        if match is None:
            raise ValueError(f"not an RFC3339 timestamp: {text!r}")

        if match.group("utc"):
            tz = timezone.utc
        else:
            off_h = int(match.group("off_h"))
            off_m = int(match.group("off_m"))
            if off_h > 23 or off_m > 59:
                raise ValueError(f"invalid UTC offset in {text!r}")
            offset = timedelta(hours=off_h, minutes=off_m)
            tz = timezone(-offset if match.group("sign") == "-" else offset)

        clock = match.group("time")
        fraction = match.group("fraction") or ""
        nanosecond = int(fraction.ljust(9, "0")) if fraction else 0

        # Leap second: datetime has no :60, so pin to the last nanosecond of :59.
        if clock.endswith(":60"):
            clock = clock[:-2] + "59"
            nanosecond = NANOS_PER_SECOND - 1

        # strptime validates the calendar (month 13, Feb 30, hour 25 ...)
        naive = datetime.strptime(f"{match.group('date')}T{clock}", "%Y-%m-%dT%H:%M:%S")
        try:
            return cls(naive.replace(tzinfo=tz), nanosecond)
        except OverflowError:
            raise ValueError(f"timestamp outside the representable range: {text!r}") from None

    @classmethod
    def from_datetime(cls, value: datetime) -> "Timestamp":
        """Build from an aware datetime (microsecond precision)."""
        if value.tzinfo is None:
            raise ValueError("naive datetime has no defined instant; attach a tzinfo")
        return cls(value.replace(microsecond=0), value.microsecond * 1000)

    @classmethod
    def from_epoch_nanoseconds(cls, value: int) -> "Timestamp":
        secs, nanos = divmod(value, NANOS_PER_SECOND)
        return cls(_EPOCH + timedelta(seconds=secs), nanos)

    @property
    def epoch_nanoseconds(self) -> int:
        delta = self.seconds - _EPOCH
        return (delta.days * 86_400 + delta.seconds) * NANOS_PER_SECOND + self.nanosecond

    def to_datetime(self) -> datetime:
        """Aware UTC datetime, truncated to microseconds."""
        return self.seconds.replace(microsecond=self.nanosecond // 1000)

    def isoformat(self) -> str:
        """RFC3339 in UTC; the fraction is omitted when zero, otherwise
        written with trailing zeros trimmed."""
        s = self.seconds
        text = f"{s.year:04d}-{s.month:02d}-{s.day:02d}T{s.hour:02d}:{s.minute:02d}:{s.second:02d}"
        if self.nanosecond:
            text += "." + f"{self.nanosecond:09d}".rstrip("0")
        return text + "Z"

    def __str__(self) -> str:
        return self.isoformat()
