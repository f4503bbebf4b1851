"""SubRip timecode value type."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import timedelta

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE

_DIGITS = re.compile(r"[0-9]+")


class FormatError(ValueError):
    """Raised when a single line does not have its expected lexical shape."""


def _parse_field(text: str, name: str, source: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise FormatError(f"Invalid {name} field '{text}' in timecode '{source}'")
    return int(text)


@dataclass(frozen=True, order=True)
class Timecode:
    """Absolute time with millisecond precision.

    The total number of milliseconds is the only stored state; the hour,
    minute, second and millisecond components are derived from it.

    Attributes:
        total_milliseconds: Milliseconds counted from 00:00:00,000
    """

    total_milliseconds: int = 0

    def __post_init__(self) -> None:
        """Validate timecode constraints."""
        if self.total_milliseconds < 0:
            raise ValueError(
                f"Timecode cannot be negative, got {self.total_milliseconds}ms"
            )

    @classmethod
    def parse(cls, text: str) -> Timecode:
        """Parse a timecode in ``HH:MM:SS,mmm`` form.

        Hours may be any number of digits. The fields are located by the
        first ``:``, the next ``:`` and the first ``,`` after that.

        Args:
            text: Timecode text, surrounding whitespace is ignored

        Returns:
            Parsed Timecode

        Raises:
            FormatError: If a separator is missing or a field is not numeric
        """
        value = text.strip()
        first = value.find(":")
        second = value.find(":", first + 1) if first != -1 else -1
        comma = value.find(",", second + 1) if second != -1 else -1
        if comma == -1:
            raise FormatError(
                f"Invalid timecode '{value}', expected 'HH:MM:SS,mmm'"
            )

        hours = _parse_field(value[:first], "hours", value)
        minutes = _parse_field(value[first + 1 : second], "minutes", value)
        seconds = _parse_field(value[second + 1 : comma], "seconds", value)
        millis = _parse_field(value[comma + 1 :], "milliseconds", value)

        return cls(
            hours * _MS_PER_HOUR
            + minutes * _MS_PER_MINUTE
            + seconds * _MS_PER_SECOND
            + millis
        )

    @classmethod
    def from_timedelta(cls, value: timedelta) -> Timecode:
        """Build a timecode from a timedelta, dropping sub-millisecond precision."""
        return cls(value // timedelta(milliseconds=1))

    @classmethod
    def from_seconds(cls, seconds: float) -> Timecode:
        """Build a timecode from float seconds, truncating to milliseconds."""
        return cls(int(seconds * _MS_PER_SECOND))

    @property
    def hours(self) -> int:
        return self.total_milliseconds // _MS_PER_HOUR

    @property
    def minutes(self) -> int:
        return self.total_milliseconds % _MS_PER_HOUR // _MS_PER_MINUTE

    @property
    def seconds(self) -> int:
        return self.total_milliseconds % _MS_PER_MINUTE // _MS_PER_SECOND

    @property
    def milliseconds(self) -> int:
        return self.total_milliseconds % _MS_PER_SECOND

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.total_milliseconds)

    def to_seconds(self) -> float:
        return self.total_milliseconds / _MS_PER_SECOND

    def to_text(self) -> str:
        """Render as ``HH:MM:SS,mmm`` (hours wider than two digits are kept)."""
        return (
            f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d},"
            f"{self.milliseconds:03d}"
        )

    def scale(self, factor: float) -> Timecode:
        """Multiply the time by ``factor``, truncating toward zero.

        Args:
            factor: Positive, finite multiplier (e.g. 0.95904 for 23.976 -> 25 fps)

        Returns:
            New scaled Timecode

        Raises:
            ValueError: If factor is not a positive finite number or the
                scaled time is out of range
        """
        if not math.isfinite(factor) or factor <= 0:
            raise ValueError(f"Scale factor must be positive and finite, got {factor}")
        try:
            return Timecode(int(self.total_milliseconds * factor))
        except OverflowError as e:
            raise ValueError(f"Scaled time is out of range for factor {factor}") from e

    def offset(self, delta_ms: int) -> Timecode:
        """Shift the time by ``delta_ms`` milliseconds (may be negative).

        Raises:
            ValueError: If the result would be negative
        """
        return Timecode(self.total_milliseconds + delta_ms)

    def __str__(self) -> str:
        return self.to_text()
