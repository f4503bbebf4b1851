"""Time-based lookups over subtitle entries."""

from collections.abc import Iterable

from subrip.core.subtitle import SubtitleEntry
from subrip.core.timecode import Timecode


def subtitles_at(
    entries: Iterable[SubtitleEntry],
    at: Timecode,
) -> list[SubtitleEntry]:
    """Find all entries displayed at a point in time.

    Args:
        entries: Subtitle entries in any order, possibly overlapping
        at: Point in time to look up

    Returns:
        Entries with ``start < at < end``, in their original order

    Notes:
        - Both bounds are exclusive, so an entry is not active at the exact
          moment it starts or ends
    """
    return [entry for entry in entries if entry.start < at < entry.end]


def last_end_time(entries: Iterable[SubtitleEntry]) -> Timecode:
    """Return the latest end time, or 00:00:00,000 when there are no entries."""
    return max((entry.end for entry in entries), default=Timecode(0))
