"""Core subtitle model: timecodes, entries, documents and time queries."""

from subrip.core.query import last_end_time, subtitles_at
from subrip.core.subtitle import Subtitle, SubtitleEntry
from subrip.core.timecode import FormatError, Timecode

__all__ = [
    "FormatError",
    "Subtitle",
    "SubtitleEntry",
    "Timecode",
    "last_end_time",
    "subtitles_at",
]
