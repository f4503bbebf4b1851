"""Unit tests for time-based subtitle lookups."""

from subrip.core.query import last_end_time, subtitles_at
from subrip.core.subtitle import SubtitleEntry
from subrip.core.timecode import Timecode


def _entry(index: int, start_ms: int, end_ms: int) -> SubtitleEntry:
    return SubtitleEntry(
        index=index, start=Timecode(start_ms), end=Timecode(end_ms), lines=["x"]
    )


class TestSubtitlesAt:
    """Test cases for subtitles_at."""

    def test_returns_active_entries(self):
        """Test that entries spanning the time are returned in source order."""
        entries = [_entry(1, 0, 2000), _entry(2, 1500, 3000), _entry(3, 4000, 5000)]

        result = subtitles_at(entries, Timecode(1800))

        assert [e.index for e in result] == [1, 2]

    def test_bounds_are_exclusive(self):
        """Test that an entry is not active at its exact start or end."""
        entries = [_entry(1, 1000, 2000)]

        assert subtitles_at(entries, Timecode(1000)) == []
        assert subtitles_at(entries, Timecode(2000)) == []
        assert len(subtitles_at(entries, Timecode(1001))) == 1

    def test_handles_unsorted_entries(self):
        """Test lookups over entries not ordered by time."""
        entries = [_entry(9, 8000, 9000), _entry(1, 0, 10_000)]

        result = subtitles_at(entries, Timecode(8500))

        assert [e.index for e in result] == [9, 1]

    def test_no_match(self):
        """Test that a gap returns no entries."""
        assert subtitles_at([_entry(1, 0, 1000)], Timecode(5000)) == []


class TestLastEndTime:
    """Test cases for last_end_time."""

    def test_returns_latest_end(self):
        """Test that the greatest end time wins regardless of order."""
        entries = [_entry(1, 0, 9000), _entry(2, 1000, 2000)]

        assert last_end_time(entries) == Timecode(9000)

    def test_empty_returns_zero(self):
        """Test that no entries gives 00:00:00,000."""
        assert last_end_time([]) == Timecode(0)
