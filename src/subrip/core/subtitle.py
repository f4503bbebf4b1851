"""Subtitle domain models."""

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from subrip.core.timecode import Timecode

SRT_LINE_ENDING = "\r\n"
TIME_RANGE_MARKER = " --> "

_LINE_BREAK = re.compile(r"\r\n?|\n")


@dataclass
class SubtitleEntry:
    """Single subtitle entry with timing and text lines.

    The index is kept exactly as read from the source and is never renumbered.
    Internal empty lines are allowed, trailing ones are not stored.
    """

    index: int
    start: Timecode
    end: Timecode
    lines: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Subtitle text with lines joined by newlines."""
        return "\n".join(self.lines)

    @text.setter
    def text(self, value: str) -> None:
        lines = _LINE_BREAK.split(value)
        while lines and lines[-1] == "":
            lines.pop()
        self.lines = lines

    def render(self) -> str:
        """Render the entry as an SRT block, including the blank separator line.

        Returns:
            Index line, time range line, text lines and an empty line, each
            terminated by CRLF
        """
        timing = f"{self.start}{TIME_RANGE_MARKER}{self.end}"
        block = [str(self.index), timing, SRT_LINE_ENDING.join(self.lines), ""]
        return SRT_LINE_ENDING.join(block) + SRT_LINE_ENDING

    def scale(self, factor: float) -> None:
        """Multiply start and end times, e.g. to convert between frame rates."""
        self.start, self.end = self.start.scale(factor), self.end.scale(factor)

    def offset(self, delta_ms: int) -> None:
        """Shift start and end times by a number of milliseconds."""
        self.start, self.end = self.start.offset(delta_ms), self.end.offset(delta_ms)


@dataclass
class Subtitle:
    """Ordered collection of subtitle entries.

    Entries keep their source order. They may overlap, be out of time order
    or carry non-sequential indices.
    """

    entries: list[SubtitleEntry] = field(default_factory=list)

    def __len__(self) -> int:
        """Return number of entries."""
        return len(self.entries)

    def __iter__(self) -> Iterator[SubtitleEntry]:
        """Iterate over entries."""
        return iter(self.entries)

    def __getitem__(self, index: int) -> SubtitleEntry:
        """Get entry by position (0-based)."""
        return self.entries[index]

    def scale(self, factor: float) -> None:
        """Multiply the times of every entry.

        All new times are computed before any entry changes, so a failure
        leaves the document untouched.

        Raises:
            ValueError: If factor is not a positive finite number
        """
        scaled = [(e.start.scale(factor), e.end.scale(factor)) for e in self.entries]
        self._assign(scaled)

    def offset(self, delta_ms: int) -> None:
        """Shift the times of every entry by ``delta_ms`` milliseconds.

        Raises:
            ValueError: If any resulting time would be negative
        """
        shifted = [
            (e.start.offset(delta_ms), e.end.offset(delta_ms)) for e in self.entries
        ]
        self._assign(shifted)

    def convert_fps(self, source_fps: float, target_fps: float) -> None:
        """Retime subtitles authored for ``source_fps`` to play at ``target_fps``.

        Raises:
            ValueError: If either frame rate is not positive
        """
        if source_fps <= 0 or target_fps <= 0:
            raise ValueError(
                f"Frame rates must be positive, got {source_fps} and {target_fps}"
            )
        self.scale(source_fps / target_fps)

    def _assign(self, times: list[tuple[Timecode, Timecode]]) -> None:
        for entry, (start, end) in zip(self.entries, times, strict=True):
            entry.start = start
            entry.end = end
