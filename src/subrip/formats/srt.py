"""SRT format parser and serializer."""

import re
from enum import Enum

import structlog

from subrip.core.subtitle import TIME_RANGE_MARKER, Subtitle, SubtitleEntry
from subrip.core.timecode import FormatError, Timecode
from subrip.utils.text import strip_html_tags

logger = structlog.get_logger()

_LINE_BREAK = re.compile(r"\r\n?")
_SEQUENCE_NUMBER = re.compile(r"\s*([+-]?[0-9]+)\s*")
_BOM = "\ufeff"


class InvalidDocumentError(Exception):
    """Raised when SRT content cannot be parsed into a subtitle document.

    Attributes:
        line_index: 0-based index of the line being processed
        line: Content of that line (empty at end of input)
    """

    def __init__(self, line_index: int, line: str, reason: str) -> None:
        self.line_index = line_index
        self.line = line
        super().__init__(f"Invalid SRT document at line {line_index}: {reason}")


class ParserState(Enum):
    """What the parser expects from the next line."""

    EXPECT_NUMBER = "expect_number"
    EXPECT_TIME_RANGE = "expect_time_range"
    EXPECT_TEXT = "expect_text"


def parse_sequence_number(line: str) -> int | None:
    """Return the integer on a sequence number line, or None for any other line."""
    match = _SEQUENCE_NUMBER.fullmatch(line)
    return int(match.group(1)) if match else None


def parse_time_range(line: str) -> tuple[Timecode, Timecode]:
    """Parse a ``start --> end`` line.

    Raises:
        FormatError: If the marker is missing or either timecode is malformed
    """
    marker = line.find(TIME_RANGE_MARKER)
    if marker == -1:
        raise FormatError(f"Invalid time range '{line}', missing '-->' marker")
    start = Timecode.parse(line[:marker])
    end = Timecode.parse(line[marker + len(TIME_RANGE_MARKER) :])
    return start, end


class SRTParser:
    """Incremental SRT parser.

    All parsing state lives on the instance, so content can be fed in
    arbitrary chunks and the parser inspected between them. Parsing is
    all-or-nothing: after a failure the parser accepts no more input.

    Attributes:
        state: What the next line is expected to be
        pending_blanks: Blank lines seen since the last text line of the
            open entry. A sequence number line only starts a new entry
            while this is non-zero.
        current: The open entry, if any
        entries: Finished entries in source order
        line_index: Index of the next line to be processed
    """

    def __init__(self, *, strip_html: bool = False) -> None:
        self.strip_html = strip_html
        self.state = ParserState.EXPECT_NUMBER
        self.pending_blanks = 0
        self.current: SubtitleEntry | None = None
        self.entries: list[SubtitleEntry] = []
        self.line_index = 0
        self._sequence_number: int | None = None
        self._buffer = ""
        self._finished = False

    def feed(self, chunk: str) -> None:
        """Feed raw text, processing every line completed so far.

        Line endings are normalized to LF. A trailing CR is held back until
        the next chunk shows whether it starts a CRLF pair.

        Raises:
            InvalidDocumentError: If a completed line is malformed
        """
        data = self._buffer + chunk
        held = ""
        if data.endswith("\r"):
            data, held = data[:-1], "\r"
        *lines, rest = _LINE_BREAK.sub("\n", data).split("\n")
        self._buffer = rest + held
        for line in lines:
            self.feed_line(line)

    def feed_line(self, line: str) -> None:
        """Process a single line without its terminator.

        Raises:
            InvalidDocumentError: If the line is malformed for the current state
            RuntimeError: If the parser already failed or was closed
        """
        if self._finished:
            raise RuntimeError("Parser is closed or has already failed")

        index = self.line_index
        self.line_index += 1
        if index == 0:
            line = line.removeprefix(_BOM)

        try:
            self._step(line)
        except ValueError as e:
            self._finished = True
            raise InvalidDocumentError(index, line, str(e)) from e

    def close(self) -> Subtitle:
        """Flush buffered input, finish the open entry and return the document.

        Raises:
            InvalidDocumentError: If the buffered line is malformed or input
                ends between a sequence number and its time range
        """
        if self._finished:
            raise RuntimeError("Parser is closed or has already failed")

        remainder, self._buffer = self._buffer, ""
        for line in _LINE_BREAK.sub("\n", remainder).split("\n"):
            self.feed_line(line)

        self._finished = True
        if self.state is ParserState.EXPECT_TIME_RANGE:
            raise InvalidDocumentError(
                self.line_index, "", "Unexpected end of input, expected time range"
            )
        if self.current is not None:
            self._finish_entry()

        logger.debug("srt_parsed", entries=len(self.entries), lines=self.line_index)
        return Subtitle(entries=self.entries)

    def _step(self, line: str) -> None:
        number = parse_sequence_number(line)
        if number is not None and self.pending_blanks:
            self._finish_entry()

        if self.state is ParserState.EXPECT_NUMBER:
            if not line.strip():
                return
            if number is None:
                raise FormatError(f"Invalid subtitle number '{line.strip()}'")
            self._sequence_number = number
            self.state = ParserState.EXPECT_TIME_RANGE

        elif self.state is ParserState.EXPECT_TIME_RANGE:
            start, end = parse_time_range(line)
            self.current = SubtitleEntry(
                index=self._sequence_number, start=start, end=end
            )
            self._sequence_number = None
            self.state = ParserState.EXPECT_TEXT

        elif line == "":
            self.pending_blanks += 1

        else:
            # Blank lines between text lines belong to the text
            if self.current.lines:
                self.current.lines.extend([""] * self.pending_blanks)
            self.pending_blanks = 0
            if self.strip_html:
                line = strip_html_tags(line)
            self.current.lines.append(line)

    def _finish_entry(self) -> None:
        self.entries.append(self.current)
        self.current = None
        self.pending_blanks = 0
        self.state = ParserState.EXPECT_NUMBER


def parse_srt(content: str, *, strip_html: bool = False) -> Subtitle:
    """Parse SRT format string into Subtitle object.

    Args:
        content: SRT format string content, with any mix of CRLF, CR and LF
            line endings
        strip_html: Remove ``<...>`` tags from text lines

    Returns:
        Subtitle object containing parsed entries in source order

    Raises:
        InvalidDocumentError: If content is malformed
    """
    parser = SRTParser(strip_html=strip_html)
    parser.feed(content)
    return parser.close()


def serialize_srt(subtitle: Subtitle) -> str:
    """Serialize Subtitle object to SRT format string.

    Args:
        subtitle: Subtitle object to serialize

    Returns:
        SRT format string with CRLF line endings
    """
    return "".join(entry.render() for entry in subtitle)
