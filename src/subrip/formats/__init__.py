"""Subtitle format handlers."""

from subrip.formats.srt import (
    InvalidDocumentError,
    ParserState,
    SRTParser,
    parse_srt,
    serialize_srt,
)

__all__ = [
    "InvalidDocumentError",
    "ParserState",
    "SRTParser",
    "parse_srt",
    "serialize_srt",
]
