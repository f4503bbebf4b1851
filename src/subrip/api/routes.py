"""API route definitions."""

import structlog
from fastapi import APIRouter

from subrip.api.errors import InvalidRequestError, InvalidSubtitleError
from subrip.api.schemas import (
    EntrySchema,
    QueryRequest,
    QueryResponse,
    RetimeRequest,
    RetimeResponse,
)
from subrip.core.query import subtitles_at
from subrip.core.subtitle import Subtitle
from subrip.core.timecode import FormatError, Timecode
from subrip.formats.srt import InvalidDocumentError, parse_srt, serialize_srt
from subrip.utils.config import get_settings

router = APIRouter(prefix="/api")
logger = structlog.get_logger()


def _parse_content(content: str, *, strip_html: bool = False) -> Subtitle:
    """Parse request SRT content or raise an API error."""
    max_chars = get_settings().max_content_chars
    if len(content) > max_chars:
        raise InvalidRequestError(
            "SRT content too large",
            detail=f"Maximum size is {max_chars} characters",
        )
    try:
        return parse_srt(content, strip_html=strip_html)
    except InvalidDocumentError as err:
        raise InvalidSubtitleError(err) from err


@router.post("/subtitles/retime", response_model=RetimeResponse)
async def retime_subtitles(body: RetimeRequest) -> RetimeResponse:
    """Scale and/or offset every timecode in an SRT document."""
    subtitle = _parse_content(body.srt_content, strip_html=body.strip_html)

    try:
        if body.source_fps is not None and body.target_fps is not None:
            subtitle.convert_fps(body.source_fps, body.target_fps)
        elif body.scale is not None:
            subtitle.scale(body.scale)
        if body.offset_ms:
            subtitle.offset(body.offset_ms)
    except ValueError as err:
        raise InvalidRequestError("Cannot retime subtitles", detail=str(err)) from err

    logger.info(
        "subtitle_retimed",
        entries=len(subtitle),
        scale=body.scale,
        offset_ms=body.offset_ms,
    )
    return RetimeResponse(
        srt_content=serialize_srt(subtitle),
        entry_count=len(subtitle),
    )


@router.post("/subtitles/query", response_model=QueryResponse)
async def query_subtitles(body: QueryRequest) -> QueryResponse:
    """Return the entries shown at a point in time."""
    try:
        at = Timecode.parse(body.at)
    except FormatError as err:
        raise InvalidRequestError("Invalid time", detail=str(err)) from err

    subtitle = _parse_content(body.srt_content)
    return QueryResponse(
        entries=[EntrySchema.from_entry(e) for e in subtitles_at(subtitle, at)]
    )


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}
