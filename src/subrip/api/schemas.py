"""Pydantic v2 request/response schemas."""

from typing import Self

from pydantic import BaseModel, Field, model_validator

from subrip.core.subtitle import SubtitleEntry


class RetimeRequest(BaseModel):
    """Request body for scaling and/or offsetting subtitle timing."""

    srt_content: str
    scale: float | None = Field(default=None, gt=0)
    source_fps: float | None = Field(default=None, gt=0)
    target_fps: float | None = Field(default=None, gt=0)
    offset_ms: int = 0
    strip_html: bool = False

    @model_validator(mode="after")
    def validate_retime(self) -> Self:
        if (self.source_fps is None) != (self.target_fps is None):
            raise ValueError("source_fps and target_fps must be given together")
        if self.scale is not None and self.source_fps is not None:
            raise ValueError("scale cannot be combined with source_fps/target_fps")
        return self


class RetimeResponse(BaseModel):
    """Response body with the retimed SRT document."""

    srt_content: str
    entry_count: int


class QueryRequest(BaseModel):
    """Request body for looking up subtitles shown at a point in time."""

    srt_content: str
    at: str


class EntrySchema(BaseModel):
    """A single subtitle entry."""

    index: int
    start: str
    end: str
    text: str

    @classmethod
    def from_entry(cls, entry: SubtitleEntry) -> "EntrySchema":
        return cls(
            index=entry.index,
            start=entry.start.to_text(),
            end=entry.end.to_text(),
            text=entry.text,
        )


class QueryResponse(BaseModel):
    """Response body for time lookups."""

    entries: list[EntrySchema]
