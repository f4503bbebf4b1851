"""Pytest configuration and shared fixtures for integration tests."""

from pathlib import Path

import pytest

from subrip.core.subtitle import Subtitle, SubtitleEntry
from subrip.core.timecode import Timecode

# ---------------------------------------------------------------------------
# Content fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def film_srt_content() -> str:
    """Two entries timed for a 23.976 fps release, CRLF terminated."""
    return (
        "1\r\n"
        "00:00:20,000 --> 00:00:24,400\r\n"
        "<i>Previously...</i>\r\n"
        "\r\n"
        "2\r\n"
        "01:02:03,456 --> 01:02:05,789\r\n"
        "First line\r\n"
        "\r\n"
        "after a pause\r\n"
        "\r\n"
    )


@pytest.fixture
def film_srt_file(tmp_path: Path, film_srt_content: str) -> Path:
    """Write the film content to disk byte for byte."""
    path = tmp_path / "film.srt"
    path.write_bytes(film_srt_content.encode("utf-8"))
    return path


@pytest.fixture
def sample_subtitle_3_entries() -> Subtitle:
    """Three entries built directly from the model."""
    return Subtitle(
        entries=[
            SubtitleEntry(
                index=1,
                start=Timecode(1000),
                end=Timecode(2000),
                lines=["Hello"],
            ),
            SubtitleEntry(
                index=2,
                start=Timecode(2500),
                end=Timecode(4000),
                lines=["How are you?", "", "Fine."],
            ),
            SubtitleEntry(
                index=3,
                start=Timecode(3_600_000),
                end=Timecode(3_601_000),
                lines=["An hour later"],
            ),
        ]
    )
