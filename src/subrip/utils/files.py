"""Reading and writing SRT files."""

from pathlib import Path

import structlog

from subrip.core.subtitle import Subtitle
from subrip.formats.srt import parse_srt, serialize_srt
from subrip.utils.config import get_settings

logger = structlog.get_logger()


def read_srt_file(
    path: Path,
    *,
    encoding: str | None = None,
    strip_html: bool | None = None,
) -> Subtitle:
    """Read and parse an SRT file.

    Args:
        path: SRT file to read
        encoding: Text encoding (default from settings, "utf-8")
        strip_html: Strip ``<...>`` tags from text (default from settings)

    Returns:
        Parsed Subtitle object

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidDocumentError: If the content is malformed
    """
    settings = get_settings()
    encoding = encoding or settings.encoding
    if strip_html is None:
        strip_html = settings.strip_html

    if not path.is_file():
        raise FileNotFoundError(f"Subtitle file does not exist: {path}")

    # newline="" keeps CR and CRLF for the parser to normalize
    with path.open(encoding=encoding, newline="") as f:
        content = f.read()

    subtitle = parse_srt(content, strip_html=strip_html)
    logger.info("srt_file_read", path=str(path), entries=len(subtitle))
    return subtitle


def write_srt_file(
    subtitle: Subtitle,
    path: Path,
    *,
    encoding: str | None = None,
) -> Path:
    """Render a subtitle document and write it to ``path``.

    The rendered text is written unchanged, so the file always uses CRLF
    line endings.

    Args:
        subtitle: Subtitle object to write
        path: Output file
        encoding: Text encoding (default from settings, "utf-8")

    Returns:
        Path to the written file
    """
    encoding = encoding or get_settings().encoding
    with path.open("w", encoding=encoding, newline="") as f:
        f.write(serialize_srt(subtitle))
    logger.info("srt_file_written", path=str(path), entries=len(subtitle))
    return path
