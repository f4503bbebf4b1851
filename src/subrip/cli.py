"""subrip command-line interface with subcommands.

Usage:
    subrip retime <input.srt> [-o output.srt] [--scale F | --fps FROM TO] [--offset MS]
    subrip at <input.srt> <HH:MM:SS,mmm>
    subrip info <input.srt>
"""

import argparse
import sys
from pathlib import Path

import structlog

from subrip.core.query import last_end_time, subtitles_at
from subrip.core.timecode import Timecode
from subrip.formats.srt import InvalidDocumentError, serialize_srt
from subrip.utils.files import read_srt_file, write_srt_file
from subrip.utils.logging import setup_logging

logger = structlog.get_logger()


def cmd_retime(args: argparse.Namespace) -> None:
    """Scale and/or offset every timecode in a file."""
    subtitle = read_srt_file(
        Path(args.input), encoding=args.encoding, strip_html=args.strip_html
    )

    if args.fps:
        subtitle.convert_fps(*args.fps)
    elif args.scale is not None:
        subtitle.scale(args.scale)
    if args.offset:
        subtitle.offset(args.offset)

    logger.info(
        "subtitle_retimed",
        entries=len(subtitle),
        scale=args.scale,
        fps=args.fps,
        offset_ms=args.offset,
    )

    if args.output:
        write_srt_file(subtitle, Path(args.output), encoding=args.encoding)
    else:
        sys.stdout.write(serialize_srt(subtitle))


def cmd_at(args: argparse.Namespace) -> None:
    """Print the entries shown at a given time."""
    subtitle = read_srt_file(Path(args.input), encoding=args.encoding)
    at = Timecode.parse(args.time)
    for entry in subtitles_at(subtitle, at):
        sys.stdout.write(entry.render())


def cmd_info(args: argparse.Namespace) -> None:
    """Print a short summary of a file."""
    subtitle = read_srt_file(Path(args.input), encoding=args.encoding)
    print(f"entries: {len(subtitle)}")
    print(f"last end time: {last_end_time(subtitle)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subrip",
        description="Parse, retime and inspect SubRip (.srt) subtitle files",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    subparsers = parser.add_subparsers(dest="command", help="available commands")

    # --- retime ---
    p_retime = subparsers.add_parser("retime", help="scale and/or offset timecodes")
    p_retime.add_argument("input", type=str, help="input SRT file")
    p_retime.add_argument(
        "-o", "--output", type=str, help="output SRT file (default: stdout)"
    )
    group = p_retime.add_mutually_exclusive_group()
    group.add_argument("--scale", type=float, help="multiply all times by this factor")
    group.add_argument(
        "--fps",
        type=float,
        nargs=2,
        metavar=("FROM", "TO"),
        help="convert timing authored at FROM fps for playback at TO fps",
    )
    p_retime.add_argument(
        "--offset", type=int, default=0, help="shift all times by MS milliseconds"
    )
    p_retime.add_argument("--encoding", type=str, help="file encoding (default: utf-8)")
    p_retime.add_argument(
        "--strip-html",
        action="store_true",
        default=None,
        help="remove <...> tags from text",
    )

    # --- at ---
    p_at = subparsers.add_parser("at", help="show subtitles active at a time")
    p_at.add_argument("input", type=str, help="input SRT file")
    p_at.add_argument("time", type=str, help="time as HH:MM:SS,mmm")
    p_at.add_argument("--encoding", type=str, help="file encoding (default: utf-8)")

    # --- info ---
    p_info = subparsers.add_parser("info", help="print entry count and duration")
    p_info.add_argument("input", type=str, help="input SRT file")
    p_info.add_argument("--encoding", type=str, help="file encoding (default: utf-8)")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging("DEBUG" if args.verbose else None)

    commands = {"retime": cmd_retime, "at": cmd_at, "info": cmd_info}
    try:
        commands[args.command](args)
    except (FileNotFoundError, InvalidDocumentError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
