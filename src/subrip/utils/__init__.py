"""Utility modules."""

from subrip.utils.config import Settings, get_settings
from subrip.utils.logging import setup_logging
from subrip.utils.text import strip_html_tags

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "strip_html_tags",
]
