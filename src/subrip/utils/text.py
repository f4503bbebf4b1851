"""Text filters applied to subtitle lines."""

import re

_HTML_TAG = re.compile(r"<.*?>", re.DOTALL)


def strip_html_tags(text: str) -> str:
    """Remove tag-like ``<...>`` spans such as ``<i>`` or ``<font color="red">``.

    Args:
        text: Subtitle text line

    Returns:
        Text with every shortest ``<...>`` span removed
    """
    return _HTML_TAG.sub("", text)
