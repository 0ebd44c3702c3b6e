"""
Turns whatever the user pasted into a YouTube video identifier.
"""

from enum import Enum
from typing import Optional, Tuple
from urllib.parse import urlsplit, parse_qs

from ytmp3.utils.logger import logging


class UrlKind(str, Enum):
    """Which shape of input a string was recognised as."""
    WATCH = "watch"                # youtube.com/...?v=<id>
    SHORT = "short"                # youtu.be/<id>
    UNRECOGNIZED = "unrecognized"  # absolute URL on any other host
    BARE_ID = "bare_id"            # not a URL, taken verbatim


def _parse_absolute(text: str):
    """Return the split URL if ``text`` is an absolute URL, else None."""
    try:
        parts = urlsplit(text)
    except ValueError:
        return None
    if not parts.scheme:
        return None
    return parts


def _match(raw: str) -> Tuple[UrlKind, Optional[str]]:
    text = (raw or "").strip()
    parts = _parse_absolute(text)

    if parts is None:
        return UrlKind.BARE_ID, text or None

    host = parts.hostname or ""
    if "youtube.com" in host:
        values = parse_qs(parts.query, keep_blank_values=True).get("v")
        if values and values[0]:
            return UrlKind.WATCH, values[0]

    if "youtu.be" in host:
        segment = parts.path.split("/")[1] if "/" in parts.path else ""
        return UrlKind.SHORT, segment or None

    return UrlKind.UNRECOGNIZED, None


def classify_url(raw: str) -> UrlKind:
    """
    Classify user input.

    Args:
        raw: Text as typed or pasted by the user

    Returns:
        The UrlKind branch the input falls into
    """
    return _match(raw)[0]


def extract_video_id(raw: str) -> Optional[str]:
    """
    Extract a YouTube video ID from a URL or a bare ID.

    ``youtube.com`` URLs yield their ``v`` query parameter and ``youtu.be``
    URLs their first path segment. Input that is not an absolute URL is
    returned trimmed, as-is. An absolute URL on any other host yields no
    identifier; it is not retried as a literal ID.

    Args:
        raw: Text as typed or pasted by the user

    Returns:
        Video ID, or None when none can be derived
    """
    kind, video_id = _match(raw)
    if kind == UrlKind.UNRECOGNIZED:
        logging.info(f"Input is a URL on an unrecognized host: {raw.strip()!r}")
    return video_id
