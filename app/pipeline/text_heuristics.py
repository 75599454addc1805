"""String heuristics used by the identification pipeline.

All functions here are pure: no I/O, no logging. They cover the
places where platforms hand us loosely structured text:

  - embed titles that encode "Artist - Title"
  - Apple Music links that carry the track id in two different shapes
  - description/caption fields that sometimes hold the lyrics themselves
  - raw HTML pages where only <title> / Open Graph tags are available
"""

import html
import re
from typing import Optional, Tuple

ARTIST_TITLE_SEPARATOR = " - "

MIN_LYRICS_CHARS = 50
MIN_LYRICS_LINES = 4
MAX_AVG_LINE_LENGTH = 100

_SECTION_MARKERS = re.compile(r"verse|chorus|bridge|intro|outro", re.IGNORECASE)

_APPLE_TRACK_PARAM = re.compile(r"[/?&]i=(\d+)")
_APPLE_PATH_ID = re.compile(r"/(\d+)(?:\?|$)")

_HTML_TITLE = re.compile(
    r"<title[^>]*>(?P<value>.*?)</title>", re.IGNORECASE | re.DOTALL
)

# Closing quote must match the opening one, titles often contain apostrophes
_META_CONTENT = r"content=(?P<quote>[\"'])(?P<value>.*?)(?P=quote)"


def _og_meta(prop: str) -> "re.Pattern[str]":
    return re.compile(
        r"<meta\s+property=[\"']" + prop + r"[\"']\s+" + _META_CONTENT,
        re.IGNORECASE,
    )


_OG_TITLE = _og_meta("og:title")
_OG_IMAGE = _og_meta("og:image")


def split_artist_title(text: str) -> Tuple[Optional[str], str]:
    """
    Split an "Artist - Title" string on the first separator.

    Returns (artist, title). Later separators stay in the title
    ("A - B - C" -> ("A", "B - C")). Without a separator the artist is None
    and the whole (stripped) string is the title.
    """
    artist, sep, title = text.partition(ARTIST_TITLE_SEPARATOR)
    if not sep:
        return None, text.strip()
    return artist.strip(), title.strip()


def looks_like_lyrics(text: Optional[str]) -> bool:
    """
    Decide whether a platform description is probably song lyrics.

    Rejected outright: under MIN_LYRICS_CHARS characters or fewer than
    MIN_LYRICS_LINES non-blank lines. Otherwise accepted on either signal:
      - a section marker (verse/chorus/bridge/intro/outro, any case)
      - an exactly repeated line AND an average line length under
        MAX_AVG_LINE_LENGTH (total characters / non-blank lines)
    """
    if not text or len(text) < MIN_LYRICS_CHARS:
        return False

    lines = [line for line in text.split("\n") if line.strip()]
    if len(lines) < MIN_LYRICS_LINES:
        return False

    if _SECTION_MARKERS.search(text):
        return True

    has_repeated_line = len(lines) != len(set(lines))
    avg_line_length = len(text) / len(lines)
    return has_repeated_line and avg_line_length < MAX_AVG_LINE_LENGTH


def extract_apple_music_track_id(url: str) -> Optional[str]:
    """
    Pull the song id out of an Apple Music link.

      .../album/name/1440857781?i=1440857791  -> "1440857791"  (track param wins)
      .../song/name/1440857791?l=en           -> "1440857791"
    """
    match = _APPLE_TRACK_PARAM.search(url)
    if match:
        return match.group(1)

    match = _APPLE_PATH_ID.search(url)
    if match:
        return match.group(1)

    return None


def extract_html_metadata(page: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Return (title, image_url) from a raw HTML page.

    og:title is preferred over <title>; both are entity-unescaped.
    """
    title: Optional[str] = None
    for pattern in (_OG_TITLE, _HTML_TITLE):
        match = pattern.search(page)
        if match and match.group("value").strip():
            title = html.unescape(match.group("value").strip())
            break

    image_match = _OG_IMAGE.search(page)
    image = None
    if image_match:
        image = html.unescape(image_match.group("value").strip())

    return title, image or None
