"""Identify a song from the terminal through the identification backend.

Usage:
    python main.py <url>
    python main.py --audio <file>

Exit codes: 0 ok, 1 song not resolved, 2 configuration problem,
3 backend unreachable, 64 bad usage.
"""

import sys
from pathlib import Path
from typing import List, Optional

from app.client import (
    ConfigurationError,
    IdentifyBackend,
    ResolutionError,
    SongResolver,
    TransportError,
)
from app.core import SongResult, configure_logging
from app.core.cli_utils import (
    print_block,
    print_error,
    print_header,
    print_info,
    print_step,
    print_success,
    print_warning,
)

USAGE = "usage: python main.py <url> | python main.py --audio <file>"


def print_song_result(result: SongResult) -> None:
    print_header(f"{result.title} by {result.artist}")
    print_info(f"Platform : {result.platform.value}")
    print_info(f"Artwork  : {result.album_art}")
    if result.spotify_url:
        print_info(f"Spotify  : {result.spotify_url}")
    if result.apple_music_url:
        print_info(f"Apple    : {result.apple_music_url}")

    if result.no_lyrics:
        print_warning(result.message or "No lyrics found.")
        return

    source = result.source.value if result.source else "unknown"
    print_success(f"Lyrics found (source: {source})")
    print_block(result.lyrics)


def run(argv: List[str], resolver: Optional[SongResolver] = None) -> int:
    if not argv or (argv[0] == "--audio" and len(argv) != 2):
        print_error(USAGE)
        return 64

    try:
        resolver = resolver or SongResolver(IdentifyBackend.from_config())

        if argv[0] == "--audio":
            path = Path(argv[1])
            print_step(f"Reading recording {path}...")
            result = resolver.identify_by_audio(path.read_bytes(), filename=path.name)
        else:
            result = resolver.identify_by_url(argv[0])
    except ConfigurationError as e:
        print_error(f"Configuration problem: {e.message}")
        return 2
    except TransportError as e:
        print_error(f"Service unreachable, try again: {e.message}")
        return 3
    except ResolutionError as e:
        print_error(e.message)
        return 1
    except OSError as e:
        print_error(f"Cannot read recording: {e}")
        return 64

    print_song_result(result)
    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(run(sys.argv[1:]))
