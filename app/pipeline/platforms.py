from typing import List, Tuple

from app.core import Platform

# Checked in order, first match wins
PLATFORM_DOMAINS: List[Tuple[Platform, Tuple[str, ...]]] = [
    (Platform.SPOTIFY, ("spotify.com",)),
    (Platform.APPLE_MUSIC, ("music.apple.com",)),
    (Platform.YOUTUBE, ("youtube.com", "youtu.be")),
    (Platform.SOUNDCLOUD, ("soundcloud.com",)),
    (Platform.DEEZER, ("deezer.com",)),
    (Platform.AUDIOMACK, ("audiomack.com",)),
    (Platform.BOOMPLAY, ("boomplay.com",)),
]


def detect_platform(url: str) -> Platform:
    """
    Classify a link by plain substring matching on known domains.

    Never touches the network; a link that matches nothing is
    Platform.UNKNOWN.
    """
    for platform, domains in PLATFORM_DOMAINS:
        if any(domain in url for domain in domains):
            return platform
    return Platform.UNKNOWN


def supported_platforms() -> List[Platform]:
    return [platform for platform, _domains in PLATFORM_DOMAINS]
