from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class Platform(str, Enum):
    """
    Source of an identification request.

    The value doubles as the display name sent back to clients.
    """

    SPOTIFY = "Spotify"
    APPLE_MUSIC = "Apple Music"
    YOUTUBE = "YouTube"
    SOUNDCLOUD = "SoundCloud"
    DEEZER = "Deezer"
    AUDIOMACK = "Audiomack"
    BOOMPLAY = "Boomplay"
    AUDIO_RECOGNITION = "Audio Recognition"
    UNKNOWN = "Unknown"


class LyricsSource(str, Enum):
    PRIMARY_LYRICS_SERVICE = "audd"
    PLATFORM_DESCRIPTION_HEURISTIC = "platform_metadata"


@dataclass(frozen=True)
class UrlRequest:
    url: str
    kind: str = field(default="url", init=False)


@dataclass(frozen=True)
class AudioRequest:
    payload: bytes = field(repr=False)
    filename: str = "recording.mp3"
    kind: str = field(default="audio", init=False)


IdentificationRequest = Union[UrlRequest, AudioRequest]


@dataclass(frozen=True)
class TrackMetadata:
    """
    Title/artist/artwork resolved from one platform lookup.

    - raw_description : platform description/caption, only kept so that the
                        lyrics fallback can test it. Never sent to clients.
    """

    title: str
    artist: str
    artwork_url: str
    raw_description: Optional[str] = None


@dataclass(frozen=True)
class LyricsResult:
    text: Optional[str] = None
    source: Optional[LyricsSource] = None

    @property
    def found(self) -> bool:
        return bool(self.text)


@dataclass(frozen=True)
class SongResult:
    """
    Unified identification result handed to the UI.

    `no_lyrics` is derived from `lyrics` so the two can never disagree, and
    `message` is dropped whenever lyrics are present.
    """

    title: str
    artist: str
    album_art: str
    lyrics: str
    platform: Platform
    source: Optional[LyricsSource] = None
    message: Optional[str] = None
    spotify_url: Optional[str] = None
    apple_music_url: Optional[str] = None

    def __post_init__(self) -> None:
        # frozen, so normalize through object.__setattr__
        if self.lyrics is None:
            object.__setattr__(self, "lyrics", "")
        if self.lyrics:
            object.__setattr__(self, "message", None)
        else:
            object.__setattr__(self, "source", None)

    @property
    def no_lyrics(self) -> bool:
        return self.lyrics == ""
