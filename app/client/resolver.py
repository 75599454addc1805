"""Client-side song resolver.

Sends one identification call to the backend and turns its JSON answer into
a SongResult, or raises a typed error:

  - 503                       -> ConfigurationError
  - 502 / 504                 -> TransportError
  - other non-2xx, `error`    -> ResolutionError (server message if any)
  - 2xx without title/artist  -> ResolutionError

The resolver never retries and never re-validates the URL; classification
is the backend's job.
"""

from typing import Any, Dict, Optional

from app import config
from app.core import LyricsSource, Platform, SongResult, log_step, log_warning

from .backend import BackendResponse, IdentifyBackend
from .errors import (
    GENERIC_FAILURE_MESSAGE,
    ConfigurationError,
    ResolutionError,
    TransportError,
)

CONFIGURATION_STATUSES = {503}
TRANSPORT_STATUSES = {502, 504}


def _error_message(body: Optional[Dict[str, Any]], fallback: str) -> str:
    if not body:
        return fallback
    for key in ("message", "error"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return fallback


def _parse_platform(value: Any) -> Platform:
    try:
        return Platform(value)
    except ValueError:
        return Platform.UNKNOWN


def _parse_source(value: Any) -> Optional[LyricsSource]:
    if value is None:
        return None
    try:
        return LyricsSource(value)
    except ValueError:
        log_warning(f"Unknown lyrics source from backend: {value!r}")
        return None


def to_song_result(body: Dict[str, Any]) -> SongResult:
    """
    Normalize a successful backend payload.

    Raises ResolutionError when title or artist is missing.
    """
    title = body.get("title")
    artist = body.get("artist")
    if not title or not artist:
        raise ResolutionError(_error_message(body, "Song not found"))

    lyrics = body.get("lyrics") or ""
    return SongResult(
        title=title,
        artist=artist,
        album_art=body.get("albumCover") or config.FALLBACK_ARTWORK_URL,
        lyrics=lyrics,
        platform=_parse_platform(body.get("platform")),
        source=_parse_source(body.get("source")),
        message=None if lyrics else (body.get("message") or config.NO_LYRICS_MESSAGE),
        spotify_url=body.get("spotifyUrl"),
        apple_music_url=body.get("appleMusicUrl"),
    )


class SongResolver:
    def __init__(self, backend: IdentifyBackend):
        self.backend = backend

    def identify_by_url(self, url: str) -> SongResult:
        log_step(f"Identifying song from link {url}")
        return self._resolve(self.backend.post_json({"url": url}))

    def identify_by_audio(
        self, payload: bytes, filename: str = "recording.mp3"
    ) -> SongResult:
        log_step(f"Identifying song from {len(payload)} bytes of audio")
        return self._resolve(self.backend.post_audio(payload, filename))

    def _resolve(self, response: BackendResponse) -> SongResult:
        status_code, body = response

        if status_code in CONFIGURATION_STATUSES:
            raise ConfigurationError(
                _error_message(body, "Identification service is not configured"),
                status_code=status_code,
            )
        if status_code in TRANSPORT_STATUSES:
            raise TransportError(
                _error_message(body, "Identification service is unavailable"),
                status_code=status_code,
            )
        if not 200 <= status_code < 300:
            raise ResolutionError(
                _error_message(body, GENERIC_FAILURE_MESSAGE),
                status_code=status_code,
            )
        if body is None:
            raise ResolutionError(
                "Unreadable response from identification service",
                status_code=status_code,
            )
        if body.get("error"):
            raise ResolutionError(
                _error_message(body, GENERIC_FAILURE_MESSAGE),
                status_code=status_code,
            )

        return to_song_result(body)
