"""AudD integration: text lyrics search and audio fingerprinting.

Two calls against the same account:

  - find_lyrics(title, artist)  : GET  /findLyrics/  (never raises, a miss or
                                  a failure both mean "no lyrics")
  - recognize(payload)          : POST /            (None on "no match",
                                  UpstreamServiceError when AudD itself is
                                  unreachable or unreadable)
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

import requests

from app import config
from app.core import UpstreamServiceError, log_info, log_warning

from .schemas import AuddFindLyricsPayload, AuddRecognition, AuddRecognizePayload


@dataclass(frozen=True)
class AudioMatch:
    title: str
    artist: str
    album_art: str
    lyrics: Optional[str] = None
    spotify_url: Optional[str] = None
    apple_music_url: Optional[str] = None


def _spotify_artwork(result: AuddRecognition) -> Optional[str]:
    album = result.spotify.album if result.spotify else None
    if album and album.images:
        return album.images[0].url
    return None


def _apple_music_artwork(result: AuddRecognition) -> Optional[str]:
    artwork = result.apple_music.artwork if result.apple_music else None
    if artwork and artwork.url:
        return artwork.url.replace("{w}", "400").replace("{h}", "400")
    return None


def _deezer_artwork(result: AuddRecognition) -> Optional[str]:
    album = result.deezer.album if result.deezer else None
    return album.cover_xl if album else None


# Tried in order, first non-empty URL wins
ARTWORK_EXTRACTORS: List[Callable[[AuddRecognition], Optional[str]]] = [
    _spotify_artwork,
    _apple_music_artwork,
    _deezer_artwork,
]


def pick_album_art(result: AuddRecognition) -> str:
    for extractor in ARTWORK_EXTRACTORS:
        url = extractor(result)
        if url:
            return url
    return config.FALLBACK_ARTWORK_URL


def _to_audio_match(result: AuddRecognition) -> AudioMatch:
    spotify_url = None
    if result.spotify and result.spotify.external_urls:
        spotify_url = result.spotify.external_urls.spotify

    return AudioMatch(
        title=result.title or config.UNKNOWN_TITLE,
        artist=result.artist or config.UNKNOWN_ARTIST,
        album_art=pick_album_art(result),
        lyrics=(result.lyrics.lyrics if result.lyrics else None) or None,
        spotify_url=spotify_url,
        apple_music_url=result.apple_music.url if result.apple_music else None,
    )


class AuddClient:
    """
    Thin AudD API client. One instance per identification request.
    """

    def __init__(
        self,
        api_key: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT_SECONDS

    def find_lyrics(self, title: str, artist: str) -> Optional[str]:
        """
        Search lyrics by "<title> <artist>" and return the first hit's text.

        Returns None when nothing matched or when the call failed.
        """
        params = {"q": f"{title} {artist}", "api_token": self.api_key}
        try:
            r = self.session.get(
                f"{config.AUDD_API_BASE}/findLyrics/",
                params=params,
                timeout=self.timeout,
            )
            payload = AuddFindLyricsPayload.model_validate(r.json())
        except (requests.RequestException, ValueError) as exc:
            log_warning(f"AudD findLyrics failed: {exc}")
            return None

        if payload.status != "success" or not payload.result:
            return None
        return payload.result[0].lyrics or None

    def recognize(
        self, payload: bytes, filename: str = "recording.mp3"
    ) -> Optional[AudioMatch]:
        """
        Submit an audio clip for fingerprinting.

        Returns None when AudD found no match.
        """
        data = {"api_token": self.api_key, "return": config.AUDD_RETURN_FIELDS}
        files = {"file": (filename, payload)}
        try:
            r = self.session.post(
                f"{config.AUDD_API_BASE}/",
                data=data,
                files=files,
                timeout=self.timeout,
            )
            body = AuddRecognizePayload.model_validate(r.json())
        except (requests.RequestException, ValueError) as exc:
            raise UpstreamServiceError(
                "Audio recognition service is unavailable, try again later"
            ) from exc

        if body.status != "success" or body.result is None:
            if body.error is not None:
                log_warning(
                    f"AudD recognition error {body.error.error_code}: "
                    f"{body.error.error_message}"
                )
            else:
                log_info("AudD found no match for the recording.")
            return None

        return _to_audio_match(body.result)
