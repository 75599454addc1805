"""Song identification aggregator.

Turns one IdentificationRequest into one SongResult:

  URL   : detect platform -> platform metadata -> lyrics tiers -> assemble
  audio : AudD fingerprint -> inline lyrics, else primary lyrics tier
          -> assemble

Hard failures (unsupported link, metadata lookup failed, audio not
recognized) raise a ServiceError subclass. Missing lyrics never raises: the
result simply carries empty lyrics and a user-facing message.

Each request gets its own SongIdentifier (see build_identifier), so nothing
is shared or cached between requests. All network calls inside a request
are sequential.
"""

from typing import Callable, List, Optional

import requests

from app import config
from app.core import (
    AudioRequest,
    IdentificationRequest,
    InvalidRequestError,
    LyricsResult,
    LyricsSource,
    MetadataFetchError,
    Platform,
    ServiceConfigurationError,
    SongNotRecognizedError,
    SongResult,
    TrackMetadata,
    UnsupportedLinkError,
    UrlRequest,
    log_info,
    log_step,
    log_success,
)

from .audd import AuddClient
from .lyrics import LyricsTier, PrimaryLyricsTier, default_lyrics_tiers, resolve_lyrics
from .metadata import fetch_metadata
from .platforms import detect_platform

MetadataFetcher = Callable[[str, Platform], Optional[TrackMetadata]]


def assemble_song_result(
    *,
    title: str,
    artist: str,
    album_art: str,
    platform: Platform,
    lyrics: LyricsResult,
    spotify_url: Optional[str] = None,
    apple_music_url: Optional[str] = None,
) -> SongResult:
    return SongResult(
        title=title,
        artist=artist,
        album_art=album_art,
        lyrics=lyrics.text or "",
        platform=platform,
        source=lyrics.source if lyrics.found else None,
        message=None if lyrics.found else config.NO_LYRICS_MESSAGE,
        spotify_url=spotify_url,
        apple_music_url=apple_music_url,
    )


class SongIdentifier:
    def __init__(
        self,
        audd: AuddClient,
        metadata_fetcher: Optional[MetadataFetcher] = None,
        lyrics_tiers: Optional[List[LyricsTier]] = None,
    ):
        self.audd = audd
        self.metadata_fetcher = metadata_fetcher or (
            lambda url, platform: fetch_metadata(url, platform, session=audd.session)
        )
        self.lyrics_tiers = (
            lyrics_tiers if lyrics_tiers is not None else default_lyrics_tiers(audd)
        )

    def identify(self, request: IdentificationRequest) -> SongResult:
        if isinstance(request, UrlRequest):
            return self.identify_url(request.url)
        if isinstance(request, AudioRequest):
            return self.identify_audio(request.payload, request.filename)
        raise InvalidRequestError(f"Unsupported request kind: {request!r}")

    def identify_url(self, url: str) -> SongResult:
        platform = detect_platform(url)
        log_step(f"Detected platform: {platform.value}")
        if platform == Platform.UNKNOWN:
            raise UnsupportedLinkError()

        metadata = self.metadata_fetcher(url, platform)
        if metadata is None:
            raise MetadataFetchError()
        log_info(f"Fetched metadata: {metadata.title!r} by {metadata.artist!r}")

        lyrics = resolve_lyrics(metadata, self.lyrics_tiers)

        result = assemble_song_result(
            title=metadata.title,
            artist=metadata.artist,
            album_art=metadata.artwork_url,
            platform=platform,
            lyrics=lyrics,
        )
        log_success(f"Identified {result.title!r} ({platform.value}).")
        return result

    def identify_audio(
        self, payload: bytes, filename: str = "recording.mp3"
    ) -> SongResult:
        log_step(f"Submitting {len(payload)} bytes of audio for recognition...")
        match = self.audd.recognize(payload, filename)
        if match is None:
            raise SongNotRecognizedError()
        log_info(f"Audio matched: {match.title!r} by {match.artist!r}")

        if match.lyrics:
            # AudD already ran its own lyrics lookup for this match
            lyrics = LyricsResult(
                text=match.lyrics, source=LyricsSource.PRIMARY_LYRICS_SERVICE
            )
        else:
            # Primary service only, a raw recording has no description
            lyrics = resolve_lyrics(
                TrackMetadata(
                    title=match.title,
                    artist=match.artist,
                    artwork_url=match.album_art,
                ),
                [PrimaryLyricsTier(self.audd)],
            )

        result = assemble_song_result(
            title=match.title,
            artist=match.artist,
            album_art=match.album_art,
            platform=Platform.AUDIO_RECOGNITION,
            lyrics=lyrics,
            spotify_url=match.spotify_url,
            apple_music_url=match.apple_music_url,
        )
        log_success(f"Identified {result.title!r} from audio.")
        return result


def build_identifier(session: Optional[requests.Session] = None) -> SongIdentifier:
    """
    Build a fresh identifier from the current configuration.

    Raises ServiceConfigurationError when the AudD key is not set.
    """
    api_key = config.AUDD_API_KEY
    if not api_key:
        raise ServiceConfigurationError("AUDD_API_KEY not configured")
    return SongIdentifier(AuddClient(api_key, session=session))
