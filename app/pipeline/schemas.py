"""Pydantic models for the JSON payloads of external services.

Every field is optional: these services omit fields freely. Payloads are
validated here and converted to app.core models by the module that fetched
them; nothing outside app.pipeline sees these shapes.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ExternalPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")


# --- oEmbed (Spotify, YouTube, SoundCloud, Deezer) ---------------------------


class OEmbedPayload(ExternalPayload):
    title: Optional[str] = None
    author_name: Optional[str] = None
    author: Optional[str] = None
    thumbnail_url: Optional[str] = None
    thumbnail: Optional[str] = None
    description: Optional[str] = None


# --- iTunes catalog lookup (Apple Music) -------------------------------------


class ITunesTrack(ExternalPayload):
    trackName: Optional[str] = None
    collectionName: Optional[str] = None
    artistName: Optional[str] = None
    artworkUrl100: Optional[str] = None
    artworkUrl60: Optional[str] = None


class ITunesLookupPayload(ExternalPayload):
    resultCount: Optional[int] = None
    results: List[ITunesTrack] = []


# --- AudD ---------------------------------------------------------------------


class AuddLyricsMatch(ExternalPayload):
    title: Optional[str] = None
    full_title: Optional[str] = None
    lyrics: Optional[str] = None


class AuddFindLyricsPayload(ExternalPayload):
    status: Optional[str] = None
    result: List[AuddLyricsMatch] = []


class AuddImage(ExternalPayload):
    url: Optional[str] = None


class AuddSpotifyAlbum(ExternalPayload):
    images: List[AuddImage] = []


class AuddSpotifyLinks(ExternalPayload):
    spotify: Optional[str] = None


class AuddSpotify(ExternalPayload):
    album: Optional[AuddSpotifyAlbum] = None
    external_urls: Optional[AuddSpotifyLinks] = None


class AuddAppleArtwork(ExternalPayload):
    url: Optional[str] = None


class AuddAppleMusic(ExternalPayload):
    artwork: Optional[AuddAppleArtwork] = None
    url: Optional[str] = None


class AuddDeezerAlbum(ExternalPayload):
    cover_xl: Optional[str] = None


class AuddDeezer(ExternalPayload):
    album: Optional[AuddDeezerAlbum] = None


class AuddInlineLyrics(ExternalPayload):
    lyrics: Optional[str] = None


class AuddRecognition(ExternalPayload):
    title: Optional[str] = None
    artist: Optional[str] = None
    lyrics: Optional[AuddInlineLyrics] = None
    spotify: Optional[AuddSpotify] = None
    apple_music: Optional[AuddAppleMusic] = None
    deezer: Optional[AuddDeezer] = None


class AuddError(ExternalPayload):
    error_code: Optional[int] = None
    error_message: Optional[str] = None


class AuddRecognizePayload(ExternalPayload):
    status: Optional[str] = None
    result: Optional[AuddRecognition] = None
    error: Optional[AuddError] = None
