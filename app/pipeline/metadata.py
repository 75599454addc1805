"""Platform metadata lookup.

One strategy per kind of platform, all behind the same `fetch(url)` call:

  - OEmbedProvider      : public oEmbed endpoints (Spotify, YouTube,
                          SoundCloud, Deezer)
  - AppleMusicProvider  : track id from the link, then iTunes catalog lookup
  - HtmlPageProvider    : raw page HTML, <title> / Open Graph tags
                          (Audiomack, Boomplay)

Any network, status or parse failure makes the lookup fail. There is no
fallback to another platform's strategy.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

import requests

from app import config
from app.core import Platform, TrackMetadata, log_warning

from .schemas import ITunesLookupPayload, OEmbedPayload
from .text_heuristics import (
    extract_apple_music_track_id,
    extract_html_metadata,
    split_artist_title,
)


class MetadataLookupError(Exception):
    """Raised by providers; fetch_metadata() turns it into None."""


class MetadataProvider(ABC):
    """
    Resolve title/artist/artwork for one link of a given platform.

    Concrete providers must implement `fetch()` and raise
    MetadataLookupError (or let a requests exception through) on failure.
    """

    def __init__(
        self,
        platform: Platform,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.platform = platform
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT_SECONDS

    @abstractmethod
    def fetch(self, url: str) -> TrackMetadata:
        raise NotImplementedError

    def _get(
        self, url: str, params: Optional[Dict[str, str]] = None
    ) -> requests.Response:
        r = self.session.get(
            url,
            params=params,
            headers={"User-Agent": config.HTTP_USER_AGENT},
            timeout=self.timeout,
        )
        if not r.ok:
            raise MetadataLookupError(
                f"{self.platform.value} lookup answered HTTP {r.status_code}"
            )
        return r


class OEmbedProvider(MetadataProvider):
    # Embed titles on these platforms usually read "Artist - Title"
    SPLIT_TITLE_PLATFORMS = {Platform.YOUTUBE, Platform.SOUNDCLOUD}
    FORMAT_JSON_PLATFORMS = {Platform.YOUTUBE, Platform.SOUNDCLOUD}

    def fetch(self, url: str) -> TrackMetadata:
        endpoint = config.OEMBED_ENDPOINTS[self.platform.value]
        params = {"url": url}
        if self.platform in self.FORMAT_JSON_PLATFORMS:
            params["format"] = "json"

        payload = OEmbedPayload.model_validate(self._get(endpoint, params).json())

        title = payload.title or config.UNKNOWN_TITLE
        artist = payload.author_name or payload.author or config.UNKNOWN_ARTIST

        if payload.title and self.platform in self.SPLIT_TITLE_PLATFORMS:
            split_artist, split_title = split_artist_title(payload.title)
            if split_artist is not None:
                artist = split_artist
                title = split_title

        return TrackMetadata(
            title=title,
            artist=artist,
            artwork_url=payload.thumbnail_url or payload.thumbnail or "",
            raw_description=payload.description or None,
        )


class AppleMusicProvider(MetadataProvider):
    def fetch(self, url: str) -> TrackMetadata:
        track_id = extract_apple_music_track_id(url)
        if not track_id:
            raise MetadataLookupError("No Apple Music track id in link")

        payload = ITunesLookupPayload.model_validate(
            self._get(config.ITUNES_LOOKUP_URL, {"id": track_id}).json()
        )
        if not payload.results:
            raise MetadataLookupError(f"No catalog entry for id {track_id}")

        track = payload.results[0]
        artwork = ""
        if track.artworkUrl100:
            artwork = track.artworkUrl100.replace("100x100", "400x400")
        elif track.artworkUrl60:
            artwork = track.artworkUrl60.replace("60x60", "400x400")

        return TrackMetadata(
            title=track.trackName or track.collectionName or config.UNKNOWN_TITLE,
            artist=track.artistName or config.UNKNOWN_ARTIST,
            artwork_url=artwork,
        )


class HtmlPageProvider(MetadataProvider):
    def fetch(self, url: str) -> TrackMetadata:
        page = self._get(url).text
        page_title, image = extract_html_metadata(page)

        title = page_title or config.UNKNOWN_TITLE
        artist = config.UNKNOWN_ARTIST
        if page_title:
            split_artist, split_title = split_artist_title(page_title)
            if split_artist is not None:
                artist = split_artist
                title = split_title

        return TrackMetadata(title=title, artist=artist, artwork_url=image or "")


METADATA_PROVIDERS: Dict[Platform, Type[MetadataProvider]] = {
    Platform.SPOTIFY: OEmbedProvider,
    Platform.YOUTUBE: OEmbedProvider,
    Platform.SOUNDCLOUD: OEmbedProvider,
    Platform.DEEZER: OEmbedProvider,
    Platform.APPLE_MUSIC: AppleMusicProvider,
    Platform.AUDIOMACK: HtmlPageProvider,
    Platform.BOOMPLAY: HtmlPageProvider,
}


def get_metadata_provider(
    platform: Platform,
    session: Optional[requests.Session] = None,
) -> MetadataProvider:
    """
    Build the provider registered for the given platform.

    Raises KeyError for platforms without a URL lookup (Unknown, Audio
    Recognition).
    """
    return METADATA_PROVIDERS[platform](platform, session=session)


def fetch_metadata(
    url: str,
    platform: Platform,
    session: Optional[requests.Session] = None,
) -> Optional[TrackMetadata]:
    """
    Look up metadata for a link, or return None if the lookup failed.
    """
    if platform not in METADATA_PROVIDERS:
        return None

    provider = get_metadata_provider(platform, session=session)
    try:
        return provider.fetch(url)
    except (requests.RequestException, ValueError, MetadataLookupError) as exc:
        log_warning(f"{platform.value} metadata lookup failed: {exc}")
        return None
