"""Public façade for the app.pipeline package.

This module exposes the song identification pipeline: platform detection,
per-platform metadata providers, the AudD client, lyrics tiers and the
aggregator itself. Other packages should import pipeline behaviour from this
façade instead of the internal pipeline submodules.
"""

from .audd import AudioMatch, AuddClient, pick_album_art
from .identifier import SongIdentifier, assemble_song_result, build_identifier
from .lyrics import (
    DescriptionHeuristicTier,
    LyricsTier,
    PrimaryLyricsTier,
    default_lyrics_tiers,
    resolve_lyrics,
)
from .metadata import (
    METADATA_PROVIDERS,
    AppleMusicProvider,
    HtmlPageProvider,
    MetadataProvider,
    OEmbedProvider,
    fetch_metadata,
    get_metadata_provider,
)
from .platforms import detect_platform, supported_platforms
from .text_heuristics import (
    extract_apple_music_track_id,
    extract_html_metadata,
    looks_like_lyrics,
    split_artist_title,
)

__all__ = [
    "SongIdentifier",
    "build_identifier",
    "assemble_song_result",
    "detect_platform",
    "supported_platforms",
    "MetadataProvider",
    "OEmbedProvider",
    "AppleMusicProvider",
    "HtmlPageProvider",
    "METADATA_PROVIDERS",
    "get_metadata_provider",
    "fetch_metadata",
    "AuddClient",
    "AudioMatch",
    "pick_album_art",
    "LyricsTier",
    "PrimaryLyricsTier",
    "DescriptionHeuristicTier",
    "default_lyrics_tiers",
    "resolve_lyrics",
    "split_artist_title",
    "looks_like_lyrics",
    "extract_apple_music_track_id",
    "extract_html_metadata",
]
