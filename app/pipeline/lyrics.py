"""Lyrics resolution as an ordered chain of tiers.

Each tier takes the track metadata and returns a LyricsResult or None.
Tiers run one after the other (never concurrently) and the first one that
answers wins. No answer at all is a normal outcome: resolve_lyrics() then
returns an empty LyricsResult.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from app.core import LyricsResult, LyricsSource, TrackMetadata, log_info

from .audd import AuddClient
from .text_heuristics import looks_like_lyrics


class LyricsTier(ABC):
    name: str

    @abstractmethod
    def lookup(self, metadata: TrackMetadata) -> Optional[LyricsResult]:
        raise NotImplementedError


class PrimaryLyricsTier(LyricsTier):
    """Text search on the lyrics service by title + artist."""

    name = "primary lyrics service"

    def __init__(self, audd: AuddClient):
        self.audd = audd

    def lookup(self, metadata: TrackMetadata) -> Optional[LyricsResult]:
        text = self.audd.find_lyrics(metadata.title, metadata.artist)
        if not text:
            return None
        return LyricsResult(text=text, source=LyricsSource.PRIMARY_LYRICS_SERVICE)


class DescriptionHeuristicTier(LyricsTier):
    """Platform description/caption, accepted when it looks like lyrics."""

    name = "platform description"

    def lookup(self, metadata: TrackMetadata) -> Optional[LyricsResult]:
        if not looks_like_lyrics(metadata.raw_description):
            return None
        return LyricsResult(
            text=metadata.raw_description,
            source=LyricsSource.PLATFORM_DESCRIPTION_HEURISTIC,
        )


def default_lyrics_tiers(audd: AuddClient) -> List[LyricsTier]:
    return [PrimaryLyricsTier(audd), DescriptionHeuristicTier()]


def resolve_lyrics(
    metadata: TrackMetadata,
    tiers: Sequence[LyricsTier],
) -> LyricsResult:
    for tier in tiers:
        result = tier.lookup(metadata)
        if result is not None and result.found:
            log_info(f"Lyrics found via {tier.name}.")
            return result
        log_info(f"No lyrics from {tier.name}.")
    return LyricsResult()
