from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.core import SongResult


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class IdentifySongResponse(CamelModel):
    title: str
    artist: str
    album_cover: str
    platform: str
    lyrics: Optional[str] = None
    source: Optional[str] = None
    message: Optional[str] = None
    spotify_url: Optional[str] = None
    apple_music_url: Optional[str] = None

    @classmethod
    def from_result(cls, result: SongResult) -> "IdentifySongResponse":
        return cls(
            title=result.title,
            artist=result.artist,
            album_cover=result.album_art,
            platform=result.platform.value,
            lyrics=result.lyrics or None,
            source=result.source.value if result.source else None,
            message=result.message if result.no_lyrics else None,
            spotify_url=result.spotify_url,
            apple_music_url=result.apple_music_url,
        )


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
