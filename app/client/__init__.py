"""Public façade for the app.client package.

Client library used by front ends (and the terminal entry point) to call
the identification backend and get a typed SongResult back.
"""

from .backend import IdentifyBackend
from .errors import (
    ConfigurationError,
    ResolutionError,
    ResolverError,
    TransportError,
)
from .resolver import SongResolver, to_song_result

__all__ = [
    "IdentifyBackend",
    "SongResolver",
    "to_song_result",
    "ResolverError",
    "ConfigurationError",
    "ResolutionError",
    "TransportError",
]
