"""Public façade for the app.core package.

This module exposes logging helpers, the error taxonomy, and the domain
models shared by the pipeline, the API and the client. Callers should import
these cross-cutting concerns from this façade instead of the internal
submodules.
"""

from .errors import (
    InvalidRequestError,
    MetadataFetchError,
    PaymentVerificationError,
    ServiceConfigurationError,
    ServiceError,
    SongNotRecognizedError,
    UnsupportedLinkError,
    UpstreamServiceError,
)
from .logging_config import configure_logging
from .logging_utils import (
    log_error,
    log_info,
    log_step,
    log_success,
    log_warning,
)
from .models import (
    AudioRequest,
    IdentificationRequest,
    LyricsResult,
    LyricsSource,
    Platform,
    SongResult,
    TrackMetadata,
    UrlRequest,
)

__all__ = [
    "configure_logging",
    "log_info",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "ServiceError",
    "InvalidRequestError",
    "UnsupportedLinkError",
    "MetadataFetchError",
    "SongNotRecognizedError",
    "UpstreamServiceError",
    "ServiceConfigurationError",
    "PaymentVerificationError",
    "Platform",
    "LyricsSource",
    "UrlRequest",
    "AudioRequest",
    "IdentificationRequest",
    "TrackMetadata",
    "LyricsResult",
    "SongResult",
]
