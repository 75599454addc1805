"""Server-side error taxonomy.

Every failure that crosses the HTTP boundary is one of these. The API layer
renders them as `{"error": ..., "message": ...}` with `status_code`; anything
else is logged and turned into a generic 500 so that no raw exception text
reaches a client.
"""

from typing import Any, Dict, Optional

SUPPORTED_PLATFORMS_HINT = (
    "Unsupported link. Try a Spotify, YouTube, Apple Music, SoundCloud, "
    "Deezer, Audiomack, or Boomplay link."
)


class ServiceError(Exception):
    status_code: int = 500
    error: str = "Failed to identify song"

    def __init__(self, message: Optional[str] = None, *, error: Optional[str] = None):
        self.message = message
        if error is not None:
            self.error = error
        super().__init__(message or self.error)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.error}
        if self.message:
            payload["message"] = self.message
        return payload


class InvalidRequestError(ServiceError):
    status_code = 400
    error = "Invalid request"


class UnsupportedLinkError(ServiceError):
    status_code = 400
    error = SUPPORTED_PLATFORMS_HINT


class MetadataFetchError(ServiceError):
    status_code = 400
    error = "Failed to fetch song metadata from this URL"


class SongNotRecognizedError(ServiceError):
    status_code = 404
    error = "Song not recognized"

    def __init__(
        self, message: Optional[str] = "Could not identify the song from audio"
    ):
        super().__init__(message)


class UpstreamServiceError(ServiceError):
    """An external service could not be reached or sent an unreadable answer."""

    status_code = 502
    error = "Upstream service unavailable"


class ServiceConfigurationError(ServiceError):
    """Credentials or endpoints missing from this deployment."""

    status_code = 503
    error = "Service not configured"


class PaymentVerificationError(ServiceError):
    status_code = 400
    error = "Payment verification failed"
