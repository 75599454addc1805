from typing import Any, Dict, Optional, Tuple

import requests

from app import config

from .errors import ConfigurationError, TransportError

IDENTIFY_PATH = "/identify-song"

BackendResponse = Tuple[int, Optional[Dict[str, Any]]]


class IdentifyBackend:
    """
    Connection to the identification backend.

    Built explicitly and handed to SongResolver, so tests (or a UI with its
    own session) can pass a fake. Holds no per-request state; one instance
    can serve concurrent calls as long as its session can.
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        if not base_url:
            raise ConfigurationError("Identification backend URL is not configured")
        self.endpoint = base_url.rstrip("/") + IDENTIFY_PATH
        self.api_key = api_key
        self.session = session or requests.Session()
        # Audio round trips include the fingerprinting call, allow for both
        self.timeout = (
            timeout if timeout is not None else config.HTTP_TIMEOUT_SECONDS * 3
        )

    @classmethod
    def from_config(
        cls, session: Optional[requests.Session] = None
    ) -> "IdentifyBackend":
        """
        Build from IDENTIFY_API_URL / IDENTIFY_API_KEY.

        Raises ConfigurationError when the URL is not set.
        """
        if not config.IDENTIFY_API_URL:
            raise ConfigurationError("IDENTIFY_API_URL is not configured")
        return cls(config.IDENTIFY_API_URL, config.IDENTIFY_API_KEY, session=session)

    def _headers(self) -> Dict[str, str]:
        if not self.api_key:
            return {}
        return {"Authorization": f"Bearer {self.api_key}"}

    def _send(self, **kwargs: Any) -> BackendResponse:
        try:
            r = self.session.post(
                self.endpoint,
                headers=self._headers(),
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            raise TransportError(
                f"Could not reach the identification service: {exc}"
            ) from exc

        try:
            body = r.json()
        except ValueError:
            body = None
        return r.status_code, body if isinstance(body, dict) else None

    def post_json(self, payload: Dict[str, Any]) -> BackendResponse:
        return self._send(json=payload)

    def post_audio(self, payload: bytes, filename: str) -> BackendResponse:
        return self._send(files={"audio": (filename, payload)})
