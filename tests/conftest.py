from typing import Any, Dict, List, Optional, Tuple, Union

import pytest
import requests


class FakeResponse:
    """
    Minimal stand-in for requests.Response.

    `json_data=None` makes .json() fail like a non-JSON body would.
    """

    def __init__(
        self,
        status_code: int = 200,
        json_data: Any = None,
        text: str = "",
    ):
        self.status_code = status_code
        self._json_data = json_data
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._json_data is None:
            raise ValueError("No JSON body")
        return self._json_data


Outcome = Union[FakeResponse, Exception]


class FakeSession:
    """
    requests.Session double with canned answers keyed by (method, url).

    Every call is recorded in `calls`. A call to an unregistered URL fails
    the test loudly instead of touching the network.
    """

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Outcome] = {}
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def add(self, method: str, url: str, outcome: Outcome) -> None:
        self.routes[(method.upper(), url)] = outcome

    def calls_to(self, url: str) -> List[Dict[str, Any]]:
        return [c for c in self.calls if c["url"] == url]

    def _request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome: Optional[Outcome] = self.routes.get((method, url))
        if outcome is None:
            raise AssertionError(f"Unexpected {method} {url}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._request("POST", url, **kwargs)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")


AUDD_FIND_LYRICS_URL = "https://api.audd.io/findLyrics/"
AUDD_RECOGNIZE_URL = "https://api.audd.io/"

VERSE_CHORUS_DESCRIPTION = (
    "[Verse 1]\nline one\nline two\nline three\n[Chorus]\nline four"
)


def audd_lyrics_response(lyrics: Optional[str]) -> FakeResponse:
    if lyrics is None:
        return FakeResponse(200, {"status": "success", "result": []})
    return FakeResponse(
        200,
        {"status": "success", "result": [{"full_title": "x", "lyrics": lyrics}]},
    )
