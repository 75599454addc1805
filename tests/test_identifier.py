import dataclasses
from typing import List, Optional, Tuple

import pytest

from app import config
from app.core import (
    AudioRequest,
    LyricsResult,
    LyricsSource,
    MetadataFetchError,
    Platform,
    ServiceConfigurationError,
    SongNotRecognizedError,
    SongResult,
    TrackMetadata,
    UnsupportedLinkError,
    UrlRequest,
)
from app.pipeline import (
    AuddClient,
    DescriptionHeuristicTier,
    LyricsTier,
    SongIdentifier,
    assemble_song_result,
    build_identifier,
    resolve_lyrics,
)

from conftest import (
    AUDD_FIND_LYRICS_URL,
    AUDD_RECOGNIZE_URL,
    VERSE_CHORUS_DESCRIPTION,
    FakeResponse,
    FakeSession,
    audd_lyrics_response,
)

SPOTIFY_URL = "https://open.spotify.com/track/4uLU6hMCjMI75M1A2tKUQC"


class RecordingFetcher:
    """Metadata fetcher double that remembers what it was asked for."""

    def __init__(self, metadata: Optional[TrackMetadata]):
        self.metadata = metadata
        self.calls: List[Tuple[str, Platform]] = []

    def __call__(self, url: str, platform: Platform) -> Optional[TrackMetadata]:
        self.calls.append((url, platform))
        return self.metadata


def _metadata(description: Optional[str] = None) -> TrackMetadata:
    return TrackMetadata(
        title="Hello",
        artist="Adele",
        artwork_url="https://i.scdn.co/image/hello",
        raw_description=description,
    )


def _identifier(
    session: FakeSession, fetcher: RecordingFetcher
) -> SongIdentifier:
    return SongIdentifier(AuddClient("key", session=session), metadata_fetcher=fetcher)


def test_url_with_primary_lyrics(fake_session: FakeSession) -> None:
    fake_session.add(
        "GET", AUDD_FIND_LYRICS_URL, audd_lyrics_response("Hello, it's me")
    )
    fetcher = RecordingFetcher(_metadata(VERSE_CHORUS_DESCRIPTION))

    result = _identifier(fake_session, fetcher).identify(UrlRequest(url=SPOTIFY_URL))

    assert fetcher.calls == [(SPOTIFY_URL, Platform.SPOTIFY)]
    assert result.title == "Hello"
    assert result.artist == "Adele"
    assert result.album_art == "https://i.scdn.co/image/hello"
    assert result.platform == Platform.SPOTIFY
    assert result.lyrics == "Hello, it's me"
    assert result.source == LyricsSource.PRIMARY_LYRICS_SERVICE
    assert result.message is None
    assert result.no_lyrics is False


def test_url_falls_back_to_lyrics_like_description(fake_session: FakeSession) -> None:
    fake_session.add("GET", AUDD_FIND_LYRICS_URL, audd_lyrics_response(None))
    fetcher = RecordingFetcher(_metadata(VERSE_CHORUS_DESCRIPTION))

    result = _identifier(fake_session, fetcher).identify_url(SPOTIFY_URL)

    assert result.no_lyrics is False
    assert result.lyrics == VERSE_CHORUS_DESCRIPTION
    assert result.source == LyricsSource.PLATFORM_DESCRIPTION_HEURISTIC
    assert result.message is None


def test_url_without_any_lyrics(fake_session: FakeSession) -> None:
    fake_session.add("GET", AUDD_FIND_LYRICS_URL, audd_lyrics_response(None))
    fetcher = RecordingFetcher(_metadata("Out now everywhere!"))

    result = _identifier(fake_session, fetcher).identify_url(SPOTIFY_URL)

    assert result.no_lyrics is True
    assert result.lyrics == ""
    assert result.source is None
    assert result.message == config.NO_LYRICS_MESSAGE


def test_unsupported_link_makes_no_calls(fake_session: FakeSession) -> None:
    fetcher = RecordingFetcher(_metadata())

    with pytest.raises(UnsupportedLinkError) as excinfo:
        _identifier(fake_session, fetcher).identify_url("https://example.com/x")

    assert excinfo.value.status_code == 400
    assert "Unsupported link" in excinfo.value.error
    assert fetcher.calls == []
    assert fake_session.calls == []


def test_metadata_failure_is_terminal(fake_session: FakeSession) -> None:
    fetcher = RecordingFetcher(None)

    with pytest.raises(MetadataFetchError):
        _identifier(fake_session, fetcher).identify_url(SPOTIFY_URL)

    # no lyrics lookup after a failed metadata fetch
    assert fake_session.calls == []


def test_default_fetcher_shares_the_audd_session(fake_session: FakeSession) -> None:
    fake_session.add(
        "GET",
        "https://open.spotify.com/oembed",
        FakeResponse(200, {"title": "Hello", "thumbnail_url": "art.jpg"}),
    )
    fake_session.add("GET", AUDD_FIND_LYRICS_URL, audd_lyrics_response("la la"))
    identifier = SongIdentifier(AuddClient("key", session=fake_session))

    result = identifier.identify_url(SPOTIFY_URL)

    assert result.title == "Hello"
    assert result.artist == config.UNKNOWN_ARTIST
    assert [c["url"] for c in fake_session.calls] == [
        "https://open.spotify.com/oembed",
        AUDD_FIND_LYRICS_URL,
    ]


def test_audio_match_with_inline_lyrics(fake_session: FakeSession) -> None:
    fake_session.add(
        "POST",
        AUDD_RECOGNIZE_URL,
        FakeResponse(
            200,
            {
                "status": "success",
                "result": {
                    "title": "Hello",
                    "artist": "Adele",
                    "lyrics": {"lyrics": "Hello from the other side"},
                    "deezer": {"album": {"cover_xl": "deezer.jpg"}},
                },
            },
        ),
    )
    identifier = SongIdentifier(AuddClient("key", session=fake_session))

    result = identifier.identify(AudioRequest(payload=b"clip", filename="c.webm"))

    assert result.platform == Platform.AUDIO_RECOGNITION
    assert result.album_art == "deezer.jpg"
    assert result.lyrics == "Hello from the other side"
    assert result.source == LyricsSource.PRIMARY_LYRICS_SERVICE
    assert fake_session.calls_to(AUDD_FIND_LYRICS_URL) == []


def test_audio_match_without_inline_lyrics_searches_primary_only(
    fake_session: FakeSession,
) -> None:
    fake_session.add(
        "POST",
        AUDD_RECOGNIZE_URL,
        FakeResponse(
            200,
            {"status": "success", "result": {"title": "Hello", "artist": "Adele"}},
        ),
    )
    fake_session.add("GET", AUDD_FIND_LYRICS_URL, audd_lyrics_response(None))
    identifier = SongIdentifier(AuddClient("key", session=fake_session))

    result = identifier.identify_audio(b"clip")

    assert result.no_lyrics is True
    assert result.message == config.NO_LYRICS_MESSAGE
    assert result.album_art == config.FALLBACK_ARTWORK_URL
    params = fake_session.calls_to(AUDD_FIND_LYRICS_URL)[0]["params"]
    assert params["q"] == "Hello Adele"


def test_audio_not_recognized(fake_session: FakeSession) -> None:
    fake_session.add(
        "POST",
        AUDD_RECOGNIZE_URL,
        FakeResponse(200, {"status": "success", "result": None}),
    )
    identifier = SongIdentifier(AuddClient("key", session=fake_session))

    with pytest.raises(SongNotRecognizedError) as excinfo:
        identifier.identify_audio(b"noise")

    assert excinfo.value.status_code == 404


class _CountingTier(LyricsTier):
    name = "counting"

    def __init__(self, answer: Optional[LyricsResult]):
        self.answer = answer
        self.calls = 0

    def lookup(self, metadata: TrackMetadata) -> Optional[LyricsResult]:
        self.calls += 1
        return self.answer


def test_resolve_lyrics_stops_at_first_answer() -> None:
    first = _CountingTier(
        LyricsResult("words", LyricsSource.PRIMARY_LYRICS_SERVICE)
    )
    second = _CountingTier(
        LyricsResult("other", LyricsSource.PLATFORM_DESCRIPTION_HEURISTIC)
    )

    result = resolve_lyrics(_metadata(), [first, second])

    assert result.text == "words"
    assert (first.calls, second.calls) == (1, 0)


def test_resolve_lyrics_skips_empty_answers() -> None:
    empty = _CountingTier(LyricsResult("", LyricsSource.PRIMARY_LYRICS_SERVICE))

    result = resolve_lyrics(
        _metadata(VERSE_CHORUS_DESCRIPTION), [empty, DescriptionHeuristicTier()]
    )

    assert result.source == LyricsSource.PLATFORM_DESCRIPTION_HEURISTIC


def test_resolve_lyrics_nothing_found() -> None:
    result = resolve_lyrics(_metadata(), [_CountingTier(None)])

    assert result.found is False
    assert result.source is None


def test_song_result_keeps_lyrics_and_message_consistent() -> None:
    with_lyrics = SongResult(
        title="t",
        artist="a",
        album_art="x",
        lyrics="words",
        platform=Platform.YOUTUBE,
        source=LyricsSource.PRIMARY_LYRICS_SERVICE,
        message="stale message",
    )
    without_lyrics = SongResult(
        title="t",
        artist="a",
        album_art="x",
        lyrics="",
        platform=Platform.YOUTUBE,
        source=LyricsSource.PRIMARY_LYRICS_SERVICE,
    )

    assert with_lyrics.no_lyrics is False
    assert with_lyrics.message is None
    assert without_lyrics.no_lyrics is True
    assert without_lyrics.source is None


def test_song_result_cannot_drift_after_construction() -> None:
    result = SongResult(
        title="t",
        artist="a",
        album_art="x",
        lyrics="",
        platform=Platform.SPOTIFY,
        message=config.NO_LYRICS_MESSAGE,
    )

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.lyrics = "late words"  # type: ignore[misc]

    updated = dataclasses.replace(
        result, lyrics="late words", source=LyricsSource.PRIMARY_LYRICS_SERVICE
    )
    assert updated.no_lyrics is False
    assert updated.message is None
    assert updated.source == LyricsSource.PRIMARY_LYRICS_SERVICE


def test_assemble_song_result_without_lyrics() -> None:
    result = assemble_song_result(
        title="t",
        artist="a",
        album_art="x",
        platform=Platform.DEEZER,
        lyrics=LyricsResult(),
    )

    assert result.lyrics == ""
    assert result.no_lyrics is True
    assert result.message == config.NO_LYRICS_MESSAGE


def test_build_identifier_requires_audd_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "AUDD_API_KEY", None)

    with pytest.raises(ServiceConfigurationError) as excinfo:
        build_identifier()

    assert excinfo.value.status_code == 503


def test_build_identifier_uses_configured_key(
    monkeypatch: pytest.MonkeyPatch, fake_session: FakeSession
) -> None:
    monkeypatch.setattr(config, "AUDD_API_KEY", "live-key")

    identifier = build_identifier(session=fake_session)

    assert identifier.audd.api_key == "live-key"
    assert identifier.audd.session is fake_session
