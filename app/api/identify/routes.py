from typing import Iterator

import requests
from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from app.core import (
    AudioRequest,
    IdentificationRequest,
    InvalidRequestError,
    ServiceError,
    UrlRequest,
    log_error,
)
from app.pipeline import SongIdentifier, build_identifier

from .schemas import ErrorResponse, IdentifySongResponse

router = APIRouter()

AUDIO_FIELD = "audio"
DEFAULT_AUDIO_FILENAME = "recording.mp3"

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def get_song_identifier() -> Iterator[SongIdentifier]:
    """
    One identifier (and one HTTP session) per request.

    Fails with 503 before the body is even read when AudD is not configured.
    """
    session = requests.Session()
    try:
        yield build_identifier(session=session)
    finally:
        session.close()


async def _read_identification_request(request: Request) -> IdentificationRequest:
    content_type = request.headers.get("content-type", "")

    if "application/json" in content_type:
        try:
            body = await request.json()
        except ValueError:
            raise InvalidRequestError(error="Request body is not valid JSON")

        url = body.get("url") if isinstance(body, dict) else None
        if not isinstance(url, str) or not url.strip():
            raise InvalidRequestError(error="URL parameter is required")
        return UrlRequest(url=url.strip())

    if "multipart/form-data" in content_type:
        form = await request.form()
        audio = form.get(AUDIO_FIELD)
        if audio is None or isinstance(audio, str):
            raise InvalidRequestError(error="Audio file is required")

        payload = await audio.read()
        if not payload:
            raise InvalidRequestError(error="Audio file is required")
        return AudioRequest(
            payload=payload,
            filename=audio.filename or DEFAULT_AUDIO_FILENAME,
        )

    raise InvalidRequestError(
        error="Invalid content type. Use application/json or multipart/form-data"
    )


@router.post(
    "/identify-song",
    response_model=IdentifySongResponse,
    responses=ERROR_RESPONSES,
)
@router.post(
    "/functions/v1/identify-song",
    response_model=IdentifySongResponse,
    include_in_schema=False,
)
async def identify_song(
    request: Request,
    identifier: SongIdentifier = Depends(get_song_identifier),
) -> IdentifySongResponse:
    """
    Identify a song from a platform link or a recorded clip.

    - application/json    : {"url": "..."}
    - multipart/form-data : file field "audio"

    Missing lyrics is still a 200 (lyrics/source null, message set).
    """
    identification = await _read_identification_request(request)

    try:
        # Blocking HTTP calls, keep them off the event loop
        result = await run_in_threadpool(identifier.identify, identification)
    except ServiceError:
        raise
    except Exception as exc:  # noqa: BLE001
        log_error("Error identifying song", exc_info=True)
        raise ServiceError() from exc

    return IdentifySongResponse.from_result(result)
