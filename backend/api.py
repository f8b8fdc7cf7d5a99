"""FastAPI application for Echo Turns.

POST /api/transcribe accepts either a JSON ``{"url": ...}`` body or raw
audio bytes, forwards it to the transcription provider and returns the
speaker-grouped transcript.
"""

import asyncio
import json
import logging
from typing import Any, Awaitable, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from config import get_config, create_transcription_adapter, create_progress_adapter
from domain.errors import InvalidRequestError, ProviderTransportError, TranscriptionError
from mappers import result_to_dto
from models import HealthResponse, TranscriptResponse, UrlSource
from ports.progress import ProgressPort
from ports.transcription import TranscriptionPort
from use_cases.transcribe import TranscribeAudioUseCase, TranscribeRequest

logger = logging.getLogger(__name__)

# Seconds between client-disconnect checks while the provider call is in flight
DISCONNECT_POLL_INTERVAL = 0.5

CLIENT_CLOSED_REQUEST = 499


class ClientDisconnected(Exception):
    """The inbound client went away before the provider answered."""


async def _run_until_disconnect(request: Request, awaitable: Awaitable[Any]) -> Any:
    """Await ``awaitable``, cancelling it if the client disconnects first."""
    task = asyncio.ensure_future(awaitable)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=DISCONNECT_POLL_INTERVAL)
            if done:
                return task.result()
            if await request.is_disconnected():
                logger.info("Client disconnected, abandoning provider call")
                raise ClientDisconnected()
    finally:
        if not task.done():
            task.cancel()


async def _parse_request(request: Request, default_language: str, default_audio_type: str) -> TranscribeRequest:
    language = request.headers.get("x-language", default_language)
    content_type = request.headers.get("content-type", "")
    body = await request.body()

    if "application/json" in content_type:
        try:
            data = json.loads(body)
        except ValueError as e:
            raise InvalidRequestError("Invalid JSON body") from e
        try:
            source = UrlSource.model_validate(data)
        except ValidationError as e:
            raise InvalidRequestError("Missing audio url") from e
        return TranscribeRequest(language=language, url=source.url)

    audio_type = request.headers.get("x-audio-type", default_audio_type)
    return TranscribeRequest(language=language, audio=body, content_type=audio_type)


def create_app(
    transcription: Optional[TranscriptionPort] = None,
    progress: Optional[ProgressPort] = None,
) -> FastAPI:
    """Build the FastAPI app. Adapters default to the ones selected by config."""
    cfg = get_config()
    if transcription is None:
        transcription = create_transcription_adapter(cfg)
    if progress is None:
        progress = create_progress_adapter()

    use_case = TranscribeAudioUseCase(transcription=transcription, progress=progress)

    app = FastAPI(title="Echo Turns")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(
            model=transcription.model_name(),
            provider_configured=transcription.is_configured(),
        )

    @app.post("/api/transcribe", response_model=TranscriptResponse)
    async def transcribe(request: Request):
        req = await _parse_request(request, cfg.default_language, cfg.default_audio_type)
        try:
            result = await _run_until_disconnect(request, use_case.execute(req))
        except ClientDisconnected:
            return JSONResponse(
                status_code=CLIENT_CLOSED_REQUEST,
                content={"error": "Client disconnected"},
            )
        return result_to_dto(result)

    @app.exception_handler(TranscriptionError)
    async def transcription_error_handler(request: Request, exc: TranscriptionError) -> JSONResponse:
        if isinstance(exc, ProviderTransportError):
            logger.error(f"Provider failure: {exc.message}")
        else:
            logger.warning(f"{type(exc).__name__}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    return app
