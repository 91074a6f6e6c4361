"""Dependency wiring for the transcriber."""

from .config import AppConfig
from .domain import TranscriptWriter
from .handlers import TranscriptionHandler
from .infrastructure import (
    HttpDownloader,
    R2ObjectStore,
    RequestsTransport,
    WhisperTranscriber,
)
from .infrastructure.interfaces import HttpTransport


def get_handler(config: AppConfig, transport: HttpTransport | None = None) -> TranscriptionHandler:
    """Returns a handler whose clients are built from ``config``."""
    transport = transport or RequestsTransport()
    return TranscriptionHandler(
        object_store=R2ObjectStore(config.r2),
        downloader=HttpDownloader(transport, config.pipeline.temp_dir),
        transcription_service=WhisperTranscriber(transport, config.openai),
        transcript_writer=TranscriptWriter(config.pipeline.output_dir),
    )
