"""Handler for running one audio file through the transcription pipeline."""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from ..domain import (
    LocalSource,
    PipelineOutcome,
    RemoteSource,
    SourceReference,
    TranscriptWriter,
)
from ..exceptions import InvalidSourceError, NotFoundError
from ..infrastructure import HttpDownloader
from ..infrastructure.interfaces import ObjectStore, TranscriptionService

logger = logging.getLogger(__name__)


class TranscriptionHandler:
    """Orchestrates source resolution, transcription, persistence and cleanup."""

    def __init__(
        self,
        object_store: ObjectStore,
        downloader: HttpDownloader,
        transcription_service: TranscriptionService,
        transcript_writer: TranscriptWriter,
    ):
        self._object_store = object_store
        self._downloader = downloader
        self._transcription_service = transcription_service
        self._transcript_writer = transcript_writer

    def run(self, source: SourceReference) -> PipelineOutcome:
        """
        Transcribes the referenced audio file and stores the result as JSON.

        Remote objects are downloaded to a temporary file first; that file
        is removed when the run ends, whether it succeeded or not.

        Args:
            source: Local path or bucket key of the audio file.

        Returns:
            PipelineOutcome describing the written transcription.

        Raises:
            NotFoundError: If a local file does not exist.
            InvalidSourceError: If a bucket key has no file name.
            ConfigurationError: If credentials for the chosen path are missing.
            TransferError: If the remote download fails.
            ApiError: If the transcription API rejects the request.
        """
        with self._working_file(source) as audio_path:
            file_size = audio_path.stat().st_size
            logger.info(
                "File size",
                extra={"file_name": audio_path.name, "size_mb": round(file_size / (1024 * 1024), 2)},
            )

            started = time.monotonic()
            transcription = self._transcription_service.transcribe(audio_path)
            duration = time.monotonic() - started
            logger.info("Transcription completed", extra={"duration_seconds": round(duration, 2)})

            output_path = self._transcript_writer.write(transcription, audio_path)
            logger.info("Transcription saved", extra={"output_path": str(output_path)})

        return PipelineOutcome(
            transcription=transcription,
            output_path=output_path,
            source=source,
            file_size_bytes=file_size,
            duration_seconds=duration,
        )

    @contextmanager
    def _working_file(self, source: SourceReference) -> Iterator[Path]:
        if isinstance(source, LocalSource):
            logger.info("Processing local file", extra={"path": str(source.path)})
            if not source.path.is_file():
                raise NotFoundError(str(source.path))
            yield source.path
            return

        logger.info("Processing R2 file", extra={"object_name": source.key})
        if not source.file_name:
            raise InvalidSourceError(source.key, "object key has no file name")
        url = self._object_store.get_download_url(source.key)
        temp_path = self._downloader.fetch_to_local_file(url, source.file_name)
        try:
            yield temp_path
        finally:
            temp_path.unlink(missing_ok=True)
            logger.info("Cleaned up temporary file", extra={"path": str(temp_path)})

    def transcribe_local_file(self, path: str | Path) -> PipelineOutcome:
        return self.run(LocalSource(path=Path(path)))

    def transcribe_remote_file(self, key: str) -> PipelineOutcome:
        return self.run(RemoteSource(key=key))
