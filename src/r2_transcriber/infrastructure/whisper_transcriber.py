"""OpenAI Whisper implementation of the TranscriptionService interface."""

import logging
from pathlib import Path

from ..config import OpenAIConfig
from ..domain.models import Transcription
from ..exceptions import ApiError, ConfigurationError
from .interfaces import HttpTransport, TranscriptionService

logger = logging.getLogger(__name__)


class WhisperTranscriber(TranscriptionService):
    """Handles audio transcription using the OpenAI audio transcriptions endpoint."""

    def __init__(self, transport: HttpTransport, config: OpenAIConfig):
        self._transport = transport
        self._config = config

    def transcribe(self, audio_path: Path) -> Transcription:
        """
        Uploads the file as multipart form data and returns the parsed JSON.

        The file is handed to the transport as an open stream. No client-side
        timeout is applied; the call returns whenever the service answers.
        """
        if not self._config.api_key:
            logger.error("OpenAI API key missing")
            raise ConfigurationError(["OPENAI_API_KEY"])

        logger.info(
            "Calling OpenAI transcription API",
            extra={"file_name": audio_path.name, "model": self._config.model},
        )

        with audio_path.open("rb") as audio_file:
            response = self._transport.post_multipart(
                self._config.transcription_url,
                headers={"Authorization": f"Bearer {self._config.api_key}"},
                fields={"model": self._config.model},
                files={"file": (audio_path.name, audio_file)},
            )

        if not response.ok:
            logger.error(
                "OpenAI transcription request failed",
                extra={"status_code": response.status_code, "body": response.text},
            )
            raise ApiError(response.status_code, response.text)

        return Transcription(payload=response.json_body())
