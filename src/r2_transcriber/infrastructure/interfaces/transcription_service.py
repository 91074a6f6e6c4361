"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from ...domain.models import Transcription


class TranscriptionService(ABC):
    """Abstract base class for audio transcription backends."""

    @abstractmethod
    def transcribe(self, audio_path: Path) -> Transcription:
        """
        Transcribes a local audio file.

        Args:
            audio_path: Path of the file to upload.

        Returns:
            The raw transcription document.

        Raises:
            ConfigurationError: If the API key is missing.
            ApiError: If the service answers with a non-2xx status.
        """
        pass
