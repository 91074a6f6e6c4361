"""Handler layer exports."""

from .transcription_handler import TranscriptionHandler

__all__ = ["TranscriptionHandler"]
