"""Domain layer exports."""

from .models import (
    LocalSource,
    PipelineOutcome,
    RemoteSource,
    SourceReference,
    Transcription,
)
from .transcript_writer import TranscriptWriter

__all__ = [
    "LocalSource",
    "RemoteSource",
    "SourceReference",
    "Transcription",
    "PipelineOutcome",
    "TranscriptWriter",
]
