"""Domain models for the transcription pipeline."""

import posixpath
from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class LocalSource(BaseModel, frozen=True):
    """An audio file already present on the local filesystem."""

    kind: Literal["local"] = "local"
    path: Path


class RemoteSource(BaseModel, frozen=True):
    """An audio object stored in the R2 bucket."""

    kind: Literal["remote"] = "remote"
    key: str

    @property
    def file_name(self) -> str:
        return posixpath.basename(self.key)


SourceReference = Annotated[Union[LocalSource, RemoteSource], Field(discriminator="kind")]


class Transcription(BaseModel, frozen=True):
    """
    Raw document returned by the transcription API.

    The payload is kept exactly as received; only ``text`` is read, and
    only for display.
    """

    payload: dict[str, Any]

    @property
    def text(self) -> str | None:
        value = self.payload.get("text")
        return value if isinstance(value, str) else None


class PipelineOutcome(BaseModel, frozen=True):
    """Result of a single pipeline run."""

    transcription: Transcription
    output_path: Path
    source: SourceReference
    file_size_bytes: int
    duration_seconds: float
