"""Persists transcription documents next to the caller."""

import json
from pathlib import Path

from .models import Transcription


class TranscriptWriter:
    """Writes a transcription as pretty-printed JSON."""

    def __init__(self, output_dir: Path):
        self._output_dir = output_dir

    def write(self, transcription: Transcription, audio_path: Path) -> Path:
        """
        Serializes the raw payload to ``<audio stem>.json``.

        An existing file with the same name is overwritten.

        Args:
            transcription: Document returned by the transcription API.
            audio_path: The working file that was transcribed.

        Returns:
            Path of the written JSON file.
        """
        output_path = self._output_dir / self.derive_name(audio_path)
        output_path.write_text(
            json.dumps(transcription.payload, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        return output_path

    @staticmethod
    def derive_name(audio_path: Path) -> str:
        """Replaces the audio file's extension with ``.json``."""
        return Path(audio_path.name).with_suffix(".json").name
