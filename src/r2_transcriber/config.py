"""Application configuration loaded from environment variables."""

import os
import tempfile
from pathlib import Path

from pydantic import BaseModel

from .exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class R2Config(BaseModel, frozen=True):
    """Cloudflare R2 connection configuration."""

    account_id: str
    access_key_id: str
    secret_access_key: str
    bucket_name: str
    presign_expiry_seconds: int = 900

    @property
    def endpoint(self) -> str:
        return f"{self.account_id}.r2.cloudflarestorage.com"

    def missing_settings(self) -> list[str]:
        """Returns the environment names of required settings left empty."""
        required = {
            "R2_ACCOUNT_ID": self.account_id,
            "R2_ACCESS_KEY_ID": self.access_key_id,
            "R2_SECRET_ACCESS_KEY": self.secret_access_key,
            "R2_BUCKET_NAME": self.bucket_name,
        }
        return [name for name, value in required.items() if not value]


class OpenAIConfig(BaseModel, frozen=True):
    """OpenAI transcription API configuration."""

    api_key: str
    model: str = "whisper-1"
    transcription_url: str = "https://api.openai.com/v1/audio/transcriptions"


class PipelineConfig(BaseModel, frozen=True):
    """Local filesystem locations used by a pipeline run."""

    output_dir: Path = Path(".")
    temp_dir: Path = Path(tempfile.gettempdir())


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    r2: R2Config
    openai: OpenAIConfig
    pipeline: PipelineConfig = PipelineConfig()
    log_level: str = "INFO"


def _parse_settings() -> tuple[int, str]:
    """Parses the non-string settings, collecting every malformed value."""
    invalid = {}

    raw_expiry = os.getenv("R2_PRESIGN_EXPIRY_SECONDS", "900")
    try:
        expiry = int(raw_expiry)
    except ValueError:
        expiry = 0
    if expiry <= 0:
        invalid["R2_PRESIGN_EXPIRY_SECONDS"] = raw_expiry

    raw_level = os.getenv("LOG_LEVEL", "INFO")
    if raw_level.upper() not in LOG_LEVELS:
        invalid["LOG_LEVEL"] = raw_level

    if invalid:
        raise ConfigurationError([], invalid)
    return expiry, raw_level.upper()


def load_config() -> AppConfig:
    """
    Loads configuration from environment variables.

    Raises:
        ConfigurationError: If a numeric or enumerated setting cannot be parsed.
    """
    presign_expiry_seconds, log_level = _parse_settings()
    return AppConfig(
        r2=R2Config(
            account_id=os.getenv("R2_ACCOUNT_ID", ""),
            access_key_id=os.getenv("R2_ACCESS_KEY_ID", ""),
            secret_access_key=os.getenv("R2_SECRET_ACCESS_KEY", ""),
            bucket_name=os.getenv("R2_BUCKET_NAME", ""),
            presign_expiry_seconds=presign_expiry_seconds,
        ),
        openai=OpenAIConfig(
            api_key=os.getenv("OPENAI_API_KEY", ""),
            model=os.getenv("OPENAI_TRANSCRIPTION_MODEL", "whisper-1"),
            transcription_url=os.getenv(
                "OPENAI_TRANSCRIPTION_URL",
                "https://api.openai.com/v1/audio/transcriptions",
            ),
        ),
        pipeline=PipelineConfig(
            output_dir=Path(os.getenv("TRANSCRIBER_OUTPUT_DIR", ".")),
            temp_dir=Path(os.getenv("TRANSCRIBER_TEMP_DIR", tempfile.gettempdir())),
        ),
        log_level=log_level,
    )
