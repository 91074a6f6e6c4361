"""Infrastructure layer exports."""

from .downloader import HttpDownloader
from .r2_storage import R2ObjectStore
from .requests_transport import RequestsTransport
from .whisper_transcriber import WhisperTranscriber

__all__ = ["HttpDownloader", "R2ObjectStore", "RequestsTransport", "WhisperTranscriber"]
