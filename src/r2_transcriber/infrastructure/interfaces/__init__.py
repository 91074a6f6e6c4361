"""Infrastructure interface exports."""

from .http_transport import HttpResponse, HttpTransport
from .object_store import ObjectStore
from .transcription_service import TranscriptionService

__all__ = ["HttpResponse", "HttpTransport", "ObjectStore", "TranscriptionService"]
