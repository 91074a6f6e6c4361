"""Shared fakes and fixtures for the transcriber tests."""

import json
import logging

import pytest

from r2_transcriber.config import AppConfig, OpenAIConfig, PipelineConfig, R2Config
from r2_transcriber.domain import TranscriptWriter
from r2_transcriber.handlers import TranscriptionHandler
from r2_transcriber.infrastructure import HttpDownloader, WhisperTranscriber
from r2_transcriber.infrastructure.interfaces import HttpResponse, HttpTransport, ObjectStore

WHISPER_PAYLOAD = {"text": "Hello from the session recording.", "language": "english", "duration": 3.5}


class FakeTransport(HttpTransport):
    def __init__(self, download=None, transcription=None):
        if download is None:
            download = HttpResponse(status_code=200, content=b"RIFF-audio-bytes")
        if transcription is None:
            transcription = HttpResponse(
                status_code=200, content=json.dumps(WHISPER_PAYLOAD).encode("utf-8")
            )
        self.download_response = download
        self.transcription_response = transcription
        self.gets = []
        self.posts = []

    def get(self, url):
        self.gets.append(url)
        return self.download_response

    def post_multipart(self, url, headers, fields, files):
        self.posts.append(
            {
                "url": url,
                "headers": headers,
                "fields": fields,
                "files": {
                    name: {"file_name": file_name, "path": stream.name, "data": stream.read()}
                    for name, (file_name, stream) in files.items()
                },
            }
        )
        return self.transcription_response


class FakeObjectStore(ObjectStore):
    def __init__(self):
        self.keys = []

    def get_download_url(self, key):
        self.keys.append(key)
        return f"https://signed.example/{key}?X-Amz-Signature=abc"


@pytest.fixture(autouse=True)
def restore_root_handlers():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def app_config(tmp_path):
    output_dir = tmp_path / "out"
    temp_dir = tmp_path / "tmp"
    output_dir.mkdir()
    temp_dir.mkdir()
    return AppConfig(
        r2=R2Config(
            account_id="acct123",
            access_key_id="access",
            secret_access_key="secret",
            bucket_name="recordings",
        ),
        openai=OpenAIConfig(api_key="sk-test"),
        pipeline=PipelineConfig(output_dir=output_dir, temp_dir=temp_dir),
    )


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def object_store():
    return FakeObjectStore()


@pytest.fixture
def handler(app_config, transport, object_store):
    return TranscriptionHandler(
        object_store=object_store,
        downloader=HttpDownloader(transport, app_config.pipeline.temp_dir),
        transcription_service=WhisperTranscriber(transport, app_config.openai),
        transcript_writer=TranscriptWriter(app_config.pipeline.output_dir),
    )


@pytest.fixture
def audio_file(tmp_path):
    path = tmp_path / "session.mp3"
    path.write_bytes(b"ID3-local-audio")
    return path


@pytest.fixture
def whisper_payload():
    return dict(WHISPER_PAYLOAD)
