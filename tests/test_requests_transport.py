import io
from unittest.mock import Mock

from r2_transcriber.infrastructure import RequestsTransport


def test_get_buffers_status_and_body():
    session = Mock()
    session.get.return_value = Mock(status_code=206, content=b"partial")

    response = RequestsTransport(session).get("https://signed.example/a")

    session.get.assert_called_once_with("https://signed.example/a")
    assert response.status_code == 206
    assert response.ok
    assert response.content == b"partial"


def test_post_multipart_passes_fields_and_streams():
    session = Mock()
    session.post.return_value = Mock(status_code=400, content=b'{"error": "bad"}')
    stream = io.BytesIO(b"audio")

    response = RequestsTransport(session).post_multipart(
        "https://api.example/v1/audio/transcriptions",
        headers={"Authorization": "Bearer k"},
        fields={"model": "whisper-1"},
        files={"file": ("a.mp3", stream)},
    )

    session.post.assert_called_once_with(
        "https://api.example/v1/audio/transcriptions",
        headers={"Authorization": "Bearer k"},
        data={"model": "whisper-1"},
        files={"file": ("a.mp3", stream)},
    )
    assert not response.ok
    assert response.text == '{"error": "bad"}'
