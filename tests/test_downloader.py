from pathlib import Path

import pytest

from r2_transcriber.exceptions import TransferError
from r2_transcriber.infrastructure import HttpDownloader
from r2_transcriber.infrastructure.interfaces import HttpResponse


def test_fetch_writes_body_under_basename(transport, tmp_path):
    downloader = HttpDownloader(transport, tmp_path)

    local_path = downloader.fetch_to_local_file("https://signed.example/a", "nested/dir/clip.ogg")

    assert local_path == tmp_path / "clip.ogg"
    assert local_path.read_bytes() == b"RIFF-audio-bytes"
    assert transport.gets == ["https://signed.example/a"]


def test_fetch_overwrites_existing_file(transport, tmp_path):
    (tmp_path / "clip.ogg").write_bytes(b"stale contents from a previous run")

    local_path = HttpDownloader(transport, tmp_path).fetch_to_local_file("https://x", "clip.ogg")

    assert local_path.read_bytes() == b"RIFF-audio-bytes"


@pytest.mark.parametrize("status_code", [301, 403, 404, 500])
def test_non_2xx_raises_transfer_error(transport, tmp_path, status_code):
    transport.download_response = HttpResponse(status_code=status_code)

    with pytest.raises(TransferError) as exc_info:
        HttpDownloader(transport, tmp_path).fetch_to_local_file("https://x", "clip.ogg")

    assert exc_info.value.status_code == status_code
    assert str(exc_info.value) == f"Download failed with status: {status_code}"
    assert not (tmp_path / "clip.ogg").exists()


def test_failed_write_leaves_no_partial_file(transport, tmp_path, monkeypatch):
    def write_then_fail(self, data):
        with self.open("wb") as handle:
            handle.write(data[:4])
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(Path, "write_bytes", write_then_fail)

    with pytest.raises(OSError) as exc_info:
        HttpDownloader(transport, tmp_path).fetch_to_local_file("https://x", "clip.ogg")

    assert exc_info.value.errno == 28
    assert list(tmp_path.iterdir()) == []
