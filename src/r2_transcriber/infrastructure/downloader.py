"""Fetches remote files into the local temporary directory."""

import logging
import posixpath
from pathlib import Path

from ..exceptions import TransferError
from .interfaces import HttpTransport

logger = logging.getLogger(__name__)


class HttpDownloader:
    """Downloads a URL into a named file under ``temp_dir``."""

    def __init__(self, transport: HttpTransport, temp_dir: Path):
        self._transport = transport
        self._temp_dir = temp_dir

    def fetch_to_local_file(self, url: str, suggested_name: str) -> Path:
        """
        Downloads ``url`` and writes the body to ``temp_dir/<suggested_name>``.

        The body is buffered in memory before it is written. A file left
        behind by an earlier run with the same name is overwritten.

        Args:
            url: Signed URL of the object.
            suggested_name: Name for the local file; only its basename is used.

        Returns:
            Path of the downloaded file.

        Raises:
            TransferError: If the response status is not 2xx.
            OSError: If the body cannot be written; no partial file is left.
        """
        response = self._transport.get(url)
        if not response.ok:
            logger.error(
                "Download failed",
                extra={"status_code": response.status_code, "file_name": suggested_name},
            )
            raise TransferError(response.status_code, url)

        local_path = self._temp_dir / posixpath.basename(suggested_name)
        try:
            local_path.write_bytes(response.content)
        except OSError:
            logger.exception("Writing downloaded file failed", extra={"local_path": str(local_path)})
            local_path.unlink(missing_ok=True)
            raise

        logger.info(
            "File downloaded to temporary location",
            extra={"local_path": str(local_path), "size": len(response.content)},
        )
        return local_path
