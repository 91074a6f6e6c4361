"""Abstract interface for the HTTP calls the pipeline makes."""

import json
from abc import ABC, abstractmethod
from typing import Any, BinaryIO

from pydantic import BaseModel


class HttpResponse(BaseModel, frozen=True):
    """Status and fully buffered body of an HTTP response."""

    status_code: int
    content: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json_body(self) -> Any:
        return json.loads(self.content)


class HttpTransport(ABC):
    """Abstract base class for HTTP backends."""

    @abstractmethod
    def get(self, url: str) -> HttpResponse:
        """
        Issues a GET request and buffers the whole body.

        Args:
            url: Absolute URL to fetch.

        Returns:
            The response, whatever its status code.
        """

    @abstractmethod
    def post_multipart(
        self,
        url: str,
        headers: dict[str, str],
        fields: dict[str, str],
        files: dict[str, tuple[str, BinaryIO]],
    ) -> HttpResponse:
        """
        Issues a multipart/form-data POST request.

        Args:
            url: Absolute URL to post to.
            headers: Extra request headers, e.g. ``Authorization``.
            fields: Plain form fields.
            files: Form field name mapped to ``(file_name, stream)``. Streams
                are read by the transport, not buffered by the caller.

        Returns:
            The response, whatever its status code.
        """
