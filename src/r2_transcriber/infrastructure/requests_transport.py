"""requests implementation of the HttpTransport interface."""

from typing import BinaryIO

import requests

from .interfaces import HttpResponse, HttpTransport


class RequestsTransport(HttpTransport):
    """Performs blocking HTTP calls through a shared requests session."""

    def __init__(self, session: requests.Session | None = None):
        self._session = session or requests.Session()

    def get(self, url: str) -> HttpResponse:
        response = self._session.get(url)
        return HttpResponse(status_code=response.status_code, content=response.content)

    def post_multipart(
        self,
        url: str,
        headers: dict[str, str],
        fields: dict[str, str],
        files: dict[str, tuple[str, BinaryIO]],
    ) -> HttpResponse:
        response = self._session.post(url, headers=headers, data=fields, files=files)
        return HttpResponse(status_code=response.status_code, content=response.content)
