"""Cloudflare R2 implementation of the ObjectStore interface."""

import logging
from datetime import timedelta

from minio import Minio

from ..config import R2Config
from ..exceptions import ConfigurationError
from .interfaces import ObjectStore

logger = logging.getLogger(__name__)


class R2ObjectStore(ObjectStore):
    """Generates presigned download URLs for objects in an R2 bucket."""

    def __init__(self, config: R2Config, client: Minio | None = None):
        self._config = config
        self._client = client

    def get_download_url(self, key: str) -> str:
        client = self._get_client()
        url = client.presigned_get_object(
            bucket_name=self._config.bucket_name,
            object_name=key,
            expires=timedelta(seconds=self._config.presign_expiry_seconds),
        )
        logger.info(
            "Presigned download URL generated",
            extra={
                "bucket_name": self._config.bucket_name,
                "object_name": key,
                "expires_in": self._config.presign_expiry_seconds,
            },
        )
        return url

    def _get_client(self) -> Minio:
        if self._client is not None:
            return self._client

        missing = self._config.missing_settings()
        if missing:
            logger.error("R2 credentials incomplete", extra={"missing": missing})
            raise ConfigurationError(missing)

        # an explicit region skips the SDK's bucket-location request
        self._client = Minio(
            endpoint=self._config.endpoint,
            access_key=self._config.access_key_id,
            secret_key=self._config.secret_access_key,
            region="auto",
            secure=True,
        )
        return self._client
