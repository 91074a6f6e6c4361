from r2_transcriber.config import AppConfig, load_config
from r2_transcriber.exceptions import (
    ApiError,
    ConfigurationError,
    InvalidSourceError,
    NotFoundError,
    TransferError,
)
from r2_transcriber.logging import setup_logging

__all__ = [
    "setup_logging",
    "load_config",
    "AppConfig",
    "ApiError",
    "ConfigurationError",
    "InvalidSourceError",
    "NotFoundError",
    "TransferError",
]
