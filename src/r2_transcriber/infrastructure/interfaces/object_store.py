"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod


class ObjectStore(ABC):
    """Abstract base class for signed-URL capable object stores."""

    @abstractmethod
    def get_download_url(self, key: str) -> str:
        """
        Produces a time-limited, pre-authenticated GET URL for an object.

        The object's existence is not checked; a missing key only shows up
        when the URL is fetched.

        Args:
            key: The object path/name in the bucket.

        Returns:
            The signed URL.

        Raises:
            ConfigurationError: If the store credentials are incomplete.
        """
