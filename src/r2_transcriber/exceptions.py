"""Custom exceptions for the transcriber."""


class ConfigurationError(Exception):
    """Raised when required credentials or settings are missing or malformed."""

    def __init__(self, missing: list[str], invalid: dict[str, str] | None = None):
        self.missing = missing
        self.invalid = invalid or {}
        problems = []
        if missing:
            problems.append(f"Missing required configuration: {', '.join(missing)}")
        if self.invalid:
            values = ", ".join(f"{name}={value!r}" for name, value in self.invalid.items())
            problems.append(f"Invalid configuration: {values}")
        super().__init__("; ".join(problems))


class NotFoundError(Exception):
    """Raised when a local audio file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")


class InvalidSourceError(Exception):
    """Raised when a file reference cannot name a working file."""

    def __init__(self, file_ref: str, reason: str):
        self.file_ref = file_ref
        self.reason = reason
        super().__init__(f"Invalid file reference '{file_ref}': {reason}")


class TransferError(Exception):
    """Raised when downloading a remote file returns a non-2xx status."""

    def __init__(self, status_code: int, url: str | None = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Download failed with status: {status_code}")


class ApiError(Exception):
    """Raised when the transcription API returns a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error ({status_code}): {body}")
