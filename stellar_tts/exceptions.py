"""Exception classes for the stellar-tts library."""


class TimestampError(Exception):
    """Base exception for all stellar-tts errors."""

    def __init__(self, message: str, status_code: int = 0, response: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response


class InvalidArgumentError(TimestampError, ValueError):
    """Raised when a path, digest or encoded hash argument is unusable."""


class MissingFileError(TimestampError, FileNotFoundError):
    """Raised in strict mode when a file to be hashed does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File {path} not found.")
        self.path = path


class ExternalServiceError(TimestampError):
    """Raised when the timestamping service cannot be reached or answers badly."""


class NotFoundError(ExternalServiceError):
    """Raised when the service does not know the requested hash or transaction (404)."""

    def __init__(self, message: str = "Resource not found", response: object = None) -> None:
        super().__init__(message, status_code=404, response=response)


class RateLimitError(ExternalServiceError):
    """Raised when the service rate limits the caller (429)."""

    def __init__(self, message: str = "Rate limit exceeded", response: object = None) -> None:
        super().__init__(message, status_code=429, response=response)


class ServerError(ExternalServiceError):
    """Raised when the service returns a 5xx error."""

    def __init__(self, message: str = "Internal server error", status_code: int = 500, response: object = None) -> None:
        super().__init__(message, status_code=status_code, response=response)
