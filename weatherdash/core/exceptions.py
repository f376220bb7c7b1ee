"""Custom application exceptions."""


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500):
        """Initialize exception with message and status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class BadRequestException(AppException):
    """Bad request exception."""

    def __init__(self, message: str = "Bad request"):
        """Initialize with 400 status code."""
        super().__init__(message, status_code=400)


class ProviderError(AppException):
    """Any failure talking to an upstream weather or air-quality provider.

    Network errors, non-success statuses, undecodable payloads and missing
    API keys all collapse into this one type. Only the message differs.
    """

    def __init__(self, message: str = "Weather provider unavailable"):
        """Initialize with 502 status code."""
        super().__init__(message, status_code=502)
