"""Failure taxonomy for a generation attempt.

Every error raised by :class:`~stablegen.core.client.StabilityClient` derives
from :class:`GenerationError`, so callers that only need a user-facing
message can catch the base class. The message of each error is written to be
shown directly in the UI banner.
"""


class GenerationError(Exception):
    """Base class for failures while generating images."""


class ConfigurationError(GenerationError):
    """A required setting (the API key) is missing.

    Raised before any network I/O takes place.
    """


class TransportError(GenerationError):
    """The Stability endpoint could not be reached (DNS, refused, timeout)."""


class ApiError(GenerationError):
    """The service answered with a status other than 200.

    Attributes:
        status_code: HTTP status code returned by the service
        status_text: Reason phrase returned with the status
    """

    def __init__(self, status_code: int, status_text: str) -> None:
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"Non-200 response: {status_text}")


class ParseError(GenerationError):
    """The response body did not have the expected shape."""
