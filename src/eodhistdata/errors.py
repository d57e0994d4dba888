"""EOD Historical Data error types."""

from __future__ import annotations

from enum import Enum


class EodHistDataErrorCode(Enum):
    """Error classification codes."""

    CONNECTION_FAILED = "connection_failed"
    FETCH_FAILED = "fetch_failed"
    DESERIALIZE_FAILED = "deserialize_failed"


class EodHistDataError(Exception):
    """EOD Historical Data exception with a structured error code.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
        status_code: HTTP status returned by the server, if any.
    """

    def __init__(
        self,
        message: str,
        code: EodHistDataErrorCode,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class ConnectionFailedError(EodHistDataError):
    """The transport could not complete the request."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=EodHistDataErrorCode.CONNECTION_FAILED)


class FetchFailedError(EodHistDataError):
    """The server answered with a non-success status code."""

    def __init__(self, status_code: int, reason: str | None = None) -> None:
        message = (
            "fetching the data from eodhistoricaldata failed "
            f"with status code {status_code}"
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            message,
            code=EodHistDataErrorCode.FETCH_FAILED,
            status_code=status_code,
        )


class DeserializeFailedError(EodHistDataError):
    """The response body did not match the expected shape."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=EodHistDataErrorCode.DESERIALIZE_FAILED)
