"""State and response handling shared by both connectors."""

from __future__ import annotations

from typing import Any, TypeVar

from eodhistdata.config import DEFAULT_BASE_URL
from eodhistdata.endpoints import EndpointRequest
from eodhistdata.errors import ConnectionFailedError, FetchFailedError
from eodhistdata.parsing import decode_json

T = TypeVar("T")


class BaseEodHistConnector:
    """Holds the base URL and API token.

    Nothing here touches the network: construction only stores the
    configuration, and the token is never validated or parsed.
    """

    def __init__(
        self,
        api_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
    ) -> None:
        self.api_token = api_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    def _url(self, request: EndpointRequest[Any]) -> str:
        return f"{self.base_url}/{request.path}"

    def _redact(self, text: str) -> str:
        # transport errors echo the request URL, token included
        if self.api_token:
            return text.replace(self.api_token, "***")
        return text

    def _connection_failed(self, exc: Exception) -> ConnectionFailedError:
        return ConnectionFailedError(
            self._redact(f"connection to eodhistoricaldata server failed: {exc}")
        )

    @staticmethod
    def _handle_response(
        request: EndpointRequest[T],
        status_code: int,
        reason: str | None,
        content: bytes,
    ) -> T:
        if not 200 <= status_code < 300:
            raise FetchFailedError(status_code, reason)
        return request.parse(decode_json(content))
