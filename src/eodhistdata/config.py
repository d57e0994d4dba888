"""EOD Historical Data connector configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_BASE_URL = "https://eodhistoricaldata.com/api"


class EodHistTransport(Enum):
    """Supported HTTP transports."""

    REQUESTS = "requests"
    HTTPX = "httpx"


@dataclass(frozen=True)
class EodHistDataConfig:
    """Configuration for a connector.

    Attributes:
        api_token: API token issued by eodhistoricaldata, passed verbatim.
        base_url: Root of the REST API.
        timeout: Transport timeout in seconds (None = transport default).
        transport: Which HTTP transport to build the connector on.
    """

    api_token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = None
    transport: EodHistTransport = EodHistTransport.REQUESTS
