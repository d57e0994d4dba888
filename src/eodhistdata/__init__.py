"""eodhistdata: typed client for the EOD Historical Data REST API.

End-of-day and real-time quotes, dividends, splits, fundamentals and
exchange/ticker listings, each returned as immutable dataclasses.

Quick start::

    from eodhistdata import EodHistConnector
    connector = EodHistConnector("your-api-token")
    quotes = connector.get_quote_history("AAPL.US", date(2020, 1, 1), date(2020, 1, 31))

Async::

    from eodhistdata import AsyncEodHistConnector
    quote = await AsyncEodHistConnector("your-api-token").get_latest_quote("AAPL.US")
"""

from __future__ import annotations

import os

from eodhistdata.config import DEFAULT_BASE_URL, EodHistDataConfig, EodHistTransport
from eodhistdata.connectors import (
    AsyncEodHistConnector,
    BaseEodHistConnector,
    EodHistConnector,
    create_connector,
)
from eodhistdata.errors import (
    ConnectionFailedError,
    DeserializeFailedError,
    EodHistDataError,
    EodHistDataErrorCode,
    FetchFailedError,
)
from eodhistdata.frames import to_frame
from eodhistdata.models.dividend import Dividend
from eodhistdata.models.exchange import Exchange, Ticker
from eodhistdata.models.fundamentals import (
    AssetInformation,
    FundamentalsResponse,
    Highlights,
    SharesStats,
    Valuation,
)
from eodhistdata.models.quote import EODQuote, HistoricQuote, RealTimeQuote
from eodhistdata.models.split import Split

__version__ = "0.1.0"

__all__ = [
    # Connectors
    "EodHistConnector",
    "AsyncEodHistConnector",
    "BaseEodHistConnector",
    "create_connector",
    "create_connector_from_env",
    # Config
    "EodHistDataConfig",
    "EodHistTransport",
    "DEFAULT_BASE_URL",
    # Errors
    "EodHistDataError",
    "EodHistDataErrorCode",
    "ConnectionFailedError",
    "FetchFailedError",
    "DeserializeFailedError",
    # Models
    "RealTimeQuote",
    "HistoricQuote",
    "EODQuote",
    "Dividend",
    "Split",
    "AssetInformation",
    "Highlights",
    "Valuation",
    "SharesStats",
    "FundamentalsResponse",
    "Exchange",
    "Ticker",
    # DataFrame helpers
    "to_frame",
]


def create_connector_from_env() -> EodHistConnector | AsyncEodHistConnector:
    """Zero-config factory. Reads the token and transport from env vars.

    Environment variables:
        EODHD_API_TOKEN: API token (required).
        EODHD_BASE_URL: API root (default: "https://eodhistoricaldata.com/api").
        EODHD_TIMEOUT: Transport timeout in seconds (default: transport default).
        EODHD_TRANSPORT: "requests" or "httpx" (default: "requests").
    """
    api_token = os.getenv("EODHD_API_TOKEN")
    if not api_token:
        raise ValueError("EODHD_API_TOKEN is not set")

    timeout = os.getenv("EODHD_TIMEOUT")
    config = EodHistDataConfig(
        api_token=api_token,
        base_url=os.getenv("EODHD_BASE_URL", DEFAULT_BASE_URL),
        timeout=float(timeout) if timeout else None,
        transport=EodHistTransport(os.getenv("EODHD_TRANSPORT", "requests").strip()),
    )
    return create_connector(config)
