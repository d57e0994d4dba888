"""Request catalog shared by the sync and async connectors.

Each builder returns the endpoint path, the parser for the response body
and the endpoint-specific query parameters. The connectors add
``api_token`` and ``fmt=json`` and perform the GET.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Generic, TypeVar

from eodhistdata.models.dividend import Dividend
from eodhistdata.models.exchange import Exchange, Ticker
from eodhistdata.models.fundamentals import FundamentalsResponse
from eodhistdata.models.quote import EODQuote, HistoricQuote, RealTimeQuote
from eodhistdata.models.split import Split
from eodhistdata.parsing import (
    parse_dividends,
    parse_eod_quotes,
    parse_exchanges,
    parse_fundamentals,
    parse_fundamentals_bulk,
    parse_historic_quotes,
    parse_real_time_quote,
    parse_splits,
    parse_tickers,
)

T = TypeVar("T")


@dataclass(frozen=True)
class EndpointRequest(Generic[T]):
    """One GET against the API.

    Attributes:
        path: Path below the base URL, identifier included.
        parse: Turns the decoded JSON body into the typed result.
        params: Endpoint-specific query parameters.
    """

    path: str
    parse: Callable[[Any], T] = field(compare=False)
    params: dict[str, str] = field(default_factory=dict)

    def query(self, api_token: str) -> dict[str, str]:
        """Full query string parameters for this request."""
        return {**self.params, "api_token": api_token, "fmt": "json"}


def format_date(day: date) -> str:
    """Render ``day`` as ``YYYY-MM-DD``, zero-padding the year."""
    return day.isoformat()


def latest_quote(ticker: str) -> EndpointRequest[RealTimeQuote]:
    return EndpointRequest(f"real-time/{ticker}", parse_real_time_quote)


def quote_history(
    ticker: str,
    start: date,
    end: date | None = None,
) -> EndpointRequest[list[HistoricQuote]]:
    """Daily quotes from ``start`` to ``end`` inclusive (open-ended if None)."""
    params = {"from": format_date(start)}
    if end is not None:
        params["to"] = format_date(end)
    params["period"] = "d"
    return EndpointRequest(
        f"eod/{ticker}",
        parse_historic_quotes,
        params,
    )


def dividend_history(ticker: str, start: date) -> EndpointRequest[list[Dividend]]:
    return EndpointRequest(
        f"div/{ticker}",
        parse_dividends,
        {"from": format_date(start)},
    )


def split_history(ticker: str, start: date) -> EndpointRequest[list[Split]]:
    return EndpointRequest(
        f"splits/{ticker}",
        parse_splits,
        {"from": format_date(start)},
    )


def fundamentals(ticker: str) -> EndpointRequest[FundamentalsResponse]:
    return EndpointRequest(f"fundamentals/{ticker}", parse_fundamentals)


def fundamentals_bulk(
    exchange: str,
    offset: int,
    limit: int,
) -> EndpointRequest[list[FundamentalsResponse]]:
    return EndpointRequest(
        f"bulk-fundamentals/{exchange}",
        parse_fundamentals_bulk,
        {"offset": str(offset), "limit": str(limit)},
    )


def exchanges() -> EndpointRequest[list[Exchange]]:
    return EndpointRequest(
        "exchanges-list/",
        parse_exchanges,
    )


def exchange_tickers(exchange: str) -> EndpointRequest[list[Ticker]]:
    return EndpointRequest(
        f"exchange-symbol-list/{exchange}",
        parse_tickers,
    )


def eod_bulk(exchange: str, day: date) -> EndpointRequest[list[EODQuote]]:
    return EndpointRequest(
        f"eod-bulk-last-day/{exchange}",
        parse_eod_quotes,
        {"date": format_date(day)},
    )
