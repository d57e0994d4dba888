"""Blocking connector built on ``requests``."""

from __future__ import annotations

from datetime import date
from typing import TypeVar

import certifi
import requests

from eodhistdata import endpoints
from eodhistdata.config import DEFAULT_BASE_URL
from eodhistdata.connectors.base import BaseEodHistConnector
from eodhistdata.endpoints import EndpointRequest
from eodhistdata.models.dividend import Dividend
from eodhistdata.models.exchange import Exchange, Ticker
from eodhistdata.models.fundamentals import FundamentalsResponse
from eodhistdata.models.quote import EODQuote, HistoricQuote, RealTimeQuote
from eodhistdata.models.split import Split

T = TypeVar("T")


class EodHistConnector(BaseEodHistConnector):
    """Fetch data from the eodhistoricaldata REST API.

    Every method issues exactly one GET and returns freshly parsed records;
    nothing is cached or retried. Failures raise ``ConnectionFailedError``,
    ``FetchFailedError`` or ``DeserializeFailedError``.

    The connector wraps a single ``requests.Session``, which is not
    documented as thread-safe: give each thread its own connector, or its
    own ``session=``.

    Usage::

        connector = EodHistConnector("your-api-token")
        quotes = connector.get_quote_history(
            "AAPL.US", date(2020, 1, 1), date(2020, 1, 31)
        )
    """

    def __init__(
        self,
        api_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(api_token, base_url=base_url, timeout=timeout)
        if session is None:
            session = requests.Session()
            session.verify = certifi.where()
        self.session = session

    # --------------------------------------------------------------- quotes

    def get_latest_quote(self, ticker: str) -> RealTimeQuote:
        """Retrieve the latest quote for the given ticker."""
        return self._send(endpoints.latest_quote(ticker))

    def get_quote_history(
        self,
        ticker: str,
        start: date,
        end: date | None = None,
    ) -> list[HistoricQuote]:
        """Retrieve daily quotes from ``start`` to ``end`` (inclusive).

        Without ``end`` the history runs through the most recent day
        available. Rows come back in the order the server sends them.
        """
        return self._send(endpoints.quote_history(ticker, start, end))

    def get_eod_bulk(self, exchange: str, day: date) -> list[EODQuote]:
        """Retrieve end-of-day rows for every instrument on an exchange."""
        return self._send(endpoints.eod_bulk(exchange, day))

    # ------------------------------------------------------ corporate actions

    def get_dividend_history(self, ticker: str, start: date) -> list[Dividend]:
        """Retrieve dividends with ex-date on or after ``start``."""
        return self._send(endpoints.dividend_history(ticker, start))

    def get_split_history(self, ticker: str, start: date) -> list[Split]:
        """Retrieve splits dated on or after ``start``."""
        return self._send(endpoints.split_history(ticker, start))

    # ---------------------------------------------------------- fundamentals

    def get_fundamentals_information(self, ticker: str) -> FundamentalsResponse:
        """Retrieve the fundamentals for the given ticker."""
        return self._send(endpoints.fundamentals(ticker))

    def get_fundamentals_bulk(
        self,
        exchange: str,
        offset: int,
        limit: int,
    ) -> list[FundamentalsResponse]:
        """Retrieve one page of fundamentals for an exchange."""
        return self._send(endpoints.fundamentals_bulk(exchange, offset, limit))

    # ------------------------------------------------------------- reference

    def get_exchanges(self) -> list[Exchange]:
        """Retrieve the list of supported exchanges."""
        return self._send(endpoints.exchanges())

    def get_exchange_tickers(self, exchange: str) -> list[Ticker]:
        """Retrieve the list of tickers for the given exchange."""
        return self._send(endpoints.exchange_tickers(exchange))

    # ------------------------------------------------------------- internals

    def _send(self, request: EndpointRequest[T]) -> T:
        try:
            resp = self.session.get(
                self._url(request),
                params=request.query(self.api_token),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise self._connection_failed(exc) from exc
        return self._handle_response(
            request, resp.status_code, resp.reason, resp.content,
        )
