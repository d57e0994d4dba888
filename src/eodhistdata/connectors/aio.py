"""Asynchronous connector built on ``httpx``."""

from __future__ import annotations

from datetime import date
from typing import Any, TypeVar

import httpx

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


class AsyncEodHistConnector(BaseEodHistConnector):
    """Async counterpart of ``EodHistConnector``.

    A short-lived ``httpx.AsyncClient`` is opened per call, so one
    connector can be shared freely between tasks. Concurrency is up to the
    caller, e.g. ``asyncio.gather`` over several calls.
    """

    def __init__(
        self,
        api_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(api_token, base_url=base_url, timeout=timeout)
        self.transport = transport

    async def get_latest_quote(self, ticker: str) -> RealTimeQuote:
        """Retrieve the latest quote for the given ticker."""
        return await self._send(endpoints.latest_quote(ticker))

    async def get_quote_history(
        self,
        ticker: str,
        start: date,
        end: date | None = None,
    ) -> list[HistoricQuote]:
        """Retrieve daily quotes from ``start`` to ``end`` (inclusive)."""
        return await self._send(endpoints.quote_history(ticker, start, end))

    async def get_eod_bulk(self, exchange: str, day: date) -> list[EODQuote]:
        return await self._send(endpoints.eod_bulk(exchange, day))

    async def get_dividend_history(self, ticker: str, start: date) -> list[Dividend]:
        return await self._send(endpoints.dividend_history(ticker, start))

    async def get_split_history(self, ticker: str, start: date) -> list[Split]:
        return await self._send(endpoints.split_history(ticker, start))

    async def get_fundamentals_information(self, ticker: str) -> FundamentalsResponse:
        return await self._send(endpoints.fundamentals(ticker))

    async def get_fundamentals_bulk(
        self,
        exchange: str,
        offset: int,
        limit: int,
    ) -> list[FundamentalsResponse]:
        return await self._send(endpoints.fundamentals_bulk(exchange, offset, limit))

    async def get_exchanges(self) -> list[Exchange]:
        return await self._send(endpoints.exchanges())

    async def get_exchange_tickers(self, exchange: str) -> list[Ticker]:
        return await self._send(endpoints.exchange_tickers(exchange))

    async def _send(self, request: EndpointRequest[T]) -> T:
        kwargs: dict[str, Any] = {"follow_redirects": True}
        # httpx reads timeout=None as "never time out"
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self.transport is not None:
            kwargs["transport"] = self.transport
        try:
            async with httpx.AsyncClient(**kwargs) as client:
                resp = await client.get(
                    self._url(request), params=request.query(self.api_token),
                )
        # InvalidURL is not an HTTPError; free-form identifiers can trigger it
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise self._connection_failed(exc) from exc
        return self._handle_response(
            request, resp.status_code, resp.reason_phrase, resp.content,
        )
