"""Shared fixtures for eodhistdata tests."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable
from unittest.mock import MagicMock

import httpx
import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

TOKEN = "test-token-123"

# NYSE/NASDAQ sessions in January 2020 (Jan 1 and MLK day closed)
JAN_2020_TRADING_DAYS = [
    "2020-01-02", "2020-01-03", "2020-01-06", "2020-01-07", "2020-01-08",
    "2020-01-09", "2020-01-10", "2020-01-13", "2020-01-14", "2020-01-15",
    "2020-01-16", "2020-01-17", "2020-01-21", "2020-01-22", "2020-01-23",
    "2020-01-24", "2020-01-27", "2020-01-28", "2020-01-29", "2020-01-30",
    "2020-01-31",
]


@pytest.fixture
def token() -> str:
    return TOKEN


@pytest.fixture
def real_time_payload() -> dict[str, Any]:
    return {
        "code": "AAPL.US",
        "timestamp": 1700251200,
        "gmtoffset": 0,
        "open": 189.57,
        "high": 190.38,
        "low": 188.57,
        "close": 189.69,
        "volume": 50941404,
        "previousClose": 189.71,
        "change": -0.02,
        "change_p": -0.0105,
    }


@pytest.fixture
def history_payload() -> list[dict[str, Any]]:
    """21 daily rows for AAPL.US, January 2020."""
    rows = []
    for i, day in enumerate(JAN_2020_TRADING_DAYS):
        close = 300.0 + i * 0.75
        rows.append({
            "date": day,
            "open": close - 1.0,
            "high": close + 1.5,
            "low": close - 2.0,
            "close": close,
            "adjusted_close": round(close / 4, 4),
            "volume": 33870100 + i * 1000,
        })
    return rows


@pytest.fixture
def dividend_payload() -> list[dict[str, Any]]:
    return [
        {
            "date": "2020-02-07",
            "declarationDate": "2020-01-28",
            "recordDate": "2020-02-10",
            "paymentDate": "2020-02-13",
            "period": "Quarterly",
            "value": 0.1925,
            "unadjustedValue": 0.77,
            "currency": "USD",
        },
        {
            "date": "2020-05-08",
            "recordDate": "2020-05-11",
            "paymentDate": "2020-05-14",
            "period": "Quarterly",
            "value": 0.205,
            "unadjustedValue": 0.82,
            "currency": "USD",
        },
    ]


@pytest.fixture
def split_payload() -> list[dict[str, Any]]:
    return [{"date": "2020-08-31", "split": "4.000000/1.000000"}]


@pytest.fixture
def fundamentals_payload() -> dict[str, Any]:
    return {
        "General": {
            "Code": "AAPL",
            "Type": "Common Stock",
            "Name": "Apple Inc",
            "Exchange": "NASDAQ",
            "CurrencyCode": "USD",
            "CurrencyName": "US Dollar",
            "CurrencySymbol": "$",
            "CountryName": "USA",
            "CountryISO": "US",
            "ISIN": "US0378331005",
            "LEI": "HWUPKR0MPOU8FGXBT394",
            "PrimaryTicker": "AAPL.US",
            "CUSIP": "037833100",
            "CIK": "320193",
            "IPODate": "1980-12-12",
            "Sector": "Technology",
            "Industry": "Consumer Electronics",
            "GicSector": "Information Technology",
            "GicGroup": "Technology Hardware & Equipment",
            "GicIndustry": "Technology Hardware, Storage & Peripherals",
            "GicSubIndustry": "Technology Hardware, Storage & Peripherals",
            "HomeCategory": "Domestic",
            "IsDelisted": False,
            "Description": "Apple Inc. designs, manufactures, and markets smartphones.",
        },
        "Highlights": {
            "MarketCapitalization": 2960000000000,
            "MarketCapitalizationMln": 2960000.0,
            "EBITDA": 125820002304,
            "PERatio": 30.9,
            "PEGRatio": 2.75,
            "WallStreetTargetPrice": 198.13,
            "BookValue": 3.997,
            "DividendShare": 0.95,
            "DividendYield": 0.005,
            "EarningsShare": 6.13,
            "EPSEstimateCurrentYear": 6.52,
            "EPSEstimateNextYear": 7.1,
            "EPSEstimateNextQuarter": 2.1,
            "EPSEstimateCurrentQuarter": 2.1,
            "MostRecentQuarter": "2023-09-30",
            "ProfitMargin": 0.2531,
            "OperatingMarginTTM": 0.3013,
            "ReturnOnAssetsTTM": 0.2083,
            "ReturnOnEquityTTM": 1.5608,
            "RevenueTTM": 383285002240,
            "RevenuePerShareTTM": 24.34,
            "QuarterlyRevenueGrowthYOY": -0.007,
            "GrossProfitTTM": 169148000000,
            "DilutedEpsTTM": 6.13,
            "QuarterlyEarningsGrowthYOY": 0.108,
        },
        "Valuation": {
            "TrailingPE": 30.9,
            "ForwardPE": 28.65,
            "PriceSalesTTM": 7.72,
            "PriceBookMRQ": 47.4,
            "EnterpriseValue": 2990000000000,
            "EnterpriseValueRevenue": 7.8,
            "EnterpriseValueEbitda": 23.1,
        },
        "SharesStats": {
            "SharesOutstanding": 15552799744,
            "SharesFloat": 15535488830,
            "PercentInsiders": 0.072,
            "PercentInstitutions": 61.22,
            "SharesShort": None,
            "SharesShortPriorMonth": None,
            "ShortRatio": None,
            "ShortPercentOutstanding": None,
            "ShortPercentFloat": 0.0071,
        },
        "Technicals": {"Beta": 1.29},
    }


@pytest.fixture
def exchanges_payload() -> list[dict[str, Any]]:
    return [
        {
            "Name": "USA Stocks",
            "Code": "US",
            "OperatingMIC": "XNAS, XNYS",
            "Country": "USA",
            "Currency": "USD",
            "CountryISO2": "US",
            "CountryISO3": "USA",
        },
        {
            "Name": "Money Market Virtual Exchange",
            "Code": "MONEY",
            "OperatingMIC": None,
            "Country": "Unknown",
            "Currency": "Unknown",
            "CountryISO2": "",
            "CountryISO3": "",
        },
    ]


@pytest.fixture
def tickers_payload() -> list[dict[str, Any]]:
    return [
        {
            "Code": "AAPL",
            "Name": "Apple Inc",
            "Country": "USA",
            "Exchange": "NASDAQ",
            "Currency": "USD",
            "Type": "Common Stock",
            "Isin": "US0378331005",
        },
        {
            "Code": "SPY",
            "Name": "SPDR S&P 500 ETF Trust",
            "Country": "USA",
            "Exchange": "NYSE ARCA",
            "Currency": "USD",
            "Type": "ETF",
            "Isin": None,
        },
    ]


@pytest.fixture
def eod_bulk_payload() -> list[dict[str, Any]]:
    return [
        {
            "code": "AAPL",
            "exchange_short_name": "US",
            "date": "2020-01-31",
            "open": 320.93,
            "high": 322.68,
            "low": 308.29,
            "close": 309.51,
            "adjusted_close": 75.8394,
            "volume": 49897096,
        },
        {
            "code": "ZZZZ",
            "exchange_short_name": "US",
            "date": "2020-01-31",
            "adjusted_close": 1.02,
        },
    ]


# ---- fake transports ----


def _body(payload: Any) -> bytes:
    return payload if isinstance(payload, bytes) else json.dumps(payload).encode()


@pytest.fixture
def fake_session() -> Callable[..., MagicMock]:
    """Factory for a ``requests.Session`` stand-in answering every GET alike."""

    def factory(
        payload: Any = None,
        status_code: int = 200,
        reason: str = "OK",
        side_effect: Exception | None = None,
    ) -> MagicMock:
        resp = MagicMock()
        resp.status_code = status_code
        resp.reason = reason
        resp.content = _body(payload)
        session = MagicMock()
        if side_effect is not None:
            session.get.side_effect = side_effect
        else:
            session.get.return_value = resp
        return session

    return factory


@pytest.fixture
def mock_transport() -> Callable[..., tuple[httpx.MockTransport, list[httpx.Request]]]:
    """Factory for an ``httpx.MockTransport`` plus the list of requests it saw."""

    def factory(
        payload: Any = None,
        status_code: int = 200,
        side_effect: Exception | None = None,
    ) -> tuple[httpx.MockTransport, list[httpx.Request]]:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if side_effect is not None:
                raise side_effect
            return httpx.Response(status_code, content=_body(payload))

        return httpx.MockTransport(handler), seen

    return factory
