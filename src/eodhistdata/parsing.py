"""Deserialize decoded JSON payloads into response models.

Validation is done by pydantic against the model definitions; every
``ValidationError`` surfaces as ``DeserializeFailedError`` with the
offending JSON keys in the message.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from eodhistdata.errors import DeserializeFailedError
from eodhistdata.models.dividend import Dividend
from eodhistdata.models.exchange import Exchange, Ticker
from eodhistdata.models.fundamentals import FundamentalsResponse
from eodhistdata.models.quote import EODQuote, HistoricQuote, RealTimeQuote
from eodhistdata.models.split import Split

T = TypeVar("T")

_REAL_TIME_QUOTE = TypeAdapter(RealTimeQuote)
_HISTORIC_QUOTES = TypeAdapter(list[HistoricQuote])
_EOD_QUOTES = TypeAdapter(list[EODQuote])
_DIVIDENDS = TypeAdapter(list[Dividend])
_SPLITS = TypeAdapter(list[Split])
_FUNDAMENTALS = TypeAdapter(FundamentalsResponse)
# bulk pages come either as an array or keyed by position
_FUNDAMENTALS_BULK = TypeAdapter(
    Union[list[FundamentalsResponse], dict[str, FundamentalsResponse]]
)
_EXCHANGES = TypeAdapter(list[Exchange])
_TICKERS = TypeAdapter(list[Ticker])


def _describe(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(part) for part in err["loc"]) or "<root>"
        problems.append(f"{loc}: {err['msg']}")
    return "; ".join(problems)


def _validate(adapter: TypeAdapter[T], data: Any, what: str) -> T:
    try:
        return adapter.validate_python(data)
    except ValidationError as exc:
        raise DeserializeFailedError(f"{what}: {_describe(exc)}") from exc


def decode_json(content: bytes | str) -> Any:
    """Decode a response body, raising ``DeserializeFailedError`` on bad JSON."""
    try:
        return json.loads(content)
    except ValueError as exc:
        raise DeserializeFailedError(f"response body is not valid JSON: {exc}") from exc


def parse_real_time_quote(data: Any) -> RealTimeQuote:
    return _validate(_REAL_TIME_QUOTE, data, "RealTimeQuote")


def parse_historic_quotes(data: Any) -> list[HistoricQuote]:
    """Parse a quote history, keeping server order."""
    return _validate(_HISTORIC_QUOTES, data, "HistoricQuote list")


def parse_eod_quotes(data: Any) -> list[EODQuote]:
    return _validate(_EOD_QUOTES, data, "EODQuote list")


def parse_dividends(data: Any) -> list[Dividend]:
    return _validate(_DIVIDENDS, data, "Dividend list")


def parse_splits(data: Any) -> list[Split]:
    return _validate(_SPLITS, data, "Split list")


def parse_exchanges(data: Any) -> list[Exchange]:
    return _validate(_EXCHANGES, data, "Exchange list")


def parse_tickers(data: Any) -> list[Ticker]:
    return _validate(_TICKERS, data, "Ticker list")


def parse_fundamentals(data: Any) -> FundamentalsResponse:
    """Parse the four modelled sections; other sections are ignored."""
    return _validate(_FUNDAMENTALS, data, "FundamentalsResponse")


def parse_fundamentals_bulk(data: Any) -> list[FundamentalsResponse]:
    """Parse a bulk fundamentals page.

    The service sends either an array or an object keyed by position
    (``{"0": {...}, "1": {...}}``); both keep the order they arrive in.
    """
    page = _validate(_FUNDAMENTALS_BULK, data, "FundamentalsResponse page")
    if isinstance(page, dict):
        return list(page.values())
    return page
