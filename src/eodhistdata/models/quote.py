"""Quote data models (real-time and end-of-day)."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StrictFloat, StrictInt, StrictStr
from pydantic.dataclasses import dataclass

from eodhistdata.models.base import RECORD_CONFIG


@dataclass(frozen=True, config=RECORD_CONFIG)
class RealTimeQuote:
    """Latest (delayed) quote for one ticker.

    Attributes:
        code: Ticker code, e.g. ``AAPL.US``.
        timestamp: UNIX timestamp, seconds since 1970-01-01.
        gmtoffset: UTC offset of the exchange in seconds.
        open: Opening price.
        high: High price.
        low: Low price.
        close: Last price.
        volume: Trading volume.
        previous_close: Previous session's close.
        change: Absolute change from previous close.
        change_p: Percent change from previous close.
    """

    code: StrictStr
    timestamp: StrictInt
    gmtoffset: StrictInt
    open: StrictFloat
    high: StrictFloat
    low: StrictFloat
    close: StrictFloat
    volume: StrictInt
    previous_close: Annotated[StrictFloat, Field(alias="previousClose")]
    change: StrictFloat
    change_p: StrictFloat


@dataclass(frozen=True, config=RECORD_CONFIG)
class HistoricQuote:
    """Single end-of-day row from a ticker's quote history.

    OHLC may be missing for thinly traded instruments; ``adjusted_close``
    is always present.

    Attributes:
        date: Trading day as ``YYYY-MM-DD``.
        adjusted_close: Close adjusted for splits and dividends.
        open: Opening price.
        high: High price.
        low: Low price.
        close: Closing price.
        volume: Trading volume.
    """

    date: StrictStr
    adjusted_close: StrictFloat
    open: StrictFloat | None = None
    high: StrictFloat | None = None
    low: StrictFloat | None = None
    close: StrictFloat | None = None
    volume: StrictFloat | None = None


@dataclass(frozen=True, config=RECORD_CONFIG)
class EODQuote:
    """End-of-day row for one instrument from an exchange-wide bulk download.

    Attributes:
        code: Ticker code without exchange suffix.
        exchange_short_name: Exchange code, e.g. ``US``.
        date: Trading day as ``YYYY-MM-DD``.
        adjusted_close: Close adjusted for splits and dividends.
        open: Opening price.
        high: High price.
        low: Low price.
        close: Closing price.
        volume: Trading volume.
    """

    code: StrictStr
    exchange_short_name: StrictStr
    date: StrictStr
    adjusted_close: StrictFloat
    open: StrictFloat | None = None
    high: StrictFloat | None = None
    low: StrictFloat | None = None
    close: StrictFloat | None = None
    volume: StrictFloat | None = None
