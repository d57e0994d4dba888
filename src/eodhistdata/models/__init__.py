"""EOD Historical Data response models."""

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

__all__ = [
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
]
