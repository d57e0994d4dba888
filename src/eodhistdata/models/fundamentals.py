"""Fundamentals data models.

The service groups fundamentals into named sections; only the sections
below are modelled. JSON keys are PascalCase, with the service's own
spelling of acronyms (``ISIN``, ``PERatio``, ``RevenueTTM``) aliased
explicitly. Apart from ``AssetInformation.code`` every member is optional
since coverage varies by instrument type and exchange.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr
from pydantic.dataclasses import dataclass

from eodhistdata.models.base import PASCAL_CONFIG

OptStr = StrictStr | None
OptFloat = StrictFloat | None
OptInt = StrictInt | None


@dataclass(frozen=True, config=PASCAL_CONFIG)
class AssetInformation:
    """Descriptive data for an instrument (``General`` section)."""

    code: StrictStr
    asset_type: Annotated[OptStr, Field(alias="Type")] = None
    name: OptStr = None
    exchange: OptStr = None
    currency_code: OptStr = None
    currency_name: OptStr = None
    currency_symbol: OptStr = None
    country_name: OptStr = None
    country_iso: Annotated[OptStr, Field(alias="CountryISO")] = None
    isin: Annotated[OptStr, Field(alias="ISIN")] = None
    lei: Annotated[OptStr, Field(alias="LEI")] = None
    primary_ticker: OptStr = None
    cusip: Annotated[OptStr, Field(alias="CUSIP")] = None
    cik: Annotated[OptStr, Field(alias="CIK")] = None
    ipo_date: Annotated[OptStr, Field(alias="IPODate")] = None
    sector: OptStr = None
    industry: OptStr = None
    gic_sector: OptStr = None
    gic_group: OptStr = None
    gic_industry: OptStr = None
    gic_sub_industry: OptStr = None
    home_category: OptStr = None
    is_delisted: StrictBool | None = None


@dataclass(frozen=True, config=PASCAL_CONFIG)
class Highlights:
    """Headline financial metrics (``Highlights`` section)."""

    market_capitalization: OptFloat = None
    market_capitalization_mln: OptFloat = None
    ebitda: Annotated[OptFloat, Field(alias="EBITDA")] = None
    pe_ratio: Annotated[OptFloat, Field(alias="PERatio")] = None
    peg_ratio: Annotated[OptFloat, Field(alias="PEGRatio")] = None
    wall_street_target_price: OptFloat = None
    book_value: OptFloat = None
    dividend_share: OptFloat = None
    dividend_yield: OptFloat = None
    earnings_share: OptFloat = None
    eps_estimate_current_year: Annotated[OptFloat, Field(alias="EPSEstimateCurrentYear")] = None
    eps_estimate_next_year: Annotated[OptFloat, Field(alias="EPSEstimateNextYear")] = None
    eps_estimate_next_quarter: Annotated[OptFloat, Field(alias="EPSEstimateNextQuarter")] = None
    eps_estimate_current_quarter: Annotated[
        OptFloat, Field(alias="EPSEstimateCurrentQuarter")
    ] = None
    most_recent_quarter: OptStr = None
    profit_margin: OptFloat = None
    operating_margin_ttm: Annotated[OptFloat, Field(alias="OperatingMarginTTM")] = None
    return_on_assets_ttm: Annotated[OptFloat, Field(alias="ReturnOnAssetsTTM")] = None
    return_on_equity_ttm: Annotated[OptFloat, Field(alias="ReturnOnEquityTTM")] = None
    revenue_ttm: Annotated[OptFloat, Field(alias="RevenueTTM")] = None
    revenue_per_share_ttm: Annotated[OptFloat, Field(alias="RevenuePerShareTTM")] = None
    quarterly_revenue_growth_yoy: Annotated[
        OptFloat, Field(alias="QuarterlyRevenueGrowthYOY")
    ] = None
    gross_profit_ttm: Annotated[OptFloat, Field(alias="GrossProfitTTM")] = None
    diluted_eps_ttm: Annotated[OptFloat, Field(alias="DilutedEpsTTM")] = None
    quarterly_earnings_growth_yoy: Annotated[
        OptFloat, Field(alias="QuarterlyEarningsGrowthYOY")
    ] = None


@dataclass(frozen=True, config=PASCAL_CONFIG)
class Valuation:
    """Valuation ratios (``Valuation`` section)."""

    trailing_pe: Annotated[OptFloat, Field(alias="TrailingPE")] = None
    forward_pe: Annotated[OptFloat, Field(alias="ForwardPE")] = None
    price_sales_ttm: Annotated[OptFloat, Field(alias="PriceSalesTTM")] = None
    price_book_mrq: Annotated[OptFloat, Field(alias="PriceBookMRQ")] = None
    enterprise_value: OptFloat = None
    enterprise_value_revenue: OptFloat = None
    enterprise_value_ebitda: OptFloat = None


@dataclass(frozen=True, config=PASCAL_CONFIG)
class SharesStats:
    """Share count and ownership statistics (``SharesStats`` section)."""

    shares_outstanding: OptInt = None
    shares_float: OptInt = None
    percent_insiders: OptFloat = None
    percent_institutions: OptFloat = None
    shares_short: OptInt = None
    shares_short_prior_month: OptInt = None
    short_ratio: OptFloat = None
    short_percent_outstanding: OptFloat = None
    short_percent_float: OptFloat = None


@dataclass(frozen=True, config=PASCAL_CONFIG)
class FundamentalsResponse:
    """Fundamentals for one instrument.

    Attributes:
        general: Descriptive data.
        highlights: Headline financial metrics.
        valuation: Valuation ratios.
        shares_stats: Share statistics.
    """

    general: AssetInformation
    highlights: Highlights
    valuation: Valuation
    shares_stats: SharesStats
