"""Exchange and ticker reference data models."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StrictStr
from pydantic.dataclasses import dataclass

from eodhistdata.models.base import PASCAL_CONFIG


@dataclass(frozen=True, config=PASCAL_CONFIG)
class Exchange:
    """Exchange supported by the service.

    Attributes:
        name: Exchange name.
        code: Exchange code used as ticker suffix (``US``, ``LSE``, ...).
        country: Country name.
        currency: Trading currency.
        country_iso2: ISO 3166 alpha-2 country code.
        country_iso3: ISO 3166 alpha-3 country code.
        operating_mic: Comma-separated operating MICs, absent for virtual
            exchanges.
    """

    name: StrictStr
    code: StrictStr
    country: StrictStr
    currency: StrictStr
    country_iso2: Annotated[StrictStr, Field(alias="CountryISO2")]
    country_iso3: Annotated[StrictStr, Field(alias="CountryISO3")]
    operating_mic: Annotated[StrictStr | None, Field(alias="OperatingMIC")] = None


@dataclass(frozen=True, config=PASCAL_CONFIG)
class Ticker:
    """Instrument listed on an exchange.

    Attributes:
        code: Ticker code without exchange suffix.
        name: Instrument name.
        country: Country name.
        exchange: Exchange the instrument trades on.
        currency: Trading currency.
        asset_type: Instrument type (Common Stock, ETF, FUND, ...).
        isin: ISIN, when known.
    """

    code: StrictStr
    name: StrictStr
    country: StrictStr
    exchange: StrictStr
    currency: StrictStr
    asset_type: Annotated[StrictStr, Field(alias="Type")]
    isin: StrictStr | None = None
