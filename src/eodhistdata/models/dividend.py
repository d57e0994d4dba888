"""Dividend data model."""

from __future__ import annotations

from pydantic import StrictFloat, StrictStr
from pydantic.dataclasses import dataclass

from eodhistdata.models.base import CAMEL_CONFIG


@dataclass(frozen=True, config=CAMEL_CONFIG)
class Dividend:
    """Dividend distribution event.

    Dates are kept as ``YYYY-MM-DD`` strings exactly as the service sends
    them. JSON keys are the camelCase forms of the attribute names.

    Attributes:
        currency: Currency code of the payment.
        date: Ex-dividend date.
        payment_date: Payment date.
        period: Period label (Quarterly, Annual, ...).
        record_date: Record date.
        unadjusted_value: Amount per share as declared.
        value: Amount per share adjusted for later splits.
        declaration_date: Declaration date, when known.
    """

    currency: StrictStr
    date: StrictStr
    payment_date: StrictStr
    period: StrictStr
    record_date: StrictStr
    unadjusted_value: StrictFloat
    value: StrictFloat
    declaration_date: StrictStr | None = None
