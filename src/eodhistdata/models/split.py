"""Split data model."""

from __future__ import annotations

from pydantic import StrictStr
from pydantic.dataclasses import dataclass

from eodhistdata.models.base import RECORD_CONFIG


@dataclass(frozen=True, config=RECORD_CONFIG)
class Split:
    """Stock split event.

    Attributes:
        date: Effective date as ``YYYY-MM-DD``.
        split: Ratio as sent by the service, e.g. ``"4.000000/1.000000"``.
    """

    date: StrictStr
    split: StrictStr
