"""DataFrame helpers for DataFrame-oriented workflows.

Records are flattened column-for-column; nothing is computed or renamed
beyond prefixing the members of nested groups (``general_code``,
``highlights_pe_ratio``, ...).
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Any, Sequence

import pandas as pd


def record_to_dict(record: Any, prefix: str = "") -> dict[str, Any]:
    """Flatten one model instance into a column -> value mapping."""
    row: dict[str, Any] = {}
    for f in fields(record):
        value = getattr(record, f.name)
        name = f"{prefix}{f.name}"
        if is_dataclass(value):
            row.update(record_to_dict(value, prefix=f"{name}_"))
        else:
            row[name] = value
    return row


def to_frame(records: Sequence[Any], index: str | None = None) -> pd.DataFrame:
    """Build a DataFrame with one row per record, in the given order.

    Args:
        records: Model instances of a single type.
        index: Optional column to promote to the index (e.g. ``"date"``).

    Returns:
        DataFrame; empty (no columns) when ``records`` is empty.
    """
    df = pd.DataFrame([record_to_dict(r) for r in records])
    if index is not None and not df.empty:
        df = df.set_index(index)
    return df
