# src/journal/trade_sorter.py
"""Stable sorting of trade records for the history view."""
from datetime import datetime
from enum import Enum
from typing import Any

from src.journal.models import (
    TRADE_RECORD_FIELDS,
    SortDirection,
    SortSpec,
    TradeRecord,
    as_utc,
)


def _sort_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return as_utc(value)
    return value


class TradeSorter:
    """Sorts trade records by a single field."""

    def sort(
        self, records: list[TradeRecord], spec: SortSpec | None
    ) -> list[TradeRecord]:
        """Sort trade records by the given field and direction.

        Records missing the sort key are always placed after the ones that
        have it, in both directions. Equal keys keep their input order.

        Args:
            records: Trade records to sort.
            spec: Active sort, or None to leave the records as they are.

        Returns:
            The input list itself when spec is None, otherwise a new list.

        Raises:
            ValueError: If the sort key is not a trade record field.
        """
        if spec is None:
            return records

        if spec.key not in TRADE_RECORD_FIELDS:
            raise ValueError(f"Invalid sort key: {spec.key}")

        present = [r for r in records if getattr(r, spec.key) is not None]
        missing = [r for r in records if getattr(r, spec.key) is None]

        ordered = sorted(
            present,
            key=lambda r: _sort_value(getattr(r, spec.key)),
            reverse=spec.direction == SortDirection.DESC,
        )

        return ordered + missing
