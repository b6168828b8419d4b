# src/journal/trade_filter.py
"""Predicate-based filtering of trade records."""
import calendar
from datetime import datetime

from src.journal.models import FilterCriteria, TimeRange, TradeRecord, as_utc


def subtract_months(moment: datetime, months: int) -> datetime:
    """Step a datetime back by calendar months.

    The day is clamped to the length of the target month, so
    March 31st minus one month is the last day of February.
    """
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


class TradeFilter:
    """Filters trade records by history view criteria."""

    def apply(
        self, records: list[TradeRecord], criteria: FilterCriteria
    ) -> list[TradeRecord]:
        """Filter trade records.

        A record is kept only when it satisfies every active criterion.
        The input list is never modified.

        Args:
            records: Trade records to filter.
            criteria: Active filter criteria.

        Returns:
            New list with the matching records in their input order.
        """
        if criteria.is_empty:
            return list(records)

        return [record for record in records if self.matches(record, criteria)]

    def matches(self, record: TradeRecord, criteria: FilterCriteria) -> bool:
        """Check a single record against all active criteria."""
        if criteria.search and not self._matches_search(record, criteria.search):
            return False

        if criteria.pair is not None and record.pair != criteria.pair:
            return False

        if criteria.timeframe is not None and record.timeframe != criteria.timeframe:
            return False

        if criteria.type is not None and record.type != criteria.type:
            return False

        if criteria.date_from is not None:
            if as_utc(record.entry_date) < as_utc(criteria.date_from):
                return False

        if criteria.date_to is not None:
            if as_utc(record.entry_date) > as_utc(criteria.date_to):
                return False

        # profit_only and loss_only are AND'ed; both set matches nothing
        if criteria.profit_only and (record.profit_loss is None or record.profit_loss <= 0):
            return False

        if criteria.loss_only and (record.profit_loss is None or record.profit_loss >= 0):
            return False

        return True

    def _matches_search(self, record: TradeRecord, search: str) -> bool:
        term = search.lower()
        if term in record.pair.value.lower():
            return True
        return record.notes is not None and term in record.notes.lower()

    def apply_time_range(
        self,
        records: list[TradeRecord],
        time_range: TimeRange,
        now: datetime | None = None,
    ) -> list[TradeRecord]:
        """Keep trades entered within the analytics window.

        Args:
            records: Trade records to filter.
            time_range: Window to keep.
            now: Reference time, defaults to the current time.

        Returns:
            New list of records with entry_date on or after the cutoff.
        """
        months = time_range.months
        if months is None:
            return list(records)

        cutoff = as_utc(subtract_months(now or datetime.now(), months))

        return [record for record in records if as_utc(record.entry_date) >= cutoff]
