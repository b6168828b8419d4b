# tests/journal/test_models.py
"""Tests for journal models."""
import dataclasses
from datetime import date, datetime, timedelta, timezone

import pytest

from src.journal.models import (
    CurrencyPair,
    FilterCriteria,
    SortDirection,
    SortSpec,
    TimeRange,
    Timeframe,
    TradeRecord,
    TradeType,
    as_utc,
)


def make_trade(**overrides) -> TradeRecord:
    """Create a TradeRecord for testing."""
    values = dict(
        id="t-1",
        pair=CurrencyPair.EUR_USD,
        timeframe=Timeframe.H4,
        type=TradeType.BUY,
        entry_price=1.0850,
        stop_loss=1.0800,
        take_profit=1.0950,
        entry_date=datetime(2026, 3, 2, 8, 0, 0),
        risk_reward_ratio=2.0,
    )
    values.update(overrides)
    return TradeRecord(**values)


class TestTradeRecord:
    """Tests for TradeRecord dataclass."""

    def test_optional_fields_default_to_none(self):
        """A record created with required fields has no exit data."""
        trade = make_trade()

        assert trade.exit_price is None
        assert trade.exit_date is None
        assert trade.profit_loss is None
        assert trade.market_sentiment is None
        assert trade.notes is None

    def test_is_open_without_exit_date(self):
        """is_open should be True until the trade has an exit date."""
        assert make_trade().is_open is True
        assert make_trade(exit_date=datetime(2026, 3, 3, 8, 0, 0)).is_open is False

    def test_record_is_frozen(self):
        """Records cannot be mutated in place."""
        trade = make_trade()

        with pytest.raises(dataclasses.FrozenInstanceError):
            trade.notes = "changed"

    def test_replace_produces_new_record(self):
        """Updates go through dataclasses.replace."""
        trade = make_trade()

        updated = dataclasses.replace(trade, notes="breakout retest")

        assert updated.notes == "breakout retest"
        assert trade.notes is None

    def test_enum_values_match_labels(self):
        """Enum values are the labels shown to the user."""
        assert CurrencyPair.XAU_USD.value == "XAU/USD"
        assert CurrencyPair("Other") is CurrencyPair.OTHER
        assert TradeType("Sell") is TradeType.SELL
        assert [tf.value for tf in Timeframe] == ["M5", "M15", "M30", "H1", "H4", "D1", "W1", "MN"]


class TestFilterCriteria:
    """Tests for FilterCriteria."""

    def test_default_is_empty(self):
        """Default criteria have no active filters."""
        criteria = FilterCriteria()

        assert criteria.is_empty is True
        assert criteria.active_count == 0

    def test_search_alone_is_not_counted(self):
        """The search box does not count toward the active filter badge."""
        criteria = FilterCriteria(search="gold")

        assert criteria.active_count == 0
        assert criteria.is_empty is False

    def test_active_count(self):
        """Each set criterion counts once."""
        criteria = FilterCriteria(
            pair=CurrencyPair.GBP_USD,
            timeframe=Timeframe.D1,
            date_from=date(2026, 1, 1),
            profit_only=True,
        )

        assert criteria.active_count == 4


class TestSortSpec:
    """Tests for the sort toggle rule."""

    def test_first_request_is_ascending(self):
        """Selecting a column with no active sort sorts ascending."""
        spec = SortSpec.request(None, "entry_date")

        assert spec == SortSpec("entry_date", SortDirection.ASC)

    def test_same_key_toggles_to_descending(self):
        """Selecting the same column while ascending switches to descending."""
        spec = SortSpec.request(SortSpec("profit_loss", SortDirection.ASC), "profit_loss")

        assert spec.direction == SortDirection.DESC

    def test_same_key_descending_goes_back_to_ascending(self):
        """Selecting the same column while descending switches back to ascending."""
        spec = SortSpec.request(SortSpec("profit_loss", SortDirection.DESC), "profit_loss")

        assert spec.direction == SortDirection.ASC

    def test_new_key_resets_to_ascending(self):
        """Selecting a different column resets the direction."""
        spec = SortSpec.request(SortSpec("pair", SortDirection.DESC), "entry_price")

        assert spec == SortSpec("entry_price", SortDirection.ASC)


class TestTimeRange:
    """Tests for TimeRange."""

    def test_months(self):
        """Each window maps to a number of months."""
        assert TimeRange.ALL.months is None
        assert TimeRange.ONE_MONTH.months == 1
        assert TimeRange.THREE_MONTHS.months == 3
        assert TimeRange.SIX_MONTHS.months == 6
        assert TimeRange.ONE_YEAR.months == 12

    def test_from_value(self):
        """Windows parse from their short codes."""
        assert TimeRange("3m") is TimeRange.THREE_MONTHS


class TestAsUtc:
    """Tests for as_utc."""

    def test_naive_datetime_is_treated_as_utc(self):
        assert as_utc(datetime(2026, 1, 5, 8, 0)) == datetime(2026, 1, 5, 8, 0, tzinfo=timezone.utc)

    def test_plain_date_is_midnight(self):
        assert as_utc(date(2026, 1, 5)) == datetime(2026, 1, 5, tzinfo=timezone.utc)

    def test_aware_datetime_is_kept(self):
        """Aware values keep their offset and still order against naive ones."""
        eastern = timezone(timedelta(hours=-5))
        value = datetime(2026, 1, 5, 8, 0, tzinfo=eastern)

        assert as_utc(value) is value
        assert as_utc(datetime(2026, 1, 5, 12, 0)) < as_utc(value)
