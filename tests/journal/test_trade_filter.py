# tests/journal/test_trade_filter.py
"""Tests for TradeFilter."""
from datetime import date, datetime, timezone

import pytest

from src.journal.models import (
    CurrencyPair,
    FilterCriteria,
    TimeRange,
    Timeframe,
    TradeRecord,
    TradeType,
)
from src.journal.trade_filter import TradeFilter, subtract_months


def make_trade(
    trade_id: str,
    pair: CurrencyPair = CurrencyPair.EUR_USD,
    timeframe: Timeframe = Timeframe.H4,
    trade_type: TradeType = TradeType.BUY,
    entry_date: datetime = datetime(2026, 3, 2, 8, 0, 0),
    profit_loss: float | None = None,
    notes: str | None = None,
) -> TradeRecord:
    """Create a TradeRecord for testing."""
    return TradeRecord(
        id=trade_id,
        pair=pair,
        timeframe=timeframe,
        type=trade_type,
        entry_price=1.0850,
        stop_loss=1.0800,
        take_profit=1.0950,
        entry_date=entry_date,
        profit_loss=profit_loss,
        risk_reward_ratio=2.0,
        notes=notes,
    )


@pytest.fixture
def trades() -> list[TradeRecord]:
    """A small mixed trade history."""
    return [
        make_trade("1", CurrencyPair.XAU_USD, Timeframe.H1, TradeType.BUY,
                   datetime(2026, 1, 5, 9, 0), 120.0, "Gold breakout above range"),
        make_trade("2", CurrencyPair.EUR_USD, Timeframe.H4, TradeType.SELL,
                   datetime(2026, 1, 10, 14, 30), -45.0, None),
        make_trade("3", CurrencyPair.GBP_JPY, Timeframe.D1, TradeType.BUY,
                   datetime(2026, 1, 15, 0, 0), None, "waiting for eur news"),
        make_trade("4", CurrencyPair.EUR_GBP, Timeframe.H4, TradeType.BUY,
                   datetime(2026, 1, 20, 16, 0), 0.0, "scratch"),
    ]


def ids(records: list[TradeRecord]) -> list[str]:
    return [r.id for r in records]


class TestTradeFilter:
    """Tests for TradeFilter.apply."""

    def test_empty_criteria_returns_copy_in_order(self, trades):
        """Empty criteria keep every record in order, as a new list."""
        result = TradeFilter().apply(trades, FilterCriteria())

        assert result == trades
        assert result is not trades

    def test_does_not_mutate_input(self, trades):
        """Filtering never changes the source list."""
        before = list(trades)

        TradeFilter().apply(trades, FilterCriteria(pair=CurrencyPair.XAU_USD))

        assert trades == before

    def test_search_matches_pair_case_insensitive(self, trades):
        """Search matches a substring of the pair."""
        result = TradeFilter().apply(trades, FilterCriteria(search="eur"))

        # "3" matches through its notes, "2" and "4" through the pair
        assert ids(result) == ["2", "3", "4"]

    def test_search_matches_notes(self, trades):
        """Search matches a substring of the notes."""
        result = TradeFilter().apply(trades, FilterCriteria(search="BREAKOUT"))

        assert ids(result) == ["1"]

    def test_search_without_match(self, trades):
        """Records with no notes only match through their pair."""
        result = TradeFilter().apply(trades, FilterCriteria(search="usd/chf"))

        assert result == []

    def test_exact_pair_timeframe_and_type(self, trades):
        """Exact criteria are AND'ed together."""
        criteria = FilterCriteria(timeframe=Timeframe.H4, type=TradeType.BUY)

        assert ids(TradeFilter().apply(trades, criteria)) == ["4"]
        assert ids(TradeFilter().apply(trades, FilterCriteria(pair=CurrencyPair.GBP_JPY))) == ["3"]

    def test_date_bounds_are_inclusive(self, trades):
        """Records exactly on either bound are kept."""
        criteria = FilterCriteria(
            date_from=datetime(2026, 1, 10, 14, 30),
            date_to=datetime(2026, 1, 15, 0, 0),
        )

        assert ids(TradeFilter().apply(trades, criteria)) == ["2", "3"]

    def test_plain_date_bound_compares_at_midnight(self, trades):
        """A date bound without time is midnight, so later entries that day are excluded."""
        criteria = FilterCriteria(date_to=date(2026, 1, 10))

        assert ids(TradeFilter().apply(trades, criteria)) == ["1"]

        criteria = FilterCriteria(date_from=date(2026, 1, 15))

        assert ids(TradeFilter().apply(trades, criteria)) == ["3", "4"]

    def test_naive_bound_against_aware_entry(self):
        """Naive bounds are treated as UTC when entries carry a timezone."""
        trade = make_trade("tz", entry_date=datetime(2026, 1, 10, 12, 0, tzinfo=timezone.utc))

        assert TradeFilter().apply([trade], FilterCriteria(date_from=date(2026, 1, 10))) == [trade]
        assert TradeFilter().apply([trade], FilterCriteria(date_to=date(2026, 1, 10))) == []

    def test_profit_only(self, trades):
        """profit_only keeps strictly positive results and excludes open trades."""
        result = TradeFilter().apply(trades, FilterCriteria(profit_only=True))

        assert ids(result) == ["1"]
        assert all(r.profit_loss is not None and r.profit_loss > 0 for r in result)

    def test_loss_only(self, trades):
        """loss_only keeps strictly negative results."""
        result = TradeFilter().apply(trades, FilterCriteria(loss_only=True))

        assert ids(result) == ["2"]

    def test_profit_and_loss_only_together_match_nothing(self, trades):
        """Both flags are applied literally."""
        criteria = FilterCriteria(profit_only=True, loss_only=True)

        assert TradeFilter().apply(trades, criteria) == []


class TestTimeRange:
    """Tests for TradeFilter.apply_time_range."""

    def test_all_keeps_everything(self, trades):
        """ALL returns a copy of every record."""
        result = TradeFilter().apply_time_range(trades, TimeRange.ALL)

        assert result == trades
        assert result is not trades

    def test_one_month(self, trades):
        """Only trades on or after the cutoff are kept."""
        now = datetime(2026, 2, 15, 0, 0)

        result = TradeFilter().apply_time_range(trades, TimeRange.ONE_MONTH, now=now)

        assert ids(result) == ["3", "4"]

    def test_one_year(self, trades):
        """A year back keeps the whole history."""
        now = datetime(2026, 6, 1)

        result = TradeFilter().apply_time_range(trades, TimeRange.ONE_YEAR, now=now)

        assert len(result) == 4


class TestSubtractMonths:
    """Tests for calendar month arithmetic."""

    def test_simple(self):
        assert subtract_months(datetime(2026, 5, 20, 10, 0), 3) == datetime(2026, 2, 20, 10, 0)

    def test_crosses_year(self):
        assert subtract_months(datetime(2026, 1, 15), 1) == datetime(2025, 12, 15)

    def test_clamps_to_month_end(self):
        assert subtract_months(datetime(2026, 3, 31), 1) == datetime(2026, 2, 28)
        assert subtract_months(datetime(2024, 3, 31), 1) == datetime(2024, 2, 29)
