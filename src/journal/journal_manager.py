# src/journal/journal_manager.py
"""Manager for orchestrating all journal components."""
import logging
from dataclasses import replace
from datetime import datetime

from src.journal.metrics_calculator import MetricsCalculator
from src.journal.models import (
    AggregateStats,
    DashboardSummary,
    FilterCriteria,
    SortSpec,
    TimeRange,
    TradeRecord,
    as_utc,
)
from src.journal.risk_reward import calculate_profit_loss
from src.journal.settings import JournalSettings
from src.journal.trade_factory import TradeFactory
from src.journal.trade_filter import TradeFilter
from src.journal.trade_form import TradeForm
from src.journal.trade_sorter import TradeSorter
from src.journal.trade_store import JsonTradeStore

logger = logging.getLogger(__name__)


class JournalManager:
    """Orchestrates all journal components for trade logging and analysis.

    Holds the loaded trade records and coordinates TradeFilter, TradeSorter,
    MetricsCalculator and TradeFactory behind the history, analytics and
    dashboard views.
    """

    def __init__(
        self,
        settings: JournalSettings,
        store: JsonTradeStore | None = None,
    ) -> None:
        """Initialize the journal manager with all components.

        Args:
            settings: Journal configuration settings.
            store: Trade store, defaults to the JSON file in settings.
        """
        self._settings = settings
        self._store = store or JsonTradeStore(settings.data_file)
        self._factory = TradeFactory(settings.profit_loss_multiplier)
        self._filter = TradeFilter()
        self._sorter = TradeSorter()
        self._metrics_calculator = MetricsCalculator()
        self._records: list[TradeRecord] = []

    @property
    def records(self) -> list[TradeRecord]:
        """Get a copy of all loaded trade records."""
        return list(self._records)

    async def load(self) -> int:
        """Load trade records from the store.

        Returns:
            Number of records loaded.
        """
        self._records = await self._store.load()
        return len(self._records)

    async def save(self) -> None:
        """Write the current trade records to the store."""
        await self._store.save(self._records)

    def add_trade(
        self, form: TradeForm, screenshot_url: str | None = None
    ) -> TradeRecord:
        """Log a new trade.

        Args:
            form: Validated trade form.
            screenshot_url: Location of an already uploaded chart screenshot.

        Returns:
            The created TradeRecord.
        """
        record = self._factory.create(form, screenshot_url=screenshot_url)
        self._records.append(record)
        logger.info(f"Logged {record.type.value} {record.pair.value} trade {record.id}")
        return record

    def close_trade(
        self, trade_id: str, exit_price: float, exit_date: datetime
    ) -> TradeRecord:
        """Record the exit of a trade and calculate its profit/loss.

        Args:
            trade_id: The trade ID to update.
            exit_price: The exit price.
            exit_date: When the trade was closed.

        Returns:
            The updated TradeRecord.

        Raises:
            KeyError: If no trade has the given ID.
            ValueError: If exit_price is not positive or exit_date is before entry.
        """
        index, record = self._find(trade_id)

        if exit_price <= 0:
            raise ValueError(f"Invalid exit price: {exit_price}. Must be positive")
        if as_utc(exit_date) < as_utc(record.entry_date):
            raise ValueError(f"Exit date {exit_date.isoformat()} is before entry date")

        updated = replace(
            record,
            exit_price=exit_price,
            exit_date=exit_date,
            profit_loss=calculate_profit_loss(
                record.type,
                record.entry_price,
                exit_price,
                self._settings.profit_loss_multiplier,
            ),
        )
        self._records[index] = updated
        logger.info(f"Closed trade {trade_id} with P/L {updated.profit_loss:.2f}")
        return updated

    def add_notes(self, trade_id: str, notes: str) -> TradeRecord:
        """Replace the notes of a trade.

        Args:
            trade_id: The trade ID to update.
            notes: The notes to store.

        Returns:
            The updated TradeRecord.
        """
        index, record = self._find(trade_id)
        updated = replace(record, notes=notes)
        self._records[index] = updated
        return updated

    def _find(self, trade_id: str) -> tuple[int, TradeRecord]:
        for index, record in enumerate(self._records):
            if record.id == trade_id:
                return index, record
        raise KeyError(f"Trade not found: {trade_id}")

    def history(
        self,
        criteria: FilterCriteria | None = None,
        sort_spec: SortSpec | None = None,
    ) -> list[TradeRecord]:
        """Get the trade history view.

        Args:
            criteria: Active filters, None for no filtering.
            sort_spec: Active sort, None to keep the loaded order.

        Returns:
            Filtered and sorted trade records.
        """
        filtered = self._filter.apply(self._records, criteria or FilterCriteria())
        return self._sorter.sort(filtered, sort_spec)

    def analytics(
        self,
        time_range: TimeRange | None = None,
        now: datetime | None = None,
    ) -> AggregateStats:
        """Get aggregate statistics for an analytics window.

        Args:
            time_range: Window to analyze, defaults to the configured one.
            now: Reference time for the window.

        Returns:
            AggregateStats for trades entered within the window.
        """
        window = time_range or self._settings.default_time_range
        records = self._filter.apply_time_range(self._records, window, now=now)
        return self._metrics_calculator.calculate(records)

    def dashboard(self) -> DashboardSummary:
        """Get the dashboard overview.

        Returns:
            DashboardSummary with stats over all trades and the most
            recently entered ones.
        """
        recent = sorted(
            self._records, key=lambda r: as_utc(r.entry_date), reverse=True
        )
        return DashboardSummary(
            stats=self._metrics_calculator.calculate(self._records),
            recent_trades=recent[: self._settings.recent_trades_limit],
        )
