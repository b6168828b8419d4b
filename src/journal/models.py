# src/journal/models.py
"""Data models for the trading journal."""
from dataclasses import dataclass, field, fields
from datetime import date, datetime, timezone
from enum import Enum


class CurrencyPair(str, Enum):
    """Instruments that can be logged in the journal."""

    EUR_USD = "EUR/USD"
    GBP_USD = "GBP/USD"
    USD_JPY = "USD/JPY"
    USD_CHF = "USD/CHF"
    USD_CAD = "USD/CAD"
    AUD_USD = "AUD/USD"
    NZD_USD = "NZD/USD"
    EUR_GBP = "EUR/GBP"
    EUR_JPY = "EUR/JPY"
    GBP_JPY = "GBP/JPY"
    XAU_USD = "XAU/USD"
    OTHER = "Other"


class Timeframe(str, Enum):
    """Chart interval the trade analysis is based on."""

    M5 = "M5"
    M15 = "M15"
    M30 = "M30"
    H1 = "H1"
    H4 = "H4"
    D1 = "D1"
    W1 = "W1"
    MN = "MN"


class TradeType(str, Enum):
    """Trade direction enumeration."""

    BUY = "Buy"
    SELL = "Sell"


class MarketSentiment(str, Enum):
    """Self-reported directional bias at trade entry."""

    STRONG_BULLISH = "Strong Bullish"
    MODERATE_BULLISH = "Moderate Bullish"
    NEUTRAL = "Neutral"
    MODERATE_BEARISH = "Moderate Bearish"
    STRONG_BEARISH = "Strong Bearish"


class SortDirection(str, Enum):
    """Sort order for the trade history."""

    ASC = "asc"
    DESC = "desc"


class TimeRange(str, Enum):
    """Analytics window, in calendar months back from now."""

    ALL = "all"
    ONE_MONTH = "1m"
    THREE_MONTHS = "3m"
    SIX_MONTHS = "6m"
    ONE_YEAR = "1y"

    @property
    def months(self) -> int | None:
        """Number of months covered, or None for the whole history."""
        return {
            TimeRange.ONE_MONTH: 1,
            TimeRange.THREE_MONTHS: 3,
            TimeRange.SIX_MONTHS: 6,
            TimeRange.ONE_YEAR: 12,
        }.get(self)


@dataclass(frozen=True)
class TradeRecord:
    """A single logged trade.

    Records are never mutated in place; updates go through
    ``dataclasses.replace`` and produce a new record.
    """

    id: str
    pair: CurrencyPair
    timeframe: Timeframe
    type: TradeType

    # Prices
    entry_price: float
    stop_loss: float
    take_profit: float
    entry_date: datetime
    exit_price: float | None = None
    exit_date: datetime | None = None

    # Results
    profit_loss: float | None = None
    risk_reward_ratio: float = 0.0

    # Indicators at entry
    bb_upper: float | None = None
    bb_middle: float | None = None
    bb_lower: float | None = None
    macd_line: float | None = None
    macd_signal: float | None = None
    macd_histogram: float | None = None
    stochastic_k: float | None = None
    stochastic_d: float | None = None

    # Context
    market_sentiment: MarketSentiment | None = None
    notes: str | None = None
    screenshot_url: str | None = None
    created_at: datetime | None = None

    @property
    def is_open(self) -> bool:
        """Check if the trade is still open."""
        return self.exit_date is None


TRADE_RECORD_FIELDS = frozenset(f.name for f in fields(TradeRecord))


def as_utc(value: date | datetime) -> datetime:
    """Get a timezone-aware datetime that orders against any other.

    Plain dates become midnight of that day and naive values are
    treated as UTC, so naive and aware timestamps can be mixed.
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(frozen=True)
class FilterCriteria:
    """Conjunction of optional trade history predicates.

    Attributes:
        search: Case-insensitive substring matched against pair or notes.
        pair: Exact pair match.
        timeframe: Exact timeframe match.
        type: Exact trade type match.
        date_from: Inclusive lower bound on entry_date.
        date_to: Inclusive upper bound on entry_date.
        profit_only: Keep only trades with profit_loss > 0.
        loss_only: Keep only trades with profit_loss < 0.
    """

    search: str = ""
    pair: CurrencyPair | None = None
    timeframe: Timeframe | None = None
    type: TradeType | None = None
    date_from: date | datetime | None = None
    date_to: date | datetime | None = None
    profit_only: bool = False
    loss_only: bool = False

    @property
    def active_count(self) -> int:
        """Number of active filters, not counting the search box."""
        optional = (self.pair, self.timeframe, self.type, self.date_from, self.date_to)
        flags = (self.profit_only, self.loss_only)
        return sum(1 for v in optional if v is not None) + sum(1 for f in flags if f)

    @property
    def is_empty(self) -> bool:
        """True when no criterion at all is set."""
        return not self.search and self.active_count == 0


@dataclass(frozen=True)
class SortSpec:
    """Active sort key and direction for the trade history."""

    key: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def request(cls, current: "SortSpec | None", key: str) -> "SortSpec":
        """Get the sort spec that results from selecting a column.

        Args:
            current: The currently active sort, if any.
            key: The column the user selected.

        Returns:
            Descending when the same key is selected while ascending,
            ascending otherwise.
        """
        if current is not None and current.key == key and current.direction == SortDirection.ASC:
            return cls(key=key, direction=SortDirection.DESC)
        return cls(key=key, direction=SortDirection.ASC)


@dataclass
class PairPerformance:
    """Profit/loss for a single currency pair."""

    pair: CurrencyPair
    profit_loss: float
    count: int


@dataclass
class TimeframePerformance:
    """Profit/loss and win rate for a single timeframe."""

    timeframe: Timeframe
    profit_loss: float
    count: int
    win_rate: float


@dataclass
class EquityPoint:
    """One point of the cumulative profit/loss series."""

    entry_date: datetime
    trade_id: str
    cumulative_profit_loss: float


@dataclass
class RiskRewardBucket:
    """A histogram bucket of risk:reward ratios."""

    label: str
    count: int = 0


@dataclass
class AggregateStats:
    """Calculated trading performance statistics."""

    total_trades: int
    winning_trades: int
    losing_trades: int

    total_profit_loss: float
    win_rate: float
    avg_risk_reward: float

    pair_breakdown: list[PairPerformance] = field(default_factory=list)
    timeframe_breakdown: list[TimeframePerformance] = field(default_factory=list)
    cumulative_profit_loss: list[EquityPoint] = field(default_factory=list)
    risk_reward_distribution: list[RiskRewardBucket] = field(default_factory=list)


@dataclass
class DashboardSummary:
    """Overview shown on the journal dashboard."""

    stats: AggregateStats
    recent_trades: list[TradeRecord]
