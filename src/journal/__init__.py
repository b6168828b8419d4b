# src/journal/__init__.py
"""Journal module for trade history and analytics."""

from .journal_manager import JournalManager
from .metrics_calculator import MetricsCalculator
from .models import (
    AggregateStats,
    CurrencyPair,
    DashboardSummary,
    FilterCriteria,
    MarketSentiment,
    SortDirection,
    SortSpec,
    TimeRange,
    Timeframe,
    TradeRecord,
    TradeType,
)
from .risk_reward import calculate_profit_loss, calculate_risk_reward
from .settings import JournalSettings, RiskLevel, RiskPreferences
from .trade_factory import TradeFactory
from .trade_filter import TradeFilter
from .trade_form import TradeForm
from .trade_sorter import TradeSorter
from .trade_store import JsonTradeStore

__all__ = [
    "AggregateStats",
    "CurrencyPair",
    "DashboardSummary",
    "FilterCriteria",
    "JournalManager",
    "JournalSettings",
    "JsonTradeStore",
    "MarketSentiment",
    "MetricsCalculator",
    "RiskLevel",
    "RiskPreferences",
    "SortDirection",
    "SortSpec",
    "TimeRange",
    "Timeframe",
    "TradeFactory",
    "TradeFilter",
    "TradeForm",
    "TradeRecord",
    "TradeSorter",
    "TradeType",
    "calculate_profit_loss",
    "calculate_risk_reward",
]
