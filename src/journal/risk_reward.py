# src/journal/risk_reward.py
"""Risk:reward and profit/loss formulas used when a trade is entered."""
from src.journal.models import TradeType


def _risk_and_reward(
    trade_type: TradeType, entry_price: float, stop_loss: float, take_profit: float
) -> tuple[float, float]:
    if trade_type == TradeType.BUY:
        return entry_price - stop_loss, take_profit - entry_price
    return stop_loss - entry_price, entry_price - take_profit


def calculate_risk_reward(
    trade_type: TradeType,
    entry_price: float,
    stop_loss: float,
    take_profit: float,
) -> float:
    """Calculate the risk:reward ratio of a trade setup.

    Args:
        trade_type: Buy or Sell.
        entry_price: Planned entry price.
        stop_loss: Stop loss price.
        take_profit: Take profit price.

    Returns:
        Reward distance divided by risk distance, unrounded. Returns 0.0 when
        the stop is on the wrong side of the entry or has zero width.
    """
    risk, reward = _risk_and_reward(trade_type, entry_price, stop_loss, take_profit)

    if risk <= 0:
        return 0.0

    return reward / risk


def is_degenerate_risk(
    trade_type: TradeType,
    entry_price: float,
    stop_loss: float,
    take_profit: float,
) -> bool:
    """Check whether the stop loss leaves no risk distance."""
    risk, _ = _risk_and_reward(trade_type, entry_price, stop_loss, take_profit)
    return risk <= 0


def round_risk_reward(ratio: float) -> float:
    """Round a ratio to 2 decimals for display."""
    return round(ratio, 2)


def calculate_profit_loss(
    trade_type: TradeType,
    entry_price: float,
    exit_price: float | None,
    multiplier: float = 100.0,
) -> float | None:
    """Calculate the realized profit/loss of a trade.

    Args:
        trade_type: Buy or Sell.
        entry_price: Entry price.
        exit_price: Exit price, or None while the trade is open.
        multiplier: Price-distance to money multiplier.

    Returns:
        Signed profit/loss, or None when there is no exit price.
    """
    if exit_price is None:
        return None

    if trade_type == TradeType.BUY:
        return (exit_price - entry_price) * multiplier
    return (entry_price - exit_price) * multiplier
