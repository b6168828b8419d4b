# src/journal/trade_factory.py
"""Factory building trade records from validated form input."""
import logging
import uuid
from datetime import datetime

from src.journal.models import TradeRecord
from src.journal.risk_reward import (
    calculate_profit_loss,
    calculate_risk_reward,
    is_degenerate_risk,
)
from src.journal.trade_form import TradeForm

logger = logging.getLogger(__name__)


class TradeFactory:
    """Builds TradeRecord instances with their derived fields.

    The risk:reward ratio is derived once here and stored unrounded.
    Profit/loss is derived only when an exit price is known.
    """

    def __init__(self, profit_loss_multiplier: float = 100.0) -> None:
        """Initialize the trade factory.

        Args:
            profit_loss_multiplier: Multiplier turning price distance into P/L.
        """
        self._profit_loss_multiplier = profit_loss_multiplier

    def create(
        self,
        form: TradeForm,
        screenshot_url: str | None = None,
        trade_id: str | None = None,
    ) -> TradeRecord:
        """Create a trade record from form input.

        Args:
            form: Validated trade form.
            screenshot_url: Location of an already uploaded chart screenshot.
            trade_id: Explicit id, a random one is generated when omitted.

        Returns:
            The new TradeRecord.
        """
        if is_degenerate_risk(form.type, form.entry_price, form.stop_loss, form.take_profit):
            logger.warning(
                f"Stop loss {form.stop_loss} leaves no risk on {form.type.value} "
                f"{form.pair.value} at {form.entry_price}, risk:reward set to 0"
            )

        return TradeRecord(
            id=trade_id or uuid.uuid4().hex,
            pair=form.pair,
            timeframe=form.timeframe,
            type=form.type,
            entry_price=form.entry_price,
            stop_loss=form.stop_loss,
            take_profit=form.take_profit,
            entry_date=form.entry_date,
            exit_price=form.exit_price,
            exit_date=form.exit_date,
            profit_loss=calculate_profit_loss(
                form.type, form.entry_price, form.exit_price, self._profit_loss_multiplier
            ),
            risk_reward_ratio=calculate_risk_reward(
                form.type, form.entry_price, form.stop_loss, form.take_profit
            ),
            bb_upper=form.bb_upper,
            bb_middle=form.bb_middle,
            bb_lower=form.bb_lower,
            macd_line=form.macd_line,
            macd_signal=form.macd_signal,
            macd_histogram=form.macd_histogram,
            stochastic_k=form.stochastic_k,
            stochastic_d=form.stochastic_d,
            market_sentiment=form.market_sentiment,
            notes=form.notes,
            screenshot_url=screenshot_url,
            created_at=datetime.now(),
        )
