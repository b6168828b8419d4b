# src/journal/trade_form.py
"""Validated input for logging a new trade."""
from datetime import date, datetime

from pydantic import BaseModel, Field, model_validator

from src.journal.models import CurrencyPair, MarketSentiment, Timeframe, TradeType, as_utc


class TradeForm(BaseModel):
    """Data entered when logging a trade.

    Attributes:
        pair: Traded instrument.
        timeframe: Chart interval of the analysis.
        type: Buy or Sell.
        entry_price: Entry price, must be positive.
        exit_price: Exit price, None while the trade is open.
        stop_loss: Stop loss price.
        take_profit: Take profit price.
        entry_date: When the trade was entered.
        exit_date: When the trade was closed, not before entry_date.
        market_sentiment: Self-reported bias at entry.
        notes: Free text.
    """

    pair: CurrencyPair = CurrencyPair.XAU_USD
    timeframe: Timeframe = Timeframe.H4
    type: TradeType = TradeType.BUY

    entry_price: float = Field(gt=0)
    exit_price: float | None = Field(default=None, gt=0)
    stop_loss: float = Field(gt=0)
    take_profit: float = Field(gt=0)

    entry_date: datetime = Field(
        default_factory=lambda: datetime.combine(date.today(), datetime.min.time())
    )
    exit_date: datetime | None = None

    bb_upper: float | None = None
    bb_middle: float | None = None
    bb_lower: float | None = None
    macd_line: float | None = None
    macd_signal: float | None = None
    macd_histogram: float | None = None
    stochastic_k: float | None = Field(default=None, ge=0, le=100)
    stochastic_d: float | None = Field(default=None, ge=0, le=100)

    market_sentiment: MarketSentiment | None = MarketSentiment.NEUTRAL
    notes: str | None = None

    @model_validator(mode="after")
    def validate_exit_date(self) -> "TradeForm":
        """Validate that the trade is not closed before it was entered."""
        if self.exit_date is not None and as_utc(self.exit_date) < as_utc(self.entry_date):
            raise ValueError(
                f"exit_date {self.exit_date.isoformat()} is before "
                f"entry_date {self.entry_date.isoformat()}"
            )
        return self
