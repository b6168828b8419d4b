# src/journal/settings.py
"""Settings for the journal module."""
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from src.journal.models import TimeRange


class RiskLevel(str, Enum):
    """Risk indicator shown next to the risk percentage."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class RiskPreferences(BaseModel):
    """Per-trade risk preference.

    Attributes:
        risk_percentage: Share of the account balance risked per trade,
            between 0.1 and 10.0 in steps of 0.1.
    """

    risk_percentage: float = Field(default=2.0, ge=0.1, le=10.0)

    @field_validator("risk_percentage")
    @classmethod
    def validate_step(cls, v: float) -> float:
        """Validate that risk_percentage is a multiple of 0.1."""
        tenths = round(v * 10)
        if abs(v * 10 - tenths) > 1e-9:
            raise ValueError(f"Invalid risk percentage: {v}. Must be a multiple of 0.1")
        return tenths / 10

    @property
    def risk_level(self) -> RiskLevel:
        """Classify the risk percentage."""
        if self.risk_percentage <= 1:
            return RiskLevel.LOW
        elif self.risk_percentage <= 3:
            return RiskLevel.MODERATE
        else:
            return RiskLevel.HIGH


class JournalSettings(BaseModel):
    """Configuration settings for the trading journal.

    Attributes:
        data_file: JSON file holding the exported trades.
        profit_loss_multiplier: Multiplier turning price distance into P/L.
        recent_trades_limit: Number of trades shown on the dashboard.
        default_time_range: Analytics window used by the report.
        risk: Per-trade risk preference.
    """

    data_file: str = "data/trades.json"

    profit_loss_multiplier: float = Field(default=100.0, gt=0)
    recent_trades_limit: int = Field(default=5, ge=1, le=100)
    default_time_range: TimeRange = TimeRange.ALL

    risk: RiskPreferences = Field(default_factory=RiskPreferences)
