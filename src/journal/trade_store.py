# src/journal/trade_store.py
"""JSON file import/export of trade records."""
import json
import logging
from datetime import datetime
from pathlib import Path

import aiofiles

from src.journal.models import (
    CurrencyPair,
    MarketSentiment,
    Timeframe,
    TradeRecord,
    TradeType,
)

logger = logging.getLogger(__name__)

_OPTIONAL_FLOATS = (
    "exit_price",
    "profit_loss",
    "bb_upper",
    "bb_middle",
    "bb_lower",
    "macd_line",
    "macd_signal",
    "macd_histogram",
    "stochastic_k",
    "stochastic_d",
)


def _parse_datetime(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class JsonTradeStore:
    """Reads and writes trade records as a JSON array.

    Stores all trades in a single file. Datetimes are ISO-8601 strings
    and enums are stored by value.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the trade store.

        Args:
            path: JSON file holding the trades.
        """
        self._path = Path(path)

    def _record_to_dict(self, record: TradeRecord) -> dict:
        """Convert a TradeRecord to a dictionary for JSON storage."""
        data = {
            "id": record.id,
            "pair": record.pair.value,
            "timeframe": record.timeframe.value,
            "type": record.type.value,
            "entry_price": record.entry_price,
            "stop_loss": record.stop_loss,
            "take_profit": record.take_profit,
            "entry_date": record.entry_date.isoformat(),
            "exit_date": record.exit_date.isoformat() if record.exit_date else None,
            "risk_reward_ratio": record.risk_reward_ratio,
            "market_sentiment": (
                record.market_sentiment.value if record.market_sentiment else None
            ),
            "notes": record.notes,
            "screenshot_url": record.screenshot_url,
            "created_at": record.created_at.isoformat() if record.created_at else None,
        }
        for name in _OPTIONAL_FLOATS:
            data[name] = getattr(record, name)
        return data

    def _dict_to_record(self, data: dict) -> TradeRecord:
        """Convert a dictionary from JSON to a TradeRecord."""
        sentiment = data.get("market_sentiment")
        return TradeRecord(
            id=str(data["id"]),
            pair=CurrencyPair(data["pair"]),
            timeframe=Timeframe(data["timeframe"]),
            type=TradeType(data["type"]),
            entry_price=float(data["entry_price"]),
            stop_loss=float(data["stop_loss"]),
            take_profit=float(data["take_profit"]),
            entry_date=datetime.fromisoformat(data["entry_date"]),
            exit_date=_parse_datetime(data.get("exit_date")),
            risk_reward_ratio=float(data.get("risk_reward_ratio") or 0.0),
            market_sentiment=MarketSentiment(sentiment) if sentiment else None,
            notes=data.get("notes"),
            screenshot_url=data.get("screenshot_url"),
            created_at=_parse_datetime(data.get("created_at")),
            **{
                name: float(data[name]) if data.get(name) is not None else None
                for name in _OPTIONAL_FLOATS
            },
        )

    async def load(self) -> list[TradeRecord]:
        """Load all trade records from the JSON file.

        Returns:
            List of TradeRecord objects, empty when the file does not exist.

        Raises:
            ValueError: If the file is not a JSON array or a record is malformed.
        """
        if not self._path.exists():
            logger.info(f"No trade file at {self._path}, starting empty")
            return []

        async with aiofiles.open(self._path, "r") as f:
            content = await f.read()

        data = json.loads(content) if content.strip() else []
        if not isinstance(data, list):
            raise ValueError(f"Trade file {self._path} must contain a JSON array")

        records = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise ValueError(
                    f"Malformed trade at index {index} in {self._path}: expected an object"
                )
            try:
                records.append(self._dict_to_record(item))
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"Malformed trade at index {index} in {self._path}: {e}") from e

        logger.info(f"Loaded {len(records)} trades from {self._path}")
        return records

    async def save(self, records: list[TradeRecord]) -> None:
        """Write all trade records to the JSON file.

        Args:
            records: Trade records to store.
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)
        entries = [self._record_to_dict(r) for r in records]

        async with aiofiles.open(self._path, "w") as f:
            await f.write(json.dumps(entries, indent=2))

        logger.info(f"Saved {len(records)} trades to {self._path}")
