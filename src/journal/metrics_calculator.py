# src/journal/metrics_calculator.py
"""Calculator for trading performance metrics."""
from src.journal.models import (
    AggregateStats,
    CurrencyPair,
    EquityPoint,
    PairPerformance,
    RiskRewardBucket,
    Timeframe,
    TimeframePerformance,
    TradeRecord,
    as_utc,
)

RISK_REWARD_LABELS = ("< 1", "1 - 1.5", "1.5 - 2", "2 - 3", "> 3")


def _pnl(record: TradeRecord) -> float:
    return record.profit_loss if record.profit_loss is not None else 0.0


class MetricsCalculator:
    """Calculates aggregate statistics from trade records."""

    def calculate(self, records: list[TradeRecord]) -> AggregateStats:
        """Calculate aggregate statistics from trade records.

        Missing profit/loss counts as zero. Open trades are included,
        so they count toward the total but never as winners.

        Args:
            records: List of trade records to analyze.

        Returns:
            AggregateStats with all calculated values.
        """
        if not records:
            return self._empty_stats()

        total_trades = len(records)
        winning_trades = sum(1 for r in records if _pnl(r) > 0)
        losing_trades = sum(1 for r in records if _pnl(r) < 0)

        total_profit_loss = sum(_pnl(r) for r in records)
        win_rate = winning_trades / total_trades * 100
        avg_risk_reward = sum(r.risk_reward_ratio for r in records) / total_trades

        return AggregateStats(
            total_trades=total_trades,
            winning_trades=winning_trades,
            losing_trades=losing_trades,
            total_profit_loss=total_profit_loss,
            win_rate=win_rate,
            avg_risk_reward=avg_risk_reward,
            pair_breakdown=self._calculate_pair_breakdown(records),
            timeframe_breakdown=self._calculate_timeframe_breakdown(records),
            cumulative_profit_loss=self._calculate_cumulative(records),
            risk_reward_distribution=self._calculate_distribution(records),
        )

    def _empty_stats(self) -> AggregateStats:
        """Return stats with zero values for an empty record list."""
        return AggregateStats(
            total_trades=0,
            winning_trades=0,
            losing_trades=0,
            total_profit_loss=0.0,
            win_rate=0.0,
            avg_risk_reward=0.0,
            pair_breakdown=[],
            timeframe_breakdown=[],
            cumulative_profit_loss=[],
            risk_reward_distribution=[RiskRewardBucket(label) for label in RISK_REWARD_LABELS],
        )

    def _calculate_pair_breakdown(
        self, records: list[TradeRecord]
    ) -> list[PairPerformance]:
        """Sum profit/loss per pair, in order of first appearance."""
        groups: dict[CurrencyPair, PairPerformance] = {}

        for record in records:
            group = groups.get(record.pair)
            if group is None:
                group = groups[record.pair] = PairPerformance(
                    pair=record.pair, profit_loss=0.0, count=0
                )
            group.profit_loss += _pnl(record)
            group.count += 1

        return list(groups.values())

    def _calculate_timeframe_breakdown(
        self, records: list[TradeRecord]
    ) -> list[TimeframePerformance]:
        """Calculate profit/loss and win rate per timeframe.

        Args:
            records: List of trade records.

        Returns:
            One entry per timeframe, in order of first appearance.
        """
        grouped: dict[Timeframe, list[TradeRecord]] = {}

        for record in records:
            grouped.setdefault(record.timeframe, []).append(record)

        breakdown = []
        for timeframe, group in grouped.items():
            winners = sum(1 for r in group if _pnl(r) > 0)
            breakdown.append(
                TimeframePerformance(
                    timeframe=timeframe,
                    profit_loss=sum(_pnl(r) for r in group),
                    count=len(group),
                    win_rate=winners / len(group) * 100,
                )
            )

        return breakdown

    def _calculate_cumulative(self, records: list[TradeRecord]) -> list[EquityPoint]:
        """Calculate the running profit/loss ordered by entry date.

        Args:
            records: List of trade records.

        Returns:
            One point per trade, each holding the sum of profit/loss of
            every trade entered up to and including it.
        """
        chronological = sorted(records, key=lambda r: as_utc(r.entry_date))
        cumulative_pnl = 0.0
        points = []

        for record in chronological:
            cumulative_pnl += _pnl(record)
            points.append(
                EquityPoint(
                    entry_date=record.entry_date,
                    trade_id=record.id,
                    cumulative_profit_loss=cumulative_pnl,
                )
            )

        return points

    def _calculate_distribution(
        self, records: list[TradeRecord]
    ) -> list[RiskRewardBucket]:
        """Count trades per risk:reward bucket.

        The first matching upper bound wins, so a ratio equal to a bucket
        edge lands in the bucket above it.
        """
        buckets = [RiskRewardBucket(label) for label in RISK_REWARD_LABELS]

        for record in records:
            ratio = record.risk_reward_ratio
            if ratio < 1:
                buckets[0].count += 1
            elif ratio < 1.5:
                buckets[1].count += 1
            elif ratio < 2:
                buckets[2].count += 1
            elif ratio < 3:
                buckets[3].count += 1
            else:
                buckets[4].count += 1

        return buckets
