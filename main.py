# main.py
"""Main entry point for the trade journal report."""
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from src.config.settings import Settings
from src.journal import AggregateStats, JournalManager
from src.journal.risk_reward import round_risk_reward


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def load_and_validate_config() -> Settings:
    """Load and validate configuration.

    Returns:
        Settings object loaded from YAML.

    Raises:
        SystemExit: If config file missing or YAML parsing fails.
    """
    # Load environment variables
    load_dotenv()

    config_path = Path("config/settings.yaml")
    if not config_path.exists():
        logger.error("config/settings.yaml not found")
        sys.exit(1)

    try:
        settings = Settings.from_yaml(config_path)
        logging.getLogger().setLevel(settings.system.log_level)
        logger.info("✓ Settings loaded from config/settings.yaml")
    except Exception as e:
        logger.error(f"Failed to parse settings.yaml: {e}")
        sys.exit(1)

    return settings


def print_startup_banner(settings: Settings) -> None:
    """Print startup banner."""
    logger.info("=" * 60)
    logger.info(f"{settings.system.name} v{settings.system.version}")
    logger.info(f"Trades: {settings.journal.data_file}")
    logger.info(
        f"Risk per trade: {settings.journal.risk.risk_percentage}% "
        f"({settings.journal.risk.risk_level.value})"
    )
    logger.info("=" * 60)


def log_stats(title: str, stats: AggregateStats) -> None:
    """Log a block of aggregate statistics."""
    logger.info(f"--- {title} ---")
    logger.info(
        f"Trades: {stats.total_trades} "
        f"(won {stats.winning_trades}, lost {stats.losing_trades})"
    )
    logger.info(f"Total P/L: ${stats.total_profit_loss:.2f}")
    logger.info(f"Win rate: {stats.win_rate:.1f}%")
    logger.info(f"Avg R:R: 1:{round_risk_reward(stats.avg_risk_reward)}")

    for item in stats.pair_breakdown:
        logger.info(f"  {item.pair.value:<8} P/L {item.profit_loss:>10.2f} ({item.count} trades)")

    for item in stats.timeframe_breakdown:
        logger.info(
            f"  {item.timeframe.value:<8} win rate {item.win_rate:>5.1f}% ({item.count} trades)"
        )

    for bucket in stats.risk_reward_distribution:
        logger.info(f"  R:R {bucket.label:<8} {bucket.count}")


async def run_report(settings: Settings) -> JournalManager:
    """Load trades and log the dashboard and analytics report.

    Args:
        settings: Loaded settings object.

    Returns:
        The JournalManager holding the loaded trades.

    Raises:
        SystemExit: If the trade file cannot be read.
    """
    journal_manager = JournalManager(settings=settings.journal)

    try:
        count = await journal_manager.load()
    except ValueError as e:
        logger.error(f"Failed to load trades: {e}")
        sys.exit(1)
    logger.info(f"✓ {count} trades loaded")

    summary = journal_manager.dashboard()
    log_stats("Dashboard", summary.stats)

    logger.info("--- Recent trades ---")
    for trade in summary.recent_trades:
        pnl = f"{trade.profit_loss:.2f}" if trade.profit_loss is not None else "open"
        logger.info(
            f"  {trade.entry_date:%Y-%m-%d} {trade.pair.value:<8} {trade.type.value:<4} "
            f"R:R {round_risk_reward(trade.risk_reward_ratio)} P/L {pnl}"
        )

    time_range = settings.journal.default_time_range
    log_stats(f"Analytics ({time_range.value})", journal_manager.analytics(time_range))

    return journal_manager


async def main() -> None:
    settings = load_and_validate_config()
    print_startup_banner(settings)
    await run_report(settings)


if __name__ == "__main__":
    asyncio.run(main())
