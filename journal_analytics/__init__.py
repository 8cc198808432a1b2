"""Journal Analytics: Brokerage-adjusted P&L for a personal trade journal.

Computes transaction charges, net P&L and portfolio statistics
(win rate, profit factor, cumulative P&L, monthly rollups) from a
list of journal trades.

Architecture:
- domain/: Core business logic (models, brokerage, performance)
- infrastructure/: Configuration and journal file access
- application/: Report orchestration and export
- interfaces/: CLI
"""

__version__ = "0.4.0"

from journal_analytics.domain import (
    Trade,
    TradeDirection,
    InstrumentType,
    TradeCategory,
    BrokerageDetails,
    AnalyticsSummary,
    RateSchedule,
    compute_brokerage,
    compute_net_pnl,
    compute_summary,
    compute_cumulative_pnl,
    compute_monthly_performance,
)
from journal_analytics.infrastructure import (
    DataPaths,
    AnalysisConfig,
    DEFAULT_PATHS,
    RepositoryError,
)

__all__ = [
    # Version
    "__version__",
    # Domain models
    "Trade",
    "TradeDirection",
    "InstrumentType",
    "TradeCategory",
    "BrokerageDetails",
    "AnalyticsSummary",
    # Calculations
    "RateSchedule",
    "compute_brokerage",
    "compute_net_pnl",
    "compute_summary",
    "compute_cumulative_pnl",
    "compute_monthly_performance",
    # Infrastructure
    "DataPaths",
    "AnalysisConfig",
    "DEFAULT_PATHS",
    "RepositoryError",
]
