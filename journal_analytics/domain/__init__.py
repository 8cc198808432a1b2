"""Domain Layer: Core business logic and entities.

This layer contains:
- models.py: Data structures (Trade, BrokerageDetails, AnalyticsSummary, ...)
- metrics/: Brokerage, performance and distribution calculations

Everything here is pure: no I/O, no shared state.
"""

from journal_analytics.domain.models import (
    TradeDirection,
    InstrumentType,
    TradeCategory,
    OptionType,
    Trade,
    BrokerageDetails,
    AnalyticsSummary,
    CumulativePnlPoint,
    MonthlyPerformance,
    TradeDetail,
)
from journal_analytics.domain.metrics import (
    RateSchedule,
    DISCOUNT_BROKER_RATES,
    NO_CHARGES,
    compute_brokerage,
    compute_gross_pnl,
    compute_net_pnl,
    compute_summary,
    compute_cumulative_pnl,
    compute_monthly_performance,
    compute_trade_detail,
    filter_by_date,
)

__all__ = [
    # Models
    "TradeDirection",
    "InstrumentType",
    "TradeCategory",
    "OptionType",
    "Trade",
    "BrokerageDetails",
    "AnalyticsSummary",
    "CumulativePnlPoint",
    "MonthlyPerformance",
    "TradeDetail",
    # Metrics
    "RateSchedule",
    "DISCOUNT_BROKER_RATES",
    "NO_CHARGES",
    "compute_brokerage",
    "compute_gross_pnl",
    "compute_net_pnl",
    "compute_summary",
    "compute_cumulative_pnl",
    "compute_monthly_performance",
    "compute_trade_detail",
    "filter_by_date",
]
