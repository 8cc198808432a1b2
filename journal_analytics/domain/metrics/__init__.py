"""Trade journal metrics.

This package provides the calculations behind the journal dashboard:

- Brokerage: Charge breakdown and net P&L for one trade
- Performance: Summary, cumulative P&L and monthly rollups
- Trade Detail: Return and risk/reward figures for one trade
- Distribution: Direction/outcome/instrument counts and date filtering

Usage:
    from journal_analytics.domain.metrics import (
        compute_net_pnl,
        compute_summary,
        compute_cumulative_pnl,
    )
"""

# Brokerage
from journal_analytics.domain.metrics.brokerage import (
    TaxClass,
    RateSchedule,
    DISCOUNT_BROKER_RATES,
    NO_CHARGES,
    TAX_CLASS_TABLE,
    transaction_tax_class,
    compute_brokerage,
    compute_gross_pnl,
    compute_net_pnl,
)

# Performance
from journal_analytics.domain.metrics.performance import (
    calculate_win_rate,
    compute_summary,
    compute_cumulative_pnl,
    compute_monthly_performance,
)

# Trade Detail
from journal_analytics.domain.metrics.trade_detail import (
    calculate_return_pct,
    calculate_planned_risk_reward,
    calculate_actual_risk_reward,
    compute_trade_detail,
)

# Distribution
from journal_analytics.domain.metrics.distribution import (
    direction_breakdown,
    outcome_breakdown,
    instrument_breakdown,
    filter_by_date,
)

__all__ = [
    # Brokerage
    "TaxClass",
    "RateSchedule",
    "DISCOUNT_BROKER_RATES",
    "NO_CHARGES",
    "TAX_CLASS_TABLE",
    "transaction_tax_class",
    "compute_brokerage",
    "compute_gross_pnl",
    "compute_net_pnl",
    # Performance
    "calculate_win_rate",
    "compute_summary",
    "compute_cumulative_pnl",
    "compute_monthly_performance",
    # Trade Detail
    "calculate_return_pct",
    "calculate_planned_risk_reward",
    "calculate_actual_risk_reward",
    "compute_trade_detail",
    # Distribution
    "direction_breakdown",
    "outcome_breakdown",
    "instrument_breakdown",
    "filter_by_date",
]
