"""Performance: Portfolio statistics over a collection of trades.

Every figure uses net P&L (after charges) from the brokerage module:

- Summary: win/loss counts, win rate, profit factor, averages, extremes
- Cumulative P&L: running net P&L in date order (equity curve)
- Monthly performance: net P&L and win rate per YYYY-MM

Classification:
    net > 0  → winning
    net < 0  → losing
    net == 0 → breakeven (excluded from the win-rate denominator)

Division by zero is normalized, never raised:
    win_rate = 0 when there are no winning or losing trades
    profit_factor = None when there is no loss
"""

from collections import defaultdict
from typing import Iterable, Sequence

from journal_analytics.domain.models import (
    AnalyticsSummary,
    CumulativePnlPoint,
    MonthlyPerformance,
    Trade,
)
from journal_analytics.domain.metrics.brokerage import (
    DISCOUNT_BROKER_RATES,
    RateSchedule,
    compute_net_pnl,
)


# =============================================================================
# Helpers
# =============================================================================

def calculate_win_rate(winning: int, losing: int) -> float:
    """Win rate in percent over decided (non-breakeven) trades.

    Example:
        >>> calculate_win_rate(1, 1)
        50.0
        >>> calculate_win_rate(0, 0)
        0.0
    """
    decided = winning + losing
    if decided == 0:
        return 0.0
    return winning / decided * 100


def _count_outcomes(pnls: Iterable[float]) -> tuple[int, int]:
    winning = losing = 0
    for pnl in pnls:
        if pnl > 0:
            winning += 1
        elif pnl < 0:
            losing += 1
    return winning, losing


# =============================================================================
# Summary
# =============================================================================

def compute_summary(
    trades: Sequence[Trade],
    rates: RateSchedule = DISCOUNT_BROKER_RATES,
) -> AnalyticsSummary:
    """Reduce trades into portfolio statistics.

    Args:
        trades: Trades to summarize (not modified)
        rates: Broker rate schedule used for net P&L

    Returns:
        AnalyticsSummary; the neutral summary for an empty input

    Example:
        >>> summary = compute_summary(trades)
        >>> summary.win_rate, summary.profit_factor
        (50.0, 2.0)
    """
    if not trades:
        return AnalyticsSummary.empty()

    total_pnl = 0.0
    gross_profit = 0.0
    gross_loss = 0.0
    winning = losing = breakeven = 0
    largest_win = 0.0
    largest_loss = 0.0

    for trade in trades:
        pnl = compute_net_pnl(trade, rates)
        total_pnl += pnl

        if pnl > 0:
            winning += 1
            gross_profit += pnl
            largest_win = max(largest_win, pnl)
        elif pnl < 0:
            losing += 1
            gross_loss += pnl
            largest_loss = min(largest_loss, pnl)
        else:
            breakeven += 1

    total_trades = len(trades)
    profit_factor = abs(gross_profit / gross_loss) if gross_loss != 0 else None

    return AnalyticsSummary(
        total_trades=total_trades,
        winning_trades=winning,
        losing_trades=losing,
        breakeven_trades=breakeven,
        win_rate=calculate_win_rate(winning, losing),
        total_pnl=total_pnl,
        gross_profit=gross_profit,
        gross_loss=gross_loss,
        profit_factor=profit_factor,
        average_win=gross_profit / winning if winning else 0.0,
        average_loss=abs(gross_loss / losing) if losing else 0.0,
        average_pnl=total_pnl / total_trades,
        largest_win=largest_win,
        largest_loss=abs(largest_loss),
    )


# =============================================================================
# Series
# =============================================================================

def compute_cumulative_pnl(
    trades: Sequence[Trade],
    rates: RateSchedule = DISCOUNT_BROKER_RATES,
    decimals: int = 2,
) -> list[CumulativePnlPoint]:
    """Build the cumulative net P&L series for the equity chart.

    Trades are ordered by date with a stable sort, so trades on the same
    day keep their input order. Each point carries the running total
    rounded to ``decimals`` places; the running total itself stays exact
    so the last point matches the rounded portfolio total.

    Args:
        trades: Trades in any order (not modified)
        rates: Broker rate schedule used for net P&L
        decimals: Rounding applied to every emitted point

    Returns:
        One point per trade, sequence numbers starting at 1
    """
    ordered = sorted(trades, key=lambda t: t.date)

    running = 0.0
    points = []
    for number, trade in enumerate(ordered, start=1):
        running += compute_net_pnl(trade, rates)
        points.append(
            CumulativePnlPoint(
                sequence_number=number,
                cumulative_pnl=round(running, decimals),
                date=trade.date,
                ticker=trade.ticker,
            )
        )

    return points


def compute_monthly_performance(
    trades: Sequence[Trade],
    rates: RateSchedule = DISCOUNT_BROKER_RATES,
) -> list[MonthlyPerformance]:
    """Roll trades up by calendar month.

    Args:
        trades: Trades in any order (not modified)
        rates: Broker rate schedule used for net P&L

    Returns:
        One row per month present in the input, most recent month first

    Example:
        >>> [m.month for m in compute_monthly_performance(trades)]
        ['2023-11', '2023-10']
    """
    by_month: dict[str, list[float]] = defaultdict(list)
    for trade in trades:
        by_month[trade.month].append(compute_net_pnl(trade, rates))

    rows = []
    for month, pnls in by_month.items():
        winning, losing = _count_outcomes(pnls)
        rows.append(
            MonthlyPerformance(
                month=month,
                trade_count=len(pnls),
                net_pnl=sum(pnls),
                win_rate=calculate_win_rate(winning, losing),
            )
        )

    return sorted(rows, key=lambda row: row.month, reverse=True)
