"""Distribution: Trade counts by direction, outcome and instrument.

Feeds the dashboard pie charts. Buckets with no trades are omitted.
Also provides the inclusive date-range filter used before aggregation.
"""

from typing import Sequence

from journal_analytics.domain.models import InstrumentType, Trade, TradeDirection
from journal_analytics.domain.metrics.brokerage import (
    DISCOUNT_BROKER_RATES,
    RateSchedule,
    compute_net_pnl,
)


def direction_breakdown(trades: Sequence[Trade]) -> dict[str, int]:
    """Count trades per direction.

    Example:
        >>> direction_breakdown(trades)
        {'Long': 3, 'Short': 1}
    """
    counts = {
        direction.value: sum(1 for t in trades if t.direction is direction)
        for direction in TradeDirection
    }
    return {name: n for name, n in counts.items() if n > 0}


def outcome_breakdown(
    trades: Sequence[Trade],
    rates: RateSchedule = DISCOUNT_BROKER_RATES,
) -> dict[str, int]:
    """Count winning and losing trades by net P&L (breakeven left out)."""
    wins = losses = 0
    for trade in trades:
        pnl = compute_net_pnl(trade, rates)
        if pnl > 0:
            wins += 1
        elif pnl < 0:
            losses += 1

    counts = {"Wins": wins, "Losses": losses}
    return {name: n for name, n in counts.items() if n > 0}


def instrument_breakdown(trades: Sequence[Trade]) -> dict[str, int]:
    """Count trades per instrument, in enumeration order."""
    counts = {
        instrument.value: sum(1 for t in trades if t.instrument is instrument)
        for instrument in InstrumentType
    }
    return {name: n for name, n in counts.items() if n > 0}


def filter_by_date(
    trades: Sequence[Trade],
    start: str | None = None,
    end: str | None = None,
) -> list[Trade]:
    """Keep trades dated within [start, end].

    Args:
        trades: Trades to filter
        start: First date to keep (YYYY-MM-DD), open if None
        end: Last date to keep (YYYY-MM-DD), open if None

    Returns:
        New list; the input is never modified
    """
    return [
        t for t in trades
        if (start is None or t.date >= start) and (end is None or t.date <= end)
    ]
