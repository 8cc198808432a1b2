"""Trade Detail: Per-trade figures for the detail view.

Combines the charge breakdown with return and risk/reward measures:

    return_pct          = (exit - entry) / entry × 100 × sign(direction)
    planned_risk_reward = |target - entry| / |entry - stop_loss|
    actual_risk_reward  = |exit - entry| / |entry - stop_loss|

Planned R:R needs both levels on the correct side of entry
(Long: target > entry > stop, Short: target < entry < stop).
"""

from journal_analytics.domain.models import Trade, TradeDetail, TradeDirection
from journal_analytics.domain.metrics.brokerage import (
    DISCOUNT_BROKER_RATES,
    RateSchedule,
    compute_brokerage,
    compute_gross_pnl,
)


def calculate_return_pct(trade: Trade) -> float:
    """Signed percentage move from entry to exit (0 when entry is 0)."""
    if trade.entry_price == 0:
        return 0.0
    move = (trade.exit_price - trade.entry_price) / trade.entry_price
    return move * 100 * trade.direction.sign


def _stop_risk(trade: Trade) -> float | None:
    if not trade.stop_loss or trade.stop_loss <= 0:
        return None
    risk = abs(trade.entry_price - trade.stop_loss)
    return risk if risk > 0 else None


def calculate_planned_risk_reward(trade: Trade) -> float | None:
    """Reward-to-risk ratio of the trade plan.

    Returns:
        Ratio, or None when target/stop are missing, zero, or on the
        wrong side of the entry for the trade's direction
    """
    if not trade.target or trade.target <= 0:
        return None
    risk = _stop_risk(trade)
    if risk is None:
        return None

    if trade.direction is TradeDirection.LONG:
        valid = trade.target > trade.entry_price > trade.stop_loss
    else:
        valid = trade.target < trade.entry_price < trade.stop_loss
    if not valid:
        return None

    return abs(trade.target - trade.entry_price) / risk


def calculate_actual_risk_reward(trade: Trade) -> float | None:
    """Realized move measured in units of the planned stop risk."""
    risk = _stop_risk(trade)
    if risk is None:
        return None
    return abs(trade.exit_price - trade.entry_price) / risk


def compute_trade_detail(
    trade: Trade,
    rates: RateSchedule = DISCOUNT_BROKER_RATES,
) -> TradeDetail:
    """Collect every figure shown for a single trade.

    Args:
        trade: The trade
        rates: Broker rate schedule

    Returns:
        TradeDetail with gross, charges, net, return and R:R figures
    """
    gross = compute_gross_pnl(trade)
    charges = compute_brokerage(trade, rates)
    return TradeDetail(
        gross_pnl=gross,
        charges=charges,
        net_pnl=gross - charges.total_charges,
        return_pct=calculate_return_pct(trade),
        planned_risk_reward=calculate_planned_risk_reward(trade),
        actual_risk_reward=calculate_actual_risk_reward(trade),
    )
