"""Domain Models: Core data structures for trade journal analytics.

These models represent the fundamental business entities:
- Trade: A single closed trade as recorded in the journal
- BrokerageDetails: Per-trade charge breakdown
- AnalyticsSummary: Portfolio-level statistics
- CumulativePnlPoint / MonthlyPerformance: Chart and table series
- TradeDetail: Everything the trade detail view shows

Design Principles:
- Immutable (frozen dataclass with slots)
- Closed enumerations for direction, instrument and category
- No validation here: records are checked at the data-access boundary
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum


# =============================================================================
# Enumerations
# =============================================================================

class TradeDirection(str, Enum):
    """Direction of a trade; decides the sign of gross P&L."""

    LONG = "Long"
    SHORT = "Short"

    @property
    def sign(self) -> int:
        """+1 for Long, -1 for Short."""
        return 1 if self is TradeDirection.LONG else -1


class InstrumentType(str, Enum):
    STOCK = "Stock"
    COMMODITY = "Commodity"
    INDEX = "Index"
    CRYPTO = "Crypto"


class TradeCategory(str, Enum):
    CASH = "Cash"
    OPTION = "Option"
    FUTURE = "Future"


class OptionType(str, Enum):
    CALL = "Call"
    PUT = "Put"


# =============================================================================
# Trade
# =============================================================================

@dataclass(frozen=True, slots=True)
class Trade:
    """A single closed trade.

    Attributes:
        id: Journal identifier
        date: Trade date in YYYY-MM-DD format
        ticker: Traded symbol (e.g., "RELIANCE", "NIFTY 50")
        instrument: Stock, Commodity, Index or Crypto
        trade_category: Cash, Option or Future
        direction: Long or Short
        size: Quantity (shares, contracts, lots); may be fractional
        entry_price: Price at which the position was opened
        exit_price: Price at which the position was closed
        stop_loss: Planned stop level (optional)
        target: Planned target level (optional)
        option_type: Call or Put for option trades (optional)
        strike_price: Strike for option trades (optional)
        setup: Setup or strategy label
        notes: Free-form notes

    Preconditions (not checked):
        size >= 0, entry_price >= 0, exit_price >= 0
    """
    id: str
    date: str
    ticker: str
    instrument: InstrumentType
    trade_category: TradeCategory
    direction: TradeDirection
    size: float
    entry_price: float
    exit_price: float
    stop_loss: float | None = None
    target: float | None = None
    option_type: OptionType | None = None
    strike_price: float | None = None
    setup: str = ""
    notes: str = ""

    @property
    def month(self) -> str:
        """Month bucket key (YYYY-MM)."""
        return self.date[:7]

    @property
    def entry_turnover(self) -> float:
        return self.entry_price * self.size

    @property
    def exit_turnover(self) -> float:
        return self.exit_price * self.size


# =============================================================================
# Derived Values
# =============================================================================

@dataclass(frozen=True, slots=True)
class BrokerageDetails:
    """Charge breakdown for one trade.

    Attributes:
        brokerage: Flat per-order fees (entry + exit)
        transaction_tax: Securities transaction tax on exit turnover
        exchange_charge: Exchange transaction charge on total turnover
        tax: Consumption tax (GST) on brokerage + exchange charge
        total_charges: Sum of the four components
    """
    brokerage: float
    transaction_tax: float
    exchange_charge: float
    tax: float
    total_charges: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class AnalyticsSummary:
    """Portfolio statistics over a collection of trades.

    All monetary values are net of charges. ``gross_loss`` is a signed
    (negative) total; ``average_loss`` and ``largest_loss`` are magnitudes.
    ``profit_factor`` is None when there are no losing trades.
    """
    total_trades: int
    winning_trades: int
    losing_trades: int
    breakeven_trades: int
    win_rate: float
    total_pnl: float
    gross_profit: float
    gross_loss: float
    profit_factor: float | None
    average_win: float
    average_loss: float
    average_pnl: float
    largest_win: float
    largest_loss: float

    @classmethod
    def empty(cls) -> AnalyticsSummary:
        """Neutral summary for an empty journal."""
        return cls(
            total_trades=0,
            winning_trades=0,
            losing_trades=0,
            breakeven_trades=0,
            win_rate=0.0,
            total_pnl=0.0,
            gross_profit=0.0,
            gross_loss=0.0,
            profit_factor=None,
            average_win=0.0,
            average_loss=0.0,
            average_pnl=0.0,
            largest_win=0.0,
            largest_loss=0.0,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for DataFrame creation."""
        return asdict(self)


@dataclass(frozen=True, slots=True)
class CumulativePnlPoint:
    """One point of the equity curve."""
    sequence_number: int
    cumulative_pnl: float
    date: str
    ticker: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class MonthlyPerformance:
    """Net result for one calendar month (YYYY-MM)."""
    month: str
    trade_count: int
    net_pnl: float
    win_rate: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class TradeDetail:
    """Everything shown on the trade detail view.

    Attributes:
        gross_pnl: Price-move P&L before charges
        charges: Full charge breakdown
        net_pnl: gross_pnl - charges.total_charges
        return_pct: Signed percentage move from entry to exit
        planned_risk_reward: Target reward over stop risk, None if not set up
        actual_risk_reward: Realized move over stop risk, None without a stop
    """
    gross_pnl: float
    charges: BrokerageDetails
    net_pnl: float
    return_pct: float
    planned_risk_reward: float | None
    actual_risk_reward: float | None

    @property
    def is_profitable(self) -> bool:
        return self.net_pnl >= 0
