"""Brokerage: Transaction charges and net P&L for a single trade.

Models a discount-broker charge schedule:

    brokerage        = flat_fee_per_order × orders_per_trade
    transaction_tax  = exit_turnover × tax_rate(instrument, category)
    exchange_charge  = (entry_turnover + exit_turnover) × exchange_charge_rate
    tax (GST)        = (brokerage + exchange_charge) × gst_rate
    total_charges    = brokerage + transaction_tax + exchange_charge + tax

Net P&L:
    gross = (exit - entry) × size × sign(direction)
    net   = gross - total_charges

Rates live in a RateSchedule so a different broker can be modelled
without touching the calculation. Nothing is rounded here.
"""

from dataclasses import dataclass
from enum import Enum

from journal_analytics.domain.models import (
    BrokerageDetails,
    InstrumentType,
    Trade,
    TradeCategory,
)


# =============================================================================
# Rate Schedule
# =============================================================================

class TaxClass(str, Enum):
    """Which transaction-tax rate applies to a trade."""

    NONE = "none"
    INTRADAY = "intraday"
    OPTIONS = "options"
    FUTURES = "futures"


@dataclass(frozen=True, slots=True)
class RateSchedule:
    """Charge rates for one broker.

    Attributes:
        flat_fee_per_order: Fee per executed order (currency units)
        orders_per_trade: Orders per round trip (entry + exit)
        stt_intraday: Tax rate for intraday equity, on exit turnover
        stt_options: Tax rate for options, on exit turnover (premium)
        stt_futures: Tax rate for futures, on exit turnover
        exchange_charge_rate: Exchange charge, on total turnover
        gst_rate: Consumption tax, on brokerage + exchange charge
    """
    flat_fee_per_order: float = 20.0
    orders_per_trade: int = 2
    stt_intraday: float = 0.00025
    stt_options: float = 0.000625
    stt_futures: float = 0.000125
    exchange_charge_rate: float = 0.0000325
    gst_rate: float = 0.18

    def tax_rate(self, tax_class: TaxClass) -> float:
        """Transaction-tax rate for a tax class."""
        return {
            TaxClass.NONE: 0.0,
            TaxClass.INTRADAY: self.stt_intraday,
            TaxClass.OPTIONS: self.stt_options,
            TaxClass.FUTURES: self.stt_futures,
        }[tax_class]


DISCOUNT_BROKER_RATES = RateSchedule()

NO_CHARGES = RateSchedule(
    flat_fee_per_order=0.0,
    stt_intraday=0.0,
    stt_options=0.0,
    stt_futures=0.0,
    exchange_charge_rate=0.0,
    gst_rate=0.0,
)


# =============================================================================
# Transaction Tax Decision Table
# =============================================================================

# Crypto is resolved before this table is consulted.
TAX_CLASS_TABLE: dict[tuple[InstrumentType, TradeCategory], TaxClass] = {
    (InstrumentType.STOCK, TradeCategory.CASH): TaxClass.INTRADAY,
    (InstrumentType.STOCK, TradeCategory.OPTION): TaxClass.OPTIONS,
    (InstrumentType.STOCK, TradeCategory.FUTURE): TaxClass.FUTURES,
    (InstrumentType.COMMODITY, TradeCategory.CASH): TaxClass.NONE,
    (InstrumentType.COMMODITY, TradeCategory.OPTION): TaxClass.OPTIONS,
    (InstrumentType.COMMODITY, TradeCategory.FUTURE): TaxClass.FUTURES,
    (InstrumentType.INDEX, TradeCategory.CASH): TaxClass.NONE,
    (InstrumentType.INDEX, TradeCategory.OPTION): TaxClass.OPTIONS,
    (InstrumentType.INDEX, TradeCategory.FUTURE): TaxClass.FUTURES,
}


def transaction_tax_class(
    instrument: InstrumentType,
    category: TradeCategory,
) -> TaxClass:
    """Resolve the transaction-tax class for an instrument/category pair.

    Crypto is never taxed, whatever the category.

    Example:
        >>> transaction_tax_class(InstrumentType.INDEX, TradeCategory.OPTION)
        <TaxClass.OPTIONS: 'options'>
        >>> transaction_tax_class(InstrumentType.CRYPTO, TradeCategory.FUTURE)
        <TaxClass.NONE: 'none'>
    """
    if instrument is InstrumentType.CRYPTO:
        return TaxClass.NONE
    return TAX_CLASS_TABLE[(instrument, category)]


# =============================================================================
# Core Calculation
# =============================================================================

def compute_brokerage(
    trade: Trade,
    rates: RateSchedule = DISCOUNT_BROKER_RATES,
) -> BrokerageDetails:
    """Calculate the charge breakdown for a trade.

    Zero size or zero prices are valid and only leave the flat fees
    (plus GST on them). Negative or NaN inputs are not checked.

    Args:
        trade: The trade to price
        rates: Broker rate schedule

    Returns:
        BrokerageDetails with every component and their sum

    Example:
        >>> details = compute_brokerage(trade)
        >>> details.brokerage
        40.0
    """
    entry_turnover = trade.entry_turnover
    exit_turnover = trade.exit_turnover
    total_turnover = entry_turnover + exit_turnover

    brokerage = rates.flat_fee_per_order * rates.orders_per_trade

    tax_class = transaction_tax_class(trade.instrument, trade.trade_category)
    transaction_tax = exit_turnover * rates.tax_rate(tax_class)

    exchange_charge = total_turnover * rates.exchange_charge_rate

    # GST base excludes the transaction tax
    tax = (brokerage + exchange_charge) * rates.gst_rate

    total_charges = brokerage + transaction_tax + exchange_charge + tax

    return BrokerageDetails(
        brokerage=brokerage,
        transaction_tax=transaction_tax,
        exchange_charge=exchange_charge,
        tax=tax,
        total_charges=total_charges,
    )


def compute_gross_pnl(trade: Trade) -> float:
    """P&L from price movement alone, before charges."""
    return (trade.exit_price - trade.entry_price) * trade.size * trade.direction.sign


def compute_net_pnl(
    trade: Trade,
    rates: RateSchedule = DISCOUNT_BROKER_RATES,
) -> float:
    """Calculate net P&L after all charges.

    Args:
        trade: The trade
        rates: Broker rate schedule

    Returns:
        Gross P&L minus total charges (unrounded)
    """
    return compute_gross_pnl(trade) - compute_brokerage(trade, rates).total_charges
