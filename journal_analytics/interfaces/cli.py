"""Command Line Interface for Journal Analytics.

Provides CLI access to analytics functions:
- summary: Portfolio statistics and trade distribution
- monthly: Monthly performance table
- equity: Cumulative net P&L series
- trade: Detail view for one trade
- report: Export report files

Usage:
    python -m journal_analytics [--journal FILE] summary [--start D] [--end D]
    python -m journal_analytics monthly
    python -m journal_analytics equity [--last N]
    python -m journal_analytics trade TRADE_ID
    python -m journal_analytics report [--formats csv,xlsx]
"""

import argparse
import logging
import sys
from pathlib import Path

from journal_analytics import __version__
from journal_analytics.infrastructure import DataPaths, DEFAULT_PATHS, RepositoryError
from journal_analytics.application import JournalReportService, JournalReportConfig

logger = logging.getLogger(__name__)


def _money(value: float) -> str:
    """Signed currency with two decimals."""
    return f"{'-' if value < 0 else '+'}₹{abs(value):,.2f}"


def _ratio(value: float | None) -> str:
    return "N/A" if value is None else f"{value:.2f}"


def _service(args: argparse.Namespace, **config) -> JournalReportService:
    paths = DataPaths(journal=Path(args.journal)) if args.journal else DEFAULT_PATHS
    report_config = JournalReportConfig(
        start=getattr(args, "start", None),
        end=getattr(args, "end", None),
        **config,
    )
    return JournalReportService(paths=paths, config=report_config)


def cmd_summary(args: argparse.Namespace) -> int:
    """Show portfolio statistics."""
    service = _service(args)
    summary = service.get_summary()
    breakdowns = service.get_breakdowns()

    print(f"Journal Analytics v{__version__}")
    print("=" * 50)

    print("[Trades]")
    print(f"  Total:      {summary.total_trades:,}")
    print(f"  Winning:    {summary.winning_trades:,}")
    print(f"  Losing:     {summary.losing_trades:,}")
    print(f"  Breakeven:  {summary.breakeven_trades:,}")
    print(f"  Win rate:   {summary.win_rate:.1f}%")
    print()

    print("[Net P&L]")
    print(f"  Total:          {_money(summary.total_pnl)}")
    print(f"  Gross profit:   {_money(summary.gross_profit)}")
    print(f"  Gross loss:     {_money(summary.gross_loss)}")
    print(f"  Profit factor:  {_ratio(summary.profit_factor)}")
    print(f"  Average trade:  {_money(summary.average_pnl)}")
    print(f"  Average win:    {_money(summary.average_win)}")
    print(f"  Average loss:   {_money(-summary.average_loss)}")
    print(f"  Largest win:    {_money(summary.largest_win)}")
    print(f"  Largest loss:   {_money(-summary.largest_loss)}")

    for title, counts in breakdowns.items():
        if counts:
            parts = ", ".join(f"{name} {n}" for name, n in counts.items())
            print(f"  {title.capitalize():<15} {parts}")

    return 0


def cmd_monthly(args: argparse.Namespace) -> int:
    """Show monthly performance."""
    df = _service(args).get_monthly_table()

    if len(df) == 0:
        print("No monthly performance data available.")
        return 0

    print(f"{'Month':<10} {'Trades':>7} {'Net P&L':>16} {'Win rate':>9}")
    print("-" * 45)
    for row in df.iter_rows(named=True):
        print(f"{row['month']:<10} {row['trade_count']:>7} "
              f"{_money(row['net_pnl']):>16} {row['win_rate']:>8.1f}%")

    return 0


def cmd_equity(args: argparse.Namespace) -> int:
    """Show the cumulative P&L series."""
    df = _service(args).get_cumulative_table()

    if len(df) == 0:
        print("No trades to chart.")
        return 0

    if args.last:
        df = df.tail(args.last)

    print(f"{'#':>4} {'Date':<11} {'Ticker':<14} {'Cumulative':>16}")
    print("-" * 48)
    for row in df.iter_rows(named=True):
        print(f"{row['sequence_number']:>4} {row['date']:<11} {row['ticker'][:14]:<14} "
              f"{_money(row['cumulative_pnl']):>16}")

    return 0


def cmd_trade(args: argparse.Namespace) -> int:
    """Show the detail view for one trade."""
    found = _service(args).get_trade_detail(args.trade_id)

    if found is None:
        print(f"Trade not found: {args.trade_id}")
        return 1

    trade, detail = found
    print(f"[{trade.ticker.upper()}] {trade.date}  {trade.direction.value} "
          f"{trade.instrument.value}/{trade.trade_category.value}")
    print("=" * 50)
    print(f"  Net P&L:        {_money(detail.net_pnl)} ({detail.return_pct:+.2f}%)")
    print(f"  Gross P&L:      {_money(detail.gross_pnl)}")
    print(f"  Charges:        {_money(-detail.charges.total_charges)}")
    print(f"    Brokerage:        {detail.charges.brokerage:,.2f}")
    print(f"    Transaction tax:  {detail.charges.transaction_tax:,.2f}")
    print(f"    Exchange charge:  {detail.charges.exchange_charge:,.2f}")
    print(f"    GST:              {detail.charges.tax:,.2f}")
    print(f"  Size:           {trade.size:g}")
    print(f"  Entry / Exit:   {trade.entry_price:,.2f} / {trade.exit_price:,.2f}")
    print(f"  Stop / Target:  "
          f"{'Open' if not trade.stop_loss else f'{trade.stop_loss:,.2f}'} / "
          f"{'Open' if not trade.target else f'{trade.target:,.2f}'}")
    print(f"  Planned R:R:    {_ratio(detail.planned_risk_reward)}")
    print(f"  Actual R:R:     {_ratio(detail.actual_risk_reward)}")
    if trade.setup:
        print(f"  Setup:          {trade.setup}")

    return 0


def cmd_report(args: argparse.Namespace) -> int:
    """Export report files."""
    service = _service(
        args,
        output_dir=Path(args.output_dir) if args.output_dir else None,
        output_formats=tuple(f.strip() for f in args.formats.split(",") if f.strip()),
    )
    try:
        saved = service.save_report(args.output)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    for path in saved:
        print(f"Saved: {path}")
    return 0


def _add_date_filter(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--start", help="First trade date (YYYY-MM-DD)")
    parser.add_argument("--end", help="Last trade date (YYYY-MM-DD)")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="journal_analytics",
        description="Journal Analytics - Brokerage-adjusted trade journal P&L",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-j", "--journal",
        help="Journal file (json, csv or parquet); defaults to data/trades.json",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # summary command
    summary_parser = subparsers.add_parser("summary", help="Show portfolio statistics")
    _add_date_filter(summary_parser)

    # monthly command
    monthly_parser = subparsers.add_parser("monthly", help="Show monthly performance")
    _add_date_filter(monthly_parser)

    # equity command
    equity_parser = subparsers.add_parser("equity", help="Show cumulative P&L")
    _add_date_filter(equity_parser)
    equity_parser.add_argument(
        "-n", "--last",
        type=int,
        default=0,
        help="Only show the last N points",
    )

    # trade command
    trade_parser = subparsers.add_parser("trade", help="Show one trade")
    trade_parser.add_argument("trade_id", help="Journal trade id")

    # report command
    report_parser = subparsers.add_parser("report", help="Export report files")
    _add_date_filter(report_parser)
    report_parser.add_argument(
        "-o", "--output",
        default="journal_report",
        help="Output filename (without extension)",
    )
    report_parser.add_argument(
        "-d", "--output-dir",
        default=None,
        help="Output directory (defaults to data/reports)",
    )
    report_parser.add_argument(
        "-f", "--formats",
        default="csv,parquet",
        help="Output formats (comma-separated: csv, parquet, json, xlsx)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "summary": cmd_summary,
        "monthly": cmd_monthly,
        "equity": cmd_equity,
        "trade": cmd_trade,
        "report": cmd_report,
    }

    try:
        return commands[args.command](args)
    except RepositoryError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
