"""Entry point for running journal_analytics as a module.

Usage:
    python -m journal_analytics [--journal FILE] [command] [options]

Commands:
    summary     Portfolio statistics and trade distribution
    monthly     Monthly performance table
    equity      Cumulative net P&L series
    trade       Detail view for one trade
    report      Export report files

Examples:
    python -m journal_analytics summary --start 2023-10-01
    python -m journal_analytics --journal exports/trades.csv monthly
    python -m journal_analytics trade t-42
    python -m journal_analytics report --formats csv,xlsx
"""

import sys

from journal_analytics.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
