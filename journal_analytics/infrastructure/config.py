"""Configuration: Centralized paths and settings.

This module provides:
- DataPaths: File paths for the journal and generated reports
- AnalysisConfig: Parameters for the analytics calculations

Directory Structure:
    data/
    ├── trades.json              # Journal export (json, csv or parquet)
    └── reports/                 # Report output
        ├── journal_report_trades.csv
        └── ...
"""

from dataclasses import dataclass, field
from pathlib import Path

from journal_analytics.domain.metrics.brokerage import (
    DISCOUNT_BROKER_RATES,
    RateSchedule,
)


@dataclass(frozen=True)
class DataPaths:
    """File paths for data sources.

    Attributes:
        root: Project root directory
        journal: Explicit journal file (defaults to data/trades.json)
    """

    root: Path = Path(".")
    journal: Path | None = None

    # --- Directories ---

    @property
    def data_dir(self) -> Path:
        """Main data directory."""
        return self.root / "data"

    @property
    def reports_dir(self) -> Path:
        """Generated reports."""
        return self.data_dir / "reports"

    # --- Files ---

    @property
    def journal_file(self) -> Path:
        """Trade journal export."""
        if self.journal is not None:
            return self.journal
        return self.data_dir / "trades.json"

    # --- Helper Methods ---

    def ensure_dirs(self) -> None:
        """Create all required directories."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.reports_dir.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for analytics calculations.

    Attributes:
        rates: Broker charge schedule used for net P&L
        cumulative_decimals: Rounding of the cumulative P&L series
    """

    rates: RateSchedule = field(default=DISCOUNT_BROKER_RATES)
    cumulative_decimals: int = 2


# Default instances
DEFAULT_PATHS = DataPaths()
DEFAULT_CONFIG = AnalysisConfig()
