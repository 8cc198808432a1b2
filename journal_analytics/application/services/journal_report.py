"""Journal Report Service: Dashboard figures and report export.

Orchestrates the journal report:
1. Load trades via TradeRepository (optionally date-filtered)
2. Compute summary, cumulative and monthly figures with domain metrics
3. Build polars tables for display and export
4. Export to various formats (CSV, Parquet, JSON, Excel)
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import polars as pl

from journal_analytics.domain.models import AnalyticsSummary, Trade, TradeDetail
from journal_analytics.domain.metrics import (
    RateSchedule,
    compute_brokerage,
    compute_cumulative_pnl,
    compute_gross_pnl,
    compute_monthly_performance,
    compute_summary,
    compute_trade_detail,
    direction_breakdown,
    filter_by_date,
    instrument_breakdown,
    outcome_breakdown,
)
from journal_analytics.infrastructure import (
    AnalysisConfig,
    DataPaths,
    DEFAULT_CONFIG,
    DEFAULT_PATHS,
    TradeRepository,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Report Configuration
# =============================================================================

@dataclass(frozen=True)
class JournalReportConfig:
    """Configuration for journal report generation.

    Attributes:
        output_dir: Directory for output files (DataPaths.reports_dir if None)
        output_formats: Formats to write ("csv", "parquet", "json", "xlsx")
        start: First trade date to include (YYYY-MM-DD), open if None
        end: Last trade date to include (YYYY-MM-DD), open if None
    """
    output_dir: Path | None = None
    output_formats: tuple[str, ...] = ("csv", "parquet")
    start: str | None = None
    end: str | None = None


# =============================================================================
# Table Schemas
# =============================================================================

TRADE_SCHEMA = {
    "id": pl.Utf8,
    "date": pl.Utf8,
    "ticker": pl.Utf8,
    "instrument": pl.Utf8,
    "trade_category": pl.Utf8,
    "direction": pl.Utf8,
    "size": pl.Float64,
    "entry_price": pl.Float64,
    "exit_price": pl.Float64,
    "gross_pnl": pl.Float64,
    "brokerage": pl.Float64,
    "transaction_tax": pl.Float64,
    "exchange_charge": pl.Float64,
    "tax": pl.Float64,
    "total_charges": pl.Float64,
    "net_pnl": pl.Float64,
    "setup": pl.Utf8,
}

CUMULATIVE_SCHEMA = {
    "sequence_number": pl.Int64,
    "cumulative_pnl": pl.Float64,
    "date": pl.Utf8,
    "ticker": pl.Utf8,
}

MONTHLY_SCHEMA = {
    "month": pl.Utf8,
    "trade_count": pl.Int64,
    "net_pnl": pl.Float64,
    "win_rate": pl.Float64,
}


# =============================================================================
# Journal Report Service
# =============================================================================

class JournalReportService:
    """Service for journal dashboards and report files.

    Coordinates data loading, analytics, and output generation.

    Example:
        >>> service = JournalReportService()
        >>> summary = service.get_summary()
        >>> service.save_report("journal_report")
    """

    def __init__(
        self,
        paths: DataPaths = DEFAULT_PATHS,
        config: JournalReportConfig | None = None,
        analysis: AnalysisConfig = DEFAULT_CONFIG,
        repository: TradeRepository | None = None,
    ):
        """Initialize the service.

        Args:
            paths: Data paths configuration
            config: Report configuration (uses defaults if not provided)
            analysis: Rate schedule and rounding settings
            repository: Trade repository (built from paths if not provided)
        """
        self._paths = paths
        self._config = config or JournalReportConfig()
        self._analysis = analysis
        self._trade_repo = repository or TradeRepository(paths)

    @property
    def rates(self) -> RateSchedule:
        return self._analysis.rates

    def load_trades(self) -> list[Trade]:
        """Load trades within the configured date range."""
        trades = filter_by_date(
            self._trade_repo.get_all(),
            self._config.start,
            self._config.end,
        )
        logger.debug(
            "Using %d trades (start=%s, end=%s)",
            len(trades), self._config.start, self._config.end,
        )
        return trades

    # --- Dashboard figures ---

    def get_summary(self) -> AnalyticsSummary:
        return compute_summary(self.load_trades(), self.rates)

    def get_breakdowns(self) -> dict[str, dict[str, int]]:
        """Direction, outcome and instrument counts for the pie charts."""
        trades = self.load_trades()
        return {
            "direction": direction_breakdown(trades),
            "outcome": outcome_breakdown(trades, self.rates),
            "instrument": instrument_breakdown(trades),
        }

    def get_trade_detail(self, trade_id: str) -> tuple[Trade, TradeDetail] | None:
        """Detail view for one trade (ignores the date filter).

        Returns:
            (trade, detail), or None if the id is unknown
        """
        trade = self._trade_repo.get_by_id(trade_id)
        if trade is None:
            return None
        return trade, compute_trade_detail(trade, self.rates)

    # --- Tables ---

    def get_trade_table(self) -> pl.DataFrame:
        """One row per trade with gross P&L, every charge, and net P&L.

        Rows are sorted by date, most recent first.
        """
        rows = []
        for trade in self.load_trades():
            charges = compute_brokerage(trade, self.rates)
            gross = compute_gross_pnl(trade)
            rows.append({
                "id": trade.id,
                "date": trade.date,
                "ticker": trade.ticker,
                "instrument": trade.instrument.value,
                "trade_category": trade.trade_category.value,
                "direction": trade.direction.value,
                "size": float(trade.size),
                "entry_price": float(trade.entry_price),
                "exit_price": float(trade.exit_price),
                "gross_pnl": gross,
                **charges.to_dict(),
                "net_pnl": gross - charges.total_charges,
                "setup": trade.setup,
            })

        df = pl.DataFrame(rows, schema=TRADE_SCHEMA)
        return df.sort("date", descending=True, maintain_order=True)

    def get_cumulative_table(self) -> pl.DataFrame:
        points = compute_cumulative_pnl(
            self.load_trades(),
            self.rates,
            decimals=self._analysis.cumulative_decimals,
        )
        return pl.DataFrame([p.to_dict() for p in points], schema=CUMULATIVE_SCHEMA)

    def get_monthly_table(self) -> pl.DataFrame:
        rows = compute_monthly_performance(self.load_trades(), self.rates)
        return pl.DataFrame([r.to_dict() for r in rows], schema=MONTHLY_SCHEMA)

    # --- Export ---

    def save_report(
        self,
        base_name: str = "journal_report",
        formats: tuple[str, ...] | None = None,
    ) -> list[Path]:
        """Save trade, monthly and cumulative tables.

        Tabular formats write one file per table
        ({base_name}_trades.csv, {base_name}_monthly.csv, ...);
        xlsx writes a single workbook with one sheet per table.

        Args:
            base_name: Base filename without extension
            formats: Output formats (uses config if not provided)

        Returns:
            List of saved file paths

        Raises:
            ValueError: If no format is given or a format is not supported
        """
        formats = formats or self._config.output_formats
        if not formats:
            raise ValueError("No output formats given")
        unknown = [f for f in formats if f not in ("csv", "parquet", "json", "xlsx")]
        if unknown:
            raise ValueError(f"Unknown format: {', '.join(unknown)}")

        if self._config.output_dir is None:
            self._paths.ensure_dirs()
            output_dir = self._paths.reports_dir
        else:
            output_dir = self._config.output_dir
            output_dir.mkdir(parents=True, exist_ok=True)

        tables = {
            "trades": self.get_trade_table(),
            "monthly": self.get_monthly_table(),
            "cumulative": self.get_cumulative_table(),
        }
        saved = []

        for fmt in formats:
            if fmt == "xlsx":
                path = output_dir / f"{base_name}.xlsx"
                self._save_excel(tables, path)
                saved.append(path)
                continue

            for table_name, df in tables.items():
                path = output_dir / f"{base_name}_{table_name}.{fmt}"
                if fmt == "csv":
                    df.write_csv(path)
                elif fmt == "parquet":
                    df.write_parquet(path)
                else:
                    df.write_json(path)
                saved.append(path)

        logger.info("Saved %d report files to %s", len(saved), output_dir)
        return saved

    def _save_excel(self, tables: dict[str, pl.DataFrame], path: Path) -> None:
        """Save report to Excel with formatted sheets.

        Creates four sheets:
        1. Summary - Portfolio statistics
        2. Trades - Per-trade P&L and charges
        3. Monthly - Monthly rollup
        4. Cumulative - Equity curve points
        """
        import xlsxwriter

        workbook = xlsxwriter.Workbook(str(path))
        header_fmt = workbook.add_format({
            "bold": True,
            "bg_color": "#4472C4",
            "font_color": "white",
            "border": 1,
        })
        money_fmt = workbook.add_format({"num_format": "#,##0.00"})

        # Sheet 1: Summary
        ws = workbook.add_worksheet("Summary")
        ws.write(0, 0, "metric", header_fmt)
        ws.write(0, 1, "value", header_fmt)
        summary = compute_summary(self.load_trades(), self.rates).to_dict()
        for row_idx, (name, value) in enumerate(summary.items(), 1):
            ws.write(row_idx, 0, name)
            ws.write(row_idx, 1, "" if value is None else value, money_fmt)
        ws.set_column(0, 0, 20)
        ws.set_column(1, 1, 14)

        # Sheets 2-4: Tables
        self._write_sheet(workbook.add_worksheet("Trades"), tables["trades"],
                          header_fmt, money_fmt)
        self._write_sheet(workbook.add_worksheet("Monthly"), tables["monthly"],
                          header_fmt, money_fmt)
        self._write_sheet(workbook.add_worksheet("Cumulative"), tables["cumulative"],
                          header_fmt, money_fmt)

        workbook.close()

    def _write_sheet(self, worksheet, df: pl.DataFrame, header_fmt, money_fmt) -> None:
        """Write DataFrame to Excel worksheet."""
        for col_idx, col_name in enumerate(df.columns):
            worksheet.write(0, col_idx, col_name, header_fmt)

        for row_idx, row in enumerate(df.iter_rows(named=True), 1):
            for col_idx, col_name in enumerate(df.columns):
                value = row[col_name]
                if value is None:
                    worksheet.write(row_idx, col_idx, "")
                elif isinstance(value, float):
                    worksheet.write(row_idx, col_idx, value, money_fmt)
                else:
                    worksheet.write(row_idx, col_idx, value)

        for col_idx, col_name in enumerate(df.columns):
            worksheet.set_column(col_idx, col_idx, max(len(col_name), 10))
