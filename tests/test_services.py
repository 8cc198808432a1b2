"""Unit tests for application/services/ module.

Tests verify:
1. JournalReportService figures match the domain calculations
2. Date filtering applies to every aggregate
3. Report export writes the configured formats
"""

import json
import re
import zipfile

import polars as pl
import pytest

from journal_analytics.application import JournalReportService, JournalReportConfig
from journal_analytics.domain.metrics import NO_CHARGES, compute_net_pnl, compute_summary
from journal_analytics.infrastructure import (
    AnalysisConfig,
    DataPaths,
    TradeRepository,
)


JOURNAL_ROWS = [
    {
        "id": "t1", "date": "2023-10-24", "ticker": "RELIANCE",
        "instrument": "Stock", "tradeCategory": "Cash", "direction": "Long",
        "size": 10, "entryPrice": 2300.5, "exitPrice": 2325.0,
        "stopLoss": 2290.0, "target": 2340.0, "setup": "Breakout",
    },
    {
        "id": "t2", "date": "2023-10-25", "ticker": "NIFTY 50",
        "instrument": "Index", "tradeCategory": "Option", "direction": "Long",
        "size": 50, "entryPrice": 150.5, "exitPrice": 120.0,
        "stopLoss": None, "target": None, "setup": "Reversal",
    },
    {
        "id": "t3", "date": "2023-11-01", "ticker": "BTCUSDT",
        "instrument": "Crypto", "tradeCategory": "Future", "direction": "Short",
        "size": 0.5, "entryPrice": 35000.0, "exitPrice": 34000.0,
        "stopLoss": None, "target": None, "setup": "Trend",
    },
]


@pytest.fixture
def paths(tmp_path) -> DataPaths:
    paths = DataPaths(root=tmp_path)
    paths.ensure_dirs()
    paths.journal_file.write_text(json.dumps(JOURNAL_ROWS), encoding="utf-8")
    return paths


@pytest.fixture
def service(paths, tmp_path) -> JournalReportService:
    config = JournalReportConfig(output_dir=tmp_path / "out")
    return JournalReportService(paths=paths, config=config)


class EmptyRepository(TradeRepository):
    """Repository stub for an empty journal."""

    def get_all(self):
        return []


# =============================================================================
# JournalReportConfig Tests
# =============================================================================

class TestJournalReportConfig:
    """Tests for JournalReportConfig dataclass."""

    def test_defaults(self):
        config = JournalReportConfig()
        assert config.output_formats == ("csv", "parquet")
        assert config.output_dir is None
        assert config.start is None
        assert config.end is None

    def test_frozen(self):
        """JournalReportConfig should be immutable."""
        config = JournalReportConfig()
        with pytest.raises(AttributeError):
            config.start = "2023-01-01"


# =============================================================================
# JournalReportService Tests
# =============================================================================

class TestJournalReportService:
    """Tests for dashboard figures."""

    def test_summary(self, service):
        """Summary matches the domain calculation."""
        summary = service.get_summary()

        assert summary == compute_summary(service.load_trades())
        assert summary.total_trades == 3
        assert summary.winning_trades == 2
        assert summary.losing_trades == 1
        assert summary.total_pnl == pytest.approx(-934.778138)

    def test_date_filter(self, paths):
        """Configured date range limits every figure."""
        config = JournalReportConfig(start="2023-10-25", end="2023-10-31")
        service = JournalReportService(paths=paths, config=config)

        assert [t.id for t in service.load_trades()] == ["t2"]
        assert service.get_summary().total_trades == 1
        assert len(service.get_monthly_table()) == 1

    def test_custom_rates(self, paths):
        """The analysis config decides the rate schedule."""
        service = JournalReportService(paths=paths, analysis=AnalysisConfig(rates=NO_CHARGES))
        summary = service.get_summary()

        assert summary.total_pnl == pytest.approx(245.0 - 1525.0 + 500.0)

    def test_breakdowns(self, service):
        breakdowns = service.get_breakdowns()

        assert breakdowns["direction"] == {"Long": 2, "Short": 1}
        assert breakdowns["outcome"] == {"Wins": 2, "Losses": 1}
        assert breakdowns["instrument"] == {"Stock": 1, "Index": 1, "Crypto": 1}

    def test_trade_detail(self, service):
        trade, detail = service.get_trade_detail("t1")

        assert trade.ticker == "RELIANCE"
        assert detail.gross_pnl == pytest.approx(245.0)
        assert detail.net_pnl == pytest.approx(compute_net_pnl(trade))
        assert detail.planned_risk_reward == pytest.approx(39.5 / 10.5)

    def test_trade_detail_unknown(self, service):
        assert service.get_trade_detail("nope") is None


class TestReportTables:
    """Tests for the polars tables."""

    def test_trade_table(self, service):
        """One row per trade, newest first, net = gross - charges."""
        df = service.get_trade_table()

        assert df["id"].to_list() == ["t3", "t2", "t1"]
        assert "total_charges" in df.columns
        for row in df.iter_rows(named=True):
            assert row["net_pnl"] == pytest.approx(row["gross_pnl"] - row["total_charges"])
            assert row["total_charges"] == pytest.approx(
                row["brokerage"] + row["transaction_tax"] + row["exchange_charge"] + row["tax"]
            )

    def test_crypto_row_untaxed(self, service):
        df = service.get_trade_table().filter(pl.col("instrument") == "Crypto")
        assert df["transaction_tax"].item() == 0

    def test_cumulative_table(self, service):
        df = service.get_cumulative_table()

        assert df["sequence_number"].to_list() == [1, 2, 3]
        assert df["cumulative_pnl"].to_list() == [190.21, -1386.26, -934.78]
        assert df["ticker"].to_list() == ["RELIANCE", "NIFTY 50", "BTCUSDT"]

    def test_monthly_table(self, service):
        df = service.get_monthly_table()

        assert df["month"].to_list() == ["2023-11", "2023-10"]
        assert df["trade_count"].to_list() == [1, 2]
        assert df["win_rate"].to_list() == pytest.approx([100.0, 50.0])

    def test_empty_tables_keep_schema(self, paths):
        """Empty journals still produce typed, empty tables."""
        service = JournalReportService(paths=paths, repository=EmptyRepository(paths))

        assert len(service.get_trade_table()) == 0
        assert service.get_cumulative_table().columns == [
            "sequence_number", "cumulative_pnl", "date", "ticker",
        ]
        assert service.get_monthly_table().schema["net_pnl"] == pl.Float64
        assert service.get_summary().profit_factor is None


class TestSaveReport:
    """Tests for report export."""

    def test_csv_and_parquet(self, service, tmp_path):
        saved = service.save_report("journal")

        names = sorted(p.name for p in saved)
        assert names == sorted([
            "journal_trades.csv", "journal_monthly.csv", "journal_cumulative.csv",
            "journal_trades.parquet", "journal_monthly.parquet", "journal_cumulative.parquet",
        ])
        assert all(p.exists() for p in saved)

        monthly = pl.read_parquet(tmp_path / "out" / "journal_monthly.parquet")
        assert monthly["month"].to_list() == ["2023-11", "2023-10"]

    def test_json(self, service):
        saved = service.save_report("journal", formats=("json",))
        assert len(saved) == 3
        assert all(p.suffix == ".json" for p in saved)

    def test_xlsx(self, service):
        pytest.importorskip("xlsxwriter")
        saved = service.save_report("journal", formats=("xlsx",))

        assert [p.name for p in saved] == ["journal.xlsx"]
        assert saved[0].stat().st_size > 0

    def test_xlsx_sheets(self, service):
        """Workbook holds the summary plus every exported table."""
        pytest.importorskip("xlsxwriter")
        path = service.save_report("journal", formats=("xlsx",))[0]

        with zipfile.ZipFile(path) as archive:
            workbook = archive.read("xl/workbook.xml").decode("utf-8")
        names = re.findall(r'<sheet name="([^"]+)"', workbook)
        assert names == ["Summary", "Trades", "Monthly", "Cumulative"]

    def test_default_output_dir(self, paths):
        """Without an output directory, files land in data/reports."""
        config = JournalReportConfig(output_formats=("csv",))
        saved = JournalReportService(paths=paths, config=config).save_report("journal")

        assert len(saved) == 3
        assert all(p.parent == paths.reports_dir for p in saved)
        assert all(p.exists() for p in saved)

    def test_unknown_format(self, service):
        with pytest.raises(ValueError, match="Unknown format"):
            service.save_report("journal", formats=("pdf",))

    def test_no_formats(self, paths, tmp_path):
        """An empty format list is an error, not a silent no-op."""
        config = JournalReportConfig(output_dir=tmp_path / "out", output_formats=())
        service = JournalReportService(paths=paths, config=config)

        with pytest.raises(ValueError, match="No output formats"):
            service.save_report("journal")
        assert not (tmp_path / "out").exists()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
