"""Unit tests for interfaces/cli.py.

Tests verify:
1. CLI commands execute without errors
2. Output format is correct
3. Error handling works properly
"""

import json

import pytest

from journal_analytics.interfaces.cli import main


JOURNAL_ROWS = [
    {
        "id": "t1", "date": "2023-10-24", "ticker": "RELIANCE",
        "instrument": "Stock", "tradeCategory": "Cash", "direction": "Long",
        "size": 10, "entryPrice": 2300.5, "exitPrice": 2325.0,
        "stopLoss": 2290.0, "target": 2340.0, "setup": "Breakout",
    },
    {
        "id": "t2", "date": "2023-11-01", "ticker": "NIFTY 50",
        "instrument": "Index", "tradeCategory": "Option", "direction": "Long",
        "size": 50, "entryPrice": 150.5, "exitPrice": 120.0,
        "stopLoss": None, "target": None, "setup": "Reversal",
    },
]


@pytest.fixture
def journal(tmp_path):
    path = tmp_path / "trades.json"
    path.write_text(json.dumps(JOURNAL_ROWS), encoding="utf-8")
    return str(path)


class TestCliBasic:
    """Basic CLI tests."""

    def test_version(self, capsys):
        """--version should show version."""
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0

    def test_help(self, capsys):
        """No command should show help."""
        result = main([])
        assert result == 0

    def test_invalid_command(self):
        """Invalid command should fail."""
        with pytest.raises(SystemExit):
            main(["invalid_command"])

    def test_missing_journal(self, tmp_path, capsys):
        """Unreadable journal returns 1 with a message."""
        result = main(["--journal", str(tmp_path / "none.json"), "summary"])
        assert result == 1

        captured = capsys.readouterr()
        assert "Journal file not found" in captured.out

    def test_duplicate_columns(self, tmp_path, capsys):
        """Clashing column spellings are reported, not raised."""
        path = tmp_path / "trades.csv"
        path.write_text(
            "id,date,ticker,instrument,tradeCategory,trade_category,direction,size,entryPrice,exitPrice\n"
            "a,2023-10-24,TCS,Stock,Cash,Cash,Long,5,3400.0,3420.0\n",
            encoding="utf-8",
        )
        result = main(["--journal", str(path), "summary"])
        assert result == 1
        assert "Duplicate journal columns" in capsys.readouterr().out


class TestSummaryCommand:
    """Tests for summary command."""

    def test_summary(self, journal, capsys):
        result = main(["--journal", journal, "summary"])
        assert result == 0

        captured = capsys.readouterr()
        assert "Total:      2" in captured.out
        assert "Win rate:   50.0%" in captured.out
        assert "Direction" in captured.out

    def test_summary_date_filter(self, journal, capsys):
        result = main(["--journal", journal, "summary", "--end", "2023-10-31"])
        assert result == 0

        captured = capsys.readouterr()
        assert "Total:      1" in captured.out
        assert "Profit factor:  N/A" in captured.out


class TestMonthlyCommand:
    """Tests for monthly command."""

    def test_monthly_order(self, journal, capsys):
        result = main(["--journal", journal, "monthly"])
        assert result == 0

        out = capsys.readouterr().out
        assert out.index("2023-11") < out.index("2023-10")

    def test_monthly_empty(self, journal, capsys):
        result = main(["--journal", journal, "monthly", "--start", "2030-01-01"])
        assert result == 0
        assert "No monthly performance data" in capsys.readouterr().out


class TestEquityCommand:
    """Tests for equity command."""

    def test_equity(self, journal, capsys):
        result = main(["--journal", journal, "equity"])
        assert result == 0

        out = capsys.readouterr().out
        assert "+₹190.21" in out
        assert "-₹1,386.26" in out

    def test_equity_last(self, journal, capsys):
        main(["--journal", journal, "equity", "--last", "1"])
        out = capsys.readouterr().out
        assert "RELIANCE" not in out
        assert "NIFTY 50" in out


class TestTradeCommand:
    """Tests for trade command."""

    def test_trade(self, journal, capsys):
        result = main(["--journal", journal, "trade", "t1"])
        assert result == 0

        out = capsys.readouterr().out
        assert "[RELIANCE]" in out
        assert "Gross P&L:      +₹245.00" in out
        assert "Planned R:R:    3.76" in out

    def test_trade_not_found(self, journal, capsys):
        """Unknown trade id should fail."""
        result = main(["--journal", journal, "trade", "missing"])
        assert result == 1
        assert "Trade not found" in capsys.readouterr().out


class TestReportCommand:
    """Tests for report command."""

    def test_report(self, journal, tmp_path, capsys):
        out_dir = tmp_path / "reports"
        result = main([
            "--journal", journal, "report",
            "--output-dir", str(out_dir), "--formats", "csv",
        ])
        assert result == 0
        assert (out_dir / "journal_report_trades.csv").exists()
        assert "Saved:" in capsys.readouterr().out

    def test_report_bad_format(self, journal, tmp_path, capsys):
        result = main([
            "--journal", journal, "report",
            "--output-dir", str(tmp_path), "--formats", "pdf",
        ])
        assert result == 1
        assert "Unknown format" in capsys.readouterr().out

    def test_report_empty_formats(self, journal, tmp_path, capsys):
        """A format list with no entries fails instead of writing nothing."""
        result = main([
            "--journal", journal, "report",
            "--output-dir", str(tmp_path / "reports"), "--formats", ",",
        ])
        assert result == 1
        assert "No output formats" in capsys.readouterr().out

    def test_report_default_dir(self, journal, tmp_path, monkeypatch):
        """Reports go to data/reports when no directory is given."""
        monkeypatch.chdir(tmp_path)
        result = main(["--journal", journal, "report", "--formats", "csv"])
        assert result == 0
        assert (tmp_path / "data" / "reports" / "journal_report_monthly.csv").exists()

    def test_report_help(self):
        """Report --help should show options."""
        with pytest.raises(SystemExit) as exc:
            main(["report", "--help"])
        assert exc.value.code == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
