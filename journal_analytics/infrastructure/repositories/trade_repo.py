"""Trade Repository: Access to the trade journal export.

Provides read access to a journal file (json, csv or parquet).
Column names may be camelCase as exported by the web journal
(entryPrice, tradeCategory, stopLoss) or snake_case.

Rows are converted into immutable Trade values. Records with values
outside the closed enumerations or malformed dates are rejected here,
so the analytics core only ever sees well-typed trades.
"""

import logging
import math
import re
from datetime import date
from enum import Enum
from typing import TypeVar

import polars as pl

from journal_analytics.domain.models import (
    InstrumentType,
    OptionType,
    Trade,
    TradeCategory,
    TradeDirection,
)
from journal_analytics.domain.metrics.distribution import filter_by_date
from journal_analytics.infrastructure.config import DataPaths, DEFAULT_PATHS

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

REQUIRED_COLUMNS = (
    "date",
    "ticker",
    "instrument",
    "trade_category",
    "direction",
    "size",
    "entry_price",
    "exit_price",
)

READERS = {
    ".json": pl.read_json,
    ".csv": pl.read_csv,
    ".parquet": pl.read_parquet,
}


class RepositoryError(Exception):
    """Exception raised when the journal cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(f"{message}" + (f" (path: {path})" if path else ""))


def _snake_case(name: str) -> str:
    """entryPrice -> entry_price"""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name.strip()).lower()


def _parse_enum(enum_cls: type[E], value, field_name: str) -> E:
    """Match an enum member by value, ignoring case."""
    text = str(value).strip().lower() if value is not None else ""
    for member in enum_cls:
        if member.value.lower() == text:
            return member
    allowed = ", ".join(m.value for m in enum_cls)
    raise ValueError(f"{field_name} must be one of {allowed}, got: {value!r}")


def _parse_date(value) -> str:
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    text = str(value).strip() if value is not None else ""
    if not DATE_PATTERN.match(text):
        raise ValueError(f"date must be YYYY-MM-DD format, got: {value!r}")
    return text


def _optional_float(value) -> float | None:
    if value is None or value == "":
        return None
    number = float(value)
    return None if math.isnan(number) else number


def _text(value) -> str:
    return "" if value is None else str(value)


class TradeRepository:
    """Repository for journal trades.

    Loads the journal file configured in DataPaths and caches the
    converted trades.

    Example:
        >>> repo = TradeRepository()
        >>> trades = repo.get_all()
        >>> trade = repo.get_by_id("t-42")
    """

    def __init__(self, paths: DataPaths = DEFAULT_PATHS):
        self._paths = paths
        self._frame_cache: pl.DataFrame | None = None
        self._cache: list[Trade] | None = None

    def get_frame(self) -> pl.DataFrame:
        """Load the journal as a DataFrame with snake_case columns.

        Raises:
            RepositoryError: If the file is missing, unreadable, of an
                unsupported type, or has two columns with the same
                snake_case name
        """
        if self._frame_cache is not None:
            return self._frame_cache

        path = self._paths.journal_file
        if not path.exists():
            raise RepositoryError("Journal file not found", str(path))

        reader = READERS.get(path.suffix.lower())
        if reader is None:
            raise RepositoryError(
                f"Unsupported journal format: {path.suffix or '(none)'}", str(path)
            )

        try:
            df = reader(path)
        except Exception as e:
            raise RepositoryError(f"Failed to read journal: {e}", str(path))

        renamed = {c: _snake_case(c) for c in df.columns}
        seen: dict[str, str] = {}
        for original, name in renamed.items():
            if name in seen:
                raise RepositoryError(
                    f"Duplicate journal columns: {seen[name]}, {original}", str(path)
                )
            seen[name] = original

        df = df.rename(renamed)
        logger.debug("Read %d journal rows from %s", len(df), path)

        self._frame_cache = df
        return df

    def get_all(self) -> list[Trade]:
        """Load all trades.

        Returns:
            Trades in file order

        Raises:
            RepositoryError: If the file cannot be read, a required column
                is missing or a row holds an invalid value
        """
        if self._cache is not None:
            return self._cache

        df = self.get_frame()
        if len(df) == 0:
            self._cache = []
            return self._cache

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise RepositoryError(
                f"Journal is missing columns: {', '.join(missing)}",
                str(self._paths.journal_file),
            )

        trades = []
        for index, row in enumerate(df.iter_rows(named=True)):
            try:
                trades.append(self._to_trade(row, index))
            except (TypeError, ValueError) as e:
                raise RepositoryError(
                    f"Invalid trade at row {index + 1}: {e}",
                    str(self._paths.journal_file),
                )

        logger.info("Loaded %d trades from %s", len(trades), self._paths.journal_file)
        self._cache = trades
        return trades

    def get_by_id(self, trade_id: str) -> Trade | None:
        """Find a trade by its journal id.

        Args:
            trade_id: Journal identifier

        Returns:
            The trade, or None if no trade has this id
        """
        for trade in self.get_all():
            if trade.id == trade_id:
                return trade
        return None

    def get_between(self, start: str | None = None, end: str | None = None) -> list[Trade]:
        """Trades dated within [start, end] (inclusive, open when None)."""
        return filter_by_date(self.get_all(), start, end)

    def clear_cache(self) -> None:
        """Clear cached data."""
        self._frame_cache = None
        self._cache = None

    @staticmethod
    def _to_trade(row: dict, index: int) -> Trade:
        """Convert one journal row into a Trade."""
        trade_id = row.get("id")
        option_type = row.get("option_type")

        return Trade(
            id=str(trade_id) if trade_id is not None else str(index + 1),
            date=_parse_date(row["date"]),
            ticker=_text(row["ticker"]),
            instrument=_parse_enum(InstrumentType, row["instrument"], "instrument"),
            trade_category=_parse_enum(TradeCategory, row["trade_category"], "trade_category"),
            direction=_parse_enum(TradeDirection, row["direction"], "direction"),
            size=float(row["size"]),
            entry_price=float(row["entry_price"]),
            exit_price=float(row["exit_price"]),
            stop_loss=_optional_float(row.get("stop_loss")),
            target=_optional_float(row.get("target")),
            option_type=(
                _parse_enum(OptionType, option_type, "option_type")
                if option_type not in (None, "") else None
            ),
            strike_price=_optional_float(row.get("strike_price")),
            setup=_text(row.get("setup")),
            notes=_text(row.get("notes")),
        )
