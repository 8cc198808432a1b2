"""Data repositories for Journal Analytics.

- TradeRepository: Closed trades from the journal export
- RepositoryError: Raised when the journal cannot be loaded
"""

from journal_analytics.infrastructure.repositories.trade_repo import (
    RepositoryError,
    TradeRepository,
)

__all__ = [
    "RepositoryError",
    "TradeRepository",
]
