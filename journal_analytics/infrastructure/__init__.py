"""Infrastructure layer for Journal Analytics.

Contains:
- config: Data paths and analysis configuration
- repositories: Data access abstractions
"""

from journal_analytics.infrastructure.config import (
    DataPaths,
    AnalysisConfig,
    DEFAULT_PATHS,
    DEFAULT_CONFIG,
)
from journal_analytics.infrastructure.repositories import (
    RepositoryError,
    TradeRepository,
)

__all__ = [
    # Config
    "DataPaths",
    "AnalysisConfig",
    "DEFAULT_PATHS",
    "DEFAULT_CONFIG",
    # Repositories
    "RepositoryError",
    "TradeRepository",
]
