"""Application Layer: Use cases and service orchestration.

This layer contains:
- services/: Business logic orchestration
  - journal_report.py: Dashboard figures and report export
"""

from journal_analytics.application.services import (
    JournalReportService,
    JournalReportConfig,
)

__all__ = [
    "JournalReportService",
    "JournalReportConfig",
]
