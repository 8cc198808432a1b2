"""Application Services for Journal Analytics.

Services orchestrate repository access to implement use cases.

Available services:
- JournalReportService: Dashboard figures and report export
"""

from journal_analytics.application.services.journal_report import (
    JournalReportService,
    JournalReportConfig,
)

__all__ = [
    "JournalReportService",
    "JournalReportConfig",
]
