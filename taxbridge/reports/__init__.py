"""Report generation for TaxBridge."""

from taxbridge.reports.pit_summary import PITSummaryGenerator

__all__ = [
    "PITSummaryGenerator",
]
