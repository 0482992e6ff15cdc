"""Data models for the TaxBridge tax engine."""

from taxbridge.models.enums import CITCategory, VATStatus
from taxbridge.models.pit import (
    BandBreakdown,
    DeductionsBreakdown,
    PITInputs,
    PITResult,
    TaxBand,
)
from taxbridge.models.thresholds import CITCheckResult, VATCheckResult

__all__ = [
    "BandBreakdown",
    "CITCategory",
    "CITCheckResult",
    "DeductionsBreakdown",
    "PITInputs",
    "PITResult",
    "TaxBand",
    "VATCheckResult",
    "VATStatus",
]
