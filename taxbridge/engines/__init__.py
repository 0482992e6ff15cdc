"""Tax computation engines."""

from taxbridge.engines.pit import (
    allocate_bands,
    calculate_deductions,
    calculate_nhf_deduction,
    calculate_pit,
    calculate_rent_relief,
    validate_pit_inputs,
)
from taxbridge.engines.thresholds import check_vat_threshold, determine_cit_rate

__all__ = [
    "allocate_bands",
    "calculate_deductions",
    "calculate_nhf_deduction",
    "calculate_pit",
    "calculate_rent_relief",
    "check_vat_threshold",
    "determine_cit_rate",
    "validate_pit_inputs",
]
