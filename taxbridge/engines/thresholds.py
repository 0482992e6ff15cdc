"""Turnover classifiers for VAT registration and CIT rate tier.

VAT (Section 80): registration is mandatory from ₦100M annual turnover;
from 80% of that a business is flagged as approaching the threshold.
CIT (Section 90): 0% up to ₦50M, 20% up to ₦100M, 30% above.
"""

import logging
from decimal import Decimal

from taxbridge.engines.rates import (
    CIT_DISCLAIMER,
    CIT_LARGE_RATE,
    CIT_MEDIUM_RATE,
    CIT_MEDIUM_TURNOVER_CEILING,
    CIT_SMALL_RATE,
    CIT_SMALL_TURNOVER_CEILING,
    VAT_APPROACHING_RATIO,
    VAT_DISCLAIMER,
    VAT_REGISTRATION_THRESHOLD,
)
from taxbridge.exceptions import DataValidationError
from taxbridge.formatting import NAIRA, format_grouped, to_decimal
from taxbridge.models.enums import CITCategory, VATStatus
from taxbridge.models.thresholds import CITCheckResult, VATCheckResult

logger = logging.getLogger(__name__)


def _turnover(value: Decimal | int | float) -> Decimal:
    turnover = to_decimal(value, "turnover")
    if not turnover.is_finite() or turnover < 0:
        raise DataValidationError("turnover", f"must be a non-negative number, got {value}")
    return turnover


def check_vat_threshold(turnover: Decimal | int | float) -> VATCheckResult:
    """Classify annual turnover against the VAT registration threshold."""
    amount = _turnover(turnover)
    threshold = VAT_REGISTRATION_THRESHOLD
    approaching = threshold * VAT_APPROACHING_RATIO

    if amount < approaching:
        status = VATStatus.EXEMPT
        message = "You are exempt from VAT registration"
    elif amount < threshold:
        status = VATStatus.APPROACHING
        # Grouped, without forced kobo, unlike format_naira.
        message = f"Approaching threshold ({NAIRA}{format_grouped(threshold - amount)} remaining)"
    else:
        status = VATStatus.MANDATORY
        message = "VAT registration mandatory per Section 80"

    percentage = min(amount / threshold * 100, Decimal("100"))
    logger.debug("VAT check: turnover=%s status=%s", amount, status)

    return VATCheckResult(
        turnover=amount,
        threshold=threshold,
        status=status,
        message=message,
        disclaimer=VAT_DISCLAIMER,
        requires_registration=status == VATStatus.MANDATORY,
        percentage_of_threshold=percentage,
    )


def determine_cit_rate(turnover: Decimal | int | float) -> CITCheckResult:
    """Determine the CIT rate tier for a company's annual turnover."""
    amount = _turnover(turnover)

    if amount <= CIT_SMALL_TURNOVER_CEILING:
        rate, category = CIT_SMALL_RATE, CITCategory.SMALL
        message = "Small company relief: 0% CIT"
    elif amount <= CIT_MEDIUM_TURNOVER_CEILING:
        rate, category = CIT_MEDIUM_RATE, CITCategory.MEDIUM
        message = "Medium company rate: 20% CIT"
    else:
        rate, category = CIT_LARGE_RATE, CITCategory.LARGE
        message = "Standard rate: 30% CIT on profits"

    logger.debug("CIT check: turnover=%s category=%s", amount, category)
    return CITCheckResult(
        turnover=amount,
        rate=rate,
        category=category,
        message=message,
        disclaimer=CIT_DISCLAIMER,
    )
