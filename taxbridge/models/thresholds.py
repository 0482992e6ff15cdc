"""Turnover classification results (VAT registration, CIT tier)."""

from decimal import Decimal

from pydantic import BaseModel

from taxbridge.models.enums import CITCategory, VATStatus


class VATCheckResult(BaseModel):
    turnover: Decimal
    threshold: Decimal
    status: VATStatus
    message: str
    disclaimer: str
    requires_registration: bool
    percentage_of_threshold: Decimal  # capped at 100


class CITCheckResult(BaseModel):
    turnover: Decimal
    rate: Decimal
    category: CITCategory
    message: str
    disclaimer: str
