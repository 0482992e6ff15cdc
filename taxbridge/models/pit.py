"""Personal Income Tax data models.

Amounts are annual Naira figures. Rates are fractions (0.15 == 15%),
except PITResult.effective_rate which is a percentage.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class TaxBand(BaseModel):
    """One slice of the progressive schedule.

    upper_limit is the cumulative income ceiling; None marks the unbounded top band.
    """

    model_config = ConfigDict(frozen=True)

    upper_limit: Decimal | None
    rate: Decimal
    label: str


class PITInputs(BaseModel):
    """Declared annual figures for a single PIT calculation."""

    model_config = ConfigDict(frozen=True)

    annual_gross_income: Decimal
    annual_rent: Decimal = Field(
        default=Decimal("0"),
        description="Rent paid on the taxpayer's residence (Section 30(2) relief)",
    )
    pension_contributions: Decimal = Field(
        default=Decimal("0"),
        description="Contributions under the Pension Reform Act",
    )
    nhf_contributions: Decimal | None = Field(
        default=None,
        description=(
            "Declared National Housing Fund contributions. "
            "None applies the 2.5% statutory default; an explicit 0 is kept as 0."
        ),
    )
    nhis_contributions: Decimal = Field(
        default=Decimal("0"),
        description="National Health Insurance Scheme contributions",
    )
    life_insurance: Decimal = Field(
        default=Decimal("0"),
        description="Life insurance premiums for self or spouse",
    )
    housing_loan_interest: Decimal = Field(
        default=Decimal("0"),
        description="Interest on a loan for an owner-occupied residential house",
    )


class BandBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    band_label: str
    rate: Decimal
    taxable_amount_in_band: Decimal
    tax_amount_in_band: Decimal


class DeductionsBreakdown(BaseModel):
    """Reliefs and deductions applied before the band schedule."""

    rent_relief: Decimal
    pension_deduction: Decimal
    nhf_deduction: Decimal
    nhis_deduction: Decimal
    life_insurance_relief: Decimal
    housing_loan_relief: Decimal
    total_deductions: Decimal
    chargeable_income: Decimal


class PITResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Inputs
    gross_income: Decimal
    # Deductions & reliefs
    rent_relief: Decimal
    pension_deduction: Decimal
    nhf_deduction: Decimal
    nhis_deduction: Decimal
    life_insurance_relief: Decimal
    housing_loan_relief: Decimal
    total_deductions: Decimal
    # Calculation
    chargeable_income: Decimal
    estimated_tax: Decimal
    is_exempt: bool
    effective_rate: Decimal
    band_breakdown: tuple[BandBreakdown, ...]
    disclaimer: str
