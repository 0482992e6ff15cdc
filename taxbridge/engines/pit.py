"""Personal Income Tax engine.

Computes PIT under the Nigeria Tax Act 2025:
  - Rent relief per Section 30(2): lower of ₦500,000 or 20% of annual rent
  - National Housing Fund deduction: declared amount, else 2.5% of gross income
  - Pension, NHIS, life insurance and housing loan interest deductions
  - Progressive Fourth Schedule bands applied to chargeable income

Every function is pure. The band table is passed in, never mutated.
"""

import logging
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from taxbridge.engines.rates import (
    NHF_RATE,
    PIT_BANDS,
    PIT_DISCLAIMER,
    PIT_INCOME_SANITY_CEILING,
    RENT_RELIEF_CAP,
    RENT_RELIEF_RATE,
    check_band_table,
)
from taxbridge.exceptions import DataValidationError, InvalidPITInputError
from taxbridge.formatting import to_decimal
from taxbridge.models.pit import (
    BandBreakdown,
    DeductionsBreakdown,
    PITInputs,
    PITResult,
    TaxBand,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

GROSS_INCOME_FIELD = "annual_gross_income"

# Optional amounts and the label used in validation messages.
OPTIONAL_FIELDS: dict[str, str] = {
    "annual_rent": "Annual rent",
    "pension_contributions": "Pension contributions",
    "nhf_contributions": "NHF contributions",
    "nhis_contributions": "NHIS contributions",
    "life_insurance": "Life insurance premiums",
    "housing_loan_interest": "Housing loan interest",
}


def _require_non_negative(value: Decimal, field: str) -> Decimal:
    if not value.is_finite():
        raise DataValidationError(field, f"must be finite, got {value}")
    if value < 0:
        raise DataValidationError(field, f"cannot be negative, got {value}")
    return value


def calculate_rent_relief(annual_rent: Decimal) -> Decimal:
    """Rent relief: min(₦500,000, 20% of annual rent).

    Raises:
        DataValidationError: if rent is negative or not finite.
    """
    rent = _require_non_negative(to_decimal(annual_rent, "annual_rent"), "annual_rent")
    return min(RENT_RELIEF_CAP, rent * RENT_RELIEF_RATE)


def calculate_nhf_deduction(gross_income: Decimal) -> Decimal:
    """Statutory NHF contribution, 2.5% of gross income."""
    gross = _require_non_negative(to_decimal(gross_income, GROSS_INCOME_FIELD), GROSS_INCOME_FIELD)
    return gross * NHF_RATE


def allocate_bands(
    chargeable_income: Decimal,
    bands: Sequence[TaxBand] = PIT_BANDS,
) -> tuple[Decimal, list[BandBreakdown]]:
    """Split chargeable income across progressive bands.

    Income exactly on a ceiling stays in the lower band. Bands that receive
    no income (including every band after income runs out) are omitted.

    Returns:
        (total tax, per-band breakdown in ascending band order)

    Raises:
        DataValidationError: if chargeable income is negative or not finite.
        TaxConfigurationError: if a custom band table is malformed.
    """
    if bands is not PIT_BANDS:
        check_band_table(bands)
    income = _require_non_negative(
        to_decimal(chargeable_income, "chargeable_income"), "chargeable_income"
    )

    remaining = income
    previous_limit = ZERO
    total_tax = ZERO
    breakdown: list[BandBreakdown] = []

    for band in bands:
        if remaining <= 0:
            break

        if band.upper_limit is None:
            taxable_in_band = remaining
        else:
            taxable_in_band = min(remaining, band.upper_limit - previous_limit)
        tax_in_band = taxable_in_band * band.rate

        if taxable_in_band > 0:
            breakdown.append(
                BandBreakdown(
                    band_label=band.label,
                    rate=band.rate,
                    taxable_amount_in_band=taxable_in_band,
                    tax_amount_in_band=tax_in_band,
                )
            )
            total_tax += tax_in_band
            remaining -= taxable_in_band

        if band.upper_limit is not None:
            previous_limit = band.upper_limit

    logger.debug(
        "Allocated %s chargeable income across %d band(s): tax=%s",
        income, len(breakdown), total_tax,
    )
    return total_tax, breakdown


def calculate_deductions(inputs: PITInputs) -> DeductionsBreakdown:
    """Compute every relief/deduction and the resulting chargeable income."""
    gross = inputs.annual_gross_income
    rent_relief = calculate_rent_relief(inputs.annual_rent)
    if inputs.nhf_contributions is not None:
        nhf = inputs.nhf_contributions
    else:
        nhf = calculate_nhf_deduction(gross)
    pension = inputs.pension_contributions
    nhis = inputs.nhis_contributions
    life = inputs.life_insurance
    housing = inputs.housing_loan_interest

    total = rent_relief + nhf + pension + nhis + life + housing
    chargeable = max(gross - total, ZERO)

    return DeductionsBreakdown(
        rent_relief=rent_relief,
        pension_deduction=pension,
        nhf_deduction=nhf,
        nhis_deduction=nhis,
        life_insurance_relief=life,
        housing_loan_relief=housing,
        total_deductions=total,
        chargeable_income=chargeable,
    )


def calculate_pit(inputs: PITInputs, bands: Sequence[TaxBand] = PIT_BANDS) -> PITResult:
    """Compute the full PIT estimate for one set of declared figures.

    Args:
        inputs: Declared annual figures.
        bands: Band table; defaults to the Fourth Schedule.

    Returns:
        PITResult with every relief, the band breakdown and the effective rate.

    Raises:
        InvalidPITInputError: if any amount is negative or not finite. A bad
            gross income never yields a zero-tax "exempt" result.
        TaxConfigurationError: if a custom band table is malformed.
    """
    errors = _collect_errors(inputs.model_dump(), enforce_sanity_ceiling=False)
    if errors:
        logger.debug("Rejecting PIT inputs: %s", errors)
        raise InvalidPITInputError(errors)

    deductions = calculate_deductions(inputs)
    estimated_tax, breakdown = allocate_bands(deductions.chargeable_income, bands)

    gross = inputs.annual_gross_income
    effective_rate = estimated_tax / gross * 100 if gross > 0 else ZERO
    tax_free_ceiling = bands[0].upper_limit
    is_exempt = tax_free_ceiling is None or deductions.chargeable_income <= tax_free_ceiling

    logger.debug(
        "PIT: gross=%s deductions=%s chargeable=%s tax=%s exempt=%s",
        gross, deductions.total_deductions, deductions.chargeable_income,
        estimated_tax, is_exempt,
    )

    return PITResult(
        gross_income=gross,
        rent_relief=deductions.rent_relief,
        pension_deduction=deductions.pension_deduction,
        nhf_deduction=deductions.nhf_deduction,
        nhis_deduction=deductions.nhis_deduction,
        life_insurance_relief=deductions.life_insurance_relief,
        housing_loan_relief=deductions.housing_loan_relief,
        total_deductions=deductions.total_deductions,
        chargeable_income=deductions.chargeable_income,
        estimated_tax=estimated_tax,
        is_exempt=is_exempt,
        effective_rate=effective_rate,
        band_breakdown=tuple(breakdown),
        disclaimer=PIT_DISCLAIMER,
    )


def validate_pit_inputs(inputs: Mapping[str, Any] | PITInputs) -> list[str]:
    """Check raw PIT inputs and describe every problem found.

    Accepts a partial mapping of raw values (as posted by a form). Never
    raises for bad data; an empty list means the inputs are valid.
    """
    values = inputs.model_dump() if isinstance(inputs, PITInputs) else dict(inputs)
    return _collect_errors(values, enforce_sanity_ceiling=True)


def _parse_amount(value: Any) -> Decimal | None:
    """Return a finite Decimal, or None if the value is not a usable number."""
    try:
        amount = to_decimal(value)
    except DataValidationError:
        return None
    return amount if amount.is_finite() else None


def _collect_errors(values: Mapping[str, Any], enforce_sanity_ceiling: bool) -> list[str]:
    errors: list[str] = []

    raw_gross = values.get(GROSS_INCOME_FIELD)
    if raw_gross is None or (isinstance(raw_gross, str) and not raw_gross.strip()):
        errors.append("Annual gross income is required")
    else:
        gross = _parse_amount(raw_gross)
        if gross is None or gross < 0:
            errors.append("Annual gross income must be a non-negative number")
        elif enforce_sanity_ceiling and gross > PIT_INCOME_SANITY_CEILING:
            errors.append("Please enter realistic income (max ₦100M for sanity check)")

    for field, label in OPTIONAL_FIELDS.items():
        raw = values.get(field)
        if raw is None:
            continue
        amount = _parse_amount(raw)
        if amount is None:
            errors.append(f"{label} must be a number")
        elif amount < 0:
            errors.append(f"{label} cannot be negative")

    return errors
