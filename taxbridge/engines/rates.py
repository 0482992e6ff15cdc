"""Statutory rate configuration.

Personal income tax bands, reliefs, and turnover thresholds for VAT and CIT.
Never hardcode rates or thresholds in computation functions.

Sources:
  - Nigeria Tax Act 2025, Fourth Schedule (Section 58): individuals' income tax rates
  - Section 30(2): rent relief
  - Section 80: VAT registration threshold
  - Section 90: companies income tax rates
"""

from collections.abc import Sequence
from decimal import Decimal

from taxbridge.exceptions import TaxConfigurationError
from taxbridge.models.pit import TaxBand

# ---------------------------------------------------------------------------
# PIT bands (Fourth Schedule). Ceilings are cumulative chargeable income.
# Immutable: a tuple of frozen models.
# ---------------------------------------------------------------------------
PIT_BANDS: tuple[TaxBand, ...] = (
    TaxBand(upper_limit=Decimal("800000"), rate=Decimal("0.00"), label="Tax-Free (0-₦800k)"),
    TaxBand(upper_limit=Decimal("3000000"), rate=Decimal("0.15"), label="Next ₦2.2M (15%)"),
    TaxBand(upper_limit=Decimal("12000000"), rate=Decimal("0.18"), label="Next ₦9M (18%)"),
    TaxBand(upper_limit=Decimal("25000000"), rate=Decimal("0.21"), label="Next ₦13M (21%)"),
    TaxBand(upper_limit=Decimal("50000000"), rate=Decimal("0.23"), label="Next ₦25M (23%)"),
    TaxBand(upper_limit=None, rate=Decimal("0.25"), label="Above ₦50M (25%)"),
)

# ---------------------------------------------------------------------------
# Reliefs and statutory deductions
# ---------------------------------------------------------------------------
RENT_RELIEF_RATE = Decimal("0.20")  # 20% of annual rent paid
RENT_RELIEF_CAP = Decimal("500000")
NHF_RATE = Decimal("0.025")  # 2.5% of gross income

# Validator-only ceiling; flags unrealistic entries, not a legal limit.
PIT_INCOME_SANITY_CEILING = Decimal("100000000")

# ---------------------------------------------------------------------------
# VAT registration (Section 80)
# ---------------------------------------------------------------------------
VAT_REGISTRATION_THRESHOLD = Decimal("100000000")
VAT_APPROACHING_RATIO = Decimal("0.80")

# ---------------------------------------------------------------------------
# CIT tiers (Section 90), inclusive upper turnover bounds
# ---------------------------------------------------------------------------
CIT_SMALL_TURNOVER_CEILING = Decimal("50000000")
CIT_MEDIUM_TURNOVER_CEILING = Decimal("100000000")
CIT_SMALL_RATE = Decimal("0")
CIT_MEDIUM_RATE = Decimal("0.20")
CIT_LARGE_RATE = Decimal("0.30")

# ---------------------------------------------------------------------------
# Disclaimers
# ---------------------------------------------------------------------------
PIT_DISCLAIMER = "Educational estimate only. Consult FIRS for official verification."
VAT_DISCLAIMER = "Monitor actuals. Consult FIRS for official guidance."
CIT_DISCLAIMER = (
    "CIT applies to incorporated entities only. "
    "TaxBridge V1 focuses on PIT for sole proprietors."
)


def check_band_table(bands: Sequence[TaxBand]) -> None:
    """Verify a band table partitions [0, inf) with a tax-free first band.

    Raises:
        TaxConfigurationError: on the first violated rule.
    """
    if not bands:
        raise TaxConfigurationError("band table is empty")
    if bands[0].rate != 0:
        raise TaxConfigurationError("first band must be tax-free (rate 0)")
    if bands[-1].upper_limit is not None:
        raise TaxConfigurationError("last band must be unbounded (upper_limit=None)")

    previous = Decimal("0")
    for index, band in enumerate(bands):
        if not Decimal("0") <= band.rate <= Decimal("1"):
            raise TaxConfigurationError(f"band '{band.label}' rate {band.rate} outside [0, 1]")
        if band.upper_limit is None:
            if index != len(bands) - 1:
                raise TaxConfigurationError(f"only the last band may be unbounded, not '{band.label}'")
            continue
        if not band.upper_limit.is_finite() or band.upper_limit <= previous:
            raise TaxConfigurationError(
                f"band '{band.label}' ceiling {band.upper_limit} must exceed {previous}"
            )
        previous = band.upper_limit


check_band_table(PIT_BANDS)
