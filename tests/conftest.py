"""Shared test fixtures for TaxBridge."""

from decimal import Decimal

import pytest

from taxbridge.models.pit import PITInputs


@pytest.fixture
def low_income_inputs() -> PITInputs:
    """Market trader below the tax-free band once NHF is applied."""
    return PITInputs(annual_gross_income=Decimal("500000"))


@pytest.fixture
def salaried_renter_inputs() -> PITInputs:
    """₦5M earner paying ₦1M rent, no other declared deductions."""
    return PITInputs(
        annual_gross_income=Decimal("5000000"),
        annual_rent=Decimal("1000000"),
    )


@pytest.fixture
def fully_declared_inputs() -> PITInputs:
    return PITInputs(
        annual_gross_income=Decimal("5000000"),
        annual_rent=Decimal("1200000"),
        pension_contributions=Decimal("400000"),
        nhf_contributions=Decimal("60000"),
        nhis_contributions=Decimal("50000"),
        life_insurance=Decimal("100000"),
        housing_loan_interest=Decimal("150000"),
    )
