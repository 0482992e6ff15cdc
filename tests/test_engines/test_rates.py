"""Tests for rate table completeness and consistency."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from taxbridge.engines.rates import (
    CIT_LARGE_RATE,
    CIT_MEDIUM_RATE,
    PIT_BANDS,
    RENT_RELIEF_CAP,
    VAT_REGISTRATION_THRESHOLD,
    check_band_table,
)
from taxbridge.exceptions import TaxConfigurationError
from taxbridge.models.pit import TaxBand


class TestPITBands:
    def test_six_bands(self):
        assert len(PIT_BANDS) == 6

    def test_known_ceilings(self):
        ceilings = [band.upper_limit for band in PIT_BANDS]
        assert ceilings == [
            Decimal("800000"),
            Decimal("3000000"),
            Decimal("12000000"),
            Decimal("25000000"),
            Decimal("50000000"),
            None,
        ]

    def test_known_rates(self):
        rates = [band.rate for band in PIT_BANDS]
        assert rates == [
            Decimal("0"),
            Decimal("0.15"),
            Decimal("0.18"),
            Decimal("0.21"),
            Decimal("0.23"),
            Decimal("0.25"),
        ]

    def test_band_monotonicity(self):
        prev = Decimal("0")
        for band in PIT_BANDS[:-1]:
            assert band.upper_limit > prev, f"Non-monotonic band {band.label}"
            prev = band.upper_limit

    def test_top_band_is_unbounded(self):
        assert PIT_BANDS[-1].upper_limit is None

    def test_first_band_is_tax_free_to_800k(self):
        assert PIT_BANDS[0].rate == 0
        assert PIT_BANDS[0].upper_limit == Decimal("800000")

    def test_bands_are_immutable(self):
        with pytest.raises(ValidationError):
            PIT_BANDS[0].rate = Decimal("0.5")
        assert isinstance(PIT_BANDS, tuple)


class TestStatutoryConstants:
    def test_rent_relief_cap(self):
        assert RENT_RELIEF_CAP == Decimal("500000")

    def test_vat_threshold(self):
        assert VAT_REGISTRATION_THRESHOLD == Decimal("100000000")

    def test_cit_rates(self):
        assert CIT_MEDIUM_RATE == Decimal("0.20")
        assert CIT_LARGE_RATE == Decimal("0.30")


class TestCheckBandTable:
    def _band(self, upper, rate, label="b"):
        return TaxBand(
            upper_limit=None if upper is None else Decimal(upper),
            rate=Decimal(rate),
            label=label,
        )

    def test_default_table_passes(self):
        check_band_table(PIT_BANDS)

    def test_empty_table(self):
        with pytest.raises(TaxConfigurationError, match="empty"):
            check_band_table([])

    def test_first_band_must_be_tax_free(self):
        with pytest.raises(TaxConfigurationError, match="tax-free"):
            check_band_table([self._band("1000", "0.1"), self._band(None, "0.2")])

    def test_last_band_must_be_unbounded(self):
        with pytest.raises(TaxConfigurationError, match="unbounded"):
            check_band_table([self._band("1000", "0"), self._band("2000", "0.2")])

    def test_unbounded_band_in_middle(self):
        with pytest.raises(TaxConfigurationError, match="only the last band"):
            check_band_table([self._band("1000", "0"), self._band(None, "0.1"), self._band(None, "0.2")])

    def test_ceilings_must_increase(self):
        with pytest.raises(TaxConfigurationError, match="must exceed"):
            check_band_table([
                self._band("1000", "0"),
                self._band("1000", "0.1"),
                self._band(None, "0.2"),
            ])

    def test_rate_above_one(self):
        with pytest.raises(TaxConfigurationError, match="outside"):
            check_band_table([self._band("1000", "0"), self._band(None, "1.5")])
