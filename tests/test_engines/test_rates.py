"""Tests for rate table completeness and consistency."""

from datetime import timedelta
from decimal import Decimal

from cgtcalc.engines.rates import (
    BED_AND_BREAKFAST_DAYS,
    BED_AND_BREAKFAST_WINDOW,
    RULES_EFFECTIVE_DATE,
    TAX_YEAR_RATES,
)
from cgtcalc.models.results import TaxYear


class TestConstants:
    def test_rules_start_with_tax_year(self):
        assert RULES_EFFECTIVE_DATE == TaxYear(year_ending=2009).start

    def test_window(self):
        assert BED_AND_BREAKFAST_DAYS == 30
        assert BED_AND_BREAKFAST_WINDOW == timedelta(days=30)


class TestTaxYearRates:
    def test_contiguous_from_rules_date(self):
        years = sorted(TAX_YEAR_RATES)
        assert years[0] == TaxYear.from_date(RULES_EFFECTIVE_DATE).year_ending
        assert years == list(range(years[0], years[-1] + 1))

    def test_higher_rate_never_below_basic(self):
        for year, rates in TAX_YEAR_RATES.items():
            assert rates.higher_rate >= rates.basic_rate, f"Inverted rates for {year}"

    def test_known_values(self):
        assert TAX_YEAR_RATES[2009].exemption == Decimal("9600")
        assert TAX_YEAR_RATES[2021].exemption == Decimal("12300")
        assert TAX_YEAR_RATES[2021].basic_rate == Decimal("0.10")
        assert TAX_YEAR_RATES[2021].higher_rate == Decimal("0.20")
        assert TAX_YEAR_RATES[2025].exemption == Decimal("3000")

    def test_rates_after_autumn_budget_2024(self):
        for year in (2025, 2026):
            assert TAX_YEAR_RATES[year].basic_rate == Decimal("0.18")
            assert TAX_YEAR_RATES[year].higher_rate == Decimal("0.24")

    def test_mid_year_changes_carry_a_note(self):
        assert "23 June 2010" in TAX_YEAR_RATES[2011].note
        assert TAX_YEAR_RATES[2011].higher_rate == Decimal("0.28")
        assert "30 October 2024" in TAX_YEAR_RATES[2025].note
        noted = {year for year, rates in TAX_YEAR_RATES.items() if rates.note}
        assert noted == {2011, 2025}
