"""Capital gains tax configuration.

Rule-effective date, matching windows, and per-tax-year annual exempt amounts
and rates for individuals. Keyed by the calendar year in which the tax year
ends (2021 is 2020/21). Never hardcode rates in computation functions.

Sources:
  - HMRC Capital Gains Tax rates and allowances (historic tables)
  - Finance Act 2008 Sch. 2 (18% single rate, share identification rules)
  - Autumn Budget 2024 (18%/24% from 30 October 2024)
"""

from datetime import date, timedelta
from decimal import Decimal

from cgtcalc.models.results import TaxYearRates

# ---------------------------------------------------------------------------
# Share identification rules apply to disposals from 6 April 2008.
# ---------------------------------------------------------------------------
RULES_EFFECTIVE_DATE = date(2008, 4, 6)

# TCGA 1992 s106A(5): acquisitions within 30 days after the disposal.
BED_AND_BREAKFAST_DAYS = 30
BED_AND_BREAKFAST_WINDOW = timedelta(days=BED_AND_BREAKFAST_DAYS)


def _rates(exemption: str, basic: str, higher: str, note: str | None = None) -> TaxYearRates:
    return TaxYearRates(
        exemption=Decimal(exemption),
        basic_rate=Decimal(basic),
        higher_rate=Decimal(higher),
        note=note,
    )


# ---------------------------------------------------------------------------
# Annual exempt amount and rates for shares (non-residential property).
# One entry per tax year. Where rates changed mid-year the entry holds the
# rates in force at the end of the year and a note that the report prints:
#   2010/11: 18%/28%; disposals before 23 June 2010 were taxed at 18% only.
#   2024/25: 18%/24%; disposals before 30 October 2024 were taxed at 10%/20%.
# ---------------------------------------------------------------------------
_MID_YEAR_2011 = (
    "rates shown apply from 23 June 2010; earlier disposals were taxed at 18%"
)
_MID_YEAR_2025 = (
    "rates shown apply from 30 October 2024; earlier disposals were taxed at 10%/20%"
)

TAX_YEAR_RATES: dict[int, TaxYearRates] = {
    2009: _rates("9600", "0.18", "0.18"),
    2010: _rates("10100", "0.18", "0.18"),
    2011: _rates("10100", "0.18", "0.28", note=_MID_YEAR_2011),
    2012: _rates("10600", "0.18", "0.28"),
    2013: _rates("10600", "0.18", "0.28"),
    2014: _rates("10900", "0.18", "0.28"),
    2015: _rates("11000", "0.18", "0.28"),
    2016: _rates("11100", "0.18", "0.28"),
    2017: _rates("11100", "0.10", "0.20"),
    2018: _rates("11300", "0.10", "0.20"),
    2019: _rates("11700", "0.10", "0.20"),
    2020: _rates("12000", "0.10", "0.20"),
    2021: _rates("12300", "0.10", "0.20"),
    2022: _rates("12300", "0.10", "0.20"),
    2023: _rates("12300", "0.10", "0.20"),
    2024: _rates("6000", "0.10", "0.20"),
    2025: _rates("3000", "0.18", "0.24", note=_MID_YEAR_2025),
    2026: _rates("3000", "0.18", "0.24"),
}

# Tax is rounded down to the penny.
PENNY = Decimal("0.01")
