"""Result aggregation: group disposal matches into per-tax-year summaries.

Implements:
  - Grouping of matches into one result per disposal
  - Tax year assignment (6 April to 5 April)
  - Netting of gains and losses within a year
  - Loss carry-forward per TCGA 1992 s2A: brought-forward losses only reduce
    net gains down to the annual exempt amount
  - Tax at the basic and at the higher rate on the taxable gain
"""

import logging
from collections import defaultdict
from decimal import ROUND_DOWN, Decimal

from cgtcalc.engines.rates import PENNY, TAX_YEAR_RATES
from cgtcalc.exceptions import MissingRateDataError
from cgtcalc.models.matching import DisposalMatch
from cgtcalc.models.results import (
    CalculatorResult,
    DisposalResult,
    TaxYear,
    TaxYearRates,
    TaxYearSummary,
)

ZERO = Decimal("0")


class ResultBuilder:
    """Builds the immutable CalculatorResult from the matches of every asset."""

    def __init__(
        self,
        rates: dict[int, TaxYearRates] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.rates = TAX_YEAR_RATES if rates is None else rates
        self.logger = logger or logging.getLogger(__name__)

    def build(self, disposal_matches: list[DisposalMatch]) -> CalculatorResult:
        disposals = self.group_by_disposal(disposal_matches)

        by_year: dict[TaxYear, list[DisposalResult]] = defaultdict(list)
        for disposal in disposals:
            by_year[TaxYear.from_date(disposal.disposal_date)].append(disposal)

        summaries: list[TaxYearSummary] = []
        loss_brought_forward = ZERO
        for tax_year in sorted(by_year, key=lambda y: y.year_ending):
            summary = self.summarize(tax_year, by_year[tax_year], loss_brought_forward)
            loss_brought_forward = summary.loss_carried_forward
            summaries.append(summary)

        return CalculatorResult(
            disposal_matches=tuple(disposal_matches),
            tax_year_summaries=tuple(summaries),
        )

    @staticmethod
    def group_by_disposal(disposal_matches: list[DisposalMatch]) -> list[DisposalResult]:
        """Collect the matches of each disposal, ordered by date then asset."""
        grouped: dict[int, list[DisposalMatch]] = {}
        for match in disposal_matches:
            # Matches without a handle (built by hand) stand alone.
            key = id(match.disposal) if match.disposal is not None else id(match)
            grouped.setdefault(key, []).append(match)

        results = [
            DisposalResult(
                asset=matches[0].asset,
                disposal_date=matches[0].disposal_date,
                matches=tuple(matches),
            )
            for matches in grouped.values()
        ]
        return sorted(results, key=lambda r: (r.disposal_date, r.asset))

    def rates_for(self, tax_year: TaxYear) -> TaxYearRates:
        rates = self.rates.get(tax_year.year_ending)
        if rates is None:
            raise MissingRateDataError(tax_year)
        return rates

    def summarize(
        self,
        tax_year: TaxYear,
        disposals: list[DisposalResult],
        loss_brought_forward: Decimal = ZERO,
    ) -> TaxYearSummary:
        """Compute the summary for a single tax year."""
        rates = self.rates_for(tax_year)

        gains = sum((d.gain for d in disposals if d.gain > 0), ZERO)
        losses = sum((-d.gain for d in disposals if d.gain < 0), ZERO)
        net_gain = gains - losses

        if net_gain <= 0:
            loss_used = ZERO
            taxable_gain = ZERO
            loss_carried_forward = loss_brought_forward - net_gain
        else:
            excess = max(net_gain - rates.exemption, ZERO)
            loss_used = min(loss_brought_forward, excess)
            taxable_gain = excess - loss_used
            loss_carried_forward = loss_brought_forward - loss_used

        summary = TaxYearSummary(
            tax_year=tax_year,
            rates=rates,
            disposals=tuple(disposals),
            proceeds=sum((d.proceeds for d in disposals), ZERO),
            allowable_costs=sum((d.allowable_cost for d in disposals), ZERO),
            gains=gains,
            losses=losses,
            loss_brought_forward=loss_brought_forward,
            loss_used=loss_used,
            loss_carried_forward=loss_carried_forward,
            taxable_gain=taxable_gain,
            basic_rate_tax=self._tax(taxable_gain, rates.basic_rate),
            higher_rate_tax=self._tax(taxable_gain, rates.higher_rate),
        )
        self.logger.debug(
            "Tax year %s: %d disposal(s), net gain %s, taxable gain %s",
            tax_year.label, len(disposals), net_gain, taxable_gain,
        )
        return summary

    @staticmethod
    def _tax(taxable_gain: Decimal, rate: Decimal) -> Decimal:
        return (taxable_gain * rate).quantize(PENNY, rounding=ROUND_DOWN)
