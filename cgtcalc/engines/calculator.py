"""Calculator: the core of cgtcalc.

Validates the ledger, partitions it by asset, runs the share identification
passes for each asset and aggregates the matches into a CalculatorResult.

Per TCGA 1992 ss104-106A and HMRC Capital Gains Manual CG51500+.
"""

import logging

from cgtcalc.engines.matching import bed_and_breakfast_processor, same_day_processor
from cgtcalc.engines.rates import RULES_EFFECTIVE_DATE
from cgtcalc.engines.result_builder import ResultBuilder
from cgtcalc.engines.section104 import Section104Processor
from cgtcalc.engines.state import AssetProcessorState
from cgtcalc.exceptions import UnsupportedDateError
from cgtcalc.models.matching import DisposalMatch
from cgtcalc.models.results import CalculatorResult, TaxYearRates
from cgtcalc.models.transaction import CalculatorInput
from cgtcalc.normalization.partition import AssetPartitioner


class Calculator:
    """Orchestrates same-day, bed-and-breakfast and Section 104 matching."""

    def __init__(
        self,
        calculator_input: CalculatorInput,
        logger: logging.Logger | None = None,
        rates: dict[int, TaxYearRates] | None = None,
    ) -> None:
        self.input = calculator_input
        self.logger = logger or logging.getLogger(__name__)
        self.partitioner = AssetPartitioner(self.logger)
        self.result_builder = ResultBuilder(rates, self.logger)

    def process(self) -> CalculatorResult:
        """Run the full calculation.

        Steps:
        1. Reject transactions dated before the share identification rules
        2. Partition transactions and asset events by asset
        3. Per asset: same-day, bed-and-breakfast, then Section 104 matching
        4. Check every disposal is fully matched
        5. Build per-tax-year summaries

        Raises:
            CGTCalculationError: on any failure. No partial result is returned.
        """
        self.logger.info("Begin processing")
        self._validate_dates()

        asset_matches = [
            self.process_asset(AssetProcessorState.from_ledger(ledger))
            for ledger in self.partitioner.partition(self.input)
        ]
        disposal_matches = [match for matches in asset_matches for match in matches]

        result = self.result_builder.build(disposal_matches)
        self.logger.info("Finished processing")
        return result

    def _validate_dates(self) -> None:
        for transaction in self.input.transactions:
            if transaction.trade_date < RULES_EFFECTIVE_DATE:
                raise UnsupportedDateError(transaction, RULES_EFFECTIVE_DATE)

    def process_asset(self, state: AssetProcessorState) -> list[DisposalMatch]:
        """Run all matching passes for one asset. Returns its disposal matches."""
        self.logger.info("Begin processing transactions for %s", state.asset)

        same_day_processor(state, self.logger).process()
        bed_and_breakfast_processor(state, self.logger).process()
        Section104Processor(state, self.logger).process()
        state.ensure_complete()

        self.logger.debug("Tax events for %s", state.asset)
        for match in state.disposal_matches:
            self.logger.debug("  %s", match)
        self.logger.info(
            "Finished processing transactions for %s. Created %d tax events.",
            state.asset, len(state.disposal_matches),
        )
        return list(state.disposal_matches)
