"""Matching engine: same-day and bed-and-breakfast share identification."""

import logging
from collections.abc import Callable

from cgtcalc.engines.rates import BED_AND_BREAKFAST_WINDOW
from cgtcalc.engines.state import AssetProcessorState
from cgtcalc.models.enums import MatchKind, PairingOutcome
from cgtcalc.models.matching import DisposalMatch, TransactionToMatch


PairingRule = Callable[[TransactionToMatch, TransactionToMatch], PairingOutcome]


def same_day_rule(acquisition: TransactionToMatch, disposal: TransactionToMatch) -> PairingOutcome:
    """TCGA 1992 s105(1): match acquisitions made on the day of the disposal."""
    if acquisition.trade_date < disposal.trade_date:
        return PairingOutcome.SKIP_ACQUISITION
    if disposal.trade_date < acquisition.trade_date:
        return PairingOutcome.SKIP_DISPOSAL
    return PairingOutcome.MATCH


def bed_and_breakfast_rule(
    acquisition: TransactionToMatch, disposal: TransactionToMatch
) -> PairingOutcome:
    """TCGA 1992 s106A(5): match acquisitions in the 30 days after the disposal."""
    if acquisition.trade_date < disposal.trade_date:
        return PairingOutcome.SKIP_ACQUISITION
    if disposal.trade_date + BED_AND_BREAKFAST_WINDOW < acquisition.trade_date:
        return PairingOutcome.SKIP_DISPOSAL
    return PairingOutcome.MATCH


class MatchingProcessor:
    """Pairs pending acquisitions with pending disposals in one forward sweep.

    Both lists are walked with a cursor each. The pairing rule decides, for the
    current pair, whether to skip the acquisition, skip the disposal or match
    them. The rule must be consistent with a single forward pass: a skipped
    entry is never revisited.
    """

    def __init__(
        self,
        state: AssetProcessorState,
        rule: PairingRule,
        kind: MatchKind,
        logger: logging.Logger | None = None,
    ) -> None:
        self.state = state
        self.rule = rule
        self.kind = kind
        self.logger = logger or logging.getLogger(__name__)

    def process(self) -> int:
        """Run the pass. Returns the number of matches recorded."""
        acquisitions = self.state.pending_acquisitions
        disposals = self.state.pending_disposals
        self.logger.debug(
            "%s pass for %s: %d acquisition(s), %d disposal(s) pending",
            self.kind.value, self.state.asset, len(acquisitions), len(disposals),
        )

        matched = 0
        acq_idx = 0
        disp_idx = 0
        while acq_idx < len(acquisitions) and disp_idx < len(disposals):
            acquisition = acquisitions[acq_idx]
            disposal = disposals[disp_idx]

            if acquisition.is_fully_matched:
                acq_idx += 1
                continue
            if disposal.is_fully_matched:
                disp_idx += 1
                continue

            outcome = self.rule(acquisition, disposal)
            match outcome:
                case PairingOutcome.SKIP_ACQUISITION:
                    acq_idx += 1
                case PairingOutcome.SKIP_DISPOSAL:
                    disp_idx += 1
                case PairingOutcome.MATCH:
                    quantity = min(acquisition.unmatched_quantity, disposal.unmatched_quantity)
                    record = DisposalMatch.with_acquisition(self.kind, acquisition, disposal, quantity)
                    acquisition.consume(quantity)
                    disposal.consume(quantity)
                    self.state.record_match(record)
                    matched += 1
                    self.logger.debug("  %s", record)

                    if acquisition.is_fully_matched:
                        acq_idx += 1
                    if disposal.is_fully_matched:
                        disp_idx += 1
                case _:
                    raise ValueError(f"Unknown pairing outcome: {outcome!r}")

        self.logger.debug("%s pass for %s: %d match(es)", self.kind.value, self.state.asset, matched)
        return matched


def same_day_processor(
    state: AssetProcessorState, logger: logging.Logger | None = None
) -> MatchingProcessor:
    return MatchingProcessor(state, same_day_rule, MatchKind.SAME_DAY, logger)


def bed_and_breakfast_processor(
    state: AssetProcessorState, logger: logging.Logger | None = None
) -> MatchingProcessor:
    return MatchingProcessor(state, bed_and_breakfast_rule, MatchKind.BED_AND_BREAKFAST, logger)
