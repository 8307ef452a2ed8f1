"""Section 104 holding: weighted average cost pooling.

Runs after same-day and bed-and-breakfast matching. Every acquisition with
quantity left enters the pool, every disposal with quantity left is matched
against the pool at its average cost, and corporate actions adjust the pool
in date order. Per TCGA 1992 s104 and HMRC CG51550.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from cgtcalc.engines.state import AssetProcessorState
from cgtcalc.exceptions import DataConsistencyError, InsufficientPoolError
from cgtcalc.models.enums import AssetEventKind
from cgtcalc.models.matching import DisposalMatch, TransactionToMatch
from cgtcalc.models.transaction import AssetEvent

# Asset events settle before trades on the same day.
_EVENT_ORDER = 0
_ACQUISITION_ORDER = 1
_DISPOSAL_ORDER = 2


@dataclass
class Section104Pool:
    quantity: Decimal = Decimal("0")
    cost: Decimal = Decimal("0")

    @property
    def average_cost(self) -> Decimal:
        if self.quantity == 0:
            return Decimal("0")
        return self.cost / self.quantity

    def cost_of(self, quantity: Decimal) -> Decimal:
        """Allowable cost of ``quantity`` units at the pool's average cost."""
        if quantity == self.quantity:
            return self.cost
        return self.cost * quantity / self.quantity


class Section104Processor:
    """Consumes all remaining quantity of one asset through its Section 104 pool."""

    def __init__(self, state: AssetProcessorState, logger: logging.Logger | None = None) -> None:
        self.state = state
        self.logger = logger or logging.getLogger(__name__)
        self.pool = Section104Pool()

    def process(self) -> Section104Pool:
        """Run the pass. Returns the pool as left after the last event."""
        for _, _, item in self._event_stream():
            if isinstance(item, AssetEvent):
                self._apply_asset_event(item)
            elif item.transaction.is_acquisition:
                self._add_acquisition(item)
            else:
                self._match_disposal(item)

        self.logger.debug(
            "Section 104 holding for %s: %s units, cost %s, average cost %s",
            self.state.asset, self.pool.quantity, self.pool.cost, self.pool.average_cost,
        )
        return self.pool

    def _event_stream(self) -> list[tuple[date, int, TransactionToMatch | AssetEvent]]:
        stream: list[tuple[date, int, TransactionToMatch | AssetEvent]] = []
        stream.extend((e.event_date, _EVENT_ORDER, e) for e in self.state.asset_events)
        stream.extend(
            (a.trade_date, _ACQUISITION_ORDER, a) for a in self.state.pending_acquisitions
        )
        stream.extend((d.trade_date, _DISPOSAL_ORDER, d) for d in self.state.pending_disposals)
        # Stable sort on (date, order) keeps same-day trades in input order.
        return sorted(stream, key=lambda entry: (entry[0], entry[1]))

    def _add_acquisition(self, acquisition: TransactionToMatch) -> None:
        quantity = acquisition.unmatched_quantity
        cost = acquisition.consume(quantity)
        self.pool.quantity += quantity
        self.pool.cost += cost
        self.logger.debug(
            "  %s: add %s at cost %s -> pool %s units, cost %s",
            acquisition.trade_date, quantity, cost, self.pool.quantity, self.pool.cost,
        )

    def _match_disposal(self, disposal: TransactionToMatch) -> None:
        quantity = disposal.unmatched_quantity
        if quantity > self.pool.quantity:
            raise InsufficientPoolError(
                self.state.asset, disposal.trade_date, quantity, self.pool.quantity
            )

        cost_basis = self.pool.cost_of(quantity)
        record = DisposalMatch.from_pool(
            disposal, quantity, cost_basis, self.pool.quantity, self.pool.cost
        )
        disposal.consume(quantity)
        self.pool.quantity -= quantity
        self.pool.cost -= cost_basis
        self.state.record_match(record)
        self.logger.debug("  %s", record)

    def _apply_asset_event(self, event: AssetEvent) -> None:
        match event.kind:
            case AssetEventKind.SPLIT:
                self.pool.quantity *= event.value
            case AssetEventKind.UNSPLIT:
                self._consolidate(event)
            case AssetEventKind.CAPITAL_RETURN:
                self._check_holding(event)
                if event.value > self.pool.cost:
                    raise DataConsistencyError(
                        event.asset,
                        event.event_date,
                        f"capital return of {event.value} exceeds pool cost of {self.pool.cost}",
                    )
                self.pool.cost -= event.value
            case AssetEventKind.DIVIDEND:
                self._check_holding(event)
                self.pool.cost += event.value
            case _:
                raise ValueError(f"Unsupported asset event: {event.kind!r}")

        self.logger.debug(
            "  %s -> pool %s units, cost %s", event, self.pool.quantity, self.pool.cost
        )

    def _check_holding(self, event: AssetEvent) -> None:
        if self.pool.quantity == 0:
            raise DataConsistencyError(
                event.asset, event.event_date, f"{event.kind.value} with no Section 104 holding"
            )
        if event.amount is not None and event.amount != self.pool.quantity:
            raise DataConsistencyError(
                event.asset,
                event.event_date,
                f"{event.kind.value} declared on {event.amount} units "
                f"but Section 104 holding is {self.pool.quantity}",
            )

    def _consolidate(self, event: AssetEvent) -> None:
        quantity = self.pool.quantity / event.value
        if quantity * event.value != self.pool.quantity:
            raise DataConsistencyError(
                event.asset,
                event.event_date,
                f"UNSPLIT ratio {event.value} does not divide Section 104 holding "
                f"of {self.pool.quantity} exactly",
            )
        self.pool.quantity = quantity
