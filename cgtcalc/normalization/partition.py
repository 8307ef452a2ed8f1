"""Asset partitioner: group the ledger by asset and order it by date."""

import logging
from collections import defaultdict
from dataclasses import dataclass, field

from cgtcalc.models.transaction import AssetEvent, CalculatorInput, Transaction


@dataclass
class AssetLedger:
    """Transactions and asset events of one asset, each in date order."""

    asset: str
    transactions: list[Transaction] = field(default_factory=list)
    asset_events: list[AssetEvent] = field(default_factory=list)


class AssetPartitioner:
    """Splits a calculator input into per-asset ledgers."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def partition(self, calculator_input: CalculatorInput) -> list[AssetLedger]:
        """Return one ledger per traded asset, ordered by asset symbol.

        Sorting is stable, so entries sharing a date keep their input order.
        Asset events for assets that were never traded are dropped.
        """
        transactions_by_asset: dict[str, list[Transaction]] = defaultdict(list)
        for transaction in calculator_input.transactions:
            transactions_by_asset[transaction.asset].append(transaction)

        events_by_asset: dict[str, list[AssetEvent]] = defaultdict(list)
        for event in calculator_input.asset_events:
            events_by_asset[event.asset].append(event)

        for asset in sorted(set(events_by_asset) - set(transactions_by_asset)):
            self.logger.warning(
                "Ignoring %d asset event(s) for %s: no transactions",
                len(events_by_asset[asset]), asset,
            )

        return [
            AssetLedger(
                asset=asset,
                transactions=sorted(transactions_by_asset[asset], key=lambda t: t.trade_date),
                asset_events=sorted(events_by_asset.get(asset, []), key=lambda e: e.event_date),
            )
            for asset in sorted(transactions_by_asset)
        ]
