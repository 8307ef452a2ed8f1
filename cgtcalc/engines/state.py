"""Per-asset processing state shared by the matching passes."""

from cgtcalc.exceptions import IncompleteProcessingError
from cgtcalc.models.matching import DisposalMatch, TransactionToMatch
from cgtcalc.models.transaction import AssetEvent
from cgtcalc.normalization.partition import AssetLedger


class AssetProcessorState:
    """Mutable ledger for one asset.

    Acquisitions, disposals and asset events are held in date order. Each
    pass reads the pending views, consumes sub-transactions and appends to
    ``disposal_matches``.
    """

    def __init__(
        self,
        asset: str,
        acquisitions: list[TransactionToMatch],
        disposals: list[TransactionToMatch],
        asset_events: list[AssetEvent] | None = None,
    ) -> None:
        self.asset = asset
        self.acquisitions = acquisitions
        self.disposals = disposals
        self.asset_events = asset_events or []
        self.disposal_matches: list[DisposalMatch] = []

    @classmethod
    def from_ledger(cls, ledger: AssetLedger) -> "AssetProcessorState":
        """Wrap each transaction of a date-ordered ledger in a fresh sub-transaction."""
        acquisitions: list[TransactionToMatch] = []
        disposals: list[TransactionToMatch] = []
        for transaction in ledger.transactions:
            if transaction.is_acquisition:
                acquisitions.append(TransactionToMatch(transaction))
            else:
                disposals.append(TransactionToMatch(transaction))
        return cls(ledger.asset, acquisitions, disposals, list(ledger.asset_events))

    @property
    def pending_acquisitions(self) -> list[TransactionToMatch]:
        return [a for a in self.acquisitions if not a.is_fully_matched]

    @property
    def matched_acquisitions(self) -> list[TransactionToMatch]:
        return [a for a in self.acquisitions if a.is_fully_matched]

    @property
    def pending_disposals(self) -> list[TransactionToMatch]:
        return [d for d in self.disposals if not d.is_fully_matched]

    @property
    def processed_disposals(self) -> list[TransactionToMatch]:
        return [d for d in self.disposals if d.is_fully_matched]

    @property
    def is_complete(self) -> bool:
        return all(d.is_fully_matched for d in self.disposals)

    def record_match(self, match: DisposalMatch) -> None:
        self.disposal_matches.append(match)

    def ensure_complete(self) -> None:
        if not self.is_complete:
            raise IncompleteProcessingError(self.asset, self.pending_disposals)
