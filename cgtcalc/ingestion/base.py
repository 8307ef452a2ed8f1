"""Base adapter interface for ledger ingestion."""

from abc import ABC, abstractmethod
from collections import Counter
from pathlib import Path

from cgtcalc.models.transaction import CalculatorInput


class BaseAdapter(ABC):
    """Abstract base class for all ledger adapters."""

    @abstractmethod
    def parse(self, file_path: Path) -> CalculatorInput:
        """Parse a file and return the calculator input it describes."""
        ...

    def validate(self, data: CalculatorInput) -> list[str]:
        """Check parsed data for suspicious entries. Returns warning messages.

        Warnings never stop a calculation; hard errors are raised by the
        calculator itself.
        """
        warnings: list[str] = []

        traded = {t.asset for t in data.transactions}
        for event in data.asset_events:
            if event.asset not in traded:
                warnings.append(f"Asset event for untraded asset ignored: {event}")

        counts = Counter(data.transactions)
        for transaction, count in counts.items():
            if count > 1:
                warnings.append(f"Transaction appears {count} times: {transaction}")

        return warnings
