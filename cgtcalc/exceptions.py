"""Custom exceptions for cgtcalc."""

from datetime import date
from decimal import Decimal

from cgtcalc.models.matching import TransactionToMatch
from cgtcalc.models.results import TaxYear
from cgtcalc.models.transaction import Transaction


class CGTCalculationError(Exception):
    """Base exception for capital gains calculation errors."""


class UnsupportedDateError(CGTCalculationError):
    """Raised when a transaction predates the rules the calculator implements."""

    def __init__(self, transaction: Transaction, effective_date: date):
        self.transaction = transaction
        self.effective_date = effective_date
        super().__init__(
            f"Transaction date not supported: {transaction} "
            f"(only transactions on or after {effective_date.isoformat()} are supported)"
        )


class IncompleteProcessingError(CGTCalculationError):
    """Raised when an asset still has unmatched disposal quantity after all passes."""

    def __init__(self, asset: str, pending: list[TransactionToMatch]):
        self.asset = asset
        self.pending = pending
        details = ", ".join(
            f"{p.trade_date.isoformat()} ({p.unmatched_quantity} of {p.quantity} unmatched)"
            for p in pending
        )
        super().__init__(f"Incomplete processing for {asset}: disposals {details}")


class DataConsistencyError(CGTCalculationError):
    """Raised when the ledger for an asset contradicts itself."""

    def __init__(self, asset: str, event_date: date, message: str):
        self.asset = asset
        self.event_date = event_date
        super().__init__(f"Inconsistent data for {asset} on {event_date.isoformat()}: {message}")


class InsufficientPoolError(DataConsistencyError):
    """Raised when a disposal needs more units than the Section 104 pool holds."""

    def __init__(self, asset: str, disposal_date: date, requested: Decimal, available: Decimal):
        self.requested = requested
        self.available = available
        super().__init__(
            asset,
            disposal_date,
            f"disposal of {requested} exceeds Section 104 holding of {available}",
        )


class MissingRateDataError(CGTCalculationError):
    """Raised when a tax year has no exemption/rate table configured."""

    def __init__(self, tax_year: TaxYear):
        self.tax_year = tax_year
        super().__init__(f"No rate data configured for tax year {tax_year.label}")


class InputParseError(CGTCalculationError):
    """Raised when an input ledger cannot be parsed."""

    def __init__(self, source: str, line_number: int | None, message: str):
        self.source = source
        self.line_number = line_number
        location = f"{source}:{line_number}" if line_number is not None else source
        super().__init__(f"Parse error in {location}: {message}")
