"""Data models for cgtcalc."""

from cgtcalc.models.enums import AssetEventKind, MatchKind, PairingOutcome, TransactionKind
from cgtcalc.models.matching import DisposalMatch, TransactionToMatch
from cgtcalc.models.results import (
    CalculatorResult,
    DisposalResult,
    TaxYear,
    TaxYearRates,
    TaxYearSummary,
)
from cgtcalc.models.transaction import AssetEvent, CalculatorInput, Transaction

__all__ = [
    "AssetEvent",
    "AssetEventKind",
    "CalculatorInput",
    "CalculatorResult",
    "DisposalMatch",
    "DisposalResult",
    "MatchKind",
    "PairingOutcome",
    "TaxYear",
    "TaxYearRates",
    "TaxYearSummary",
    "Transaction",
    "TransactionKind",
    "TransactionToMatch",
]
