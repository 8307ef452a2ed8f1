"""Enumerations for cgtcalc."""

from enum import StrEnum


class TransactionKind(StrEnum):
    BUY = "BUY"
    SELL = "SELL"


class AssetEventKind(StrEnum):
    SPLIT = "SPLIT"
    UNSPLIT = "UNSPLIT"
    CAPITAL_RETURN = "CAPRETURN"
    DIVIDEND = "DIVIDEND"


class MatchKind(StrEnum):
    SAME_DAY = "SAME_DAY"
    BED_AND_BREAKFAST = "BED_AND_BREAKFAST"
    SECTION_104 = "SECTION_104"


class PairingOutcome(StrEnum):
    SKIP_ACQUISITION = "SKIP_ACQUISITION"
    SKIP_DISPOSAL = "SKIP_DISPOSAL"
    MATCH = "MATCH"
