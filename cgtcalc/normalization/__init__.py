"""Normalization layer: partition the ledger into per-asset ledgers."""

from cgtcalc.normalization.partition import AssetLedger, AssetPartitioner

__all__ = ["AssetLedger", "AssetPartitioner"]
