"""Ingestion adapters for importing ledgers from various formats."""

from pathlib import Path

from cgtcalc.ingestion.base import BaseAdapter
from cgtcalc.ingestion.json_ledger import JsonAdapter
from cgtcalc.ingestion.text import TextAdapter


def get_adapter(file_path: Path) -> BaseAdapter:
    """Pick the adapter for a ledger file by its suffix."""
    if file_path.suffix.lower() == ".json":
        return JsonAdapter()
    return TextAdapter()


__all__ = ["BaseAdapter", "JsonAdapter", "TextAdapter", "get_adapter"]
