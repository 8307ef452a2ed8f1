"""JSON ledger adapter.

Expects an object with ``transactions`` and optional ``asset_events`` lists,
using the model field names and ISO dates:

    {
      "transactions": [
        {"kind": "BUY", "trade_date": "2020-01-01", "asset": "FOO",
         "quantity": "10", "price": "10", "expenses": "0"}
      ],
      "asset_events": [
        {"kind": "SPLIT", "event_date": "2020-06-01", "asset": "FOO", "value": "2"}
      ]
    }
"""

import json
from pathlib import Path

from pydantic import ValidationError

from cgtcalc.exceptions import InputParseError
from cgtcalc.ingestion.base import BaseAdapter
from cgtcalc.models.transaction import CalculatorInput


class JsonAdapter(BaseAdapter):
    """Imports a JSON ledger into the calculator input model."""

    def parse(self, file_path: Path) -> CalculatorInput:
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        return self.parse_text(file_path.read_text(), source=file_path.name)

    def parse_text(self, text: str, source: str = "<input>") -> CalculatorInput:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InputParseError(source, exc.lineno, exc.msg) from exc

        if isinstance(raw, list):
            # A bare list is treated as transactions only
            raw = {"transactions": raw}
        if not isinstance(raw, dict):
            raise InputParseError(source, None, "expected a JSON object or list")

        try:
            return CalculatorInput.model_validate(raw)
        except ValidationError as exc:
            raise InputParseError(source, None, str(exc)) from exc
