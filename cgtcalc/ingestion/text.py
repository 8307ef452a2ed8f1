"""Text ledger adapter.

One record per line, fields separated by whitespace, dates as DD/MM/YYYY:

    BUY       05/12/2019 GB00B41YBW71 500 4.7012 2
    SELL      28/11/2019 GB00B41YBW71 2000 4.6702 12.5
    SPLIT     01/06/2020 FOO 2
    UNSPLIT   01/06/2020 FOO 2
    CAPRETURN 31/08/2020 GB00B41YBW71 2000 10.2
    DIVIDEND  31/08/2020 GB00B41YBW71 2000 20.5

Blank lines and lines starting with ``#`` are ignored.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pydantic import ValidationError

from cgtcalc.exceptions import InputParseError
from cgtcalc.ingestion.base import BaseAdapter
from cgtcalc.models.enums import AssetEventKind, TransactionKind
from cgtcalc.models.transaction import AssetEvent, CalculatorInput, Transaction

_DATE_FORMAT = "%d/%m/%Y"

# Field counts after the record keyword
_TRANSACTION_FIELDS = 5
_RATIO_EVENT_FIELDS = 3
_VALUE_EVENT_FIELDS = 4

_TRANSACTION_KEYWORDS = {kind.value for kind in TransactionKind}
_RATIO_EVENTS = {AssetEventKind.SPLIT, AssetEventKind.UNSPLIT}


class TextAdapter(BaseAdapter):
    """Parses the whitespace-separated ledger format."""

    def parse(self, file_path: Path) -> CalculatorInput:
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        return self.parse_text(file_path.read_text(), source=file_path.name)

    def parse_text(self, text: str, source: str = "<input>") -> CalculatorInput:
        transactions: list[Transaction] = []
        asset_events: list[AssetEvent] = []

        for line_number, raw_line in enumerate(text.splitlines(), start=1):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue

            keyword, *fields = line.split()
            try:
                record = self._parse_record(keyword.upper(), fields)
            except (ValueError, ValidationError) as exc:
                raise InputParseError(source, line_number, f"{exc} in {line!r}") from exc

            if isinstance(record, Transaction):
                transactions.append(record)
            else:
                asset_events.append(record)

        return CalculatorInput(transactions=transactions, asset_events=asset_events)

    def _parse_record(self, keyword: str, fields: list[str]) -> Transaction | AssetEvent:
        if keyword in _TRANSACTION_KEYWORDS:
            _expect_fields(keyword, fields, _TRANSACTION_FIELDS)
            trade_date, asset, quantity, price, expenses = fields
            return Transaction(
                kind=TransactionKind(keyword),
                trade_date=_parse_date(trade_date),
                asset=asset,
                quantity=_parse_decimal(quantity),
                price=_parse_decimal(price),
                expenses=_parse_decimal(expenses),
            )

        try:
            kind = AssetEventKind(keyword)
        except ValueError:
            raise ValueError(f"Unknown record type {keyword!r}") from None

        if kind in _RATIO_EVENTS:
            _expect_fields(keyword, fields, _RATIO_EVENT_FIELDS)
            event_date, asset, ratio = fields
            return AssetEvent(
                kind=kind,
                event_date=_parse_date(event_date),
                asset=asset,
                value=_parse_decimal(ratio),
            )

        _expect_fields(keyword, fields, _VALUE_EVENT_FIELDS)
        event_date, asset, amount, value = fields
        return AssetEvent(
            kind=kind,
            event_date=_parse_date(event_date),
            asset=asset,
            amount=_parse_decimal(amount),
            value=_parse_decimal(value),
        )


def _expect_fields(keyword: str, fields: list[str], count: int) -> None:
    if len(fields) != count:
        raise ValueError(f"{keyword} expects {count} fields, got {len(fields)}")


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, _DATE_FORMAT).date()
    except ValueError:
        raise ValueError(f"Invalid date {value!r}, expected DD/MM/YYYY") from None


def _parse_decimal(value: str) -> Decimal:
    try:
        return Decimal(value.replace(",", ""))
    except InvalidOperation:
        raise ValueError(f"Invalid number {value!r}") from None
