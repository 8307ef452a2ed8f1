"""Unit tests for the TextAdapter."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from cgtcalc.exceptions import InputParseError
from cgtcalc.ingestion.text import TextAdapter
from cgtcalc.models.enums import AssetEventKind, TransactionKind

LEDGER = """\
# Vanguard LifeStrategy 100
BUY 05/12/2019 GB00B41YBW71 500 4.7012 2
SELL 28/11/2019 GB00B41YBW71 2,000 4.6702 12.5

SPLIT 01/06/2020 GB00B41YBW71 2
UNSPLIT 02/06/2020 GB00B41YBW71 2
capreturn 31/08/2020 GB00B41YBW71 2000 10.2
DIVIDEND 31/08/2020 GB00B41YBW71 2000 20.5
"""


@pytest.fixture
def adapter():
    return TextAdapter()


class TestParseText:
    def test_transactions(self, adapter):
        data = adapter.parse_text(LEDGER)
        buy, sell = data.transactions
        assert buy.kind == TransactionKind.BUY
        assert buy.trade_date == date(2019, 12, 5)
        assert buy.asset == "GB00B41YBW71"
        assert buy.quantity == Decimal("500")
        assert buy.price == Decimal("4.7012")
        assert buy.expenses == Decimal("2")
        assert sell.kind == TransactionKind.SELL
        assert sell.quantity == Decimal("2000")
        assert sell.expenses == Decimal("12.5")

    def test_asset_events(self, adapter):
        data = adapter.parse_text(LEDGER)
        split, unsplit, capreturn, dividend = data.asset_events
        assert split.kind == AssetEventKind.SPLIT
        assert split.value == Decimal("2")
        assert split.amount is None
        assert unsplit.kind == AssetEventKind.UNSPLIT
        assert capreturn.kind == AssetEventKind.CAPITAL_RETURN
        assert capreturn.amount == Decimal("2000")
        assert capreturn.value == Decimal("10.2")
        assert dividend.kind == AssetEventKind.DIVIDEND
        assert dividend.event_date == date(2020, 8, 31)

    def test_comments_and_blank_lines_only(self, adapter):
        data = adapter.parse_text("# nothing yet\n\n   \n")
        assert data.transactions == []
        assert data.asset_events == []


class TestParseErrors:
    def test_unknown_record(self, adapter):
        with pytest.raises(InputParseError, match="Unknown record type 'TRANSFER'") as exc_info:
            adapter.parse_text("BUY 01/01/2020 FOO 1 1 0\nTRANSFER 01/01/2020 FOO 1", source="ledger.txt")
        assert exc_info.value.source == "ledger.txt"
        assert exc_info.value.line_number == 2

    def test_wrong_field_count(self, adapter):
        with pytest.raises(InputParseError, match="BUY expects 5 fields, got 4"):
            adapter.parse_text("BUY 01/01/2020 FOO 1 1")

    def test_bad_date(self, adapter):
        with pytest.raises(InputParseError, match="expected DD/MM/YYYY"):
            adapter.parse_text("BUY 2020-01-01 FOO 1 1 0")

    def test_bad_number(self, adapter):
        with pytest.raises(InputParseError, match="Invalid number 'ten'"):
            adapter.parse_text("SELL 01/01/2020 FOO ten 1 0")

    def test_model_validation_failure(self, adapter):
        with pytest.raises(InputParseError) as exc_info:
            adapter.parse_text("SELL 01/01/2020 FOO 0 1 0")
        assert exc_info.value.line_number == 1


class TestParseFile:
    def test_parse_file(self, adapter, tmp_path: Path):
        path = tmp_path / "ledger.txt"
        path.write_text(LEDGER)
        data = adapter.parse(path)
        assert len(data.transactions) == 2
        assert len(data.asset_events) == 4

    def test_missing_file(self, adapter, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            adapter.parse(tmp_path / "missing.txt")
