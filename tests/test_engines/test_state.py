"""Tests for per-asset processing state."""

from datetime import date
from decimal import Decimal

import pytest

from cgtcalc.engines.state import AssetProcessorState
from cgtcalc.exceptions import IncompleteProcessingError
from cgtcalc.models.matching import TransactionToMatch
from cgtcalc.normalization.partition import AssetLedger


class TestAssetProcessorState:
    def test_from_ledger_splits_by_kind(self, buy, sell, split_event):
        ledger = AssetLedger(
            asset="FOO",
            transactions=[
                buy(date(2020, 1, 1), "10", "1"),
                sell(date(2020, 2, 1), "5", "2"),
                buy(date(2020, 3, 1), "10", "1"),
            ],
            asset_events=[split_event],
        )
        state = AssetProcessorState.from_ledger(ledger)
        assert [a.trade_date for a in state.acquisitions] == [date(2020, 1, 1), date(2020, 3, 1)]
        assert [d.trade_date for d in state.disposals] == [date(2020, 2, 1)]
        assert state.asset_events == [split_event]
        assert state.disposal_matches == []

    def test_views_follow_consumption(self, buy, sell):
        acq = TransactionToMatch(buy(date(2020, 1, 1), "10", "1"))
        disp = TransactionToMatch(sell(date(2020, 1, 1), "10", "1"))
        state = AssetProcessorState("FOO", [acq], [disp])

        assert state.pending_acquisitions == [acq]
        assert state.pending_disposals == [disp]
        assert not state.is_complete

        acq.consume(Decimal("10"))
        disp.consume(Decimal("10"))

        assert state.matched_acquisitions == [acq]
        assert state.processed_disposals == [disp]
        assert state.is_complete

    def test_no_disposals_is_complete(self, buy):
        state = AssetProcessorState("FOO", [TransactionToMatch(buy(date(2020, 1, 1), "1", "1"))], [])
        assert state.is_complete
        state.ensure_complete()

    def test_ensure_complete_raises_with_context(self, sell):
        disp = TransactionToMatch(sell(date(2020, 2, 1), "10", "1"))
        disp.consume(Decimal("4"))
        state = AssetProcessorState("FOO", [], [disp])

        with pytest.raises(IncompleteProcessingError) as exc_info:
            state.ensure_complete()

        assert exc_info.value.asset == "FOO"
        assert exc_info.value.pending == [disp]
        assert "6 of 10 unmatched" in str(exc_info.value)
