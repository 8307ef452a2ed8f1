"""Tests for the asset partitioner."""

import logging
from datetime import date
from decimal import Decimal

from cgtcalc.models.enums import AssetEventKind
from cgtcalc.models.transaction import AssetEvent, CalculatorInput
from cgtcalc.normalization.partition import AssetPartitioner


class TestAssetPartitioner:
    def test_groups_by_asset_in_symbol_order(self, sample_input: CalculatorInput):
        ledgers = AssetPartitioner().partition(sample_input)
        assert [ledger.asset for ledger in ledgers] == ["BAR", "FOO"]
        assert len(ledgers[0].transactions) == 2
        assert len(ledgers[1].transactions) == 5

    def test_sorted_by_date(self, buy, sell):
        later = sell(date(2020, 3, 1), "1", "1")
        earlier = buy(date(2020, 1, 1), "1", "1")
        (ledger,) = AssetPartitioner().partition(CalculatorInput(transactions=[later, earlier]))
        assert ledger.transactions == [earlier, later]

    def test_same_date_keeps_input_order(self, buy):
        first = buy(date(2020, 1, 1), "1", "1")
        second = buy(date(2020, 1, 1), "2", "1")
        (ledger,) = AssetPartitioner().partition(CalculatorInput(transactions=[first, second]))
        assert ledger.transactions[0] is first
        assert ledger.transactions[1] is second

    def test_asset_events_follow_their_asset(self, buy, split_event):
        other = buy(date(2020, 1, 1), "1", "1", asset="BAR")
        own = buy(date(2020, 1, 1), "1", "1")
        ledgers = AssetPartitioner().partition(
            CalculatorInput(transactions=[other, own], asset_events=[split_event])
        )
        by_asset = {ledger.asset: ledger for ledger in ledgers}
        assert by_asset["FOO"].asset_events == [split_event]
        assert by_asset["BAR"].asset_events == []

    def test_events_for_untraded_asset_dropped(self, buy, caplog):
        orphan = AssetEvent(
            kind=AssetEventKind.DIVIDEND,
            event_date=date(2020, 6, 1),
            asset="BAZ",
            value=Decimal("10"),
        )
        with caplog.at_level(logging.WARNING):
            ledgers = AssetPartitioner().partition(
                CalculatorInput(transactions=[buy(date(2020, 1, 1), "1", "1")], asset_events=[orphan])
            )
        assert [ledger.asset for ledger in ledgers] == ["FOO"]
        assert "Ignoring 1 asset event(s) for BAZ" in caplog.text

    def test_empty_input(self):
        assert AssetPartitioner().partition(CalculatorInput(transactions=[])) == []
