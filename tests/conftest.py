"""Shared test fixtures for cgtcalc."""

from collections.abc import Callable
from datetime import date
from decimal import Decimal

import pytest

from cgtcalc.models.enums import AssetEventKind, TransactionKind
from cgtcalc.models.matching import TransactionToMatch
from cgtcalc.models.transaction import AssetEvent, CalculatorInput, Transaction

TransactionFactory = Callable[..., Transaction]


def _transaction(
    kind: TransactionKind,
    trade_date: date,
    quantity: str,
    price: str,
    expenses: str = "0",
    asset: str = "FOO",
) -> Transaction:
    return Transaction(
        kind=kind,
        trade_date=trade_date,
        asset=asset,
        quantity=Decimal(quantity),
        price=Decimal(price),
        expenses=Decimal(expenses),
    )


@pytest.fixture
def buy() -> TransactionFactory:
    def factory(trade_date: date, quantity: str, price: str, expenses: str = "0", asset: str = "FOO"):
        return _transaction(TransactionKind.BUY, trade_date, quantity, price, expenses, asset)

    return factory


@pytest.fixture
def sell() -> TransactionFactory:
    def factory(trade_date: date, quantity: str, price: str, expenses: str = "0", asset: str = "FOO"):
        return _transaction(TransactionKind.SELL, trade_date, quantity, price, expenses, asset)

    return factory


@pytest.fixture
def split_event() -> AssetEvent:
    return AssetEvent(
        kind=AssetEventKind.SPLIT,
        event_date=date(2020, 6, 1),
        asset="FOO",
        value=Decimal("2"),
    )


@pytest.fixture
def sample_acquisition(buy: TransactionFactory) -> TransactionToMatch:
    return TransactionToMatch(buy(date(2020, 1, 1), "100", "10.00", "5.00"))


@pytest.fixture
def sample_disposal(sell: TransactionFactory) -> TransactionToMatch:
    return TransactionToMatch(sell(date(2020, 1, 1), "40", "15.00", "2.00"))


@pytest.fixture
def sample_input(buy: TransactionFactory, sell: TransactionFactory) -> CalculatorInput:
    """Two assets exercising every matching rule."""
    return CalculatorInput(
        transactions=[
            buy(date(2019, 5, 1), "1000", "4.00", "10"),
            buy(date(2019, 9, 1), "500", "5.00", "10"),
            sell(date(2019, 11, 28), "800", "6.00", "12.50"),
            buy(date(2019, 11, 28), "200", "5.50", "2"),
            buy(date(2019, 12, 5), "100", "5.80", "2"),
            buy(date(2020, 3, 1), "300", "2.00", "0", asset="BAR"),
            sell(date(2020, 5, 1), "150", "3.00", "0", asset="BAR"),
        ],
    )
