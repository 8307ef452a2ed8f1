"""Sub-transactions and the disposal matches produced by the matching engine."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from cgtcalc.models.enums import MatchKind
from cgtcalc.models.transaction import Transaction


@dataclass(eq=False)
class TransactionToMatch:
    """Consumption ledger for a single transaction.

    Compared by identity: every processor working on an asset holds the same
    instance, so quantity consumed by one pass is visible to the next.

    Tracks the net value (proceeds after expenses for a disposal, cost
    including expenses for an acquisition) handed out so far. The slice that
    finishes the transaction takes exactly what is left, so the slices of a
    transaction always add back up to its net value.
    """

    transaction: Transaction
    unmatched_quantity: Decimal = field(init=False)
    allocated_value: Decimal = field(init=False, default=Decimal("0"))

    def __post_init__(self) -> None:
        self.unmatched_quantity = self.transaction.quantity

    @property
    def asset(self) -> str:
        return self.transaction.asset

    @property
    def trade_date(self) -> date:
        return self.transaction.trade_date

    @property
    def quantity(self) -> Decimal:
        return self.transaction.quantity

    @property
    def price(self) -> Decimal:
        return self.transaction.price

    @property
    def is_fully_matched(self) -> bool:
        return self.unmatched_quantity == 0

    @property
    def net_value(self) -> Decimal:
        gross = self.transaction.quantity * self.transaction.price
        if self.transaction.is_disposal:
            return gross - self.transaction.expenses
        return gross + self.transaction.expenses

    def value_for(self, quantity: Decimal) -> Decimal:
        """Net value attributable to the next ``quantity`` units consumed."""
        if quantity == self.unmatched_quantity:
            return self.net_value - self.allocated_value
        gross = quantity * self.transaction.price
        expenses = self.transaction.expenses * quantity / self.transaction.quantity
        if self.transaction.is_disposal:
            return gross - expenses
        return gross + expenses

    def consume(self, quantity: Decimal) -> Decimal:
        """Consume ``quantity`` units. Returns the net value they carry."""
        if quantity <= 0 or quantity > self.unmatched_quantity:
            raise ValueError(
                f"Cannot consume {quantity} of {self.transaction}: "
                f"{self.unmatched_quantity} unmatched"
            )
        value = self.value_for(quantity)
        self.allocated_value += value
        self.unmatched_quantity -= quantity
        return value

    def __repr__(self) -> str:
        return f"TransactionToMatch({self.transaction}, unmatched={self.unmatched_quantity})"


@dataclass(frozen=True)
class DisposalMatch:
    """One resolved pairing of disposed quantity to its allowable cost.

    All reporting fields are stored by value. The sub-transaction handles are
    kept for provenance only and take no part in equality.
    """

    kind: MatchKind
    asset: str
    disposal_date: date
    quantity: Decimal
    proceeds: Decimal
    allowable_cost: Decimal
    acquisition_date: date | None = None
    pool_quantity: Decimal | None = None
    pool_cost: Decimal | None = None
    disposal: TransactionToMatch | None = field(default=None, compare=False, repr=False)
    acquisition: TransactionToMatch | None = field(default=None, compare=False, repr=False)

    @property
    def gain(self) -> Decimal:
        return self.proceeds - self.allowable_cost

    @property
    def pool_average_cost(self) -> Decimal | None:
        if self.pool_quantity is None or self.pool_cost is None or self.pool_quantity == 0:
            return None
        return self.pool_cost / self.pool_quantity

    @classmethod
    def with_acquisition(
        cls,
        kind: MatchKind,
        acquisition: TransactionToMatch,
        disposal: TransactionToMatch,
        quantity: Decimal,
    ) -> "DisposalMatch":
        """Match ``quantity`` of a disposal directly against an acquisition.

        Built before either side is consumed, so both values are the slices
        that ``consume(quantity)`` will allocate.
        """
        return cls(
            kind=kind,
            asset=disposal.asset,
            disposal_date=disposal.trade_date,
            quantity=quantity,
            proceeds=disposal.value_for(quantity),
            allowable_cost=acquisition.value_for(quantity),
            acquisition_date=acquisition.trade_date,
            disposal=disposal,
            acquisition=acquisition,
        )

    @classmethod
    def from_pool(
        cls,
        disposal: TransactionToMatch,
        quantity: Decimal,
        cost_basis: Decimal,
        pool_quantity: Decimal,
        pool_cost: Decimal,
    ) -> "DisposalMatch":
        """Match ``quantity`` of a disposal against the Section 104 holding."""
        return cls(
            kind=MatchKind.SECTION_104,
            asset=disposal.asset,
            disposal_date=disposal.trade_date,
            quantity=quantity,
            proceeds=disposal.value_for(quantity),
            allowable_cost=cost_basis,
            pool_quantity=pool_quantity,
            pool_cost=pool_cost,
            disposal=disposal,
        )

    def __str__(self) -> str:
        match self.kind:
            case MatchKind.SECTION_104:
                detail = f"pool average cost {self.pool_average_cost}"
            case _:
                detail = f"acquired {self.acquisition_date}"
        return (
            f"{self.kind.value}: {self.quantity} of {self.asset} disposed "
            f"{self.disposal_date} ({detail}), proceeds={self.proceeds}, "
            f"cost={self.allowable_cost}, gain={self.gain}"
        )
