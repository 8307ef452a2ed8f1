"""Input records: transactions, asset events and the calculator input."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from cgtcalc.models.enums import AssetEventKind, TransactionKind


class Transaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TransactionKind
    trade_date: date
    asset: str = Field(min_length=1)
    quantity: Decimal = Field(gt=0)
    price: Decimal = Field(ge=0)
    expenses: Decimal = Field(default=Decimal("0"), ge=0)

    @property
    def is_acquisition(self) -> bool:
        return self.kind == TransactionKind.BUY

    @property
    def is_disposal(self) -> bool:
        return self.kind == TransactionKind.SELL

    def __str__(self) -> str:
        return (
            f"{self.kind.value} {self.quantity} of {self.asset} on "
            f"{self.trade_date.isoformat()} at {self.price} "
            f"with {self.expenses} expenses"
        )


class AssetEvent(BaseModel):
    """A corporate action applied to the Section 104 holding of an asset.

    ``value`` is the ratio for SPLIT/UNSPLIT and the cash amount for
    CAPRETURN/DIVIDEND. ``amount`` is the holding the event was declared on.
    """

    model_config = ConfigDict(frozen=True)

    kind: AssetEventKind
    event_date: date
    asset: str = Field(min_length=1)
    value: Decimal = Field(gt=0)
    amount: Decimal | None = Field(default=None, gt=0)

    def __str__(self) -> str:
        return f"{self.kind.value} {self.asset} on {self.event_date.isoformat()} ({self.value})"


class CalculatorInput(BaseModel):
    transactions: list[Transaction]
    asset_events: list[AssetEvent] = Field(default_factory=list)
