"""Tax year, rate and result models."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from cgtcalc.models.matching import DisposalMatch


class TaxYear(BaseModel):
    """A UK tax year, 6 April to 5 April, identified by the year it ends in."""

    model_config = ConfigDict(frozen=True)

    year_ending: int

    @classmethod
    def from_date(cls, d: date) -> "TaxYear":
        if d >= date(d.year, 4, 6):
            return cls(year_ending=d.year + 1)
        return cls(year_ending=d.year)

    @property
    def start(self) -> date:
        return date(self.year_ending - 1, 4, 6)

    @property
    def end(self) -> date:
        return date(self.year_ending, 4, 5)

    @property
    def label(self) -> str:
        return f"{self.year_ending - 1}/{self.year_ending % 100:02d}"

    def __str__(self) -> str:
        return self.label


class TaxYearRates(BaseModel):
    model_config = ConfigDict(frozen=True)

    exemption: Decimal = Field(ge=0)
    basic_rate: Decimal = Field(ge=0, le=1)
    higher_rate: Decimal = Field(ge=0, le=1)
    # Set when the rates changed part-way through the year.
    note: str | None = None


@dataclass(frozen=True)
class DisposalResult:
    """All matches that together account for one disposal."""

    asset: str
    disposal_date: date
    matches: tuple[DisposalMatch, ...]

    @property
    def quantity(self) -> Decimal:
        return sum((m.quantity for m in self.matches), Decimal("0"))

    @property
    def proceeds(self) -> Decimal:
        return sum((m.proceeds for m in self.matches), Decimal("0"))

    @property
    def allowable_cost(self) -> Decimal:
        return sum((m.allowable_cost for m in self.matches), Decimal("0"))

    @property
    def gain(self) -> Decimal:
        return self.proceeds - self.allowable_cost


@dataclass(frozen=True)
class TaxYearSummary:
    tax_year: TaxYear
    rates: TaxYearRates
    disposals: tuple[DisposalResult, ...]
    proceeds: Decimal
    allowable_costs: Decimal
    gains: Decimal
    losses: Decimal
    loss_brought_forward: Decimal
    loss_used: Decimal
    loss_carried_forward: Decimal
    taxable_gain: Decimal
    basic_rate_tax: Decimal
    higher_rate_tax: Decimal

    @property
    def net_gain(self) -> Decimal:
        return self.gains - self.losses

    @property
    def exemption(self) -> Decimal:
        return self.rates.exemption


@dataclass(frozen=True)
class CalculatorResult:
    """Final aggregate of a calculation run. Compared by value."""

    disposal_matches: tuple[DisposalMatch, ...]
    tax_year_summaries: tuple[TaxYearSummary, ...]

