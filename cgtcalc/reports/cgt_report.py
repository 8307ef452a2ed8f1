"""Capital gains report generator."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from cgtcalc.models.enums import MatchKind
from cgtcalc.models.results import CalculatorResult

TEMPLATE_DIR = Path(__file__).parent / "templates"

MATCH_LABELS = {
    MatchKind.SAME_DAY: "SAME DAY",
    MatchKind.BED_AND_BREAKFAST: "BED & BREAKFAST",
    MatchKind.SECTION_104: "SECTION 104",
}


def money(value: Decimal) -> str:
    amount = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}£{abs(amount):,.2f}"


def quantity(value: Decimal) -> str:
    """Render a quantity without trailing zeros."""
    normalized = value.normalize()
    if normalized == normalized.to_integral_value():
        return f"{normalized.to_integral_value():f}"
    return f"{normalized:f}"


def uk_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def percent(value: Decimal) -> str:
    return f"{(value * 100).normalize():f}%"


class CGTReportGenerator:
    """Renders a CalculatorResult as a plain-text capital gains report."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["money"] = money
        self.env.filters["qty"] = quantity
        self.env.filters["ukdate"] = uk_date
        self.env.filters["percent"] = percent
        self.env.globals["match_labels"] = MATCH_LABELS
        self.env.globals["MatchKind"] = MatchKind

    def render(self, result: CalculatorResult) -> str:
        """Render the summary table and per-disposal details."""
        template = self.env.get_template("cgt_report.txt")
        return template.render(result=result)
