"""Typer CLI interface for cgtcalc."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

app = typer.Typer(
    name="cgtcalc",
    help="cgtcalc: UK capital gains tax calculator (same-day, bed & breakfast, Section 104 matching).",
)


@app.callback()
def main() -> None:
    """UK capital gains tax calculator."""


def _configure_logging(verbose: bool) -> logging.Logger:
    """Send log records to stderr through rich. One configuration per run."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
    return logging.getLogger("cgtcalc")


@app.command()
def calculate(
    input_file: Path = typer.Argument(..., help="Ledger file (.txt or .json)"),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the report to this file instead of stdout",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log matching progress and every match to stderr",
    ),
) -> None:
    """Calculate capital gains for every disposal in a ledger."""
    from cgtcalc.engines.calculator import Calculator
    from cgtcalc.exceptions import CGTCalculationError
    from cgtcalc.ingestion import get_adapter
    from cgtcalc.reports import CGTReportGenerator

    logger = _configure_logging(verbose)

    if not input_file.exists():
        typer.echo(f"Error: File not found: {input_file}", err=True)
        raise typer.Exit(1)

    adapter = get_adapter(input_file)
    try:
        calculator_input = adapter.parse(input_file)
        for warning in adapter.validate(calculator_input):
            typer.echo(f"Warning: {warning}", err=True)
        result = Calculator(calculator_input, logger).process()
    except CGTCalculationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    report = CGTReportGenerator().render(result)
    if output is None:
        typer.echo(report)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(report)
    typer.echo(f"Report written to {output}")


@app.command()
def rates() -> None:
    """Show the configured annual exempt amounts and rates."""
    from cgtcalc.engines.rates import TAX_YEAR_RATES
    from cgtcalc.models.results import TaxYear
    from cgtcalc.reports.cgt_report import money, percent

    table = Table(title="Capital gains tax rates")
    table.add_column("Tax year")
    table.add_column("Exemption", justify="right")
    table.add_column("Basic rate", justify="right")
    table.add_column("Higher rate", justify="right")
    table.add_column("Note")

    for year_ending, year_rates in sorted(TAX_YEAR_RATES.items()):
        table.add_row(
            TaxYear(year_ending=year_ending).label,
            money(year_rates.exemption),
            percent(year_rates.basic_rate),
            percent(year_rates.higher_rate),
            year_rates.note or "",
        )

    Console().print(table)


if __name__ == "__main__":
    app()
