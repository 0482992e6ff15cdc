"""Typer CLI interface for TaxBridge."""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any

import typer

from taxbridge.exceptions import TaxComputationError

app = typer.Typer(
    name="taxbridge",
    help="TaxBridge — Nigeria Tax Act 2025 estimates for PIT, VAT and CIT.",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show computation trace"),
) -> None:
    """TaxBridge — Nigeria Tax Act 2025 estimates for PIT, VAT and CIT."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


class _DecimalEncoder(json.JSONEncoder):
    """JSON encoder that serializes Decimal as string."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Decimal):
            return str(obj)
        return super().default(obj)


def _echo_json(model: Any) -> None:
    typer.echo(json.dumps(model.model_dump(), cls=_DecimalEncoder, indent=2, ensure_ascii=False))


def _amount(value: float | None) -> Decimal | None:
    """Convert a CLI float to Decimal, dropping a spurious '.0'."""
    if value is None:
        return None
    amount = Decimal(str(value))
    whole = amount.to_integral_value()
    return whole if amount == whole else amount


@app.command()
def pit(
    gross: float | None = typer.Option(None, "--gross", "-g", help="Annual gross income (₦)"),
    rent: float | None = typer.Option(None, "--rent", help="Annual rent paid (₦)"),
    pension: float | None = typer.Option(None, "--pension", help="Pension contributions (₦)"),
    nhf: float | None = typer.Option(
        None,
        "--nhf",
        help="Declared NHF contributions (₦). Omit to apply 2.5% of gross income",
    ),
    nhis: float | None = typer.Option(None, "--nhis", help="NHIS contributions (₦)"),
    life_insurance: float | None = typer.Option(
        None, "--life-insurance", help="Life insurance premiums (₦)",
    ),
    housing_loan_interest: float | None = typer.Option(
        None, "--housing-loan-interest", help="Owner-occupied housing loan interest (₦)",
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the text summary to this file",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Estimate personal income tax with reliefs and band breakdown."""
    from taxbridge.engines.pit import calculate_pit, validate_pit_inputs
    from taxbridge.models.pit import PITInputs
    from taxbridge.reports.pit_summary import PITSummaryGenerator

    raw = {
        "annual_gross_income": _amount(gross),
        "annual_rent": _amount(rent),
        "pension_contributions": _amount(pension),
        "nhf_contributions": _amount(nhf),
        "nhis_contributions": _amount(nhis),
        "life_insurance": _amount(life_insurance),
        "housing_loan_interest": _amount(housing_loan_interest),
    }
    errors = validate_pit_inputs(raw)
    if errors:
        for message in errors:
            typer.echo(f"Error: {message}", err=True)
        raise typer.Exit(1)

    inputs = PITInputs(**{k: v for k, v in raw.items() if v is not None})
    try:
        result = calculate_pit(inputs)
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if json_output:
        _echo_json(result)
        return

    summary = PITSummaryGenerator().render(result)
    typer.echo(summary)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(summary, encoding="utf-8")
        typer.echo(f"Summary written to {output}")


@app.command()
def vat(
    turnover: float = typer.Argument(..., help="Annual turnover (₦)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Check whether turnover requires VAT registration."""
    from taxbridge.engines.thresholds import check_vat_threshold
    from taxbridge.formatting import format_naira

    try:
        result = check_vat_threshold(_amount(turnover))
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if json_output:
        _echo_json(result)
        return

    typer.echo(f"Turnover:    {format_naira(result.turnover)}")
    typer.echo(f"Threshold:   {format_naira(result.threshold)} ({result.percentage_of_threshold:.1f}% reached)")
    typer.echo(f"Status:      {result.status.value}")
    typer.echo(f"  {result.message}")
    typer.echo("")
    typer.echo(result.disclaimer)


@app.command()
def cit(
    turnover: float = typer.Argument(..., help="Annual company turnover (₦)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Determine the companies income tax rate tier."""
    from taxbridge.engines.thresholds import determine_cit_rate
    from taxbridge.formatting import format_naira

    try:
        result = determine_cit_rate(_amount(turnover))
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if json_output:
        _echo_json(result)
        return

    typer.echo(f"Turnover:    {format_naira(result.turnover)}")
    typer.echo(f"Category:    {result.category.value}")
    typer.echo(f"CIT Rate:    {result.rate * 100:.0f}%")
    typer.echo(f"  {result.message}")
    typer.echo("")
    typer.echo(result.disclaimer)


@app.command()
def bands() -> None:
    """Show the personal income tax band schedule."""
    from rich.console import Console
    from rich.table import Table

    from taxbridge.engines.rates import PIT_BANDS
    from taxbridge.formatting import format_naira

    table = Table(title="PIT Bands (Fourth Schedule)")
    table.add_column("Band")
    table.add_column("From", justify="right")
    table.add_column("To", justify="right")
    table.add_column("Rate", justify="right")

    lower = Decimal("0")
    for band in PIT_BANDS:
        upper = "—" if band.upper_limit is None else format_naira(band.upper_limit)
        table.add_row(band.label, format_naira(lower), upper, f"{band.rate * 100:.0f}%")
        if band.upper_limit is not None:
            lower = band.upper_limit

    Console().print(table)
