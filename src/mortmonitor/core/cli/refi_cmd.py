"""mortmonitor refi: compare today's rates against the current loan."""

from __future__ import annotations

import click

from .common import parse_amount


def parse_rate_quotes(rates: tuple[str, ...], closing_costs: str | None) -> dict:
    """Turn ``TERM=RATE`` pairs into rate quotes keyed by term."""
    from mortmonitor.finance import RateQuote

    costs = parse_amount(closing_costs) if closing_costs is not None else None
    quotes = {}
    for item in rates:
        term, sep, rate = item.partition("=")
        if not sep or not term.strip().isdigit() or int(term) <= 0:
            raise click.BadParameter(f"expected TERM=RATE (e.g. 30=6.125), got {item!r}", param_hint="--rate")
        quotes[int(term)] = RateQuote(rate=parse_amount(rate), closing_costs=costs)
    return quotes


def load_current_loan(balance: str, current_rate: str, remaining_months: str, property_value: str):
    from mortmonitor.finance import CurrentLoan

    try:
        return CurrentLoan(
            outstanding_principal=parse_amount(balance),
            current_rate=parse_amount(current_rate),
            remaining_term_months=int(parse_amount(remaining_months)),
            property_value=parse_amount(property_value),
        )
    except ValueError as e:
        raise click.ClickException(str(e)) from e


def refinance_options(func):
    """Arguments and options shared by commands that build refinance comparisons."""
    func = click.option(
        "--closing-costs", default=None, help="Closing costs for the new loan (default from config)."
    )(func)
    func = click.option(
        "--rate",
        "rates",
        multiple=True,
        required=True,
        help="Today's rate for a term, as TERM=RATE (repeatable), e.g. --rate 30=6.125.",
    )(func)
    for name in reversed(("balance", "current_rate", "remaining_months", "property_value")):
        func = click.argument(name)(func)
    return func


def build_comparisons(
    ctx: click.Context, balance, current_rate, remaining_months, property_value, rates, closing_costs
):
    from mortmonitor.finance import compare_terms

    settings = ctx.obj["settings"]
    quotes = parse_rate_quotes(rates, closing_costs)
    current = load_current_loan(balance, current_rate, remaining_months, property_value)
    return compare_terms(
        current,
        quotes,
        conforming_limit=settings.refinance.conforming_limit,
        default_closing_costs=settings.refinance.default_closing_costs,
    )


@click.command()
@refinance_options
@click.pass_context
def refi(ctx: click.Context, balance, current_rate, remaining_months, property_value, rates, closing_costs) -> None:
    """Compare refinancing BALANCE at today's rates for each quoted term."""
    comparisons = build_comparisons(
        ctx, balance, current_rate, remaining_months, property_value, rates, closing_costs
    )
    for comparison in comparisons:
        click.echo(comparison.format_table())
