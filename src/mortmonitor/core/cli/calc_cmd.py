"""Calculator commands: payment, payoff, ltv, break-even, balance."""

from __future__ import annotations

import math

import click

from .common import parse_amount


@click.command()
@click.argument("principal")
@click.argument("rate")
@click.argument("term_years")
def payment(principal: str, rate: str, term_years: str) -> None:
    """Monthly principal & interest payment for a new loan."""
    from mortmonitor.finance import format_currency, monthly_payment_principal_and_interest

    amount = monthly_payment_principal_and_interest(
        parse_amount(principal), parse_amount(rate), parse_amount(term_years)
    )
    click.echo(f"Monthly P&I: {format_currency(amount, 2)}")


@click.command()
@click.argument("balance")
@click.argument("rate")
@click.argument("monthly_payment")
def payoff(balance: str, rate: str, monthly_payment: str) -> None:
    """Months until BALANCE is paid off at a fixed monthly payment."""
    from mortmonitor.finance import format_months, months_from_today, remaining_months

    months = remaining_months(parse_amount(balance), parse_amount(rate), parse_amount(monthly_payment))
    if math.isinf(months):
        click.echo(f"Months remaining: {format_months(months)} (payment does not cover interest)")
        return
    click.echo(f"Months remaining: {format_months(months)} (payoff {months_from_today(months).isoformat()})")


@click.command()
@click.argument("balance")
@click.argument("property_value")
@click.pass_context
def ltv(ctx: click.Context, balance: str, property_value: str) -> None:
    """Loan-to-value ratio of BALANCE against PROPERTY_VALUE."""
    from mortmonitor.finance import calculate_ltv, format_percent

    ratio = calculate_ltv(parse_amount(balance), parse_amount(property_value))
    click.echo(f"LTV: {format_percent(ratio, 2)}")

    pmi_threshold = ctx.obj["settings"].alerts.pmi_removal_ltv
    if ratio > pmi_threshold:
        click.echo(f"PMI likely required (LTV above {format_percent(pmi_threshold, 2)})")


@click.command("break-even")
@click.argument("closing_costs")
@click.argument("current_payment")
@click.argument("new_payment")
def break_even(closing_costs: str, current_payment: str, new_payment: str) -> None:
    """Months of savings needed to recoup refinance closing costs."""
    from mortmonitor.finance import break_even_months, format_break_even

    months = break_even_months(parse_amount(closing_costs), parse_amount(current_payment), parse_amount(new_payment))
    click.echo(f"Break-even: {format_break_even(months)}")


@click.command()
@click.argument("principal")
@click.argument("rate")
@click.argument("term_years")
@click.argument("payments_made")
def balance(principal: str, rate: str, term_years: str, payments_made: str) -> None:
    """Scheduled balance after PAYMENTS_MADE monthly payments."""
    from mortmonitor.finance import calculate_remaining_balance, format_currency

    remaining = calculate_remaining_balance(
        parse_amount(principal), parse_amount(rate), parse_amount(term_years), parse_amount(payments_made)
    )
    click.echo(f"Remaining balance: {format_currency(remaining, 2)}")
