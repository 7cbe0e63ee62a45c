"""mortmonitor alerts: list templates and check thresholds."""

from __future__ import annotations

import click

from .refi_cmd import build_comparisons, refinance_options


@click.group()
def alerts() -> None:
    """Refinance alert templates and checks."""


@alerts.command()
@click.pass_context
def templates(ctx: click.Context) -> None:
    """List the available alert templates and their defaults."""
    from mortmonitor.alerts import default_templates

    pmi_ltv = ctx.obj["settings"].alerts.pmi_removal_ltv
    for template in default_templates(pmi_removal_ltv=pmi_ltv):
        click.echo(f"{template.kind.value:<18} {template.name:<34} {template.summary}")
        click.echo(f"{'':<18} {template.description}")


def parse_alerts(items: tuple[str, ...]) -> list:
    """Turn ``KIND=VALUE`` pairs into alert configs."""
    from mortmonitor.alerts import AlertConfig, AlertKind
    from mortmonitor.alerts.templates import INPUT_KEYS
    from mortmonitor.core.exceptions import AlertConfigError
    from mortmonitor.finance import to_number

    configs = []
    for item in items:
        kind_name, sep, raw = item.partition("=")
        if not sep:
            raise click.BadParameter(f"expected KIND=VALUE, got {item!r}", param_hint="--alert")
        try:
            kind = AlertKind(kind_name.strip())
            value = raw.strip() if kind == AlertKind.BREAK_EVEN_DATE else to_number(raw)
            configs.append(AlertConfig(kind=kind, inputs={INPUT_KEYS[kind]: value}, alert_id=item))
        except (ValueError, AlertConfigError) as e:
            raise click.BadParameter(str(e), param_hint="--alert") from e
    return configs


@alerts.command()
@refinance_options
@click.option(
    "--alert",
    "alert_specs",
    multiple=True,
    required=True,
    help="Alert as KIND=VALUE (repeatable), e.g. --alert monthly-savings=150.",
)
@click.pass_context
def check(
    ctx: click.Context,
    balance,
    current_rate,
    remaining_months,
    property_value,
    rates,
    closing_costs,
    alert_specs,
) -> None:
    """Check alerts against today's refinance figures."""
    from mortmonitor.alerts import evaluate_alerts

    configs = parse_alerts(alert_specs)
    comparisons = build_comparisons(
        ctx, balance, current_rate, remaining_months, property_value, rates, closing_costs
    )
    for result in evaluate_alerts(configs, comparisons):
        marker = "SOUNDING" if result.sounding else "quiet"
        click.echo(f"[{marker}] {result.message}")
