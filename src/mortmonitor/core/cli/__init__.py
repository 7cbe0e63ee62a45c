"""MortMonitor CLI: entry point for calculator, refinance and alert commands."""

import click

from mortmonitor import __version__


@click.group()
@click.version_option(version=__version__, package_name="mortmonitor")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML or JSON config file (default: ~/.mortmonitor/config.yaml if present).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """MortMonitor: mortgage payment, payoff and refinance figures."""
    from .common import init_context

    init_context(ctx, config_path, verbose)


# Register subcommands
from .alerts_cmd import alerts
from .calc_cmd import balance, break_even, ltv, payment, payoff
from .refi_cmd import refi

main.add_command(payment)
main.add_command(payoff)
main.add_command(ltv)
main.add_command(break_even)
main.add_command(balance)
main.add_command(refi)
main.add_command(alerts)
