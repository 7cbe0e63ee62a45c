"""Shared setup logic for CLI commands."""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from mortmonitor.core.exceptions import MortMonitorError

MORTMONITOR_DIR = Path.home() / ".mortmonitor"
CONFIG_PATH = MORTMONITOR_DIR / "config.yaml"


def load_config(config_path: str | None = None):
    """Load config from the given file, else ~/.mortmonitor/config.yaml when present."""
    from mortmonitor.core.config import Config

    if config_path is None and CONFIG_PATH.exists():
        config_path = str(CONFIG_PATH)
    return Config(config_file=config_path, data_dir=str(MORTMONITOR_DIR))


def init_context(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Load and validate config, configure logging, stash both on the context."""
    from mortmonitor.core.utils.logging import configure_logging

    try:
        config = load_config(config_path)
        if verbose:
            config.set("logging.level", "DEBUG")
        settings = config.validated()
        if settings.logging.file:
            config.ensure_directories()
    except (MortMonitorError, ValidationError) as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e
    except OSError as e:
        raise click.ClickException(f"Cannot create data directories: {e}") from e

    configure_logging(settings)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["settings"] = settings


def parse_amount(value: str) -> float:
    """Coerce a raw argument such as ``$300,000`` or ``6.25%`` into a number."""
    from mortmonitor.finance.calculations import to_number

    return to_number(value)
