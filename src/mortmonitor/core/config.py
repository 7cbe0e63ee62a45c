"""
Layered configuration for mortmonitor.

Sources, lowest to highest precedence:
    1. Built-in defaults (refinance market assumptions, alert thresholds)
    2. Config file (YAML or JSON)
    3. Environment variables (MORTMONITOR_SECTION__KEY)

Usage:
    config = Config(config_file="mortmonitor.yaml")

    config.get("refinance.conforming_limit")   # dot-notation access
    config.set("logging.level", "DEBUG")       # e.g. a --verbose flag
    config.validated().refinance.terms         # typed, validated view
"""

import json
import os
from typing import Any

import yaml

from .config_schema import MortMonitorConfig
from .exceptions import ConfigurationError

ENV_PREFIX = "MORTMONITOR_"
DEFAULT_DATA_DIR = os.path.join("~", ".mortmonitor")


def default_settings(data_dir: str) -> dict[str, Any]:
    """Defaults before any file or environment overrides."""
    data_dir = os.path.expanduser(data_dir)
    return {
        "paths": {
            "data_dir": data_dir,
            "log_dir": os.path.join(data_dir, "logs"),
        },
        "logging": {
            "level": "WARNING",
            "file": "",
        },
        "refinance": {
            # 2024 baseline single-unit conforming loan limit
            "conforming_limit": 766_550,
            "terms": [30, 15],
            "default_closing_costs": 0,
        },
        "alerts": {
            "pmi_removal_ltv": 80,
        },
    }


def read_config_file(path: str) -> dict[str, Any]:
    """Parse a YAML or JSON config file into a mapping.

    Raises:
        ConfigurationError: missing file, unknown extension, parse error, or a
            top level that is not a mapping.
    """
    if not os.path.exists(path):
        raise ConfigurationError(f"Config file not found: {path}")

    ext = os.path.splitext(path)[1].lower()
    if ext not in (".yaml", ".yml", ".json"):
        raise ConfigurationError(f"Unsupported config file type: {path}")

    try:
        with open(path) as f:
            data = json.load(f) if ext == ".json" else yaml.safe_load(f) or {}
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not parse config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    return data


def env_overrides(prefix: str, environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Nested overrides from ``PREFIX_SECTION__KEY=value`` variables.

    Values stay strings; the pydantic schema coerces them on validation.
    """
    overrides: dict[str, Any] = {}
    if not prefix:
        return overrides
    environ = os.environ if environ is None else environ
    for env_key, env_value in environ.items():
        if not env_key.startswith(prefix):
            continue
        *parents, leaf = env_key[len(prefix) :].lower().split("__")
        node = overrides
        for part in parents:
            if not isinstance(node.get(part), dict):
                node[part] = {}
            node = node[part]
        node[leaf] = env_value
    return overrides


def _merge(target: dict, source: dict) -> None:
    """Recursively merge source into target; non-dict values replace."""
    for key, value in source.items():
        if isinstance(target.get(key), dict) and isinstance(value, dict):
            _merge(target[key], value)
        else:
            target[key] = value


class Config:
    """
    Merged configuration for one CLI run or library caller.

    Env vars use double-underscore to denote nesting:
    MORTMONITOR_REFINANCE__CONFORMING_LIMIT=806500 -> config["refinance"]["conforming_limit"]
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = ENV_PREFIX,
        data_dir: str | None = None,
    ):
        """
        Args:
            config_file: Path to a YAML or JSON config file; must exist if given.
            env_prefix: Prefix for environment variable overrides ("" disables them).
            data_dir: Base directory for logs and data. Defaults to ~/.mortmonitor.
        """
        self.config_file = config_file
        self.env_prefix = env_prefix or ""

        self.config_data = default_settings(data_dir or DEFAULT_DATA_DIR)
        if config_file:
            _merge(self.config_data, read_config_file(config_file))
        _merge(self.config_data, env_overrides(self.env_prefix))

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dot-notation path.

        Args:
            key_path: e.g. "paths.log_dir", "refinance.terms"
            default: Returned when key is not found.
        """
        current = self.config_data
        for part in key_path.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key_path: str, value: Any) -> None:
        """Set a config value by dot-notation path, creating intermediate dicts."""
        *parents, leaf = key_path.split(".")
        node = self.config_data
        for part in parents:
            if not isinstance(node.get(part), dict):
                node[part] = {}
            node = node[part]
        node[leaf] = value

    def validated(self) -> MortMonitorConfig:
        """Return a typed view of the merged config; raises pydantic.ValidationError."""
        return MortMonitorConfig.model_validate(self.config_data)

    def ensure_directories(self) -> None:
        """Create the configured ``paths`` directories if they don't exist."""
        for path_value in self.get("paths", {}).values():
            if isinstance(path_value, str) and path_value:
                os.makedirs(os.path.expanduser(path_value), exist_ok=True)
