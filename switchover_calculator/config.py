"""Resolve calculator inputs from a config file, the environment and the CLI.

Later sources override earlier ones: JSON config file, then ``SWITCHOVER_*``
environment variables, then explicit command line values.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Iterable, Mapping

from .constants import RATING_TEMP_HIGH_F, RATING_TEMP_LOW_F
from .errors import ConfigError
from .switchover import SwitchoverInputs

logger = logging.getLogger(__name__)

ENV_PREFIX = "SWITCHOVER_"

# Recognized option name -> SwitchoverInputs field.
OPTION_FIELDS: dict[str, str] = {
    "cop-at-t1": "cop_at_t1",
    "cop-at-t2": "cop_at_t2",
    "t1": "t1",
    "t2": "t2",
    "cost-gas-per-unit": "cost_gas_per_billing_unit",
    "cost-elec-per-unit": "cost_elec_per_billing_unit",
    "furnace-efficiency": "gas_furnace_efficiency",
}

OPTION_DEFAULTS: dict[str, float] = {
    "t1": RATING_TEMP_LOW_F,
    "t2": RATING_TEMP_HIGH_F,
}

PRICE_OPTIONS = ("cost-gas-per-unit", "cost-elec-per-unit", "furnace-efficiency")


def env_var_name(option: str) -> str:
    """``cop-at-t1`` -> ``SWITCHOVER_COP_AT_T1``."""

    return ENV_PREFIX + option.replace("-", "_").upper()


def load_config_file(path: str | os.PathLike[str]) -> dict[str, Any]:
    """Read a JSON object of option values, keyed by dashed or underscored option name."""

    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text())
    except OSError as exc:
        raise ConfigError(f"Unable to read config file {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file {config_path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a JSON object")

    values: dict[str, Any] = {}
    for key, value in data.items():
        option = str(key).replace("_", "-")
        if option not in OPTION_FIELDS:
            logger.warning("Ignoring unknown key %r in %s", key, config_path)
            continue
        values[option] = value
    return values


def _coerce(option: str, value: Any, source: str) -> float:
    if isinstance(value, bool):
        raise ConfigError(f"{option} from {source} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{option} from {source} must be a number, got {value!r}") from exc


def resolve_values(
    options: Iterable[str],
    cli_values: Mapping[str, float | None] | None = None,
    config_path: str | os.PathLike[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, float]:
    """Look up each option across all sources and return ``{option: value}``.

    Raises
    ------
    ConfigError
        If a required option is not set anywhere or a value is not numeric.
    """

    environ = os.environ if environ is None else environ
    file_values = load_config_file(config_path) if config_path is not None else {}
    cli_values = cli_values or {}

    resolved: dict[str, float] = {}
    missing: list[str] = []
    for option in options:
        if option not in OPTION_FIELDS:
            raise ConfigError(f"Unknown option: {option}")

        cli_value = cli_values.get(option)
        env_name = env_var_name(option)
        if cli_value is not None:
            resolved[option] = _coerce(option, cli_value, "command line")
        elif env_name in environ:
            resolved[option] = _coerce(option, environ[env_name], env_name)
        elif option in file_values:
            resolved[option] = _coerce(option, file_values[option], str(config_path))
        elif option in OPTION_DEFAULTS:
            resolved[option] = OPTION_DEFAULTS[option]
        else:
            missing.append(option)

    if missing:
        names = ", ".join(f"--{option}" for option in missing)
        raise ConfigError(f"Missing required value(s): {names}")

    logger.debug("Resolved options: %s", resolved)
    return resolved


def resolve_inputs(
    cli_values: Mapping[str, float | None] | None = None,
    config_path: str | os.PathLike[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> SwitchoverInputs:
    """Build :class:`SwitchoverInputs` from every configured source."""

    values = resolve_values(OPTION_FIELDS, cli_values, config_path, environ)
    return SwitchoverInputs(**{OPTION_FIELDS[option]: value for option, value in values.items()})
