"""Command line interface for the dual-fuel switchover calculator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable

from .config import OPTION_FIELDS, PRICE_OPTIONS, resolve_inputs, resolve_values
from .errors import SwitchoverError
from .report import OUTPUT_FORMATS, cost_comparison_table, format_table, temperature_range
from .switchover import analyze_switchover, cop_threshold
from .units import cost_per_kwh_to_cost_per_btu, cost_per_therm_to_cost_per_btu

logger = logging.getLogger(__name__)

OPTION_HELP: dict[str, str] = {
    "cop-at-t1": "Heat pump COP measured at t1",
    "cop-at-t2": "Heat pump COP measured at t2",
    "t1": "First COP rating temperature in °F (default: 17)",
    "t2": "Second COP rating temperature in °F (default: 47)",
    "cost-gas-per-unit": "Natural gas price per therm",
    "cost-elec-per-unit": "Electricity price per kWh",
    "furnace-efficiency": "Furnace efficiency as a fraction, e.g. 0.95",
}


def _add_input_arguments(subparser: argparse.ArgumentParser, options: Iterable[str]) -> None:
    for option in options:
        subparser.add_argument(f"--{option}", type=float, default=None, help=OPTION_HELP[option])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the outdoor temperature at which a dual-fuel system should switch to gas heat",
        epilog="Inputs may also come from --config (JSON) or SWITCHOVER_* environment variables.",
    )
    parser.add_argument("--config", default=None, help="JSON file with input values")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    temperature = subparsers.add_parser("temperature", help="Print the switchover temperature in °F")
    _add_input_arguments(temperature, OPTION_FIELDS)
    temperature.add_argument(
        "--verbose", action="store_true", help="Also print break-even COP and the fitted COP line"
    )

    threshold = subparsers.add_parser("threshold", help="Print the break-even heat pump COP")
    _add_input_arguments(threshold, PRICE_OPTIONS)

    table = subparsers.add_parser("table", help="Compare heating cost per MMBtu across temperatures")
    _add_input_arguments(table, OPTION_FIELDS)
    table.add_argument("--start", type=float, default=-10.0, help="Lowest outdoor temperature (default: -10)")
    table.add_argument("--stop", type=float, default=47.0, help="Highest outdoor temperature (default: 47)")
    table.add_argument("--step", type=float, default=5.0, help="Temperature increment (default: 5)")
    table.add_argument("--output", choices=OUTPUT_FORMATS, default="dataframe", help="Output format")

    return parser


def _cli_values(args: argparse.Namespace) -> dict[str, float | None]:
    return {option: getattr(args, option.replace("-", "_"), None) for option in OPTION_FIELDS}


def _run_temperature(args: argparse.Namespace) -> None:
    inputs = resolve_inputs(_cli_values(args), config_path=args.config)
    result = analyze_switchover(inputs)
    if args.verbose:
        print(f"Gas cost per Btu:         {result.cost_gas_per_btu:.6g}")
        print(f"Electricity cost per Btu: {result.cost_elec_per_btu:.6g}")
        print(f"Break-even COP:           {result.cop_threshold:.4f}")
        print(f"COP line:                 {result.cop_line.slope:.5f} * T + {result.cop_line.intercept:.4f}")
        print(f"Switchover temperature:   {result.temperature:.2f} °F")
    else:
        print(f"{result.temperature:.2f}")


def _run_threshold(args: argparse.Namespace) -> None:
    values = resolve_values(PRICE_OPTIONS, _cli_values(args), config_path=args.config)
    threshold = cop_threshold(
        cost_per_therm_to_cost_per_btu(values["cost-gas-per-unit"]),
        cost_per_kwh_to_cost_per_btu(values["cost-elec-per-unit"]),
        values["furnace-efficiency"],
    )
    print(f"{threshold:.4f}")


def _run_table(args: argparse.Namespace) -> None:
    inputs = resolve_inputs(_cli_values(args), config_path=args.config)
    temps = temperature_range(args.start, args.stop, args.step)
    data = format_table(cost_comparison_table(inputs, temps), args.output)
    if args.output == "json":
        print(json.dumps(data, indent=2))
    elif args.output == "csv":
        print(data, end="")
    else:
        print(data.to_string(index=False))


COMMANDS = {
    "temperature": _run_temperature,
    "threshold": _run_threshold,
    "table": _run_table,
}


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        COMMANDS[args.command](args)
    except SwitchoverError as exc:
        logger.debug("Calculation failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
