"""Heating cost comparison across a range of outdoor temperatures."""

from __future__ import annotations

from typing import Any, Iterable

import pandas as pd

from .constants import RATING_TEMP_HIGH_F
from .errors import InvalidInputError
from .switchover import FURNACE, HEAT_PUMP, SwitchoverInputs
from .units import (
    cost_per_btu_to_cost_per_mmbtu,
    cost_per_kwh_to_cost_per_btu,
    cost_per_therm_to_cost_per_btu,
)

COLUMNS = [
    "outdoor_temp_f",
    "cop",
    "heat_pump_cost_per_mmbtu",
    "furnace_cost_per_mmbtu",
    "preferred_mode",
]

OUTPUT_FORMATS = ("dataframe", "json", "csv")


def temperature_range(start: float = -10.0, stop: float = RATING_TEMP_HIGH_F, step: float = 5.0) -> list[float]:
    """Temperatures from ``start`` to ``stop`` inclusive in increments of ``step``."""

    if step <= 0:
        raise InvalidInputError("step must be greater than zero")
    if stop < start:
        raise InvalidInputError("stop must be greater than or equal to start")

    count = int((stop - start) // step) + 1
    temps = [start + i * step for i in range(count)]
    if stop - temps[-1] > 1e-9:
        temps.append(stop)
    return temps


def cost_comparison_table(inputs: SwitchoverInputs, temperatures: Iterable[float]) -> pd.DataFrame:
    """Delivered heat cost of each mode at each outdoor temperature.

    Costs are per MMBtu of heat delivered into the house. Rows where the
    extrapolated COP is not positive get a NaN heat pump cost and prefer the
    furnace.
    """

    inputs.validate()
    line = inputs.cop_line()
    furnace_cost = cost_per_btu_to_cost_per_mmbtu(
        cost_per_therm_to_cost_per_btu(inputs.cost_gas_per_billing_unit) / inputs.gas_furnace_efficiency
    )
    elec_cost = cost_per_btu_to_cost_per_mmbtu(cost_per_kwh_to_cost_per_btu(inputs.cost_elec_per_billing_unit))

    df = pd.DataFrame({"outdoor_temp_f": [float(t) for t in temperatures]})
    df["cop"] = line.cop_at(df["outdoor_temp_f"])
    df["heat_pump_cost_per_mmbtu"] = (elec_cost / df["cop"]).where(df["cop"] > 0)
    df["furnace_cost_per_mmbtu"] = furnace_cost
    heat_pump_wins = df["heat_pump_cost_per_mmbtu"] <= df["furnace_cost_per_mmbtu"]
    df["preferred_mode"] = heat_pump_wins.map({True: HEAT_PUMP, False: FURNACE})
    return df[COLUMNS]


def format_table(df: pd.DataFrame, output_format: str) -> pd.DataFrame | list[dict[str, Any]] | str:
    if output_format == "dataframe":
        return df
    if output_format == "json":
        return df.to_dict(orient="records")
    if output_format == "csv":
        return df.to_csv(index=False)
    raise ValueError(f"Unknown output_format: {output_format}")
