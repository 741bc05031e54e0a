"""SwitchoverCalculator: when a dual-fuel heating system should switch from heat pump to gas."""

from .constants import BTU_PER_KWH, BTU_PER_MMBTU, BTU_PER_THERM, RATING_TEMP_HIGH_F, RATING_TEMP_LOW_F
from .cop import CopLine, fit_cop_line
from .errors import ConfigError, InvalidInputError, NoSolutionError, SwitchoverError
from .report import cost_comparison_table, format_table, temperature_range
from .switchover import (
    SwitchoverInputs,
    SwitchoverResult,
    analyze_switchover,
    cop_threshold,
    preferred_mode,
    switchover_temperature,
)
from .units import (
    cost_per_btu_to_cost_per_mmbtu,
    cost_per_kwh_to_cost_per_btu,
    cost_per_therm_to_cost_per_btu,
    delivered_heat_cost_per_btu,
)

__all__ = [
    "BTU_PER_KWH",
    "BTU_PER_MMBTU",
    "BTU_PER_THERM",
    "RATING_TEMP_HIGH_F",
    "RATING_TEMP_LOW_F",
    "CopLine",
    "fit_cop_line",
    "SwitchoverError",
    "InvalidInputError",
    "NoSolutionError",
    "ConfigError",
    "SwitchoverInputs",
    "SwitchoverResult",
    "analyze_switchover",
    "cop_threshold",
    "switchover_temperature",
    "preferred_mode",
    "cost_comparison_table",
    "format_table",
    "temperature_range",
    "cost_per_therm_to_cost_per_btu",
    "cost_per_kwh_to_cost_per_btu",
    "cost_per_btu_to_cost_per_mmbtu",
    "delivered_heat_cost_per_btu",
]
