import math

import pandas as pd
import pytest

from switchover_calculator.errors import InvalidInputError
from switchover_calculator.report import (
    COLUMNS,
    cost_comparison_table,
    format_table,
    temperature_range,
)
from switchover_calculator.switchover import SwitchoverInputs

INPUTS = SwitchoverInputs(
    cop_at_t1=2.56,
    cop_at_t2=3.72,
    cost_gas_per_billing_unit=1.06,
    cost_elec_per_billing_unit=0.125,
    gas_furnace_efficiency=0.90,
)


def test_temperature_range_is_inclusive():
    assert temperature_range(0.0, 20.0, 5.0) == [0.0, 5.0, 10.0, 15.0, 20.0]
    assert temperature_range(0.0, 12.0, 5.0) == [0.0, 5.0, 10.0, 12.0]


@pytest.mark.parametrize("start, stop, step", [(0.0, 10.0, 0.0), (10.0, 0.0, 1.0)])
def test_temperature_range_rejects_bad_bounds(start: float, stop: float, step: float):
    with pytest.raises(InvalidInputError):
        temperature_range(start, stop, step)


def test_cost_comparison_table_columns_and_costs():
    df = cost_comparison_table(INPUTS, [17.0, 47.0])
    assert list(df.columns) == COLUMNS
    assert df["cop"].tolist() == pytest.approx([2.56, 3.72])
    # $1.06/therm at 90% -> $11.78 per delivered MMBtu
    assert df["furnace_cost_per_mmbtu"].iloc[0] == pytest.approx(1.06 * 10 / 0.9)
    assert df["heat_pump_cost_per_mmbtu"].iloc[1] == pytest.approx(0.125 / 3412 * 1e6 / 3.72)


def test_cost_comparison_table_switches_mode_at_switchover():
    df = cost_comparison_table(INPUTS, temperature_range(-10.0, 47.0, 1.0))
    furnace_temps = df.loc[df["preferred_mode"] == "furnace", "outdoor_temp_f"]
    heat_pump_temps = df.loc[df["preferred_mode"] == "heat_pump", "outdoor_temp_f"]
    assert furnace_temps.max() == 31.0
    assert heat_pump_temps.min() == 32.0


def test_nonpositive_cop_rows_prefer_furnace():
    df = cost_comparison_table(INPUTS, [-100.0])
    assert math.isnan(df["heat_pump_cost_per_mmbtu"].iloc[0])
    assert df["preferred_mode"].iloc[0] == "furnace"


def test_format_table_outputs():
    df = cost_comparison_table(INPUTS, [17.0, 47.0])
    assert isinstance(format_table(df, "dataframe"), pd.DataFrame)
    records = format_table(df, "json")
    assert records[0]["outdoor_temp_f"] == 17.0
    assert records[1]["preferred_mode"] == "heat_pump"
    csv_text = format_table(df, "csv")
    assert csv_text.splitlines()[0] == ",".join(COLUMNS)
    with pytest.raises(ValueError):
        format_table(df, "xml")
