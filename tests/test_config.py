import json

import pytest

from switchover_calculator.config import env_var_name, load_config_file, resolve_inputs, resolve_values
from switchover_calculator.errors import ConfigError, InvalidInputError

FULL_CLI = {
    "cop-at-t1": 2.56,
    "cop-at-t2": 3.72,
    "cost-gas-per-unit": 1.06,
    "cost-elec-per-unit": 0.125,
    "furnace-efficiency": 0.9,
}


def test_env_var_name():
    assert env_var_name("cop-at-t1") == "SWITCHOVER_COP_AT_T1"
    assert env_var_name("furnace-efficiency") == "SWITCHOVER_FURNACE_EFFICIENCY"


def test_resolve_inputs_from_cli_with_default_temperatures():
    inputs = resolve_inputs(FULL_CLI, environ={})
    assert inputs.cop_at_t1 == 2.56
    assert inputs.gas_furnace_efficiency == 0.9
    assert (inputs.t1, inputs.t2) == (17.0, 47.0)


def test_precedence_cli_over_env_over_file(tmp_path):
    config = tmp_path / "switchover.json"
    config.write_text(json.dumps({**FULL_CLI, "t1": 5.0, "cost_elec_per_unit": 0.5}))
    environ = {"SWITCHOVER_T1": "10", "SWITCHOVER_COST_ELEC_PER_UNIT": "0.2"}

    values = resolve_values(["t1", "cost-elec-per-unit", "cop-at-t1"], {"t1": 12.0}, config, environ)

    assert values == {"t1": 12.0, "cost-elec-per-unit": 0.2, "cop-at-t1": 2.56}


def test_missing_required_value_is_reported():
    with pytest.raises(ConfigError, match="--cop-at-t2"):
        resolve_inputs({"cop-at-t1": 2.5}, environ={})


def test_config_error_is_invalid_input():
    assert issubclass(ConfigError, InvalidInputError)


def test_non_numeric_env_value(monkeypatch):
    monkeypatch.setenv("SWITCHOVER_COP_AT_T2", "warm")
    with pytest.raises(ConfigError, match="SWITCHOVER_COP_AT_T2"):
        resolve_inputs({"cop-at-t1": 2.5})


def test_load_config_file_ignores_unknown_keys(tmp_path):
    config = tmp_path / "switchover.json"
    config.write_text(json.dumps({"cop_at_t1": 2.5, "color": "blue"}))
    assert load_config_file(config) == {"cop-at-t1": 2.5}


@pytest.mark.parametrize("content", ["not json", "[1, 2]"])
def test_load_config_file_rejects_bad_content(tmp_path, content: str):
    config = tmp_path / "switchover.json"
    config.write_text(content)
    with pytest.raises(ConfigError):
        load_config_file(config)


def test_load_config_file_missing(tmp_path):
    with pytest.raises(ConfigError):
        load_config_file(tmp_path / "absent.json")
