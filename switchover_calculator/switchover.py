"""Dual-fuel switchover temperature calculation.

A dual-fuel system heats with an electric heat pump in mild weather and a gas
furnace in cold weather. Heat pump COP falls as the outdoor temperature drops,
so below some temperature a Btu of heat from the furnace is cheaper than a Btu
from the heat pump. :func:`switchover_temperature` finds that temperature.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass

from .constants import RATING_TEMP_HIGH_F, RATING_TEMP_LOW_F
from .cop import CopLine, fit_cop_line
from .errors import InvalidInputError, NoSolutionError
from .units import (
    cost_per_kwh_to_cost_per_btu,
    cost_per_therm_to_cost_per_btu,
    delivered_heat_cost_per_btu,
)

logger = logging.getLogger(__name__)

HEAT_PUMP = "heat_pump"
FURNACE = "furnace"


def validate_prices(cost_gas: float, cost_elec: float, gas_furnace_efficiency: float) -> None:
    """Raise :class:`InvalidInputError` for a negative or non-finite price or an efficiency outside (0, 1].

    Prices may be per billing unit or per Btu; only their sign matters here.
    """

    for name, value in (
        ("cost_gas", cost_gas),
        ("cost_elec", cost_elec),
        ("gas_furnace_efficiency", gas_furnace_efficiency),
    ):
        if not math.isfinite(value):
            raise InvalidInputError(f"{name} must be a finite number, got {value!r}.")

    if not 0 < gas_furnace_efficiency <= 1:
        raise InvalidInputError(f"gas_furnace_efficiency must be in (0, 1], got {gas_furnace_efficiency:g}.")
    if cost_gas < 0:
        raise InvalidInputError("Gas price must not be negative.")
    if cost_elec < 0:
        raise InvalidInputError("Electricity price must not be negative.")


@dataclass(frozen=True)
class SwitchoverInputs:
    """Everything needed to locate the switchover point."""

    cop_at_t1: float
    cop_at_t2: float
    cost_gas_per_billing_unit: float
    cost_elec_per_billing_unit: float
    gas_furnace_efficiency: float
    t1: float = RATING_TEMP_LOW_F
    t2: float = RATING_TEMP_HIGH_F

    def validate(self) -> None:
        """Raise :class:`InvalidInputError` if any input is out of its domain."""

        for name, value in asdict(self).items():
            if not math.isfinite(value):
                raise InvalidInputError(f"{name} must be a finite number, got {value!r}.")

        if self.t1 == self.t2:
            raise InvalidInputError(f"t1 and t2 must differ (both are {self.t1:g} °F).")
        validate_prices(
            self.cost_gas_per_billing_unit,
            self.cost_elec_per_billing_unit,
            self.gas_furnace_efficiency,
        )
        if self.cop_at_t1 <= 0 or self.cop_at_t2 <= 0:
            raise InvalidInputError("Measured COP values must be greater than zero.")

    def cop_line(self) -> CopLine:
        return fit_cop_line(self.t1, self.cop_at_t1, self.t2, self.cop_at_t2)


@dataclass(frozen=True)
class SwitchoverResult:
    """Switchover temperature together with the intermediate quantities."""

    inputs: SwitchoverInputs
    cost_gas_per_btu: float
    cost_elec_per_btu: float
    cop_threshold: float
    cop_line: CopLine
    temperature: float


def cop_threshold(
    cost_gas_per_btu: float,
    cost_elec_per_btu: float,
    gas_furnace_efficiency: float,
) -> float:
    """COP at which heat pump heat costs the same as furnace heat.

    Furnace heat costs ``cost_gas_per_btu / gas_furnace_efficiency`` per
    delivered Btu and heat pump heat costs ``cost_elec_per_btu / COP``. Setting
    the two equal and solving for COP gives the threshold.

    Raises
    ------
    InvalidInputError
        If a price is negative or non-finite, or ``gas_furnace_efficiency`` is
        outside (0, 1].
    NoSolutionError
        If gas is free. The furnace is then never more expensive than the heat
        pump, and when electricity is free too every COP ties, so there is no
        single threshold either way.
    """

    validate_prices(cost_gas_per_btu, cost_elec_per_btu, gas_furnace_efficiency)
    if cost_gas_per_btu == 0:
        raise NoSolutionError("Gas price is zero; the furnace is never more expensive than the heat pump.")

    return cost_elec_per_btu / (cost_gas_per_btu * (1 / gas_furnace_efficiency))


def analyze_switchover(inputs: SwitchoverInputs) -> SwitchoverResult:
    """Run the full switchover calculation and keep every intermediate value.

    Raises
    ------
    InvalidInputError
        If the inputs fail :meth:`SwitchoverInputs.validate`.
    NoSolutionError
        If the COP line never crosses the break-even threshold.
    """

    inputs.validate()

    cost_gas_per_btu = cost_per_therm_to_cost_per_btu(inputs.cost_gas_per_billing_unit)
    cost_elec_per_btu = cost_per_kwh_to_cost_per_btu(inputs.cost_elec_per_billing_unit)
    threshold = cop_threshold(cost_gas_per_btu, cost_elec_per_btu, inputs.gas_furnace_efficiency)
    logger.debug(
        "Gas %s/Btu, electricity %s/Btu, break-even COP %s",
        cost_gas_per_btu,
        cost_elec_per_btu,
        threshold,
    )

    line = inputs.cop_line()
    if line.slope < 0:
        # COP falling with warmer weather inverts which side of the point favors the furnace.
        logger.warning("COP decreases with outdoor temperature (slope %s); check the sample points", line.slope)

    temperature = line.temperature_at(threshold)
    logger.debug("Switchover temperature %s °F", temperature)

    return SwitchoverResult(
        inputs=inputs,
        cost_gas_per_btu=cost_gas_per_btu,
        cost_elec_per_btu=cost_elec_per_btu,
        cop_threshold=threshold,
        cop_line=line,
        temperature=temperature,
    )


def switchover_temperature(
    cop_at_t1: float,
    cop_at_t2: float,
    t1: float,
    t2: float,
    cost_gas_per_billing_unit: float,
    cost_elec_per_billing_unit: float,
    gas_furnace_efficiency: float,
) -> float:
    """Outdoor temperature (°F) below which the gas furnace is the cheaper heat source.

    Parameters
    ----------
    cop_at_t1, cop_at_t2: float
        Measured heat pump COP at ``t1`` and ``t2``.
    t1, t2: float
        Outdoor temperatures (°F) of the COP measurements. Must differ.
    cost_gas_per_billing_unit: float
        Natural gas price per therm.
    cost_elec_per_billing_unit: float
        Electricity price per kWh.
    gas_furnace_efficiency: float
        Furnace efficiency as a fraction in (0, 1].

    Returns
    -------
    float
        The switchover temperature in °F.

    Raises
    ------
    InvalidInputError
        If an input is out of range (including ``t1 == t2``).
    NoSolutionError
        If there is no finite switchover point.
    """

    inputs = SwitchoverInputs(
        cop_at_t1=cop_at_t1,
        cop_at_t2=cop_at_t2,
        t1=t1,
        t2=t2,
        cost_gas_per_billing_unit=cost_gas_per_billing_unit,
        cost_elec_per_billing_unit=cost_elec_per_billing_unit,
        gas_furnace_efficiency=gas_furnace_efficiency,
    )
    return analyze_switchover(inputs).temperature


def preferred_mode(inputs: SwitchoverInputs, outdoor_temperature: float) -> str:
    """Cheaper heat source at ``outdoor_temperature``: ``"heat_pump"`` or ``"furnace"``.

    Ties go to the heat pump. A non-positive extrapolated COP means the heat
    pump cannot deliver heat, so the furnace is chosen.
    """

    inputs.validate()
    cop = inputs.cop_line().cop_at(outdoor_temperature)
    if cop <= 0:
        return FURNACE

    furnace_cost = delivered_heat_cost_per_btu(
        cost_per_therm_to_cost_per_btu(inputs.cost_gas_per_billing_unit),
        inputs.gas_furnace_efficiency,
    )
    heat_pump_cost = delivered_heat_cost_per_btu(
        cost_per_kwh_to_cost_per_btu(inputs.cost_elec_per_billing_unit),
        cop,
    )
    return HEAT_PUMP if heat_pump_cost <= furnace_cost else FURNACE
