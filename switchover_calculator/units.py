"""Billing-unit price conversions.

Fuel is billed per therm (gas) or per kilowatt-hour (electricity). Comparing the
two requires a common energy unit, so everything here converts to a cost per
British thermal unit.
"""

from .constants import BTU_PER_KWH, BTU_PER_MMBTU, BTU_PER_THERM
from .errors import InvalidInputError


def cost_per_therm_to_cost_per_btu(cost_per_therm: float) -> float:
    """Convert a natural gas price per therm to a price per Btu.

    Parameters
    ----------
    cost_per_therm: float
        Gas price in currency per therm.

    Returns
    -------
    float
        Gas price in currency per Btu, using 1 therm = 100,000 Btu.
    """

    return cost_per_therm / BTU_PER_THERM


def cost_per_kwh_to_cost_per_btu(cost_per_kwh: float) -> float:
    """Convert an electricity price per kWh to a price per Btu (1 kWh = 3,412 Btu)."""

    return cost_per_kwh / BTU_PER_KWH


def cost_per_btu_to_cost_per_mmbtu(cost_per_btu: float) -> float:
    """Scale a per-Btu price up to a per-MMBtu price for display."""

    return cost_per_btu * BTU_PER_MMBTU


def delivered_heat_cost_per_btu(cost_per_btu: float, efficiency: float) -> float:
    """Cost of one Btu of useful heat delivered into the house.

    Parameters
    ----------
    cost_per_btu: float
        Price of the purchased energy in currency per Btu.
    efficiency: float
        Useful heat out per unit of energy in. A furnace fraction such as 0.9,
        or a heat pump coefficient of performance such as 3.2.

    Returns
    -------
    float
        Currency per Btu of delivered heat.

    Raises
    ------
    InvalidInputError
        If ``efficiency`` is not positive.
    """

    if efficiency <= 0:
        raise InvalidInputError("Efficiency must be greater than zero.")

    return cost_per_btu / efficiency
