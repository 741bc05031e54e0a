"""Shared engineering constants for dual-fuel switchover calculations."""

BTU_PER_THERM: float = 100_000.0
"""British thermal units contained in one therm of natural gas."""

BTU_PER_KWH: float = 3_412.0
"""British thermal units equivalent to one kilowatt-hour of electricity.

The exact value is 3,412.14; the rounded figure matches what utility bills and
heat pump data sheets typically use.
"""

BTU_PER_MMBTU: float = 1_000_000.0
"""British thermal units contained in one million British thermal units."""

RATING_TEMP_LOW_F: float = 17.0
"""Low-temperature rating point (°F) published for most air-source heat pumps."""

RATING_TEMP_HIGH_F: float = 47.0
"""High-temperature rating point (°F) published for most air-source heat pumps."""
