"""Linear model of heat pump COP as a function of outdoor temperature.

Manufacturers publish heating COP at two rating points (17 °F and 47 °F). Between
and somewhat beyond those points COP is close to linear in outdoor temperature,
which is all the switchover calculation needs.
"""

import logging
from dataclasses import dataclass

from .errors import InvalidInputError, NoSolutionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CopLine:
    """COP = slope * outdoor_temp_f + intercept."""

    slope: float
    intercept: float

    def cop_at(self, temperature: float) -> float:
        """Estimated COP at an outdoor temperature in °F."""

        return self.slope * temperature + self.intercept

    def temperature_at(self, cop: float) -> float:
        """Invert the line: outdoor temperature (°F) at which COP equals ``cop``.

        Raises
        ------
        NoSolutionError
            If the line is flat, so there is no single crossing point.
        """

        if self.slope == 0:
            if cop == self.intercept:
                raise NoSolutionError(
                    f"COP is constant at {self.intercept:g}, equal to the target everywhere; "
                    "no single switchover point"
                )
            raise NoSolutionError(
                f"COP is constant at {self.intercept:g} and never reaches {cop:g}; "
                "no finite switchover point"
            )

        return (cop - self.intercept) / self.slope


def fit_cop_line(t1: float, cop_at_t1: float, t2: float, cop_at_t2: float) -> CopLine:
    """Fit a line through two (temperature, COP) points.

    Parameters
    ----------
    t1, t2: float
        Outdoor temperatures in °F of the two measurements. Must differ.
    cop_at_t1, cop_at_t2: float
        Measured COP at ``t1`` and ``t2``.

    Returns
    -------
    CopLine
        The fitted line. The result does not depend on the order of the points.

    Raises
    ------
    InvalidInputError
        If ``t1`` equals ``t2``.
    """

    if t1 == t2:
        raise InvalidInputError(f"t1 and t2 must differ to fit a COP line (both are {t1:g} °F).")

    slope = (cop_at_t2 - cop_at_t1) / (t2 - t1)
    intercept = cop_at_t1 - slope * t1
    logger.debug("Fitted COP line: slope=%s intercept=%s", slope, intercept)
    return CopLine(slope=slope, intercept=intercept)
