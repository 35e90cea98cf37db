"""Photovoltaic panel output estimates.

Power = Area * Efficiency * Irradiance
Energy (kWh) = Area * Efficiency * (Irradiance * Hours / 1000) * PR
"""

import logging
import math

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_PERFORMANCE_RATIO = 0.75


def _check_area(area: float) -> None:
    if not (math.isfinite(area) and area >= 0.0):
        raise InvalidArgumentError(f"Panel area must be finite and >= 0, got {area}")


def _check_fraction(value: float, name: str) -> None:
    if not 0.0 <= value <= 1.0:
        raise InvalidArgumentError(f"{name} must be in [0, 1], got {value}")


def compute_panel_power(area: float, efficiency: float, irradiance: float) -> float:
    """Instantaneous panel output in watts.

    Args:
        area: Panel area in m²
        efficiency: Panel efficiency (fraction 0-1)
        irradiance: Solar irradiance in W/m², e.g. SolarPosition.irradiance.
            Negative values mean "no sun" and yield 0 W.
    """
    _check_area(area)
    _check_fraction(efficiency, "Efficiency")
    if irradiance < 0:
        logger.debug(f"Negative irradiance {irradiance} W/m² clamped to zero power")
        return 0.0
    return area * efficiency * irradiance


def estimate_energy_produced(
    area: float,
    efficiency: float,
    average_irradiance: float,
    period_hours: float,
    performance_ratio: float = DEFAULT_PERFORMANCE_RATIO,
) -> float:
    """Estimate energy produced over a period in kWh.

    For daily output pass period_hours=24, for annual 365 * 24.

    Args:
        area: Panel area in m²
        efficiency: Panel efficiency (fraction 0-1)
        average_irradiance: Mean irradiance over the period in W/m². Unlike
            compute_panel_power, a negative value is rejected.
        period_hours: Length of the period, strictly positive
        performance_ratio: Fraction of the theoretical yield delivered after
            system losses (0-1)

    Raises:
        InvalidArgumentError: on the first argument that fails its check.
    """
    _check_area(area)
    _check_fraction(efficiency, "Efficiency")
    if not average_irradiance >= 0.0:
        raise InvalidArgumentError(
            f"Irradiance must be >= 0, got {average_irradiance}"
        )
    _check_fraction(performance_ratio, "Performance ratio")
    if not period_hours > 0.0:
        raise InvalidArgumentError(f"Period hours must be > 0, got {period_hours}")

    insolation_kwh = average_irradiance * period_hours / 1000.0
    return area * efficiency * insolation_kwh * performance_ratio
