"""Frozen dataclasses for all structured return types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SolarPosition:
    declination: float
    hour_angle: float
    altitude: float
    azimuth: float  # NaN while the sun is at or below the horizon
    zenith: float
    irradiance: float  # W/m² on a horizontal surface

    @property
    def is_daylight(self) -> bool:
        return self.altitude > 0.0
