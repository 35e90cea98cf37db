"""Solar position and horizontal irradiance from closed-form formulas.

All angles in degrees unless otherwise noted. Times are UTC.
"""

import logging
import math
from datetime import datetime as DateTime, timezone

from ._types import SolarPosition
from .errors import InvalidArgumentError, InvalidTimestampError

logger = logging.getLogger(__name__)

EARTH_AXIAL_TILT = 23.45
DEGREES_PER_HOUR = 15.0
EQUATION_OF_TIME_AMPLITUDE = 7.5
VERNAL_EQUINOX_DAY = 81
MINUTES_PER_DEGREE = 4.0
SOLAR_CONSTANT = 1367.0  # W/m²


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / math.pi)


def normalize_angle(angle: float) -> float:
    """Normalize angle to 0-360 degree range."""
    return angle % 360.0


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def leap_year(year: int) -> bool:
    """Returns True if year is a leap year."""
    return (year % 400 == 0) or (year % 4 == 0 and year % 100 != 0)


def days_in_months(year: int) -> list[int]:
    """Returns a list of days per month for the given year."""
    return [31, 29 if leap_year(year) else 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def day_of_year(year: int, month: int, day: int) -> int:
    """Calculate day of year (1-366) from year, month, day."""
    return sum(days_in_months(year)[: month - 1]) + day


def to_utc(instant) -> DateTime:
    """Coerce an instant to a UTC datetime.

    Accepts a timezone-aware datetime, an ISO-8601 string with an offset
    (``Z`` included) or a POSIX timestamp in seconds.

    Raises:
        InvalidTimestampError: if the instant is naive, unparseable,
            out of the representable range or of an unsupported type.
    """
    if isinstance(instant, DateTime):
        dt = instant
    elif isinstance(instant, str):
        try:
            dt = DateTime.fromisoformat(instant)
        except ValueError as exc:
            raise InvalidTimestampError(f"Invalid timestamp: {instant!r}") from exc
    elif isinstance(instant, (int, float)) and not isinstance(instant, bool):
        try:
            return DateTime.fromtimestamp(instant, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidTimestampError(f"Invalid timestamp: {instant!r}") from exc
    else:
        raise InvalidTimestampError(
            f"Invalid timestamp of type {type(instant).__name__}"
        )

    if dt.tzinfo is None or dt.utcoffset() is None:
        raise InvalidTimestampError("Invalid timestamp: must be timezone-aware")
    try:
        return dt.astimezone(timezone.utc)
    except OverflowError as exc:
        raise InvalidTimestampError(f"Invalid timestamp: {instant!r}") from exc


def fractional_hour(utc: DateTime) -> float:
    """Hours since UTC midnight, ignoring the sub-second part."""
    return utc.hour + utc.minute / 60.0 + utc.second / 3600.0


def seasonal_phase(n: int) -> float:
    """Yearly phase angle shared by declination and equation of time.

    Input: n = day of year (1-366)
    Output: phase in radians, zero at the vernal equinox
    """
    return deg_to_rad((360.0 / 365.0) * (n - VERNAL_EQUINOX_DAY))


def solar_declination(n: int) -> float:
    """Calculate solar declination angle.

    Input: n = day of year (1-366)
    Output: declination in degrees

    Ranges from -23.45 deg (winter solstice) to +23.45 deg (summer solstice).
    """
    return EARTH_AXIAL_TILT * math.sin(seasonal_phase(n))


def equation_of_time(n: int) -> float:
    """Approximate Equation of Time correction.

    Input: n = day of year (1-366)
    Output: correction in minutes

    Follows the same phase as solar_declination; it is a rough single-term
    approximation, not the Spencer series.
    """
    return EQUATION_OF_TIME_AMPLITUDE * math.sin(seasonal_phase(n))


def standard_meridian(longitude: float) -> float:
    """Nearest standard time meridian (multiple of 15 degrees).

    Halves round up, so 7.5 maps to 15 and -7.5 maps to 0.
    """
    return DEGREES_PER_HOUR * math.floor(longitude / DEGREES_PER_HOUR + 0.5)


def time_offset(longitude: float, eot: float) -> float:
    """Calculate the time correction in minutes.

    Args:
        longitude: Observer's longitude (degrees, negative for West)
        eot: Equation of time in minutes

    Returns:
        Minutes to add to UTC clock time to get solar time
    """
    return eot + MINUTES_PER_DEGREE * (longitude - standard_meridian(longitude))


def solar_time(utc_hours: float, offset_minutes: float) -> float:
    """Solar time in hours. Not wrapped into 0-24."""
    return utc_hours + offset_minutes / 60.0


def hour_angle(local_solar_time: float) -> float:
    """Calculate the hour angle from solar time.

    At solar noon: h = 0 degrees.
    Morning: h < 0 (sun is east).
    Afternoon: h > 0 (sun is west).
    Each hour = 15 degrees of Earth rotation.
    """
    return DEGREES_PER_HOUR * (local_solar_time - 12.0)


def sin_solar_altitude(
    latitude: float, declination: float, hour_angle: float
) -> float:
    """Sine of the solar altitude, clamped to [-1, 1]."""
    lat_rad = deg_to_rad(latitude)
    dec_rad = deg_to_rad(declination)
    ha_rad = deg_to_rad(hour_angle)
    sin_alt = math.sin(lat_rad) * math.sin(dec_rad) + math.cos(
        lat_rad
    ) * math.cos(dec_rad) * math.cos(ha_rad)
    # Clamp to [-1, 1] to handle floating point errors
    return clamp(sin_alt, -1.0, 1.0)


def solar_zenith(altitude: float) -> float:
    """Zenith angle. Complement of altitude."""
    return 90.0 - altitude


def solar_azimuth(declination: float, hour_angle: float, altitude: float) -> float:
    """Calculate solar azimuth for a sun above the horizon.

    Returns azimuth in degrees (0=North, 90=East, 180=South, 270=West).
    The arcsine is reflected about due south according to the sign of the
    hour angle, which keeps the result in the 90-270 band. It does not
    separate morning from afternoon: both fold onto the same side.
    """
    dec_rad = deg_to_rad(declination)
    ha_rad = deg_to_rad(hour_angle)
    cos_alt = math.cos(deg_to_rad(altitude))
    if cos_alt == 0.0:
        sin_az = 0.0
    else:
        sin_az = clamp(math.cos(dec_rad) * math.sin(ha_rad) / cos_alt, -1.0, 1.0)
    az = rad_to_deg(math.asin(sin_az))
    az = 180.0 - az if hour_angle > 0 else 180.0 + az
    return normalize_angle(az + 360.0)


def horizontal_irradiance(sin_altitude: float) -> float:
    """Clear-sky irradiance on a horizontal surface in W/m².

    No atmosphere or cloud attenuation: the solar constant projected onto
    the ground.
    """
    return max(0.0, SOLAR_CONSTANT * sin_altitude)


def compute_solar_potential(latitude: float, longitude: float, instant) -> SolarPosition:
    """Calculate solar position and horizontal irradiance at an instant.

    Args:
        latitude: Observer's latitude in [-90, 90] (negative for South)
        longitude: Observer's longitude in [-180, 180] (negative for West)
        instant: timezone-aware datetime, ISO-8601 string with offset, or
            POSIX timestamp in seconds

    Returns:
        SolarPosition. When the sun is at or below the horizon the azimuth
        is NaN and the irradiance is 0.

    Raises:
        InvalidArgumentError: if latitude or longitude is out of range.
        InvalidTimestampError: if the instant cannot be interpreted.
    """
    if not -90.0 <= latitude <= 90.0:
        raise InvalidArgumentError(f"Latitude must be in [-90, 90], got {latitude}")
    if not -180.0 <= longitude <= 180.0:
        raise InvalidArgumentError(f"Longitude must be in [-180, 180], got {longitude}")
    utc = to_utc(instant)

    n = day_of_year(utc.year, utc.month, utc.day)
    decl = solar_declination(n)
    eot = equation_of_time(n)
    ha = hour_angle(solar_time(fractional_hour(utc), time_offset(longitude, eot)))

    sin_alt = sin_solar_altitude(latitude, decl, ha)
    alt = rad_to_deg(math.asin(sin_alt))
    zen = solar_zenith(alt)

    if alt <= 0.0:
        logger.debug(
            f"Sun below horizon at ({latitude}, {longitude}) {utc.isoformat()}: "
            f"altitude {alt:.2f}°"
        )
        return SolarPosition(
            declination=decl,
            hour_angle=ha,
            altitude=alt,
            azimuth=math.nan,
            zenith=zen,
            irradiance=0.0,
        )

    return SolarPosition(
        declination=decl,
        hour_angle=ha,
        altitude=alt,
        azimuth=solar_azimuth(decl, ha, alt),
        zenith=zen,
        irradiance=horizontal_irradiance(sin_alt),
    )
