"""Demonstrate solar position and panel output for London at the June solstice."""

import logging
from datetime import datetime, timezone

from solar_potential.angles import compute_solar_potential
from solar_potential.panel import compute_panel_power, estimate_energy_produced


def main():
    logging.basicConfig(level=logging.INFO)

    latitude = 51.5
    longitude = -0.1
    panel_area = 1.7  # m²
    efficiency = 0.21

    dt = datetime(2026, 6, 21, 12, 0, tzinfo=timezone.utc)

    pos = compute_solar_potential(latitude, longitude, dt)
    power = compute_panel_power(panel_area, efficiency, pos.irradiance)
    # Typical June insolation for southern England, about 5 kWh/m²/day
    daily = estimate_energy_produced(panel_area, efficiency, 5000.0 / 24, 24)

    print("=== Solar Potential Calculation Example ===")
    print(f"Location: London ({latitude:.1f}°N, {-longitude:.1f}°W)")
    print(f"Date/Time: {dt}")
    print()
    print("--- Solar Position ---")
    print(f"Declination: {pos.declination:.2f}°")
    print(f"Hour Angle: {pos.hour_angle:.2f}°")
    print(f"Zenith Angle: {pos.zenith:.2f}°")
    print(f"Altitude: {pos.altitude:.2f}°")
    print(f"Azimuth: {pos.azimuth:.2f}° (0°=N, 90°=E, 180°=S)")
    print(f"Irradiance: {pos.irradiance:.1f} W/m²")
    print()
    print("--- Panel Output ---")
    print(f"Panel: {panel_area:.1f} m² at {efficiency:.0%} efficiency")
    print(f"Instantaneous power: {power:.1f} W")
    print(f"Estimated daily energy: {daily:.2f} kWh")


if __name__ == "__main__":
    main()
