"""Smoke test for the sensorpy orchestrator."""

from typing import List

import pytest

from sensorpy.core import exceptions, models, orchestrator


def test_orchestrator_smoke(
    accelerometer_shaking: models.AccelerometerReading,
    magnetometer_southwest: models.MagnetometerReading,
    gps_san_francisco: models.GpsReading,
    pressure_altitude: models.PressureReading,
    temperature_comfortable: models.TemperatureReading,
    wifi_networks: List[models.WifiNetwork],
    timestamp: int,
) -> None:
    """Render one reading of every kind."""
    now = timestamp + 5000

    accel = orchestrator.run(accelerometer_shaking, now)
    heading = orchestrator.run(magnetometer_southwest, now)
    gps = orchestrator.run(gps_san_francisco, now)
    pressure = orchestrator.run(pressure_altitude, now)
    temperature = orchestrator.run(temperature_comfortable, now)
    scan = orchestrator.run_scan(wifi_networks)

    assert accel["magnitude"] == "8.75 m/s²"
    assert heading["heading"] == "225.0° (SW)"
    assert gps["lat"] == "37.7749° N"
    assert gps["lon"] == "122.4194° W"
    assert pressure["pressure"] == "950.00 hPa"
    assert pressure["description"] == "Low"
    assert temperature["fahrenheit"] == "72.5°F"
    assert scan[0]["summary"] == "MyHomeWiFi - Excellent (-45 dBm) - WPA2"
    assert all(
        strings["updated"] == "5s ago"
        for strings in (accel, heading, gps, pressure, temperature)
    )


def test_orchestrator_smoke_fault() -> None:
    """Render the advisory for a sensor that failed validation."""
    reading = models.TemperatureReading(temperature=120.0, timestamp=0)

    with pytest.raises(exceptions.SensorError) as exc_info:
        orchestrator.run(reading, 0)
    result = orchestrator.render_fault(exc_info.value)

    assert result == {"status": "Reading outside the expected range"}
