"""Fixtures used by pytest."""

from typing import List

import pytest

from sensorpy.core import models

TIMESTAMP = 1704067200000  # 2024-01-01 00:00:00 UTC


@pytest.fixture
def timestamp() -> int:
    """Recording time shared by all reading fixtures, in epoch milliseconds."""
    return TIMESTAMP


@pytest.fixture
def accelerometer_at_rest() -> models.AccelerometerReading:
    """Device lying still, gravity along the Y axis."""
    return models.AccelerometerReading(
        x=0.0, y=9.81, z=0.0, timestamp=TIMESTAMP, accuracy=3
    )


@pytest.fixture
def accelerometer_shaking() -> models.AccelerometerReading:
    """Device being shaken."""
    return models.AccelerometerReading(
        x=2.5, y=8.3, z=-1.2, timestamp=TIMESTAMP, accuracy=3
    )


@pytest.fixture
def magnetometer_north() -> models.MagnetometerReading:
    """Device pointing at magnetic north."""
    return models.MagnetometerReading(
        x=0.0, y=50.0, z=20.0, heading=0.0, timestamp=TIMESTAMP, accuracy=3
    )


@pytest.fixture
def magnetometer_southwest() -> models.MagnetometerReading:
    """Device pointing south west."""
    return models.MagnetometerReading(
        x=-35.0, y=-35.0, z=20.0, heading=225.0, timestamp=TIMESTAMP, accuracy=3
    )


@pytest.fixture
def gps_san_francisco() -> models.GpsReading:
    """Stationary fix in San Francisco."""
    return models.GpsReading(
        latitude=37.7749,
        longitude=-122.4194,
        altitude=16.0,
        accuracy=5.0,
        speed=0.0,
        timestamp=TIMESTAMP,
    )


@pytest.fixture
def gps_moving() -> models.GpsReading:
    """Fix taken while moving at roughly 20 km/h."""
    return models.GpsReading(
        latitude=37.7750,
        longitude=-122.4195,
        altitude=18.0,
        accuracy=8.0,
        speed=5.5,
        timestamp=TIMESTAMP,
    )


@pytest.fixture
def pressure_sea_level() -> models.PressureReading:
    """Standard atmosphere at sea level."""
    return models.PressureReading(pressure=1013.25, timestamp=TIMESTAMP)


@pytest.fixture
def pressure_altitude() -> models.PressureReading:
    """Pressure at roughly 500 m altitude."""
    return models.PressureReading(pressure=950.0, timestamp=TIMESTAMP)


@pytest.fixture
def temperature_comfortable() -> models.TemperatureReading:
    """Room temperature."""
    return models.TemperatureReading(temperature=22.5, timestamp=TIMESTAMP)


@pytest.fixture
def temperature_hot() -> models.TemperatureReading:
    """A hot day."""
    return models.TemperatureReading(temperature=35.0, timestamp=TIMESTAMP)


@pytest.fixture
def wifi_networks() -> List[models.WifiNetwork]:
    """A three network scan, in scanner order."""
    return [
        models.WifiNetwork(
            ssid="MyHomeWiFi",
            bssid="00:11:22:33:44:55",
            signal_strength=-45,
            frequency=2412,
            security="WPA2",
        ),
        models.WifiNetwork(
            ssid="Neighbor_5G",
            bssid="AA:BB:CC:DD:EE:FF",
            signal_strength=-68,
            frequency=5180,
            security="WPA3",
        ),
        models.WifiNetwork(
            ssid="CoffeeShop-Guest",
            bssid="11:22:33:44:55:66",
            signal_strength=-52,
            frequency=2437,
            security="Open",
        ),
    ]
