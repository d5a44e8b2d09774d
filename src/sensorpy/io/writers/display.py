"""Render validated readings and their metrics as display strings."""

import datetime
from typing import Callable, Dict, Optional, Type, Union

from sensorpy.core import config, exceptions, models
from sensorpy.processing import metrics

logger = config.get_logger()

DisplayStrings = Dict[str, str]

ACCELERATION_UNIT = "m/s²"
MAGNETIC_FIELD_UNIT = "µT"
PRESSURE_UNIT = "hPa"

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
WALL_CLOCK_FORMAT = "%H:%M:%S"

ADVISORIES = {
    exceptions.SensorErrorKind.NOT_AVAILABLE: "Sensor not available on this device",
    exceptions.SensorErrorKind.PERMISSION_DENIED: (
        "Permission required to access this sensor"
    ),
    exceptions.SensorErrorKind.HARDWARE_ERROR: "Sensor hardware error, try again later",
    exceptions.SensorErrorKind.INVALID_VALUE: "Sensor returned an invalid reading",
    exceptions.SensorErrorKind.OUT_OF_RANGE: "Reading outside the expected range",
}


def format_elapsed(timestamp: int, now: int) -> str:
    """Describe how long ago a timestamp was.

    Args:
        timestamp: Unix time of the reading in milliseconds.
        now: Unix time of the moment of display in milliseconds.

    Returns:
        "{n}s ago" under a minute, "{n}m ago" under an hour, otherwise the UTC wall
        clock time of the reading as HH:MM:SS. A timestamp in the future, e.g. from
        clock skew, counts as "0s ago".
    """
    elapsed_seconds = max(now - timestamp, 0) // 1000
    if elapsed_seconds < SECONDS_PER_MINUTE:
        return f"{elapsed_seconds}s ago"
    if elapsed_seconds < SECONDS_PER_HOUR:
        return f"{elapsed_seconds // SECONDS_PER_MINUTE}m ago"
    moment = datetime.datetime.fromtimestamp(timestamp / 1000, tz=datetime.timezone.utc)
    return moment.strftime(WALL_CLOCK_FORMAT)


def format_latitude(latitude: float) -> str:
    """Format a latitude as e.g. '37.7749° N'."""
    hemisphere = "N" if latitude >= 0 else "S"
    return f"{abs(latitude):.4f}° {hemisphere}"


def format_longitude(longitude: float) -> str:
    """Format a longitude as e.g. '122.4194° W'."""
    hemisphere = "E" if longitude >= 0 else "W"
    return f"{abs(longitude):.4f}° {hemisphere}"


def format_coordinates(latitude: float, longitude: float) -> str:
    """Format a position as e.g. '37.7749° N, 122.4194° W'."""
    return f"{format_latitude(latitude)}, {format_longitude(longitude)}"


def format_heading(heading: float, direction: str) -> str:
    """Format a heading as e.g. '245.0° (SW)'.

    Headings that round up to 360.0 are shown as 0.0.
    """
    shown = round(heading, 1) % 360.0
    return f"{shown:.1f}° ({direction})"


def format_error(
    error: Union[
        exceptions.SensorErrorKind, exceptions.SensorError, exceptions.SensorFault
    ],
) -> str:
    """Return the advisory text for an unavailable or failing sensor.

    The detail carried by the error is logged, never displayed.

    Args:
        error: An error kind, a raised SensorError or a SensorFault payload.

    Returns:
        The fixed advisory string for the error kind.
    """
    if isinstance(error, (exceptions.SensorError, exceptions.SensorFault)):
        logger.debug("Rendering advisory for %s: %s", error.kind.value, error.detail)
        kind = error.kind
    else:
        kind = exceptions.SensorErrorKind(error)
    return ADVISORIES[kind]


def _format_accelerometer(
    reading: models.AccelerometerReading,
    derived: metrics.AccelerationMetrics,
) -> DisplayStrings:
    return {
        "x": f"{reading.x:.2f} {ACCELERATION_UNIT}",
        "y": f"{reading.y:.2f} {ACCELERATION_UNIT}",
        "z": f"{reading.z:.2f} {ACCELERATION_UNIT}",
        "magnitude": f"{derived.magnitude:.2f} {ACCELERATION_UNIT}",
        "accuracy": derived.accuracy,
    }


def _format_magnetometer(
    reading: models.MagnetometerReading,
    derived: metrics.HeadingReport,
) -> DisplayStrings:
    return {
        "x": f"{derived.x:.1f} {MAGNETIC_FIELD_UNIT}",
        "y": f"{derived.y:.1f} {MAGNETIC_FIELD_UNIT}",
        "z": f"{derived.z:.1f} {MAGNETIC_FIELD_UNIT}",
        "heading": format_heading(derived.heading, derived.direction),
        "direction": derived.direction,
        "accuracy": derived.accuracy,
    }


def _format_gps(
    reading: models.GpsReading,
    derived: metrics.GpsMetrics,
) -> DisplayStrings:
    strings = {
        "lat": format_latitude(reading.latitude),
        "lon": format_longitude(reading.longitude),
    }
    if reading.accuracy is not None:
        strings["acc"] = f"±{reading.accuracy:.1f}"
    if reading.altitude is not None:
        strings["alt"] = f"{reading.altitude:.1f} m"
    if reading.speed is not None:
        strings["speed"] = f"{reading.speed:.1f} m/s"
    if derived.speed_kmh is not None:
        strings["speed_kmh"] = f"{derived.speed_kmh:.1f} km/h"
    return strings


def _format_pressure(
    reading: models.PressureReading,
    derived: metrics.PressureMetrics,
) -> DisplayStrings:
    return {
        "pressure": f"{reading.pressure:.2f} {PRESSURE_UNIT}",
        "description": derived.level.value,
    }


def _format_temperature(
    reading: models.TemperatureReading,
    derived: metrics.TemperatureMetrics,
) -> DisplayStrings:
    return {
        "temperature": f"{reading.temperature:.1f}°C",
        "fahrenheit": f"{derived.fahrenheit:.1f}°F",
    }


def _format_wifi(
    network: models.WifiNetwork,
    derived: metrics.WifiMetrics,
) -> DisplayStrings:
    signal = f"{network.signal_strength} dBm"
    return {
        "ssid": network.ssid,
        "bssid": network.bssid.upper(),
        "signal": signal,
        "quality": derived.quality.value,
        "frequency": derived.band,
        "security": network.security.value,
        "summary": (
            f"{network.ssid} - {derived.quality.value} ({signal}) - "
            f"{network.security.value}"
        ),
    }


_FORMATTERS: Dict[Type, Callable[..., DisplayStrings]] = {
    models.AccelerometerReading: _format_accelerometer,
    models.MagnetometerReading: _format_magnetometer,
    models.GpsReading: _format_gps,
    models.PressureReading: _format_pressure,
    models.TemperatureReading: _format_temperature,
    models.WifiNetwork: _format_wifi,
}


def format_reading(
    validated: models.ValidatedReading,
    derived: metrics.DerivedMetrics,
    now: Optional[int] = None,
) -> DisplayStrings:
    """Render a validated reading and its metrics as named display strings.

    Args:
        validated: A reading returned by `validation.validate`.
        derived: The metrics returned by `metrics.derive` for the same reading.
        now: Unix time of the moment of display in milliseconds. When omitted, no
            "updated" string is rendered. WiFi scan results carry no timestamp and
            never have one.

    Returns:
        A mapping of field names to display strings, e.g.
        {"x": "-0.23 m/s²", "magnitude": "9.82 m/s²", "updated": "2s ago"}.
    """
    reading = validated.reading
    strings = _FORMATTERS[type(reading)](reading, derived)
    if now is not None and not isinstance(reading, models.WifiNetwork):
        strings["updated"] = format_elapsed(reading.timestamp, now)
    return strings
