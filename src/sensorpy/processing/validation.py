"""Check readings against physically plausible bounds.

Each reading is checked in a fixed order: structural checks first (integer
timestamps, finite floats, well formed identifiers) and range checks second. The
first violated check raises; a reading that passes everything is wrapped in a
`models.ValidatedReading`.
"""

import math
from typing import Callable, Dict, Optional, Tuple, Type, Union

import numpy as np

from sensorpy.core import config, exceptions, models

logger = config.get_logger()

ACCURACY_RANKS = (0, 1, 2, 3)
HEADING_RANGE = (0.0, 360.0)
LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)
PRESSURE_RANGE_HPA = (300.0, 1100.0)
TEMPERATURE_RANGE_CELSIUS = (-90.0, 60.0)
SIGNAL_STRENGTH_RANGE_DBM = (-100, 0)
FREQUENCY_BANDS_MHZ = ((2400, 2500), (5000, 6000))


def _out_of_range(
    field: str, value: object, expected: str
) -> exceptions.OutOfRangeError:
    return exceptions.OutOfRangeError(
        f"{field} out of range: {value!r} (expected {expected})",
        field=field,
        value=value,
    )


def _check_accuracy_range(accuracy: int) -> None:
    if accuracy not in ACCURACY_RANKS:
        raise _out_of_range("accuracy", accuracy, "one of 0, 1, 2, 3")


def _check_closed(field: str, value: float, bounds: Tuple[float, float]) -> None:
    low, high = bounds
    if not low <= value <= high:
        raise _out_of_range(field, value, f"{low} <= {field} <= {high}")


def _check_open(field: str, value: float, bounds: Tuple[float, float]) -> None:
    low, high = bounds
    if not low < value < high:
        raise _out_of_range(field, value, f"{low} < {field} < {high}")


def validate_accelerometer(
    reading: models.AccelerometerReading,
) -> models.ValidatedReading[models.AccelerometerReading]:
    """Validate an accelerometer reading.

    Args:
        reading: The reading to check.

    Returns:
        The reading wrapped as validated.

    Raises:
        InvalidValueError: If the timestamp, an axis or the accuracy rank is
            structurally invalid.
        OutOfRangeError: If the accuracy rank is outside 0..3 or the magnitude of
            the acceleration vector overflows.
    """
    models.check_timestamp(reading.timestamp)
    for axis in ("x", "y", "z"):
        models.check_finite(axis, getattr(reading, axis))
    models.check_integer("accuracy", reading.accuracy)

    _check_accuracy_range(reading.accuracy)
    with np.errstate(over="ignore"):
        magnitude = float(np.linalg.norm([reading.x, reading.y, reading.z]))
    if not math.isfinite(magnitude):
        raise _out_of_range("magnitude", magnitude, "a finite vector magnitude")

    return models.ValidatedReading(reading)


def validate_magnetometer(
    reading: models.MagnetometerReading,
) -> models.ValidatedReading[models.MagnetometerReading]:
    """Validate a magnetometer reading.

    Args:
        reading: The reading to check.

    Returns:
        The reading wrapped as validated.

    Raises:
        InvalidValueError: If the timestamp, an axis, the heading or the accuracy
            rank is structurally invalid.
        OutOfRangeError: If the accuracy rank is outside 0..3 or the heading is
            outside [0, 360).
    """
    models.check_timestamp(reading.timestamp)
    for field in ("x", "y", "z", "heading"):
        models.check_finite(field, getattr(reading, field))
    models.check_integer("accuracy", reading.accuracy)

    _check_accuracy_range(reading.accuracy)
    low, high = HEADING_RANGE
    if not low <= reading.heading < high:
        raise _out_of_range("heading", reading.heading, f"{low} <= heading < {high}")

    return models.ValidatedReading(reading)


def validate_gps(
    reading: models.GpsReading,
) -> models.ValidatedReading[models.GpsReading]:
    """Validate a GPS fix.

    Args:
        reading: The fix to check.

    Returns:
        The fix wrapped as validated.

    Raises:
        InvalidValueError: If the timestamp or any float field is structurally
            invalid.
        OutOfRangeError: If latitude or longitude are out of range, the accuracy is
            not positive or the speed is negative.
    """
    models.check_timestamp(reading.timestamp)
    for field in ("latitude", "longitude", "altitude", "accuracy", "speed"):
        models.check_finite(field, getattr(reading, field))

    _check_closed("latitude", reading.latitude, LATITUDE_RANGE)
    _check_closed("longitude", reading.longitude, LONGITUDE_RANGE)
    if reading.accuracy is not None and reading.accuracy <= 0:
        raise _out_of_range("accuracy", reading.accuracy, "accuracy > 0")
    if reading.speed is not None and reading.speed < 0:
        raise _out_of_range("speed", reading.speed, "speed >= 0")

    return models.ValidatedReading(reading)


def validate_pressure(
    reading: models.PressureReading,
) -> models.ValidatedReading[models.PressureReading]:
    """Validate a barometric pressure reading.

    The plausible range is open: 300 hPa and 1100 hPa are both rejected.
    """
    models.check_timestamp(reading.timestamp)
    models.check_finite("pressure", reading.pressure)

    _check_open("pressure", reading.pressure, PRESSURE_RANGE_HPA)

    return models.ValidatedReading(reading)


def validate_temperature(
    reading: models.TemperatureReading,
) -> models.ValidatedReading[models.TemperatureReading]:
    """Validate an ambient temperature reading against an open range."""
    models.check_timestamp(reading.timestamp)
    models.check_finite("temperature", reading.temperature)

    _check_open("temperature", reading.temperature, TEMPERATURE_RANGE_CELSIUS)

    return models.ValidatedReading(reading)


def validate_wifi(
    network: models.WifiNetwork,
) -> models.ValidatedReading[models.WifiNetwork]:
    """Validate a WiFi scan result.

    Args:
        network: The scan result to check.

    Returns:
        The scan result wrapped as validated.

    Raises:
        InvalidValueError: If the SSID, BSSID, security label or one of the integer
            fields is malformed.
        OutOfRangeError: If the signal strength is outside [-100, 0] dBm or the
            frequency lies outside the 2.4 GHz and 5 GHz bands.
    """
    models.check_ssid(network.ssid)
    models.check_bssid(network.bssid)
    for field in ("signal_strength", "frequency"):
        models.check_integer(field, getattr(network, field))
    if not isinstance(network.security, models.WifiSecurity):
        raise exceptions.InvalidValueError(
            f"security must be a WifiSecurity member, got {network.security!r}",
            field="security",
            value=network.security,
        )

    _check_closed(
        "signal_strength", network.signal_strength, SIGNAL_STRENGTH_RANGE_DBM
    )
    if not any(low <= network.frequency <= high for low, high in FREQUENCY_BANDS_MHZ):
        raise _out_of_range(
            "frequency",
            network.frequency,
            " or ".join(f"{low}-{high} MHz" for low, high in FREQUENCY_BANDS_MHZ),
        )

    return models.ValidatedReading(network)


_VALIDATORS: Dict[Type, Callable[..., models.ValidatedReading]] = {
    models.AccelerometerReading: validate_accelerometer,
    models.MagnetometerReading: validate_magnetometer,
    models.GpsReading: validate_gps,
    models.PressureReading: validate_pressure,
    models.TemperatureReading: validate_temperature,
    models.WifiNetwork: validate_wifi,
}


def validate(
    reading: Union[models.Reading, models.ValidatedReading],
) -> models.ValidatedReading:
    """Validate any supported reading.

    An already validated reading is checked again, which always succeeds.

    Args:
        reading: A raw reading or a ValidatedReading.

    Returns:
        The reading wrapped as validated.

    Raises:
        SensorError: InvalidValueError or OutOfRangeError on the first violated
            check.
        TypeError: If the object is not a supported reading type.
    """
    if isinstance(reading, models.ValidatedReading):
        reading = reading.reading

    validator: Optional[Callable[..., models.ValidatedReading]] = _VALIDATORS.get(
        type(reading)
    )
    if validator is None:
        raise TypeError(f"Cannot validate object of type {type(reading).__name__}.")

    logger.debug("Validating %s.", type(reading).__name__)
    return validator(reading)
