"""Calculate derived metrics: magnitude, heading, cardinal direction and signal tier.

All functions assume validated input and cannot fail on it.
"""

import enum
from typing import Callable, Dict, Optional, Tuple, Type, Union

import numpy as np
import pydantic

from sensorpy.core import config, models

logger = config.get_logger()

CARDINAL_DIRECTIONS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")
SECTOR_WIDTH_DEGREES = 45.0

LOW_PRESSURE_HPA = 1000.0
HIGH_PRESSURE_HPA = 1020.0

ACCURACY_NAMES = {0: "Unreliable", 1: "Low", 2: "Medium", 3: "High"}

MS_TO_KMH = 3.6


class SignalQuality(str, enum.Enum):
    """Four tier WiFi signal classification, strongest first."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    WEAK = "Weak"


# Inclusive lower bounds in dBm; a tie resolves to the stronger tier.
SIGNAL_THRESHOLDS_DBM: Tuple[Tuple[int, SignalQuality], ...] = (
    (-50, SignalQuality.EXCELLENT),
    (-60, SignalQuality.GOOD),
    (-70, SignalQuality.FAIR),
)

SIGNAL_RANK = {quality: rank for rank, quality in enumerate(SignalQuality)}


class PressureLevel(str, enum.Enum):
    """Coarse description of barometric pressure."""

    LOW = "Low"
    NORMAL = "Normal"
    HIGH = "High"


def acceleration_magnitude(x: float, y: float, z: float) -> float:
    """Compute the Euclidean norm of an acceleration vector.

    Args:
        x: Acceleration along the X axis, m/s².
        y: Acceleration along the Y axis, m/s².
        z: Acceleration along the Z axis, m/s².

    Returns:
        sqrt(x² + y² + z²), never negative. Rounding is left to the display layer.
    """
    return float(np.linalg.norm(np.array([x, y, z], dtype=np.float64)))


def calculate_heading(x: float, y: float) -> float:
    """Calculate the compass heading from the horizontal magnetic field.

    The device X axis points east and the Y axis points north, so the heading is
    atan2(x, y), measured clockwise from magnetic north. Passing the components as
    atan2(y, x) rotates every heading by 90 degrees.

    Args:
        x: Field strength along the east axis, µT.
        y: Field strength along the north axis, µT.

    Returns:
        Heading in degrees, in [0, 360).
    """
    heading = float(np.degrees(np.arctan2(x, y)))
    if heading < 0.0:
        heading += 360.0
    # -1e-15 + 360.0 rounds to 360.0
    if heading >= 360.0:
        heading = 0.0
    # atan2(-0.0, y) is -0.0
    return heading + 0.0


def get_cardinal_direction(heading: float) -> str:
    """Map a heading onto one of eight compass points.

    Each point owns a half-open 45 degree sector centered on it, so N covers
    [337.5, 360) and [0, 22.5).

    Args:
        heading: Heading in degrees. Values outside [0, 360) are wrapped first.

    Returns:
        One of N, NE, E, SE, S, SW, W, NW.
    """
    normalized = heading % 360.0
    shifted = (normalized + SECTOR_WIDTH_DEGREES / 2) % 360.0
    sector = int(shifted // SECTOR_WIDTH_DEGREES) % len(CARDINAL_DIRECTIONS)
    return CARDINAL_DIRECTIONS[sector]


def get_signal_quality(rssi: int) -> SignalQuality:
    """Classify a received signal strength.

    Args:
        rssi: Signal strength in dBm.

    Returns:
        Excellent at -50 dBm or above, Good at -60 or above, Fair at -70 or above,
        otherwise Weak.
    """
    for threshold, quality in SIGNAL_THRESHOLDS_DBM:
        if rssi >= threshold:
            return quality
    return SignalQuality.WEAK


def describe_pressure(pressure: float) -> PressureLevel:
    """Describe barometric pressure as low, normal or high."""
    if pressure < LOW_PRESSURE_HPA:
        return PressureLevel.LOW
    if pressure > HIGH_PRESSURE_HPA:
        return PressureLevel.HIGH
    return PressureLevel.NORMAL


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return celsius * 9.0 / 5.0 + 32.0


def frequency_band(frequency: int) -> str:
    """Name the WiFi band of a channel frequency in MHz."""
    if frequency < 5000:
        return "2.4 GHz"
    return "5 GHz"


def accuracy_name(accuracy: int) -> str:
    """Name a sensor accuracy rank."""
    return ACCURACY_NAMES[accuracy]


class _Metrics(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)


class AccelerationMetrics(_Metrics):
    """Metrics derived from an accelerometer reading."""

    magnitude: float
    accuracy: str


class HeadingReport(_Metrics):
    """Heading derived from a magnetometer reading.

    Owns a copy of the field components so it can be displayed on its own.

    Attributes:
        x: Field strength along the east axis, µT.
        y: Field strength along the north axis, µT.
        z: Field strength along the Z axis, µT.
        reported_heading: The heading the device reported.
        heading: The heading computed from x and y.
        direction: The compass point of the computed heading.
        accuracy: Name of the sensor accuracy rank.
    """

    x: float
    y: float
    z: float
    reported_heading: float
    heading: float
    direction: str
    accuracy: str


class GpsMetrics(_Metrics):
    """Metrics derived from a GPS fix."""

    speed_kmh: Optional[float] = None


class PressureMetrics(_Metrics):
    """Metrics derived from a pressure reading."""

    level: PressureLevel


class TemperatureMetrics(_Metrics):
    """Metrics derived from a temperature reading."""

    fahrenheit: float


class WifiMetrics(_Metrics):
    """Metrics derived from a WiFi scan result."""

    quality: SignalQuality
    band: str


DerivedMetrics = Union[
    AccelerationMetrics,
    HeadingReport,
    GpsMetrics,
    PressureMetrics,
    TemperatureMetrics,
    WifiMetrics,
]


def _derive_accelerometer(reading: models.AccelerometerReading) -> AccelerationMetrics:
    return AccelerationMetrics(
        magnitude=acceleration_magnitude(reading.x, reading.y, reading.z),
        accuracy=accuracy_name(reading.accuracy),
    )


def _derive_magnetometer(reading: models.MagnetometerReading) -> HeadingReport:
    heading = calculate_heading(reading.x, reading.y)
    return HeadingReport(
        x=reading.x,
        y=reading.y,
        z=reading.z,
        reported_heading=reading.heading,
        heading=heading,
        direction=get_cardinal_direction(heading),
        accuracy=accuracy_name(reading.accuracy),
    )


def _derive_gps(reading: models.GpsReading) -> GpsMetrics:
    if reading.speed is None:
        return GpsMetrics()
    return GpsMetrics(speed_kmh=reading.speed * MS_TO_KMH)


def _derive_pressure(reading: models.PressureReading) -> PressureMetrics:
    return PressureMetrics(level=describe_pressure(reading.pressure))


def _derive_temperature(reading: models.TemperatureReading) -> TemperatureMetrics:
    return TemperatureMetrics(fahrenheit=celsius_to_fahrenheit(reading.temperature))


def _derive_wifi(network: models.WifiNetwork) -> WifiMetrics:
    return WifiMetrics(
        quality=get_signal_quality(network.signal_strength),
        band=frequency_band(network.frequency),
    )


_DERIVATIONS: Dict[Type, Callable[..., DerivedMetrics]] = {
    models.AccelerometerReading: _derive_accelerometer,
    models.MagnetometerReading: _derive_magnetometer,
    models.GpsReading: _derive_gps,
    models.PressureReading: _derive_pressure,
    models.TemperatureReading: _derive_temperature,
    models.WifiNetwork: _derive_wifi,
}


def derive(validated: models.ValidatedReading) -> DerivedMetrics:
    """Compute the metrics appropriate to a validated reading.

    Args:
        validated: A reading returned by `validation.validate`.

    Returns:
        AccelerationMetrics, HeadingReport, GpsMetrics, PressureMetrics,
        TemperatureMetrics or WifiMetrics, depending on the reading type.

    Raises:
        TypeError: If the argument was not produced by the validator.
    """
    if not isinstance(validated, models.ValidatedReading):
        raise TypeError(
            "derive() requires a ValidatedReading, "
            f"got {type(validated).__name__}. Run validation.validate() first."
        )
    reading = validated.reading
    logger.debug("Deriving metrics for %s.", type(reading).__name__)
    return _DERIVATIONS[type(reading)](reading)
