"""Internal data model.

Every reading is an immutable pydantic model. Construction only rejects values that
are structurally impossible (non-finite floats, malformed identifiers); whether a
value is physically plausible is decided by `sensorpy.processing.validation`.
"""

import enum
import math
import re
from typing import Any, Generic, Optional, TypeVar, Union

import pydantic
from pydantic import BaseModel, field_validator

from sensorpy.core import exceptions

SensorErrorKind = exceptions.SensorErrorKind
SensorFault = exceptions.SensorFault

BSSID_PATTERN = re.compile(
    r"^[0-9A-Fa-f]{2}([:-])(?:[0-9A-Fa-f]{2}\1){4}[0-9A-Fa-f]{2}$"
)
SSID_MAX_BYTES = 32


def check_finite(field: str, value: Optional[float]) -> Optional[float]:
    """Reject NaN and infinite values.

    Args:
        field: Name of the field being checked, used in the error message.
        value: The value to check. None passes through for optional fields.

    Returns:
        The value, unchanged.

    Raises:
        InvalidValueError: If the value is not a finite number.
    """
    if value is None:
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise exceptions.InvalidValueError(
            f"{field} must be a number, got {value!r}", field=field, value=value
        )
    if not math.isfinite(value):
        raise exceptions.InvalidValueError(
            f"{field} must be finite, got {value!r}", field=field, value=value
        )
    return value


def check_integer(field: str, value: Any) -> int:
    """Reject values that are not plain integers.

    Booleans, floats and numeric strings are refused rather than coerced.

    Raises:
        InvalidValueError: If the value is not an integer.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise exceptions.InvalidValueError(
            f"{field} must be an integer, got {value!r}", field=field, value=value
        )
    return value


def check_timestamp(value: Any) -> int:
    """Reject timestamps that are not non-negative integer epoch milliseconds.

    Raises:
        InvalidValueError: If the timestamp is not a non-negative integer.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise exceptions.InvalidValueError(
            f"timestamp must be a non-negative integer in epoch milliseconds, "
            f"got {value!r}",
            field="timestamp",
            value=value,
        )
    return value


def check_ssid(value: Any) -> str:
    """Reject SSIDs that are not 1 to 32 bytes of UTF-8 text."""
    if not isinstance(value, str):
        raise exceptions.InvalidValueError(
            f"ssid must be text, got {value!r}", field="ssid", value=value
        )
    length = len(value.encode("utf-8"))
    if not 1 <= length <= SSID_MAX_BYTES:
        raise exceptions.InvalidValueError(
            f"ssid must be 1 to {SSID_MAX_BYTES} bytes, got {length} bytes "
            f"in {value!r}",
            field="ssid",
            value=value,
        )
    return value


def check_bssid(value: Any) -> str:
    """Reject BSSIDs that are not six hexadecimal octets."""
    if not isinstance(value, str) or not BSSID_PATTERN.match(value):
        raise exceptions.InvalidValueError(
            f"bssid must be six hexadecimal octets, got {value!r}",
            field="bssid",
            value=value,
        )
    return value


class _Reading(BaseModel):
    """Shared configuration of all reading models."""

    model_config = pydantic.ConfigDict(frozen=True)

    @field_validator("timestamp", mode="before", check_fields=False)
    @classmethod
    def validate_timestamp(cls, v: Any) -> int:
        """Validate that the timestamp is integer epoch milliseconds."""
        return check_timestamp(v)


class AccelerometerReading(_Reading):
    """Acceleration along the three device axes, in m/s².

    Attributes:
        x: Acceleration along the X axis.
        y: Acceleration along the Y axis.
        z: Acceleration along the Z axis.
        timestamp: Unix time in milliseconds when the value was recorded.
        accuracy: Sensor accuracy rank, 0 (unreliable) to 3 (high).
    """

    x: float
    y: float
    z: float
    timestamp: int
    accuracy: int

    @field_validator("x", "y", "z", mode="before")
    @classmethod
    def validate_axes(cls, v: Any, info: pydantic.ValidationInfo) -> float:
        """Validate that every axis is a finite number."""
        return check_finite(info.field_name, v)

    @field_validator("accuracy", mode="before")
    @classmethod
    def validate_accuracy(cls, v: Any) -> int:
        """Validate that the accuracy rank is an integer."""
        return check_integer("accuracy", v)


class MagnetometerReading(_Reading):
    """Magnetic field strength along the three device axes, in µT.

    Attributes:
        x: Field strength along the X (east) axis.
        y: Field strength along the Y (north) axis.
        z: Field strength along the Z axis.
        heading: Compass heading reported by the device, degrees from magnetic north.
        timestamp: Unix time in milliseconds when the value was recorded.
        accuracy: Sensor accuracy rank, 0 (unreliable) to 3 (high).
    """

    x: float
    y: float
    z: float
    heading: float
    timestamp: int
    accuracy: int

    @field_validator("x", "y", "z", "heading", mode="before")
    @classmethod
    def validate_finite(cls, v: Any, info: pydantic.ValidationInfo) -> float:
        """Validate that every float field is a finite number."""
        return check_finite(info.field_name, v)

    @field_validator("accuracy", mode="before")
    @classmethod
    def validate_accuracy(cls, v: Any) -> int:
        """Validate that the accuracy rank is an integer."""
        return check_integer("accuracy", v)


class GpsReading(_Reading):
    """A location fix.

    Attributes:
        latitude: Degrees, -90 to 90.
        longitude: Degrees, -180 to 180.
        altitude: Meters above sea level, if reported.
        accuracy: Horizontal accuracy estimate in meters, if reported.
        speed: Ground speed in m/s, if reported.
        timestamp: Unix time in milliseconds when the fix was recorded.
    """

    latitude: float
    longitude: float
    timestamp: int
    altitude: Optional[float] = None
    accuracy: Optional[float] = None
    speed: Optional[float] = None

    @field_validator(
        "latitude", "longitude", "altitude", "accuracy", "speed", mode="before"
    )
    @classmethod
    def validate_finite(
        cls, v: Any, info: pydantic.ValidationInfo
    ) -> Optional[float]:
        """Validate that every float field is finite when present."""
        return check_finite(info.field_name, v)


class PressureReading(_Reading):
    """Barometric pressure in hPa."""

    pressure: float
    timestamp: int

    @field_validator("pressure", mode="before")
    @classmethod
    def validate_pressure(cls, v: Any) -> float:
        """Validate that the pressure is a finite number."""
        return check_finite("pressure", v)


class TemperatureReading(_Reading):
    """Ambient temperature in degrees Celsius."""

    temperature: float
    timestamp: int

    @field_validator("temperature", mode="before")
    @classmethod
    def validate_temperature(cls, v: Any) -> float:
        """Validate that the temperature is a finite number."""
        return check_finite("temperature", v)


class WifiSecurity(str, enum.Enum):
    """Security protocol advertised by an access point."""

    OPEN = "Open"
    WEP = "WEP"
    WPA = "WPA"
    WPA2 = "WPA2"
    WPA3 = "WPA3"

    @classmethod
    def parse(cls, label: Any) -> "WifiSecurity":
        """Parses a security label, ignoring case.

        Args:
            label: A WifiSecurity member or its label, e.g. "wpa2".

        Returns:
            The matching WifiSecurity member.

        Raises:
            InvalidValueError: If the label names no known protocol.
        """
        if isinstance(label, cls):
            return label
        if isinstance(label, str):
            for member in cls:
                if member.value.lower() == label.strip().lower():
                    return member
        raise exceptions.InvalidValueError(
            f"security must be one of {[m.value for m in cls]}, got {label!r}",
            field="security",
            value=label,
        )


class WifiNetwork(BaseModel):
    """An access point found by a WiFi scan.

    Attributes:
        ssid: Network name, 1 to 32 bytes.
        bssid: MAC address of the access point, six hexadecimal octets.
        signal_strength: Received signal strength in dBm.
        frequency: Channel frequency in MHz.
        security: Advertised security protocol.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    ssid: str
    bssid: str
    signal_strength: int
    frequency: int
    security: WifiSecurity

    @field_validator("ssid", mode="before")
    @classmethod
    def validate_ssid(cls, v: Any) -> str:
        """Validate the SSID length."""
        return check_ssid(v)

    @field_validator("bssid", mode="before")
    @classmethod
    def validate_bssid(cls, v: Any) -> str:
        """Validate the BSSID shape."""
        return check_bssid(v)

    @field_validator("signal_strength", "frequency", mode="before")
    @classmethod
    def validate_integers(cls, v: Any, info: pydantic.ValidationInfo) -> int:
        """Validate that signal strength and frequency are integers."""
        return check_integer(info.field_name, v)

    @field_validator("security", mode="before")
    @classmethod
    def validate_security(cls, v: Any) -> WifiSecurity:
        """Parse the security label."""
        return WifiSecurity.parse(v)


Reading = Union[
    AccelerometerReading,
    MagnetometerReading,
    GpsReading,
    PressureReading,
    TemperatureReading,
    WifiNetwork,
]

ReadingT = TypeVar(
    "ReadingT",
    AccelerometerReading,
    MagnetometerReading,
    GpsReading,
    PressureReading,
    TemperatureReading,
    WifiNetwork,
)


class ValidatedReading(Generic[ReadingT]):
    """Marks a reading that passed every structural and range check.

    Only `sensorpy.processing.validation.validate` should create these. Downstream
    code may rely on the wrapped reading without checking it again.
    """

    __slots__ = ("_reading",)

    def __init__(self, reading: ReadingT) -> None:
        """Wrap a reading that has been validated.

        Args:
            reading: The validated reading.
        """
        object.__setattr__(self, "_reading", reading)

    @property
    def reading(self) -> ReadingT:
        """The validated reading."""
        return self._reading

    def __setattr__(self, name: str, value: Any) -> None:
        """Validated readings are immutable."""
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        """Two wrappers are equal when their readings are equal."""
        if not isinstance(other, ValidatedReading):
            return NotImplemented
        return self._reading == other._reading

    def __hash__(self) -> int:
        """Hash of the wrapped reading."""
        return hash(self._reading)

    def __repr__(self) -> str:
        """Representation showing the wrapped reading."""
        return f"ValidatedReading({self._reading!r})"
